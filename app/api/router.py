from fastapi import APIRouter

from app.api.routes.vapi import router as vapi_router

api_router = APIRouter()
api_router.include_router(vapi_router)
