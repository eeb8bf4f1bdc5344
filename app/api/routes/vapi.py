import logging
import traceback

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.cors import CORS_HEADERS
from app.db.session import get_db
from app.repositories.interview_repository import InterviewRepository
from app.schemas.interview import GenerateInterviewResponse, ServerErrorResponse, StatusResponse
from app.services.interview_generation_service import InterviewGenerationService
from app.services.openai_service import OpenAIService, get_openai_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vapi", tags=["vapi"])


@router.options("/generate")
def generate_preflight():
    return Response(status_code=204, headers=CORS_HEADERS)


@router.get("/generate")
def generate_status():
    payload = StatusResponse(message="API is working fine ✅")
    return JSONResponse(payload.model_dump(), status_code=200, headers=CORS_HEADERS)


@router.post("/generate")
async def generate_interview(
    request: Request,
    db: Session = Depends(get_db),
    openai_service: OpenAIService = Depends(get_openai_service),
):
    try:
        body = await request.json()
        service = InterviewGenerationService(InterviewRepository(db), openai_service)
        record = await run_in_threadpool(service.generate, body)
    except Exception as exc:
        logger.exception("Error in /vapi/generate")
        error = ServerErrorResponse.from_exception(exc, stack=traceback.format_exc())
        return JSONResponse(error.model_dump(), status_code=500, headers=CORS_HEADERS)

    payload = GenerateInterviewResponse(data=record)
    return JSONResponse(payload.model_dump(by_alias=True), status_code=200, headers=CORS_HEADERS)
