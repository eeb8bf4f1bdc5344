import logging

from fastapi import FastAPI
from sqlalchemy import text

from app.api.router import api_router
from app.core.config import settings
from app.core.cors import ApiCorsMiddleware
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.session import engine
from app import models  # noqa: F401

setup_logging(settings.log_level, json_output=settings.log_json)
logger = logging.getLogger("app.startup")

app = FastAPI(title=settings.app_name)

app.add_middleware(ApiCorsMiddleware, path_prefix=settings.api_prefix)


@app.on_event("startup")
def on_startup():
    logger.info("Using database: %s", "Postgres" if settings.is_production else "SQLite")
    logger.info("OPENAI_API_KEY set: %s", bool(settings.openai_api_key))
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    except Exception:
        logger.exception("Database initialization failed")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/health/db")
def health_db():
    try:
        from app.db.session import SessionLocal
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except Exception as exc:
        return {"status": "error", "database": str(exc)}


app.include_router(api_router, prefix=settings.api_prefix)
