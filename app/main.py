import logging

from fastapi import FastAPI
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.api.v1.router import api_router
from app.knowledge.feed_table import FEED_TABLE
from app.knowledge.symptom_table import SYMPTOM_TABLE

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(
    api_router,
    prefix="/api/v1"
)


@app.on_event("startup")
def startup_event():
    logger.info(
        "knowledge base ready: feed species=%s, symptom species=%s, llm diagnosis %s",
        sorted(FEED_TABLE), sorted(SYMPTOM_TABLE),
        "enabled" if settings.openai_api_key else "disabled (rule-based fallback)",
    )


@app.get("/health", tags=["Health"])
def health_check():
    return {
        "status": "ok",
        "environment": settings.app_env,
        "version": settings.app_version,
    }
