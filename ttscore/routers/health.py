"""
Health Check Router
ttscore/routers/health.py
"""
from fastapi import APIRouter
from pydantic import BaseModel
from datetime import datetime, timezone

from ttscore.config import get_settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check():
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
