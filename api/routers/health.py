# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: health.py
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, Query

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.GixHealthService import GixHealthService
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", message="GIXRAG API running")


@router.get("/deep", response_model=DeepHealthResponse)
async def deep_health_check(
    svc: GixHealthService = Depends(get_health_service),
    run_openai: bool = Query(False, description="Also ping OpenAI chat (billed call)"),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called (run_openai=%s)", run_openai)
    result = svc.deep_health(run_openai=run_openai)
    logger.info("GET /health/deep completed (status=%s)", result.status)
    return result
