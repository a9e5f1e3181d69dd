# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends, HTTPException, Query

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.UDLHealthService import UDLHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message="UDL guidelines API running")


@router.get("/deep", response_model=DeepHealthResponse)
async def deep_health_check(
    svc: UDLHealthService = Depends(get_health_service),
    run_smoke_queries: bool = Query(False, description="Run sample queries end-to-end"),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called (run_smoke_queries=%s)", run_smoke_queries)
    try:
        result = await svc.deep_health(run_smoke_queries=run_smoke_queries)
    except Exception as e:
        logger.exception("GET /health/deep failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Deep health check failed: {e}")

    logger.info("GET /health/deep completed (status=%s)", result.status)
    return result
