# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-14
# Description: guidelines router
# -----------------------------------------------------------------------------
import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException

import settings
from api.dependencies import get_search_service, get_status_service
from api.schemas.guidelines import (
    ClearCacheResponse,
    GuidelineSearchRequest,
    GuidelineSearchResponse,
    RAGStatusResponse,
)
from services.UDLSearchService import FALLBACK_MESSAGE, UDLSearchService
from services.UDLStatusService import UDLStatusService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/guidelines", tags=["guidelines"])


@router.post("/search", response_model=GuidelineSearchResponse)
async def post_search(
    req: GuidelineSearchRequest,
    svc: UDLSearchService = Depends(get_search_service),
) -> GuidelineSearchResponse:
    query_text = (req.query or "").strip()
    if not query_text:
        raise HTTPException(status_code=400, detail="query must not be empty")

    # The façade has no deadline of its own
    timed_out = False
    try:
        context = await asyncio.wait_for(
            svc.search_guidelines(query_text, req.top_k),
            timeout=settings.SEARCH_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        logger.warning(
            "Guideline search timed out after %.1fs (query=%r)",
            settings.SEARCH_TIMEOUT_SECONDS,
            query_text[:120],
        )
        context = FALLBACK_MESSAGE
        timed_out = True

    return GuidelineSearchResponse(
        query=query_text,
        top_k=req.top_k,
        context=context,
        timed_out=timed_out,
    )


@router.get("/status", response_model=RAGStatusResponse)
async def get_status(
    svc: UDLStatusService = Depends(get_status_service),
) -> RAGStatusResponse:
    return RAGStatusResponse(**(await svc.get_status()))


@router.post("/initialize", response_model=RAGStatusResponse)
async def post_initialize(
    svc: UDLStatusService = Depends(get_status_service),
) -> RAGStatusResponse:
    try:
        await svc.initialize()
    except Exception as e:
        logger.exception("Initialization failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Initialization failed: {e}")

    return RAGStatusResponse(**(await svc.get_status()))


@router.delete("/cache", response_model=ClearCacheResponse)
def delete_cache(
    svc: UDLStatusService = Depends(get_status_service),
) -> ClearCacheResponse:
    return ClearCacheResponse(**svc.clear_cache())
