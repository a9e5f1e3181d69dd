# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: guidelines.py
# -----------------------------------------------------------------------------
from pydantic import BaseModel, Field

import settings


class GuidelineSearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    top_k: int = Field(settings.DEFAULT_TOP_K, ge=1, le=20)


class GuidelineSearchResponse(BaseModel):
    query: str
    top_k: int
    context: str
    timed_out: bool = False


class VectorStoreStatsModel(BaseModel):
    chunk_count: int
    embedding_dimensions: int
    cache_exists: bool


class RAGStatusResponse(BaseModel):
    initialized: bool
    stats: VectorStoreStatsModel


class ClearCacheResponse(BaseModel):
    removed: bool
    stats: VectorStoreStatsModel
