# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict

from pydantic import BaseModel

from api.schemas.guidelines import VectorStoreStatsModel


class HealthResponse(BaseModel):
    status: str
    message: str


class CheckSummary(BaseModel):
    total: int
    passed: int
    failed: int


class DeepHealthResponse(BaseModel):
    status: str
    checks: Dict[str, bool]
    summary: CheckSummary
    vector_store: VectorStoreStatsModel
