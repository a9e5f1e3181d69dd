# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: UDLHealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from api.schemas.guidelines import VectorStoreStatsModel
from api.schemas.health import CheckSummary, DeepHealthResponse
from health.TestRunner import TestRunner


@dataclass
class UDLHealthService:
    """
    Runs the TestRunner checks (embedding probe, vector store, optional sample
    queries) and reports them with the store's current stats.
    """

    test_runner: TestRunner

    async def deep_health(self, run_smoke_queries: bool = False) -> DeepHealthResponse:
        checks = await self.test_runner.run_all(run_smoke_queries=run_smoke_queries)
        passed = sum(1 for ok in checks.values() if ok)

        return DeepHealthResponse(
            status="ok" if passed == len(checks) else "error",
            checks=checks,
            summary=CheckSummary(total=len(checks), passed=passed, failed=len(checks) - passed),
            vector_store=VectorStoreStatsModel(**self.test_runner.store.get_stats().to_dict()),
        )
