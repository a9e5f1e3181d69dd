# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-12
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from health.EmbeddingHealth import EmbeddingHealth
from health.RAGSmokeTest import RAGSmokeTest
from utility.logging_utils import get_class_logger
from vectorstore.UDLVectorStore import UDLVectorStore


class TestRunner:
    """
    Orchestrates all smoke tests and reports a consolidated result.

    Tests included:
      - EmbeddingHealth (OpenAI embeddings probe)
      - vector_store    (store initializes and holds chunks)
      - RAGSmokeTest    (sample queries end-to-end; optional, heavier)
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        *,
        embedding_health: EmbeddingHealth,
        store: UDLVectorStore,
        smoke_test: RAGSmokeTest,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedding_health = embedding_health
        self.store = store
        self.smoke_test = smoke_test
        self.logger = logger or get_class_logger(self.__class__)

    # -------------------------------------------------------------------------
    async def run_all(self, run_smoke_queries: bool = False) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :param run_smoke_queries: If True, also runs the sample-query smoke test.
        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite (run_smoke_queries=%s)", run_smoke_queries)

        results: Dict[str, bool] = {}

        ok_embed = await self.embedding_health.run()
        results["embedding_health"] = ok_embed
        self._log_result("EmbeddingHealth", ok_embed)

        try:
            await self.store.initialize()
            ok_store = self.store.get_stats().chunk_count > 0
        except Exception as e:
            self.logger.exception("Vector store initialization raised an exception: %s", e)
            ok_store = False
        results["vector_store"] = ok_store
        self._log_result("VectorStore", ok_store)

        if run_smoke_queries:
            ok_smoke = await self.smoke_test.run()
            results["rag_smoke"] = ok_smoke
            self._log_result("RAGSmokeTest", ok_smoke)

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            status = "PASS" if ok else "FAIL"
            self.logger.info("  %s: %s", name, status)
