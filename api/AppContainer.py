# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Optional

import settings
from chunking.UDLChunker import UDLChunker
from config.Config import Config
from embedding.UDLEmbedder import UDLEmbedder
from health.EmbeddingHealth import EmbeddingHealth
from health.RAGSmokeTest import RAGSmokeTest
from health.TestRunner import TestRunner
from loader.UDLKnowledgeLoader import UDLKnowledgeLoader
from services.UDLHealthService import UDLHealthService
from services.UDLSearchService import UDLSearchService
from services.UDLStatusService import UDLStatusService
from utility.logging_utils import get_class_logger
from vectorstore.JsonFileCacheStore import JsonFileCacheStore
from vectorstore.UDLVectorStore import UDLVectorStore


class AppContainer:
    """
    Owns object instantiation and application wiring.
    Holds the process's single UDLVectorStore; services share it by reference
    and are handed to routers via FastAPI dependencies.
    """

    def __init__(self, cfg: Optional[Config] = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("AppContainer config: %s", self.cfg.summary())
        if self.cfg.missing_env_vars():
            self.logger.warning(
                "Missing env vars %s: searches will fall back until configured",
                self.cfg.missing_env_vars(),
            )

        # Core infrastructure
        self.embedder = UDLEmbedder(cfg=self.cfg, batch_size=settings.EMBED_BATCH_SIZE)
        self.chunker = UDLChunker()
        self.knowledge_loader = UDLKnowledgeLoader(self.cfg.guidelines_file, chunker=self.chunker)
        self.cache_store = JsonFileCacheStore(path=self.cfg.cache_file)

        self.store = UDLVectorStore(
            corpus=self.knowledge_loader,
            embedder=self.embedder,
            cache_store=self.cache_store,
            slow_search_warn_seconds=settings.SLOW_SEARCH_WARN_SECONDS,
        )

        # Services sharing the one store
        self.search_service = UDLSearchService(store=self.store)
        self.status_service = UDLStatusService(store=self.store)

        # Smoke tests / health
        self.smoke_test = RAGSmokeTest(
            status_service=self.status_service,
            search_service=self.search_service,
            top_k=settings.DEFAULT_TOP_K,
        )
        self.test_runner = TestRunner(
            embedding_health=EmbeddingHealth(self.embedder),
            store=self.store,
            smoke_test=self.smoke_test,
        )
        self.health_service = UDLHealthService(test_runner=self.test_runner)


# Singleton container instance
app_container = AppContainer()
