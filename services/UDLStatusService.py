# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-11
# Description: UDLStatusService.py
# -----------------------------------------------------------------------------
import logging
from typing import Any, Dict

from utility.logging_utils import get_class_logger
from vectorstore.UDLVectorStore import UDLVectorStore


class UDLStatusService:
    """
    Start-up and status operations for the vector store.

    initialize() is loud: a corpus that cannot be embedded must fail start-up.
    get_status() is quiet: it reports failure as initialized=False.
    """

    def __init__(self, *, store: UDLVectorStore, logger: logging.Logger | None = None) -> None:
        self.store = store
        self.logger = logger or get_class_logger(self.__class__)

    async def initialize(self) -> None:
        self.logger.info("Initializing RAG system...")
        try:
            await self.store.initialize()
        except Exception as e:
            self.logger.error("Error initializing RAG system: %s", e)
            raise
        self.logger.info("RAG system initialized successfully")

    async def get_status(self) -> Dict[str, Any]:
        initialized = False
        try:
            await self.store.initialize()
            initialized = True
        except Exception as e:
            self.logger.error("Error checking initialization: %s", e)

        return {
            "initialized": initialized,
            "stats": self.store.get_stats().to_dict(),
        }

    def clear_cache(self) -> Dict[str, Any]:
        removed = self.store.clear_cache()
        self.logger.info("clear_cache: removed=%s", removed)
        return {
            "removed": removed,
            "stats": self.store.get_stats().to_dict(),
        }
