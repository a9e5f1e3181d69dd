# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-12
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

from embedding.UDLEmbedder import UDLEmbedder
from utility.logging_utils import get_logger

PROBE_TEXT = "UDL embedding healthcheck"


class EmbeddingHealth:
    """
    Smoke test for the OpenAI embeddings endpoint.

    Verifies:
      - The embedding API call completes successfully
      - The response contains a vector
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedder: UDLEmbedder,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_logger(__name__)

    async def run(self) -> bool:
        self.logger.info("Running embedding healthcheck using model: %s", self.embedder.model)

        try:
            start = time.time()
            embedding = await self.embedder.embed_one(PROBE_TEXT)
            elapsed_ms = (time.time() - start) * 1000.0
        except Exception as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False

        dim = len(embedding)
        self.logger.info("Embedding call succeeded in %.1f ms. Returned dimension: %d", elapsed_ms, dim)

        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning("Dimension mismatch: expected %d, got %d.", self.expected_dim, dim)
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True
