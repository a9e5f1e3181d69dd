# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Updated: 2026-02-18
# Description: UDLEmbedder
# -----------------------------------------------------------------------------
import logging
from typing import Any, List, Optional, Sequence

from openai import AsyncOpenAI

from config.Config import Config, DEFAULT_EMBEDDING_MODEL
from errors.RAGErrors import ConfigurationError, EmbeddingError
from utility.logging_utils import get_class_logger

BATCH_SIZE = 64


class UDLEmbedder:
    """
    Async client for the hosted OpenAI embeddings endpoint.

    No retries at this layer: transport and provider failures surface as
    EmbeddingError for the caller to handle. Batches are awaited one after
    another to bound load on the endpoint.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            batch_size: int = BATCH_SIZE,
            client: Optional[AsyncOpenAI] = None,
            logger=None,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")

        self.cfg = cfg
        self.batch_size = batch_size
        self.model = cfg.openai_embedding_model or DEFAULT_EMBEDDING_MODEL
        self.logger = logger or get_class_logger(self.__class__)

        # Built lazily; a missing key fails the call, not app startup
        self._client = client
        self.logger.info("UDLEmbedder initialised (model=%s, batch_size=%d)", self.model, self.batch_size)

    def _get_client(self) -> AsyncOpenAI:
        if not self.cfg.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY is not configured")
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.cfg.openai_api_key)
        return self._client

    async def _create(self, payload: Any) -> Any:
        client = self._get_client()
        try:
            return await client.embeddings.create(model=self.model, input=payload)
        except Exception as e:
            self.logger.error("Embeddings request failed (model=%s): %s", self.model, e)
            raise EmbeddingError(f"Failed to generate embedding: {e}") from e

    async def embed_one(self, text: str) -> List[float]:
        resp = await self._create(text)

        data = getattr(resp, "data", None) or []
        embedding = getattr(data[0], "embedding", None) if data else None
        if not embedding:
            raise EmbeddingError("No embedding returned from OpenAI")

        return list(embedding)

    async def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        """
        Embed texts in order, one request per batch_size slice.
        The result is positionally aligned with `texts`.
        """
        texts = list(texts)
        if not texts:
            return []

        # Key check happens before the first batch goes out
        self._get_client()

        total_batches = (len(texts) + self.batch_size - 1) // self.batch_size
        embeddings: List[List[float]] = []

        for batch_no, start in enumerate(range(0, len(texts), self.batch_size), start=1):
            batch = texts[start:start + self.batch_size]
            self.logger.info(
                "Generating embeddings for batch %d/%d (%d texts)", batch_no, total_batches, len(batch)
            )

            resp = await self._create(batch)
            data = list(getattr(resp, "data", None) or [])
            if len(data) != len(batch):
                raise EmbeddingError(
                    f"Batch {batch_no} returned {len(data)} embeddings for {len(batch)} inputs"
                )

            # The API reports each item's input position; honour it when present
            if all(getattr(item, "index", None) is not None for item in data):
                data.sort(key=lambda item: item.index)

            for item in data:
                embedding = getattr(item, "embedding", None)
                if not embedding:
                    raise EmbeddingError("Missing embedding in batch response")
                embeddings.append(list(embedding))

        self.logger.info("Completed embeddings for %d texts.", len(embeddings))
        return embeddings
