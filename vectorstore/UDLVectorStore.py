# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Updated: 2026-02-24
# Description: UDLVectorStore
# -----------------------------------------------------------------------------
import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Protocol, Sequence

from chunking.UDLChunk import UDLChunk
from embedding.EmbeddingCache import CACHE_VERSION, EmbeddingCache
from errors.RAGErrors import ConsistencyError, EmptyCorpusError, NotInitializedError
from utility.logging_utils import get_class_logger
from vectorstore.EmbeddingCacheStore import EmbeddingCacheStore
from vectorstore.SimilarityIndex import BruteForceCosineIndex, SimilarityIndex


class CorpusSource(Protocol):
    def load_chunks(self) -> List[UDLChunk]:
        ...


class Embedder(Protocol):
    async def embed_one(self, text: str) -> List[float]:
        ...

    async def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        ...


@dataclass(frozen=True)
class SearchResult:
    chunk: UDLChunk
    score: float


@dataclass(frozen=True)
class VectorStoreStats:
    chunk_count: int
    embedding_dimensions: int
    cache_exists: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class UDLVectorStore:
    """
    In-memory store of guideline chunks and their embeddings.

    Owns:
      - chunks[i] / embeddings[i] pairs (always the same length)
      - the persisted EmbeddingCache (via cache_store)
      - a SimilarityIndex over the embeddings

    One instance per process, owned by the application container.
    """

    def __init__(
        self,
        *,
        corpus: CorpusSource,
        embedder: Embedder,
        cache_store: EmbeddingCacheStore,
        index: SimilarityIndex | None = None,
        cache_version: str = CACHE_VERSION,
        embedding_model: str | None = None,
        slow_search_warn_seconds: float = 2.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self.corpus = corpus
        self.embedder = embedder
        self.cache_store = cache_store
        self.index = index or BruteForceCosineIndex()
        self.cache_version = cache_version
        self.embedding_model = embedding_model or getattr(embedder, "model", "") or ""
        self.slow_search_warn_seconds = slow_search_warn_seconds
        self.logger = logger or get_class_logger(self.__class__)

        self._chunks: List[UDLChunk] = []
        self._embeddings: List[List[float]] = []
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def chunks(self) -> List[UDLChunk]:
        return list(self._chunks)

    @property
    def embeddings(self) -> List[List[float]]:
        return list(self._embeddings)

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------
    async def initialize(self) -> None:
        """
        Load embeddings from the cache, or chunk + embed the corpus and cache them.

        No-op once initialized. Errors from corpus loading and embedding
        propagate; only cache writes are best-effort.

        Known limitation: not guarded against overlapping cold calls. Two
        concurrent first requests can both rebuild and both write the cache
        (last writer wins). Warming the store at startup avoids it.
        """
        if self._initialized:
            return

        start = time.perf_counter()

        if self._load_from_cache():
            self._initialized = True
            self.logger.info(
                "Vector store initialized from cache in %.0f ms", (time.perf_counter() - start) * 1000.0
            )
            return

        self.logger.info("Generating embeddings for the guideline corpus (this may take a while)...")
        chunks = self.corpus.load_chunks()
        if not chunks:
            raise EmptyCorpusError("No chunks loaded from UDL guidelines")

        embeddings = await self.embedder.embed_batch([c.text for c in chunks])
        if len(embeddings) != len(chunks):
            raise ConsistencyError(
                f"Mismatch between chunks ({len(chunks)}) and embeddings ({len(embeddings)}) count"
            )

        self._adopt(chunks, embeddings)
        self._save_to_cache()

        self._initialized = True
        self.logger.info(
            "Vector store initialized with %d chunks in %.0f ms",
            len(self._chunks),
            (time.perf_counter() - start) * 1000.0,
        )

    def _adopt(self, chunks: List[UDLChunk], embeddings: List[List[float]]) -> None:
        try:
            self.index.build(embeddings)
        except ValueError as e:
            raise ConsistencyError(f"Embeddings are not a uniform matrix: {e}") from e
        self._chunks = list(chunks)
        self._embeddings = [list(v) for v in embeddings]

    def _load_from_cache(self) -> bool:
        cache = self.cache_store.load()
        if cache is None:
            return False

        if cache.version != self.cache_version:
            self.logger.info(
                "Cache version mismatch (found=%s, expected=%s), will regenerate",
                cache.version,
                self.cache_version,
            )
            return False

        if cache.model and self.embedding_model and cache.model != self.embedding_model:
            self.logger.info(
                "Cache was built with model %s, current model is %s, will regenerate",
                cache.model,
                self.embedding_model,
            )
            return False

        if not cache.chunks or len(cache.chunks) != len(cache.embeddings):
            self.logger.warning(
                "Cache is unusable (chunks=%d, embeddings=%d), will regenerate",
                len(cache.chunks),
                len(cache.embeddings),
            )
            return False

        try:
            self._adopt(cache.chunks, cache.embeddings)
        except ConsistencyError as e:
            self.logger.warning("Cache embeddings rejected (%s), will regenerate", e)
            return False

        self.logger.info("Loaded %d embeddings from cache (created %s)", len(self._chunks), cache.created_at)
        return True

    def _save_to_cache(self) -> None:
        cache = EmbeddingCache(
            chunks=self._chunks,
            embeddings=self._embeddings,
            version=self.cache_version,
            model=self.embedding_model,
        )
        try:
            self.cache_store.save(cache)
        except Exception as e:
            # next start rebuilds from the corpus
            self.logger.error("Error saving embedding cache: %s", e, exc_info=True)

    # -------------------------------------------------------------------------
    # Query
    # -------------------------------------------------------------------------
    async def search(self, query: str, top_k: int = 3) -> List[SearchResult]:
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")

        if not self._initialized:
            await self.initialize()

        if not self._chunks or not self._embeddings:
            raise NotInitializedError("Vector store is not properly initialized")

        start = time.perf_counter()

        query_embedding = await self.embedder.embed_one(query)
        ranked = self.index.search(query_embedding, top_k)
        results = [SearchResult(chunk=self._chunks[i], score=score) for i, score in ranked]

        elapsed = time.perf_counter() - start
        if elapsed > self.slow_search_warn_seconds:
            self.logger.warning(
                "Search took %.0f ms (exceeds %.1f second threshold)",
                elapsed * 1000.0,
                self.slow_search_warn_seconds,
            )
        else:
            self.logger.debug("Search returned %d results in %.0f ms", len(results), elapsed * 1000.0)

        return results

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------
    def get_stats(self) -> VectorStoreStats:
        return VectorStoreStats(
            chunk_count=len(self._chunks),
            embedding_dimensions=len(self._embeddings[0]) if self._embeddings else 0,
            cache_exists=self.cache_store.exists(),
        )

    def clear_cache(self) -> bool:
        """
        Delete the persisted cache and drop the in-memory copy, so the next
        initialize() or search() rebuilds from the corpus.
        Returns True if a cache artifact was removed.
        """
        try:
            removed = self.cache_store.clear()
        except OSError as e:
            self.logger.error("Error clearing cache: %s", e)
            removed = False

        self._chunks = []
        self._embeddings = []
        self.index.build([])
        self._initialized = False
        return removed
