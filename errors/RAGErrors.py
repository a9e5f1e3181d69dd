# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: RAGErrors
# -----------------------------------------------------------------------------


class RAGError(Exception):
    """Base class for retrieval pipeline failures."""


class ConfigurationError(RAGError):
    """Required configuration (e.g. OPENAI_API_KEY) is missing."""


class EmbeddingError(RAGError):
    """Embedding provider failed or returned a malformed payload."""


class CorpusLoadError(RAGError):
    """Guideline corpus file could not be read or parsed."""


class EmptyCorpusError(RAGError):
    """Chunking the corpus produced zero chunks."""


class ConsistencyError(RAGError):
    """Chunk and embedding collections are out of step."""


class NotInitializedError(RAGError):
    """Vector store has no chunks or embeddings to search."""
