# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Updated: 2026-02-24
# Description: EmbeddingCache
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from chunking.UDLChunk import UDLChunk

# Bump whenever the UDLChunk or embedding shape changes; stale caches are rebuilt
CACHE_VERSION = "1.0.0"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class EmbeddingCache:
    """Persisted snapshot of chunks + embeddings (embeddings[i] belongs to chunks[i])."""
    chunks: List[UDLChunk]
    embeddings: List[List[float]]
    version: str = CACHE_VERSION
    created_at: str = field(default_factory=_utc_now_iso)
    model: str = ""  # embedding model that produced the vectors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chunks": [c.to_dict() for c in self.chunks],
            "embeddings": self.embeddings,
            "version": self.version,
            "createdAt": self.created_at,
            "model": self.model,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "EmbeddingCache":
        if not isinstance(raw, dict):
            raise ValueError(f"Cache root must be an object, got {type(raw).__name__}")

        chunks = raw.get("chunks") or []
        embeddings = raw.get("embeddings") or []
        if not isinstance(chunks, list) or not isinstance(embeddings, list):
            raise ValueError("Cache 'chunks' and 'embeddings' must be arrays")

        return cls(
            chunks=[UDLChunk.from_dict(c) for c in chunks],
            embeddings=[[float(x) for x in vec] for vec in embeddings],
            version=str(raw.get("version", "")),
            created_at=str(raw.get("createdAt", "")),
            model=str(raw.get("model") or ""),
        )
