# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: UDLChunk
# -----------------------------------------------------------------------------
from dataclasses import dataclass, asdict, field
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class ChunkMetadata:
    """
    Metadata inherited verbatim from the parent guideline document.
    Every chunk cut from one document carries an equal ChunkMetadata.
    """
    title: str
    url: str
    guideline: Optional[str] = None  # legacy label, e.g. "Guideline 7"
    guideline_number: Optional[str] = None  # e.g. "7.1"
    guideline_name: Optional[str] = None  # e.g. "Optimize choice and autonomy"
    sub_guideline: Optional[str] = None
    principle: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # Absent fields are left out of the cache file
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ChunkMetadata":
        return cls(
            title=raw.get("title", ""),
            url=raw.get("url", ""),
            guideline=raw.get("guideline"),
            guideline_number=raw.get("guideline_number"),
            guideline_name=raw.get("guideline_name"),
            sub_guideline=raw.get("sub_guideline"),
            principle=raw.get("principle"),
        )


@dataclass(frozen=True)
class UDLChunk:
    """
    A retrievable slice of a guideline document. Chunks are never edited after
    creation; the corpus is re-chunked wholesale instead.
    """
    text: str
    metadata: ChunkMetadata = field(default_factory=lambda: ChunkMetadata(title="", url=""))

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "metadata": self.metadata.to_dict()}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "UDLChunk":
        if not isinstance(raw, dict):
            raise ValueError(f"Chunk must be an object, got {type(raw).__name__}")
        metadata = raw.get("metadata", {})
        if not isinstance(metadata, dict):
            raise ValueError(f"Chunk metadata must be an object, got {type(metadata).__name__}")

        return cls(
            text=str(raw["text"]),
            metadata=ChunkMetadata.from_dict(metadata),
        )

    def short_preview(self, n: int = 120) -> str:
        """Return a compact text preview for logging/debugging."""
        clean = " ".join(self.text.split())
        preview = (clean[:n] + "...") if len(clean) > n else clean
        label = self.metadata.guideline_number or self.metadata.guideline or "-"
        return f"[{label} | {self.metadata.title}] {preview}"
