# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Updated: 2026-02-16
# Description: UDLChunker
# -----------------------------------------------------------------------------
import logging
import re
from typing import Dict, Iterable, List, Optional

from chunking.UDLChunk import ChunkMetadata, UDLChunk
from document.UDLGuideline import UDLGuideline
from utility.logging_utils import get_class_logger

CHUNK_MIN_SIZE = 500
CHUNK_MAX_SIZE = 800
CHUNK_OVERLAP = 100  # characters, approximated as ~10 chars per word

DEFAULT_TITLE = "UDL Guidelines"

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_LINE_BREAKS = re.compile(r"\n+")
_GUIDELINE_NUMBER = re.compile(r"guideline\s+(\d+(?:\.\d+)?)", re.IGNORECASE)

# URL path segment -> principle name
_PRINCIPLE_BY_PATH = (
    ("/engagement/", "Engagement"),
    ("/representation/", "Representation"),
    ("/action-expression/", "Action & Expression"),
)


class UDLChunker:
    """
    Splits UDL guideline documents into overlapping, sentence-aligned UDLChunk
    objects sized for embedding.

    Sentences are accumulated greedily. A chunk closes when the next sentence
    would push it past chunk_max_size AND it already holds chunk_min_size
    characters, so a chunk may run over the max to reach the floor. The next
    chunk is seeded with the last few words of the closed one.
    """

    def __init__(
        self,
        *,
        chunk_min_size: int = CHUNK_MIN_SIZE,
        chunk_max_size: int = CHUNK_MAX_SIZE,
        chunk_overlap: int = CHUNK_OVERLAP,
        logger: logging.Logger | None = None,
    ):
        self.chunk_min_size = chunk_min_size
        self.chunk_max_size = chunk_max_size
        self.chunk_overlap = chunk_overlap
        self.logger = logger or get_class_logger(self.__class__)

        if self.chunk_min_size <= 0:
            raise ValueError(f"chunk_min_size must be > 0, got {self.chunk_min_size}")
        if self.chunk_max_size < self.chunk_min_size:
            raise ValueError(
                f"chunk_max_size ({self.chunk_max_size}) must be >= chunk_min_size ({self.chunk_min_size})"
            )
        if self.chunk_overlap < 0:
            raise ValueError(f"chunk_overlap must be >= 0, got {self.chunk_overlap}")

    @property
    def overlap_words(self) -> int:
        return self.chunk_overlap // 10

    @staticmethod
    def split_into_sentences(text: str) -> List[str]:
        """
        Split on '.', '!' or '?' followed by whitespace, keeping the punctuation.
        Text with no such boundary is split on line breaks instead.
        """
        if _SENTENCE_BOUNDARY.search(text):
            parts = _SENTENCE_BOUNDARY.split(text)
        else:
            parts = _LINE_BREAKS.split(text)
        return [p.strip() for p in parts if p.strip()]

    def chunk_text(self, text: str) -> List[str]:
        chunks: List[str] = []
        current = ""

        for sentence in self.split_into_sentences(text):
            candidate = f"{current} {sentence}" if current else sentence

            if len(candidate) > self.chunk_max_size and len(current) >= self.chunk_min_size:
                chunks.append(current.strip())
                words = current.split()
                overlap = words[-self.overlap_words:] if self.overlap_words else []
                current = " ".join(overlap + [sentence])
            else:
                current = candidate

        if current.strip():
            chunks.append(current.strip())

        # Overlap seeding can leave a short tail
        return [c for c in chunks if len(c) >= self.chunk_min_size]

    @staticmethod
    def extract_metadata(document: UDLGuideline) -> Dict[str, Optional[str]]:
        """
        Prefer the document's own guideline fields; otherwise infer the
        principle from the URL and the guideline number from the content.
        """
        if document.has_structured_metadata():
            return {
                "principle": document.principle,
                "guideline_number": document.guideline_number,
                "guideline_name": document.guideline_name,
                "sub_guideline": document.sub_guideline,
                "guideline": (
                    f"Guideline {document.guideline_number}"
                    if document.guideline_number
                    else None
                ),
            }

        url = (document.url or "").lower()
        principle = None
        for segment, name in _PRINCIPLE_BY_PATH:
            if segment in url:
                principle = name
                break

        guideline_number = None
        match = _GUIDELINE_NUMBER.search(document.content or "")
        if match:
            guideline_number = match.group(1)

        return {
            "principle": principle,
            "guideline_number": guideline_number,
            "guideline": f"Guideline {guideline_number}" if guideline_number else None,
        }

    def chunk(self, document: UDLGuideline) -> List[UDLChunk]:
        content = document.content or ""
        if len(content.strip()) < self.chunk_min_size:
            self.logger.debug(
                "Skipping short document url=%r (%d chars)", document.url, len(content.strip())
            )
            return []

        metadata = ChunkMetadata(
            title=document.title or DEFAULT_TITLE,
            url=document.url,
            **self.extract_metadata(document),
        )
        return [UDLChunk(text=t, metadata=metadata) for t in self.chunk_text(content)]

    def chunk_documents(self, documents: Iterable[UDLGuideline]) -> List[UDLChunk]:
        chunks: List[UDLChunk] = []
        doc_count = 0
        skipped = 0

        for document in documents:
            doc_count += 1
            produced = self.chunk(document)
            if not produced:
                skipped += 1
            chunks.extend(produced)

        if chunks:
            avg_len = sum(len(c.text) for c in chunks) / len(chunks)
            self.logger.info(
                "Chunking Summary: documents=%d | chunks=%d | skipped=%d | avg_len=%.1f chars",
                doc_count,
                len(chunks),
                skipped,
                avg_len,
            )
        else:
            self.logger.warning("No chunks produced from %d documents", doc_count)

        return chunks
