# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: UDLKnowledgeLoader
# -----------------------------------------------------------------------------
import json
import logging
from pathlib import Path
from typing import List

from chunking.UDLChunk import UDLChunk
from chunking.UDLChunker import UDLChunker
from document.UDLGuideline import UDLGuideline
from errors.RAGErrors import CorpusLoadError
from utility.logging_utils import get_class_logger


class UDLKnowledgeLoader:
    """
    Thin corpus loader:
      - reads the guideline JSON file (an ordered array of guideline records)
      - converts records to UDLGuideline
      - chunks them with UDLChunker
    """

    def __init__(
        self,
        guidelines_path: str | Path,
        *,
        chunker: UDLChunker | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.guidelines_path = Path(guidelines_path)
        self.chunker = chunker or UDLChunker()
        self.logger = logger or get_class_logger(self.__class__)

    def load_guidelines(self) -> List[UDLGuideline]:
        try:
            raw = json.loads(self.guidelines_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self.logger.error("Failed to read guidelines from %s: %s", self.guidelines_path, e)
            raise CorpusLoadError(f"Failed to load UDL guidelines: {e}") from e

        if not isinstance(raw, list):
            raise CorpusLoadError(
                f"Failed to load UDL guidelines: expected a JSON array, got {type(raw).__name__}"
            )

        guidelines: List[UDLGuideline] = []
        for i, record in enumerate(raw):
            if not isinstance(record, dict):
                raise CorpusLoadError(
                    f"Failed to load UDL guidelines: record {i} is {type(record).__name__}, not an object"
                )
            guidelines.append(UDLGuideline.from_dict(record))

        return guidelines

    def load_chunks(self) -> List[UDLChunk]:
        guidelines = self.load_guidelines()
        chunks = self.chunker.chunk_documents(guidelines)
        self.logger.info("Loaded %d chunks from %d guidelines", len(chunks), len(guidelines))
        return chunks
