# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: UDLSearchService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import List, Sequence

from utility.logging_utils import get_class_logger
from vectorstore.UDLVectorStore import SearchResult, UDLVectorStore

FALLBACK_MESSAGE = (
    "Unable to retrieve UDL guidelines at this time. "
    "Please proceed with general instructional design principles."
)
NO_RESULTS_MESSAGE = "No relevant UDL guidelines found."
RESULTS_HEADER = "Relevant UDL Guidelines:\n\n"


@dataclass
class UDLSearchService:
    """
    Search façade the chat assistant calls before prompting the model:
        - runs the vector store search
        - renders the ranked chunks as one prompt-ready text block
        - never raises: any retrieval failure becomes FALLBACK_MESSAGE
    """

    store: UDLVectorStore
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    async def search_guidelines(self, query: str, top_k: int = 3) -> str:
        try:
            results = await self.store.search(query, top_k)
        except Exception as e:
            self.logger.error("Error searching UDL guidelines: %s", e, exc_info=True)
            return FALLBACK_MESSAGE

        if not results:
            return NO_RESULTS_MESSAGE

        self.logger.info(
            "search_guidelines: query='%s' top_k=%d results=%d",
            query[:120],
            top_k,
            len(results),
        )
        return self.format_results(results)

    @staticmethod
    def format_result(rank: int, result: SearchResult) -> str:
        md = result.chunk.metadata
        lines: List[str] = [f"[Result {rank}] (Relevance: {result.score * 100:.1f}%)"]

        if md.guideline_number:
            heading = f"**UDL Guideline {md.guideline_number}**"
            if md.guideline_name:
                heading += f": {md.guideline_name}"
            lines.append(heading)
        elif md.guideline:
            lines.append(f"**{md.guideline}**")

        if md.principle:
            lines.append(f"Principle: {md.principle}")
        if md.sub_guideline:
            lines.append(f"Sub-guideline: {md.sub_guideline}")

        lines.append(f"Source: {md.title}")
        lines.append(f"URL: {md.url}")
        lines.append(f"Content:\n{result.chunk.text}")
        lines.append("---")
        return "\n".join(lines) + "\n"

    @classmethod
    def format_results(cls, results: Sequence[SearchResult]) -> str:
        blocks = [cls.format_result(i, r) for i, r in enumerate(results, start=1)]
        return RESULTS_HEADER + "\n".join(blocks)
