# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-18
# Description: test_udl_search_service.py
# -----------------------------------------------------------------------------
from dataclasses import replace

import pytest

from chunking.UDLChunk import ChunkMetadata, UDLChunk
from embedding.UDLEmbedder import UDLEmbedder
from errors.RAGErrors import ConfigurationError
from fakes import ENGAGEMENT_URL
from loader.UDLKnowledgeLoader import UDLKnowledgeLoader
from services.UDLSearchService import (
    FALLBACK_MESSAGE,
    NO_RESULTS_MESSAGE,
    RESULTS_HEADER,
    UDLSearchService,
)
from services.UDLStatusService import UDLStatusService
from vectorstore.JsonFileCacheStore import JsonFileCacheStore
from vectorstore.UDLVectorStore import SearchResult, UDLVectorStore


class StubStore:
    def __init__(self, results):
        self.results = results
        self.calls = []

    async def search(self, query, top_k=3):
        self.calls.append((query, top_k))
        return self.results


def _store(corpus_path, cache_path, embedder) -> UDLVectorStore:
    return UDLVectorStore(
        corpus=UDLKnowledgeLoader(corpus_path),
        embedder=embedder,
        cache_store=JsonFileCacheStore(cache_path),
    )


def _result(score: float, **metadata) -> SearchResult:
    md = ChunkMetadata(title="Sustaining Effort", url="https://udl.example/engagement/effort/", **metadata)
    return SearchResult(chunk=UDLChunk(text="Give mastery-oriented feedback.", metadata=md), score=score)


@pytest.mark.asyncio
async def test_embedding_failure_returns_fallback(corpus_path, cache_path, failing_embedder):
    svc = UDLSearchService(store=_store(corpus_path, cache_path, failing_embedder))

    assert await svc.search_guidelines("engagement strategies", 3) == FALLBACK_MESSAGE


@pytest.mark.asyncio
async def test_missing_key_falls_back_but_initialize_raises(cfg, corpus_path, cache_path):
    embedder = UDLEmbedder(replace(cfg, openai_api_key=""))
    store = _store(corpus_path, cache_path, embedder)

    assert await UDLSearchService(store=store).search_guidelines("engagement strategies") == FALLBACK_MESSAGE
    with pytest.raises(ConfigurationError):
        await UDLStatusService(store=store).initialize()


@pytest.mark.asyncio
async def test_no_results_message():
    svc = UDLSearchService(store=StubStore([]))

    assert await svc.search_guidelines("anything", 2) == NO_RESULTS_MESSAGE


@pytest.mark.asyncio
async def test_results_are_formatted_in_rank_order(corpus_path, cache_path, fake_embedder):
    svc = UDLSearchService(store=_store(corpus_path, cache_path, fake_embedder))

    text = await svc.search_guidelines("ways to build learner motivation and engagement", 2)

    assert text.startswith(RESULTS_HEADER)
    assert "[Result 1] (Relevance: " in text
    assert "[Result 2] (Relevance: " in text
    assert "[Result 3]" not in text
    assert text.index("[Result 1]") < text.index("[Result 2]")
    assert f"URL: {ENGAGEMENT_URL}" in text
    assert "Principle: Engagement" in text


@pytest.mark.asyncio
async def test_query_and_top_k_are_passed_through():
    store = StubStore([_result(0.5)])

    await UDLSearchService(store=store).search_guidelines("feedback", 5)

    assert store.calls == [("feedback", 5)]


def test_format_result_with_full_metadata():
    result = _result(
        0.875,
        guideline="Guideline 8",
        guideline_number="8",
        guideline_name="Sustaining effort and persistence",
        principle="Engagement",
        sub_guideline="Offer action-oriented feedback",
    )

    assert UDLSearchService.format_result(1, result) == (
        "[Result 1] (Relevance: 87.5%)\n"
        "**UDL Guideline 8**: Sustaining effort and persistence\n"
        "Principle: Engagement\n"
        "Sub-guideline: Offer action-oriented feedback\n"
        "Source: Sustaining Effort\n"
        "URL: https://udl.example/engagement/effort/\n"
        "Content:\n"
        "Give mastery-oriented feedback.\n"
        "---\n"
    )


def test_format_result_with_legacy_label_only():
    block = UDLSearchService.format_result(2, _result(0.4321, guideline="Guideline 3"))

    assert block.splitlines()[:2] == ["[Result 2] (Relevance: 43.2%)", "**Guideline 3**"]
    assert "Principle:" not in block
    assert "Sub-guideline:" not in block


def test_format_result_number_without_name():
    block = UDLSearchService.format_result(1, _result(1.0, guideline_number="5.2"))

    assert block.splitlines()[:2] == ["[Result 1] (Relevance: 100.0%)", "**UDL Guideline 5.2**"]


def test_format_results_joins_blocks():
    results = [_result(0.9), _result(0.8)]

    text = UDLSearchService.format_results(results)

    assert text == (
        RESULTS_HEADER
        + UDLSearchService.format_result(1, results[0])
        + "\n"
        + UDLSearchService.format_result(2, results[1])
    )
