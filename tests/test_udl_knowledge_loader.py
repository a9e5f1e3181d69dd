# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-15
# Description: test_udl_knowledge_loader.py
# -----------------------------------------------------------------------------
from pathlib import Path

import pytest

from errors.RAGErrors import CorpusLoadError
from fakes import ENGAGEMENT_URL, REPRESENTATION_URL
from loader.UDLKnowledgeLoader import UDLKnowledgeLoader

ROOT = Path(__file__).resolve().parents[1]


def test_load_guidelines_parses_records(corpus_path):
    guidelines = UDLKnowledgeLoader(corpus_path).load_guidelines()

    assert [g.url for g in guidelines] == [ENGAGEMENT_URL, REPRESENTATION_URL]
    assert guidelines[0].title == "Engagement"


def test_load_chunks_covers_both_documents(corpus_path):
    chunks = UDLKnowledgeLoader(corpus_path).load_chunks()

    assert len(chunks) >= 2
    assert {c.metadata.url for c in chunks} == {ENGAGEMENT_URL, REPRESENTATION_URL}
    assert chunks[0].metadata.principle == "Engagement"


def test_missing_file_raises_corpus_load_error(tmp_path):
    with pytest.raises(CorpusLoadError):
        UDLKnowledgeLoader(tmp_path / "nope.json").load_guidelines()


def test_invalid_json_raises_corpus_load_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{not json", encoding="utf-8")

    with pytest.raises(CorpusLoadError) as exc:
        UDLKnowledgeLoader(path).load_guidelines()
    assert exc.value.__cause__ is not None


def test_non_array_corpus_rejected(write_corpus):
    path = write_corpus({"url": "x"})  # type: ignore[arg-type]

    with pytest.raises(CorpusLoadError):
        UDLKnowledgeLoader(path).load_guidelines()


def test_bundled_sample_corpus_chunks():
    chunks = UDLKnowledgeLoader(ROOT / "data" / "udl_guidelines.json").load_chunks()

    assert len(chunks) >= 4
    assert all(len(c.text) >= 500 for c in chunks)
    numbers = {c.metadata.guideline_number for c in chunks}
    assert {"7", "8", "1"} <= numbers
