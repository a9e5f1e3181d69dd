# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-15
# Description: conftest.py
# -----------------------------------------------------------------------------

import json
import sys
from pathlib import Path
from typing import List

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "tests"))

from config.Config import Config  # noqa: E402
from fakes import (  # noqa: E402
    ENGAGEMENT_URL,
    REPRESENTATION_URL,
    FakeEmbedder,
    engagement_content,
    guideline_record,
    representation_content,
)


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def failing_embedder() -> FakeEmbedder:
    return FakeEmbedder(fail=True)


@pytest.fixture
def two_doc_records() -> List[dict]:
    return [
        guideline_record(ENGAGEMENT_URL, "Engagement", engagement_content()),
        guideline_record(REPRESENTATION_URL, "Perception", representation_content()),
    ]


@pytest.fixture
def write_corpus(tmp_path: Path):
    def _write(records: List[dict], name: str = "udl_guidelines.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def corpus_path(write_corpus, two_doc_records) -> Path:
    return write_corpus(two_doc_records)


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "embeddings_cache.json"


@pytest.fixture
def cfg(corpus_path: Path, cache_path: Path) -> Config:
    return Config(
        openai_api_key="sk-test",
        openai_embedding_model="text-embedding-3-small",
        guidelines_path=str(corpus_path),
        cache_path=str(cache_path),
    )
