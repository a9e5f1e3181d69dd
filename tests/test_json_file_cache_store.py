# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-16
# Description: test_json_file_cache_store.py
# -----------------------------------------------------------------------------
import json

import pytest

from chunking.UDLChunk import ChunkMetadata, UDLChunk
from embedding.EmbeddingCache import CACHE_VERSION, EmbeddingCache
from vectorstore.EmbeddingCacheStore import EmbeddingCacheStore
from vectorstore.JsonFileCacheStore import JsonFileCacheStore


def _cache() -> EmbeddingCache:
    chunks = [
        UDLChunk(
            text="Offer choices about task sequence and tools.",
            metadata=ChunkMetadata(
                title="Engagement",
                url="https://udlguidelines.cast.org/engagement/",
                guideline="Guideline 7",
                guideline_number="7",
                principle="Engagement",
            ),
        ),
        UDLChunk(
            text="Provide captions and transcripts.",
            metadata=ChunkMetadata(title="Perception", url="https://udlguidelines.cast.org/representation/"),
        ),
    ]
    return EmbeddingCache(chunks=chunks, embeddings=[[0.1, 0.2], [0.3, 0.4]])


def test_store_satisfies_protocol(cache_path):
    assert isinstance(JsonFileCacheStore(cache_path), EmbeddingCacheStore)


def test_save_then_load(cache_path):
    store = JsonFileCacheStore(cache_path)
    original = _cache()

    assert not store.exists()
    store.save(original)
    assert store.exists()

    loaded = store.load()
    assert loaded is not None
    assert loaded.chunks == original.chunks
    assert loaded.embeddings == original.embeddings
    assert loaded.version == CACHE_VERSION
    assert loaded.created_at == original.created_at


def test_file_layout(cache_path):
    JsonFileCacheStore(cache_path).save(_cache())

    raw = json.loads(cache_path.read_text(encoding="utf-8"))

    assert set(raw) == {"chunks", "embeddings", "version", "createdAt", "model"}
    # unset metadata fields are omitted
    assert raw["chunks"][1]["metadata"] == {
        "title": "Perception",
        "url": "https://udlguidelines.cast.org/representation/",
    }
    assert not cache_path.with_name(cache_path.name + ".tmp").exists()


def test_missing_file_loads_none(cache_path):
    assert JsonFileCacheStore(cache_path).load() is None


@pytest.mark.parametrize(
    "content",
    [
        "{\"chunks\": [",
        "null",
        "[]",
        "\"just a string\"",
        json.dumps({"chunks": {"text": "a"}, "embeddings": [], "version": CACHE_VERSION}),
        json.dumps(
            {
                "chunks": [{"text": "a", "metadata": []}],
                "embeddings": [[1.0]],
                "version": CACHE_VERSION,
                "createdAt": "2026-01-01T00:00:00+00:00",
            }
        ),
        json.dumps({"chunks": ["a"], "embeddings": [[1.0]], "version": CACHE_VERSION}),
    ],
)
def test_corrupt_file_loads_none(cache_path, content):
    cache_path.parent.mkdir(parents=True)
    cache_path.write_text(content, encoding="utf-8")

    assert JsonFileCacheStore(cache_path).load() is None


def test_model_round_trips(cache_path):
    store = JsonFileCacheStore(cache_path)
    cache = _cache()
    cache.model = "text-embedding-3-small"
    store.save(cache)

    assert store.load().model == "text-embedding-3-small"


def test_failed_write_leaves_no_temp_file(cache_path, monkeypatch):
    store = JsonFileCacheStore(cache_path)
    tmp_path = cache_path.with_name(cache_path.name + ".tmp")

    def _fail_replace(self, target):
        raise OSError("rename refused")

    monkeypatch.setattr(type(tmp_path), "replace", _fail_replace)

    with pytest.raises(OSError):
        store.save(_cache())
    assert not tmp_path.exists()
    assert not cache_path.exists()

def test_clear(cache_path):
    store = JsonFileCacheStore(cache_path)
    store.save(_cache())

    assert store.clear() is True
    assert not cache_path.exists()
    assert store.clear() is False
