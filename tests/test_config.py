# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-15
# Description: test_config.py
# -----------------------------------------------------------------------------
import pytest

from config.Config import DEFAULT_CACHE_PATH, DEFAULT_EMBEDDING_MODEL, DEFAULT_GUIDELINES_PATH, Config


def test_from_env_defaults(monkeypatch):
    for env_name in Config.ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)

    cfg = Config.from_env()

    assert cfg.openai_api_key == ""
    assert cfg.openai_embedding_model == DEFAULT_EMBEDDING_MODEL
    assert cfg.guidelines_path == DEFAULT_GUIDELINES_PATH
    assert cfg.cache_path == DEFAULT_CACHE_PATH
    assert cfg.missing_env_vars() == ["OPENAI_API_KEY"]
    with pytest.raises(ValueError):
        cfg.validate()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", " sk-live ")
    monkeypatch.setenv("OPENAI_EMBEDDING_MODEL", "text-embedding-3-large")
    monkeypatch.setenv("UDL_CACHE_PATH", "/tmp/udl/cache.json")

    cfg = Config.from_env()

    assert cfg.openai_api_key == "sk-live"
    assert cfg.openai_embedding_model == "text-embedding-3-large"
    assert str(cfg.cache_file) == "/tmp/udl/cache.json"
    cfg.validate()


def test_summary_hides_key(cfg):
    summary = cfg.summary()

    assert summary["openai_api_key_set"] is True
    assert "sk-test" not in summary.values()
