# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"
DEFAULT_GUIDELINES_PATH = "data/udl_guidelines.json"
DEFAULT_CACHE_PATH = "data/embeddings_cache.json"


@dataclass(frozen=True)
class Config:
    # OpenAI (embeddings)
    openai_api_key: str
    openai_embedding_model: str

    # Corpus + embedding cache locations
    guidelines_path: str
    cache_path: str

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "openai_api_key": "OPENAI_API_KEY",
        "openai_embedding_model": "OPENAI_EMBEDDING_MODEL",
        "guidelines_path": "UDL_GUIDELINES_PATH",
        "cache_path": "UDL_CACHE_PATH",
    }

    DEFAULTS = {
        "openai_api_key": "",
        "openai_embedding_model": DEFAULT_EMBEDDING_MODEL,
        "guidelines_path": DEFAULT_GUIDELINES_PATH,
        "cache_path": DEFAULT_CACHE_PATH,
    }

    # Values that must be non-empty before any embedding call
    REQUIRED_FIELDS = ("openai_api_key",)

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        kwargs = {
            field_name: (os.getenv(env_name) or Config.DEFAULTS[field_name]).strip()
            for field_name, env_name in Config.ENV_VARS.items()
        }
        return Config(**kwargs)

    def missing_env_vars(self) -> List[str]:
        """Env var names of required fields that resolved to empty values."""
        return [self.ENV_VARS[f] for f in self.REQUIRED_FIELDS if not getattr(self, f)]

    def validate(self) -> None:
        """
        Raise ValueError if any required config is missing.

        Construction stays lenient so the corpus and cache can be inspected
        without credentials; the embedder re-checks the key at call time.
        """
        missing = self.missing_env_vars()
        if missing:
            raise ValueError(f"Missing required environment variables: {missing}")

    @property
    def guidelines_file(self) -> Path:
        return Path(self.guidelines_path)

    @property
    def cache_file(self) -> Path:
        return Path(self.cache_path)

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_api_key_set": bool(self.openai_api_key),
            "openai_embedding_model": self.openai_embedding_model,
            "guidelines_path": self.guidelines_path,
            "cache_path": self.cache_path,
        }
