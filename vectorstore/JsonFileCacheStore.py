# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Updated: 2026-02-24
# Description: JsonFileCacheStore
# -----------------------------------------------------------------------------
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from embedding.EmbeddingCache import EmbeddingCache
from utility.logging_utils import get_class_logger
from vectorstore.EmbeddingCacheStore import EmbeddingCacheStore


@dataclass
class JsonFileCacheStore(EmbeddingCacheStore):
    """Keeps the EmbeddingCache as a single JSON file on local disk."""
    path: Path
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.logger = self.logger or get_class_logger(self.__class__)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Optional[EmbeddingCache]:
        """
        Returns None when there is no usable cache file. A corrupt file is
        logged and treated the same as a missing one.
        """
        if not self.exists():
            return None

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            cache = EmbeddingCache.from_dict(raw)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            self.logger.error("Error loading cache from %s: %s", self.path, e)
            return None

        self.logger.debug("Read cache %s (version=%s, chunks=%d)", self.path, cache.version, len(cache.chunks))
        return cache

    def save(self, cache: EmbeddingCache) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write beside the target then swap; readers never see a half-written file
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(cache.to_dict(), indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        self.logger.info("Saved %d embeddings to cache %s", len(cache.chunks), self.path)

    def clear(self) -> bool:
        if not self.exists():
            return False
        self.path.unlink()
        self.logger.info("Cache cleared: %s", self.path)
        return True
