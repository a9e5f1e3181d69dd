# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: EmbeddingCacheStore
# -----------------------------------------------------------------------------

from typing import Optional, Protocol, runtime_checkable

from embedding.EmbeddingCache import EmbeddingCache


@runtime_checkable
class EmbeddingCacheStore(Protocol):
    def load(self) -> Optional[EmbeddingCache]:
        ...

    def save(self, cache: EmbeddingCache) -> None:
        ...

    def exists(self) -> bool:
        ...

    def clear(self) -> bool:
        ...
