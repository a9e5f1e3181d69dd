# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-07
# Description: SimilarityIndex
# -----------------------------------------------------------------------------
from typing import List, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    dot(a, b) / (|a| * |b|), or 0.0 when either vector has zero norm.
    """
    a = np.asarray(vec1, dtype=np.float64)
    b = np.asarray(vec2, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Vectors must have the same length ({a.shape[0]} != {b.shape[0]})")

    denominator = float(np.linalg.norm(a)) * float(np.linalg.norm(b))
    if denominator == 0.0:
        return 0.0
    # Rounding can push |cos| a hair past 1
    return float(np.clip(np.dot(a, b) / denominator, -1.0, 1.0))


@runtime_checkable
class SimilarityIndex(Protocol):
    def build(self, embeddings: Sequence[Sequence[float]]) -> None:
        ...

    def search(self, query_vector: Sequence[float], top_k: int) -> List[Tuple[int, float]]:
        ...


class BruteForceCosineIndex:
    """
    Exact cosine search over every stored vector, O(N*D) per query.

    Results are (row index, score) sorted by score descending; equal scores keep
    corpus order.
    """

    def __init__(self) -> None:
        self._matrix = np.empty((0, 0), dtype=np.float64)
        self._norms = np.empty((0,), dtype=np.float64)

    def build(self, embeddings: Sequence[Sequence[float]]) -> None:
        if len(embeddings) == 0:
            self._matrix = np.empty((0, 0), dtype=np.float64)
        else:
            self._matrix = np.asarray(embeddings, dtype=np.float64)
            if self._matrix.ndim != 2:
                raise ValueError("All embeddings must have the same dimension")
        self._norms = np.linalg.norm(self._matrix, axis=1) if self._matrix.size else np.empty((0,))

    @property
    def size(self) -> int:
        return int(self._matrix.shape[0])

    @property
    def dimensions(self) -> int:
        return int(self._matrix.shape[1]) if self._matrix.ndim == 2 and self.size else 0

    def scores(self, query_vector: Sequence[float]) -> np.ndarray:
        q = np.asarray(query_vector, dtype=np.float64)
        if self.size == 0:
            return np.empty((0,), dtype=np.float64)
        if q.shape != (self.dimensions,):
            raise ValueError(
                f"Query vector has dimension {q.shape[0] if q.ndim else 0}, index has {self.dimensions}"
            )

        denominators = self._norms * float(np.linalg.norm(q))
        dots = self._matrix @ q
        out = np.zeros_like(dots)
        np.divide(dots, denominators, out=out, where=denominators != 0)
        return np.clip(out, -1.0, 1.0)

    def search(self, query_vector: Sequence[float], top_k: int) -> List[Tuple[int, float]]:
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")

        scores = self.scores(query_vector)
        order = np.argsort(-scores, kind="stable")[:top_k]
        return [(int(i), float(scores[i])) for i in order]
