"""In-process cosine similarity ranking over note embeddings.

Pure functions, no I/O. Candidates whose vector length differs from the
query (e.g. notes embedded with an older model) cannot be scored and are
skipped rather than treated as an error, as are vectors that score NaN
or infinity (corrupt stored embeddings).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5


@dataclass(frozen=True, slots=True)
class SimilarityCandidate:
    note_id: str
    embedding: Sequence[float]


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return dot(a, b) / (|a| * |b|).

    Mismatched lengths and zero-magnitude vectors score 0.0.
    """
    if len(a) != len(b) or len(a) == 0:
        return 0.0

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))


def score(
    query: Sequence[float],
    candidates: Iterable[SimilarityCandidate | tuple[str, Sequence[float]]],
    exclude_id: str | None = None,
    top_n: int = DEFAULT_TOP_N,
    min_similarity: float | None = None,
) -> list[tuple[str, float]]:
    """Rank candidates against *query* and return ``(note_id, similarity)`` pairs.

    The sort is stable, so candidates with equal scores keep their input
    order. Returns at most *top_n* pairs; a non-positive *top_n* yields ``[]``.
    """
    if top_n <= 0 or not query:
        return []

    scored: list[tuple[str, float]] = []
    for candidate in candidates:
        note_id, vector = (
            (candidate.note_id, candidate.embedding)
            if isinstance(candidate, SimilarityCandidate)
            else candidate
        )
        if exclude_id is not None and note_id == exclude_id:
            continue
        if vector is None or len(vector) != len(query):
            logger.debug("Skipping note %s: embedding length mismatch", note_id)
            continue
        similarity = cosine_similarity(query, vector)
        if not math.isfinite(similarity):
            logger.debug("Skipping note %s: non-finite similarity", note_id)
            continue
        if min_similarity is not None and similarity < min_similarity:
            continue
        scored.append((note_id, similarity))

    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:top_n]


def rank(
    query: Sequence[float],
    candidates: Iterable[SimilarityCandidate | tuple[str, Sequence[float]]],
    exclude_id: str | None = None,
    top_n: int = DEFAULT_TOP_N,
    min_similarity: float | None = None,
) -> list[str]:
    """Return candidate ids ordered by descending cosine similarity."""
    return [
        note_id
        for note_id, _ in score(
            query,
            candidates,
            exclude_id=exclude_id,
            top_n=top_n,
            min_similarity=min_similarity,
        )
    ]
