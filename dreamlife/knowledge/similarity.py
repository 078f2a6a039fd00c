"""
Cosine similarity and linear-scan top-k ranking.
"""

import math
from typing import Any, Iterable, Sequence

from dreamlife.domain.knowledge import ScoredContent


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    Returns 0.0 for empty, zero-magnitude or length-mismatched vectors.
    """
    if not a or not b or len(a) != len(b):
        return 0.0

    dot = sum(x * y for x, y in zip(a, b))
    magnitude_a = math.sqrt(sum(x * x for x in a))
    magnitude_b = math.sqrt(sum(y * y for y in b))

    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    return dot / (magnitude_a * magnitude_b)


def find_top_similar(
    query: Sequence[float],
    pool: Iterable[tuple[Any, Sequence[float]]],
    threshold: float = 0.8,
    top_k: int = 5,
) -> list[ScoredContent]:
    """
    Rank ``(content, vector)`` pairs against ``query``.

    Args:
        query: Query vector
        pool: Candidates as (content, vector) pairs
        threshold: Minimum similarity to keep (inclusive)
        top_k: Maximum number of results

    Returns:
        Results sorted by similarity, highest first. Equal scores keep
        their pool order.
    """
    if top_k <= 0:
        return []

    scored = [
        ScoredContent(content=content, similarity=cosine_similarity(query, vector))
        for content, vector in pool
    ]
    kept = [item for item in scored if item.similarity >= threshold]
    # list.sort is stable
    kept.sort(key=lambda item: item.similarity, reverse=True)
    return kept[:top_k]


__all__ = ["cosine_similarity", "find_top_similar"]
