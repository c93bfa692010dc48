"""Similarity scoring shared by vector index adapters."""

import math


def relevance_score(a: list[float], b: list[float]) -> float:
    """Cosine similarity mapped to [0, 1]: (1 + cos) / 2.

    Same scale as (2 - cosine_distance) / 2 computed by the Postgres adapter.
    Zero vectors score 0.5 (cosine treated as 0).
    """
    if len(a) != len(b):
        raise ValueError(f"Dimension mismatch: {len(a)} != {len(b)}")
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    cosine = dot / norm if norm else 0.0
    return (1.0 + cosine) / 2.0
