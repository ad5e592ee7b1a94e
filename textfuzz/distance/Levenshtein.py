"""textfuzz.distance.Levenshtein: Levenshtein distance (insertions, deletions, substitutions)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from . import _metric
from ._engine import levenshtein


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    return _metric.distance(levenshtein, s1, s2, processor, score_cutoff)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    return _metric.similarity(levenshtein, s1, s2, processor, score_cutoff)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    return _metric.normalized_distance(levenshtein, s1, s2, processor, score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    return _metric.normalized_similarity(levenshtein, s1, s2, processor, score_cutoff)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
