"""textfuzz.distance.DamerauLevenshtein: unrestricted Damerau-Levenshtein distance."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from . import _metric
from ._engine import damerau_levenshtein


def _kernel(s1: Any, s2: Any, max_distance: int | None) -> int:
    return damerau_levenshtein(s1, s2, max_distance, restricted=False)


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    return _metric.distance(_kernel, s1, s2, processor, score_cutoff)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    return _metric.similarity(_kernel, s1, s2, processor, score_cutoff)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    return _metric.normalized_distance(_kernel, s1, s2, processor, score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    return _metric.normalized_similarity(_kernel, s1, s2, processor, score_cutoff)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
