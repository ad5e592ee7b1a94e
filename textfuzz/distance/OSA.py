"""textfuzz.distance.OSA: optimal string alignment distance (adjacent transpositions, no substring edited twice)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from . import _metric
from ._engine import osa


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    return _metric.distance(osa, s1, s2, processor, score_cutoff)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    return _metric.similarity(osa, s1, s2, processor, score_cutoff)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    return _metric.normalized_distance(osa, s1, s2, processor, score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    return _metric.normalized_similarity(osa, s1, s2, processor, score_cutoff)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
