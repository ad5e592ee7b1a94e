"""
textfuzz.distance._metric: shared scorer plumbing for the metric modules.

Turns a bounded kernel from :mod:`textfuzz.distance._engine` into the
``distance`` / ``similarity`` / ``normalized_*`` family with the usual
``processor`` and ``score_cutoff`` keyword arguments.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from ..buffer import StringBuffer

Kernel = Callable[[Sequence[Hashable], Sequence[Hashable], "int | None"], int]


def _units(s: Any) -> Sequence[Hashable]:
    if isinstance(s, StringBuffer):
        return s.codepoints if s.is_text else s.data
    if isinstance(s, (bytearray, memoryview)):
        return bytes(s)
    if isinstance(s, (str, bytes, list, tuple)):
        return s
    return list(s)


def _prepare(
    s1: Any, s2: Any, processor: Callable[..., Any] | None
) -> tuple[Sequence[Hashable], Sequence[Hashable]]:
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)
    return _units(s1), _units(s2)


def distance(
    kernel: Kernel,
    s1: Any,
    s2: Any,
    processor: Callable[..., Any] | None,
    score_cutoff: int | None,
) -> int:
    if score_cutoff is not None and score_cutoff < 0:
        raise ValueError(f"score_cutoff must be >= 0, got {score_cutoff}")
    a, b = _prepare(s1, s2, processor)
    dist = kernel(a, b, score_cutoff)
    if score_cutoff is not None and dist > score_cutoff:
        return score_cutoff + 1
    return dist


def similarity(
    kernel: Kernel,
    s1: Any,
    s2: Any,
    processor: Callable[..., Any] | None,
    score_cutoff: int | None,
) -> int:
    a, b = _prepare(s1, s2, processor)
    maximum = max(len(a), len(b))
    sim = maximum - kernel(a, b, None)
    if score_cutoff is not None and sim < score_cutoff:
        return 0
    return sim


def normalized_distance(
    kernel: Kernel,
    s1: Any,
    s2: Any,
    processor: Callable[..., Any] | None,
    score_cutoff: float | None,
) -> float:
    a, b = _prepare(s1, s2, processor)
    maximum = max(len(a), len(b))
    if not maximum:
        return 0.0
    norm = kernel(a, b, None) / maximum
    if score_cutoff is not None and norm > score_cutoff:
        return 1.0
    return norm


def normalized_similarity(
    kernel: Kernel,
    s1: Any,
    s2: Any,
    processor: Callable[..., Any] | None,
    score_cutoff: float | None,
) -> float:
    norm = 1.0 - normalized_distance(kernel, s1, s2, processor, None)
    if score_cutoff is not None and norm < score_cutoff:
        return 0.0
    return norm
