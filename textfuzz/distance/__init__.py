"""
textfuzz.distance: bounded edit distance metrics.
"""

from __future__ import annotations

from . import (  # noqa: F401
    OSA,
    DamerauLevenshtein,
    Levenshtein,
)
from ._engine import damerau_levenshtein, levenshtein, osa

__all__ = [
    "DamerauLevenshtein",
    "Levenshtein",
    "OSA",
    "damerau_levenshtein",
    "levenshtein",
    "osa",
]
