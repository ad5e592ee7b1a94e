"""
textfuzz: bounded fuzzy string matching against a fixed reference.
"""

from __future__ import annotations

from . import (
    alphabet,
    buffer,
    compat,
    distance,
    exceptions,
    matcher,
    process,
    utils,
)
from .buffer import INVALID, StringBuffer
from .exceptions import (
    InvalidConfigurationError,
    LineTooLongError,
    MemoryExhaustedError,
    ScanIOError,
    TextFuzzError,
)
from .matcher import Candidate, CompareResult, Matcher, MatcherConfig

__version__: str = "0.1.0"

__all__ = [
    "alphabet",
    "buffer",
    "compat",
    "distance",
    "exceptions",
    "matcher",
    "process",
    "utils",
    "INVALID",
    "Candidate",
    "CompareResult",
    "InvalidConfigurationError",
    "LineTooLongError",
    "Matcher",
    "MatcherConfig",
    "MemoryExhaustedError",
    "ScanIOError",
    "StringBuffer",
    "TextFuzzError",
    "__version__",
]
