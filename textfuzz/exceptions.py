"""
textfuzz.exceptions: error types raised by the matcher and the scan helpers.

Every error derives from :class:`TextFuzzError` and from the closest
built-in exception, so ``except ValueError`` / ``except OSError`` keep
working for callers that do not know about this package.
"""

from __future__ import annotations


class TextFuzzError(Exception):
    """Base class for all textfuzz errors."""


class MemoryExhaustedError(TextFuzzError, MemoryError):
    """An alphabet bitmap or DP matrix could not be allocated."""


class InvalidConfigurationError(TextFuzzError, ValueError):
    """The matcher was asked to do something its configuration forbids."""


class ScanIOError(TextFuzzError, OSError):
    """Opening, reading or closing a scanned file failed."""


class LineTooLongError(TextFuzzError, ValueError):
    """A scanned line is longer than the allowed maximum."""

    def __init__(self, line_number: int, length: int, limit: int) -> None:
        super().__init__(
            f"Line {line_number} has {length} characters, "
            f"more than the maximum of {limit}."
        )
        self.line_number = line_number
        self.length = length
        self.limit = limit


__all__ = [
    "TextFuzzError",
    "MemoryExhaustedError",
    "InvalidConfigurationError",
    "ScanIOError",
    "LineTooLongError",
]
