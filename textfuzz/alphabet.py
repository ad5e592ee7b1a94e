"""
textfuzz.alphabet: cheap pre-checks that reject candidates before any DP.

Each alphabet records which symbols occur in the reference. A candidate
containing more foreign symbols than the edit budget allows cannot be
within that budget, since every foreign symbol costs at least one edit.
Neither filter ever rejects a true match; when a filter would not pay for
itself it is simply disabled.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .buffer import INVALID, StringBuffer
from .exceptions import InvalidConfigurationError, MemoryExhaustedError

logger = logging.getLogger(__name__)

# Above this many distinct bytes the bitmap rarely prunes enough to be
# worth the extra pass over the candidate.
MAX_UNIQUE_BYTES = 45

# Unicode bitmaps spanning this many bytes or more are not built.
MAX_BITMAP_SIZE = 0x10000


class AsciiAlphabet:
    """Presence bitset over the 256 byte values of a reference."""

    __slots__ = ("present", "unique", "enabled")

    def __init__(self, present: int = 0, unique: int = 0) -> None:
        self.present = present
        self.unique = unique
        self.enabled = unique <= MAX_UNIQUE_BYTES

    @classmethod
    def build(cls, reference: StringBuffer) -> AsciiAlphabet:
        present = 0
        for byte in set(reference.data):
            present |= 1 << byte
        alphabet = cls(present, present.bit_count())
        if not alphabet.enabled:
            logger.debug(
                "ASCII alphabet filter disabled: %d unique bytes > %d",
                alphabet.unique,
                MAX_UNIQUE_BYTES,
            )
        return alphabet

    def __contains__(self, unit: int) -> bool:
        return 0 <= unit < 0x100 and bool(self.present >> unit & 1)

    def reject(self, units: Sequence[int], max_distance: int) -> bool:
        """Return True when *units* cannot be within *max_distance* edits."""
        misses = 0
        present = self.present
        for unit in units:
            if unit < 0 or unit > 0xFF or not present >> unit & 1:
                misses += 1
                if misses > max_distance:
                    return True
        return False

    def __repr__(self) -> str:
        return f"AsciiAlphabet(unique={self.unique}, enabled={self.enabled})"


class UnicodeAlphabet:
    """
    Range-bounded bitmap over the codepoints of a reference.

    Bit ``c - min`` is set for every codepoint ``c`` of the reference. The
    bitmap is only allocated when it spans fewer than ``MAX_BITMAP_SIZE``
    bytes; a reference mixing e.g. ASCII and CJK ideographs leaves the
    filter disabled.
    """

    __slots__ = ("min", "max", "bitmap", "enabled", "invalid")

    def __init__(self) -> None:
        self.min = 0
        self.max = 0
        self.bitmap = bytearray()
        self.enabled = False
        # INVALID units of a bytes reference match INVALID candidate units.
        self.invalid = False

    @property
    def size(self) -> int:
        """Number of bytes the bitmap needs (or would need)."""
        return (self.max - self.min + 8) // 8

    @classmethod
    def build(cls, reference: StringBuffer, *, unicode: bool) -> UnicodeAlphabet:
        if not unicode:
            raise InvalidConfigurationError(
                "A Unicode alphabet requires a matcher in Unicode mode."
            )
        alphabet = cls()
        alphabet.invalid = INVALID in reference.codepoints
        codepoints = [c for c in reference.codepoints if c >= 0]
        if not codepoints:
            return alphabet
        alphabet.min = min(codepoints)
        alphabet.max = max(codepoints)
        size = alphabet.size
        if size >= MAX_BITMAP_SIZE:
            logger.debug(
                "Unicode alphabet filter disabled: range %#x-%#x needs %d bytes",
                alphabet.min,
                alphabet.max,
                size,
            )
            return alphabet
        try:
            bitmap = bytearray(size)
        except MemoryError as e:
            raise MemoryExhaustedError(
                f"Could not allocate a {size} byte Unicode alphabet."
            ) from e
        for c in codepoints:
            offset = c - alphabet.min
            bitmap[offset // 8] |= 1 << (offset % 8)
        alphabet.bitmap = bitmap
        alphabet.enabled = True
        return alphabet

    def __contains__(self, unit: int) -> bool:
        if unit == INVALID:
            return self.enabled and self.invalid
        if not self.enabled or unit < self.min or unit > self.max:
            return False
        offset = unit - self.min
        return bool(self.bitmap[offset // 8] & 1 << (offset % 8))

    def reject(self, units: Sequence[int], max_distance: int) -> bool:
        """
        Return True when *units* cannot be within *max_distance* edits.

        Only worth calling when ``len(units) > max_distance``; shorter
        candidates can always be rewritten within budget as far as the
        alphabet is concerned.
        """
        if not self.enabled or len(units) <= max_distance:
            return False
        misses = 0
        lo = self.min
        hi = self.max
        bitmap = self.bitmap
        invalid = self.invalid
        for unit in units:
            if unit == INVALID and invalid:
                continue
            if unit < lo or unit > hi:
                misses += 1
            else:
                offset = unit - lo
                if not bitmap[offset // 8] & 1 << (offset % 8):
                    misses += 1
            if misses > max_distance:
                return True
        return False

    def __repr__(self) -> str:
        return (
            f"UnicodeAlphabet(min={self.min:#x}, max={self.max:#x}, "
            f"enabled={self.enabled})"
        )


__all__ = [
    "MAX_UNIQUE_BYTES",
    "MAX_BITMAP_SIZE",
    "AsciiAlphabet",
    "UnicodeAlphabet",
]
