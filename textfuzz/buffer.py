"""
textfuzz.buffer: the string container shared by references and candidates.

A :class:`StringBuffer` always carries the byte form of a string. The
codepoint form is derived on first use and cached.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

# Codepoint of a non-ASCII byte in a bytes buffer: equal to no real
# codepoint, only to itself.
INVALID = -1


class StringBuffer:
    """
    A byte sequence plus an optional, lazily derived codepoint sequence.

    Parameters
    ----------
    value : str | bytes | bytearray | memoryview
        ``str`` values are encoded as UTF-8 for the byte view and decoded
        with ``ord()`` for the codepoint view. Bytes-like values keep their
        bytes; their codepoint view maps ASCII bytes to themselves and every
        other byte to :data:`INVALID`.

    Examples
    --------
    >>> buf = StringBuffer("café")
    >>> len(buf.data), len(buf.codepoints)
    (5, 4)
    >>> StringBuffer(b"caf\\xc3\\xa9").codepoints
    (99, 97, 102, -1, -1)
    """

    __slots__ = ("data", "_text", "_codepoints")

    def __init__(self, value: str | bytes | bytearray | memoryview) -> None:
        if isinstance(value, str):
            self._text: str | None = value
            self.data = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._text = None
            self.data = bytes(value)
        else:
            raise TypeError(
                f"Expected str or bytes, got {type(value).__name__}."
            )
        self._codepoints: tuple[int, ...] | None = None

    @classmethod
    def of(cls, value: Any) -> StringBuffer:
        """Return *value* unchanged if it already is a buffer, else wrap it."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def is_text(self) -> bool:
        """True when the buffer was built from a ``str``."""
        return self._text is not None

    @property
    def codepoints(self) -> tuple[int, ...]:
        if self._codepoints is None:
            if self._text is not None:
                self._codepoints = tuple(map(ord, self._text))
            else:
                self._codepoints = tuple(
                    b if b < 0x80 else INVALID for b in self.data
                )
        return self._codepoints

    def units(self, unicode: bool) -> Sequence[int]:
        """
        Return the comparison units for a matcher in the given mode.

        Unicode mode compares codepoints; byte mode compares the UTF-8 bytes,
        so a non-ASCII character costs one edit per byte it differs in.
        """
        if unicode:
            return self.codepoints
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        if self._text is not None:
            return f"StringBuffer({self._text!r})"
        return f"StringBuffer({self.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringBuffer):
            return NotImplemented
        return self.data == other.data and self.is_text == other.is_text

    def __hash__(self) -> int:
        return hash((self.data, self.is_text))


__all__ = ["INVALID", "StringBuffer"]
