"""
textfuzz.utils: string pre-processing helpers usable as ``processor=``.
"""

from __future__ import annotations

from typing import Any


def default_process(sentence: Any) -> str:
    """
    Lowercase *sentence*, replace every non-alphanumeric character with a
    space and strip surrounding whitespace. ``None`` becomes ``""``.
    """
    if sentence is None:
        return ""
    if isinstance(sentence, (bytes, bytearray)):
        sentence = bytes(sentence).decode("latin-1")
    return "".join(c if c.isalnum() else " " for c in str(sentence)).lower().strip()


__all__ = ["default_process"]
