"""
textfuzz.process: one-shot matching helpers and line / file scans.

The helpers build a :class:`~textfuzz.Matcher` for the query and run a
scan over the choices; the scan narrows the edit budget every time a
closer choice turns up.
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .compat import _coerce_to_strings
from .exceptions import LineTooLongError, ScanIOError
from .matcher import Matcher

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 0x1000


def _matcher_for(
    query: Any,
    processor: Callable[..., Any] | None,
    max_distance: int | None,
    transpositions: bool,
    skip_exact: bool,
    unicode: bool | None,
) -> Matcher:
    return Matcher(
        processor(query) if processor is not None else query,
        unicode=unicode,
        max_distance=max_distance,
        transpositions=transpositions,
        skip_exact=skip_exact,
    )


def _processed(
    choices: list[Any], processor: Callable[..., Any] | None
) -> Iterable[Any]:
    if processor is None:
        return choices
    return (processor(choice) for choice in choices)


def nearest(
    query: Any,
    choices: Iterable[Any],
    *,
    max_distance: int | None = None,
    transpositions: bool = False,
    skip_exact: bool = False,
    unicode: bool | None = None,
    processor: Callable[..., Any] | None = None,
) -> int | None:
    """Return the index of the closest choice to *query*, or ``None``."""
    matcher = _matcher_for(
        query, processor, max_distance, transpositions, skip_exact, unicode
    )
    return matcher.nearest(_processed(_coerce_to_strings(choices), processor))


def nearest_all(
    query: Any,
    choices: Iterable[Any],
    *,
    max_distance: int | None = None,
    transpositions: bool = False,
    skip_exact: bool = False,
    unicode: bool | None = None,
    processor: Callable[..., Any] | None = None,
) -> list[int]:
    """Return the indices of every choice tied for the smallest distance."""
    matcher = _matcher_for(
        query, processor, max_distance, transpositions, skip_exact, unicode
    )
    return matcher.nearest_all(_processed(_coerce_to_strings(choices), processor))


def extractOne(
    query: Any,
    choices: Iterable[Any],
    *,
    max_distance: int | None = None,
    transpositions: bool = False,
    skip_exact: bool = False,
    unicode: bool | None = None,
    processor: Callable[..., Any] | None = None,
) -> tuple[Any, int, int] | None:
    """
    Return ``(choice, distance, index)`` for the closest choice, or ``None``.

    *choice* is the original, unprocessed value.
    """
    items = _coerce_to_strings(choices)
    matcher = _matcher_for(
        query, processor, max_distance, transpositions, skip_exact, unicode
    )
    best_distance: int | None = None
    with matcher.scan():
        for offset, choice in enumerate(_processed(items, processor)):
            result = matcher.scan_candidate(choice, offset)
            if result.found and result.distance == 0:
                break
        # Once anything matched, the narrowed bound is the best distance.
        offsets = matcher.get_candidates()
        if offsets:
            best_distance = matcher.max_distance
    matcher.free_candidates()
    if not offsets or best_distance is None:
        return None
    index = offsets[0]
    return items[index], best_distance, index


def dedupe(
    choices: Iterable[Any],
    *,
    threshold: int | None = None,
    max_edits: int | None = None,
    transpositions: bool = False,
) -> list[Any]:
    """
    Drop near duplicates from *choices*, keeping the first occurrence.

    Parameters
    ----------
    threshold:
        Maximum edit distance between two strings for them to count as
        duplicates. **An absolute edit count.** Default is 2.
    max_edits:
        Alias for *threshold*.
    transpositions:
        Count adjacent swaps as a single edit.
    """
    if threshold is not None and max_edits is not None:
        raise TypeError("Pass either threshold= or max_edits=, not both.")
    limit = threshold if threshold is not None else max_edits
    if limit is None:
        limit = 2

    kept: list[Any] = []
    matchers: list[Matcher] = []
    for choice in _coerce_to_strings(choices):
        if any(m.compare(choice).found for m in matchers):
            continue
        kept.append(choice)
        matchers.append(
            Matcher(choice, max_distance=limit, transpositions=transpositions)
        )
    return kept


# ── Line scans ───────────────────────────────────────────────────────


def scan_lines(matcher: Matcher, lines: Iterable[Any]) -> Any | None:
    """
    Return the line closest to the matcher's reference, or ``None``.

    Lines are consumed one at a time; only the current best is kept. When
    several lines share the final distance, the first of them is returned
    (see :func:`scan_lines_all` for all of them). A later line at the same
    distance never replaces the current best, so on a tie this does not
    return the most recently seen line.
    """
    best: Any | None = None
    best_distance: int | None = None
    with matcher.scan():
        for offset, line in enumerate(lines):
            result = matcher.scan_candidate(line, offset)
            if not result.found:
                continue
            if best_distance is None or result.distance < best_distance:
                best = line
                best_distance = result.distance
                if best_distance == 0:
                    break
    matcher.free_candidates()
    return best


def scan_lines_all(matcher: Matcher, lines: Iterable[Any]) -> list[Any]:
    """Return every line at the smallest distance, in input order."""
    found: dict[int, Any] = {}
    with matcher.scan(ties=True):
        for offset, line in enumerate(lines):
            if matcher.scan_candidate(line, offset).found:
                found[offset] = line
    offsets = matcher.get_candidates()
    matcher.free_candidates()
    return [found[offset] for offset in offsets]


def _read_lines(
    path: str | os.PathLike[str],
    encoding: str | None,
    as_bytes: bool,
    max_line_length: int | None,
) -> Iterator[Any]:
    try:
        fh = open(path, encoding=encoding or "latin-1", newline=None)
    except OSError as e:
        raise ScanIOError(f"Cannot open {os.fspath(path)!r}: {e}") from e
    try:
        with fh:
            for number, line in enumerate(fh, start=1):
                line = line.rstrip("\n")
                if max_line_length is not None and len(line) > max_line_length:
                    raise LineTooLongError(number, len(line), max_line_length)
                # latin-1 maps bytes to characters one to one.
                yield line.encode("latin-1") if as_bytes else line
    except (OSError, UnicodeDecodeError) as e:
        raise ScanIOError(f"Cannot read {os.fspath(path)!r}: {e}") from e


def scan_file(
    matcher: Matcher,
    path: str | os.PathLike[str],
    *,
    encoding: str | None = None,
    max_line_length: int | None = MAX_LINE_LENGTH,
    ties: bool = False,
) -> Any:
    """
    Scan a text file line by line for the line closest to the reference.

    Any line ending convention is accepted. Without an *encoding*, a byte
    mode matcher reads raw bytes and returns ``bytes`` lines, while a
    Unicode matcher decodes UTF-8.

    Returns
    -------
    The best line (``None`` if no line matched), or the list of every line
    at the smallest distance when ``ties=True``.

    Raises
    ------
    ScanIOError
        The file could not be opened, read or decoded.
    LineTooLongError
        A line is longer than *max_line_length* characters.
    """
    as_bytes = encoding is None and not matcher.unicode
    if encoding is None and matcher.unicode:
        encoding = "utf-8"
    logger.debug("Scanning %s for %r", os.fspath(path), matcher.reference)
    with contextlib.closing(
        _read_lines(path, encoding, as_bytes, max_line_length)
    ) as lines:
        if ties:
            return scan_lines_all(matcher, lines)
        return scan_lines(matcher, lines)


__all__ = [
    "MAX_LINE_LENGTH",
    "dedupe",
    "extractOne",
    "nearest",
    "nearest_all",
    "scan_file",
    "scan_lines",
    "scan_lines_all",
]
