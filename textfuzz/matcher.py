"""
textfuzz.matcher: a reusable fuzzy matcher bound to one reference string.

The :class:`Matcher` preprocesses the reference once (alphabet filters,
comparison units) and then tests any number of candidates against it::

    from textfuzz import Matcher

    m = Matcher("kitten", max_distance=3)
    m.compare("sitting")            # CompareResult(found=True, distance=3)
    m.nearest(["mitten", "kitchen", "sitting"])   # 0

Scanning a stream of candidates tightens the bound as better matches turn
up, so later candidates are rejected by the cheap gates more often::

    with m.scan(ties=True):
        for offset, word in enumerate(words):
            m.scan_candidate(word, offset)
    offsets = m.get_candidates()
    m.free_candidates()

A matcher is not thread-safe. Build one matcher per worker instead; the
construction is deterministic, so every copy behaves identically.
"""

from __future__ import annotations

import contextlib
import dataclasses
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from .alphabet import AsciiAlphabet, UnicodeAlphabet
from .buffer import StringBuffer
from .distance._engine import levenshtein, osa
from .exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


# ── Config dataclass ─────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True)
class MatcherConfig:
    """
    Configuration for :class:`Matcher`.

    Parameters
    ----------
    max_distance : int | None
        Largest edit distance still reported as a match. ``None`` means
        unbounded: every candidate matches and the gates are skipped.
    transpositions : bool
        Count a swap of two adjacent symbols as one edit.
    skip_exact : bool
        Report exact matches as not found (useful when the reference is
        itself part of the candidate list).
    alphabet_filter : bool
        Use the alphabet pre-filters when they are enabled for the
        reference.
    variable_costs : bool
        Accepted and stored; edit costs are always 1.

    Examples
    --------
    >>> cfg = MatcherConfig(max_distance=2, transpositions=True)
    >>> m = Matcher("receive", config=cfg)
    """

    max_distance: int | None = None
    transpositions: bool = False
    skip_exact: bool = False
    alphabet_filter: bool = True
    variable_costs: bool = False

    def __post_init__(self) -> None:
        _check_max_distance(self.max_distance)


@dataclasses.dataclass(frozen=True, slots=True)
class CompareResult:
    """Outcome of one comparison."""

    found: bool
    distance: int


@dataclasses.dataclass(frozen=True, slots=True)
class Candidate:
    """A match recorded during a scan."""

    distance: int
    offset: int


def _check_max_distance(max_distance: int | None) -> None:
    if max_distance is None:
        return
    if isinstance(max_distance, bool) or not isinstance(max_distance, int):
        raise InvalidConfigurationError(
            f"max_distance must be an int or None, got {type(max_distance).__name__}"
        )
    if max_distance < 0:
        raise InvalidConfigurationError(
            f"max_distance must be >= 0 or None, got {max_distance}"
        )


class Matcher:
    """
    Test candidates against a fixed reference within an edit budget.

    Parameters
    ----------
    reference : str | bytes | StringBuffer
        The string every candidate is compared with.
    unicode : bool | None, default None
        Compare codepoints (``True``) or bytes (``False``). ``None`` picks
        codepoints for text containing non-ASCII characters and bytes
        otherwise.
    config : MatcherConfig | None
        Configuration dataclass. Overrides the keyword arguments below when
        provided.
    **kwargs
        Any field from ``MatcherConfig`` can also be passed directly
        (``max_distance=``, ``transpositions=``, ``skip_exact=``,
        ``alphabet_filter=``, ``variable_costs=``).
    """

    def __init__(
        self,
        reference: str | bytes | StringBuffer,
        *,
        unicode: bool | None = None,
        config: MatcherConfig | None = None,
        # Config overrides (ignored when config= is provided)
        max_distance: int | None = None,
        transpositions: bool = False,
        skip_exact: bool = False,
        alphabet_filter: bool = True,
        variable_costs: bool = False,
    ) -> None:
        if config is None:
            config = MatcherConfig(
                max_distance=max_distance,
                transpositions=transpositions,
                skip_exact=skip_exact,
                alphabet_filter=alphabet_filter,
                variable_costs=variable_costs,
            )
        self._config = config

        self._reference = StringBuffer.of(reference)
        if unicode is None:
            # UTF-8 needs more bytes than characters only for non-ASCII text.
            unicode = self._reference.is_text and len(
                self._reference.codepoints
            ) != len(self._reference.data)
        self._unicode = bool(unicode)
        self._units = self._reference.units(self._unicode)

        self._max_distance = config.max_distance
        self._transpositions = config.transpositions
        self._skip_exact = config.skip_exact
        self._alphabet_filter = config.alphabet_filter
        self._variable_costs = config.variable_costs

        self._ascii_alphabet = AsciiAlphabet.build(self._reference)
        if self._unicode:
            self._unicode_alphabet = UnicodeAlphabet.build(
                self._reference, unicode=True
            )
        else:
            self._unicode_alphabet = UnicodeAlphabet()

        self._length_rejections = 0
        self._alphabet_rejections = 0
        self._unicode_alphabet_rejections = 0
        self._last_distance: int | None = None

        # Scan state
        self._scanning = False
        self._ties = False
        self._saved_bound: int | None = None
        self._candidates: list[Candidate] = []
        self._best: Candidate | None = None

        logger.debug(
            "Matcher for %r: unicode=%s, ascii filter=%s, unicode filter=%s",
            self._reference,
            self._unicode,
            self._ascii_alphabet.enabled,
            self._unicode_alphabet.enabled,
        )

    # ── Read-only state ──────────────────────────────────────────────

    @property
    def reference(self) -> StringBuffer:
        return self._reference

    @property
    def unicode(self) -> bool:
        return self._unicode

    @property
    def config(self) -> MatcherConfig:
        """The configuration the matcher was built with."""
        return self._config

    @property
    def length(self) -> int:
        """Length of the reference in comparison units."""
        return len(self._units)

    @property
    def ascii_alphabet(self) -> AsciiAlphabet:
        return self._ascii_alphabet

    @property
    def unicode_alphabet(self) -> UnicodeAlphabet:
        return self._unicode_alphabet

    @property
    def variable_costs(self) -> bool:
        return self._variable_costs

    @property
    def length_rejections(self) -> int:
        """Candidates rejected because of their length alone."""
        return self._length_rejections

    @property
    def alphabet_rejections(self) -> int:
        """Candidates rejected by the ASCII alphabet filter."""
        return self._alphabet_rejections

    @property
    def unicode_alphabet_rejections(self) -> int:
        """Candidates rejected by the Unicode alphabet filter."""
        return self._unicode_alphabet_rejections

    @property
    def last_distance(self) -> int | None:
        """Distance reported by the most recent comparison."""
        return self._last_distance

    @property
    def scanning(self) -> bool:
        return self._scanning

    # ── Settings ─────────────────────────────────────────────────────

    @property
    def max_distance(self) -> int | None:
        return self._max_distance

    @max_distance.setter
    def max_distance(self, value: int | None) -> None:
        if self._scanning:
            raise InvalidConfigurationError(
                "max_distance cannot be changed during a scan."
            )
        _check_max_distance(value)
        self._max_distance = value

    @property
    def transpositions(self) -> bool:
        return self._transpositions

    @transpositions.setter
    def transpositions(self, value: bool) -> None:
        self._transpositions = bool(value)

    @property
    def skip_exact(self) -> bool:
        return self._skip_exact

    @skip_exact.setter
    def skip_exact(self, value: bool) -> None:
        self._skip_exact = bool(value)

    @property
    def alphabet_filter(self) -> bool:
        return self._alphabet_filter

    @alphabet_filter.setter
    def alphabet_filter(self, value: bool) -> None:
        self._alphabet_filter = bool(value)

    # ── Comparison ───────────────────────────────────────────────────

    def _rejected_by_gates(self, units: Any, max_distance: int) -> bool:
        if abs(len(self._units) - len(units)) > max_distance:
            self._length_rejections += 1
            return True
        if not self._alphabet_filter:
            return False
        if self._unicode:
            alphabet = self._unicode_alphabet
            if (
                alphabet.enabled
                and len(units) > max_distance
                and alphabet.reject(units, max_distance)
            ):
                self._unicode_alphabet_rejections += 1
                return True
        elif self._ascii_alphabet.enabled and self._ascii_alphabet.reject(
            units, max_distance
        ):
            self._alphabet_rejections += 1
            return True
        return False

    def compare(self, candidate: str | bytes | StringBuffer) -> CompareResult:
        """
        Compare *candidate* with the reference.

        Returns
        -------
        CompareResult
            ``found`` tells whether the candidate is within ``max_distance``
            (always true when unbounded, except for a skipped exact match).
            ``distance`` is the edit distance, or ``max_distance + 1`` when
            the candidate is out of budget.
        """
        units = StringBuffer.of(candidate).units(self._unicode)
        max_distance = self._max_distance

        if max_distance is not None and self._rejected_by_gates(units, max_distance):
            dist = max_distance + 1
        else:
            engine = osa if self._transpositions else levenshtein
            dist = engine(units, self._units, max_distance)
            if max_distance is not None and dist > max_distance:
                dist = max_distance + 1

        self._last_distance = dist
        found = max_distance is None or dist <= max_distance
        if found and dist == 0 and self._skip_exact:
            found = False
        return CompareResult(found, dist)

    def distance(self, candidate: str | bytes | StringBuffer) -> int:
        """
        Return the distance to *candidate*, or ``max_distance + 1`` when it
        is not a match.
        """
        result = self.compare(candidate)
        if result.found or self._max_distance is None:
            return result.distance
        return self._max_distance + 1

    # ── Scan protocol ────────────────────────────────────────────────

    def begin_scan(self, *, ties: bool = False) -> None:
        """
        Start a scan.

        While scanning, every match found by :meth:`scan_candidate` narrows
        ``max_distance`` to its own distance. With ``ties=True`` all matches
        are recorded so that :meth:`get_candidates` can return every offset
        at the final minimum; otherwise only the first best offset is kept.
        """
        if self._scanning:
            raise InvalidConfigurationError("A scan is already in progress.")
        self._saved_bound = self._max_distance
        self._ties = ties
        self._candidates = []
        self._best = None
        self._scanning = True

    def scan_candidate(
        self, candidate: str | bytes | StringBuffer, offset: int
    ) -> CompareResult:
        """Compare one candidate as part of the current scan."""
        if not self._scanning:
            raise InvalidConfigurationError(
                "scan_candidate() called outside begin_scan()/end_scan()."
            )
        result = self.compare(candidate)
        if not result.found:
            return result

        dist = result.distance
        if self._max_distance is None or dist < self._max_distance:
            self._max_distance = dist
        if self._ties:
            self._candidates.append(Candidate(dist, offset))
        elif self._best is None or dist < self._best.distance:
            self._best = Candidate(dist, offset)
        return result

    def end_scan(self) -> None:
        """Finish the scan and restore the caller's ``max_distance``."""
        if not self._scanning:
            raise InvalidConfigurationError("No scan is in progress.")
        logger.debug(
            "Scan finished: bound narrowed to %s, restoring %s",
            self._max_distance,
            self._saved_bound,
        )
        self._max_distance = self._saved_bound
        self._scanning = False

    @contextlib.contextmanager
    def scan(self, *, ties: bool = False) -> Iterator[Matcher]:
        """Bracket a scan; the bound is restored even if the body raises."""
        self.begin_scan(ties=ties)
        try:
            yield self
        finally:
            self.end_scan()

    def get_candidates(self) -> list[int]:
        """
        Offsets of the best matches of the last scan, in discovery order.

        The bound only narrowed as the scan went on, so early entries may
        have been beaten later; only those at the final minimum are kept.
        """
        if not self._ties:
            return [self._best.offset] if self._best is not None else []
        if not self._candidates:
            return []
        minimum = min(c.distance for c in self._candidates)
        return [c.offset for c in self._candidates if c.distance == minimum]

    def free_candidates(self) -> None:
        self._candidates = []
        self._best = None

    # ── Whole-sequence scans ─────────────────────────────────────────

    def nearest(self, choices: Iterable[str | bytes | StringBuffer]) -> int | None:
        """
        Return the offset of the closest choice, or ``None``.

        The first choice at the smallest distance wins. The scan stops at
        the first exact match unless ``skip_exact`` is set.
        """
        with self.scan(ties=False):
            for offset, choice in enumerate(choices):
                result = self.scan_candidate(choice, offset)
                if result.found and result.distance == 0:
                    break
        offsets = self.get_candidates()
        self.free_candidates()
        return offsets[0] if offsets else None

    def nearest_all(self, choices: Iterable[str | bytes | StringBuffer]) -> list[int]:
        """Return the offsets of every choice at the smallest distance."""
        with self.scan(ties=True):
            for offset, choice in enumerate(choices):
                self.scan_candidate(choice, offset)
        offsets = self.get_candidates()
        self.free_candidates()
        return offsets

    def __repr__(self) -> str:
        return (
            f"Matcher({self._reference!r}, unicode={self._unicode}, "
            f"max_distance={self._max_distance}, "
            f"transpositions={self._transpositions})"
        )


__all__ = ["Candidate", "CompareResult", "Matcher", "MatcherConfig"]
