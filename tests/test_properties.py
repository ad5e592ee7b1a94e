"""Property-based tests for textfuzz using Hypothesis, checked against rapidfuzz."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st
from rapidfuzz.distance import OSA as RF_OSA
from rapidfuzz.distance import DamerauLevenshtein as RF_DamerauLevenshtein
from rapidfuzz.distance import Levenshtein as RF_Levenshtein

from textfuzz import CompareResult, Matcher
from textfuzz.alphabet import AsciiAlphabet, UnicodeAlphabet
from textfuzz.buffer import StringBuffer
from textfuzz.distance import damerau_levenshtein, levenshtein, osa

# Small alphabets make collisions, swaps and ties likely.
small_text = st.text(alphabet="abcde", max_size=10)
any_text = st.text(max_size=10)
bounds = st.integers(min_value=0, max_value=6)


# ---------------------------------------------------------------------------
# Unbounded kernels match the reference implementation
# ---------------------------------------------------------------------------


@given(any_text, any_text)
def test_levenshtein_matches_rapidfuzz(s1: str, s2: str) -> None:
    assert levenshtein(s1, s2) == RF_Levenshtein.distance(s1, s2)


@given(small_text, small_text)
def test_osa_matches_rapidfuzz(s1: str, s2: str) -> None:
    assert osa(s1, s2) == RF_OSA.distance(s1, s2)


@given(small_text, small_text)
def test_damerau_matches_rapidfuzz(s1: str, s2: str) -> None:
    assert damerau_levenshtein(s1, s2, restricted=False) == RF_DamerauLevenshtein.distance(
        s1, s2
    )


@given(any_text, any_text)
def test_matcher_unbounded_distance(reference: str, candidate: str) -> None:
    plain = Matcher(reference, unicode=True)
    trans = Matcher(reference, unicode=True, transpositions=True)
    assert plain.compare(candidate).distance == RF_Levenshtein.distance(reference, candidate)
    assert trans.compare(candidate).distance == RF_OSA.distance(reference, candidate)
    assert plain.compare(candidate).found


# ---------------------------------------------------------------------------
# Band correctness
# ---------------------------------------------------------------------------


@given(small_text, small_text, bounds)
def test_banded_levenshtein(s1: str, s2: str, k: int) -> None:
    full = levenshtein(s1, s2)
    banded = levenshtein(s1, s2, k)
    if full <= k:
        assert banded == full
    else:
        assert banded > k


@given(small_text, small_text, bounds)
def test_bounded_osa(s1: str, s2: str, k: int) -> None:
    full = osa(s1, s2)
    bounded = osa(s1, s2, k)
    if full <= k:
        assert bounded == full
    else:
        assert bounded > k


@given(small_text, small_text, bounds, st.booleans())
def test_matcher_bounded_compare(reference: str, candidate: str, k: int, trans: bool) -> None:
    m = Matcher(reference, max_distance=k, transpositions=trans)
    expected = (RF_OSA if trans else RF_Levenshtein).distance(reference, candidate)
    result = m.compare(candidate)
    assert result.found == (expected <= k)
    if result.found:
        assert result.distance == expected
    else:
        assert result.distance == k + 1
    assert m.last_distance == result.distance


@given(any_text, st.booleans(), st.booleans(), st.one_of(st.none(), bounds))
def test_exact_match(
    reference: str, unicode: bool, skip_exact: bool, k: int | None
) -> None:
    m = Matcher(reference, unicode=unicode, skip_exact=skip_exact, max_distance=k)
    result = m.compare(reference)
    assert result.distance == 0
    assert result.found == (not skip_exact)


@given(st.binary(max_size=10), st.booleans(), st.one_of(st.none(), bounds))
def test_exact_match_bytes(reference: bytes, unicode: bool, k: int | None) -> None:
    m = Matcher(reference, unicode=unicode, max_distance=k)
    assert m.compare(reference) == CompareResult(True, 0)


# ---------------------------------------------------------------------------
# Filters never reject a true match
# ---------------------------------------------------------------------------


@given(st.text(alphabet="abcxyz", max_size=10), st.text(alphabet="abcxyz", max_size=10), bounds)
def test_ascii_alphabet_sound(reference: str, candidate: str, k: int) -> None:
    if RF_Levenshtein.distance(reference, candidate) > k:
        return
    alphabet = AsciiAlphabet.build(StringBuffer(reference))
    assert not alphabet.reject(candidate.encode(), k)


@given(st.text(alphabet="aé€x", max_size=10), st.text(alphabet="aé€xz", max_size=10), bounds)
def test_unicode_alphabet_sound(reference: str, candidate: str, k: int) -> None:
    if RF_Levenshtein.distance(reference, candidate) > k:
        return
    alphabet = UnicodeAlphabet.build(StringBuffer(reference), unicode=True)
    assert not alphabet.reject(StringBuffer(candidate).codepoints, k)


# ---------------------------------------------------------------------------
# Scans
# ---------------------------------------------------------------------------


@given(small_text, st.lists(small_text, max_size=8), st.one_of(st.none(), bounds))
def test_nearest_all_matches_brute_force(
    reference: str, choices: list[str], k: int | None
) -> None:
    distances = [RF_Levenshtein.distance(reference, c) for c in choices]
    eligible = [d for d in distances if k is None or d <= k]
    expected = []
    if eligible:
        best = min(eligible)
        expected = [i for i, d in enumerate(distances) if d == best]

    m = Matcher(reference, max_distance=k)
    assert m.nearest_all(choices) == expected
    assert m.nearest(choices) == (expected[0] if expected else None)
    assert m.max_distance == k


@given(small_text, st.lists(small_text, max_size=8), st.one_of(st.none(), bounds))
def test_bound_only_tightens(reference: str, choices: list[str], k: int | None) -> None:
    m = Matcher(reference, max_distance=k)
    seen = []
    with m.scan(ties=True):
        for offset, choice in enumerate(choices):
            m.scan_candidate(choice, offset)
            seen.append(m.max_distance)
    numeric = [b for b in seen if b is not None]
    assert numeric == sorted(numeric, reverse=True)
    if k is not None:
        assert all(b is not None and b <= k for b in seen)
    assert m.max_distance == k
