"""Tests for the alphabet pre-filters."""

from __future__ import annotations

import string

import pytest

from textfuzz import INVALID, InvalidConfigurationError, StringBuffer
from textfuzz.alphabet import (
    MAX_BITMAP_SIZE,
    MAX_UNIQUE_BYTES,
    AsciiAlphabet,
    UnicodeAlphabet,
)


class TestAsciiAlphabet:
    def test_unique_count(self) -> None:
        alphabet = AsciiAlphabet.build(StringBuffer("aabbcc"))
        assert alphabet.unique == 3
        assert alphabet.enabled
        assert "a".encode()[0] in alphabet
        assert ord("d") not in alphabet

    def test_too_many_unique_bytes(self) -> None:
        reference = string.ascii_letters[:50]
        alphabet = AsciiAlphabet.build(StringBuffer(reference))
        assert alphabet.unique == 50 > MAX_UNIQUE_BYTES
        assert not alphabet.enabled

    def test_limit_is_inclusive(self) -> None:
        reference = bytes(range(MAX_UNIQUE_BYTES))
        assert AsciiAlphabet.build(StringBuffer(reference)).enabled

    def test_reject_counts_misses(self) -> None:
        alphabet = AsciiAlphabet.build(StringBuffer("cat"))
        assert not alphabet.reject(b"hat", 1)
        assert alphabet.reject(b"dog", 1)
        assert not alphabet.reject(b"dog", 3)

    def test_invalid_unit_is_a_miss(self) -> None:
        alphabet = AsciiAlphabet.build(StringBuffer("cat"))
        assert INVALID not in alphabet
        assert alphabet.reject((INVALID, INVALID), 1)

    def test_non_ascii_reference_counts_utf8_bytes(self) -> None:
        alphabet = AsciiAlphabet.build(StringBuffer("café"))
        assert alphabet.unique == 5
        assert 0xC3 in alphabet
        assert not alphabet.reject("café".encode(), 0)


class TestUnicodeAlphabet:
    def test_requires_unicode_mode(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="Unicode mode"):
            UnicodeAlphabet.build(StringBuffer("abc"), unicode=False)

    def test_range_and_bits(self) -> None:
        alphabet = UnicodeAlphabet.build(StringBuffer("café"), unicode=True)
        assert alphabet.enabled
        assert alphabet.min == ord("a")
        assert alphabet.max == ord("é")
        assert alphabet.size == len(alphabet.bitmap)
        assert ord("é") in alphabet
        assert ord("b") not in alphabet
        assert 0x4E2D not in alphabet

    def test_wide_range_disabled(self) -> None:
        alphabet = UnicodeAlphabet.build(StringBuffer("a\U00100000"), unicode=True)
        assert alphabet.size >= MAX_BITMAP_SIZE
        assert not alphabet.enabled
        assert not alphabet.reject((1, 2, 3, 4), 0)

    def test_empty_reference_disabled(self) -> None:
        assert not UnicodeAlphabet.build(StringBuffer(""), unicode=True).enabled

    def test_reject(self) -> None:
        alphabet = UnicodeAlphabet.build(StringBuffer("日本語"), unicode=True)
        units = StringBuffer("日本人").codepoints
        assert not alphabet.reject(units, 1)
        assert alphabet.reject(StringBuffer("中国人").codepoints, 1)

    def test_short_candidate_never_rejected(self) -> None:
        alphabet = UnicodeAlphabet.build(StringBuffer("日本語"), unicode=True)
        assert not alphabet.reject(StringBuffer("xy").codepoints, 2)

    def test_invalid_units_of_bytes_reference(self) -> None:
        reference = StringBuffer(b"ab\xff")
        alphabet = UnicodeAlphabet.build(reference, unicode=True)
        assert alphabet.enabled
        assert INVALID in alphabet
        assert not alphabet.reject(reference.codepoints, 0)
        assert INVALID not in UnicodeAlphabet.build(StringBuffer("ab"), unicode=True)
