"""Tests for textfuzz.compat: data-framework integration."""

from __future__ import annotations

import pytest

from textfuzz import Matcher, process
from textfuzz.compat import _coerce_to_strings

WORDS = ["apple", "banana", "cherry"]


class TestCoerceToStrings:
    def test_plain_list_passthrough(self) -> None:
        data = ["a", "b", "c"]
        result = _coerce_to_strings(data)
        assert result is data

    def test_bytes_list(self) -> None:
        assert _coerce_to_strings([b"a", "b"]) == [b"a", "b"]

    def test_generator(self) -> None:
        def gen() -> ...:
            yield "hello"
            yield "world"

        result = _coerce_to_strings(gen())
        assert result == ["hello", "world"]

    def test_empty_list(self) -> None:
        assert _coerce_to_strings([]) == []

    def test_non_string_list_raises(self) -> None:
        with pytest.raises(TypeError, match="list\\[str \\| bytes\\]"):
            _coerce_to_strings(["a", 2, 3])

    def test_non_string_iterable_raises(self) -> None:
        with pytest.raises(TypeError, match="Iterable\\[str \\| bytes\\]"):
            _coerce_to_strings(iter([1, 2, 3]))

    def test_single_string_raises(self) -> None:
        with pytest.raises(TypeError, match="single str"):
            _coerce_to_strings("apple")

    def test_not_iterable_raises(self) -> None:
        with pytest.raises(TypeError, match="Cannot coerce int"):
            _coerce_to_strings(42)

    def test_tuple_of_strings(self) -> None:
        assert _coerce_to_strings(("a", "b")) == ["a", "b"]


class TestPolarsIntegration:
    @pytest.fixture()
    def pl(self) -> ...:
        return pytest.importorskip("polars")

    def test_polars_series(self, pl: ...) -> None:
        s = pl.Series("name", WORDS)
        assert _coerce_to_strings(s) == WORDS

    def test_polars_series_with_none(self, pl: ...) -> None:
        s = pl.Series("name", ["apple", None, "cherry"])
        assert _coerce_to_strings(s) == ["apple", "", "cherry"]

    def test_nearest_on_series(self, pl: ...) -> None:
        s = pl.Series("name", WORDS)
        assert process.nearest("banan", s, max_distance=1) == 1


class TestPandasIntegration:
    @pytest.fixture()
    def pd(self) -> ...:
        return pytest.importorskip("pandas")

    def test_pandas_series(self, pd: ...) -> None:
        s = pd.Series(WORDS)
        assert _coerce_to_strings(s) == WORDS

    def test_nearest_all_on_series(self, pd: ...) -> None:
        s = pd.Series(["bat", "cat", "hat"])
        assert Matcher("cot", max_distance=1).nearest_all(_coerce_to_strings(s)) == [1]


class TestPyArrowIntegration:
    @pytest.fixture()
    def pa(self) -> ...:
        return pytest.importorskip("pyarrow")

    def test_pyarrow_array(self, pa: ...) -> None:
        assert _coerce_to_strings(pa.array(WORDS)) == WORDS

    def test_pyarrow_chunked_with_none(self, pa: ...) -> None:
        arr = pa.chunked_array([["apple"], [None, "cherry"]])
        assert _coerce_to_strings(arr) == ["apple", "", "cherry"]
