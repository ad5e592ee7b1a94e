"""
textfuzz.compat: data-framework compatibility helpers.

Converts candidate collections from Polars, Pandas and PyArrow into a plain
``list`` of ``str`` / ``bytes`` so a :class:`~textfuzz.Matcher` can scan
them by offset. All imports are lazy so no hard dependencies are
introduced.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .buffer import StringBuffer

_STRING_TYPES = (str, bytes, bytearray, memoryview, StringBuffer)


def _is_polars_series(data: Any) -> bool:
    try:
        import polars as pl

        return isinstance(data, pl.Series)
    except ImportError:
        return False


def _is_pandas_series(data: Any) -> bool:
    try:
        import pandas as pd

        return isinstance(data, pd.Series)
    except ImportError:
        return False


def _is_pyarrow_array(data: Any) -> bool:
    try:
        import pyarrow as pa

        return isinstance(data, (pa.Array, pa.ChunkedArray))
    except ImportError:
        return False


def _check_elements(result: list[Any], expected: str) -> None:
    for item in result:
        if not isinstance(item, _STRING_TYPES):
            raise TypeError(
                f"Expected {expected}, got elements of type {type(item).__name__}. "
                "All candidates must be str or bytes."
            )


def _coerce_to_strings(data: Any) -> list[Any]:
    """
    Convert *data* to a ``list`` of candidates.

    Supported input types
    ---------------------
    * ``list[str | bytes]``: returned as-is (no copy).
    * ``polars.Series``: ``.cast(Utf8).to_list()``.
    * ``pandas.Series``: ``.astype(str).tolist()``.
    * ``pyarrow.Array`` / ``pyarrow.ChunkedArray``: ``.to_pylist()``.
    * Any other ``Iterable[str | bytes]``: ``list(data)``.

    Missing values (``None``) in columnar data become ``""``.

    Raises
    ------
    TypeError
        If the resulting list contains anything but strings or bytes.
    """
    if isinstance(data, _STRING_TYPES):
        raise TypeError(
            f"Expected a collection of candidates, got a single {type(data).__name__}."
        )

    if isinstance(data, list):
        _check_elements(data, "list[str | bytes]")
        return data

    if _is_polars_series(data):
        import polars as pl

        s: pl.Series = data.cast(pl.Utf8)
        return [x if x is not None else "" for x in s.to_list()]

    if _is_pandas_series(data):
        return data.astype(str).tolist()  # type: ignore[union-attr]

    if _is_pyarrow_array(data):
        result = data.to_pylist()  # type: ignore[union-attr]
        return [x if x is not None else "" for x in result]

    if isinstance(data, Iterable):
        result = list(data)
        _check_elements(result, "Iterable[str | bytes]")
        return result

    raise TypeError(
        f"Cannot coerce {type(data).__name__} to a list of candidates. "
        "Pass a list, Polars Series, Pandas Series, PyArrow Array "
        "or any iterable of strings."
    )


__all__ = ["_coerce_to_strings"]
