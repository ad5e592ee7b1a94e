"""
textfuzz.distance._engine: bounded edit-distance kernels.

Both kernels work on any pair of sequences whose items are hashable and
comparable with ``==``: ``bytes`` (byte mode), tuples of codepoints
(Unicode mode), or any other sequence of symbols.

With ``max_distance=None`` the exact distance is returned. With a bound,
the exact distance is returned when it is ``<= max_distance`` and some
value ``> max_distance`` otherwise.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from ..exceptions import MemoryExhaustedError


def levenshtein(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    max_distance: int | None = None,
) -> int:
    """
    Banded Wagner-Fischer over two alternating rows.

    Rows run over *s1*, columns over *s2*. With a bound ``k``, row ``i``
    only fills columns ``i - k .. i + k``; anything outside the band would
    need more than ``k`` insertions or deletions and holds ``k + 1``.
    """
    len1 = len(s1)
    len2 = len(s2)
    bounded = max_distance is not None
    if bounded:
        large = max_distance + 1
    else:
        large = max(len1, len2)

    try:
        prev = list(range(len2 + 1))
        row = [0] * (len2 + 1)
    except MemoryError as e:
        raise MemoryExhaustedError(
            f"Could not allocate DP rows of length {len2 + 1}."
        ) from e

    for i in range(1, len1 + 1):
        c1 = s1[i - 1]
        min_j = 1
        max_j = len2
        if bounded:
            if i > max_distance:
                min_j = i - max_distance
            if len2 > max_distance + i:
                max_j = max_distance + i

        row[0] = i
        row_min = i
        # The band edges are read by the next row.
        if min_j > 1:
            row[min_j - 1] = large
        if max_j < len2:
            row[max_j + 1] = large
        for j in range(min_j, max_j + 1):
            if c1 == s2[j - 1]:
                value = prev[j - 1]
            else:
                value = prev[j] + 1
                if row[j - 1] + 1 < value:
                    value = row[j - 1] + 1
                if prev[j - 1] + 1 < value:
                    value = prev[j - 1] + 1
            row[j] = value
            if value < row_min:
                row_min = value

        # Every alignment crosses every row, so nothing below this row can
        # come back under the bound.
        if bounded and row_min > max_distance:
            return large
        prev, row = row, prev

    return prev[len2]


def damerau_levenshtein(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    max_distance: int | None = None,
    *,
    restricted: bool = True,
) -> int:
    """
    Lowrance-Wagner edit distance with transpositions.

    ``last_row`` maps each symbol to the last row of *s1* in which it
    occurred; ``last_col`` is the last column of *s2* in the current row
    that matched ``s1[i - 1]``. A transposition from cell ``(k, l)`` costs
    the edits in between plus one.

    With ``restricted=True`` only adjacent transpositions are credited,
    which gives the optimal string alignment distance (no substring edited
    twice). ``restricted=False`` gives unrestricted Damerau-Levenshtein.

    The matrix is not banded. The early exit checks the row minimum at row
    boundaries: a transposition from row ``k`` never beats the cell it
    skips over in the previous row, so row minima never decrease.
    """
    len1 = len(s1)
    len2 = len(s2)
    if not len1 or not len2:
        return len1 or len2

    bounded = max_distance is not None
    ceiling = len1 + len2

    try:
        matrix = [[ceiling] * (len2 + 2) for _ in range(len1 + 2)]
    except MemoryError as e:
        raise MemoryExhaustedError(
            f"Could not allocate a {len1 + 2}x{len2 + 2} DP matrix."
        ) from e
    for i in range(len1 + 1):
        matrix[i + 1][1] = i
    for j in range(len2 + 1):
        matrix[1][j + 1] = j

    last_row: dict[Hashable, int] = {}

    for i in range(1, len1 + 1):
        c1 = s1[i - 1]
        last_col = 0
        above = matrix[i]
        current = matrix[i + 1]
        row_min = current[1]
        for j in range(1, len2 + 1):
            c2 = s2[j - 1]
            k = last_row.get(c2, 0)
            l = last_col
            if restricted and (k != i - 1 or l != j - 1):
                swap = ceiling
            else:
                swap = matrix[k][l] + (i - k - 1) + (j - l)

            if c1 == c2:
                value = above[j]
                last_col = j
            else:
                value = min(above[j], current[j], above[j + 1]) + 1
            if swap < value:
                value = swap
            current[j + 1] = value
            if value < row_min:
                row_min = value

        if bounded and row_min > max_distance:
            return max_distance + 1
        last_row[c1] = i

    return matrix[len1 + 1][len2 + 1]


def osa(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    max_distance: int | None = None,
) -> int:
    return damerau_levenshtein(s1, s2, max_distance, restricted=True)


__all__ = ["levenshtein", "damerau_levenshtein", "osa"]
