"""Prefix Damerau-Levenshtein distance."""

from __future__ import annotations


def _as_bytes(value: bytes | bytearray | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def prefix_damerau_levenshtein(
    source: bytes | bytearray | str, target: bytes | bytearray | str
) -> tuple[int, int]:
    """Return the smallest distance between source and a prefix of target.

    The result is ``(distance, length)`` where ``length`` is the number of
    bytes of ``target`` in the best matching prefix. The source must not be
    longer than the target.
    """
    source = _as_bytes(source)
    target = _as_bytes(target)
    n, m = len(source), len(target)

    if n > m:
        raise ValueError("the source string must be shorter than the target one")

    if n == 0:
        return m, 0
    if n == m and source == target:
        return 0, m

    inf = n + m
    matrix = [[0] * (m + 2) for _ in range(n + 2)]

    matrix[0][0] = inf
    for i in range(n + 1):
        matrix[i + 1][0] = inf
        matrix[i + 1][1] = i
    for j in range(m + 1):
        matrix[0][j + 1] = inf
        matrix[1][j + 1] = j

    last_row: dict[int, int] = {}

    for row, char_s in enumerate(source, start=1):
        last_match_col = 0
        for col, char_t in enumerate(target, start=1):
            last_match_row = last_row.get(char_t, 0)
            cost = 0 if char_s == char_t else 1

            dist_add = matrix[row][col + 1] + 1
            dist_del = matrix[row + 1][col] + 1
            dist_sub = matrix[row][col] + cost
            dist_trans = (
                matrix[last_match_row][last_match_col]
                + (row - last_match_row - 1)
                + 1
                + (col - last_match_col - 1)
            )

            matrix[row + 1][col + 1] = min(dist_add, dist_del, dist_sub, dist_trans)

            if cost == 0:
                last_match_col = col

        last_row[char_s] = row

    final_row = matrix[n + 1]
    return min(((final_row[x + 1], x) for x in range(n, m + 1)), key=lambda pair: pair[0])