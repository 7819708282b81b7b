"""Game-tree minimax, subarray sum counting and wildcard matching."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def minimax(scores: Sequence[int]) -> int:
    """Optimal value of a complete binary game tree whose leaves are ``scores``.

    The maximising player moves first; the number of leaves must be a power
    of two.
    """
    count = len(scores)
    if count == 0 or count & (count - 1):
        raise ValueError("number of scores must be a power of two")
    height = count.bit_length() - 1

    def value(depth: int, node: int, is_max: bool) -> int:
        if depth == height:
            return scores[node]
        left = value(depth + 1, node * 2, not is_max)
        right = value(depth + 1, node * 2 + 1, not is_max)
        return max(left, right) if is_max else min(left, right)

    return value(0, 0, True)


def subarray_sum_count(target: int, values: Sequence[int]) -> int:
    """Number of contiguous subarrays of ``values`` whose sum is ``target``."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for item in values:
        running += item
        count += seen[running - target]
        seen[running] += 1
    return count


def wildcard_match(text: str, pattern: str) -> bool:
    """Match ``text`` against ``pattern`` where ``?`` is one character and ``*`` any run."""
    n, m = len(text), len(pattern)
    # matches[i][j]: does text[i:] match pattern[j:]
    matches = [[False] * (m + 1) for _ in range(n + 1)]
    matches[n][m] = True
    for j in range(m - 1, -1, -1):
        matches[n][j] = pattern[j] == "*" and matches[n][j + 1]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            symbol = pattern[j]
            if text[i] == symbol or symbol == "?":
                matches[i][j] = matches[i + 1][j + 1]
            elif symbol == "*":
                matches[i][j] = matches[i][j + 1] or matches[i + 1][j]
    return matches[0][0]