"""Dynamic programming: Armstrong numbers, Kadane, subset sum and word break."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its digits each raised to the digit count.

    Digits of a negative number carry its sign, as with truncating remainders.
    """
    digits = [int(ch) for ch in str(abs(n))] if n != 0 else []
    sign = -1 if n < 0 else 1
    power = len(digits)
    return sum((sign * digit) ** power for digit in digits) == n


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``values`` (Kadane)."""
    if not values:
        raise ValueError("values must not be empty")
    best: int | None = None
    running = 0
    for item in values:
        running += item
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    assert best is not None
    return best


def subset_sum(values: Sequence[int], target: int) -> bool:
    """Tell whether some subset of ``values`` adds up to ``target``.

    The empty subset counts, so a target of zero is always reachable.
    """
    items = tuple(values)

    @lru_cache(maxsize=None)
    def reachable(index: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if index == len(items):
            return False
        return reachable(index + 1, remaining - items[index]) or reachable(
            index + 1, remaining
        )

    return reachable(0, target)


def word_break(text: str, words: Iterable[str]) -> bool:
    """Tell whether ``text`` can be split entirely into words from ``words``."""
    vocabulary = set(words)
    n = len(text)
    # breakable[i]: text[i:] can be split into dictionary words
    breakable = [False] * (n + 1)
    breakable[n] = True
    for start in range(n - 1, -1, -1):
        breakable[start] = any(
            text[start:end] in vocabulary and breakable[end]
            for end in range(start + 1, n + 1)
        )
    return breakable[0]