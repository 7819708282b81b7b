"""Greedy algorithms: Huffman coding and the fractional knapsack."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class _HuffmanNode:
    frequency: int
    symbol: str | None = None
    left: _HuffmanNode | None = None
    right: _HuffmanNode | None = None


def huffman_codes(symbols: Sequence[str], frequencies: Sequence[int]) -> dict[str, str]:
    """Build a Huffman tree and return each symbol's code.

    Codes are listed in pre-order of the tree, left branches (``0``) first.
    A single symbol gets the empty code.
    """
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    order = itertools.count()
    heap = [
        (frequency, next(order), _HuffmanNode(frequency, symbol))
        for symbol, frequency in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), _HuffmanNode(total, None, left, right)))

    codes: dict[str, str] = {}

    def walk(node: _HuffmanNode | None, prefix: str) -> None:
        if node is None:
            return
        if node.symbol is not None:
            codes[node.symbol] = prefix
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(heap[0][2], "")
    return codes


@dataclass(frozen=True)
class Item:
    """Something to pack: its size and the profit it brings."""

    size: float
    profit: float

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("item size must be positive")

    def profit_per_unit(self) -> float:
        return self.profit / self.size


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Maximum profit when items may be split, taking the best ratio first."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    total = 0.0
    for item in sorted(items, key=Item.profit_per_unit, reverse=True):
        if capacity <= 0:
            break
        if capacity >= item.size:
            total += item.profit
            capacity -= item.size
        else:
            total += item.profit_per_unit() * capacity
            capacity = 0
    return total