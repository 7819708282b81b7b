"""Sorting algorithms: bead, bubble, bucket, insertion, selection and snail order."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "DoublyLinkedList",
    "bead_sort",
    "bubble_sort",
    "bucket_sort",
    "insertion_sort",
    "selection_sort",
    "snail_sort",
]


def bead_sort(values: Sequence[int]) -> list[int]:
    """Sort non-negative integers ascending by letting beads fall on rods."""
    items = list(values)
    if not items:
        return []
    if any(item < 0 for item in items):
        raise ValueError("bead sort works on non-negative integers only")
    rows = len(items)
    # Beads on each rod after they have fallen to the bottom rows.
    rod_counts = [sum(1 for item in items if item > level) for level in range(max(items))]
    return [
        sum(1 for count in rod_counts if count >= rows - row) for row in range(rows)
    ]


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Return a new list sorted ascending by repeatedly swapping neighbours."""
    result = list(values)
    for done in range(len(result)):
        swapped = False
        for x in range(len(result) - done - 1):
            if result[x] > result[x + 1]:
                result[x], result[x + 1] = result[x + 1], result[x]
                swapped = True
        if not swapped:
            break
    return result


def bucket_sort(values: Sequence[float]) -> list[float]:
    """Sort numbers in ``[0, 1)`` by spreading them over ``len(values)`` buckets."""
    count = len(values)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for item in values:
        if not 0 <= item < 1:
            raise ValueError("bucket sort needs values in the range [0, 1)")
        buckets[int(count * item)].append(item)
    return [item for bucket in buckets for item in sorted(bucket)]


def insertion_sort(values: Sequence[int], descending: bool = False) -> list[int]:
    """Return a new list sorted by insertion, ascending unless ``descending``."""
    result: list[int] = []
    for key in values:
        position = len(result)
        while position > 0 and (
            result[position - 1] < key if descending else result[position - 1] > key
        ):
            position -= 1
        result.insert(position, key)
    return result


def selection_sort(values: Sequence[int]) -> list[int]:
    """Return a new list sorted ascending by repeatedly selecting the minimum."""
    result = list(values)
    for start in range(len(result) - 1):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def snail_sort(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Read a square matrix in a clockwise spiral starting at the top-left."""
    if not matrix or not matrix[0]:
        return []
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rows = [list(row) for row in matrix]
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        # Rotate the remainder counter-clockwise so the next edge comes first.
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


@dataclass(eq=False)
class _Node:
    number: int
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """A doubly linked list of integers that can bubble-sort its own values."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def push_front(self, number: int) -> None:
        """Insert ``number`` at the beginning of the list."""
        node = _Node(number, next=self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node

    def bubble_sort(self) -> None:
        """Sort the values ascending in place by swapping neighbouring numbers."""
        if self._head is None:
            return
        tail: _Node | None = None
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            while node.next is not tail:
                following = node.next
                assert following is not None
                if node.number > following.number:
                    node.number, following.number = following.number, node.number
                    swapped = True
                node = following
            tail = node

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.number
            node = node.next