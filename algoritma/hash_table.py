"""A fixed-size hash table of integers with separate chaining."""

from __future__ import annotations


class HashTable:
    """Integers hashed by ``value % size`` into list buckets."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[value % self.size]

    def insert(self, value: int) -> None:
        """Append ``value`` to its bucket."""
        self._bucket(value).append(value)

    def remove(self, value: int) -> None:
        """Remove every occurrence of ``value``; absent values are ignored."""
        bucket = self._bucket(value)
        bucket[:] = [item for item in bucket if item != value]

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and value in self._bucket(value)

    def render(self) -> str:
        """One line per bucket: ``index --> values``."""
        return "\n".join(
            f"{index} -->" + "".join(f" {item}" for item in bucket)
            for index, bucket in enumerate(self._buckets)
        )