"""Hash table of integers chained per bucket, keyed by remainder."""

from __future__ import annotations


class ChainingHash:
    """Integers stored in ``modulus`` chains, chosen by the value's remainder."""

    def __init__(self, modulus: int) -> None:
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        self.modulus = modulus
        self._chains: list[list[int]] = [[] for _ in range(modulus)]

    def hash(self, value: int) -> int:
        """Remainder of ``value`` by the modulus, carrying the sign of ``value``."""
        remainder = abs(value) % self.modulus
        return -remainder if value < 0 else remainder

    def _chain(self, value: int) -> list[int]:
        return self._chains[abs(self.hash(value))]

    def add(self, value: int) -> None:
        """Append ``value`` to the end of its chain."""
        self._chain(value).append(value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and value in self._chain(value)

    def render(self) -> str:
        """Describe every chain: empty ones, or their values one per line."""
        lines = []
        for index, chain in enumerate(self._chains):
            if not chain:
                lines.append(f"key {index} kosong!")
            else:
                lines.append(f"key {index} memiliki nilai = ")
                lines.extend(str(item) for item in chain)
        return "\n".join(lines)