"""Bit manipulation: set bits, bits to flip and Hamming distances."""

from __future__ import annotations

_WORD = (1 << 64) - 1


def count_set_bits(n: int) -> int:
    """Number of 1 bits in ``n`` as a 64-bit two's-complement integer."""
    n &= _WORD
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def count_bits_flip(a: int, b: int) -> int:
    """Number of bits to flip to turn ``a`` into ``b`` (64-bit two's complement)."""
    return count_set_bits(a ^ b)


def bit_count(value: int) -> int:
    """Number of 1 bits in a non-negative integer."""
    if value < 0:
        raise ValueError("value must not be negative")
    count = 0
    while value:
        count += value & 1
        value >>= 1
    return count


def hamming_distance(a: int, b: int) -> int:
    """Number of bit positions in which two non-negative integers differ."""
    if a < 0 or b < 0:
        raise ValueError("values must not be negative")
    return bit_count(a ^ b)


def string_hamming_distance(a: str, b: str) -> int:
    """Number of positions at which two equal-length strings differ."""
    if len(a) != len(b):
        raise ValueError("strings must have the same length")
    return sum(x != y for x, y in zip(a, b))