"""Integer algorithms: factorial and prime checks, fast powers, Fibonacci."""

from __future__ import annotations

import random
from collections.abc import Sequence


def is_factorial(n: int) -> bool:
    """Return True if ``n`` equals ``k!`` for some positive integer ``k``."""
    if n <= 0:
        return False
    divisor = 1
    while n % divisor == 0:
        n //= divisor
        divisor += 1
    return n == 1


def is_prime(n: int) -> bool:
    """Deterministic primality test using the 6k +/- 1 wheel."""
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    candidate = 5
    while candidate * candidate <= n:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def power_recursive(base: int, exponent: int) -> float:
    """Compute ``base ** exponent`` by recursive squaring."""
    if exponent < 0:
        return 1.0 / power_recursive(base, -exponent)
    if exponent == 0:
        return 1.0
    half = power_recursive(base, exponent >> 1)
    result = half * half
    if exponent & 1:
        result *= base
    return float(result)


def power_linear(base: int, exponent: int) -> float:
    """Compute ``base ** exponent`` by iterative squaring."""
    if exponent < 0:
        return 1.0 / power_linear(base, -exponent)
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return float(result)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def is_even(text: str) -> bool:
    """Parse a string of decimal digits and tell whether the number is even."""
    if not text or not all("0" <= ch <= "9" for ch in text):
        raise ValueError("input must consist of digits only")
    return int(text) % 2 == 0


def reverse_binary(n: int) -> list[int]:
    """Binary digits of ``n``, least significant first."""
    bits = []
    while n > 0:
        bits.append(n % 2)
        n //= 2
    return bits


def modular_exponent(base: int, exponent_bits: Sequence[int], modulus: int) -> int:
    """Compute ``base ** e % modulus`` where ``exponent_bits`` are e's bits, LSB first."""
    if modulus == 1:
        return 0
    if not exponent_bits:
        return 1
    square = base
    result = base if exponent_bits[0] == 1 else 1
    for bit in exponent_bits[1:]:
        square = square * square % modulus
        if bit == 1:
            result = square * result % modulus
    return result


def miller_test(d: int, n: int, rng: random.Random | None = None) -> bool:
    """One Miller-Rabin round for odd ``n > 4`` where ``n - 1 = d * 2**r``."""
    rng = rng or random.Random()
    witness = rng.randint(2, n - 2)
    x = modular_exponent(witness, reverse_binary(d), n)
    if x in (1, n - 1):
        return True
    while d != n - 1:
        x = x * x % n
        d *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int, rounds: int, rng: random.Random | None = None) -> bool:
    """Miller-Rabin probabilistic primality test with ``rounds`` witnesses."""
    if n <= 4:
        return n in (2, 3)
    if n % 2 == 0:
        return False
    rng = rng or random.Random()
    d = n - 1
    while d % 2 == 0:
        d //= 2
    return all(miller_test(d, n, rng) for _ in range(rounds))