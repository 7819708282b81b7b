"""Numeric helpers: root finding, series, derivatives, conversions and volumes."""

from __future__ import annotations

import math
from collections.abc import Callable

RealFunction = Callable[[float], float]


def equation(x: float) -> float:
    """The sample equation ``10 - x**2``."""
    return 10 - x * x


def bisection(a: float, b: float, f: RealFunction = equation) -> float:
    """Find a root of ``f`` in ``[a, b]`` to within 0.01 by bisection."""
    if f(a) * f(b) >= 0:
        raise ValueError("f(a) and f(b) must have opposite signs")
    c = a
    while b - a >= 0.01:
        c = (a + b) / 2
        fc = f(c)
        if fc == 0.0:
            break
        if fc * f(a) < 0:
            b = c
        else:
            a = c
    return c


def factorial(n: int) -> int:
    """Return ``n!`` for non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial is defined for non-negative integers only")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def cosine(angle: float, terms: int = 4) -> float:
    """Approximate ``cos(angle)`` with the Taylor series up to index ``terms``."""
    return sum(
        (-1) ** n * angle ** (2 * n) / factorial(2 * n) for n in range(terms + 1)
    )


def derivative(f: RealFunction, x: float, h: float = 1e-5) -> float:
    """Forward-difference approximation of ``f'(x)``."""
    return (f(x + h) - f(x)) / h


def poly_derivative(x: float, n: int) -> float:
    """Exact derivative of ``x**n``."""
    return n * x ** (n - 1)


def sum_derivative(f: RealFunction, g: RealFunction, x: float) -> float:
    """Derivative of ``f + g`` at ``x``."""
    return derivative(f, x) + derivative(g, x)


def product_derivative(f: RealFunction, g: RealFunction, x: float) -> float:
    """Derivative of ``f * g`` at ``x`` by the product rule."""
    return derivative(f, x) * g(x) + f(x) * derivative(g, x)


def chain_derivative(f: RealFunction, g: RealFunction, x: float) -> float:
    """Derivative of ``g(f(x))`` at ``x`` by the chain rule."""
    return derivative(g, f(x)) * derivative(f, x)


def radian_to_degree(radian: float) -> float:
    return radian * (180 / math.pi)


def degree_to_radian(degree: float) -> float:
    return degree * (math.pi / 180)


def radian_to_gradian(radian: float) -> float:
    return radian * (200 / math.pi)


def relu(x: float) -> float:
    """Rectified linear unit."""
    return x if x > 0.0 else 0.0


def sigmoid(x: float) -> float:
    """Logistic function, with values in (0, 1)."""
    return 1.0 / (1.0 + math.exp(-x))


def cube_volume(side: float) -> float:
    return side**3.0


def cuboid_volume(length: float, width: float, height: float) -> float:
    return length * width * height


def cone_volume(base_area: float, height: float) -> float:
    return base_area * height / 3.0


def cylinder_volume(radius: float, height: float) -> float:
    return math.pi * radius**2.0 * height


def sphere_volume(radius: float) -> float:
    return 4.0 / 3.0 * math.pi * radius**3.0


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, ...]:
    """Real roots of ``a*x**2 + b*x + c``.

    Two roots when the discriminant is positive, one when it is zero and
    none when the roots are imaginary.
    """
    if a == 0:
        raise ValueError("coefficient a must not be zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    if discriminant == 0:
        return (-b / (2 * a),)
    return ()