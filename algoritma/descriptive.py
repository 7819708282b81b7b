"""Descriptive statistics: mean, median, range, quartiles, variance, z-score."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Summary:
    """Basic statistics of a sample."""

    mean: float
    median: float
    value_range: float
    q1: float
    q3: float
    iqr: float


def _require_data(values: Sequence[float]) -> None:
    if not values:
        raise ValueError("data must not be empty")


def selection_sort(values: Sequence[float]) -> list[float]:
    """Return a new list with ``values`` in ascending order, by selection sort."""
    result = list(values)
    for position in range(len(result) - 1):
        smallest = min(
            range(position, len(result)), key=result.__getitem__
        )
        if smallest != position:
            result[position], result[smallest] = result[smallest], result[position]
    return result


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean."""
    _require_data(values)
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Middle value, or the average of the two middle values."""
    _require_data(values)
    ordered = selection_sort(values)
    half = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[half - 1] + ordered[half]) / 2.0
    return ordered[half]


def value_range(values: Sequence[float]) -> float:
    """Difference between the largest and the smallest value."""
    _require_data(values)
    ordered = selection_sort(values)
    return ordered[-1] - ordered[0]


def quartiles(values: Sequence[float]) -> tuple[float, float]:
    """First and third quartile, taken at positions ``n/4`` and ``3n/4``."""
    _require_data(values)
    ordered = selection_sort(values)
    n = len(ordered)
    return ordered[n // 4], ordered[3 * n // 4]


def describe(values: Sequence[float]) -> Summary:
    """Compute mean, median, range and interquartile range at once."""
    _require_data(values)
    q1, q3 = quartiles(values)
    return Summary(
        mean=mean(values),
        median=median(values),
        value_range=value_range(values),
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
    )


def variance(data: Sequence[float]) -> float:
    """Population variance: mean squared deviation from the mean."""
    _require_data(data)
    centre = mean(data)
    return sum((item - centre) ** 2 for item in data) / len(data)


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def z_score(data: Sequence[int], x: int) -> float:
    """Z-score of ``x``, which must be one of the values in ``data``.

    The mean is the integer mean (truncated toward zero) and the spread is
    the sum of absolute deviations divided by ``n - 1``.
    """
    _require_data(data)
    if x not in data:
        raise ValueError("x must be one of the data values")
    if len(data) < 2:
        raise ValueError("at least two data values are needed")
    centre = _truncating_div(sum(data), len(data))
    spread = sum(abs(item - centre) for item in data) / (len(data) - 1)
    if spread == 0:
        raise ValueError("data has no spread")
    return (x - centre) / spread