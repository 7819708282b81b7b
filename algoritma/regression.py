"""Simple linear regression and error metrics for predictions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def _check_pair(first: Sequence[float], second: Sequence[float]) -> None:
    if len(first) != len(second):
        raise ValueError("both sequences must have the same length")
    if not first:
        raise ValueError("data must not be empty")


@dataclass(frozen=True)
class RegressionStats:
    """Sums needed for a least-squares fit."""

    n: int
    sum_x: float
    sum_y: float
    sum_x_squared: float
    sum_y_squared: float
    sum_xy: float


def regression_stats(x: Sequence[float], y: Sequence[float]) -> RegressionStats:
    """Collect the sums of x, y, their squares and their products."""
    _check_pair(x, y)
    return RegressionStats(
        n=len(x),
        sum_x=float(sum(x)),
        sum_y=float(sum(y)),
        sum_x_squared=float(sum(a * a for a in x)),
        sum_y_squared=float(sum(b * b for b in y)),
        sum_xy=float(sum(a * b for a, b in zip(x, y))),
    )


def line_equation(x: Sequence[float], y: Sequence[float]) -> tuple[float, float]:
    """Least-squares line through the points, as ``(intercept, slope)``."""
    stats = regression_stats(x, y)
    denominator = stats.n * stats.sum_x_squared - stats.sum_x**2
    if denominator == 0:
        raise ValueError("x values must not all be equal")
    intercept = (
        stats.sum_y * stats.sum_x_squared - stats.sum_x * stats.sum_xy
    ) / denominator
    slope = (stats.n * stats.sum_xy - stats.sum_x * stats.sum_y) / denominator
    return intercept, slope


def linear_regression(x: Sequence[float], y: Sequence[float]) -> tuple[float, float]:
    """Fit ``y = intercept + slope * x`` from sums of squares; returns both."""
    stats = regression_stats(x, y)
    ss_xy = stats.sum_xy - stats.sum_x * stats.sum_y / stats.n
    ss_xx = stats.sum_x_squared - stats.sum_x**2 / stats.n
    if ss_xx == 0:
        raise ValueError("x values must not all be equal")
    slope = ss_xy / ss_xx
    intercept = (stats.sum_y - slope * stats.sum_x) / stats.n
    return intercept, slope


def mean_absolute_error(
    predicted: Sequence[float], actual: Sequence[float]
) -> float:
    """Mean of the absolute differences."""
    _check_pair(predicted, actual)
    return sum(abs(a - p) for p, a in zip(predicted, actual)) / len(predicted)


def mean_absolute_percentage_error(
    predicted: Sequence[float], actual: Sequence[float]
) -> float:
    """Mean of the absolute differences relative to the actual values."""
    _check_pair(predicted, actual)
    return sum(abs((a - p) / a) for p, a in zip(predicted, actual)) / len(predicted)


def mean_squared_error(
    predicted: Sequence[float], actual: Sequence[float]
) -> float:
    """Mean of the squared differences."""
    _check_pair(predicted, actual)
    return sum((p - a) ** 2 for p, a in zip(predicted, actual)) / len(predicted)