"""Planar geometry: orientation of point triples and Graham scan convex hull."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


class Orientation(IntEnum):
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def squared_distance(a: Point, b: Point) -> int:
    """Square of the distance between two points."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """Orientation of the ordered triple ``(p, q, r)``."""
    value = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if value == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if value > 0 else Orientation.COUNTERCLOCKWISE


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Vertices of the convex hull, found by Graham scan.

    The hull starts from the last point pushed and ends at the lowest
    (then leftmost) point. Fewer than three non-collinear directions give
    an empty list.
    """
    items = list(points)
    if not items:
        return []
    lowest = min(range(len(items)), key=lambda i: (items[i].y, items[i].x))
    items[0], items[lowest] = items[lowest], items[0]
    anchor = items[0]

    def compare(a: Point, b: Point) -> int:
        turn = orientation(anchor, a, b)
        if turn == Orientation.COLLINEAR:
            return -1 if squared_distance(anchor, b) >= squared_distance(anchor, a) else 1
        return -1 if turn == Orientation.COUNTERCLOCKWISE else 1

    rest = sorted(items[1:], key=cmp_to_key(compare))

    # Of points sharing a direction from the anchor keep only the farthest.
    kept = [anchor]
    for index, point in enumerate(rest):
        if (
            index + 1 < len(rest)
            and orientation(anchor, point, rest[index + 1]) == Orientation.COLLINEAR
        ):
            continue
        kept.append(point)

    if len(kept) < 3:
        return []

    stack = kept[:3]
    for point in kept[3:]:
        while (
            len(stack) > 1
            and orientation(stack[-2], stack[-1], point) != Orientation.COUNTERCLOCKWISE
        ):
            stack.pop()
        stack.append(point)
    return stack[::-1]