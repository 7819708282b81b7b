"""k-nearest-neighbour classification with Euclidean distance."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError("vectors must have the same length")
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


class KNearestNeighbours:
    """Classifies a sample by the most frequent label among its nearest points."""

    def __init__(
        self, features: Sequence[Sequence[float]], labels: Sequence[int]
    ) -> None:
        if len(features) != len(labels):
            raise ValueError("features and labels must have the same length")
        self.features = [tuple(row) for row in features]
        self.labels = list(labels)

    def predict(self, sample: Sequence[float], k: int) -> int:
        """Most frequent label among the ``k`` training points closest to ``sample``.

        Equal distances are ordered by label; equal frequencies go to the
        label met first among the nearest points.
        """
        if not 1 <= k <= len(self.features):
            raise ValueError("k must be between 1 and the number of training points")
        distances = sorted(
            (euclidean_distance(row, sample), label)
            for row, label in zip(self.features, self.labels)
        )
        votes = Counter(label for _, label in distances[:k])
        return votes.most_common(1)[0][0]