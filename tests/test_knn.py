import math

import pytest

from algoritma.knn import KNearestNeighbours, euclidean_distance

X1 = [[0.0, 0.0], [0.25, 0.25], [0.0, 0.5], [0.5, 0.5], [1.0, 0.5], [1.0, 1.0]]
Y1 = [1, 1, 1, 1, 2, 2]


def test_source_case():
    model = KNearestNeighbours(X1, Y1)
    assert model.predict([1.2, 1.2], 2) == 2


def test_training_point_with_k_one_gets_own_label():
    model = KNearestNeighbours(X1, Y1)
    assert [model.predict(row, 1) for row in X1] == Y1


def test_all_points_vote_majority():
    model = KNearestNeighbours(X1, Y1)
    assert model.predict([1.2, 1.2], len(X1)) == 1


def test_distance_values():
    assert euclidean_distance([0, 0], [3, 4]) == 5.0
    assert euclidean_distance([1, 2, 3], [1, 2, 3]) == 0.0


def test_distance_is_symmetric():
    a, b = [0.5, -1.0, 2.0], [3.0, 0.25, -4.0]
    assert euclidean_distance(a, b) == euclidean_distance(b, a)
    assert euclidean_distance(a, b) == pytest.approx(math.dist(a, b))


def test_distance_length_mismatch():
    with pytest.raises(ValueError):
        euclidean_distance([1, 2], [1])


def test_invalid_k():
    model = KNearestNeighbours(X1, Y1)
    with pytest.raises(ValueError):
        model.predict([0, 0], 0)
    with pytest.raises(ValueError):
        model.predict([0, 0], len(X1) + 1)


def test_mismatched_training_data():
    with pytest.raises(ValueError):
        KNearestNeighbours(X1, Y1[:-1])