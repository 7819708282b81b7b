import pytest

from algoritma.graph import Graph


@pytest.fixture
def sample():
    graph = Graph(4)
    graph.add_edge(1, 2, 1)
    graph.add_edge(4, 1, 2)
    graph.add_edge(2, 3, 2)
    graph.add_edge(1, 3, 5)
    return graph


def test_source_case(sample):
    assert sample.shortest_distance(1, 3) == 3


def test_distance_to_self_is_zero(sample):
    for vertex in range(1, 5):
        assert sample.shortest_distance(vertex, vertex) == 0


def test_edges_are_directed(sample):
    assert sample.shortest_distance(3, 1) is None
    assert sample.shortest_distance(1, 4) is None


def test_path_through_several_edges(sample):
    assert sample.shortest_distance(4, 3) == 5


def test_triangle_inequality(sample):
    for a in range(1, 5):
        for b in range(1, 5):
            for c in range(1, 5):
                ab = sample.shortest_distance(a, b)
                bc = sample.shortest_distance(b, c)
                ac = sample.shortest_distance(a, c)
                if ab is not None and bc is not None:
                    assert ac is not None and ac <= ab + bc


def test_unknown_vertex_rejected(sample):
    with pytest.raises(ValueError):
        sample.shortest_distance(0, 1)
    with pytest.raises(ValueError):
        sample.add_edge(1, 5, 1)


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        Graph(0)