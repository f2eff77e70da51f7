import pytest

from dsworkshop.graphcut.cut import comb_amount, minimum_cut, to_dot, to_dot_all_removed
from dsworkshop.graphcut.matrix import AdjacencyMatrix


def _graph(size, edges):
    matrix = AdjacencyMatrix(size)
    for v1, v2 in edges:
        matrix.connect(v1, v2)
    return matrix


def test_comb_amount_value_and_symmetry():
    assert comb_amount(4, 2) == 6
    for k in range(7):
        assert comb_amount(6, k) == comb_amount(6, 6 - k)
    assert comb_amount(5, 0) == 1


def test_comb_amount_negative():
    with pytest.raises(ValueError):
        comb_amount(-1, 0)


def test_path_cut_removes_first_edge():
    matrix = _graph(3, [(0, 1), (1, 2)])
    result = minimum_cut(matrix)
    assert result.edges() == [(1, 2)]
    assert not result.is_connected()
    assert matrix.edges() == [(0, 1), (1, 2)]


def test_triangle_needs_two_removals():
    matrix = _graph(3, [(0, 1), (1, 2), (0, 2)])
    result = minimum_cut(matrix)
    assert not result.is_connected()
    assert len(matrix.edges()) - len(result.edges()) == 2
    assert set(result.edges()) <= set(matrix.edges())


def test_complete_graph_cut_not_above_min_degree():
    edges = [(a, b) for a in range(5) for b in range(a + 1, 5)]
    matrix = _graph(5, edges)
    result = minimum_cut(matrix)
    removed = len(edges) - len(result.edges())
    assert not result.is_connected()
    assert removed <= 4


def test_disconnected_graph_returned_unchanged():
    matrix = _graph(4, [(0, 1), (2, 3)])
    result = minimum_cut(matrix)
    assert result.edges() == matrix.edges()


def test_single_vertex_has_no_cut():
    assert minimum_cut(AdjacencyMatrix(1)) is None


def test_to_dot_marks_removed_edges():
    matrix = _graph(3, [(0, 1), (1, 2)])
    result = minimum_cut(matrix)
    text = to_dot(matrix, result)
    assert text == (
        "graph {\n0 -- 1[color=green,penwidth=3.0];\n0;\n1 -- 2;\n1;\n2;\n}\n"
    )
    assert matrix.has_edge(1, 0)


def test_to_dot_all_removed():
    matrix = _graph(2, [(0, 1)])
    assert to_dot_all_removed(matrix) == (
        "graph {\n0 -- 1[color=green,penwidth=3.0];\n0;\n1;\n}\n"
    )


def test_to_dot_size_mismatch():
    with pytest.raises(ValueError):
        to_dot(AdjacencyMatrix(2), AdjacencyMatrix(3))