import io

import pytest

from algoclase.graph import Graph, main


def _ring(size):
    graph = Graph()
    for node in range(size):
        graph.insert_node(node)
    for node in range(size):
        graph.insert_edge(node, (node + 1) % size)
    return graph


def test_insert_and_has_node():
    graph = Graph()
    graph.insert_node(3)
    assert graph.has_node(3)
    assert not graph.has_node(4)
    assert not graph.has_node(-1)


def test_duplicate_node_rejected():
    graph = Graph()
    graph.insert_node(1)
    with pytest.raises(ValueError):
        graph.insert_node(1)


def test_neighbors_most_recent_first():
    graph = Graph()
    for node in (0, 1, 2):
        graph.insert_node(node)
    graph.insert_edge(0, 1)
    graph.insert_edge(0, 2)
    assert graph.neighbors(0) == [2, 1]
    assert graph.neighbors(1) == [0]


def test_edge_errors():
    graph = Graph()
    graph.insert_node(0)
    with pytest.raises(ValueError):
        graph.insert_edge(0, 1)
    graph.insert_node(1)
    with pytest.raises(ValueError):
        graph.insert_edge(-1, 0)
    with pytest.raises(ValueError):
        graph.insert_edge(1, 1)
    with pytest.raises(KeyError):
        graph.insert_edge(0, 7)
    graph.insert_edge(0, 1)
    with pytest.raises(ValueError):
        graph.insert_edge(1, 0)


def test_delete_edge():
    graph = _ring(4)
    graph.delete_edge(0, 1)
    assert 1 not in graph.neighbors(0)
    assert 0 not in graph.neighbors(1)
    with pytest.raises(KeyError):
        graph.delete_edge(0, 1)


def test_delete_node_removes_its_edges():
    graph = _ring(4)
    graph.delete_node(0)
    assert not graph.has_node(0)
    assert 0 not in graph.neighbors(1)
    assert 0 not in graph.neighbors(3)
    with pytest.raises(KeyError):
        graph.delete_node(0)


@pytest.mark.parametrize("size", [3, 4, 5, 7])
def test_ring_cycle_size(size):
    assert _ring(size).max_cycle_size() == size


def test_path_has_no_cycle():
    graph = Graph()
    for node in range(5):
        graph.insert_node(node)
    for node in range(4):
        graph.insert_edge(node, node + 1)
    assert graph.max_cycle_size() == 0


def test_complete_graph_has_hamiltonian_cycle():
    graph = Graph()
    nodes = range(5)
    for node in nodes:
        graph.insert_node(node)
    for x in nodes:
        for y in nodes:
            if x < y:
                graph.insert_edge(x, y)
    assert graph.max_cycle_size() == len(graph)


def test_breaking_ring_removes_cycle():
    graph = _ring(6)
    graph.delete_edge(2, 3)
    assert graph.max_cycle_size() == 0


def test_main_prints_longest_cycle(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n4\n1 2\n"))
    assert main([]) == 0

    expected = Graph()
    for node in range(4):
        expected.insert_node(node)
    for x, y in ((0, 1), (0, 2), (1, 2), (3, 0), (3, 1)):
        expected.insert_edge(x, y)
    out = capsys.readouterr().out
    assert f"Caso #1: {expected.max_cycle_size()}" in out


def test_main_rejects_small_graph(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n"))
    with pytest.raises(ValueError):
        main([])