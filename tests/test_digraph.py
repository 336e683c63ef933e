from listgame.digraph import Digraph


def _triangle(last_weight):
    d = Digraph()
    for _ in range(3):
        d.add_vertex()
    d.add_edge(0, 1, 1.0)
    d.add_edge(1, 2, 1.0)
    d.add_edge(2, 0, last_weight)
    return d


def test_positive_cycle_has_no_negative_cycle():
    assert _triangle(1.0).bellman_ford() is False


def test_negative_cycle_detected():
    assert _triangle(-2.1).bellman_ford() is True


def test_ids_and_incidence():
    d = Digraph()
    assert [d.add_vertex() for _ in range(2)] == [0, 1]
    assert d.add_edge(0, 1, 2.5) == 0
    assert d.add_edge(1, 0, 1.0) == 1
    assert [e.id for e in d.vertices[0].outedges] == [0]
    assert [e.id for e in d.vertices[0].inedges] == [1]
    assert str(d) == "Graph has 2 vertices and 2 edges."


def test_empty_graph():
    assert Digraph().bellman_ford() is False