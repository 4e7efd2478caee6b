"""
End-to-end scenarios on small graphs with hand-checked answers.
"""

from cliquecover import (
    bipartite_partition,
    find_maximum_clique,
    find_maximum_independent_set,
    hopcroft_karp,
    vertex_cover_approx,
    vertex_cover_bipartite,
    vertex_cover_exact_via_mis,
    verify_independent_set,
    verify_vertex_cover
)


def test_complete_graph_k4(k4):
    assert len(find_maximum_clique(k4)) == 4
    assert len(find_maximum_independent_set(k4)) == 1
    assert len(vertex_cover_exact_via_mis(k4)) == 3


def test_path_graph_p4(path4):
    assert len(find_maximum_clique(path4)) == 2
    mis = find_maximum_independent_set(path4)
    assert mis.to_frozenset() in ({0, 2}, {1, 3})
    assert len(mis) == 2
    exact = vertex_cover_exact_via_mis(path4)
    assert len(exact) == 2
    # Index-order greedy matching takes (0,1) and (2,3)
    approx = vertex_cover_approx(path4)
    assert verify_vertex_cover(path4, approx)
    assert len(approx) <= 2 * len(exact)


def test_edgeless_graph(edgeless5):
    assert len(find_maximum_clique(edgeless5)) == 1
    assert sorted(find_maximum_independent_set(edgeless5)) == [0, 1, 2, 3, 4]
    assert len(vertex_cover_exact_via_mis(edgeless5)) == 0
    assert len(vertex_cover_approx(edgeless5)) == 0
    assert len(vertex_cover_bipartite(edgeless5)) == 0


def test_complete_bipartite_k23(k23):
    assert bipartite_partition(k23) is not None
    assert hopcroft_karp(k23).size == 2
    assert len(vertex_cover_bipartite(k23)) == 2
    assert len(vertex_cover_exact_via_mis(k23)) == 2


def test_odd_cycle_c5(c5):
    assert bipartite_partition(c5) is None
    assert vertex_cover_bipartite(c5) is None
    assert len(find_maximum_clique(c5)) == 2
    mis = find_maximum_independent_set(c5)
    assert len(mis) == 2
    assert verify_independent_set(c5, mis)
    assert len(vertex_cover_exact_via_mis(c5)) == 3
    approx = vertex_cover_approx(c5)
    assert verify_vertex_cover(c5, approx)
    assert 3 <= len(approx) <= 6
