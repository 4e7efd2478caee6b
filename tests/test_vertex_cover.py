"""
Tests for maximum independent set, exact / approximate vertex cover and the
duality relations between them.
"""

import networkx as nx
import pytest

from cliquecover import (
    Graph,
    complement_graph,
    find_maximum_clique,
    find_maximum_independent_set,
    find_minimum_vertex_cover,
    solve_vertex_cover,
    vertex_cover_approx,
    vertex_cover_exact_via_mis,
    verify_independent_set,
    verify_vertex_cover
)
from cliquecover.algorithms import find_min_vertex_cover_brute_force, find_mis_brute_force


class TestIndependentSet:

    def test_known_sizes(self, small_test_graphs):
        for name, G, expected in small_test_graphs:
            mis = find_maximum_independent_set(G)
            assert verify_independent_set(G, mis), name
            assert len(mis) == expected["mis_size"], name

    def test_duality_with_complement_clique(self, medium_test_graphs):
        for name, G in medium_test_graphs:
            graph = Graph.from_networkx(G)
            mis = find_maximum_independent_set(graph)
            assert len(mis) == len(find_maximum_clique(complement_graph(graph))), name

    def test_matches_brute_force(self):
        for seed in range(4):
            G = nx.erdos_renyi_graph(9, 0.35, seed=seed)
            assert len(find_maximum_independent_set(G)) == len(find_mis_brute_force(G))

    def test_empty_and_directed(self, directed_graph):
        assert find_maximum_independent_set(Graph.empty(0)) is None
        assert find_maximum_independent_set(directed_graph) is None


class TestExactVertexCover:

    def test_cover_is_complement_of_mis(self, medium_test_graphs):
        for name, G in medium_test_graphs:
            graph = Graph.from_networkx(G)
            cover = find_minimum_vertex_cover(graph)
            mis = find_maximum_independent_set(graph)
            assert verify_vertex_cover(graph, cover), name
            assert len(cover) == graph.node_count - len(mis), name
            assert not set(cover) & set(mis), name

    def test_both_exact_entry_points_agree(self, medium_test_graphs):
        for name, G in medium_test_graphs:
            assert vertex_cover_exact_via_mis(G) == find_minimum_vertex_cover(G), name

    def test_matches_brute_force(self):
        for seed in range(4):
            G = nx.erdos_renyi_graph(9, 0.35, seed=seed)
            cover = vertex_cover_exact_via_mis(G)
            assert len(cover) == len(find_min_vertex_cover_brute_force(G))

    def test_cover_in_index_order(self, path4):
        cover = vertex_cover_exact_via_mis(path4)
        assert cover.to_list() == sorted(cover.to_list())

    def test_empty_and_directed(self, directed_graph):
        assert vertex_cover_exact_via_mis(Graph.empty(0)) is None
        assert find_minimum_vertex_cover(directed_graph) is None
        assert vertex_cover_exact_via_mis(directed_graph) is None


class TestApproximateVertexCover:

    def test_path_picks_matching_edges(self, path4):
        assert vertex_cover_approx(path4).to_list() == [0, 1, 2, 3]

    def test_star_picks_one_edge(self):
        cover = vertex_cover_approx(nx.star_graph(5))
        assert cover.to_list() == [0, 1]

    def test_valid_and_within_factor_two(self, medium_test_graphs, small_test_graphs):
        graphs = [(name, G) for name, G in medium_test_graphs]
        graphs += [(name, G) for name, G, _ in small_test_graphs]
        for name, G in graphs:
            approx = vertex_cover_approx(G)
            exact = vertex_cover_exact_via_mis(G)
            assert verify_vertex_cover(G, approx), name
            assert len(approx) % 2 == 0, name
            assert len(approx) <= 2 * len(exact), name

    def test_edgeless_graph(self, edgeless5):
        assert len(vertex_cover_approx(edgeless5)) == 0
        assert len(vertex_cover_approx(Graph.empty(0))) == 0

    def test_directed_rejected(self, directed_graph):
        assert vertex_cover_approx(directed_graph) is None


class TestSolveVertexCover:

    @pytest.mark.parametrize("method", ["exact", "bipartite", "approx"])
    def test_methods_return_valid_covers(self, method, k23):
        cover = solve_vertex_cover(k23, method=method)
        assert verify_vertex_cover(k23, cover)

    def test_bipartite_method_on_odd_cycle(self, c5):
        assert solve_vertex_cover(c5, method="bipartite") is None

    def test_unknown_method(self, k23):
        with pytest.raises(ValueError):
            solve_vertex_cover(k23, method="greedy")
