"""
Cross-validation of the search engine against the SciPy MILP reference solvers.
"""

import networkx as nx
import pytest

from cliquecover import (
    Graph,
    find_maximum_clique,
    find_maximum_independent_set,
    vertex_cover_approx,
    vertex_cover_bipartite,
    vertex_cover_exact_via_mis,
    verify_clique,
    verify_independent_set,
    verify_vertex_cover
)
from cliquecover.solvers import (
    SCIPY_MILP_AVAILABLE,
    solve_max_clique_scipy,
    solve_mis_scipy,
    solve_vertex_cover_scipy
)


@pytest.mark.skipif(not SCIPY_MILP_AVAILABLE, reason="SciPy MILP not available")
class TestScipyMILPSolvers:
    """Test the SciPy MILP solvers and compare them with the search engine."""

    def test_known_sizes(self, small_test_graphs):
        for name, graph, expected in small_test_graphs:
            clique = solve_max_clique_scipy(graph)
            assert verify_clique(graph, clique), f"Invalid clique found for {name} with SciPy"
            assert len(clique) == expected["clique_size"], \
                f"Wrong clique size for {name} with SciPy: got {len(clique)}, expected {expected['clique_size']}"

            mis = solve_mis_scipy(graph)
            assert verify_independent_set(graph, mis), f"Invalid MIS found for {name} with SciPy"
            assert len(mis) == expected["mis_size"], \
                f"Wrong MIS size for {name} with SciPy: got {len(mis)}, expected {expected['mis_size']}"

    def test_trivial_graphs(self):
        assert solve_mis_scipy(Graph.empty(0)) == set()
        assert solve_mis_scipy(Graph.empty(3)) == {0, 1, 2}
        assert solve_max_clique_scipy(Graph.empty(0)) == set()
        assert solve_vertex_cover_scipy(Graph.empty(4)) == set()

    def test_search_engine_agrees(self, medium_test_graphs):
        for name, G in medium_test_graphs:
            graph = Graph.from_networkx(G)
            assert len(find_maximum_clique(graph)) == len(solve_max_clique_scipy(graph)), name
            assert len(find_maximum_independent_set(graph)) == len(solve_mis_scipy(graph)), name

            optimum = solve_vertex_cover_scipy(graph)
            assert verify_vertex_cover(graph, optimum), name
            assert len(vertex_cover_exact_via_mis(graph)) == len(optimum), name
            assert len(vertex_cover_approx(graph)) <= 2 * len(optimum), name

    def test_bipartite_agrees(self, bipartite_test_graphs):
        for name, G in bipartite_test_graphs:
            assert len(vertex_cover_bipartite(G)) == len(solve_vertex_cover_scipy(G)), name

    def test_random_graphs(self):
        for seed in range(5):
            G = nx.erdos_renyi_graph(14, 0.3, seed=seed)
            assert len(vertex_cover_exact_via_mis(G)) == len(solve_vertex_cover_scipy(G))
