"""
Tests for the NetworkX comparison benchmarking framework.
"""

import networkx as nx
import pytest

from cliquecover import Graph
from cliquecover.benchmarks import (
    NetworkXComparisonBenchmark,
    BenchmarkResult,
    run_algorithm_comparison,
    compute_approximation_ratios,
    generate_test_graphs,
    create_small_test_graphs,
    GraphType,
    ScalingConfig
)
from cliquecover.benchmarks.graph_generators import generate_bipartite_graphs


class TestGraphGenerators:
    """Test graph generation functions."""

    def test_create_small_test_graphs(self):
        graphs = create_small_test_graphs()

        assert len(graphs) > 0
        assert all(isinstance(G, nx.Graph) for G, desc in graphs)
        assert all(isinstance(desc, str) for G, desc in graphs)

        descriptions = [desc for G, desc in graphs]
        assert any("Path" in desc for desc in descriptions)
        assert any("Cycle" in desc for desc in descriptions)
        assert any("Bipartite" in desc for desc in descriptions)

    def test_generate_test_graphs(self):
        config = ScalingConfig(
            small_range=(5, 10),
            medium_range=(15, 20),
            large_range=(25, 30),
            step_size=5
        )

        graph_types = [GraphType.PATH, GraphType.ERDOS_RENYI]
        graphs = list(generate_test_graphs(config, graph_types))

        assert len(graphs) > 0
        for G, desc, category in graphs:
            assert isinstance(G, nx.Graph)
            assert desc.startswith("Path_") or desc.startswith("ER_")
            assert category in ["small", "medium", "large"]

    def test_bipartite_generator(self):
        for G, desc in generate_bipartite_graphs([6, 9]):
            assert nx.is_bipartite(G)
            assert desc.startswith("Bipartite_")


class TestBenchmark:
    """Test running algorithms through the benchmark."""

    def test_run_single_algorithm(self):
        benchmark = NetworkXComparisonBenchmark()
        result = benchmark.run("bron_kerbosch", nx.complete_graph(5), "K5")

        assert isinstance(result, BenchmarkResult)
        assert result.success
        assert result.valid
        assert result.set_size == 5
        assert result.vertex_set == [0, 1, 2, 3, 4]
        assert result.graph_description == "K5"

    def test_not_applicable(self):
        benchmark = NetworkXComparisonBenchmark()
        result = benchmark.run("vc_bipartite", nx.cycle_graph(5))
        assert not result.success
        assert result.set_size == 0

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            NetworkXComparisonBenchmark().run("dirac", nx.path_graph(3))

    def test_comparison_agrees_with_networkx(self):
        G = nx.petersen_graph()
        results = run_algorithm_comparison(G, "Petersen")

        assert not results["vc_bipartite"].success
        assert not results["nx_vc_bipartite"].success
        general = {k: r for k, r in results.items() if "bipartite" not in k}
        assert all(r.success and r.valid for r in general.values())
        assert results["bron_kerbosch"].set_size == results["nx_find_cliques"].set_size
        assert results["exhaustive_clique"].set_size == results["nx_find_cliques"].set_size
        assert results["mis_exact"].set_size == results["nx_mis_exact"].set_size == 4
        assert results["vc_exact"].set_size == 6
        assert results["vc_approx"].set_size <= 12

    def test_bipartite_comparison(self):
        G = nx.complete_bipartite_graph(3, 4)
        results = run_algorithm_comparison(
            G, "K(3,4)", algorithms=["vc_bipartite", "nx_vc_bipartite", "vc_exact", "vc_approx"]
        )
        sizes = {name: r.set_size for name, r in results.items()}
        assert sizes["vc_bipartite"] == sizes["nx_vc_bipartite"] == sizes["vc_exact"] == 3

        ratios = compute_approximation_ratios(results)
        assert ratios["vc_exact"] == 1.0
        assert ratios["vc_bipartite"] == 1.0
        assert 1.0 <= ratios["vc_approx"] <= 2.0

    def test_accepts_dense_graph(self):
        graph = Graph.from_edges(3, [(0, 1), (1, 2)])
        results = run_algorithm_comparison(graph, algorithms=["vc_approx", "nx_vc_approx"])
        assert results["vc_approx"].valid
        assert results["nx_vc_approx"].valid

    def test_ratios_without_reference(self):
        assert compute_approximation_ratios({}) == {}
