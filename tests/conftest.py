"""
Pytest configuration and common fixtures for the test suite.
"""

import os
import sys

import networkx as nx
import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cliquecover import Graph


@pytest.fixture
def k4():
    """Complete graph on 4 vertices."""
    return Graph.from_networkx(nx.complete_graph(4))


@pytest.fixture
def path4():
    """Path 0-1-2-3."""
    return Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def edgeless5():
    return Graph.empty(5)


@pytest.fixture
def k23():
    """Complete bipartite K(2,3) with left {0, 1} and right {2, 3, 4}."""
    return Graph.from_edges(5, [(u, v) for u in (0, 1) for v in (2, 3, 4)])


@pytest.fixture
def c5():
    """Odd cycle 0-1-2-3-4-0."""
    return Graph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])


@pytest.fixture
def directed_graph():
    return Graph.from_edges(3, [(0, 1), (1, 2)], directed=True)


@pytest.fixture
def small_test_graphs():
    """Fixture providing a collection of small test graphs with known optima."""
    graphs = []

    # Triangle (K3) - clique size 3, MIS size 1
    graphs.append(("Triangle K3", nx.complete_graph(3), {"clique_size": 3, "mis_size": 1}))

    # Square (4-cycle) - clique size 2, MIS size 2
    graphs.append(("4-cycle", nx.cycle_graph(4), {"clique_size": 2, "mis_size": 2}))

    # Path of 4 nodes - clique size 2, MIS size 2
    graphs.append(("4-path", nx.path_graph(4), {"clique_size": 2, "mis_size": 2}))

    # Complete graph K4 - clique size 4, MIS size 1
    graphs.append(("Complete K4", nx.complete_graph(4), {"clique_size": 4, "mis_size": 1}))

    # Star graph (5 nodes) - clique size 2, MIS size 4
    graphs.append(("Star 5 nodes", nx.star_graph(4), {"clique_size": 2, "mis_size": 4}))

    # Petersen graph - clique size 2, MIS size 4
    graphs.append(("Petersen", nx.petersen_graph(), {"clique_size": 2, "mis_size": 4}))

    return graphs


@pytest.fixture
def medium_test_graphs():
    """Fixture providing medium-sized test graphs."""
    graphs = []
    graphs.append(("Petersen", nx.petersen_graph()))
    graphs.append(("Wheel 8", nx.wheel_graph(8)))
    graphs.append(("Grid 3x3", nx.convert_node_labels_to_integers(nx.grid_2d_graph(3, 3))))
    graphs.append(("Random G(10,0.3)", nx.erdos_renyi_graph(10, 0.3, seed=42)))
    graphs.append(("Random G(12,0.5)", nx.erdos_renyi_graph(12, 0.5, seed=123)))
    return graphs


@pytest.fixture
def bipartite_test_graphs():
    """Bipartite graphs, including disconnected and isolated-vertex cases."""
    graphs = []
    graphs.append(("K(2,3)", nx.complete_bipartite_graph(2, 3)))
    graphs.append(("Path 6", nx.path_graph(6)))
    graphs.append(("Cycle 8", nx.cycle_graph(8)))
    graphs.append(("Star 6", nx.star_graph(5)))
    graphs.append(("Grid 3x4", nx.convert_node_labels_to_integers(nx.grid_2d_graph(3, 4))))
    graphs.append(("Random bipartite 5+6",
                   nx.Graph(nx.bipartite.random_graph(5, 6, 0.4, seed=7))))
    disjoint = nx.disjoint_union(nx.path_graph(3), nx.complete_bipartite_graph(3, 3))
    disjoint.add_node(disjoint.number_of_nodes())
    graphs.append(("Disjoint + isolated", disjoint))
    return graphs


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
