"""
Graph generators for benchmarking the clique, independent set and vertex cover solvers.
"""

import networkx as nx
import numpy as np
from typing import List, Tuple, Iterator, Optional
from enum import Enum
from dataclasses import dataclass


class GraphType(Enum):
    """Types of graphs for benchmarking."""
    ERDOS_RENYI = "erdos_renyi"
    BIPARTITE = "bipartite"
    PATH = "path"
    CYCLE = "cycle"
    COMPLETE = "complete"
    STAR = "star"
    GRID_2D = "grid_2d"


@dataclass
class ScalingConfig:
    """Configuration for graph size scaling."""
    small_range: Tuple[int, int] = (6, 12)
    medium_range: Tuple[int, int] = (16, 24)
    large_range: Tuple[int, int] = (30, 40)
    step_size: int = 2


def generate_erdos_renyi_graphs(
    sizes: List[int],
    probabilities: List[float] = [0.1, 0.3, 0.5, 0.7],
    seed: int = 42
) -> Iterator[Tuple[nx.Graph, str]]:
    """
    Generate Erdos-Renyi random graphs with various sizes and edge probabilities.

    Args:
        sizes: List of graph sizes (number of nodes).
        probabilities: List of edge probabilities.
        seed: Random seed for reproducibility.

    Yields:
        Tuple of (graph, description).
    """
    rng = np.random.RandomState(seed)

    for n in sizes:
        for p in probabilities:
            # Use different seed for each graph
            graph_seed = rng.randint(0, 100000)
            G = nx.erdos_renyi_graph(n, p, seed=graph_seed)
            desc = f"ER_n{n}_p{p:.1f}"
            yield G, desc


def generate_bipartite_graphs(
    sizes: List[int],
    probabilities: List[float] = [0.2, 0.5],
    seed: int = 42
) -> Iterator[Tuple[nx.Graph, str]]:
    """
    Generate random bipartite graphs, splitting n nodes into two near-equal sides.

    Node labels are 0..n-1 with the first side numbered first.

    Yields:
        Tuple of (graph, description).
    """
    rng = np.random.RandomState(seed)

    for n in sizes:
        if n < 2:
            continue
        left = n // 2
        right = n - left
        for p in probabilities:
            graph_seed = rng.randint(0, 100000)
            G = nx.bipartite.random_graph(left, right, p, seed=graph_seed)
            desc = f"Bipartite_n{n}_p{p:.1f}"
            yield nx.Graph(G), desc


def generate_structured_graphs(
    sizes: List[int]
) -> Iterator[Tuple[nx.Graph, str]]:
    """
    Generate structured graphs (path, cycle, complete, star, grid).

    Args:
        sizes: List of graph sizes.

    Yields:
        Tuple of (graph, description).
    """
    for n in sizes:
        yield nx.path_graph(n), f"Path_n{n}"

        if n >= 3:
            yield nx.cycle_graph(n), f"Cycle_n{n}"

        # Complete graphs have a single maximal clique; keep them small anyway
        if n <= 20:
            yield nx.complete_graph(n), f"Complete_n{n}"

        if n >= 4:
            # n-1 spokes + 1 center = n nodes
            yield nx.star_graph(n - 1), f"Star_n{n}"

        if n >= 4:
            rows = int(np.sqrt(n))
            cols = max(1, n // rows)
            G_grid = nx.convert_node_labels_to_integers(nx.grid_2d_graph(rows, cols))
            yield G_grid, f"Grid2D_n{G_grid.number_of_nodes()}"


def generate_test_graphs(
    config: ScalingConfig,
    graph_types: Optional[List[GraphType]] = None,
    seed: int = 42
) -> Iterator[Tuple[nx.Graph, str, str]]:
    """
    Generate a test suite of graphs for benchmarking.

    Args:
        config: Scaling configuration for graph sizes.
        graph_types: List of graph types to generate (None for all).
        seed: Random seed for reproducibility.

    Yields:
        Tuple of (graph, description, size_category).
    """
    if graph_types is None:
        graph_types = list(GraphType)

    small_sizes = list(range(config.small_range[0], config.small_range[1] + 1, config.step_size))
    medium_sizes = list(range(config.medium_range[0], config.medium_range[1] + 1, config.step_size * 2))
    large_sizes = list(range(config.large_range[0], config.large_range[1] + 1, config.step_size * 5))

    size_categories = [
        (small_sizes, "small"),
        (medium_sizes, "medium"),
        (large_sizes, "large")
    ]

    structured_prefix = {
        GraphType.PATH: "Path_",
        GraphType.CYCLE: "Cycle_",
        GraphType.COMPLETE: "Complete_",
        GraphType.STAR: "Star_",
        GraphType.GRID_2D: "Grid2D_",
    }

    for sizes, category in size_categories:
        if not sizes:
            continue

        for graph_type in graph_types:
            if graph_type == GraphType.ERDOS_RENYI:
                for G, desc in generate_erdos_renyi_graphs(sizes, seed=seed):
                    yield G, desc, category

            elif graph_type == GraphType.BIPARTITE:
                for G, desc in generate_bipartite_graphs(sizes, seed=seed):
                    yield G, desc, category

            else:
                prefix = structured_prefix[graph_type]
                for G, desc in generate_structured_graphs(sizes):
                    if desc.startswith(prefix):
                        yield G, desc, category


def create_small_test_graphs() -> List[Tuple[nx.Graph, str]]:
    """
    Create a small set of test graphs for validation and debugging.

    Returns:
        List of (graph, description) tuples.
    """
    graphs = []

    graphs.extend([
        (nx.path_graph(5), "Path_5"),
        (nx.cycle_graph(5), "Cycle_5"),
        (nx.cycle_graph(6), "Cycle_6"),
        (nx.complete_graph(4), "Complete_4"),
        (nx.complete_bipartite_graph(2, 3), "CompleteBipartite_2_3"),
        (nx.star_graph(6), "Star_7"),
        (nx.petersen_graph(), "Petersen_10"),
        (nx.erdos_renyi_graph(8, 0.3, seed=42), "ER_8_p0.3"),
    ])

    # Empty and trivial graphs
    graphs.extend([
        (nx.empty_graph(5), "Empty_5"),
        (nx.trivial_graph(), "Trivial_1"),
        (nx.path_graph(2), "Edge_2")
    ])

    return graphs
