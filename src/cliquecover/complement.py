"""
Edge complement of an undirected graph.

A clique in the complement is an independent set in the source graph, which
is how the independent set and vertex cover solvers reuse the clique engine.
"""

import numpy as np

from .graph import Graph, undirected_only


@undirected_only
def complement_graph(graph: Graph) -> Graph:
    """
    Build the complement of an undirected graph.

    Edge (i, j), i != j, is present iff it is absent in `graph`; self-loops
    stay absent. The result is a new Graph and `graph` is not modified.

    Returns:
        The complement, or None for directed input.
    """
    inverted = ~graph.adjacency
    np.fill_diagonal(inverted, False)
    return Graph(inverted, directed=False)
