"""
Minimum vertex cover solvers.

- "exact": V minus a maximum independent set (exponential, any graph)
- "bipartite": König's theorem via Hopcroft-Karp (polynomial, bipartite only)
- "approx": greedy maximal matching, at most twice the optimum (linear)
"""

import logging
from typing import Optional

from .bipartite import vertex_cover_bipartite
from .clique import find_maximum_clique
from .complement import complement_graph
from .config import SearchConfig
from .graph import Graph, undirected_only
from .independent_set import cover_from_independent_set
from .vertex_set import VertexSet

logger = logging.getLogger(__name__)

VERTEX_COVER_METHODS = ("exact", "bipartite", "approx")


@undirected_only
def vertex_cover_exact_via_mis(graph: Graph, config: Optional[SearchConfig] = None) -> Optional[VertexSet]:
    """
    Exact minimum vertex cover through the complement graph.

    A maximum clique of the complement is a maximum independent set of
    `graph`; every vertex outside it forms the cover.

    Returns:
        The cover, or None for a directed or empty graph.
    """
    independent = find_maximum_clique(complement_graph(graph), config=config)
    if independent is None:
        return None
    return cover_from_independent_set(graph, independent)


@undirected_only
def vertex_cover_approx(graph: Graph) -> VertexSet:
    """
    2-approximate vertex cover from a greedy maximal matching.

    Vertices are visited in index order; each uncovered vertex takes its
    first uncovered neighbour and both endpoints join the cover. Every
    matching edge needs at least one vertex of any cover, so the result is
    at most twice the optimum.

    Returns:
        The cover (empty for an edgeless graph), or None for directed input.
    """
    n = graph.node_count
    covered = [False] * n
    cover = VertexSet(n)

    for u in range(n):
        if covered[u]:
            continue
        for v in graph.neighbors(u):
            if not covered[v]:
                covered[u] = covered[v] = True
                cover.push(u)
                cover.push(v)
                break

    logger.debug("greedy matching picked %d edges", len(cover) // 2)
    return cover


def solve_vertex_cover(graph, method: str = "exact", config: Optional[SearchConfig] = None) -> Optional[VertexSet]:
    """
    Minimum vertex cover by the chosen method.

    Args:
        graph: Undirected Graph or networkx graph.
        method: "exact", "bipartite" or "approx".
        config: Search configuration for the exact method.

    Returns:
        The cover, or None when the method cannot handle the graph
        (directed input, non-bipartite graph for "bipartite", empty graph
        for "exact").
    """
    if method == "exact":
        return vertex_cover_exact_via_mis(graph, config=config)
    if method == "bipartite":
        return vertex_cover_bipartite(graph)
    if method == "approx":
        return vertex_cover_approx(graph)
    raise ValueError(f"Unknown vertex cover method: {method!r}, expected one of {VERTEX_COVER_METHODS}")
