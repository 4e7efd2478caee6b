"""
Maximum independent set and exact minimum vertex cover via the complement graph.

This uses the relationship alpha(G) = omega(G_complement): a clique in the
complement has no two members adjacent in G. The minimum vertex cover is then
every vertex outside a maximum independent set.
"""

import logging
from typing import Optional

from .clique import find_maximum_clique
from .complement import complement_graph
from .config import SearchConfig
from .graph import Graph, undirected_only
from .vertex_set import VertexSet

logger = logging.getLogger(__name__)


@undirected_only
def find_maximum_independent_set(graph: Graph, config: Optional[SearchConfig] = None) -> Optional[VertexSet]:
    """
    Find a maximum independent set as a maximum clique of the complement.

    Args:
        graph: Undirected input graph.
        config: Optional search configuration passed to the clique engine.

    Returns:
        The independent set, or None for a directed or empty graph.
    """
    return find_maximum_clique(complement_graph(graph), config=config)


def cover_from_independent_set(graph: Graph, independent: VertexSet) -> VertexSet:
    """Every vertex of `graph` that is not in `independent`."""
    cover = VertexSet(graph.node_count)
    for v in range(graph.node_count):
        if v not in independent:
            cover.push(v)
    return cover


@undirected_only
def find_minimum_vertex_cover(graph: Graph, config: Optional[SearchConfig] = None) -> Optional[VertexSet]:
    """
    Find an exact minimum vertex cover as V minus a maximum independent set.

    Its size is n - alpha(G).

    Returns:
        The cover, or None for a directed or empty graph.
    """
    independent = find_maximum_independent_set(graph, config=config)
    if independent is None:
        return None
    cover = cover_from_independent_set(graph, independent)
    logger.debug("independent set of size %d gives cover of size %d", len(independent), len(cover))
    return cover
