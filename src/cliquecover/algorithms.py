"""
Verification helpers and brute-force reference solvers.

The brute-force solvers check every vertex subset from largest to smallest
(or smallest to largest for covers). They are only practical for small
graphs but serve as ground truth for testing.
"""

from itertools import combinations
from typing import Iterable, Set

from .graph import GraphLike, as_graph


def verify_clique(graph: GraphLike, node_set: Iterable[int]) -> bool:
    """
    Verify that a set of nodes forms a clique.

    Args:
        graph: Graph or networkx graph.
        node_set: Vertex indices to verify.

    Returns:
        True if every pair of nodes is adjacent, False otherwise.
    """
    graph = as_graph(graph)
    for u, v in combinations(list(node_set), 2):
        if not graph.has_edge(u, v):
            return False
    return True


def verify_independent_set(graph: GraphLike, node_set: Iterable[int]) -> bool:
    """
    Verify that a set of nodes forms an independent set.

    Returns:
        True if no two nodes in the set are adjacent, False otherwise.
    """
    graph = as_graph(graph)
    for u, v in combinations(list(node_set), 2):
        if graph.has_edge(u, v):
            return False
    return True


def verify_vertex_cover(graph: GraphLike, node_set: Iterable[int]) -> bool:
    """
    Verify that a set of nodes touches every edge.
    """
    graph = as_graph(graph)
    chosen = set(node_set)
    return all(u in chosen or v in chosen for u, v in graph.edges())


def is_maximal_clique(graph: GraphLike, node_set: Iterable[int]) -> bool:
    """True if `node_set` is a clique that no outside vertex can extend."""
    graph = as_graph(graph)
    members = list(node_set)
    if not verify_clique(graph, members):
        return False
    chosen = set(members)
    for w in range(graph.node_count):
        if w in chosen:
            continue
        if all(graph.has_edge(w, v) for v in members):
            return False
    return True


def find_max_clique_brute_force(graph: GraphLike) -> Set[int]:
    """
    Find a Maximum Clique by checking all vertex subsets, largest first.

    Returns:
        A set of vertex indices forming a maximum clique (empty for an empty graph).
    """
    graph = as_graph(graph)
    nodes = list(range(graph.node_count))

    for k in range(len(nodes), 0, -1):
        for combo in combinations(nodes, k):
            if verify_clique(graph, combo):
                return set(combo)
    return set()


def find_mis_brute_force(graph: GraphLike) -> Set[int]:
    """
    Find a Maximum Independent Set by checking all vertex subsets, largest first.
    """
    graph = as_graph(graph)
    nodes = list(range(graph.node_count))

    for k in range(len(nodes), 0, -1):
        for combo in combinations(nodes, k):
            if verify_independent_set(graph, combo):
                return set(combo)
    return set()


def find_min_vertex_cover_brute_force(graph: GraphLike) -> Set[int]:
    """
    Find a Minimum Vertex Cover by checking all vertex subsets, smallest first.
    """
    graph = as_graph(graph)
    nodes = list(range(graph.node_count))

    for k in range(len(nodes) + 1):
        for combo in combinations(nodes, k):
            if verify_vertex_cover(graph, combo):
                return set(combo)
    return set(nodes)
