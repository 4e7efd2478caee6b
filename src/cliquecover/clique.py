"""
Clique search engine.

Two backtracking enumerators share the same three roles:

- current: the clique being built (a VertexSet, pushed and popped in LIFO order)
- candidates: vertices that can still extend `current`
- excluded: vertices whose branches have already been explored

`find_all_cliques` explores every candidate and therefore reports every
clique, maximal or not, possibly several times. `find_maximal_cliques` is
Bron-Kerbosch with pivoting: it branches only on candidates outside the
pivot's neighbourhood and reports each maximal clique exactly once.

candidates and excluded are rebuilt as tuples at every level, so a child call
never changes what its parent sees.
"""

import logging
from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import SearchBudget, SearchConfig, recursion_limit
from .graph import Graph, undirected_only
from .vertex_set import VertexSet

logger = logging.getLogger(__name__)


def _choose_pivot(
    neighbors: Sequence[frozenset],
    candidates: Tuple[int, ...],
    excluded: Tuple[int, ...]
) -> int:
    """
    Vertex of candidates + excluded with the most neighbours among candidates.

    Ties go to the first vertex scanned, candidates before excluded.
    """
    pivot = -1
    best = -1
    for u in chain(candidates, excluded):
        count = len(neighbors[u].intersection(candidates))
        if count > best:
            best = count
            pivot = u
    return pivot


def _extend_all(
    neighbors: Sequence[frozenset],
    current: VertexSet,
    candidates: Tuple[int, ...],
    excluded: Tuple[int, ...],
    found: List[VertexSet],
    budget: Optional[SearchBudget]
) -> None:
    if budget is not None:
        budget.check()
    if current:
        found.append(current.copy())

    remaining = list(candidates)
    explored = list(excluded)
    while remaining:
        v = remaining[0]
        adjacent = neighbors[v]
        current.push(v)
        _extend_all(
            neighbors,
            current,
            tuple(w for w in remaining if w in adjacent),
            tuple(w for w in explored if w in adjacent),
            found,
            budget
        )
        current.pop()
        # Move v from candidates to excluded for the remaining siblings
        del remaining[0]
        explored.append(v)


def _extend_maximal(
    neighbors: Sequence[frozenset],
    current: VertexSet,
    candidates: Tuple[int, ...],
    excluded: Tuple[int, ...],
    found: List[VertexSet],
    budget: Optional[SearchBudget]
) -> None:
    if budget is not None:
        budget.check()
    if not candidates and not excluded:
        # An empty graph has no cliques, not an empty one
        if current:
            found.append(current.copy())
        return

    pivot = _choose_pivot(neighbors, candidates, excluded)
    pivot_neighbors = neighbors[pivot]
    branches = [v for v in candidates if v not in pivot_neighbors]

    remaining = list(candidates)
    explored = list(excluded)
    for v in branches:
        adjacent = neighbors[v]
        current.push(v)
        _extend_maximal(
            neighbors,
            current,
            tuple(w for w in remaining if w in adjacent),
            tuple(w for w in explored if w in adjacent),
            found,
            budget
        )
        current.pop()
        remaining.remove(v)
        explored.append(v)


def _run(
    extend,
    graph: Graph,
    current: Optional[Iterable[int]],
    candidates: Optional[Iterable[int]],
    excluded: Optional[Iterable[int]],
    config: Optional[SearchConfig]
) -> List[VertexSet]:
    config = config or SearchConfig()
    n = graph.node_count
    start = VertexSet(n, current)
    pool = tuple(range(n)) if candidates is None else tuple(candidates)
    seen = tuple(excluded) if excluded is not None else ()

    found: List[VertexSet] = []
    with recursion_limit(n, config.recursion_headroom):
        extend(graph.neighbor_sets, start, pool, seen, found, config.budget())
    logger.debug("%s found %d cliques on %r", extend.__name__, len(found), graph)
    return found


@undirected_only
def find_all_cliques(
    graph: Graph,
    current: Optional[Iterable[int]] = None,
    candidates: Optional[Iterable[int]] = None,
    excluded: Optional[Iterable[int]] = None,
    config: Optional[SearchConfig] = None
) -> List[VertexSet]:
    """
    Enumerate cliques by exhaustive backtracking.

    Every clique reachable from the starting state is reported, including
    non-maximal ones, and the same clique may appear more than once.

    Args:
        graph: Undirected input graph.
        current: Starting clique (default empty).
        candidates: Vertices that may extend it (default all vertices).
        excluded: Vertices already explored (default none).
        config: Optional search configuration (time limit, recursion headroom).

    Returns:
        List of cliques, or None for directed input.

    Raises:
        SearchBudgetExceeded: If config.time_limit runs out.
    """
    return _run(_extend_all, graph, current, candidates, excluded, config)


@undirected_only
def find_maximal_cliques(
    graph: Graph,
    current: Optional[Iterable[int]] = None,
    candidates: Optional[Iterable[int]] = None,
    excluded: Optional[Iterable[int]] = None,
    config: Optional[SearchConfig] = None
) -> List[VertexSet]:
    """
    Enumerate maximal cliques with pivoted Bron-Kerbosch.

    Each maximal clique is reported exactly once; no reported clique is a
    subset of another. Isolated vertices are maximal cliques of size one.

    Args:
        graph: Undirected input graph.
        current: Starting clique (default empty).
        candidates: Vertices that may extend it (default all vertices).
        excluded: Vertices already explored (default none).
        config: Optional search configuration (time limit, recursion headroom).

    Returns:
        List of maximal cliques in discovery order, or None for directed input.

    Raises:
        SearchBudgetExceeded: If config.time_limit runs out.
    """
    return _run(_extend_maximal, graph, current, candidates, excluded, config)


@undirected_only
def find_maximum_clique(graph: Graph, config: Optional[SearchConfig] = None) -> Optional[VertexSet]:
    """
    Find one maximum clique.

    Runs the pivoted enumerator over the whole graph and returns the first
    clique of largest size in discovery order.

    Returns:
        The clique, or None for an empty or directed graph.
    """
    maximal = find_maximal_cliques(graph, config=config)
    best = None
    for clique in maximal:
        if best is None or len(clique) > len(best):
            best = clique
    if best is None:
        logger.debug("no clique in %r", graph)
    return best


def clique_number(graph, config: Optional[SearchConfig] = None) -> int:
    """Size of a maximum clique (0 for an empty or directed graph)."""
    clique = find_maximum_clique(graph, config=config)
    return 0 if clique is None else len(clique)


@dataclass
class CliqueAnalysis:
    """Summary of one clique enumeration run."""
    algorithm: str
    clique_count: int
    max_clique_size: int
    nontrivial_cliques: List[VertexSet] = field(default_factory=list)

    def format(self) -> str:
        lines = [
            "Clique Analysis:",
            f"  Maximum clique size: {self.max_clique_size}",
            "  Non-trivial cliques (size >= 3):",
        ]
        for clique in self.nontrivial_cliques:
            lines.append("    Clique: " + " ".join(str(v) for v in clique))
        return "\n".join(lines)


@undirected_only
def analyze_cliques(
    graph: Graph,
    algorithm: Optional[str] = None,
    config: Optional[SearchConfig] = None
) -> CliqueAnalysis:
    """
    Enumerate cliques and summarize them.

    Args:
        graph: Undirected input graph.
        algorithm: "maximal" (pivoted Bron-Kerbosch) or "all" (exhaustive
            backtracking). Defaults to config.clique_algorithm.
        config: Optional search configuration.

    Returns:
        A CliqueAnalysis, or None for directed input.
    """
    config = config or SearchConfig()
    algorithm = algorithm or config.clique_algorithm
    if algorithm == "all":
        cliques = find_all_cliques(graph, config=config)
    elif algorithm == "maximal":
        cliques = find_maximal_cliques(graph, config=config)
    else:
        raise ValueError(f"Unknown clique algorithm: {algorithm!r}")

    return CliqueAnalysis(
        algorithm=algorithm,
        clique_count=len(cliques),
        max_clique_size=max((len(c) for c in cliques), default=0),
        nontrivial_cliques=[c for c in cliques if len(c) >= 3],
    )
