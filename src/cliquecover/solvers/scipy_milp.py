"""
MILP reference solvers for Maximum Independent Set, Maximum Clique and
Minimum Vertex Cover using SciPy.

These solvers use scipy.optimize.milp, which relies on the HiGHS backend.
They are independent of the combinatorial search engine and are used to
cross-check it.

Mathematical Formulations:
- MIS: maximize Σx_i subject to x_i + x_j ≤ 1 for each edge (i,j)
- Max Clique: maximize Σx_i subject to x_i + x_j ≤ 1 for each non-edge (i,j)
- Vertex Cover: minimize Σx_i subject to x_i + x_j ≥ 1 for each edge (i,j)
- Variables: x_i ∈ {0,1} for each vertex i

Note: scipy.milp minimizes, so we minimize -Σx_i to maximize Σx_i.
"""

import logging
from typing import List, Set, Tuple

import numpy as np

from ..complement import complement_graph
from ..exceptions import SolverUnavailableError
from ..graph import GraphLike, as_graph

try:
    from scipy.optimize import milp, OptimizeResult, Bounds, LinearConstraint
    from scipy.sparse import lil_matrix
    SCIPY_MILP_AVAILABLE = True
except ImportError:
    SCIPY_MILP_AVAILABLE = False
    milp = None
    OptimizeResult = None
    Bounds = None
    LinearConstraint = None
    lil_matrix = None

logger = logging.getLogger(__name__)


def _require_scipy():
    if not SCIPY_MILP_AVAILABLE:
        raise SolverUnavailableError(
            "scipy.optimize.milp is not available. Please upgrade SciPy to version 1.9.0 or later."
        )


def _edge_constraints(n: int, edges: List[Tuple[int, int]]):
    """Sparse matrix with one row per edge holding ones at both endpoints."""
    A = lil_matrix((len(edges), n), dtype=np.float64)
    for i, (u, v) in enumerate(edges):
        A[i, u] = 1
        A[i, v] = 1
    return A.tocsr()


def _solve_binary(n: int, c: np.ndarray, constraints, suppress_output: bool) -> Set[int]:
    options = {'disp': not suppress_output}
    res: OptimizeResult = milp(
        c=c,
        constraints=constraints,
        integrality=np.ones(n),
        bounds=Bounds(0, 1),
        options=options
    )
    if not res.success:
        raise RuntimeError(f"SciPy MILP optimization failed: {res.message}")

    # Values > 0.5 are considered selected
    return {i for i, val in enumerate(res.x) if val > 0.5}


def solve_mis_scipy(graph: GraphLike, suppress_output: bool = True) -> Set[int]:
    """
    Find the maximum independent set of an undirected graph with scipy.optimize.milp.

    Args:
        graph: Input graph
        suppress_output: Whether to suppress solver output

    Returns:
        Set of vertex indices forming the maximum independent set

    Raises:
        SolverUnavailableError: If scipy.optimize.milp is not available
        RuntimeError: If optimization fails
    """
    _require_scipy()
    graph = as_graph(graph)
    n = graph.node_count

    if n == 0:
        return set()
    edges = list(graph.edges())
    if not edges:
        # No edges means all nodes are independent
        return set(range(n))

    constraints = LinearConstraint(_edge_constraints(n, edges), -np.inf, np.ones(len(edges)))
    return _solve_binary(n, -np.ones(n), constraints, suppress_output)


def solve_max_clique_scipy(graph: GraphLike, suppress_output: bool = True) -> Set[int]:
    """
    Find the maximum clique of an undirected graph with scipy.optimize.milp.

    Solved as the maximum independent set of the complement graph.
    """
    _require_scipy()
    graph = as_graph(graph)
    if graph.node_count == 0:
        return set()
    return solve_mis_scipy(complement_graph(graph), suppress_output=suppress_output)


def solve_vertex_cover_scipy(graph: GraphLike, suppress_output: bool = True) -> Set[int]:
    """
    Find a minimum vertex cover of an undirected graph with scipy.optimize.milp.
    """
    _require_scipy()
    graph = as_graph(graph)
    n = graph.node_count
    edges = list(graph.edges())
    if not edges:
        return set()

    constraints = LinearConstraint(_edge_constraints(n, edges), np.ones(len(edges)), np.inf)
    cover = _solve_binary(n, np.ones(n), constraints, suppress_output)
    logger.debug("MILP vertex cover of size %d", len(cover))
    return cover


def independence_number_scipy(graph: GraphLike) -> int:
    return len(solve_mis_scipy(graph))


def clique_number_scipy(graph: GraphLike) -> int:
    return len(solve_max_clique_scipy(graph))
