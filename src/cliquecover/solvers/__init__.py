"""
Reference solvers that do not use the combinatorial search engine.

They provide exact answers through MILP formulations and are used to
cross-check the backtracking and matching solvers.
"""

from .scipy_milp import (
    solve_max_clique_scipy,
    solve_mis_scipy,
    solve_vertex_cover_scipy,
    SCIPY_MILP_AVAILABLE
)

__all__ = [
    "solve_max_clique_scipy",
    "solve_mis_scipy",
    "solve_vertex_cover_scipy",
    "SCIPY_MILP_AVAILABLE"
]
