"""
Exact and approximate solvers for Maximum Clique, Maximum Independent Set
and Minimum Vertex Cover on dense undirected graphs.

This package implements:
1. Exhaustive and pivoted (Bron-Kerbosch) clique enumeration
2. Maximum independent set and exact vertex cover through the complement graph
3. A greedy maximal-matching 2-approximation for vertex cover
4. Exact bipartite vertex cover from a Hopcroft-Karp matching (König's theorem)

Every solver takes a `Graph` (or a networkx graph) and returns a `VertexSet`,
or None when the input is directed or the problem has no answer for it.
"""

import logging

from .algorithms import (
    find_max_clique_brute_force,
    find_mis_brute_force,
    find_min_vertex_cover_brute_force,
    is_maximal_clique,
    verify_clique,
    verify_independent_set,
    verify_vertex_cover
)
from .bipartite import (
    BipartitePartition,
    Matching,
    UNMATCHED,
    bipartite_partition,
    hopcroft_karp,
    konig_cover,
    vertex_cover_bipartite
)
from .clique import (
    CliqueAnalysis,
    analyze_cliques,
    clique_number,
    find_all_cliques,
    find_maximal_cliques,
    find_maximum_clique
)
from .complement import complement_graph
from .config import SearchBudget, SearchConfig
from .exceptions import (
    CapacityExceededError,
    CliqueCoverError,
    GraphFormatError,
    SearchBudgetExceeded,
    SolverUnavailableError
)
from .graph import Graph, as_graph
from .independent_set import find_maximum_independent_set, find_minimum_vertex_cover
from .vertex_cover import (
    solve_vertex_cover,
    vertex_cover_approx,
    vertex_cover_exact_via_mis
)
from .vertex_set import VertexSet

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Data model
    "Graph",
    "VertexSet",
    "as_graph",
    # Clique search
    "find_all_cliques",
    "find_maximal_cliques",
    "find_maximum_clique",
    "clique_number",
    "analyze_cliques",
    "CliqueAnalysis",
    # Complement, independent set, vertex cover
    "complement_graph",
    "find_maximum_independent_set",
    "find_minimum_vertex_cover",
    "vertex_cover_exact_via_mis",
    "vertex_cover_approx",
    "vertex_cover_bipartite",
    "solve_vertex_cover",
    # Bipartite engine
    "bipartite_partition",
    "hopcroft_karp",
    "konig_cover",
    "BipartitePartition",
    "Matching",
    "UNMATCHED",
    # Verification functions
    "verify_clique",
    "verify_independent_set",
    "verify_vertex_cover",
    "is_maximal_clique",
    "find_max_clique_brute_force",
    "find_mis_brute_force",
    "find_min_vertex_cover_brute_force",
    # Configuration
    "SearchConfig",
    "SearchBudget",
    # Errors
    "CliqueCoverError",
    "GraphFormatError",
    "CapacityExceededError",
    "SearchBudgetExceeded",
    "SolverUnavailableError"
]
