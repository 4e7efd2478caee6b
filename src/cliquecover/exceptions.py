"""
Custom exceptions for the clique / independent set / vertex cover solvers.
"""


class CliqueCoverError(Exception):
    """Base exception for cliquecover errors."""
    pass


class GraphFormatError(CliqueCoverError, ValueError):
    """Raised when an adjacency matrix violates the graph invariants."""
    pass


class CapacityExceededError(CliqueCoverError):
    """Raised when a vertex is pushed onto a full VertexSet."""
    pass


class SearchBudgetExceeded(CliqueCoverError):
    """Raised when a search runs past its wall-clock budget."""
    pass


class SolverUnavailableError(CliqueCoverError):
    """Raised when a required solver is not available or not installed."""
    pass
