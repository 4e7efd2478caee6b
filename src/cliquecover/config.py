"""
Search configuration and the optional wall-clock budget.
"""

import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

from .exceptions import SearchBudgetExceeded

CLIQUE_ALGORITHMS = ("maximal", "all")


@dataclass
class SearchConfig:
    """Configuration shared by the exhaustive solvers."""
    time_limit: Optional[float] = None      # seconds, None for unbounded
    recursion_headroom: int = 200           # extra frames kept above the search depth
    clique_algorithm: str = "maximal"       # default for analyze_cliques

    def __post_init__(self):
        if self.clique_algorithm not in CLIQUE_ALGORITHMS:
            raise ValueError(
                f"clique_algorithm must be one of {CLIQUE_ALGORITHMS}, got {self.clique_algorithm!r}"
            )
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")

    @classmethod
    def from_env(cls, prefix: str = "CLIQUECOVER_") -> "SearchConfig":
        """Build a config from CLIQUECOVER_TIME_LIMIT and CLIQUECOVER_CLIQUE_ALGORITHM."""
        time_limit = os.environ.get(f"{prefix}TIME_LIMIT")
        algorithm = os.environ.get(f"{prefix}CLIQUE_ALGORITHM", "maximal")
        return cls(
            time_limit=float(time_limit) if time_limit else None,
            clique_algorithm=algorithm,
        )

    def budget(self) -> "SearchBudget":
        return SearchBudget(self.time_limit)


class SearchBudget:
    """
    Wall-clock budget checked between recursive search calls.

    The clock starts on construction. `check()` raises SearchBudgetExceeded
    once the limit has passed; a budget without a limit never expires.
    """

    def __init__(self, time_limit: Optional[float] = None):
        self.time_limit = time_limit
        self.started = time.perf_counter()
        self.checks = 0

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self.started

    def check(self) -> None:
        self.checks += 1
        if self.time_limit is not None and self.elapsed > self.time_limit:
            raise SearchBudgetExceeded(
                f"search exceeded its {self.time_limit:.3f}s budget after {self.checks} calls"
            )


@contextmanager
def recursion_limit(depth: int, headroom: int = 200):
    """Temporarily raise the interpreter recursion limit to fit `depth` frames."""
    previous = sys.getrecursionlimit()
    needed = depth + headroom
    if needed > previous:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)
