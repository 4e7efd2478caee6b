"""
Benchmarking framework for comparing the cliquecover solvers with NetworkX algorithms.
"""

from .networkx_comparison import (
    NetworkXComparisonBenchmark,
    BenchmarkResult,
    run_algorithm_comparison,
    compute_approximation_ratios
)
from .graph_generators import (
    generate_test_graphs,
    create_small_test_graphs,
    GraphType,
    ScalingConfig
)

__all__ = [
    "NetworkXComparisonBenchmark",
    "BenchmarkResult",
    "run_algorithm_comparison",
    "compute_approximation_ratios",
    "generate_test_graphs",
    "create_small_test_graphs",
    "GraphType",
    "ScalingConfig"
]
