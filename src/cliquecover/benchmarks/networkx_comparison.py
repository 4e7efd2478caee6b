"""
Benchmarking framework comparing the cliquecover solvers with NetworkX algorithms.
"""

import logging
import signal
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from ..algorithms import verify_clique, verify_independent_set, verify_vertex_cover
from ..clique import find_all_cliques, find_maximum_clique
from ..config import SearchConfig
from ..exceptions import SearchBudgetExceeded
from ..graph import Graph
from ..independent_set import find_maximum_independent_set
from ..solvers.scipy_milp import SCIPY_MILP_AVAILABLE, solve_vertex_cover_scipy
from ..vertex_cover import vertex_cover_approx, vertex_cover_bipartite, vertex_cover_exact_via_mis

logger = logging.getLogger(__name__)

CLIQUE = "clique"
INDEPENDENT_SET = "independent_set"
VERTEX_COVER = "vertex_cover"

_VERIFIERS = {
    CLIQUE: verify_clique,
    INDEPENDENT_SET: verify_independent_set,
    VERTEX_COVER: verify_vertex_cover,
}


@dataclass
class BenchmarkResult:
    """Results from running a single algorithm on a single graph."""
    algorithm_name: str
    problem: str
    graph_description: str
    graph_size: int
    graph_edges: int

    # Core results
    vertex_set: List[int]
    set_size: int
    runtime_seconds: float
    valid: bool = True

    # Error handling
    success: bool = True
    error_message: Optional[str] = None
    timeout: bool = False


def _largest(cliques) -> List[int]:
    cliques = list(cliques or [])
    return list(max(cliques, key=len)) if cliques else []


def _nx_bipartite_cover(graph: nx.Graph) -> Optional[List[int]]:
    if not nx.is_bipartite(graph):
        return None
    cover = set()
    for component in nx.connected_components(graph):
        sub = graph.subgraph(component)
        if sub.number_of_edges() == 0:
            continue
        top = nx.bipartite.sets(sub)[0]
        matching = nx.bipartite.hopcroft_karp_matching(sub, top_nodes=top)
        cover |= nx.bipartite.to_vertex_cover(sub, matching, top_nodes=top)
    return sorted(cover)


@dataclass
class NetworkXComparisonBenchmark:
    """Runs named algorithms on a graph and records size, runtime and validity."""

    # Timeout settings (in seconds)
    fast_timeout: float = 10.0      # For polynomial algorithms
    slow_timeout: float = 300.0     # For exhaustive search

    search_config: SearchConfig = field(default_factory=SearchConfig)

    def algorithms(self) -> Dict[str, Tuple[str, bool, Callable[[Graph, nx.Graph], Any]]]:
        """
        Registry of algorithm name -> (problem, exhaustive, runner).

        Runners receive both the dense Graph and the networkx view and return
        an iterable of vertex indices, or None when the algorithm does not
        apply to the graph.
        """
        config = self.search_config
        registry = {
            "bron_kerbosch": (CLIQUE, True, lambda g, G: find_maximum_clique(g, config=config)),
            "exhaustive_clique": (CLIQUE, True, lambda g, G: _largest(find_all_cliques(g, config=config))),
            "nx_find_cliques": (CLIQUE, True, lambda g, G: _largest(nx.find_cliques(G))),
            "mis_exact": (INDEPENDENT_SET, True,
                          lambda g, G: find_maximum_independent_set(g, config=config)),
            "nx_mis_exact": (INDEPENDENT_SET, True,
                             lambda g, G: _largest(nx.find_cliques(nx.complement(G)))),
            "vc_exact": (VERTEX_COVER, True, lambda g, G: vertex_cover_exact_via_mis(g, config=config)),
            "vc_bipartite": (VERTEX_COVER, False, lambda g, G: vertex_cover_bipartite(g)),
            "vc_approx": (VERTEX_COVER, False, lambda g, G: vertex_cover_approx(g)),
            "nx_vc_bipartite": (VERTEX_COVER, False, lambda g, G: _nx_bipartite_cover(G)),
            "nx_vc_approx": (VERTEX_COVER, False,
                             lambda g, G: nx.algorithms.approximation.min_weighted_vertex_cover(G)),
        }
        if SCIPY_MILP_AVAILABLE:
            registry["scipy_milp_vc"] = (VERTEX_COVER, True, lambda g, G: solve_vertex_cover_scipy(g))
        return registry

    def _timeout_handler(self, signum, frame):
        """Signal handler for timeout."""
        raise TimeoutError("Algorithm timed out")

    def _run_with_timeout(self, func: Callable, timeout: float, *args, **kwargs) -> Any:
        """Run a function with a timeout."""
        old_handler = signal.signal(signal.SIGALRM, self._timeout_handler)
        signal.setitimer(signal.ITIMER_REAL, timeout)

        try:
            return func(*args, **kwargs)
        finally:
            signal.setitimer(signal.ITIMER_REAL, 0)
            signal.signal(signal.SIGALRM, old_handler)

    def run(self, name: str, graph, graph_description: str = "") -> BenchmarkResult:
        """Run one registered algorithm on `graph` (Graph or networkx graph)."""
        registry = self.algorithms()
        if name not in registry:
            raise ValueError(f"Unknown algorithm: {name!r}")
        problem, exhaustive, runner = registry[name]

        dense = graph if isinstance(graph, Graph) else Graph.from_networkx(graph)
        view = dense.to_networkx()
        graph_desc = graph_description or f"Graph_n{dense.node_count}_m{dense.number_of_edges()}"
        timeout = self.slow_timeout if exhaustive else self.fast_timeout

        result = BenchmarkResult(
            algorithm_name=name,
            problem=problem,
            graph_description=graph_desc,
            graph_size=dense.node_count,
            graph_edges=dense.number_of_edges(),
            vertex_set=[],
            set_size=0,
            runtime_seconds=0.0,
        )

        try:
            start_time = time.time()
            found = self._run_with_timeout(runner, timeout, dense, view)
            result.runtime_seconds = time.time() - start_time
        except (TimeoutError, SearchBudgetExceeded):
            result.runtime_seconds = timeout
            result.success = False
            result.timeout = True
            result.error_message = "Timeout exceeded"
            return result

        if found is None:
            result.success = False
            result.error_message = "Algorithm does not apply to this graph"
            return result

        result.vertex_set = sorted(int(v) for v in found)
        result.set_size = len(result.vertex_set)
        result.valid = _VERIFIERS[problem](dense, result.vertex_set)
        return result


def run_algorithm_comparison(
    graph,
    graph_description: str = "",
    algorithms: Optional[Iterable[str]] = None,
    benchmark_config: Optional[Dict] = None
) -> Dict[str, BenchmarkResult]:
    """
    Run comparison of the specified algorithms on a single graph.

    Args:
        graph: Graph or networkx graph to analyze.
        graph_description: Description of the graph.
        algorithms: Names from NetworkXComparisonBenchmark.algorithms(); all
            registered algorithms by default.
        benchmark_config: Keyword arguments for NetworkXComparisonBenchmark.

    Returns:
        Dictionary mapping algorithm names to BenchmarkResult objects.
    """
    benchmark = NetworkXComparisonBenchmark(**(benchmark_config or {}))
    if algorithms is None:
        algorithms = list(benchmark.algorithms())

    results = {}
    for alg in algorithms:
        logger.info("Running %s on %s", alg, graph_description or "graph")
        result = benchmark.run(alg, graph, graph_description)
        results[alg] = result

        if result.success:
            logger.info("  %s: set size = %d, runtime = %.3fs, valid = %s",
                        alg, result.set_size, result.runtime_seconds, result.valid)
        else:
            logger.info("  %s: %s", alg, result.error_message)

    return results


def compute_approximation_ratios(
    results: Dict[str, BenchmarkResult],
    reference: str = "vc_exact"
) -> Dict[str, float]:
    """
    Ratio of each successful vertex cover result's size to the reference size.

    Returns an empty dict when the reference did not succeed.
    """
    ref = results.get(reference)
    if ref is None or not ref.success:
        return {}

    ratios = {}
    for name, result in results.items():
        if result.problem != VERTEX_COVER or not result.success:
            continue
        if ref.set_size == 0:
            ratios[name] = 1.0 if result.set_size == 0 else float("inf")
        else:
            ratios[name] = result.set_size / ref.set_size
    return ratios
