"""
Basic example running the clique, independent set and vertex cover solvers.

Usage:
    python examples/basic_example.py [path/to/graph.col]

Without an argument a few small built-in graphs are analyzed; with a DIMACS
file the file's graph is analyzed instead.
"""

import logging
import os
import sys

import networkx as nx

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cliquecover import (
    Graph,
    SearchConfig,
    analyze_cliques,
    find_maximum_independent_set,
    hopcroft_karp,
    solve_vertex_cover
)
from cliquecover.exceptions import SearchBudgetExceeded
from cliquecover.io import read_dimacs_graph


def analyze(graph: Graph, name: str, config: SearchConfig):
    print(f"=== {name}: {graph.node_count} nodes, {graph.number_of_edges()} edges ===")

    try:
        print(analyze_cliques(graph, config=config).format())

        mis = find_maximum_independent_set(graph, config=config)
        if mis is None:
            print("Error: Could not compute maximum independent set.")
        else:
            print(f"Maximum independent set: {mis.to_list()} (size: {len(mis)})")

        print("Minimum vertex cover:")
        for method in ("exact", "bipartite", "approx"):
            cover = solve_vertex_cover(graph, method=method, config=config)
            if cover is None:
                print(f"  {method:9s}: not applicable (graph is not bipartite)")
            else:
                print(f"  {method:9s}: {cover.to_list()} (size: {len(cover)})")
    except SearchBudgetExceeded as e:
        print(f"Stopped: {e}")

    matching = hopcroft_karp(graph)
    if matching is not None:
        print(f"Maximum matching size: {matching.size} after {matching.phases} phases")
    print()


def main():
    logging.basicConfig(level=logging.INFO)
    config = SearchConfig.from_env()

    if len(sys.argv) > 1:
        analyze(read_dimacs_graph(sys.argv[1]), os.path.basename(sys.argv[1]), config)
        return

    examples = [
        ("5-cycle", nx.cycle_graph(5)),
        ("K(2,3)", nx.complete_bipartite_graph(2, 3)),
        ("Petersen", nx.petersen_graph()),
    ]
    for name, G in examples:
        analyze(Graph.from_networkx(G), name, config)


if __name__ == "__main__":
    main()
