#!/usr/bin/env python3
"""
Generate benchmark graphs with NetworkX and save them in DIMACS format.

USAGE:
    python scripts/generate_dimacs_graphs.py [--types erdos_renyi bipartite ...] [--out DIMACS]
    python scripts/generate_dimacs_graphs.py --custom 15 0.4 42 my_test_graph

Graphs are written to the output directory (default DIMACS/) as <description>.dimacs
with a comment header giving the description and size.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import networkx as nx

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cliquecover.benchmarks import GraphType, ScalingConfig, generate_test_graphs
from cliquecover.io import write_dimacs_graph

logger = logging.getLogger("generate_dimacs_graphs")


def save(graph: nx.Graph, out_dir: Path, name: str, description: str) -> Path:
    filename = out_dir / f"{name}.dimacs"
    comment = f"{description}\nnodes={graph.number_of_nodes()} edges={graph.number_of_edges()}"
    write_dimacs_graph(graph, filename, comment=comment)
    logger.info("wrote %s (n=%d, m=%d)", filename, graph.number_of_nodes(), graph.number_of_edges())
    return filename


def main():
    """Main function with command line interface."""
    parser = argparse.ArgumentParser(description="Generate graphs in DIMACS format")
    parser.add_argument("--types", nargs="+", choices=[t.value for t in GraphType],
                        help="Graph types to generate (default: all)")
    parser.add_argument("--custom", nargs=4, metavar=("N", "P", "SEED", "NAME"),
                        help="Generate custom Erdos-Renyi graph: N P SEED NAME")
    parser.add_argument("--out", default="DIMACS", help="Output directory")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    if args.custom:
        n, p, seed, name = int(args.custom[0]), float(args.custom[1]), int(args.custom[2]), args.custom[3]
        graph = nx.erdos_renyi_graph(n, p, seed=seed)
        save(graph, out_dir, name, f"Custom Erdos-Renyi G({n}, {p}) with seed={seed}")
        return

    graph_types = [GraphType(t) for t in args.types] if args.types else None
    count = 0
    for graph, desc, category in generate_test_graphs(ScalingConfig(), graph_types, seed=args.seed):
        save(graph, out_dir, f"{category}_{desc}", f"{desc} ({category})")
        count += 1
    logger.info("%d graphs saved to %s", count, out_dir)


if __name__ == "__main__":
    main()
