
from pathlib import Path
from typing import List, Tuple, Union

from .exceptions import GraphFormatError
from .graph import Graph, as_graph


def read_dimacs_graph(file_path: Union[str, Path]) -> Graph:
    """
    Read a graph from DIMACS format file.

    DIMACS format:
    - Lines starting with 'c' are comments
    - Line starting with 'p edge n m' defines problem with n nodes and m edges
    - Lines starting with 'e u v' define edges between nodes u and v

    DIMACS vertices are 1-based; the returned Graph uses 0..n-1.
    Duplicate edges are merged.

    Args:
        file_path: Path to DIMACS format file

    Returns:
        Undirected Graph

    Raises:
        GraphFormatError: If the problem line is missing or an edge is malformed.
    """
    num_nodes = None
    edges: List[Tuple[int, int]] = []

    with open(file_path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith('c'):
                continue

            parts = line.split()
            if parts[0] == 'p':
                # Problem definition: p edge <num_nodes> <num_edges>
                if len(parts) < 3:
                    raise GraphFormatError(f"line {line_number}: malformed problem line {line!r}")
                num_nodes = int(parts[2])
            elif parts[0] == 'e':
                # Edge definition: e <node1> <node2>
                if len(parts) < 3:
                    raise GraphFormatError(f"line {line_number}: malformed edge line {line!r}")
                u, v = int(parts[1]) - 1, int(parts[2]) - 1
                if u != v:
                    edges.append((u, v))

    if num_nodes is None:
        raise GraphFormatError(f"{file_path}: missing 'p edge' problem line")
    return Graph.from_edges(num_nodes, edges)


def write_dimacs_graph(graph, file_path: Union[str, Path], comment: str = "") -> None:
    """
    Write an undirected Graph (or networkx graph) in DIMACS 'p edge' format.
    """
    graph = as_graph(graph)
    if graph.directed:
        raise GraphFormatError("DIMACS 'p edge' format only holds undirected graphs")

    edges = list(graph.edges())
    with open(file_path, 'w') as f:
        if comment:
            for line in comment.splitlines():
                f.write(f"c {line}\n")
        f.write(f"p edge {graph.node_count} {len(edges)}\n")
        for u, v in edges:
            f.write(f"e {u + 1} {v + 1}\n")
