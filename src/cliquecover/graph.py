"""
Dense adjacency-matrix graph shared by every solver in the package.

A Graph is an immutable n x n boolean adjacency matrix plus a directedness
flag. The solvers only accept undirected graphs; the `undirected_only`
decorator is the single place where directed input is turned away.
"""

import functools
import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import networkx as nx
import numpy as np

from .exceptions import GraphFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Graph:
    """
    Immutable dense graph.

    Args:
        adjacency: Square boolean (or 0/1) matrix. It is copied and stored read-only.
        directed: Whether edges are directed.
        allow_antiparallel: For directed graphs, whether both (u, v) and (v, u) may exist.

    Raises:
        GraphFormatError: If the matrix is not square, has self-loops, is not
            symmetric for an undirected graph, or holds antiparallel edges that
            are not allowed.
    """
    adjacency: np.ndarray
    directed: bool = False
    allow_antiparallel: bool = False

    def __post_init__(self):
        matrix = np.array(self.adjacency, dtype=bool, copy=True)
        if matrix.size == 0:
            matrix = matrix.reshape(0, 0)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise GraphFormatError(f"Adjacency matrix must be square, got shape {matrix.shape}")
        if matrix.diagonal().any():
            raise GraphFormatError("Self-loops are not supported")
        if not self.directed and not np.array_equal(matrix, matrix.T):
            raise GraphFormatError("Undirected adjacency matrix must be symmetric")
        if self.directed and not self.allow_antiparallel and (matrix & matrix.T).any():
            raise GraphFormatError("Antiparallel edges are not allowed for this directed graph")
        matrix.setflags(write=False)
        object.__setattr__(self, "adjacency", matrix)

    @classmethod
    def empty(cls, node_count: int) -> "Graph":
        """Graph with `node_count` vertices and no edges."""
        return cls(np.zeros((node_count, node_count), dtype=bool))

    @classmethod
    def from_edges(
        cls,
        node_count: int,
        edges: Iterable[Tuple[int, int]],
        directed: bool = False,
        allow_antiparallel: bool = False
    ) -> "Graph":
        """
        Build a graph from an edge list over vertices 0..node_count-1.

        Undirected edges are mirrored; self-loops and out-of-range endpoints
        raise GraphFormatError.
        """
        matrix = np.zeros((node_count, node_count), dtype=bool)
        for u, v in edges:
            if not (0 <= u < node_count and 0 <= v < node_count):
                raise GraphFormatError(f"Edge ({u},{v}) out of bounds for n={node_count}")
            if u == v:
                raise GraphFormatError(f"Self-loop on vertex {u} is not supported")
            matrix[u, v] = True
            if not directed:
                matrix[v, u] = True
        return cls(matrix, directed=directed, allow_antiparallel=allow_antiparallel)

    @classmethod
    def from_networkx(cls, graph: nx.Graph) -> "Graph":
        """
        Convert a networkx graph. Vertex i is the i-th node of `graph.nodes()`.
        """
        if graph.is_multigraph():
            raise GraphFormatError("Multigraphs are not supported")
        nodelist = list(graph.nodes())
        matrix = nx.to_numpy_array(graph, nodelist=nodelist, weight=None, dtype=bool)
        return cls(matrix, directed=graph.is_directed(), allow_antiparallel=graph.is_directed())

    def to_networkx(self) -> nx.Graph:
        """Convert to a networkx (Di)Graph on nodes 0..n-1."""
        graph = nx.DiGraph() if self.directed else nx.Graph()
        graph.add_nodes_from(range(self.node_count))
        graph.add_edges_from(self.edges())
        return graph

    @property
    def node_count(self) -> int:
        return self.adjacency.shape[0]

    @cached_property
    def neighbor_sets(self) -> Tuple[frozenset, ...]:
        """Out-neighbourhood of every vertex as a frozenset of ints."""
        return tuple(
            frozenset(int(v) for v in np.flatnonzero(row))
            for row in self.adjacency
        )

    def has_edge(self, u: int, v: int) -> bool:
        return bool(self.adjacency[u, v])

    def neighbors(self, v: int) -> List[int]:
        """Neighbours of `v` in ascending index order."""
        return [int(w) for w in np.flatnonzero(self.adjacency[v])]

    def degree(self, v: int) -> int:
        return int(self.adjacency[v].sum())

    def number_of_edges(self) -> int:
        total = int(self.adjacency.sum())
        return total if self.directed else total // 2

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield every edge once; undirected edges as (u, v) with u < v."""
        matrix = self.adjacency if self.directed else np.triu(self.adjacency)
        for u, v in zip(*np.nonzero(matrix)):
            yield int(u), int(v)

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.directed == other.directed
            and np.array_equal(self.adjacency, other.adjacency)
        )

    def __hash__(self):
        return hash((self.directed, self.adjacency.tobytes()))

    def __len__(self):
        return self.node_count

    def __repr__(self):
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.node_count}, m={self.number_of_edges()}, {kind})"


GraphLike = Union[Graph, nx.Graph]


def as_graph(graph: Optional[GraphLike]) -> Optional[Graph]:
    """Accept either a Graph or a networkx graph."""
    if graph is None or isinstance(graph, Graph):
        return graph
    if isinstance(graph, nx.Graph):
        return Graph.from_networkx(graph)
    raise TypeError(f"Expected Graph or networkx.Graph, got {type(graph).__name__}")


def undirected_only(func):
    """
    Reject directed (or missing) input for an undirected-only entry point.

    The wrapped function receives a `Graph`; the wrapper returns None for a
    directed graph instead of calling it.
    """
    @functools.wraps(func)
    def wrapper(graph, *args, **kwargs):
        graph = as_graph(graph)
        if graph is None:
            return None
        if graph.directed:
            logger.warning("%s: directed graphs are not supported", func.__name__)
            return None
        return func(graph, *args, **kwargs)
    return wrapper
