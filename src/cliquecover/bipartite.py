"""
Exact minimum vertex cover for bipartite graphs (König's theorem).

The computation runs in three stages:

1. `bipartite_partition`: BFS 2-colouring of every connected component.
2. `hopcroft_karp`: maximum matching between the two sides in O(E sqrt(V)).
3. `konig_cover`: alternating BFS from the unmatched left vertices. With Z
   the set of reached vertices, (Left \\ Z) | (Right & Z) is a minimum vertex
   cover whose size equals the matching size.

`vertex_cover_bipartite` chains the stages and returns None when the graph
is not bipartite.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .config import recursion_limit
from .graph import Graph, undirected_only
from .vertex_set import VertexSet

logger = logging.getLogger(__name__)

UNMATCHED = -1
LEFT = 1
RIGHT = 2


@dataclass(frozen=True)
class BipartitePartition:
    """Two-colouring of a graph: `left_mask[v]` is True for left vertices."""
    left_mask: np.ndarray
    left: Tuple[int, ...]
    right: Tuple[int, ...]

    def side_of(self, vertex: int) -> str:
        return "left" if self.left_mask[vertex] else "right"


@dataclass
class Matching:
    """
    Matching between the sides of a partition.

    `pair_left[i]` is the position in `partition.right` matched to
    `partition.left[i]` (or UNMATCHED); `pair_right` is the reverse map.
    """
    pair_left: List[int]
    pair_right: List[int]
    size: int = 0
    phases: int = 0

    def edges(self, partition: BipartitePartition) -> List[Tuple[int, int]]:
        """Matched edges as (left vertex, right vertex) pairs of graph indices."""
        return [
            (partition.left[i], partition.right[j])
            for i, j in enumerate(self.pair_left)
            if j != UNMATCHED
        ]


@undirected_only
def bipartite_partition(graph: Graph) -> Optional[BipartitePartition]:
    """
    Two-colour `graph` by BFS over each connected component.

    The first vertex of every component (including isolated vertices) is
    coloured left.

    Returns:
        The partition, or None if some edge joins two vertices of the same
        colour (or the graph is directed).
    """
    n = graph.node_count
    neighbors = graph.neighbor_sets
    color = [0] * n

    for source in range(n):
        if color[source]:
            continue
        color[source] = LEFT
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in sorted(neighbors[u]):
                if not color[v]:
                    color[v] = RIGHT if color[u] == LEFT else LEFT
                    queue.append(v)
                elif color[v] == color[u]:
                    logger.debug("edge (%d, %d) joins two %s vertices", u, v,
                                 "left" if color[u] == LEFT else "right")
                    return None

    left_mask = np.array([c == LEFT for c in color], dtype=bool)
    left_mask.setflags(write=False)
    return BipartitePartition(
        left_mask=left_mask,
        left=tuple(v for v in range(n) if color[v] == LEFT),
        right=tuple(v for v in range(n) if color[v] == RIGHT),
    )


def _side_adjacency(graph: Graph, partition: BipartitePartition) -> List[List[int]]:
    """For each left position, the positions in partition.right of its neighbours."""
    right_position: Dict[int, int] = {v: j for j, v in enumerate(partition.right)}
    return [
        [right_position[w] for w in graph.neighbors(u)]
        for u in partition.left
    ]


def _build_layers(adjacency, pair_left, pair_right, dist) -> bool:
    """
    BFS from every free left vertex through alternating edges.

    Fills `dist` with layer numbers for left vertices and reports whether a
    free right vertex is reachable.
    """
    queue = deque()
    for i in range(len(adjacency)):
        if pair_left[i] == UNMATCHED:
            dist[i] = 0
            queue.append(i)
        else:
            dist[i] = math.inf

    reachable = False
    while queue:
        u = queue.popleft()
        for j in adjacency[u]:
            partner = pair_right[j]
            if partner == UNMATCHED:
                reachable = True
            elif dist[partner] == math.inf:
                dist[partner] = dist[u] + 1
                queue.append(partner)
    return reachable


def _augment(u, adjacency, pair_left, pair_right, dist, cursor) -> bool:
    """
    DFS along the BFS layering for an augmenting path starting at left `u`.

    On success the path is flipped in place. `cursor` keeps each vertex's
    scan position so paths found in one phase are vertex-disjoint.
    """
    while cursor[u] < len(adjacency[u]):
        j = adjacency[u][cursor[u]]
        cursor[u] += 1
        partner = pair_right[j]
        if partner == UNMATCHED or (
            dist[partner] == dist[u] + 1
            and _augment(partner, adjacency, pair_left, pair_right, dist, cursor)
        ):
            pair_left[u] = j
            pair_right[j] = u
            return True
    dist[u] = math.inf
    return False


def hopcroft_karp(graph, partition: Optional[BipartitePartition] = None) -> Optional[Matching]:
    """
    Maximum matching of a bipartite graph with Hopcroft-Karp.

    Each phase layers the graph by BFS from the free left vertices, stops if
    no free right vertex is reachable, and otherwise augments along a maximal
    set of vertex-disjoint shortest-layer paths found by DFS.

    Args:
        graph: Undirected bipartite graph.
        partition: Precomputed partition; computed from `graph` if omitted.

    Returns:
        The maximum matching, or None if the graph is not bipartite or is directed.
    """
    if partition is None:
        partition = bipartite_partition(graph)
        if partition is None:
            return None
    return _hopcroft_karp(graph, partition)


@undirected_only
def _hopcroft_karp(graph: Graph, partition: BipartitePartition) -> Matching:
    left_n, right_n = len(partition.left), len(partition.right)
    matching = Matching([UNMATCHED] * left_n, [UNMATCHED] * right_n)
    if left_n == 0 or right_n == 0:
        return matching

    adjacency = _side_adjacency(graph, partition)
    dist = [math.inf] * left_n

    with recursion_limit(left_n):
        while _build_layers(adjacency, matching.pair_left, matching.pair_right, dist):
            matching.phases += 1
            cursor = [0] * left_n
            for i in range(left_n):
                if matching.pair_left[i] == UNMATCHED and _augment(
                    i, adjacency, matching.pair_left, matching.pair_right, dist, cursor
                ):
                    matching.size += 1

    logger.debug("matching of size %d after %d phases", matching.size, matching.phases)
    return matching


@undirected_only
def konig_cover(graph: Graph, partition: BipartitePartition, matching: Matching) -> VertexSet:
    """
    Turn a maximum matching into a minimum vertex cover.

    Alternating BFS from all unmatched left vertices follows non-matching
    edges left to right and matching edges right to left. The cover is the
    unreached left vertices plus the reached right vertices.
    """
    adjacency = _side_adjacency(graph, partition)
    left_n, right_n = len(partition.left), len(partition.right)
    reached_left = [False] * left_n
    reached_right = [False] * right_n

    queue = deque()
    for i in range(left_n):
        if matching.pair_left[i] == UNMATCHED:
            reached_left[i] = True
            queue.append(i)

    while queue:
        i = queue.popleft()
        for j in adjacency[i]:
            if reached_right[j] or matching.pair_left[i] == j:
                continue
            reached_right[j] = True
            partner = matching.pair_right[j]
            if partner != UNMATCHED and not reached_left[partner]:
                reached_left[partner] = True
                queue.append(partner)

    cover = VertexSet(graph.node_count)
    for i, v in enumerate(partition.left):
        if not reached_left[i]:
            cover.push(v)
    for j, v in enumerate(partition.right):
        if reached_right[j]:
            cover.push(v)
    return cover


@undirected_only
def vertex_cover_bipartite(graph: Graph) -> Optional[VertexSet]:
    """
    Exact minimum vertex cover of a bipartite graph via König's theorem.

    If either side of the partition is empty the cover is every vertex with
    non-zero degree.

    Returns:
        The cover, or None if the graph is not bipartite or is directed.
    """
    partition = bipartite_partition(graph)
    if partition is None:
        return None

    if not partition.left or not partition.right:
        cover = VertexSet(graph.node_count)
        for v in range(graph.node_count):
            if graph.degree(v) > 0:
                cover.push(v)
        return cover

    matching = _hopcroft_karp(graph, partition)
    cover = konig_cover(graph, partition, matching)
    logger.debug("König cover of size %d from matching of size %d", len(cover), matching.size)
    return cover
