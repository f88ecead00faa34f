"""Centrality measures over a FriendGraph.

Degree is the size of a vertex's friend set. Closeness is the inverse of the
average hop distance to the vertices it can reach. Betweenness is computed with
Brandes' dependency accumulation ("A Faster Algorithm for Betweenness
Centrality", U. Brandes, 2001): one BFS per source, then a walk of the BFS
order in reverse that pushes each vertex's dependency onto its predecessors.

Every function returns a fresh ``{node_id: value}`` mapping and leaves the
graph untouched.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Dict, List

from friendgraph.analytics.paths import UNREACHED, shortest_path_lengths

if TYPE_CHECKING:
    from friendgraph.graph import FriendGraph

logger = logging.getLogger(__name__)


def degree_centrality(graph: FriendGraph) -> Dict[int, float]:
    return {node.node_id: float(node.degree) for node in graph}


def closeness_centrality(graph: FriendGraph, isolated_value: float = 0.0) -> Dict[int, float]:
    """Closeness of every vertex as ``(vertex_count - 1) / sum_of_distances``.

    Only reachable vertices contribute to the sum. A vertex whose distance sum
    is zero (nothing reachable, or a one-vertex graph) gets ``isolated_value``.
    """
    paths_total = graph.vertex_count - 1.0
    closeness: Dict[int, float] = {}

    for node in graph:
        distances = shortest_path_lengths(graph, node)
        total = sum(d for d in distances.values() if d != UNREACHED)
        if total == 0:
            closeness[node.node_id] = isolated_value
            continue
        closeness[node.node_id] = paths_total / total

    logger.info("Computed closeness centrality for %d vertices", len(closeness))
    return closeness


def betweenness_centrality(graph: FriendGraph) -> Dict[int, float]:
    """Unnormalized betweenness of every vertex.

    Values are summed over ordered (source, target) pairs, so a friendship
    stored in both directions counts each pair twice; no halving is applied.
    """
    friends = graph.get_friends()
    betweenness: Dict[int, float] = {node_id: 0.0 for node_id in friends}

    for source in friends:
        stack: List[int] = []
        predecessors: Dict[int, List[int]] = {node_id: [] for node_id in friends}
        sigma: Dict[int, int] = dict.fromkeys(friends, 0)
        distance: Dict[int, int] = dict.fromkeys(friends, UNREACHED)
        sigma[source] = 1
        distance[source] = 0

        queue = deque([source])
        while queue:
            current = queue.popleft()
            stack.append(current)
            for neighbor in friends[current].neighbors:
                if distance[neighbor] < 0:
                    queue.append(neighbor)
                    distance[neighbor] = distance[current] + 1
                if distance[neighbor] == distance[current] + 1:
                    sigma[neighbor] += sigma[current]
                    predecessors[neighbor].append(current)

        visited = len(stack)
        dependency: Dict[int, float] = dict.fromkeys(friends, 0.0)
        while stack:
            current = stack.pop()
            for predecessor in predecessors[current]:
                dependency[predecessor] += (
                    sigma[predecessor] / sigma[current] * (1.0 + dependency[current])
                )
            if current != source:
                betweenness[current] += dependency[current]

        logger.debug("Brandes pass from %d visited %d vertices", source, visited)

    logger.info("Computed betweenness centrality for %d vertices", len(betweenness))
    return betweenness
