"""Unweighted shortest-path lengths via breadth-first search."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Dict, Union

from friendgraph.models import Node

if TYPE_CHECKING:
    from friendgraph.graph import FriendGraph

logger = logging.getLogger(__name__)

UNREACHED = -1


def shortest_path_lengths(graph: FriendGraph, start: Union[Node, int]) -> Dict[int, int]:
    """Return the hop distance from ``start`` to every vertex of ``graph``.

    Every vertex is seeded with ``UNREACHED`` and the start with 0, so the
    result covers the whole graph: vertices that cannot be reached from
    ``start`` keep the ``-1`` sentinel. Edges are followed in their stored
    direction only.
    """
    start_node = graph.require_node(start)
    friends = graph.get_friends()

    distances: Dict[int, int] = {node_id: UNREACHED for node_id in friends}
    distances[start_node.node_id] = 0

    to_explore = deque([start_node.node_id])
    while to_explore:
        current = to_explore.popleft()
        next_distance = distances[current] + 1
        for neighbor in friends[current].neighbors:
            if distances[neighbor] != UNREACHED:
                continue
            distances[neighbor] = next_distance
            to_explore.append(neighbor)

    logger.debug(
        "BFS from %d reached %d of %d vertices",
        start_node.node_id,
        sum(1 for d in distances.values() if d != UNREACHED),
        len(distances),
    )
    return distances
