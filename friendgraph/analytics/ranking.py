"""Tie-aware ranking of vertices by centrality.

Vertices are grouped into buckets of identical value and the buckets are
ordered by value, highest first. A "top N" request selects the first N
*buckets*, so every vertex tied on the boundary value is included and the
result can hold more than N vertices.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Tuple, Union

from friendgraph.exceptions import InvalidArgumentError
from friendgraph.models import CentralityKind, Node

if TYPE_CHECKING:
    from friendgraph.graph import FriendGraph

logger = logging.getLogger(__name__)

Bucket = Tuple[float, List[Node]]


def group_by_value(
    graph: FriendGraph, kind: Union[CentralityKind, str]
) -> Dict[float, List[Node]]:
    """Map each distinct centrality value to the vertices holding it.

    Within a bucket vertices keep the graph's insertion order rather than
    being sorted by id, so ties come back in the order people were added.
    """
    kind = CentralityKind.parse(kind)
    groups: Dict[float, List[Node]] = {}
    for node in graph:
        groups.setdefault(node.centrality(kind), []).append(node)
    return groups


def rank_buckets(graph: FriendGraph, kind: Union[CentralityKind, str]) -> List[Bucket]:
    groups = group_by_value(graph, kind)
    return sorted(groups.items(), key=lambda item: item[0], reverse=True)


def select_top_buckets(
    graph: FriendGraph, number: int, kind: Union[CentralityKind, str]
) -> List[Bucket]:
    """Return the ``number`` highest-valued buckets.

    ``number`` must lie in ``[1, vertex_count]``.
    """
    kind = CentralityKind.parse(kind)
    bound = number - 1
    if bound < 0 or bound >= graph.vertex_count:
        raise InvalidArgumentError(
            "Number must be less than num of vertices",
            details=f"Requested top {number} of a graph with {graph.vertex_count} vertices",
        )

    selected: List[Bucket] = []
    for value, nodes in rank_buckets(graph, kind):
        if len(selected) > bound:
            break
        selected.append((value, nodes))

    logger.debug(
        "Top %d %s buckets hold %d vertices",
        number,
        kind.value,
        sum(len(nodes) for _, nodes in selected),
    )
    return selected


def top_centrality(
    graph: FriendGraph, number: int, kind: Union[CentralityKind, str]
) -> List[Node]:
    """Flatten the top ``number`` buckets into a single ranked list of vertices."""
    return [node for _, nodes in select_top_buckets(graph, number, kind) for node in nodes]
