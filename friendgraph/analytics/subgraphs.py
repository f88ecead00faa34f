"""Star subgraphs of the most connected people."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Union

from friendgraph.analytics.ranking import select_top_buckets
from friendgraph.models import CentralityKind, Node

if TYPE_CHECKING:
    from friendgraph.graph import FriendGraph

logger = logging.getLogger(__name__)


def star_subgraph(graph: FriendGraph, node: Union[Node, int]) -> FriendGraph:
    """Build an independent graph holding ``node`` and an edge to each of its friends.

    A person without friends yields an empty graph.
    """
    root = graph.require_node(node)
    star = type(graph)()
    for friend in sorted(root.neighbors):
        star.add_edge(root.node_id, friend)
    return star


def export_top_degree_graphs(graph: FriendGraph, number: int) -> List[FriendGraph]:
    """Return one star subgraph per vertex in the top ``number`` degree buckets."""
    stars: List[FriendGraph] = []
    for degree, nodes in select_top_buckets(graph, number, CentralityKind.DEGREE):
        for node in nodes:
            stars.append(star_subgraph(graph, node))
        logger.debug("Exported %d star subgraphs of degree %d", len(nodes), int(degree))

    logger.info("Exported %d star subgraphs for top %d degree buckets", len(stars), number)
    return stars
