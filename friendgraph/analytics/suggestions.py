"""Friend-of-friend recommendations.

For one person, look at every pair of their friends. When friend ``a`` does
not list friend ``b``, ``b`` is suggested to ``a``. Only the immediate
neighbourhood is examined.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Union

from friendgraph.models import Node

if TYPE_CHECKING:
    from friendgraph.graph import FriendGraph

logger = logging.getLogger(__name__)


def suggest_friends_of_friends(
    graph: FriendGraph, person: Union[Node, int]
) -> Dict[int, List[int]]:
    """Return ``{friend_id: [suggested_friend_id, ...]}`` for ``person``'s friends.

    Friends already connected to every other friend get no entry. Suggestion
    lists are in ascending identifier order.
    """
    person = graph.require_node(person)
    friends = graph.get_friends()
    circle = sorted(person.neighbors)

    suggestions: Dict[int, List[int]] = {}
    for outer in circle:
        outer_node = friends[outer]
        for inner in circle:
            if outer == inner or outer_node.is_friend_of(inner):
                continue
            suggestions.setdefault(outer, []).append(inner)

    logger.debug(
        "Suggested %d introductions among %d friends of %d",
        sum(len(v) for v in suggestions.values()),
        len(circle),
        person.node_id,
    )
    return suggestions
