"""
friendgraph Graph Store

File Purpose: In-memory friendship graph and the public analytics API over it
Primary Functions/Classes: FriendGraph
Inputs and Outputs (I/O): None; pure in-memory computation

A FriendGraph owns every Node by identifier. Friendships are directed at the
storage layer: an undirected friendship is two edges, which callers add
explicitly (or through ``add_undirected_edge``). Centrality calculators write
their results onto the nodes so the ranker can order by them later.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Set, Union

import networkx as nx

from .analytics import centrality, ranking, subgraphs, suggestions
from .exceptions import InvalidArgumentError
from .models import CentralityKind, Node, validate_node_id

logger = logging.getLogger(__name__)


class FriendGraph:
    """A graph of friends keyed by non-negative integer identifiers."""

    def __init__(self) -> None:
        self._friends: Dict[int, Node] = {}
        self._num_vertices = 0
        self._num_edges = 0

    def __len__(self) -> int:
        return self._num_vertices

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._friends

    def __iter__(self) -> Iterator[Node]:
        return iter(self._friends.values())

    def __repr__(self) -> str:
        return (
            f"FriendGraph(vertices={self._num_vertices}, "
            f"edge_insertions={self._num_edges})"
        )

    # -----------------
    # COUNTS
    # -----------------

    @property
    def vertex_count(self) -> int:
        return self._num_vertices

    @property
    def edge_insertion_count(self) -> int:
        """Number of ``add_edge`` calls, duplicates included."""
        return self._num_edges

    @property
    def distinct_edge_count(self) -> int:
        """Number of distinct directed edges currently stored."""
        return sum(node.degree for node in self._friends.values())

    # -----------------
    # CONSTRUCTION
    # -----------------

    def get_friends(self) -> Dict[int, Node]:
        return self._friends

    def get_node(self, node_id: int) -> Node | None:
        return self._friends.get(node_id)

    def require_node(self, person: Union[Node, int]) -> Node:
        """Resolve a Node or identifier to the Node stored in this graph."""
        node_id = person.node_id if isinstance(person, Node) else person
        node = self._friends.get(node_id)
        if node is None:
            raise InvalidArgumentError(
                "Unknown vertex",
                details=f"Vertex {node_id!r} is not part of this graph",
            )
        return node

    def add_vertex(self, node_id: int) -> None:
        validate_node_id(node_id)
        if node_id in self._friends:
            return
        self._friends[node_id] = Node(node_id)
        self._num_vertices += 1
        logger.debug("Added vertex %d", node_id)

    def add_edge(self, from_id: int, to_id: int) -> None:
        """Add a directed friendship, creating either endpoint if needed."""
        validate_node_id(from_id)
        validate_node_id(to_id)
        self.add_vertex(from_id)
        self.add_vertex(to_id)

        self._friends[from_id].add_neighbor(to_id)
        self._num_edges += 1

    def add_undirected_edge(self, first_id: int, second_id: int) -> None:
        """Add the friendship in both directions; add_edge rejects bad ids before any insert."""
        self.add_edge(first_id, second_id)
        self.add_edge(second_id, first_id)

    # -----------------
    # EXPORT
    # -----------------

    def export_graph(self) -> Dict[int, Set[int]]:
        """Map every vertex to the set of vertices it has an edge to.

        Duplicate insertions collapse; the returned sets are copies.
        """
        return {node_id: set(node.neighbors) for node_id, node in self._friends.items()}

    def adjacency_string(self) -> str:
        lines = [
            f"Adjacency list (size {self._num_vertices}+{self._num_edges} integers):"
        ]
        for node_id, node in self._friends.items():
            friends = "".join(f"{friend}, " for friend in sorted(node.neighbors))
            lines.append(f"\t{node_id}: {friends}")
        return "\n".join(lines)

    def to_networkx(self) -> nx.DiGraph:
        """Return an equivalent ``networkx.DiGraph`` (one edge per distinct pair)."""
        digraph = nx.DiGraph()
        digraph.add_nodes_from(self._friends)
        digraph.add_edges_from(
            (node_id, friend)
            for node_id, node in self._friends.items()
            for friend in node.neighbors
        )
        return digraph

    # -----------------
    # ANALYTICS
    # -----------------

    def export_top_degree_graphs(self, number: int) -> List[FriendGraph]:
        return subgraphs.export_top_degree_graphs(self, number)

    def suggest_friends_of_friends(self, person: Union[Node, int]) -> Dict[int, List[int]]:
        return suggestions.suggest_friends_of_friends(self, person)

    def measure_and_set_closeness_centrality(
        self, isolated_value: float = 0.0
    ) -> Dict[int, float]:
        """Recompute closeness for every vertex, store it on the nodes and return it."""
        closeness = centrality.closeness_centrality(self, isolated_value=isolated_value)
        for node_id, value in closeness.items():
            self._friends[node_id].closeness = value
        return closeness

    def measure_and_set_betweenness_centrality(self) -> Dict[int, float]:
        """Recompute betweenness for every vertex, store it on the nodes and return it."""
        betweenness = centrality.betweenness_centrality(self)
        for node_id, value in betweenness.items():
            self._friends[node_id].betweenness = value
        return betweenness

    def return_top_centrality_for(
        self, number: int, kind: Union[CentralityKind, str]
    ) -> List[Node]:
        """Return the vertices of the top ``number`` value buckets for ``kind``.

        Closeness and betweenness rank by the values stored by the most recent
        ``measure_and_set_*`` call.
        """
        return ranking.top_centrality(self, number, CentralityKind.parse(kind))
