"""
Unit tests for the FriendGraph store.

Covers vertex/edge insertion, the edge counters, adjacency export and the
networkx conversion.
"""
import pytest

from friendgraph.exceptions import InvalidArgumentError
from friendgraph.graph import FriendGraph
from friendgraph.models import Node


class TestVertices:
    def test_add_vertex_is_idempotent(self):
        graph = FriendGraph()
        graph.add_vertex(7)
        graph.add_edge(7, 8)
        before = graph.export_graph()

        graph.add_vertex(7)

        assert graph.vertex_count == 2
        assert graph.export_graph() == before

    @pytest.mark.parametrize("bad_id", [-1, -100])
    def test_negative_identifier_rejected(self, bad_id):
        graph = FriendGraph()
        with pytest.raises(InvalidArgumentError):
            graph.add_vertex(bad_id)
        assert graph.vertex_count == 0

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            FriendGraph().add_vertex(-5)

    @pytest.mark.parametrize("bad_id", [True, 1.5, "3", None])
    def test_non_integer_identifier_rejected(self, bad_id):
        with pytest.raises(InvalidArgumentError):
            FriendGraph().add_vertex(bad_id)

    def test_zero_is_a_valid_identifier(self):
        graph = FriendGraph()
        graph.add_vertex(0)
        assert 0 in graph
        assert len(graph) == 1


class TestEdges:
    def test_add_edge_creates_endpoints(self):
        graph = FriendGraph()
        graph.add_edge(1, 2)

        assert graph.vertex_count == 2
        assert set(graph.get_friends()) == {1, 2}

    def test_edges_are_directed(self):
        graph = FriendGraph()
        graph.add_edge(1, 2)

        assert graph.export_graph() == {1: {2}, 2: set()}

    def test_duplicate_edges_only_bump_insertion_count(self):
        graph = FriendGraph()
        graph.add_edge(1, 2)
        graph.add_edge(1, 2)
        graph.add_edge(1, 2)

        assert graph.get_node(1).degree == 1
        assert graph.edge_insertion_count == 3
        assert graph.distinct_edge_count == 1

    def test_negative_endpoint_leaves_graph_untouched(self):
        graph = FriendGraph()
        with pytest.raises(InvalidArgumentError):
            graph.add_edge(1, -1)

        assert 1 not in graph
        assert graph.vertex_count == 0
        assert graph.edge_insertion_count == 0

    def test_add_undirected_edge_inserts_both_directions(self):
        graph = FriendGraph()
        graph.add_undirected_edge(3, 4)

        assert graph.export_graph() == {3: {4}, 4: {3}}
        assert graph.edge_insertion_count == 2

    def test_add_undirected_edge_rejects_before_inserting(self):
        graph = FriendGraph()
        with pytest.raises(InvalidArgumentError):
            graph.add_undirected_edge(1, -1)

        assert graph.vertex_count == 0
        assert graph.edge_insertion_count == 0

    def test_degree_tracks_neighbor_set(self, chain_graph):
        for node in chain_graph:
            assert node.degree == len(node.neighbors)

    def test_chain_counts(self, chain_graph):
        assert chain_graph.vertex_count == 6
        assert chain_graph.edge_insertion_count == 14
        assert chain_graph.distinct_edge_count == 14


class TestExport:
    def test_export_graph(self, cluster_graph):
        assert cluster_graph.export_graph() == {
            32: {50, 44},
            50: {23},
            44: {50},
            18: {23, 44},
            25: {23, 65, 18},
            65: {23},
            23: {18, 25, 65},
        }

    def test_export_graph_returns_copies(self, cluster_graph):
        exported = cluster_graph.export_graph()
        exported[32].add(99)

        assert 99 not in cluster_graph.get_node(32).neighbors

    def test_adjacency_string(self):
        graph = FriendGraph()
        graph.add_edge(1, 3)
        graph.add_edge(1, 2)
        graph.add_edge(1, 2)

        assert graph.adjacency_string() == (
            "Adjacency list (size 3+3 integers):\n"
            "\t1: 2, 3, \n"
            "\t3: \n"
            "\t2: "
        )

    def test_adjacency_string_empty_graph(self):
        assert FriendGraph().adjacency_string() == "Adjacency list (size 0+0 integers):"

    def test_get_friends_is_live(self, cluster_graph):
        friends = cluster_graph.get_friends()
        assert isinstance(friends[25], Node)
        cluster_graph.add_vertex(99)
        assert 99 in friends

    def test_require_node_unknown(self, cluster_graph):
        with pytest.raises(InvalidArgumentError):
            cluster_graph.require_node(1000)

    def test_require_node_accepts_node(self, cluster_graph):
        node = cluster_graph.get_node(25)
        assert cluster_graph.require_node(node) is node

    def test_to_networkx(self, cluster_graph):
        digraph = cluster_graph.to_networkx()

        assert digraph.is_directed()
        assert set(digraph.nodes) == set(cluster_graph.get_friends())
        assert digraph.number_of_edges() == cluster_graph.distinct_edge_count
        assert digraph.has_edge(25, 65)
        assert not digraph.has_edge(65, 25)
