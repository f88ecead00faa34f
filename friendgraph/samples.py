"""Sample friendship graphs used by the demo driver and the test-suite."""

from typing import Callable, Dict

from .graph import FriendGraph

CHAIN_FRIENDSHIPS = [
    (10, 20),
    (20, 30),
    (30, 40),
    (30, 50),
    (40, 50),
    (40, 60),
    (50, 60),
]


def build_chain_graph() -> FriendGraph:
    """Six people in a chain 10-20-30-40-50-60 with extra links 30-50 and 40-60.

    Every friendship is stored in both directions.
    """
    graph = FriendGraph()
    for first, second in CHAIN_FRIENDSHIPS:
        graph.add_undirected_edge(first, second)
    return graph


def build_cluster_graph() -> FriendGraph:
    """Seven people with one-way and mutual friendships, built vertex by vertex."""
    graph = FriendGraph()
    graph.add_vertex(32)
    graph.add_edge(32, 50)
    graph.add_edge(32, 44)
    graph.add_vertex(50)
    graph.add_vertex(44)
    graph.add_edge(44, 50)
    graph.add_vertex(18)
    graph.add_edge(18, 23)
    graph.add_edge(18, 44)
    graph.add_vertex(25)
    graph.add_edge(25, 23)
    graph.add_edge(25, 65)
    graph.add_edge(25, 18)
    graph.add_vertex(65)
    graph.add_edge(65, 23)
    graph.add_vertex(23)
    graph.add_edge(23, 18)
    graph.add_edge(23, 25)
    graph.add_edge(23, 65)
    graph.add_edge(50, 23)
    return graph


SAMPLE_GRAPHS: Dict[str, Callable[[], FriendGraph]] = {
    "chain": build_chain_graph,
    "cluster": build_cluster_graph,
}
