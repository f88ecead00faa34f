"""Analytics package: algorithms over friendship graphs.

Provides:
- shortest_path_lengths: BFS hop distances from one vertex
- degree/closeness/betweenness_centrality: per-vertex centrality mappings
- rank_buckets / top_centrality: tie-aware top-N ranking
- suggest_friends_of_friends: local triadic-closure recommendations
- export_top_degree_graphs: star subgraphs of the best connected vertices
"""

from friendgraph.analytics.centrality import (
    betweenness_centrality,
    closeness_centrality,
    degree_centrality,
)
from friendgraph.analytics.paths import UNREACHED, shortest_path_lengths
from friendgraph.analytics.ranking import (
    group_by_value,
    rank_buckets,
    select_top_buckets,
    top_centrality,
)
from friendgraph.analytics.subgraphs import export_top_degree_graphs, star_subgraph
from friendgraph.analytics.suggestions import suggest_friends_of_friends

__all__ = [
    "UNREACHED",
    "betweenness_centrality",
    "closeness_centrality",
    "degree_centrality",
    "export_top_degree_graphs",
    "group_by_value",
    "rank_buckets",
    "select_top_buckets",
    "shortest_path_lengths",
    "star_subgraph",
    "suggest_friends_of_friends",
    "top_centrality",
]
