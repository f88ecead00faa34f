"""friendgraph: influence analytics for friendship networks.

Build a FriendGraph of integer-identified people, then measure degree,
closeness and betweenness centrality, rank people by influence, suggest
friends of friends and export star subgraphs of the best connected.
"""

__version__ = "0.1.0"

from .exceptions import FriendGraphError, InvalidArgumentError, SettingsError
from .graph import FriendGraph
from .models import AnalyticsSettings, CentralityKind, Node

__all__ = [
    "AnalyticsSettings",
    "CentralityKind",
    "FriendGraph",
    "FriendGraphError",
    "InvalidArgumentError",
    "Node",
    "SettingsError",
    "__version__",
]
