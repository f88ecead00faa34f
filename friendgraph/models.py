"""
friendgraph Data Models and Enums

File Purpose: Core data structures and enumerations for friendship graph analytics
Primary Functions/Classes: Node, CentralityKind, AnalyticsSettings, validate_node_id
Inputs and Outputs (I/O): Data structure definitions, no direct I/O operations

This module defines the fundamental data structures used throughout the package
for representing people in a friendship graph, the centrality measures that can
be ranked, and user preferences for the command line driver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Set, Union

from rich.console import Console

from .exceptions import InvalidArgumentError

# Shared console instance for all friendgraph modules
console = Console()


def validate_node_id(node_id: Any) -> int:
    """Return ``node_id`` if it is a usable vertex identifier.

    Identifiers are non-negative integers. ``bool`` is rejected even though it
    subclasses ``int``.
    """
    if isinstance(node_id, bool) or not isinstance(node_id, int):
        raise InvalidArgumentError(
            "Vertex identifier must be an integer.",
            details=f"Got {node_id!r} ({type(node_id).__name__})",
        )
    if node_id < 0:
        raise InvalidArgumentError(
            "Number must be 0 or greater.",
            details=f"Got {node_id}",
        )
    return node_id


class CentralityKind(Enum):
    """Centrality measures the ranker knows how to order by."""

    DEGREE = "degree"
    CLOSENESS = "closeness"
    BETWEENNESS = "betweenness"

    @classmethod
    def parse(cls, value: Union["CentralityKind", str]) -> "CentralityKind":
        """Resolve a member or its (case-insensitive) name, rejecting anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(
            "Invalid type",
            details=f"Expected one of {', '.join(k.value for k in cls)}; got {value!r}",
        )


@dataclass(eq=False)
class Node:
    """A person in the friendship graph.

    ``neighbors`` holds the identifiers of outgoing friends; they are resolved
    through the owning graph. ``closeness`` and ``betweenness`` hold the values
    written by the most recent centrality computation.
    """

    node_id: int
    neighbors: Set[int] = field(default_factory=set)
    closeness: float = 0.0
    betweenness: float = 0.0

    def __post_init__(self) -> None:
        validate_node_id(self.node_id)

    @property
    def value(self) -> int:
        return self.node_id

    @property
    def degree(self) -> int:
        return len(self.neighbors)

    def add_neighbor(self, node_id: int) -> bool:
        """Add a friend; returns False when the friendship already existed."""
        if node_id in self.neighbors:
            return False
        self.neighbors.add(node_id)
        return True

    def is_friend_of(self, node_id: int) -> bool:
        return node_id in self.neighbors

    def centrality(self, kind: Union[CentralityKind, str]) -> float:
        kind = CentralityKind.parse(kind)
        if kind is CentralityKind.DEGREE:
            return float(self.degree)
        if kind is CentralityKind.CLOSENESS:
            return self.closeness
        return self.betweenness


@dataclass
class AnalyticsSettings:
    """User-adjustable defaults for the command line driver."""

    default_top_n: int = 2
    default_kind: str = "degree"
    # Closeness assigned to vertices whose distance sum is zero
    isolated_closeness: float = 0.0
    show_adjacency: bool = True
    log_level: str = "WARNING"
