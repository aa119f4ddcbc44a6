"""The per-user neural network record."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from neural_progression.core.catalog import find_definition
from neural_progression.core.connection import NetworkConnection
from neural_progression.core.domain import NodeTier
from neural_progression.core.node import NetworkNode
from neural_progression.utils.timeutils import format_timestamp, parse_timestamp, utcnow


def mean_level(nodes: tuple[NetworkNode, ...] | list[NetworkNode]) -> float:
    """Mean level over the unlocked nodes, 0.0 when none are unlocked."""
    levels = [n.level for n in nodes if n.unlocked]
    if not levels:
        return 0.0
    return sum(levels) / len(levels)


def overall_level_for(nodes: tuple[NetworkNode, ...] | list[NetworkNode]) -> int:
    """Overall level: floor of the unlocked mean, never below 1."""
    return max(1, math.floor(mean_level(nodes)))


@dataclass(frozen=True)
class NeuralNetwork:
    """
    A user's skill graph.

    Stored as two flat tuples (nodes, connections); lookups go through an
    id index built on demand. Instances are never modified; the updater
    returns a new network.

    Attributes:
        owner_id: Identity of the user that owns the network
        nodes: Every catalog node, locked or not
        connections: Links among base nodes
        overall_level: max(1, floor(mean level of unlocked nodes))
        last_updated: When the network was last produced (informational)
    """

    owner_id: str
    nodes: tuple[NetworkNode, ...]
    connections: tuple[NetworkConnection, ...]
    overall_level: int = 1
    last_updated: datetime = field(default_factory=utcnow)

    def node_index(self) -> dict[str, NetworkNode]:
        """Map of node id to node."""
        return {node.id: node for node in self.nodes}

    def get_node(self, node_id: str) -> NetworkNode | None:
        """Find a node by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def nodes_in_tier(self, tier: NodeTier) -> tuple[NetworkNode, ...]:
        """Nodes of one catalog tier, in network order."""
        return tuple(n for n in self.nodes if n.tier == tier)

    @property
    def unlocked_nodes(self) -> tuple[NetworkNode, ...]:
        """Nodes that take part in leveling."""
        return tuple(n for n in self.nodes if n.unlocked)

    @property
    def mean_level(self) -> float:
        """Mean level over unlocked nodes."""
        return mean_level(self.nodes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored document layout."""
        return {
            "userId": self.owner_id,
            "nodes": [node.to_dict() for node in self.nodes],
            "connections": [conn.to_dict() for conn in self.connections],
            "overallLevel": self.overall_level,
            "lastUpdated": format_timestamp(self.last_updated),
        }

    @classmethod
    def from_dict(cls, data: Any) -> NeuralNetwork:
        """
        Rebuild a network from a stored document.

        Records written before nodes carried a ``tier`` get it from the
        catalog by node name.

        Raises:
            ValueError: If the document is not a mapping, lacks userId/nodes,
                or holds a node, connection or timestamp that cannot be read
        """
        if not isinstance(data, dict):
            raise ValueError("Invalid network record: expected a JSON object")
        missing = [key for key in ("userId", "nodes") if key not in data]
        if missing:
            raise ValueError(f"Invalid network record: missing fields {missing}")

        raw_nodes = data["nodes"]
        raw_connections = data.get("connections", [])
        if not isinstance(raw_nodes, list) or not all(isinstance(n, dict) for n in raw_nodes):
            raise ValueError("Invalid network record: nodes must be a list of objects")
        if not isinstance(raw_connections, list) or not all(
            isinstance(c, dict) for c in raw_connections
        ):
            raise ValueError("Invalid network record: connections must be a list of objects")

        last_updated = data.get("lastUpdated")
        if last_updated is not None and not isinstance(last_updated, str):
            raise ValueError("Invalid network record: lastUpdated must be an ISO-8601 string")

        try:
            nodes: list[NetworkNode] = []
            for raw in raw_nodes:
                definition = find_definition(str(raw.get("name", "")))
                tier = definition.tier if definition else None
                nodes.append(NetworkNode.from_dict(raw, tier=tier))

            return cls(
                owner_id=str(data["userId"]),
                nodes=tuple(nodes),
                connections=tuple(NetworkConnection.from_dict(raw) for raw in raw_connections),
                overall_level=max(1, int(data.get("overallLevel", 1))),
                last_updated=parse_timestamp(last_updated),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid network record: {e!r}") from e
