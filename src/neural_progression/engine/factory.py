"""Network factory - builds the starting graph for a new user."""

from __future__ import annotations

import logging
from uuid import uuid4

from neural_progression.core.catalog import ADVANCED_NODES, BASE_NODES, EXPERT_NODES, NodeDefinition
from neural_progression.core.connection import NetworkConnection
from neural_progression.core.network import NeuralNetwork
from neural_progression.core.node import NetworkNode
from neural_progression.utils.timeutils import utcnow

logger = logging.getLogger(__name__)

# Strength given to every base connection at construction
INITIAL_CONNECTION_STRENGTH = 0.5


class InvalidInputError(ValueError):
    """Raised when a network cannot be built from the given input."""


def _short_id() -> str:
    return uuid4().hex[:8]


def _build_node(definition: NodeDefinition, node_id: str, unlocked: bool) -> NetworkNode:
    return NetworkNode(
        id=node_id,
        name=definition.name,
        description=definition.description,
        domain=definition.domain,
        tier=definition.tier,
        connections=definition.connections,
        position=definition.position,
        unlocked=unlocked,
    )


def _base_connections(nodes: list[NetworkNode]) -> list[NetworkConnection]:
    """One connection per declared adjacency pair, ignoring direction."""
    connections: list[NetworkConnection] = []
    seen: set[frozenset[str]] = set()
    for node in nodes:
        for target_id in node.connections:
            pair = frozenset((node.id, target_id))
            if pair in seen:
                continue
            seen.add(pair)
            connections.append(
                NetworkConnection(
                    source=node.id,
                    target=target_id,
                    strength=INITIAL_CONNECTION_STRENGTH,
                    active=True,
                )
            )
    return connections


def create_initial_network(owner_id: str) -> NeuralNetwork:
    """
    Create the starting network for a new user.

    Base nodes are unlocked at level 1 and use their domain as id;
    advanced and expert nodes are locked with generated ids and get no
    connection records.

    Args:
        owner_id: Identity of the owning user

    Returns:
        A new NeuralNetwork at overall level 1

    Raises:
        InvalidInputError: If owner_id is empty or not a string
    """
    if not isinstance(owner_id, str) or not owner_id.strip():
        raise InvalidInputError("owner_id must be a non-empty string")

    base_nodes = [_build_node(d, d.domain.value, unlocked=True) for d in BASE_NODES]
    connections = _base_connections(base_nodes)

    advanced_nodes = [
        _build_node(d, f"{d.domain.value}-{_short_id()}", unlocked=False) for d in ADVANCED_NODES
    ]
    expert_nodes = [
        _build_node(d, f"{d.domain.value}-expert-{_short_id()}", unlocked=False)
        for d in EXPERT_NODES
    ]

    network = NeuralNetwork(
        owner_id=owner_id,
        nodes=tuple(base_nodes + advanced_nodes + expert_nodes),
        connections=tuple(connections),
        overall_level=1,
        last_updated=utcnow(),
    )
    logger.debug(
        "Created network for %s: %d nodes, %d connections",
        owner_id,
        len(network.nodes),
        len(network.connections),
    )
    return network
