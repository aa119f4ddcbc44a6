"""Network updater - evolves a network after a finished game.

One call is one pass:

1. Locked nodes whose unlock rule holds on the *incoming* network are
   unlocked at level 1, seeded with this pass's progress.
2. Already-unlocked nodes gain progress and level up on crossing 100.
3. Connections whose endpoints are both unlocked take the mean of the
   endpoint levels (scaled to 0-1) as their strength.
4. The overall level and the progress toward the next one are derived
   from the mean level of unlocked nodes.

The incoming network is never modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from neural_progression.core.connection import NetworkConnection
from neural_progression.core.network import NeuralNetwork, mean_level, overall_level_for
from neural_progression.core.node import MAX_LEVEL, NetworkNode
from neural_progression.core.performance import PerformanceSnapshot, RivalSnapshot
from neural_progression.engine.progress import node_progress
from neural_progression.engine.unlock import should_unlock
from neural_progression.utils.timeutils import utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkProgress:
    """What changed during one update pass.

    Produced once per update for UI and notification listeners; not
    meant to be stored.

    Attributes:
        previous_level: Overall level before the pass.
        current_level: Overall level after the pass.
        level_progress: Percent (0-100) of the way to the next overall level.
        recently_unlocked_nodes: Nodes unlocked by this pass.
        recently_activated_connections: Connections that became active.
    """

    previous_level: int
    current_level: int
    level_progress: float
    recently_unlocked_nodes: tuple[NetworkNode, ...] = ()
    recently_activated_connections: tuple[NetworkConnection, ...] = ()

    @property
    def leveled_up(self) -> bool:
        """Whether the overall level rose during the pass."""
        return self.current_level > self.previous_level

    def to_dict(self) -> dict[str, Any]:
        """Serialize for listeners."""
        return {
            "previousLevel": self.previous_level,
            "currentLevel": self.current_level,
            "levelProgress": self.level_progress,
            "recentlyUnlockedNodes": [n.to_dict() for n in self.recently_unlocked_nodes],
            "recentlyActivatedConnections": [
                c.to_dict() for c in self.recently_activated_connections
            ],
        }


def level_progress_for(nodes: tuple[NetworkNode, ...], overall_level: int) -> float:
    """Percent of the way from ``overall_level`` to the next, clamped to 0-100."""
    if not any(n.unlocked for n in nodes):
        return 0.0
    return max(0.0, min(100.0, (mean_level(nodes) - overall_level) * 100))


def connection_strength(source: NetworkNode, target: NetworkNode) -> float:
    """Strength implied by two endpoint levels: their mean scaled to 0-1."""
    return (source.level + target.level) / 2 / MAX_LEVEL


def _update_connections(
    connections: tuple[NetworkConnection, ...],
    index: dict[str, NetworkNode],
) -> tuple[list[NetworkConnection], list[NetworkConnection]]:
    updated: list[NetworkConnection] = []
    activated: list[NetworkConnection] = []
    for connection in connections:
        source = index.get(connection.source)
        target = index.get(connection.target)
        if source is None or target is None or not (source.unlocked and target.unlocked):
            updated.append(connection)
            continue

        refreshed = connection.with_strength(connection_strength(source, target))
        if refreshed.active and not connection.active:
            activated.append(refreshed)
        updated.append(refreshed)
    return updated, activated


def apply_round_results(
    network: NeuralNetwork,
    performance: Any,
    rival: Any = None,
) -> tuple[NeuralNetwork, NetworkProgress]:
    """
    Apply one finished game to a network.

    Args:
        network: Current network (left untouched)
        performance: PerformanceSnapshot or raw round-results mapping;
            an empty mapping gives every unlocked node the flat base gain
        rival: Optional RivalSnapshot or raw rival mapping

    Returns:
        Tuple of (new network, progress report)
    """
    snapshot = PerformanceSnapshot.coerce(performance)
    rival_snapshot = RivalSnapshot.coerce(rival)

    nodes: list[NetworkNode] = []
    unlocked: list[NetworkNode] = []

    for node in network.nodes:
        gain = node_progress(node, snapshot, rival_snapshot)

        if not node.unlocked:
            # Rules read the incoming network, so nodes unlocked in this
            # pass cannot unlock others until the next one.
            if should_unlock(node, network):
                opened = node.unlock(gain)
                unlocked.append(opened)
                nodes.append(opened)
                logger.debug("Unlocked %s (%s) for %s", node.name, node.id, network.owner_id)
            else:
                nodes.append(node)
            continue

        grown = node.gain(gain)
        if grown.level > node.level:
            logger.debug("%s reached level %d for %s", node.name, grown.level, network.owner_id)
        nodes.append(grown)

    new_nodes = tuple(nodes)
    index = {node.id: node for node in new_nodes}
    connections, activated = _update_connections(network.connections, index)

    overall_level = overall_level_for(new_nodes)
    progress = NetworkProgress(
        previous_level=network.overall_level,
        current_level=overall_level,
        level_progress=level_progress_for(new_nodes, overall_level),
        recently_unlocked_nodes=tuple(unlocked),
        recently_activated_connections=tuple(activated),
    )

    updated = NeuralNetwork(
        owner_id=network.owner_id,
        nodes=new_nodes,
        connections=tuple(connections),
        overall_level=overall_level,
        last_updated=utcnow(),
    )
    return updated, progress
