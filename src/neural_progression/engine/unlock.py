"""Unlock evaluator - decides when a locked node joins the network.

Two rules, chosen by the candidate's tier:

- ``AdvancedUnlock``: some base node in the candidate's adjacency has
  reached ``min_base_level``.
- ``ExpertUnlock``: at least ``min_advanced_unlocked`` advanced nodes of
  the candidate's domain are unlocked.

Base nodes start unlocked and have no rule.
"""

from __future__ import annotations

from dataclasses import dataclass

from neural_progression.core.domain import NodeTier
from neural_progression.core.network import NeuralNetwork
from neural_progression.core.node import NetworkNode


@dataclass(frozen=True)
class AdvancedUnlock:
    """Unlock once an adjacent base node reaches a level."""

    min_base_level: int = 3

    def is_satisfied(self, node: NetworkNode, network: NeuralNetwork) -> bool:
        adjacent = set(node.connections)
        return any(
            other.level >= self.min_base_level
            for other in network.nodes_in_tier(NodeTier.BASE)
            if other.id in adjacent
        )


@dataclass(frozen=True)
class ExpertUnlock:
    """Unlock once enough advanced nodes of the same domain are unlocked."""

    min_advanced_unlocked: int = 2

    def is_satisfied(self, node: NetworkNode, network: NeuralNetwork) -> bool:
        unlocked_in_domain = sum(
            1
            for other in network.nodes_in_tier(NodeTier.ADVANCED)
            if other.unlocked and other.domain == node.domain
        )
        return unlocked_in_domain >= self.min_advanced_unlocked


UnlockRule = AdvancedUnlock | ExpertUnlock

_RULES: dict[NodeTier, UnlockRule] = {
    NodeTier.ADVANCED: AdvancedUnlock(),
    NodeTier.EXPERT: ExpertUnlock(),
}


def unlock_rule_for(node: NetworkNode) -> UnlockRule | None:
    """The rule governing ``node``, or None for base nodes."""
    return _RULES.get(node.tier)


def should_unlock(node: NetworkNode, network: NeuralNetwork) -> bool:
    """
    Check whether a locked node should unlock given the network state.

    Returns False for nodes that are already unlocked and for base nodes.
    Neither argument is modified.
    """
    if node.unlocked:
        return False
    rule = unlock_rule_for(node)
    if rule is None:
        return False
    return rule.is_satisfied(node, network)
