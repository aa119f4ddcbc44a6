"""Static node catalog.

Three tiers of node definitions: five base nodes (one per domain),
ten advanced nodes (two per domain) and five expert nodes (one per
domain). Unlock rules depend on the exact adjacency declared here, so
entries are immutable and looked up by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from neural_progression.core.domain import CognitiveDomain, NodeTier
from neural_progression.core.node import Position


@dataclass(frozen=True)
class NodeDefinition:
    """Catalog entry from which network nodes are built.

    Attributes:
        name: Display name (unique across the catalog)
        description: What the skill represents
        domain: Cognitive domain
        tier: Catalog tier
        connections: IDs of related base nodes (domain values)
        position: Cosmetic layout hint
    """

    name: str
    description: str
    domain: CognitiveDomain
    tier: NodeTier
    connections: tuple[str, ...]
    position: Position


def _base(
    name: str,
    description: str,
    domain: CognitiveDomain,
    x: float,
    y: float,
    *connections: str,
) -> NodeDefinition:
    return NodeDefinition(name, description, domain, NodeTier.BASE, connections, Position(x, y))


def _advanced(
    name: str,
    description: str,
    domain: CognitiveDomain,
    x: float,
    y: float,
    *connections: str,
) -> NodeDefinition:
    return NodeDefinition(name, description, domain, NodeTier.ADVANCED, connections, Position(x, y))


def _expert(
    name: str,
    description: str,
    domain: CognitiveDomain,
    x: float,
    y: float,
    *connections: str,
) -> NodeDefinition:
    return NodeDefinition(name, description, domain, NodeTier.EXPERT, connections, Position(x, y))


_M = CognitiveDomain.MEMORY
_C = CognitiveDomain.CREATIVITY
_L = CognitiveDomain.LOGIC
_P = CognitiveDomain.PATTERN
_S = CognitiveDomain.SPEED

BASE_NODES: tuple[NodeDefinition, ...] = (
    _base(
        "Memory",
        "Your ability to retain and recall information accurately",
        _M, 50, 20, "creativity", "pattern",
    ),
    _base(
        "Creativity",
        "Your ability to generate novel ideas and solutions",
        _C, 80, 40, "memory", "logic",
    ),
    _base(
        "Logic",
        "Your ability to reason systematically and draw valid conclusions",
        _L, 65, 70, "creativity", "pattern", "speed",
    ),
    _base(
        "Pattern Recognition",
        "Your ability to identify meaningful relationships in complex data",
        _P, 30, 60, "memory", "logic", "speed",
    ),
    _base(
        "Processing Speed",
        "Your ability to quickly process information and respond appropriately",
        _S, 20, 35, "pattern", "logic",
    ),
)

ADVANCED_NODES: tuple[NodeDefinition, ...] = (
    _advanced(
        "Working Memory",
        "Your ability to manipulate information while keeping it in mind",
        _M, 40, 10, "memory", "speed",
    ),
    _advanced(
        "Long-term Memory",
        "Your ability to store and retrieve information over extended periods",
        _M, 60, 15, "memory", "pattern",
    ),
    _advanced(
        "Divergent Thinking",
        "Your ability to explore many possible solutions to a problem",
        _C, 90, 30, "creativity", "pattern",
    ),
    _advanced(
        "Convergent Thinking",
        "Your ability to find the single best solution to a well-defined problem",
        _C, 85, 50, "creativity", "logic",
    ),
    _advanced(
        "Deductive Reasoning",
        "Your ability to apply general rules to specific situations",
        _L, 75, 80, "logic", "pattern",
    ),
    _advanced(
        "Inductive Reasoning",
        "Your ability to derive general principles from specific observations",
        _L, 55, 75, "logic", "creativity",
    ),
    _advanced(
        "Visual Pattern Recognition",
        "Your ability to identify patterns in visual information",
        _P, 20, 70, "pattern", "creativity",
    ),
    _advanced(
        "Sequential Pattern Recognition",
        "Your ability to identify patterns in sequential information",
        _P, 35, 50, "pattern", "logic",
    ),
    _advanced(
        "Reaction Time",
        "Your ability to respond quickly to stimuli",
        _S, 10, 25, "speed", "memory",
    ),
    _advanced(
        "Information Processing",
        "Your ability to quickly analyze and interpret complex information",
        _S, 25, 45, "speed", "logic",
    ),
)

EXPERT_NODES: tuple[NodeDefinition, ...] = (
    _expert(
        "Cognitive Integration",
        "Your ability to synthesize information across multiple domains",
        _M, 50, 50, "memory", "creativity", "logic", "pattern", "speed",
    ),
    _expert(
        "Metacognition",
        "Your awareness and understanding of your own thought processes",
        _L, 45, 30, "memory", "logic", "creativity",
    ),
    _expert(
        "Cognitive Flexibility",
        "Your ability to adapt thinking strategies to new situations",
        _C, 70, 60, "creativity", "logic", "speed",
    ),
    _expert(
        "Intuitive Pattern Recognition",
        "Your ability to recognize patterns without conscious reasoning",
        _P, 30, 40, "pattern", "speed", "creativity",
    ),
    _expert(
        "Cognitive Efficiency",
        "Your ability to allocate mental resources optimally",
        _S, 15, 55, "speed", "memory", "logic",
    ),
)

_BY_TIER: dict[NodeTier, tuple[NodeDefinition, ...]] = {
    NodeTier.BASE: BASE_NODES,
    NodeTier.ADVANCED: ADVANCED_NODES,
    NodeTier.EXPERT: EXPERT_NODES,
}

_BY_NAME: dict[str, NodeDefinition] = {
    definition.name: definition for tier in _BY_TIER.values() for definition in tier
}


def definitions_for(tier: NodeTier) -> tuple[NodeDefinition, ...]:
    """All catalog entries of one tier, in catalog order."""
    return _BY_TIER[tier]


def all_definitions() -> tuple[NodeDefinition, ...]:
    """Every catalog entry: base, then advanced, then expert."""
    return BASE_NODES + ADVANCED_NODES + EXPERT_NODES


def find_definition(name: str) -> NodeDefinition | None:
    """Look up a catalog entry by display name."""
    return _BY_NAME.get(name)
