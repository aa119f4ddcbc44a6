"""Network node data structures - the skills a user grows."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from neural_progression.core.domain import CognitiveDomain, NodeTier

MIN_LEVEL = 1
MAX_LEVEL = 10
PROGRESS_PER_LEVEL = 100.0

# Largest float strictly below a full level
_MAX_PROGRESS = math.nextafter(PROGRESS_PER_LEVEL, 0.0)


def clamp_level(level: int) -> int:
    """Clamp a node level into [MIN_LEVEL, MAX_LEVEL]."""
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))


def clamp_progress(progress: float) -> float:
    """Clamp progress into [0, PROGRESS_PER_LEVEL)."""
    if progress < 0:
        return 0.0
    if progress >= PROGRESS_PER_LEVEL:
        return _MAX_PROGRESS
    return float(progress)


@dataclass(frozen=True)
class Position:
    """Layout hint for renderers (0-100 percentages). Never read by the engine."""

    x: float = 50.0
    y: float = 50.0


@dataclass(frozen=True)
class NetworkNode:
    """
    A single skill in a user's network.

    Nodes are immutable; every change produces a new node. A locked node
    stays at level 1 with zero progress until the pass that unlocks it.

    Attributes:
        id: Stable identifier (the domain value for base nodes)
        name: Display name
        description: What the skill represents
        domain: Cognitive domain the skill belongs to
        tier: Catalog tier (base, advanced, expert)
        connections: IDs of related nodes, used only by unlock rules
        position: Cosmetic layout hint
        unlocked: Whether the node takes part in leveling
        level: Current level (1-10)
        progress: Progress toward the next level (0-100)
    """

    id: str
    name: str
    description: str
    domain: CognitiveDomain
    tier: NodeTier
    connections: tuple[str, ...] = ()
    position: Position = field(default_factory=Position)
    unlocked: bool = False
    level: int = MIN_LEVEL
    progress: float = 0.0

    def unlock(self, initial_progress: float) -> NetworkNode:
        """Return an unlocked copy at level 1 carrying ``initial_progress``."""
        return NetworkNode(
            id=self.id,
            name=self.name,
            description=self.description,
            domain=self.domain,
            tier=self.tier,
            connections=self.connections,
            position=self.position,
            unlocked=True,
            level=MIN_LEVEL,
            progress=clamp_progress(initial_progress),
        )

    def gain(self, amount: float) -> NetworkNode:
        """
        Return a copy with ``amount`` progress added.

        Crossing 100 rolls over once: the level rises (capped at 10) and
        100 is subtracted from progress.

        Args:
            amount: Progress points to add (negative values are ignored)

        Returns:
            New NetworkNode with updated level and progress
        """
        progress = self.progress + max(0.0, amount)
        level = self.level
        # At MAX_LEVEL the rollover still subtracts a full level, so
        # (level, progress) goes down there; below the cap it never does.
        if progress >= PROGRESS_PER_LEVEL:
            level = clamp_level(level + 1)
            progress -= PROGRESS_PER_LEVEL

        return NetworkNode(
            id=self.id,
            name=self.name,
            description=self.description,
            domain=self.domain,
            tier=self.tier,
            connections=self.connections,
            position=self.position,
            unlocked=self.unlocked,
            level=clamp_level(level),
            progress=clamp_progress(progress),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready record."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "domain": self.domain.value,
            "tier": self.tier.value,
            "position": {"x": self.position.x, "y": self.position.y},
            "connections": list(self.connections),
            "unlocked": self.unlocked,
            "level": self.level,
            "progress": self.progress,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], tier: NodeTier | None = None) -> NetworkNode:
        """
        Build a node from a stored record.

        Args:
            data: Record produced by ``to_dict`` (or the legacy layout without ``tier``)
            tier: Tier to use when the record does not carry one

        Returns:
            A NetworkNode with level and progress clamped into range
        """
        position = data.get("position") or {}
        node_tier = NodeTier(data["tier"]) if data.get("tier") else tier or NodeTier.BASE
        unlocked = bool(data.get("unlocked", False))

        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            domain=CognitiveDomain(data["domain"]),
            tier=node_tier,
            connections=tuple(str(c) for c in data.get("connections", ())),
            position=Position(
                x=float(position.get("x", 50.0)),
                y=float(position.get("y", 50.0)),
            ),
            unlocked=unlocked,
            level=clamp_level(data.get("level", MIN_LEVEL)) if unlocked else MIN_LEVEL,
            progress=clamp_progress(float(data.get("progress", 0.0))) if unlocked else 0.0,
        )
