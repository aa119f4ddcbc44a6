"""Connection data structures - links between base skills."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# A connection counts as active once its strength passes this value
ACTIVATION_THRESHOLD = 0.3


def clamp_strength(strength: float) -> float:
    """Clamp a connection strength into [0, 1]."""
    return max(0.0, min(1.0, float(strength)))


@dataclass(frozen=True)
class NetworkConnection:
    """
    An undirected link between two nodes.

    Attributes:
        source: ID of one endpoint
        target: ID of the other endpoint
        strength: Link strength (0.0 - 1.0)
        active: Whether the link is currently active
    """

    source: str
    target: str
    strength: float = 0.5
    active: bool = True

    @property
    def key(self) -> frozenset[str]:
        """Direction-independent identity of the pair."""
        return frozenset((self.source, self.target))

    def connects(self, a: str, b: str) -> bool:
        """Check whether this connection joins ``a`` and ``b`` in either direction."""
        return self.key == frozenset((a, b))

    def with_strength(self, strength: float) -> NetworkConnection:
        """
        Return a copy with a recomputed strength.

        An inactive connection becomes active once strength exceeds
        ACTIVATION_THRESHOLD; an active one never deactivates.
        """
        new_strength = clamp_strength(strength)
        return NetworkConnection(
            source=self.source,
            target=self.target,
            strength=new_strength,
            active=self.active or new_strength > ACTIVATION_THRESHOLD,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready record."""
        return {
            "source": self.source,
            "target": self.target,
            "strength": self.strength,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NetworkConnection:
        """Build a connection from a stored record."""
        return cls(
            source=str(data["source"]),
            target=str(data["target"]),
            strength=clamp_strength(data.get("strength", 0.5)),
            active=bool(data.get("active", True)),
        )
