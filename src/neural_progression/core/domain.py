"""Cognitive domains and node tiers."""

from __future__ import annotations

from enum import StrEnum


class CognitiveDomain(StrEnum):
    """The five fixed skill categories a network measures.

    Member order matters: it breaks ties when ranking domains.
    """

    MEMORY = "memory"
    CREATIVITY = "creativity"
    LOGIC = "logic"
    PATTERN = "pattern"
    SPEED = "speed"


class NodeTier(StrEnum):
    """Catalog tier of a node, controlling how it unlocks."""

    BASE = "base"  # Always unlocked, one per domain
    ADVANCED = "advanced"  # Unlocks from an adjacent base node at level 3
    EXPERT = "expert"  # Unlocks from two advanced nodes in its domain
