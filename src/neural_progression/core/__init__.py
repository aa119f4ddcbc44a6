"""Core data models for NeuralProgression."""

from neural_progression.core.catalog import (
    ADVANCED_NODES,
    BASE_NODES,
    EXPERT_NODES,
    NodeDefinition,
    all_definitions,
    definitions_for,
    find_definition,
)
from neural_progression.core.connection import ACTIVATION_THRESHOLD, NetworkConnection
from neural_progression.core.domain import CognitiveDomain, NodeTier
from neural_progression.core.network import NeuralNetwork
from neural_progression.core.node import MAX_LEVEL, MIN_LEVEL, NetworkNode, Position
from neural_progression.core.performance import (
    ROUND_TIME_SECONDS,
    PerformanceSnapshot,
    RivalSnapshot,
    Round,
    RoundResult,
)

__all__ = [
    # Domains and tiers
    "CognitiveDomain",
    "NodeTier",
    # Graph records
    "NetworkNode",
    "Position",
    "NetworkConnection",
    "NeuralNetwork",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "ACTIVATION_THRESHOLD",
    # Catalog
    "NodeDefinition",
    "BASE_NODES",
    "ADVANCED_NODES",
    "EXPERT_NODES",
    "all_definitions",
    "definitions_for",
    "find_definition",
    # Snapshots
    "Round",
    "RoundResult",
    "PerformanceSnapshot",
    "RivalSnapshot",
    "ROUND_TIME_SECONDS",
]
