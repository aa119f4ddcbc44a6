"""NeuralProgression - skill-graph progression engine for cognitive challenge games."""

from neural_progression.core.connection import NetworkConnection
from neural_progression.core.domain import CognitiveDomain, NodeTier
from neural_progression.core.network import NeuralNetwork
from neural_progression.core.node import NetworkNode
from neural_progression.core.performance import PerformanceSnapshot, RivalSnapshot
from neural_progression.engine.factory import InvalidInputError, create_initial_network
from neural_progression.engine.progress import node_progress
from neural_progression.engine.stats import NetworkStats, compute_stats
from neural_progression.engine.tracker import ProgressionTracker
from neural_progression.engine.unlock import should_unlock
from neural_progression.engine.updater import NetworkProgress, apply_round_results

__version__ = "0.1.0"

__all__ = [
    # Core models
    "CognitiveDomain",
    "NodeTier",
    "NetworkNode",
    "NetworkConnection",
    "NeuralNetwork",
    "PerformanceSnapshot",
    "RivalSnapshot",
    # Engine
    "create_initial_network",
    "node_progress",
    "should_unlock",
    "apply_round_results",
    "compute_stats",
    "NetworkProgress",
    "NetworkStats",
    "ProgressionTracker",
    "InvalidInputError",
    # Version
    "__version__",
]
