"""Engine components for network creation, progression and statistics."""

from neural_progression.engine.factory import InvalidInputError, create_initial_network
from neural_progression.engine.progress import node_progress
from neural_progression.engine.stats import NetworkStats, compute_stats
from neural_progression.engine.tracker import ProgressionTracker
from neural_progression.engine.unlock import (
    AdvancedUnlock,
    ExpertUnlock,
    UnlockRule,
    should_unlock,
    unlock_rule_for,
)
from neural_progression.engine.updater import NetworkProgress, apply_round_results

__all__ = [
    "AdvancedUnlock",
    "ExpertUnlock",
    "InvalidInputError",
    "NetworkProgress",
    "NetworkStats",
    "ProgressionTracker",
    "UnlockRule",
    "apply_round_results",
    "compute_stats",
    "create_initial_network",
    "node_progress",
    "should_unlock",
    "unlock_rule_for",
]
