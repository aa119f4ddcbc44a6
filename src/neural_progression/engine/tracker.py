"""In-memory progression tracker for a single owner.

Keeps the current network together with its statistics and the most
recent progress report, the way a client session holds them between
games. Storing the network is left to the caller: read ``network``
after an update and persist it, or hand a stored one back via ``load``.
"""

from __future__ import annotations

import logging
from typing import Any

from neural_progression.core.network import NeuralNetwork
from neural_progression.engine.factory import create_initial_network
from neural_progression.engine.stats import NetworkStats, compute_stats
from neural_progression.engine.updater import NetworkProgress, apply_round_results

logger = logging.getLogger(__name__)


class ProgressionTracker:
    """Holds one owner's network, stats and latest progress report."""

    def __init__(self) -> None:
        self._network: NeuralNetwork | None = None
        self._stats: NetworkStats | None = None
        self._recent_progress: NetworkProgress | None = None

    @property
    def network(self) -> NeuralNetwork | None:
        return self._network

    @property
    def stats(self) -> NetworkStats | None:
        return self._stats

    @property
    def recent_progress(self) -> NetworkProgress | None:
        return self._recent_progress

    def initialize(self, owner_id: str) -> NeuralNetwork:
        """Create a network for ``owner_id`` unless one for that owner is already held."""
        if self._network is not None and self._network.owner_id == owner_id:
            return self._network

        network = create_initial_network(owner_id)
        self._network = network
        self._stats = compute_stats(network)
        self._recent_progress = None
        logger.info("Initialized progression network for %s", owner_id)
        return network

    def load(self, network: NeuralNetwork) -> None:
        """Adopt a previously stored network."""
        self._network = network
        self._stats = compute_stats(network)
        self._recent_progress = None

    def update_from_round(self, performance: Any, rival: Any = None) -> NetworkProgress | None:
        """
        Apply a finished game to the held network.

        Args:
            performance: Round results (snapshot or raw mapping)
            rival: Optional rival data

        Returns:
            The progress report, or None if no network is held
        """
        if self._network is None:
            logger.debug("No network held; ignoring round results")
            return None

        network, progress = apply_round_results(self._network, performance, rival)
        self._network = network
        self._stats = compute_stats(network)
        self._recent_progress = progress

        if progress.leveled_up:
            logger.info(
                "%s reached overall level %d", network.owner_id, progress.current_level
            )
        return progress

    def reset(self) -> None:
        """Forget the held network, stats and progress."""
        self._network = None
        self._stats = None
        self._recent_progress = None
