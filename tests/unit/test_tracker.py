"""Tests for the in-memory progression tracker."""

from __future__ import annotations

from typing import Any

import pytest

from neural_progression.core.network import NeuralNetwork
from neural_progression.engine.factory import InvalidInputError
from neural_progression.engine.tracker import ProgressionTracker


@pytest.fixture
def tracker() -> ProgressionTracker:
    return ProgressionTracker()


class TestInitialize:
    def test_starts_empty(self, tracker: ProgressionTracker) -> None:
        assert tracker.network is None
        assert tracker.stats is None
        assert tracker.recent_progress is None

    def test_creates_network_and_stats(self, tracker: ProgressionTracker) -> None:
        network = tracker.initialize("u1")
        assert tracker.network is network
        assert tracker.stats is not None
        assert tracker.stats.unlocked_nodes == 5

    def test_same_owner_keeps_network(self, tracker: ProgressionTracker) -> None:
        first = tracker.initialize("u1")
        assert tracker.initialize("u1") is first

    def test_new_owner_replaces_network(self, tracker: ProgressionTracker) -> None:
        first = tracker.initialize("u1")
        second = tracker.initialize("u2")
        assert second is not first
        assert tracker.network is not None
        assert tracker.network.owner_id == "u2"

    def test_invalid_owner_raises(self, tracker: ProgressionTracker) -> None:
        with pytest.raises(InvalidInputError):
            tracker.initialize("")
        assert tracker.network is None


class TestUpdate:
    def test_update_without_network_is_noop(self, tracker: ProgressionTracker) -> None:
        assert tracker.update_from_round({"round1": {"score": 90}}) is None
        assert tracker.network is None

    def test_update_refreshes_state(
        self, tracker: ProgressionTracker, perfect_round1: dict[str, Any]
    ) -> None:
        original = tracker.initialize("u1")
        progress = tracker.update_from_round(perfect_round1)

        assert progress is not None
        assert tracker.recent_progress is progress
        assert tracker.network is not original
        memory = tracker.network.get_node("memory") if tracker.network else None
        assert memory is not None
        assert memory.progress == pytest.approx(25.0)
        assert original.get_node("memory").progress == 0.0  # type: ignore[union-attr]

    def test_load_adopts_network(
        self, tracker: ProgressionTracker, network: NeuralNetwork
    ) -> None:
        tracker.load(network)
        assert tracker.network is network
        assert tracker.stats is not None
        assert tracker.initialize("u1") is network

    def test_reset_clears_everything(self, tracker: ProgressionTracker) -> None:
        tracker.initialize("u1")
        tracker.update_from_round({})
        tracker.reset()
        assert tracker.network is None
        assert tracker.stats is None
        assert tracker.recent_progress is None
