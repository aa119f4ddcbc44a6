"""Tests for snapshot coercion at the engine boundary."""

from __future__ import annotations

import math

import pytest

from neural_progression.core.performance import (
    PerformanceSnapshot,
    RivalSnapshot,
    Round,
    RoundResult,
)


class TestRoundResult:
    def test_reads_camel_case_time(self) -> None:
        result = RoundResult.model_validate({"score": 80, "timeRemaining": 12})
        assert result.score == 80.0
        assert result.time_remaining == 12.0

    @pytest.mark.parametrize("value", ["80", True, None, math.nan, math.inf, [1], {"a": 1}])
    def test_non_numeric_score_is_absent(self, value: object) -> None:
        assert RoundResult.model_validate({"score": value}).score is None

    def test_score_clamped(self) -> None:
        assert RoundResult.model_validate({"score": 150}).score == 100.0
        assert RoundResult.model_validate({"score": -20}).score == 0.0

    def test_time_clamped_to_round_budget(self) -> None:
        assert RoundResult.model_validate({"timeRemaining": 90}).time_remaining == 60.0
        assert RoundResult.model_validate({"timeRemaining": -5}).time_remaining == 0.0

    def test_frozen(self) -> None:
        result = RoundResult(score=50)
        with pytest.raises(ValueError):
            result.score = 60  # type: ignore[misc]


class TestPerformanceSnapshot:
    def test_plain_mapping(self) -> None:
        snapshot = PerformanceSnapshot.coerce({"round2": {"score": 70}})
        assert snapshot.score(Round.ROUND2) == 70.0
        assert snapshot.score(Round.ROUND1) is None
        assert snapshot.time_remaining(Round.ROUND2) is None

    def test_game_state_wrapper(self) -> None:
        snapshot = PerformanceSnapshot.coerce({"roundResults": {"round3": {"score": 55}}})
        assert snapshot.score(Round.ROUND3) == 55.0

    @pytest.mark.parametrize("raw", [None, "garbage", 7, [], {"round1": "fast"}])
    def test_garbage_becomes_empty(self, raw: object) -> None:
        snapshot = PerformanceSnapshot.coerce(raw)
        assert all(snapshot.result(r) is None for r in Round)

    def test_unknown_rounds_ignored(self) -> None:
        snapshot = PerformanceSnapshot.coerce({"round4": {"score": 99}, "bonus": 1})
        assert all(snapshot.result(r) is None for r in Round)

    def test_coerce_passes_snapshot_through(self) -> None:
        snapshot = PerformanceSnapshot.coerce({"round1": {"score": 10}})
        assert PerformanceSnapshot.coerce(snapshot) is snapshot


class TestRivalSnapshot:
    def test_none_means_no_rival(self) -> None:
        assert RivalSnapshot.coerce(None) is None

    def test_numeric_performance(self) -> None:
        rival = RivalSnapshot.coerce({"performance": {"round1": 40, "round3": 90}})
        assert rival is not None
        assert rival.score(Round.ROUND1) == 40.0
        assert rival.score(Round.ROUND2) is None
        assert rival.score(Round.ROUND3) == 90.0

    def test_record_performance(self) -> None:
        rival = RivalSnapshot.coerce({"performance": {"round2": {"score": 65}}})
        assert rival is not None
        assert rival.score(Round.ROUND2) == 65.0

    def test_rival_store_wrapper(self) -> None:
        rival = RivalSnapshot.coerce({"currentRival": {"performance": {"round1": 30}}})
        assert rival is not None
        assert rival.score(Round.ROUND1) == 30.0

    @pytest.mark.parametrize("raw", ["rival", {"performance": "strong"}, {"name": "Ava"}])
    def test_malformed_rival_has_no_scores(self, raw: object) -> None:
        rival = RivalSnapshot.coerce(raw)
        assert rival is not None
        assert all(rival.score(r) is None for r in Round)
