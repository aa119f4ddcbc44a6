"""Round performance snapshots consumed by the progression engine.

Snapshots come from the challenge-evaluation and rival subsystems as
loosely-typed JSON. They are validated here, once, at the boundary:
anything that is not a finite number (strings, booleans, NaN, nested
junk) becomes "absent", scores are clamped to 0-100 and time remaining
to the per-round budget. Downstream arithmetic never sees bad input and
never raises because of it.
"""

from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

# Seconds available in each challenge round
ROUND_TIME_SECONDS = 60.0
MAX_SCORE = 100.0


class Round(StrEnum):
    """Challenge round keys, in play order."""

    ROUND1 = "round1"
    ROUND2 = "round2"
    ROUND3 = "round3"


def _finite_number(value: Any) -> float | None:
    """Return ``value`` as a float if it is a finite real number, else None."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def _clamped(value: Any, upper: float) -> float | None:
    number = _finite_number(value)
    if number is None:
        return None
    return max(0.0, min(upper, number))


class RoundResult(BaseModel):
    """Outcome of one challenge round."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    score: float | None = Field(None, description="Round score (0-100)")
    time_remaining: float | None = Field(
        None,
        alias="timeRemaining",
        description="Seconds left on the round clock (0-60)",
    )

    @field_validator("score", mode="before")
    @classmethod
    def _coerce_score(cls, value: Any) -> float | None:
        return _clamped(value, MAX_SCORE)

    @field_validator("time_remaining", mode="before")
    @classmethod
    def _coerce_time(cls, value: Any) -> float | None:
        return _clamped(value, ROUND_TIME_SECONDS)


def _round_or_none(value: Any) -> Any:
    if isinstance(value, RoundResult) or isinstance(value, dict):
        return value
    return None


class PerformanceSnapshot(BaseModel):
    """Per-round results of the game that just finished.

    Accepts either ``{"round1": {...}, ...}`` or the full game state
    ``{"roundResults": {"round1": {...}, ...}}``. Every round is optional.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    round1: RoundResult | None = None
    round2: RoundResult | None = None
    round3: RoundResult | None = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        if isinstance(data.get("roundResults"), dict):
            data = data["roundResults"]
        return {key.value: _round_or_none(data.get(key.value)) for key in Round}

    @classmethod
    def coerce(cls, raw: Any) -> PerformanceSnapshot:
        """Build a snapshot from arbitrary input, degrading to empty on failure."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls.model_validate(raw)
        except ValidationError:
            logger.warning("Discarding malformed performance snapshot", exc_info=True)
            return cls()

    def result(self, round_key: Round) -> RoundResult | None:
        """Result of one round, if it was recorded."""
        result: RoundResult | None = getattr(self, round_key.value)
        return result

    def score(self, round_key: Round) -> float | None:
        """Score of one round, or None when absent."""
        result = self.result(round_key)
        return result.score if result else None

    def time_remaining(self, round_key: Round) -> float | None:
        """Time remaining in one round, or None when absent."""
        result = self.result(round_key)
        return result.time_remaining if result else None


class RivalSnapshot(BaseModel):
    """Scores of the current rival, used only for bonus comparisons.

    Accepts ``{"performance": {"round1": 80}}``, per-round records
    (``{"round1": {"score": 80}}``) and the rival-store shape
    ``{"currentRival": {"performance": {...}}}``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    performance: dict[Round, float] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {"performance": {}}
        if isinstance(data.get("currentRival"), dict):
            data = data["currentRival"]
        raw = data.get("performance")
        if not isinstance(raw, dict):
            return {"performance": {}}

        scores: dict[Round, float] = {}
        for key in Round:
            value = raw.get(key.value)
            if isinstance(value, dict):
                value = value.get("score")
            score = _clamped(value, MAX_SCORE)
            if score is not None:
                scores[key] = score
        return {"performance": scores}

    @classmethod
    def coerce(cls, raw: Any) -> RivalSnapshot | None:
        """Build a rival snapshot, or None when no rival data was supplied."""
        if raw is None:
            return None
        if isinstance(raw, cls):
            return raw
        try:
            return cls.model_validate(raw)
        except ValidationError:
            logger.warning("Discarding malformed rival snapshot", exc_info=True)
            return None

    def score(self, round_key: Round) -> float | None:
        """Rival score for one round, or None when unknown."""
        return self.performance.get(round_key)
