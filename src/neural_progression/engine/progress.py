"""Progress calculator - how far one round moves one node.

Every unlocked node earns a flat base amount per round, plus a bonus
driven by the round metric that exercises its domain, plus a small
bonus for beating the rival in that domain's round. The total is capped
so a single round never contributes more than a quarter of a level.
"""

from __future__ import annotations

from typing import Any

from neural_progression.core.domain import CognitiveDomain
from neural_progression.core.node import NetworkNode
from neural_progression.core.performance import (
    MAX_SCORE,
    ROUND_TIME_SECONDS,
    PerformanceSnapshot,
    RivalSnapshot,
    Round,
)

BASE_PROGRESS = 5.0
MAX_PROGRESS_PER_UPDATE = 25.0
RIVAL_BONUS = 5.0

# Weight of the domain metric (a 0-1 fraction) in progress points
SINGLE_ROUND_WEIGHT = 20.0
LOGIC_WEIGHT = 15.0
SPEED_WEIGHT = 25.0

# Round compared against the rival for each domain; speed has none
RIVAL_ROUND: dict[CognitiveDomain, Round] = {
    CognitiveDomain.MEMORY: Round.ROUND1,
    CognitiveDomain.PATTERN: Round.ROUND1,
    CognitiveDomain.CREATIVITY: Round.ROUND2,
    CognitiveDomain.LOGIC: Round.ROUND3,
}


def _mean(values: list[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def _score_fraction(performance: PerformanceSnapshot, round_key: Round) -> float:
    score = performance.score(round_key)
    return score / MAX_SCORE if score is not None else 0.0


def domain_bonus(domain: CognitiveDomain, performance: PerformanceSnapshot) -> float:
    """Domain-specific progress earned from the round metrics."""
    if domain in (CognitiveDomain.MEMORY, CognitiveDomain.PATTERN):
        return _score_fraction(performance, Round.ROUND1) * SINGLE_ROUND_WEIGHT

    if domain == CognitiveDomain.CREATIVITY:
        return _score_fraction(performance, Round.ROUND2) * SINGLE_ROUND_WEIGHT

    if domain == CognitiveDomain.LOGIC:
        scores = [s for s in (performance.score(r) for r in Round) if s is not None]
        mean_score = _mean(scores)
        return (mean_score / MAX_SCORE) * LOGIC_WEIGHT if mean_score is not None else 0.0

    # Speed: average share of the round clock left over
    times = [t for t in (performance.time_remaining(r) for r in Round) if t is not None]
    mean_time = _mean(times)
    if mean_time is None:
        return 0.0
    return min(1.0, mean_time / ROUND_TIME_SECONDS) * SPEED_WEIGHT


def rival_bonus(
    domain: CognitiveDomain,
    performance: PerformanceSnapshot,
    rival: RivalSnapshot | None,
) -> float:
    """Bonus for beating the rival in the round tied to ``domain``."""
    if rival is None:
        return 0.0
    round_key = RIVAL_ROUND.get(domain)
    if round_key is None:
        return 0.0

    own_score = performance.score(round_key)
    rival_score = rival.score(round_key)
    if own_score is None or rival_score is None:
        return 0.0
    return RIVAL_BONUS if own_score > rival_score else 0.0


def node_progress(node: NetworkNode, performance: Any, rival: Any = None) -> float:
    """
    Progress points a node earns from one finished game.

    Deterministic and side-effect free. Raw mappings are coerced through
    the snapshot models, so missing or malformed metrics count as zero.

    Args:
        node: Node being credited
        performance: PerformanceSnapshot or raw round-results mapping
        rival: Optional RivalSnapshot or raw rival mapping

    Returns:
        Progress in [0, 25]
    """
    snapshot = PerformanceSnapshot.coerce(performance)
    rival_snapshot = RivalSnapshot.coerce(rival)

    total = (
        BASE_PROGRESS
        + domain_bonus(node.domain, snapshot)
        + rival_bonus(node.domain, snapshot, rival_snapshot)
    )
    return max(0.0, min(MAX_PROGRESS_PER_UPDATE, total))
