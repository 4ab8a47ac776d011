"""
Time-weighted leaderboard scoring for shooters and keepers
"""
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Union

from penalty.models.event import (
    GOAL,
    KEEPER,
    OUT,
    SAVED,
    SHOOTER,
    EventRecord,
    KeeperScore,
    PlayerScore,
)
from penalty.score.loader import get_half_life_days, get_point_table
from penalty.score.time_decay import apply_time_decay

logger = logging.getLogger(__name__)

ActorScore = Union[PlayerScore, KeeperScore]

# status -> counter slot, per role
_COUNTERS = {
    SHOOTER: {GOAL: "goals", SAVED: "saved", OUT: "out"},
    KEEPER: {GOAL: "goals_conceded", SAVED: "saves", OUT: "outs"},
}


def round_score(value: float, places: int = 2) -> float:
    """Round to `places` decimals, ties away from zero."""
    quantum = Decimal(1).scaleb(-places)
    # "+ 0.0" folds -0.0 into 0.0
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)) + 0.0


def outcome_points(status: str, role: str) -> float:
    """Points a single outcome is worth for `role`; unknown statuses score 0."""
    return get_point_table(role).get(status, 0.0)


def calculate_actor_scores(
    records: Sequence[EventRecord],
    role: str,
    half_life_days: Optional[float] = None,
) -> List[ActorScore]:
    """
    Fold time-weighted outcomes into one score per actor

    Weights are relative to the latest record in `records`, so a month-filtered
    selection is scored against its own most recent penalty.

    Args:
        records: Records to score
        role: SHOOTER or KEEPER
        half_life_days: Override for the configured half-life

    Returns:
        Scores sorted by descending score; ties keep first-seen order
    """
    if role not in _COUNTERS:
        raise ValueError(f"Unknown role: {role}")
    if not records:
        return []

    half_life = half_life_days if half_life_days is not None else get_half_life_days()
    points = get_point_table(role)
    counters = _COUNTERS[role]

    totals: Dict[str, dict] = {}
    for weighted in apply_time_decay(records, half_life):
        record = weighted.record
        name = record.shooter_name if role == SHOOTER else record.keeper_name
        entry = totals.setdefault(name, {"score": 0.0, **{slot: 0 for slot in counters.values()}})

        slot = counters.get(record.status)
        if slot is None:
            # Outside the closed status set: no points, no counter
            continue
        entry["score"] += points[record.status] * weighted.weight
        entry[slot] += 1

    result_cls = PlayerScore if role == SHOOTER else KeeperScore
    scores = [
        result_cls(name=name, score=round_score(data.pop("score")), **data)
        for name, data in totals.items()
    ]
    # sorted() is stable, so equal scores stay in encounter order
    scores = sorted(scores, key=lambda s: s.score, reverse=True)

    logger.debug("Scored %d %ss from %d records (half-life %.1f days)", len(scores), role, len(records), half_life)
    return scores


def calculate_player_scores(records: Sequence[EventRecord], half_life_days: Optional[float] = None) -> List[PlayerScore]:
    return calculate_actor_scores(records, SHOOTER, half_life_days)


def calculate_keeper_scores(records: Sequence[EventRecord], half_life_days: Optional[float] = None) -> List[KeeperScore]:
    return calculate_actor_scores(records, KEEPER, half_life_days)


def get_top_player(records: Sequence[EventRecord]) -> Optional[PlayerScore]:
    scores = calculate_player_scores(records)
    return scores[0] if scores else None


def get_top_keeper(records: Sequence[EventRecord]) -> Optional[KeeperScore]:
    scores = calculate_keeper_scores(records)
    return scores[0] if scores else None


def compare_players(scores: Sequence[PlayerScore], names: Iterable[str]) -> List[PlayerScore]:
    """Subset of a leaderboard for the selected names, leaderboard order kept."""
    selected = set(names)
    return [s for s in scores if s.name in selected]


def point_system_table() -> List[dict]:
    """Point values per outcome for the scoring explainer."""
    shooter = get_point_table(SHOOTER)
    keeper = get_point_table(KEEPER)
    return [
        {"event": status.capitalize(), "shooter_points": shooter[status], "keeper_points": keeper[status]}
        for status in (GOAL, SAVED, OUT)
    ]
