"""
Time decay calculations for scoring

A penalty's weight halves every `half_life_days`, measured back from the most
recent penalty in the set being scored (not from the wall clock).
"""
from typing import Iterable, List, Sequence

from penalty.models.event import EventRecord, WeightedEvent
from penalty.score.loader import DEFAULT_HALF_LIFE_DAYS

SECONDS_PER_DAY = 24 * 60 * 60


def _days_between(latest, earlier) -> float:
    return (latest - earlier).total_seconds() / SECONDS_PER_DAY


def decay_weight(days_ago: float, half_life_days: float = DEFAULT_HALF_LIFE_DAYS) -> float:
    """
    Weight for a penalty taken `days_ago` days before the latest one

    Returns:
        2 ** (-days_ago / half_life_days), in (0, 1] for days_ago >= 0
    """
    if half_life_days <= 0:
        raise ValueError(f"half_life_days must be positive (got {half_life_days})")
    return 2 ** (-days_ago / half_life_days)


def event_weight(
    record: EventRecord,
    records: Sequence[EventRecord],
    half_life_days: float = DEFAULT_HALF_LIFE_DAYS,
) -> float:
    """
    Weight of one record relative to the latest date in `records`

    Args:
        record: Record to weigh
        records: The full set being scored (already month-filtered by the caller)
        half_life_days: Days after which a record counts half

    Returns:
        Weight in (0, 1]; 0.0 when `records` is empty
    """
    if not records:
        return 0.0
    latest = max(r.date for r in records)
    return decay_weight(_days_between(latest, record.date), half_life_days)


def apply_time_decay(
    records: Sequence[EventRecord],
    half_life_days: float = DEFAULT_HALF_LIFE_DAYS,
) -> List[WeightedEvent]:
    """
    Weight every record against the most recent one in the same set

    Args:
        records: Records to weigh, in caller order
        half_life_days: Days after which a record counts half

    Returns:
        WeightedEvent list in the same order as `records`
    """
    if not records:
        return []

    latest = max(r.date for r in records)
    return [
        WeightedEvent(record=r, weight=decay_weight(_days_between(latest, r.date), half_life_days))
        for r in records
    ]


def decay_curve(original_score: float, half_life_days: float, elapsed_days: Iterable[float]) -> List[dict]:
    """
    Decayed value of a score over time, for the scoring explainer chart

    A non-positive half-life yields a flat zero curve.
    """
    if half_life_days <= 0:
        return [{"time": t, "decayed_score": 0.0} for t in elapsed_days]

    return [
        {"time": t, "decayed_score": original_score * 0.5 ** (t / half_life_days)}
        for t in elapsed_days
    ]
