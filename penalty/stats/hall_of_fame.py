"""
Hall of Fame records

Each finder reduces the session grouping (or, for rivalries, the flat record
list) to a single superlative. Ties go to whoever reached the best value
first while iterating sessions in first-seen order, records in input order.
Every finder returns None for empty input.
"""
import logging
from datetime import date
from typing import Dict, Optional, Sequence, Set, Tuple

from penalty.models.event import (
    GOAL,
    OUT,
    SAVED,
    BusiestDay,
    EventRecord,
    GoalStreak,
    RecentSession,
    Rivalry,
    SessionAttendance,
    SessionGoals,
    SessionSaves,
)
from penalty.score.scoring import get_top_keeper, get_top_player
from penalty.stats.sessions import group_by_session

logger = logging.getLogger(__name__)


def _session_date(key: str) -> date:
    return date.fromisoformat(key)


def get_longest_goal_streak(records: Sequence[EventRecord]) -> Optional[GoalStreak]:
    """
    Most consecutive goals by one shooter within one session

    A shooter's run is broken only by that shooter's own non-goal penalties.
    """
    if not records:
        return None

    best: Optional[GoalStreak] = None
    for key, session in group_by_session(records).items():
        running: Dict[str, int] = {}
        for record in session:
            if record.status != GOAL:
                running[record.shooter_name] = 0
                continue
            running[record.shooter_name] = running.get(record.shooter_name, 0) + 1
            if best is None or running[record.shooter_name] > best.streak:
                best = GoalStreak(record.shooter_name, running[record.shooter_name], _session_date(key))
    return best


def get_most_goals_in_session(records: Sequence[EventRecord]) -> Optional[SessionGoals]:
    if not records:
        return None

    best: Optional[SessionGoals] = None
    for key, session in group_by_session(records).items():
        goals: Dict[str, int] = {}
        for record in session:
            if record.status != GOAL:
                continue
            goals[record.shooter_name] = goals.get(record.shooter_name, 0) + 1
            if best is None or goals[record.shooter_name] > best.goals:
                best = SessionGoals(record.shooter_name, goals[record.shooter_name], _session_date(key))
    return best


def get_most_saves_in_session(records: Sequence[EventRecord]) -> Optional[SessionSaves]:
    if not records:
        return None

    best: Optional[SessionSaves] = None
    for key, session in group_by_session(records).items():
        saves: Dict[str, int] = {}
        for record in session:
            if record.status != SAVED:
                continue
            saves[record.keeper_name] = saves.get(record.keeper_name, 0) + 1
            if best is None or saves[record.keeper_name] > best.saves:
                best = SessionSaves(record.keeper_name, saves[record.keeper_name], _session_date(key))
    return best


def _sessions_per_shooter(records: Sequence[EventRecord]) -> Dict[str, Set[str]]:
    played: Dict[str, Set[str]] = {}
    for key, session in group_by_session(records).items():
        for record in session:
            played.setdefault(record.shooter_name, set()).add(key)
    return played


def get_marathon_man(records: Sequence[EventRecord]) -> Optional[SessionAttendance]:
    """Shooter who turned up to the most sessions."""
    if not records:
        return None

    best: Optional[SessionAttendance] = None
    for player, days in _sessions_per_shooter(records).items():
        if best is None or len(days) > best.session_count:
            best = SessionAttendance(player, len(days))
    return best


def get_mysterious_ninja(records: Sequence[EventRecord]) -> Optional[SessionAttendance]:
    """Shooter who turned up to the fewest sessions."""
    if not records:
        return None

    best: Optional[SessionAttendance] = None
    for player, days in _sessions_per_shooter(records).items():
        if best is None or len(days) < best.session_count:
            best = SessionAttendance(player, len(days))
    return best


def get_busiest_day(records: Sequence[EventRecord]) -> Optional[BusiestDay]:
    if not records:
        return None

    best: Optional[BusiestDay] = None
    for key, session in group_by_session(records).items():
        if best is None or len(session) > best.penalty_count:
            best = BusiestDay(_session_date(key), len(session))
    return best


def get_biggest_rivalry(records: Sequence[EventRecord]) -> Optional[Rivalry]:
    """Most frequent shooter/keeper pairing across all records (not per session)."""
    if not records:
        return None

    matchups: Dict[Tuple[str, str], int] = {}
    for record in records:
        pair = (record.shooter_name, record.keeper_name)
        matchups[pair] = matchups.get(pair, 0) + 1

    best: Optional[Rivalry] = None
    for (shooter, keeper), count in matchups.items():
        if best is None or count > best.encounters:
            best = Rivalry(shooter, keeper, count)
    return best


def get_recent_session(records: Sequence[EventRecord]) -> Optional[RecentSession]:
    """Outcome totals for the latest session day."""
    if not records:
        return None

    sessions = group_by_session(records)
    latest = max(sessions)
    counts = {GOAL: 0, SAVED: 0, OUT: 0}
    for record in sessions[latest]:
        if record.status in counts:
            counts[record.status] += 1
    return RecentSession(_session_date(latest), counts[GOAL], counts[SAVED], counts[OUT])


def build_hall_of_fame(records: Sequence[EventRecord]) -> Dict[str, Optional[dict]]:
    """
    Every Hall of Fame fact for a record selection, as plain dicts

    Missing facts are None.
    """
    facts = {
        "top_player": get_top_player(records),
        "top_keeper": get_top_keeper(records),
        "longest_goal_streak": get_longest_goal_streak(records),
        "most_goals_in_session": get_most_goals_in_session(records),
        "most_saves_in_session": get_most_saves_in_session(records),
        "marathon_man": get_marathon_man(records),
        "mysterious_ninja": get_mysterious_ninja(records),
        "busiest_day": get_busiest_day(records),
        "biggest_rivalry": get_biggest_rivalry(records),
        "recent_session": get_recent_session(records),
    }
    logger.debug("Hall of Fame built from %d records", len(records))
    return {name: fact.to_dict() if fact is not None else None for name, fact in facts.items()}
