"""
Session grouping, Hall of Fame records and selection helpers for penalty records.
"""

from .sessions import session_key, group_by_session
from .hall_of_fame import (
    get_longest_goal_streak,
    get_most_goals_in_session,
    get_most_saves_in_session,
    get_marathon_man,
    get_mysterious_ninja,
    get_busiest_day,
    get_biggest_rivalry,
    get_recent_session,
    build_hall_of_fame,
)
from .distribution import (
    get_keeper_outcome_distribution,
    get_unique_months,
    filter_by_month,
    filter_by_gender,
    get_unique_players,
    get_unique_keepers,
)

__all__ = [
    "session_key",
    "group_by_session",
    "get_longest_goal_streak",
    "get_most_goals_in_session",
    "get_most_saves_in_session",
    "get_marathon_man",
    "get_mysterious_ninja",
    "get_busiest_day",
    "get_biggest_rivalry",
    "get_recent_session",
    "build_hall_of_fame",
    "get_keeper_outcome_distribution",
    "get_unique_months",
    "filter_by_month",
    "filter_by_gender",
    "get_unique_players",
    "get_unique_keepers",
]
