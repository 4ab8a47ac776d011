"""
Scoring module
Time-decay weighted leaderboards for shooters and keepers
"""

from .loader import load_config, reload_config, config_hash, get_half_life_days, DEFAULT_HALF_LIFE_DAYS
from .time_decay import decay_weight, event_weight, apply_time_decay, decay_curve
from .scoring import (
    round_score,
    outcome_points,
    calculate_actor_scores,
    calculate_player_scores,
    calculate_keeper_scores,
    get_top_player,
    get_top_keeper,
    compare_players,
    point_system_table,
)

__all__ = [
    'load_config',
    'reload_config',
    'config_hash',
    'get_half_life_days',
    'DEFAULT_HALF_LIFE_DAYS',
    'decay_weight',
    'event_weight',
    'apply_time_decay',
    'decay_curve',
    'round_score',
    'outcome_points',
    'calculate_actor_scores',
    'calculate_player_scores',
    'calculate_keeper_scores',
    'get_top_player',
    'get_top_keeper',
    'compare_players',
    'point_system_table',
]
