# penalty/dashboard/api.py
"""JSON endpoints behind the leaderboard, comparison, Hall of Fame and scoring pages"""
from __future__ import annotations

import logging
import math
import os
from typing import List, Optional

from flask import Blueprint, current_app, jsonify, request

from penalty.models.event import EventRecord
from penalty.score.loader import config_hash, get_config, get_half_life_days
from penalty.score.scoring import (
    calculate_keeper_scores,
    calculate_player_scores,
    compare_players,
    point_system_table,
)
from penalty.score.time_decay import decay_curve
from penalty.services.event_repository import EventRepositoryError
from penalty.stats.distribution import (
    filter_by_month,
    get_keeper_outcome_distribution,
    get_unique_keepers,
    get_unique_months,
    get_unique_players,
)
from penalty.stats.hall_of_fame import build_hall_of_fame

bp_dashboard = Blueprint("bp_dashboard", __name__, url_prefix="/api")

logger = logging.getLogger(__name__)

REPOSITORY_EXTENSION = "penalty_repository"
ALL_GENDERS = "all"
MAX_DECAY_DAYS = 3650


class InvalidQuery(ValueError):
    pass


def _error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def _selected_gender() -> Optional[str]:
    gender = (request.args.get("gender") or os.getenv("PENALTY_DEFAULT_GENDER", "Male")).strip()
    if gender.lower() == ALL_GENDERS:
        return None
    # Stored values are capitalized by the record mapper
    return gender.capitalize()


def _load_records(apply_month: bool = True) -> List[EventRecord]:
    """Fetch events for the request's gender and (optionally) month selection."""
    repository = current_app.extensions[REPOSITORY_EXTENSION]
    records = repository.fetch_events(gender=_selected_gender())
    if not apply_month:
        return records
    try:
        return filter_by_month(records, request.args.get("month", ""))
    except ValueError as e:
        raise InvalidQuery(str(e))


def _float_arg(name: str, default: float) -> float:
    raw = request.args.get(name)
    if raw in (None, ""):
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidQuery(f"'{name}' must be a number")
    if not math.isfinite(value):
        raise InvalidQuery(f"'{name}' must be finite")
    return value


@bp_dashboard.errorhandler(EventRepositoryError)
def _repository_unavailable(e):
    logger.error(f"Event store unavailable: {e}", exc_info=True)
    return _error("Event data is temporarily unavailable", 503)


@bp_dashboard.errorhandler(InvalidQuery)
def _bad_request(e):
    return _error(str(e), 400)


@bp_dashboard.get("/health")
def health():
    return jsonify({"status": "ok"})


@bp_dashboard.get("/players/scores")
def player_scores():
    records = _load_records()
    scores = calculate_player_scores(records)
    return jsonify({
        "success": True,
        "month": request.args.get("month") or None,
        "records": len(records),
        "scores": [s.to_dict() for s in scores],
    })


@bp_dashboard.get("/keepers/scores")
def keeper_scores():
    records = _load_records()
    scores = calculate_keeper_scores(records)
    return jsonify({
        "success": True,
        "month": request.args.get("month") or None,
        "records": len(records),
        "scores": [s.to_dict() for s in scores],
    })


@bp_dashboard.get("/players")
def players():
    return jsonify({"success": True, "players": get_unique_players(_load_records())})


@bp_dashboard.get("/keepers")
def keepers():
    return jsonify({"success": True, "keepers": get_unique_keepers(_load_records())})


@bp_dashboard.get("/months")
def months():
    # Month options always cover the full history
    records = _load_records(apply_month=False)
    return jsonify({"success": True, "months": [m.to_dict() for m in get_unique_months(records)]})


@bp_dashboard.get("/keepers/<path:keeper_name>/distribution")
def keeper_distribution(keeper_name: str):
    distribution = get_keeper_outcome_distribution(_load_records(), keeper_name)
    if not distribution:
        return _error(f"No penalties faced by '{keeper_name}' in this selection", 404)
    return jsonify({
        "success": True,
        "keeper": keeper_name,
        "distribution": [d.to_dict() for d in distribution],
    })


@bp_dashboard.get("/players/compare")
def players_compare():
    names = [n.strip() for n in request.args.get("names", "").split(",") if n.strip()]
    if not names:
        return jsonify({"success": True, "players": []})
    scores = compare_players(calculate_player_scores(_load_records()), names)
    return jsonify({"success": True, "players": [s.to_dict() for s in scores]})


@bp_dashboard.get("/hall-of-fame")
def hall_of_fame():
    records = _load_records()
    return jsonify({"success": True, "records": len(records), "hall_of_fame": build_hall_of_fame(records)})


@bp_dashboard.get("/scoring/points")
def scoring_points():
    return jsonify({
        "success": True,
        "half_life_days": get_half_life_days(),
        "points": point_system_table(),
        "config_hash": config_hash(get_config()),
    })


@bp_dashboard.get("/scoring/decay")
def scoring_decay():
    """Decay curve for the explainer: ?score=&half_life=&days="""
    score = _float_arg("score", 1.0)
    half_life = _float_arg("half_life", get_half_life_days())
    days = int(_float_arg("days", 100))
    if days < 0 or days > MAX_DECAY_DAYS:
        raise InvalidQuery(f"'days' must be between 0 and {MAX_DECAY_DAYS}")

    return jsonify({
        "success": True,
        "original_score": score,
        "half_life_days": half_life,
        "curve": decay_curve(score, half_life, range(days + 1)),
    })
