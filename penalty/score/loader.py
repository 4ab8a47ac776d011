"""
Configuration loader for the scoring constants (half-life and point tables)
"""
import hashlib
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from penalty.models.event import ROLES, STATUSES

logger = logging.getLogger(__name__)

DEFAULT_CFG = Path(__file__).with_name("config.yml")
DEFAULT_HALF_LIFE_DAYS = 45

DEFAULT_POINTS = {
    "shooter": {"goal": 1.5, "saved": 0.0, "out": -1.0},
    "keeper": {"goal": -1.0, "saved": 1.5, "out": 0.0},
}


def _validate(cfg: Dict[str, Any], path: str) -> Dict[str, Any]:
    """
    Validate a raw config mapping and coerce values to floats

    Raises:
        ValueError: if the half-life is not positive or a point table is incomplete
    """
    if not isinstance(cfg, dict):
        raise ValueError(f"[scoring] {path}: expected a mapping, got {type(cfg).__name__}")

    try:
        half_life = float(cfg.get("half_life_days", DEFAULT_HALF_LIFE_DAYS))
    except (TypeError, ValueError):
        raise ValueError(f"[scoring] {path}: half_life_days must be a number")
    if half_life <= 0:
        raise ValueError(f"[scoring] {path}: half_life_days must be positive (got {half_life})")

    points = cfg.get("points") or {}
    tables = {}
    for role in ROLES:
        table = points.get(role) or {}
        missing = [status for status in STATUSES if status not in table]
        if missing:
            raise ValueError(f"[scoring] {path}: points.{role} missing {', '.join(missing)}")
        tables[role] = {status: float(table[status]) for status in STATUSES}

    return {"half_life_days": half_life, "points": tables}


def load_config(path: Optional[str] = None) -> dict:
    """
    Load and validate the scoring configuration from YAML

    Args:
        path: Config file path. Falls back to PENALTY_SCORING_CONFIG, then
            the bundled config.yml.

    Returns:
        {"half_life_days": float, "points": {"shooter": {...}, "keeper": {...}}}
    """
    path = path or os.getenv("PENALTY_SCORING_CONFIG") or str(DEFAULT_CFG)
    if not os.path.exists(path):
        logger.warning(f"Scoring config {path} not found, using built-in defaults")
        return _validate({"half_life_days": DEFAULT_HALF_LIFE_DAYS, "points": DEFAULT_POINTS}, "defaults")

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    validated = _validate(cfg, path)
    logger.info(f"Loaded scoring config from {path}")
    return validated


@lru_cache()
def get_config() -> dict:
    """Cached scoring configuration for the running process."""
    return load_config()


def reload_config() -> dict:
    get_config.cache_clear()
    return get_config()


def get_half_life_days() -> float:
    return get_config()["half_life_days"]


def get_point_table(role: str) -> Dict[str, float]:
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}")
    return get_config()["points"][role]


def config_hash(cfg: dict) -> str:
    """
    SHA1 of the configuration, used by clients to invalidate cached leaderboards
    """
    blob = yaml.safe_dump(cfg, sort_keys=True, allow_unicode=True)
    return hashlib.sha1(blob.encode("utf-8")).hexdigest()
