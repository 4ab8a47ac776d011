"""Record and result types shared by the scoring and Hall of Fame code"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

# Outcomes
GOAL = "goal"
SAVED = "saved"
OUT = "out"
STATUSES = (GOAL, SAVED, OUT)

# Roles
SHOOTER = "shooter"
KEEPER = "keeper"
ROLES = (SHOOTER, KEEPER)

# Genders
MALE = "Male"
FEMALE = "Female"
GENDERS = (MALE, FEMALE)


def _jsonable(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value.isoformat() if isinstance(value, (date, datetime)) else value
        for key, value in data.items()
    }


@dataclass(frozen=True)
class EventRecord:
    """A single penalty: one shooter, one keeper, one outcome."""

    id: str
    date: datetime
    shooter_name: str
    keeper_name: str
    status: str
    remark: Optional[str] = None
    gender: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))


@dataclass(frozen=True)
class WeightedEvent:
    """An EventRecord paired with its time-decay weight."""

    record: EventRecord
    weight: float


@dataclass(frozen=True)
class PlayerScore:
    name: str
    score: float
    goals: int
    saved: int
    out: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class KeeperScore:
    name: str
    score: float
    goals_conceded: int
    saves: int
    outs: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OutcomeDistribution:
    status: str
    count: int
    percentage: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MonthOption:
    """Month selector entry, e.g. value="2025-03", label="March 2025"."""

    value: str
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ----------------------------------------------------------------------
# Hall of Fame facts
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class GoalStreak:
    player_name: str
    streak: int
    date: date

    def to_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))


@dataclass(frozen=True)
class SessionGoals:
    player_name: str
    goals: int
    date: date

    def to_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))


@dataclass(frozen=True)
class SessionSaves:
    keeper_name: str
    saves: int
    date: date

    def to_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))


@dataclass(frozen=True)
class SessionAttendance:
    player_name: str
    session_count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BusiestDay:
    date: date
    penalty_count: int

    def to_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))


@dataclass(frozen=True)
class Rivalry:
    shooter_name: str
    keeper_name: str
    encounters: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecentSession:
    date: date
    goals: int
    saves: int
    outs: int

    def to_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))
