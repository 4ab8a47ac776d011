# Models module initialization
from .event import (
    EventRecord,
    WeightedEvent,
    PlayerScore,
    KeeperScore,
    OutcomeDistribution,
    MonthOption,
    GOAL,
    SAVED,
    OUT,
    STATUSES,
    SHOOTER,
    KEEPER,
)

__all__ = [
    'EventRecord',
    'WeightedEvent',
    'PlayerScore',
    'KeeperScore',
    'OutcomeDistribution',
    'MonthOption',
    'GOAL',
    'SAVED',
    'OUT',
    'STATUSES',
    'SHOOTER',
    'KEEPER',
]
