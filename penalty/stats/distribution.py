"""
Outcome breakdowns and selection helpers (month, gender, actor lists)
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from penalty.models.event import GOAL, OUT, SAVED, EventRecord, MonthOption, OutcomeDistribution

# English labels whatever the process locale is
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _percentage(count: int, total: int) -> int:
    return int((Decimal(count) * 100 / Decimal(total)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def get_keeper_outcome_distribution(records: Sequence[EventRecord], keeper_name: str) -> List[OutcomeDistribution]:
    """
    Share of goals, saves and misses faced by one keeper

    Percentages are rounded independently and may not add up to 100.
    Returns [] when the keeper has no records.
    """
    faced = [r for r in records if r.keeper_name == keeper_name]
    if not faced:
        return []

    total = len(faced)
    result = []
    for status in (GOAL, SAVED, OUT):
        count = sum(1 for r in faced if r.status == status)
        result.append(OutcomeDistribution(status=status, count=count, percentage=_percentage(count, total)))
    return result


def month_key(record: EventRecord) -> str:
    return f"{record.date.year:04d}-{record.date.month:02d}"


def month_label(value: str) -> str:
    """'2025-03' -> 'March 2025'"""
    year, month = value.split("-")
    return f"{MONTH_NAMES[int(month) - 1]} {int(year)}"


def get_unique_months(records: Sequence[EventRecord]) -> List[MonthOption]:
    """Distinct months present in the records, most recent first."""
    months = sorted({month_key(r) for r in records}, reverse=True)
    return [MonthOption(value=m, label=month_label(m)) for m in months]


def filter_by_month(records: Sequence[EventRecord], month_value: Optional[str]) -> List[EventRecord]:
    """
    Records from the given YYYY-MM month; an empty month keeps everything

    Raises:
        ValueError: if month_value is not in YYYY-MM form
    """
    if not month_value:
        return list(records)

    try:
        year, month = (int(part) for part in month_value.split("-"))
    except ValueError:
        raise ValueError(f"Invalid month '{month_value}', expected YYYY-MM")
    return [r for r in records if r.date.year == year and r.date.month == month]


def filter_by_gender(records: Sequence[EventRecord], gender: Optional[str]) -> List[EventRecord]:
    """Records for one gender; records without a gender are always kept."""
    if not gender:
        return list(records)
    return [r for r in records if not r.gender or r.gender == gender]


def get_unique_players(records: Sequence[EventRecord]) -> List[str]:
    return sorted({r.shooter_name for r in records})


def get_unique_keepers(records: Sequence[EventRecord]) -> List[str]:
    return sorted({r.keeper_name for r in records})
