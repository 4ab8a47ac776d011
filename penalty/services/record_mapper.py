"""
Map raw store/spreadsheet rows onto the canonical EventRecord

Rows come from several generations of the events table and the import
scripts, so field names vary (player_name / shooter_name / shooterName).
All of that tolerance lives here; the scoring code only sees EventRecord.
"""
import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from penalty.models.event import GENDERS, STATUSES, EventRecord

logger = logging.getLogger(__name__)

SHOOTER_FIELDS = ("player_name", "shooter_name", "shooterName", "Shooter Name")
KEEPER_FIELDS = ("keeper_name", "keeperName", "Keeper Name")

# Formats seen in the source spreadsheet, tried after ISO-8601
SHEET_DATE_FORMATS = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


def _first(row: Dict[str, Any], fields) -> str:
    for field in fields:
        value = row.get(field)
        if value:
            return str(value).strip()
    return ""


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_event_date(value: Any) -> Optional[datetime]:
    """
    Parse a stored or spreadsheet date into an aware UTC datetime

    Returns:
        datetime in UTC, or None when the value cannot be parsed
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _to_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return _to_utc(datetime.fromisoformat(text))
    except ValueError:
        pass

    for fmt in SHEET_DATE_FORMATS:
        try:
            return _to_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue
    return None


def normalize_status(value: Any) -> str:
    return str(value or "").strip().lower()


def normalize_row(row: Dict[str, Any]) -> Optional[EventRecord]:
    """
    Build an EventRecord from a raw row

    Returns:
        EventRecord, or None if the row lacks a shooter, keeper, parseable
        date or a known status
    """
    shooter = _first(row, SHOOTER_FIELDS)
    keeper = _first(row, KEEPER_FIELDS)
    status = normalize_status(row.get("status") or row.get("Status"))
    when = parse_event_date(row.get("date") or row.get("Date"))

    if not shooter or not keeper or when is None or status not in STATUSES:
        logger.debug("Rejecting row %s (shooter=%r keeper=%r status=%r date=%r)",
                     row.get("id"), shooter, keeper, status, when)
        return None

    gender = str(row.get("gender") or row.get("Gender") or "").strip() or None
    if gender and gender not in GENDERS:
        gender = gender.capitalize() if gender.capitalize() in GENDERS else None

    remark = str(row.get("remark") or row.get("Remark") or "").strip() or None

    return EventRecord(
        id=str(row.get("id") or ""),
        date=when,
        shooter_name=shooter,
        keeper_name=keeper,
        status=status,
        remark=remark,
        gender=gender,
    )


def normalize_rows(rows: Iterable[Dict[str, Any]]) -> List[EventRecord]:
    """Normalize every row, dropping the ones normalize_row rejects."""
    records = []
    skipped = 0
    for row in rows:
        record = normalize_row(row)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.warning(f"Skipped {skipped} malformed event rows ({len(records)} kept)")
    return records
