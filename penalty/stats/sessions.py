"""Group penalty records into sessions (one session per calendar day)."""

from datetime import datetime
from typing import Dict, List, Sequence

from penalty.models.event import EventRecord


def session_key(when: datetime) -> str:
    """YYYY-MM-DD of the stored timestamp; no timezone conversion."""
    return when.date().isoformat()


def group_by_session(records: Sequence[EventRecord]) -> Dict[str, List[EventRecord]]:
    """
    Partition records by calendar day

    Keys appear in order of first occurrence in `records`; each session keeps
    its records in input order.
    """
    sessions: Dict[str, List[EventRecord]] = {}
    for record in records:
        sessions.setdefault(session_key(record.date), []).append(record)
    return sessions
