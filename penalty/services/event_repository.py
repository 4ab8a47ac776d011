"""
Read and replace penalty events in the Supabase events table
"""
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from penalty.models.event import EventRecord
from penalty.services.record_mapper import normalize_rows
from penalty.services.supabase_client import SupabaseService
from penalty.stats.distribution import filter_by_gender
from penalty.utils.supabase_retry import with_supabase_retry

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "game_events"
# Rows requested per query; a lower server max-rows cap just shortens each page
PAGE_SIZE = 1000
INSERT_CHUNK_SIZE = 500
# Matches no real row; PostgREST refuses an unfiltered delete
NIL_UUID = "00000000-0000-0000-0000-000000000000"


class EventRepositoryError(RuntimeError):
    """Raised when events cannot be read from or written to the store."""


class EventRepository:
    """
    Fetches penalty events and maps them to EventRecord

    Usage:
        repository = EventRepository(SupabaseService())
        records = repository.fetch_events(gender="Male")
    """

    def __init__(self, supabase_service: SupabaseService, table: Optional[str] = None, page_size: int = PAGE_SIZE):
        self.supabase_service = supabase_service
        self.table = table or os.getenv("PENALTY_EVENTS_TABLE", DEFAULT_TABLE)
        self.page_size = page_size

    @property
    def enabled(self) -> bool:
        return self.supabase_service.enabled

    def _client(self, admin: bool = False):
        client = self.supabase_service.get_client(admin=admin)
        if client is None:
            raise EventRepositoryError("Supabase client not configured")
        return client

    def fetch_rows(self) -> List[Dict[str, Any]]:
        """
        All raw rows, newest first, read page by page

        Many rows share a day-only date, so id breaks ties to keep
        LIMIT/OFFSET pages disjoint.
        """
        client = self._client()
        rows: List[Dict[str, Any]] = []
        start = 0
        while True:
            end = start + self.page_size - 1
            try:
                response = with_supabase_retry(
                    lambda: client.table(self.table)
                    .select("*")
                    .order("date", desc=True)
                    .order("id")
                    .range(start, end)
                    .execute()
                )
            except Exception as e:
                logger.error(f"Error fetching events from {self.table}: {e}", exc_info=True)
                raise EventRepositoryError(f"Failed to fetch events: {e}") from e

            page = response.data or []
            rows.extend(page)
            if not page:
                break
            start += len(page)

        logger.debug("Fetched %d rows from %s", len(rows), self.table)
        return rows

    def fetch_events(self, gender: Optional[str] = None) -> List[EventRecord]:
        """
        Events as EventRecord, newest first

        Args:
            gender: Keep only this gender (records without one are kept)

        Raises:
            EventRepositoryError: if the store is not configured or the query fails
        """
        records = normalize_rows(self.fetch_rows())
        return filter_by_gender(records, gender)

    def replace_events(self, events: Sequence[Dict[str, Any]]) -> int:
        """
        Replace the whole table with `events` so it mirrors the source sheet

        Returns:
            Number of rows inserted
        """
        client = self._client(admin=True)

        try:
            with_supabase_retry(lambda: client.table(self.table).delete().neq("id", NIL_UUID).execute())
        except Exception as e:
            logger.error(f"Error clearing {self.table}: {e}", exc_info=True)
            raise EventRepositoryError(f"Failed to clear events: {e}") from e

        inserted = 0
        for offset in range(0, len(events), INSERT_CHUNK_SIZE):
            chunk = list(events[offset:offset + INSERT_CHUNK_SIZE])
            try:
                response = with_supabase_retry(lambda: client.table(self.table).insert(chunk).execute())
            except Exception as e:
                logger.error(f"Error inserting events at offset {offset}: {e}", exc_info=True)
                raise EventRepositoryError(f"Failed to insert events: {e}") from e
            inserted += len(response.data or chunk)

        logger.info(f"Replaced {self.table} with {inserted} events")
        return inserted
