"""
Import penalty records from the published Google Sheet CSV export
"""
import csv
import io
import logging
import os
from typing import Any, Dict, List, Optional

import requests

from penalty.services.record_mapper import normalize_row

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Date", "Shooter Name", "Keeper Name", "Status")


class SheetImportError(RuntimeError):
    """Raised when the sheet cannot be downloaded or read."""


class SheetImportService:
    """
    Downloads the sheet and turns its rows into events table payloads

    Usage:
        sheet = SheetImportService()
        events = sheet.transform_rows(sheet.parse_csv(sheet.fetch_csv()))
    """

    def __init__(self, csv_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout: int = 30):
        self.csv_url = csv_url or os.getenv("PENALTY_SHEET_CSV_URL", "")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_csv(self) -> str:
        """Raw CSV text of the sheet export."""
        if not self.csv_url:
            raise SheetImportError("No sheet CSV URL configured (PENALTY_SHEET_CSV_URL)")

        try:
            response = self.session.get(self.csv_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to download sheet: {e}")
            raise SheetImportError(f"Failed to download sheet: {e}") from e

        logger.info(f"Downloaded sheet export ({len(response.content)} bytes)")
        return response.text

    @staticmethod
    def parse_csv(text: str) -> List[Dict[str, str]]:
        reader = csv.DictReader(io.StringIO(text))
        if reader.fieldnames is None:
            return []

        missing = [c for c in REQUIRED_COLUMNS if c not in reader.fieldnames]
        if missing:
            raise SheetImportError(f"Sheet is missing columns: {', '.join(missing)}")
        return list(reader)

    @staticmethod
    def transform_row(row: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Sheet row -> events table payload, or None if the row is unusable

        Validation is the same normalize_row the read path applies, so a
        row is imported exactly when it would later be scored.
        """
        record = normalize_row(row)
        if record is None:
            return None

        return {
            "date": record.date.isoformat(),
            "player_name": record.shooter_name,
            "keeper_name": record.keeper_name,
            "status": record.status,
            "remark": record.remark,
            "gender": record.gender,
        }

    def transform_rows(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        events = []
        for index, row in enumerate(rows, start=2):  # row 1 is the header
            event = self.transform_row(row)
            if event is None:
                logger.warning("Skipping invalid sheet row %d: %s", index, row)
                continue
            events.append(event)

        logger.info(f"Transformed {len(events)} of {len(rows)} sheet rows")
        return events
