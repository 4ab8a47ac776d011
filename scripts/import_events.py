#!/usr/bin/env python3
"""
Sheet -> Supabase import
Downloads the penalty sheet, validates every row and replaces the events
table so the database mirrors the sheet exactly.

Usage:
    python scripts/import_events.py [--csv-url URL] [--dry-run]
"""

import os
import sys
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from penalty.services.event_repository import EventRepository, EventRepositoryError
from penalty.services.sheet_import import SheetImportError, SheetImportService
from penalty.services.supabase_client import SupabaseService

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def run_import(sheet: SheetImportService, repository: EventRepository = None, dry_run: bool = False) -> int:
    """
    Fetch, transform and sync the sheet

    Returns:
        Number of events written (or that would be written on a dry run)
    """
    logger.info("Step 1: Fetching data from the sheet...")
    rows = sheet.parse_csv(sheet.fetch_csv())
    logger.info(f"  Fetched {len(rows)} rows")

    logger.info("Step 2: Transforming rows...")
    events = sheet.transform_rows(rows)
    logger.info(f"  {len(events)} valid events")

    if dry_run:
        logger.info("Dry run: database left untouched")
        return len(events)

    logger.info("Step 3: Syncing to database...")
    count = repository.replace_events(events)
    logger.info(f"  Synced {count} events")
    return count


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Import penalty records from the Google Sheet into Supabase')
    parser.add_argument('--csv-url', default=os.environ.get('PENALTY_SHEET_CSV_URL'),
                        help='Published CSV export URL (defaults to PENALTY_SHEET_CSV_URL env var)')
    parser.add_argument('--table', default=None, help='Events table (defaults to PENALTY_EVENTS_TABLE or game_events)')
    parser.add_argument('--dry-run', action='store_true', help='Validate the sheet without writing to the database')

    args = parser.parse_args()

    sheet = SheetImportService(csv_url=args.csv_url)
    repository = None
    if not args.dry_run:
        repository = EventRepository(SupabaseService(), table=args.table)
        if repository.supabase_service.get_client(admin=True) is None:
            logger.error("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required to import")
            sys.exit(1)

    try:
        run_import(sheet, repository, dry_run=args.dry_run)
    except (SheetImportError, EventRepositoryError) as e:
        logger.error(f"❌ Import failed: {e}")
        sys.exit(1)

    logger.info("✅ Import completed successfully")


if __name__ == '__main__':
    main()
