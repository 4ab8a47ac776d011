"""
Pytest configuration and fixtures for tests
"""
import pytest
import sys
import os
from datetime import datetime, timedelta, timezone
from itertools import count

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import create_app
from penalty.models.event import EventRecord
from penalty.score.loader import get_config

BASE_DATE = datetime(2025, 1, 15, 18, 0, tzinfo=timezone.utc)


class StubRepository:
    """In-memory stand-in for EventRepository"""

    def __init__(self, records=None, error=None):
        self.records = list(records or [])
        self.error = error
        self.calls = []

    def fetch_events(self, gender=None):
        self.calls.append(gender)
        if self.error is not None:
            raise self.error
        return [r for r in self.records if not gender or not r.gender or r.gender == gender]


@pytest.fixture(autouse=True)
def _bundled_scoring_config(monkeypatch):
    """Every test scores with the bundled config.yml"""
    monkeypatch.delenv('PENALTY_SCORING_CONFIG', raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def make_record():
    """Factory: make_record('A', 'X', 'goal', days=0) -> EventRecord"""
    ids = count(1)

    def _make(shooter, keeper, status, days=0.0, when=None, gender=None, remark=None):
        return EventRecord(
            id=str(next(ids)),
            date=when if when is not None else BASE_DATE + timedelta(days=days),
            shooter_name=shooter,
            keeper_name=keeper,
            status=status,
            remark=remark,
            gender=gender,
        )

    return _make


@pytest.fixture
def repository():
    return StubRepository()


@pytest.fixture
def app(repository):
    app = create_app(repository=repository)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create Flask test client"""
    with app.test_client() as client:
        yield client
