"""
Tests for raw row -> EventRecord normalization
"""

from datetime import datetime, timedelta, timezone

import pytest

from penalty.services.record_mapper import normalize_row, normalize_rows, parse_event_date


def test_supabase_row():
    record = normalize_row({
        'id': 'abc',
        'date': '2025-01-15T18:30:00+00:00',
        'player_name': ' Alice ',
        'keeper_name': 'Bob',
        'status': 'Goal',
        'remark': 'top corner',
        'gender': 'Female',
    })

    assert record.id == 'abc'
    assert record.date == datetime(2025, 1, 15, 18, 30, tzinfo=timezone.utc)
    assert record.shooter_name == 'Alice'
    assert record.keeper_name == 'Bob'
    assert record.status == 'goal'
    assert record.remark == 'top corner'
    assert record.gender == 'Female'


@pytest.mark.parametrize('shooter_field', ['player_name', 'shooter_name', 'shooterName'])
def test_shooter_field_fallbacks(shooter_field):
    record = normalize_row({
        'id': 1,
        'date': '2025-01-15',
        shooter_field: 'Alice',
        'keeperName': 'Bob',
        'status': 'saved',
    })

    assert record.shooter_name == 'Alice'
    assert record.keeper_name == 'Bob'
    assert record.id == '1'


@pytest.mark.parametrize('row', [
    {'date': '2025-01-15', 'player_name': '', 'keeper_name': 'Bob', 'status': 'goal'},
    {'date': '2025-01-15', 'player_name': 'Alice', 'keeper_name': None, 'status': 'goal'},
    {'date': 'not a date', 'player_name': 'Alice', 'keeper_name': 'Bob', 'status': 'goal'},
    {'date': '2025-01-15', 'player_name': 'Alice', 'keeper_name': 'Bob', 'status': 'retaken'},
    {'player_name': 'Alice', 'keeper_name': 'Bob', 'status': 'goal'},
])
def test_unusable_rows_rejected(row):
    assert normalize_row(row) is None


def test_unknown_gender_dropped():
    record = normalize_row({'date': '2025-01-15', 'player_name': 'A', 'keeper_name': 'B', 'status': 'out',
                            'gender': 'unknown'})

    assert record.gender is None


def test_lowercase_gender_normalized():
    record = normalize_row({'date': '2025-01-15', 'player_name': 'A', 'keeper_name': 'B', 'status': 'out',
                            'gender': 'male'})

    assert record.gender == 'Male'


def test_normalize_rows_drops_rejects(caplog):
    rows = [
        {'date': '2025-01-15', 'player_name': 'A', 'keeper_name': 'B', 'status': 'goal'},
        {'date': '2025-01-15', 'player_name': 'A', 'keeper_name': 'B', 'status': '???'},
    ]

    records = normalize_rows(rows)

    assert len(records) == 1
    assert 'Skipped 1 malformed' in caplog.text


@pytest.mark.parametrize('value,expected', [
    ('2025-01-15T10:00:00Z', datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)),
    ('2025-01-15T10:00:00+02:00', datetime(2025, 1, 15, 8, 0, tzinfo=timezone.utc)),
    ('2025-01-15 10:00:00', datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)),
    ('1/15/2025', datetime(2025, 1, 15, tzinfo=timezone.utc)),
    ('1/15/2025 19:05:00', datetime(2025, 1, 15, 19, 5, tzinfo=timezone.utc)),
    (datetime(2025, 1, 15, 10, tzinfo=timezone(timedelta(hours=1))), datetime(2025, 1, 15, 9, tzinfo=timezone.utc)),
])
def test_parse_event_date(value, expected):
    assert parse_event_date(value) == expected


@pytest.mark.parametrize('value', [None, '', '15th of Jan', '13/45/2025'])
def test_parse_event_date_invalid(value):
    assert parse_event_date(value) is None
