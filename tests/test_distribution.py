"""
Tests for outcome breakdowns and month/gender/actor selection helpers
"""

from datetime import datetime, timezone

import pytest

from penalty.models.event import MonthOption, OutcomeDistribution
from penalty.stats.distribution import (
    filter_by_gender,
    filter_by_month,
    get_keeper_outcome_distribution,
    get_unique_keepers,
    get_unique_months,
    get_unique_players,
    month_label,
)


def _on(year, month, day):
    return datetime(year, month, day, 12, 0, tzinfo=timezone.utc)


def test_keeper_distribution(make_record):
    records = [
        make_record('A', 'X', 'goal'),
        make_record('B', 'X', 'saved'),
        make_record('C', 'X', 'saved'),
        make_record('D', 'X', 'out'),
        make_record('E', 'Y', 'goal'),
    ]

    assert get_keeper_outcome_distribution(records, 'X') == [
        OutcomeDistribution('goal', 1, 25),
        OutcomeDistribution('saved', 2, 50),
        OutcomeDistribution('out', 1, 25),
    ]


def test_keeper_distribution_rounds_independently(make_record):
    records = [make_record('A', 'X', s) for s in ('goal', 'saved', 'out')]

    distribution = get_keeper_outcome_distribution(records, 'X')

    assert [d.percentage for d in distribution] == [33, 33, 33]


def test_keeper_distribution_half_rounds_up(make_record):
    records = [make_record('A', 'X', 'goal')] + [make_record('A', 'X', 'saved')] * 7

    distribution = get_keeper_outcome_distribution(records, 'X')

    # 1/8 = 12.5%, 7/8 = 87.5%
    assert [d.percentage for d in distribution] == [13, 88, 0]


def test_keeper_distribution_counts_unrecognized_status(make_record):
    records = [make_record('A', 'X', s) for s in ('goal', 'retaken', 'goal')]

    distribution = get_keeper_outcome_distribution(records, 'X')

    # 2 of 3 encounters were goals; the unrecognized one only widens the total
    assert [(d.count, d.percentage) for d in distribution] == [(2, 67), (0, 0), (0, 0)]


def test_keeper_distribution_unknown_keeper(make_record):
    assert get_keeper_outcome_distribution([make_record('A', 'X', 'goal')], 'x') == []


def test_filter_by_month(make_record):
    january = make_record('A', 'X', 'goal', when=_on(2025, 1, 15))
    february = make_record('B', 'X', 'goal', when=_on(2025, 2, 1))
    records = [january, february]

    assert filter_by_month(records, '2025-01') == [january]
    assert filter_by_month(records, '') == [january, february]
    assert filter_by_month(records, None) == [january, february]


def test_filter_by_month_returns_new_list(make_record):
    records = [make_record('A', 'X', 'goal')]

    filtered = filter_by_month(records, '')
    filtered.clear()

    assert len(records) == 1


def test_filter_by_month_no_match(make_record):
    assert filter_by_month([make_record('A', 'X', 'goal')], '2020-06') == []


@pytest.mark.parametrize('value', ['2025', 'January', '2025-01-02'])
def test_filter_by_month_rejects_bad_keys(make_record, value):
    with pytest.raises(ValueError):
        filter_by_month([make_record('A', 'X', 'goal')], value)


def test_unique_months_most_recent_first(make_record):
    records = [
        make_record('A', 'X', 'goal', when=_on(2024, 12, 3)),
        make_record('A', 'X', 'goal', when=_on(2025, 3, 9)),
        make_record('A', 'X', 'goal', when=_on(2025, 3, 1)),
        make_record('A', 'X', 'goal', when=_on(2025, 1, 20)),
    ]

    assert get_unique_months(records) == [
        MonthOption('2025-03', 'March 2025'),
        MonthOption('2025-01', 'January 2025'),
        MonthOption('2024-12', 'December 2024'),
    ]


def test_month_label():
    assert month_label('2025-09') == 'September 2025'


def test_unique_actors_sorted_case_sensitive(make_record):
    records = [
        make_record('bob', 'Zed', 'goal'),
        make_record('Alice', 'amy', 'goal'),
        make_record('Bob', 'Zed', 'goal'),
        make_record('Alice', 'Amy', 'goal'),
    ]

    assert get_unique_players(records) == ['Alice', 'Bob', 'bob']
    assert get_unique_keepers(records) == ['Amy', 'Zed', 'amy']


def test_filter_by_gender(make_record):
    male = make_record('A', 'X', 'goal', gender='Male')
    female = make_record('B', 'Y', 'goal', gender='Female')
    unknown = make_record('C', 'Z', 'goal')

    assert filter_by_gender([male, female, unknown], 'Male') == [male, unknown]
    assert filter_by_gender([male, female, unknown], None) == [male, female, unknown]


def test_helpers_on_empty_input():
    assert get_unique_months([]) == []
    assert get_unique_players([]) == []
    assert filter_by_month([], '2025-01') == []
