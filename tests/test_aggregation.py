from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from ledger_core.aggregation import (
    MonthKey,
    build_snapshot,
    category_ranking,
    filter_month,
    group_by_day,
    lifetime_balance,
    monthly_totals,
)
from ledger_core.defaults import DEFAULT_CATEGORIES
from ledger_core.models import TransactionType

MARCH_2024 = MonthKey(2024, 3)

EXPENSE = TransactionType.EXPENSE
INCOME = TransactionType.INCOME


def test_month_scenario_totals_and_groups(march_pair):
    snapshot = build_snapshot(list(march_pair), DEFAULT_CATEGORIES, "l1", MARCH_2024)

    assert snapshot.stats.income == Decimal("2000")
    assert snapshot.stats.expense == Decimal("50")
    assert snapshot.stats.balance == Decimal("1950")
    assert [group.date for group in snapshot.daily_groups] == [date(2024, 3, 5), date(2024, 3, 1)]
    assert [len(group.transactions) for group in snapshot.daily_groups] == [1, 1]


def test_filter_month_selects_ledger_and_month_only(make_tx):
    keep_a = make_tx(day="2024-03-31")
    other_ledger = make_tx(day="2024-03-10", ledger_id="l2")
    other_month = make_tx(day="2024-04-01")
    other_year = make_tx(day="2023-03-10")
    keep_b = make_tx(day="2024-03-01")

    result = filter_month(
        [keep_a, other_ledger, other_month, other_year, keep_b], "l1", MARCH_2024
    )

    assert result == [keep_b, keep_a]


def test_filter_month_orders_by_creation_not_date(make_tx):
    created_first = make_tx(day="2024-03-20")
    created_second = make_tx(day="2024-03-02")

    assert filter_month([created_first, created_second], "l1", MARCH_2024) == [
        created_second,
        created_first,
    ]


def test_filter_month_keeps_list_order_for_equal_timestamps(make_tx):
    instant = datetime(2024, 3, 3, tzinfo=timezone.utc)
    newer = make_tx(timestamp=instant)
    older = make_tx(timestamp=instant)

    assert filter_month([newer, older], "l1", MARCH_2024) == [newer, older]


def test_empty_month_yields_zero_totals_and_no_groups():
    snapshot = build_snapshot([], DEFAULT_CATEGORIES, "l1", MARCH_2024)

    assert snapshot.stats.to_dict() == {"income": "0.00", "expense": "0.00", "balance": "0.00"}
    assert snapshot.daily_groups == []
    assert snapshot.ranking == []


def test_lifetime_balance_ignores_month_and_other_ledgers(make_tx):
    transactions = [
        make_tx("100", INCOME, "c9", "2023-12-31"),
        make_tx("30", EXPENSE, "c1", "2024-03-05"),
        make_tx("5", EXPENSE, "c2", "2024-05-01"),
        make_tx("999", INCOME, "c9", "2024-03-05", ledger_id="l2"),
    ]

    assert lifetime_balance(transactions, "l1") == Decimal("65")
    assert lifetime_balance(transactions, "l2") == Decimal("999")
    assert lifetime_balance(transactions, "l3") == Decimal("0")


def test_daily_subtotals_sum_to_monthly_totals(make_tx):
    transactions = [
        make_tx("12.30", EXPENSE, "c1", "2024-03-02"),
        make_tx("7.70", EXPENSE, "c2", "2024-03-02"),
        make_tx("300", INCOME, "c10", "2024-03-02"),
        make_tx("45", EXPENSE, "c3", "2024-03-15"),
        make_tx("1000", INCOME, "c9", "2024-03-28"),
    ]
    monthly = filter_month(transactions, "l1", MARCH_2024)
    stats = monthly_totals(monthly)
    groups = group_by_day(monthly)

    assert sum((group.total_income for group in groups), Decimal(0)) == stats.income
    assert sum((group.total_expense for group in groups), Decimal(0)) == stats.expense
    assert stats.balance == stats.income - stats.expense
    assert [group.date.day for group in groups] == [28, 15, 2]


def test_daily_group_preserves_input_order(make_tx):
    first = make_tx(day="2024-03-02")
    second = make_tx(day="2024-03-02")
    monthly = filter_month([first, second], "l1", MARCH_2024)

    (group,) = group_by_day(monthly)
    assert group.transactions == [second, first]


def test_category_ranking_sorted_with_percentages(make_tx):
    transactions = [
        make_tx("30", EXPENSE, "c1"),
        make_tx("20", EXPENSE, "c1"),
        make_tx("25", EXPENSE, "c2"),
        make_tx("25", EXPENSE, "c3"),
        make_tx("500", INCOME, "c9"),
    ]
    ranking = category_ranking(transactions, DEFAULT_CATEGORIES)

    assert [share.category_id for share in ranking][0] == "c1"
    assert ranking[0].total == Decimal("50")
    assert ranking[0].name == "Dining"
    assert ranking[0].percentage == Decimal("50")
    assert sum(share.percentage for share in ranking) == Decimal("100")
    assert all(share.category_id != "c9" for share in ranking)


def test_ranking_percentages_sum_to_hundred_with_thirds(make_tx):
    transactions = [make_tx("1", EXPENSE, cid) for cid in ("c1", "c2", "c3")]
    total = sum(share.percentage for share in category_ranking(transactions, DEFAULT_CATEGORIES))

    assert abs(total - Decimal("100")) < Decimal("0.0001")


def test_ranking_empty_without_expenses(make_tx):
    assert category_ranking([make_tx("10", INCOME, "c9")], DEFAULT_CATEGORIES) == []


def test_ranking_uses_unknown_placeholder_for_dangling_category(make_tx):
    ranking = category_ranking([make_tx("8", EXPENSE, "gone")], DEFAULT_CATEGORIES)

    (share,) = ranking
    assert share.name == "Unknown"
    assert share.color == "bg-gray-400"
    assert share.percentage == Decimal("100")


@pytest.mark.parametrize(
    "start, delta, expected",
    [
        (MonthKey(2024, 3), 1, MonthKey(2024, 4)),
        (MonthKey(2024, 12), 1, MonthKey(2025, 1)),
        (MonthKey(2024, 1), -1, MonthKey(2023, 12)),
        (MonthKey(2024, 3), -15, MonthKey(2022, 12)),
        (MonthKey(2024, 3), 0, MonthKey(2024, 3)),
    ],
)
def test_month_shift_rolls_over_years(start, delta, expected):
    assert start.shift(delta) == expected


def test_month_key_rejects_invalid_month():
    with pytest.raises(ValueError):
        MonthKey(2024, 13)


def test_month_label():
    assert MonthKey(2024, 3).label == "2024-03"
