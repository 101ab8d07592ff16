from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ledger_core.exceptions import ValidationError
from ledger_core.models import TransactionType
from ledger_core.validators import (
    parse_amount,
    parse_month,
    validate_date,
    validate_note,
    validate_transaction_type,
)


@pytest.mark.parametrize(
    "raw, expected",
    [("12", Decimal("12.00")), (12.345, Decimal("12.35")), ("0.01", Decimal("0.01")), (" 5 ", Decimal("5.00"))],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw, "amount") == expected


@pytest.mark.parametrize("raw", ["0", "-1", "NaN", "Infinity", "ten", True, None])
def test_parse_amount_rejects(raw):
    with pytest.raises(ValidationError):
        parse_amount(raw, "amount")


def test_parse_month():
    assert parse_month("2024-03") == (2024, 3)
    assert parse_month("2024-3") == (2024, 3)


@pytest.mark.parametrize("raw", ["2024-13", "2024/03", "March", "", None])
def test_parse_month_rejects(raw):
    with pytest.raises(ValidationError):
        parse_month(raw)


def test_validate_date():
    assert validate_date("2024-03-05", "date") == date(2024, 3, 5)
    assert validate_date(date(2024, 1, 1), "date") == date(2024, 1, 1)
    with pytest.raises(ValidationError):
        validate_date("", "date")
    with pytest.raises(ValidationError):
        validate_date("05/03/2024", "date")


def test_validate_note():
    assert validate_note(None) == ""
    assert validate_note(" hi ") == "hi"
    with pytest.raises(ValidationError):
        validate_note("x" * 201)
    with pytest.raises(ValidationError):
        validate_note(42)


def test_validate_transaction_type():
    assert validate_transaction_type(" Income ") is TransactionType.INCOME
    assert validate_transaction_type(TransactionType.EXPENSE) is TransactionType.EXPENSE
    with pytest.raises(ValidationError):
        validate_transaction_type("transfer")


@pytest.mark.parametrize("raw", ["2024-03-05garbage", "2024-03-0", "2024-03-05T99:00", "2024-03-05 extra"])
def test_validate_date_rejects_trailing_text(raw):
    with pytest.raises(ValidationError):
        validate_date(raw, "date")


def test_validate_date_accepts_iso_datetimes():
    assert validate_date("2024-03-05T23:59:00.000Z", "date") == date(2024, 3, 5)
    assert validate_date("2024-03-05T10:00:00+08:00", "date") == date(2024, 3, 5)
