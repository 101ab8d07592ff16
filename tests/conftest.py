"""Shared fixtures and factories for the ledger tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from itertools import count

import pytest

from ledger_core.aggregation import MonthKey
from ledger_core.models import Transaction, TransactionType
from ledger_core.navigation import LedgerController
from ledger_core.repository import LedgerRepository
from ledger_core.storage import JSONStorage

BASE_TIME = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
MARCH_2024 = MonthKey(2024, 3)


@pytest.fixture
def storage(tmp_path):
    return JSONStorage(tmp_path / "data")


@pytest.fixture
def repository(storage):
    return LedgerRepository(storage)


@pytest.fixture
def controller(repository):
    return LedgerController(repository, month=MARCH_2024)


@pytest.fixture
def make_tx():
    """Factory for transactions with increasing creation timestamps."""
    sequence = count(1)

    def _make(
        amount="10.00",
        type=TransactionType.EXPENSE,
        category_id="c1",
        day="2024-03-05",
        ledger_id="l1",
        note="",
        tx_id=None,
        timestamp=None,
    ) -> Transaction:
        n = next(sequence)
        return Transaction(
            id=tx_id or f"t{n}",
            amount=Decimal(amount),
            type=TransactionType(type),
            category_id=category_id,
            date=date.fromisoformat(day),
            ledger_id=ledger_id,
            timestamp=timestamp or BASE_TIME + timedelta(minutes=n),
            note=note,
        )

    return _make


@pytest.fixture
def march_pair(make_tx):
    """The two March transactions of ledger l1 used across scenarios."""
    expense = make_tx("50", TransactionType.EXPENSE, "c1", "2024-03-05", tx_id="exp-50")
    income = make_tx("2000", TransactionType.INCOME, "c9", "2024-03-01", tx_id="inc-2000")
    return expense, income


@pytest.fixture
def seeded_controller(repository, march_pair):
    repository.save_transactions(list(march_pair))
    return LedgerController(repository, month=MARCH_2024)
