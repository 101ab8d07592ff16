"""Derived monthly views over the in-memory transaction list.

Everything here is a pure function of its inputs and is recomputed on every
call; nothing is cached or persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .models import Category, DailyGroup, Transaction, TransactionType

__all__ = [
    "CategoryShare",
    "MonthKey",
    "MonthlySnapshot",
    "MonthlyStats",
    "build_snapshot",
    "category_ranking",
    "filter_month",
    "group_by_day",
    "lifetime_balance",
    "monthly_totals",
]

ZERO = Decimal("0.00")
HUNDRED = Decimal("100")

UNKNOWN_CATEGORY_NAME = "Unknown"
UNKNOWN_CATEGORY_COLOR = "bg-gray-400"
UNKNOWN_CATEGORY_ICON = "HelpCircle"


@dataclass(frozen=True, order=True)
class MonthKey:
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def containing(cls, day: date) -> "MonthKey":
        return cls(day.year, day.month)

    @classmethod
    def today(cls) -> "MonthKey":
        return cls.containing(date.today())

    def shift(self, delta: int) -> "MonthKey":
        """Move by ``delta`` calendar months, rolling over year boundaries."""
        index = self.year * 12 + (self.month - 1) + delta
        return MonthKey(index // 12, index % 12 + 1)

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class MonthlyStats:
    income: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense

    def to_dict(self) -> Dict[str, str]:
        return {
            "income": f"{self.income:.2f}",
            "expense": f"{self.expense:.2f}",
            "balance": f"{self.balance:.2f}",
        }


@dataclass(frozen=True)
class CategoryShare:
    category_id: str
    name: str
    color: str
    icon: str
    total: Decimal
    percentage: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categoryId": self.category_id,
            "name": self.name,
            "color": self.color,
            "icon": self.icon,
            "total": f"{self.total:.2f}",
            "percentage": f"{self.percentage:.1f}",
        }


@dataclass(frozen=True)
class MonthlySnapshot:
    """Every derived view the presentation layer renders for one ledger and month."""

    ledger_id: str
    month: MonthKey
    transactions: List[Transaction] = field(default_factory=list)
    stats: MonthlyStats = field(default_factory=MonthlyStats)
    daily_groups: List[DailyGroup] = field(default_factory=list)
    ranking: List[CategoryShare] = field(default_factory=list)
    total_balance: Decimal = ZERO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ledgerId": self.ledger_id,
            "month": self.month.label,
            "stats": self.stats.to_dict(),
            "totalBalance": f"{self.total_balance:.2f}",
            "dailyGroups": [group.to_dict() for group in self.daily_groups],
            "ranking": [share.to_dict() for share in self.ranking],
        }


def filter_month(
    transactions: Iterable[Transaction], ledger_id: str, month: MonthKey
) -> List[Transaction]:
    """Return the ledger's transactions dated within ``month``, newest-created first."""
    selected = [
        tx for tx in transactions if tx.ledger_id == ledger_id and month.contains(tx.date)
    ]
    # sorted() is stable, so equal timestamps keep their list order.
    return sorted(selected, key=lambda tx: tx.timestamp, reverse=True)


def monthly_totals(transactions: Iterable[Transaction]) -> MonthlyStats:
    income = ZERO
    expense = ZERO
    for tx in transactions:
        if tx.type is TransactionType.INCOME:
            income += tx.amount
        else:
            expense += tx.amount
    return MonthlyStats(income=income, expense=expense)


def lifetime_balance(transactions: Iterable[Transaction], ledger_id: str) -> Decimal:
    """Income minus expense over every transaction of the ledger, regardless of month."""
    return sum(
        (tx.signed_amount for tx in transactions if tx.ledger_id == ledger_id),
        start=ZERO,
    )


def group_by_day(transactions: Iterable[Transaction]) -> List[DailyGroup]:
    groups: Dict[date, DailyGroup] = {}
    for tx in transactions:
        group = groups.get(tx.date)
        if group is None:
            group = groups[tx.date] = DailyGroup(date=tx.date)
        group.transactions.append(tx)
        if tx.type is TransactionType.INCOME:
            group.total_income += tx.amount
        else:
            group.total_expense += tx.amount
    return sorted(groups.values(), key=lambda group: group.date, reverse=True)


def category_ranking(
    transactions: Iterable[Transaction], categories: Sequence[Category]
) -> List[CategoryShare]:
    """Rank expense categories by their summed amount, largest first."""
    totals: Dict[str, Decimal] = {}
    for tx in transactions:
        if tx.type is not TransactionType.EXPENSE:
            continue
        totals[tx.category_id] = totals.get(tx.category_id, ZERO) + tx.amount

    expense_total = sum(totals.values(), start=ZERO)
    if expense_total <= 0:
        return []

    lookup = {category.id: category for category in categories}
    shares: List[CategoryShare] = []
    for category_id, total in totals.items():
        category: Optional[Category] = lookup.get(category_id)
        shares.append(
            CategoryShare(
                category_id=category_id,
                name=category.name if category else UNKNOWN_CATEGORY_NAME,
                color=category.color if category else UNKNOWN_CATEGORY_COLOR,
                icon=category.icon if category else UNKNOWN_CATEGORY_ICON,
                total=total,
                percentage=total / expense_total * HUNDRED,
            )
        )
    return sorted(shares, key=lambda share: share.total, reverse=True)


def build_snapshot(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    ledger_id: str,
    month: MonthKey,
) -> MonthlySnapshot:
    monthly = filter_month(transactions, ledger_id, month)
    return MonthlySnapshot(
        ledger_id=ledger_id,
        month=month,
        transactions=monthly,
        stats=monthly_totals(monthly),
        daily_groups=group_by_day(monthly),
        ranking=category_ranking(monthly, categories),
        total_balance=lifetime_balance(transactions, ledger_id),
    )
