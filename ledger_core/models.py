"""Data models for the ledger domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List

__all__ = [
    "Category",
    "DailyGroup",
    "Ledger",
    "Transaction",
    "TransactionDraft",
    "TransactionType",
    "ViewState",
    "isoformat_utc",
    "parse_date",
    "parse_timestamp",
]


class TransactionType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


class ViewState(str, Enum):
    HOME = "home"
    STATS = "stats"
    LEDGERS = "ledgers"


def isoformat_utc(dt: datetime) -> str:
    """Return an ISO 8601 string with trailing Z for UTC-aware datetimes."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    # Millisecond precision keeps rapid successive adds ordered.
    iso = dt.isoformat(timespec="milliseconds")
    return iso.replace("+00:00", "Z")


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 string or epoch milliseconds into a UTC-aware datetime."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        # Treat naive datetimes as UTC to avoid accidental timezone drift.
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_date(value: Any) -> date:
    """Parse a calendar date; datetimes and ISO datetime strings keep only the day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        # The day is taken as written, without shifting to UTC.
        return datetime.fromisoformat(text).date()


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str
    type: TransactionType
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "type": self.type.value,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            icon=data.get("icon", ""),
            type=TransactionType(data["type"]),
            color=data.get("color", ""),
        )


@dataclass(frozen=True)
class Ledger:
    id: str
    name: str
    cover_color: str
    icon: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "coverColor": self.cover_color,
            "icon": self.icon,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ledger":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            cover_color=data.get("coverColor", ""),
            icon=data.get("icon", ""),
        )


@dataclass(frozen=True)
class Transaction:
    id: str
    amount: Decimal
    type: TransactionType
    category_id: str
    date: date
    ledger_id: str
    timestamp: datetime
    note: str = ""

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.type is TransactionType.INCOME else -self.amount

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the transaction to JSON-friendly natives."""
        return {
            "id": self.id,
            "amount": f"{self.amount:.2f}",
            "type": self.type.value,
            "categoryId": self.category_id,
            "date": self.date.isoformat(),
            "note": self.note,
            "ledgerId": self.ledger_id,
            "timestamp": isoformat_utc(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        """Hydrate a Transaction from JSON-native data."""
        return cls(
            id=str(data["id"]),
            amount=Decimal(str(data["amount"])),
            type=TransactionType(data["type"]),
            category_id=str(data["categoryId"]),
            date=parse_date(data["date"]),
            ledger_id=str(data["ledgerId"]),
            timestamp=parse_timestamp(data["timestamp"]),
            note=data.get("note") or "",
        )


@dataclass(frozen=True)
class TransactionDraft:
    """A transaction as entered by the user, before id, timestamp and ledger are assigned."""

    amount: Any
    type: TransactionType
    category_id: str
    date: Any
    note: str = ""


@dataclass
class DailyGroup:
    date: date
    total_income: Decimal = Decimal("0.00")
    total_expense: Decimal = Decimal("0.00")
    transactions: List[Transaction] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "totalIncome": f"{self.total_income:.2f}",
            "totalExpense": f"{self.total_expense:.2f}",
            "transactions": [tx.to_dict() for tx in self.transactions],
        }
