"""Core business logic package for the ledger."""

from .aggregation import MonthKey, MonthlySnapshot, MonthlyStats, build_snapshot
from .exceptions import PersistenceError, RecordNotFoundError, ValidationError
from .models import Category, DailyGroup, Ledger, Transaction, TransactionDraft, TransactionType, ViewState
from .navigation import LedgerController, NavEvent, NavigationState
from .repository import LedgerRepository
from .services import CategoryService, LedgerService, TransactionService
from .storage import JSONStorage

__all__ = [
    "Category",
    "CategoryService",
    "DailyGroup",
    "JSONStorage",
    "Ledger",
    "LedgerController",
    "LedgerRepository",
    "LedgerService",
    "MonthKey",
    "MonthlySnapshot",
    "MonthlyStats",
    "NavEvent",
    "NavigationState",
    "PersistenceError",
    "RecordNotFoundError",
    "Transaction",
    "TransactionDraft",
    "TransactionService",
    "TransactionType",
    "ValidationError",
    "ViewState",
    "build_snapshot",
]
