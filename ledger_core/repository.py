"""Whole-collection repository over the key-value store.

Each collection lives under its own key and is read and written as a unit.
Reads never raise: an absent key yields the built-in default and a malformed
document is logged, moved aside to ``<key>.json.corrupt`` and replaced by the
default. Writes overwrite the slot unconditionally and raise
:class:`PersistenceError` on failure.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

from .defaults import DEFAULT_ACTIVE_LEDGER_ID, DEFAULT_CATEGORIES, DEFAULT_LEDGERS
from .exceptions import PersistenceError
from .models import Category, Ledger, Transaction
from .storage import JSONStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRANSACTIONS_KEY = "transactions"
LEDGERS_KEY = "ledgers"
CATEGORIES_KEY = "categories"
ACTIVE_LEDGER_KEY = "active_ledger_id"


class LedgerRepository:
    """Loads and saves the four persisted slots of the application."""

    def __init__(self, storage: JSONStorage) -> None:
        self._storage = storage

    @property
    def storage(self) -> JSONStorage:
        return self._storage

    # Transactions ---------------------------------------------------------
    def load_transactions(self) -> List[Transaction]:
        return self._load_list(TRANSACTIONS_KEY, Transaction.from_dict, list)

    def save_transactions(self, transactions: List[Transaction]) -> None:
        self._storage.save(TRANSACTIONS_KEY, [tx.to_dict() for tx in transactions])

    # Ledgers --------------------------------------------------------------
    def load_ledgers(self) -> List[Ledger]:
        return self._load_list(LEDGERS_KEY, Ledger.from_dict, lambda: list(DEFAULT_LEDGERS))

    def save_ledgers(self, ledgers: List[Ledger]) -> None:
        self._storage.save(LEDGERS_KEY, [ledger.to_dict() for ledger in ledgers])

    # Categories -----------------------------------------------------------
    def load_categories(self) -> List[Category]:
        return self._load_list(
            CATEGORIES_KEY, Category.from_dict, lambda: list(DEFAULT_CATEGORIES)
        )

    def save_categories(self, categories: List[Category]) -> None:
        self._storage.save(CATEGORIES_KEY, [category.to_dict() for category in categories])

    # Active ledger --------------------------------------------------------
    def load_active_ledger_id(self) -> str:
        payload = self._read(ACTIVE_LEDGER_KEY)
        if payload is None:
            return DEFAULT_ACTIVE_LEDGER_ID
        if not isinstance(payload, str) or not payload.strip():
            logger.warning("Ignoring malformed active ledger id %r", payload)
            return DEFAULT_ACTIVE_LEDGER_ID
        return payload

    def save_active_ledger_id(self, ledger_id: str) -> None:
        self._storage.save(ACTIVE_LEDGER_KEY, ledger_id)

    # Internal helpers -----------------------------------------------------
    def _read(self, key: str) -> Optional[Any]:
        try:
            return self._storage.load(key)
        except PersistenceError as exc:
            logger.warning("Falling back to defaults for %s: %s", key, exc)
            self._set_aside(key)
            return None

    def _set_aside(self, key: str) -> None:
        # The next save overwrites the slot, so unreadable data is kept beside it.
        try:
            moved = self._storage.quarantine(key)
        except PersistenceError as exc:
            logger.error("Could not preserve malformed %s: %s", key, exc)
            return
        if moved is not None:
            logger.warning("Moved malformed %s data to %s", key, moved)

    def _load_list(
        self,
        key: str,
        hydrate: Callable[[dict], T],
        default: Callable[[], List[T]],
    ) -> List[T]:
        payload = self._read(key)
        if payload is None:
            return default()
        if not isinstance(payload, list):
            logger.warning("Expected list payload for %s, got %s", key, type(payload).__name__)
            self._set_aside(key)
            return default()
        try:
            return [hydrate(record) for record in payload]
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            logger.warning("Malformed record in %s, using defaults: %s", key, exc)
            self._set_aside(key)
            return default()
