"""Framework-agnostic business services for the ledger."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union
from uuid import uuid4

from .aggregation import UNKNOWN_CATEGORY_COLOR, UNKNOWN_CATEGORY_ICON, UNKNOWN_CATEGORY_NAME
from .exceptions import RecordNotFoundError, ValidationError
from .models import Category, Ledger, Transaction, TransactionDraft, TransactionType
from .repository import LedgerRepository
from .validators import (
    parse_amount,
    validate_date,
    validate_note,
    validate_required_str,
    validate_transaction_type,
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Read-only access to the category collection."""

    def __init__(self, repository: LedgerRepository) -> None:
        self._repository = repository
        self._categories: List[Category] = []
        self.load()

    def list(self, type: Optional[Union[TransactionType, str]] = None) -> List[Category]:
        """Return categories in collection order, optionally restricted to one type."""
        if type is None:
            return list(self._categories)
        wanted = validate_transaction_type(type)
        return [category for category in self._categories if category.type is wanted]

    def get(self, category_id: str) -> Category:
        category = self.find(category_id)
        if category is None:
            raise RecordNotFoundError(f"Category {category_id} not found")
        return category

    def find(self, category_id: str) -> Optional[Category]:
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def resolve(self, category_id: str, type: TransactionType = TransactionType.EXPENSE) -> Category:
        """Return the category or an "Unknown" placeholder for dangling references."""
        category = self.find(category_id)
        if category is not None:
            return category
        return Category(
            id=category_id,
            name=UNKNOWN_CATEGORY_NAME,
            icon=UNKNOWN_CATEGORY_ICON,
            type=type,
            color=UNKNOWN_CATEGORY_COLOR,
        )

    def default_for(self, type: Union[TransactionType, str]) -> Optional[Category]:
        """First category of ``type`` in collection order, if any."""
        matches = self.list(type)
        return matches[0] if matches else None

    def load(self) -> None:
        self._categories = self._repository.load_categories()


class LedgerService:
    """Holds the ledger collection and the persisted active ledger id."""

    def __init__(self, repository: LedgerRepository) -> None:
        self._repository = repository
        self._ledgers: List[Ledger] = []
        self._active_id = ""
        self.load()

    def list(self) -> List[Ledger]:
        return list(self._ledgers)

    def get(self, ledger_id: str) -> Ledger:
        for ledger in self._ledgers:
            if ledger.id == ledger_id:
                return ledger
        raise RecordNotFoundError(f"Ledger {ledger_id} not found")

    def resolve(self, ledger_id: str) -> Optional[Ledger]:
        """Return the ledger, falling back to the first one for unknown ids."""
        try:
            return self.get(ledger_id)
        except RecordNotFoundError:
            return self._ledgers[0] if self._ledgers else None

    @property
    def active_ledger_id(self) -> str:
        return self._active_id

    def active_ledger(self) -> Optional[Ledger]:
        return self.resolve(self._active_id)

    def switch(self, ledger_id: str) -> Ledger:
        """Make ``ledger_id`` the active ledger and persist the choice immediately."""
        ledger = self.get(ledger_id)
        self._active_id = ledger.id
        self._repository.save_active_ledger_id(ledger.id)
        logger.info("Switched active ledger to %s", ledger.id)
        return ledger

    def load(self) -> None:
        self._ledgers = self._repository.load_ledgers()
        stored = self._repository.load_active_ledger_id()
        if any(ledger.id == stored for ledger in self._ledgers) or not self._ledgers:
            self._active_id = stored
        else:
            logger.warning("Stored active ledger %s is unknown; using %s", stored, self._ledgers[0].id)
            self._active_id = self._ledgers[0].id


class TransactionService:
    """Manages transaction records and mediates persistence."""

    def __init__(self, repository: LedgerRepository, categories: CategoryService) -> None:
        self._repository = repository
        self._categories = categories
        self._transactions: List[Transaction] = []
        self._lock = threading.RLock()
        self.load()  # Hydrate in-memory list from persistence on construction.

    # Public API -----------------------------------------------------------
    def add(self, draft: Union[TransactionDraft, Dict[str, object]], ledger_id: str) -> Transaction:
        """Validate ``draft``, stamp it for ``ledger_id`` and prepend it to the list."""
        data = self._validate_draft(draft)
        now = datetime.now(timezone.utc)
        transaction = Transaction(
            id=str(uuid4()),
            ledger_id=validate_required_str(ledger_id, "ledger_id", 64),
            # Stored timestamps carry milliseconds only.
            timestamp=now.replace(microsecond=now.microsecond // 1000 * 1000),
            **data,
        )
        with self._lock:
            self._commit([transaction, *self._transactions])
        logger.info(
            "Added %s %s to ledger %s", transaction.type.value, transaction.amount, transaction.ledger_id
        )
        return transaction

    def delete(self, transaction_id: str) -> Transaction:
        with self._lock:
            for index, transaction in enumerate(self._transactions):
                if transaction.id == transaction_id:
                    self._commit(self._transactions[:index] + self._transactions[index + 1:])
                    logger.info("Deleted transaction %s", transaction_id)
                    return transaction
        raise RecordNotFoundError(f"Transaction {transaction_id} not found")

    def get(self, transaction_id: str) -> Transaction:
        """Return a transaction or raise if it does not exist."""
        with self._lock:
            for transaction in self._transactions:
                if transaction.id == transaction_id:
                    return transaction
        raise RecordNotFoundError(f"Transaction {transaction_id} not found")

    def list(self) -> List[Transaction]:
        with self._lock:
            return list(self._transactions)

    def for_ledger(self, ledger_id: str) -> List[Transaction]:
        return [tx for tx in self.list() if tx.ledger_id == ledger_id]

    def load(self) -> None:
        """Load existing transactions from persistence."""
        with self._lock:
            self._transactions = self._repository.load_transactions()

    # Internal helpers -----------------------------------------------------
    def _commit(self, transactions: List[Transaction]) -> None:
        # Always flush, including the empty list after the last delete.
        # The in-memory list only changes once the write succeeded.
        self._repository.save_transactions(transactions)
        self._transactions = transactions

    def _validate_draft(self, draft: Union[TransactionDraft, Dict[str, object]]) -> Dict[str, object]:
        if isinstance(draft, TransactionDraft):
            payload: Dict[str, object] = {
                "amount": draft.amount,
                "type": draft.type,
                "categoryId": draft.category_id,
                "date": draft.date,
                "note": draft.note,
            }
        else:
            payload = dict(draft)

        tx_type = validate_transaction_type(payload.get("type"))
        category_id = validate_required_str(payload.get("categoryId"), "categoryId", 64)
        category = self._categories.find(category_id)
        if category is not None and category.type is not tx_type:
            raise ValidationError(
                f"Category {category.name} is an {category.type.value} category, "
                f"not {tx_type.value}"
            )
        return {
            "amount": parse_amount(payload.get("amount"), "amount"),
            "type": tx_type,
            "category_id": category_id,
            "date": validate_date(payload.get("date"), "date"),
            "note": validate_note(payload.get("note")),
        }
