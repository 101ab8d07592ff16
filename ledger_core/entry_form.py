"""State of the add-transaction form, independent of any UI toolkit."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence

from .exceptions import ValidationError
from .models import Category, TransactionDraft, TransactionType

BACKSPACE = "backspace"
DECIMAL_POINT = "."
KEYPAD_DIGITS = frozenset("0123456789")


class EntryForm:
    """Amount keypad, type toggle, category selection, note and date."""

    def __init__(
        self,
        categories: Sequence[Category],
        type: TransactionType = TransactionType.EXPENSE,
        today: Optional[date] = None,
    ) -> None:
        self._categories = list(categories)
        self.amount_text = "0"
        self.type = type
        self.category_id: Optional[str] = None
        self.note = ""
        self.date = today or date.today()
        self.set_type(type)

    @property
    def available_categories(self) -> List[Category]:
        return [category for category in self._categories if category.type is self.type]

    @property
    def amount(self) -> Decimal:
        try:
            return Decimal(self.amount_text)
        except InvalidOperation:
            return Decimal("0")

    def press(self, key: str) -> str:
        """Apply one keypad press and return the new amount text."""
        if key == BACKSPACE:
            self.amount_text = self.amount_text[:-1] if len(self.amount_text) > 1 else "0"
        elif key == DECIMAL_POINT:
            if DECIMAL_POINT not in self.amount_text:
                self.amount_text += DECIMAL_POINT
        elif key in KEYPAD_DIGITS:
            self.amount_text = key if self.amount_text == "0" else self.amount_text + key
        else:
            raise ValueError(f"Unsupported keypad key: {key!r}")
        return self.amount_text

    def set_type(self, type: TransactionType) -> None:
        """Switch type and preselect the first category of that type, if any."""
        self.type = TransactionType(type)
        available = self.available_categories
        self.category_id = available[0].id if available else None

    def select_category(self, category_id: str) -> None:
        if not any(category.id == category_id for category in self.available_categories):
            raise ValidationError(f"Category {category_id} is not a {self.type.value} category")
        self.category_id = category_id

    def validate(self) -> List[str]:
        errors: List[str] = []
        if self.amount <= 0:
            errors.append("Amount must be greater than zero.")
        if not self.category_id:
            errors.append("Choose a category.")
        return errors

    def to_draft(self) -> TransactionDraft:
        errors = self.validate()
        if errors:
            raise ValidationError(" ".join(errors))
        return TransactionDraft(
            amount=self.amount_text,
            type=self.type,
            category_id=self.category_id or "",
            date=self.date,
            note=self.note,
        )
