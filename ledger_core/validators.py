"""Validation helpers shared across ledger services."""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional

from .exceptions import ValidationError
from .models import TransactionType, parse_date

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")

NOTE_MAX_LENGTH = 200


def _quantize_two_decimals(amount: Decimal) -> Decimal:
    """Round the amount to two decimal places using HALF_UP rounding."""
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def parse_amount(raw: object, field: str) -> Decimal:
    """Convert raw input to a positive Decimal with exactly two fraction digits."""
    if isinstance(raw, bool):
        raise ValidationError(f"{field} must be a numeric value")
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError) as exc:  # type: ignore[arg-type]
        raise ValidationError(f"{field} must be a numeric value") from exc

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a numeric value")
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero")

    rounded = _quantize_two_decimals(amount)
    if rounded <= 0:
        raise ValidationError(f"{field} must be at least 0.01")
    return rounded


def validate_required_str(value: object, field: str, max_length: int) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty")
    if len(trimmed) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return trimmed


def validate_note(value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("note must be a string")
    trimmed = value.strip()
    if len(trimmed) > NOTE_MAX_LENGTH:
        raise ValidationError(f"note must be at most {NOTE_MAX_LENGTH} characters")
    return trimmed


def validate_date(value: object, field: str) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required")
    try:
        return parse_date(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format") from exc


def validate_enum(value: object, field: str, allowed: Iterable[str]) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    canonical = value.strip().lower()
    if canonical not in allowed:
        raise ValidationError(f"{field} must be one of: {', '.join(sorted(allowed))}")
    return canonical


def validate_transaction_type(value: object, field: str = "type") -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    canonical = validate_enum(value, field, {member.value for member in TransactionType})
    return TransactionType(canonical)


def parse_month(value: Optional[str], field: str = "month") -> tuple[int, int]:
    """Parse a ``YYYY-MM`` string into a (year, month) pair."""
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string in YYYY-MM format")
    match = MONTH_PATTERN.fullmatch(value.strip())
    if not match:
        raise ValidationError(f"{field} must be in YYYY-MM format")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValidationError(f"{field} must name a month between 01 and 12")
    return year, month
