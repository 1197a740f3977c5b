from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

# payments.amount is DECIMAL(12,2)
_AMOUNT_QUANT = Decimal("0.01")


def optional_text(value: object, field_name: str) -> Optional[str]:
    """Stripped text, or None when missing/blank. Non-string values are rejected."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None


def require_positive_amount(value: object) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError("Please enter a valid amount") from None
    if not amount.is_finite() or amount <= 0:
        raise ValidationError("Please enter a valid amount")
    if amount.quantize(_AMOUNT_QUANT) != amount:
        raise ValidationError("Amount can have at most 2 decimal places")
    return amount


def require_choice(value: object, enum_cls: type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None
