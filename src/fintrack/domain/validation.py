"""Input coercion shared by the domain services.

Every helper either returns a value in its canonical domain type or raises
ValidationError, so services can validate a whole request before touching
the store.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, TypeVar

from fintrack.domain.errors import ValidationError, invalid_choice
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date

E = TypeVar("E", bound=Enum)

# Matches the Numeric(12, 2) amount columns.
AMOUNT_SCALE = 2
MAX_AMOUNT = Decimal(10) ** 10


def coerce_enum(enum_cls: type[E], value: object, field: str) -> E:
    """Convert an enum member or its string value into ``enum_cls``."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    raise ValidationError(
        invalid_choice(field, value, [member.value for member in enum_cls])
    )


def coerce_amount(value: object, field: str = "amount", positive: bool = False) -> Decimal:
    """Convert a value into an unsigned Decimal amount.

    Args:
        value: Decimal, int, float or amount string
        field: Field name used in error messages
        positive: If True, zero is rejected as well as negatives

    Returns:
        Decimal amount

    Raises:
        ValidationError: If the value is not a decimal, is negative (or zero
            when ``positive``), or has more than two fractional digits
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid {field}: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            amount = parse_amount(value)
        except ValueError as e:
            raise ValidationError(f"Invalid {field}: {e}") from e
    else:
        raise ValidationError(f"Invalid {field}: {value!r}")

    if not amount.is_finite():
        raise ValidationError(f"Invalid {field}: {value!r}")
    if amount < 0:
        raise ValidationError(f"{field.capitalize()} must not be negative, got {amount}")
    if positive and amount == 0:
        raise ValidationError(f"{field.capitalize()} must be greater than zero")
    if amount >= MAX_AMOUNT:
        raise ValidationError(f"{field.capitalize()} {amount} is too large")
    quantized = amount.quantize(Decimal(1).scaleb(-AMOUNT_SCALE))
    if quantized != amount:
        raise ValidationError(
            f"{field.capitalize()} must have at most {AMOUNT_SCALE} decimal places, got {amount}"
        )
    return quantized


def coerce_date(value: object, field: str = "date") -> date:
    """Convert a date, datetime or date string into a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_date(value)
        except ValueError as e:
            raise ValidationError(f"Invalid {field}: {e}") from e
    raise ValidationError(f"Invalid {field}: {value!r}")


def coerce_optional_date(value: object, field: str) -> Optional[date]:
    """Like coerce_date, but passes None through."""
    if value is None:
        return None
    return coerce_date(value, field)


def coerce_currency(value: object) -> str:
    """Normalize a three-letter currency code to upper case."""
    if isinstance(value, str):
        code = value.strip().upper()
        if len(code) == 3 and code.isalpha() and code.isascii():
            return code
    raise ValidationError(f"Invalid currency code: {value!r}")


def require_text(value: object, field: str) -> str:
    """Return a stripped, non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} must not be empty")
    return value.strip()
