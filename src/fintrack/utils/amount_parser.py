"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥₹]")
_ACCOUNTING_NEGATIVE = re.compile(r"^\((.*)\)$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-entered amount into a Decimal.

    Accepts plain numbers ("123.45", "-123.45"), a leading currency symbol
    ("₹1,234.56", "-$10") and accounting negatives ("(123.45)"). Thousands
    separators are dropped. The sign is returned as written.

    Raises:
        ValueError: If the text is empty, not a number, or not finite
    """
    text = (amount_str or "").strip()
    if not text:
        raise ValueError("Empty amount string")

    match = _ACCOUNTING_NEGATIVE.match(text)
    negate = match is not None
    if negate:
        text = match.group(1)

    cleaned = _CURRENCY_SYMBOLS.sub("", text).replace(",", "").strip()
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    if not amount.is_finite():
        raise ValueError(f"Amount '{amount_str}' is not a finite number")
    return -amount if negate else amount
