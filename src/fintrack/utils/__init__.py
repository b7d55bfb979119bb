"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date, month_bounds, month_key
from fintrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "month_bounds", "month_key", "parse_amount"]
