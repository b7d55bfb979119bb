"""Tests for input coercion helpers."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from fintrack.domain.entities import BudgetPeriod, Category, TransactionKind
from fintrack.domain.errors import ValidationError
from fintrack.domain.validation import (
    coerce_amount,
    coerce_currency,
    coerce_date,
    coerce_enum,
    require_text,
)
from fintrack.utils.amount_parser import parse_amount


class TestCoerceEnum:
    """Tests for enum coercion."""

    def test_accepts_member(self):
        assert coerce_enum(Category, Category.FOOD, "category") is Category.FOOD

    def test_accepts_value_case_insensitively(self):
        assert coerce_enum(TransactionKind, " Income ", "kind") is TransactionKind.INCOME
        assert coerce_enum(BudgetPeriod, "WEEKLY", "period") is BudgetPeriod.WEEKLY

    def test_rejects_unknown_value(self):
        with pytest.raises(ValidationError, match="Invalid category 'pets'"):
            coerce_enum(Category, "pets", "category")

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            coerce_enum(TransactionKind, 1, "kind")


class TestCoerceAmount:
    """Tests for amount coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("12.5", Decimal("12.50")),
            ("₹1,234.56", Decimal("1234.56")),
            (Decimal("3"), Decimal("3.00")),
            (7, Decimal("7.00")),
            (0.1, Decimal("0.10")),
            ("1.500", Decimal("1.50")),
        ],
    )
    def test_valid_amounts(self, value, expected):
        result = coerce_amount(value)
        assert result == expected
        assert isinstance(result, Decimal)

    @pytest.mark.parametrize(
        "value", ["-0.01", "(5.00)", "1.001", "NaN", "Infinity", "", True, None, [1], "10000000000"]
    )
    def test_invalid_amounts(self, value):
        with pytest.raises(ValidationError):
            coerce_amount(value)

    def test_positive_rejects_zero(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            coerce_amount("0", "target amount", positive=True)


class TestCoerceDate:
    """Tests for date coercion."""

    def test_date_passthrough(self):
        assert coerce_date(date(2024, 2, 29)) == date(2024, 2, 29)

    def test_datetime_drops_time(self):
        assert coerce_date(datetime(2024, 2, 29, 23, 59)) == date(2024, 2, 29)

    def test_iso_string(self):
        assert coerce_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["2023-02-29", "garbage", 20240101, None])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            coerce_date(value)

    @pytest.mark.parametrize("value", ["1", "Jan", "2024", "monday", "2024-03", "March 5", "1/2"])
    def test_partial_date_rejected(self, value):
        with pytest.raises(ValidationError, match="year, month and day are required"):
            coerce_date(value)

    def test_relative_word_accepted(self):
        assert coerce_date("this month") == date.today().replace(day=1)


def test_coerce_currency():
    assert coerce_currency(" usd ") == "USD"
    for bad in ["US", "DOLLAR", "U$D", 840]:
        with pytest.raises(ValidationError):
            coerce_currency(bad)


def test_require_text():
    assert require_text("  Rent ", "description") == "Rent"
    with pytest.raises(ValidationError, match="Description must not be empty"):
        require_text("", "description")


def test_parse_amount_keeps_sign():
    assert parse_amount("-$1,000.00") == Decimal("-1000.00")
    assert parse_amount("(25.00)") == Decimal("-25.00")
    with pytest.raises(ValueError):
        parse_amount("twelve")
