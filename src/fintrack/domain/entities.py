"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Stored rows are mapped onto them by the database layer so
the services and the analytics engine never see ORM objects.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


DEFAULT_CURRENCY = "INR"


class TransactionKind(str, Enum):
    """Transaction polarity. The stored amount is always unsigned."""

    INCOME = "income"
    EXPENSE = "expense"


class Category(str, Enum):
    """Closed set of spending and income classifications."""

    FOOD = "food"
    TRANSPORTATION = "transportation"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    HEALTHCARE = "healthcare"
    SHOPPING = "shopping"
    INCOME = "income"
    SALARY = "salary"
    FREELANCE = "freelance"
    INVESTMENT = "investment"
    OTHER = "other"


class BudgetPeriod(str, Enum):
    """Budget recurrence unit."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Owner:
    """Owner profile domain entity."""

    id: str
    email: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    profile_image_url: Optional[str]
    default_currency: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    owner_id: str
    kind: TransactionKind
    description: str
    amount: Decimal
    category: Category
    date: date
    currency_code: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Budget:
    """Budget domain entity."""

    id: int
    owner_id: str
    category: Category
    amount: Decimal
    period: BudgetPeriod
    currency_code: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Goal:
    """Savings goal domain entity."""

    id: int
    owner_id: str
    name: str
    description: Optional[str]
    target_amount: Decimal
    current_amount: Decimal
    target_date: Optional[date]
    currency_code: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TransactionFilter:
    """Optional narrowing criteria for transaction listings.

    Each field is independent. ``start_date`` and ``end_date`` are inclusive
    bounds on the transaction date; ``category`` and ``kind`` are exact
    matches. A field left as None imposes no constraint.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category: Optional[Category] = None
    kind: Optional[TransactionKind] = None

    def matches(self, txn: Transaction) -> bool:
        """Return True if the transaction satisfies every supplied field."""
        if self.start_date is not None and txn.date < self.start_date:
            return False
        if self.end_date is not None and txn.date > self.end_date:
            return False
        if self.category is not None and txn.category != self.category:
            return False
        if self.kind is not None and txn.kind != self.kind:
            return False
        return True


@dataclass(frozen=True)
class DashboardSummary:
    """Month-to-date figures for the dashboard.

    ``total_balance`` is the net of the month (income minus expenses), not a
    cumulative balance since the first transaction.
    """

    monthly_income: Decimal
    monthly_expenses: Decimal
    total_balance: Decimal
    savings_rate: Decimal


@dataclass(frozen=True)
class CategoryAmount:
    """Expense total for one category."""

    category: Category
    amount: Decimal


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense totals for one calendar month (``YYYY-MM``)."""

    month: str
    income: Decimal
    expenses: Decimal
