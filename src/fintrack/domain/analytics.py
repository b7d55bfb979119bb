"""Analytics domain service.

Every figure is derived from a fresh read of the owner's transactions; no
totals are cached or maintained incrementally. Amounts are summed as Decimal
so balances are exact.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from fintrack.database.base import Database
from fintrack.domain.entities import (
    Category,
    CategoryAmount,
    DashboardSummary,
    MonthlyTotals,
    Transaction,
    TransactionFilter,
    TransactionKind,
)
from fintrack.domain.errors import ValidationError
from fintrack.domain.validation import coerce_date
from fintrack.utils.date_parser import month_bounds, month_key, trailing_month_range

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class AnalyticsService:
    """Service for deriving summary statistics from the ledger."""

    def __init__(self, db: Database):
        """Initialize analytics service.

        Args:
            db: Database instance
        """
        self.db = db

    def compute_dashboard_summary(
        self, owner_id: str, as_of: Optional[date] = None
    ) -> DashboardSummary:
        """Summarize the calendar month containing ``as_of``.

        Args:
            owner_id: Owner ID
            as_of: Any date within the month to summarize (defaults to today)

        Returns:
            DashboardSummary where total_balance is income minus expenses for
            that month only, and savings_rate is the retained share of income
            as a percentage (0 when there is no income)
        """
        as_of = date.today() if as_of is None else coerce_date(as_of, "as-of date")
        start, end = month_bounds(as_of)
        transactions = self.db.list_transactions(
            owner_id, TransactionFilter(start_date=start, end_date=end)
        )

        income = self.sum_amounts(transactions, TransactionKind.INCOME)
        expenses = self.sum_amounts(transactions, TransactionKind.EXPENSE)
        balance = income - expenses

        return DashboardSummary(
            monthly_income=income,
            monthly_expenses=expenses,
            total_balance=balance,
            savings_rate=self.savings_rate(income, expenses),
        )

    def compute_expenses_by_category(
        self, owner_id: str, start_date: object, end_date: object
    ) -> list[CategoryAmount]:
        """Total expenses per category within an inclusive date range.

        Only categories with at least one expense appear. Results follow the
        declaration order of Category, so repeated calls on the same data
        return the same sequence.

        Raises:
            ValidationError: If either date is missing or malformed
        """
        if start_date is None or end_date is None:
            raise ValidationError("Start date and end date are required")
        start = coerce_date(start_date, "start date")
        end = coerce_date(end_date, "end date")

        transactions = self.db.list_transactions(
            owner_id,
            TransactionFilter(start_date=start, end_date=end, kind=TransactionKind.EXPENSE),
        )

        totals: dict[Category, Decimal] = defaultdict(lambda: ZERO)
        for txn in transactions:
            totals[txn.category] += txn.amount

        return [
            CategoryAmount(category=category, amount=totals[category])
            for category in Category
            if category in totals
        ]

    def compute_income_vs_expenses_series(
        self, owner_id: str, month_count: int = 6, today: Optional[date] = None
    ) -> list[MonthlyTotals]:
        """Monthly income and expense totals for the trailing months.

        Covers ``month_count`` calendar months ending with the current month.
        Only months with at least one transaction produce an entry; callers
        needing a gap-free series must fill empty months themselves.

        Raises:
            ValidationError: If month_count is not a positive integer
        """
        if isinstance(month_count, bool) or not isinstance(month_count, int) or month_count < 1:
            raise ValidationError(f"Month count must be a positive integer, got {month_count!r}")
        start, end = trailing_month_range(month_count, today)

        transactions = self.db.list_transactions(
            owner_id, TransactionFilter(start_date=start, end_date=end)
        )

        buckets: dict[str, dict[TransactionKind, Decimal]] = {}
        for txn in transactions:
            bucket = buckets.setdefault(
                month_key(txn.date),
                {TransactionKind.INCOME: ZERO, TransactionKind.EXPENSE: ZERO},
            )
            bucket[txn.kind] += txn.amount

        return [
            MonthlyTotals(
                month=month,
                income=buckets[month][TransactionKind.INCOME],
                expenses=buckets[month][TransactionKind.EXPENSE],
            )
            for month in sorted(buckets)
        ]

    def compute_cumulative_balance(self, owner_id: str, as_of: Optional[date] = None) -> Decimal:
        """All-time income minus expenses up to and including ``as_of``.

        This is separate from the dashboard's month-only total_balance.
        """
        as_of = date.today() if as_of is None else coerce_date(as_of, "as-of date")
        transactions = self.db.list_transactions(owner_id, TransactionFilter(end_date=as_of))
        return self.sum_amounts(transactions, TransactionKind.INCOME) - self.sum_amounts(
            transactions, TransactionKind.EXPENSE
        )

    @staticmethod
    def sum_amounts(transactions: Sequence[Transaction], kind: TransactionKind) -> Decimal:
        """Sum the amounts of transactions of one kind."""
        return sum((txn.amount for txn in transactions if txn.kind == kind), ZERO)

    @staticmethod
    def savings_rate(income: Decimal, expenses: Decimal) -> Decimal:
        """Percentage of income retained; 0 when there is no income."""
        if income <= 0:
            return ZERO
        return (income - expenses) / income * HUNDRED
