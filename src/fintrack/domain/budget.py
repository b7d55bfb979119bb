"""Budget domain service."""

import logging
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import Budget, BudgetPeriod, Category
from fintrack.domain.errors import NotFoundError, budget_not_found
from fintrack.domain.owner import default_currency_for
from fintrack.domain.validation import coerce_amount, coerce_currency, coerce_enum

logger = logging.getLogger(__name__)


class BudgetService:
    """Service for managing category budgets.

    Several budgets may exist for the same category; they are kept as
    independent limits and never merged.
    """

    def __init__(self, db: Database):
        """Initialize budget service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_budgets(self, owner_id: str) -> list[Budget]:
        """List an owner's budgets ordered by category."""
        return self.db.list_budgets(owner_id)

    def get_budget(self, owner_id: str, budget_id: int) -> Optional[Budget]:
        """Get budget by ID, or None if not found for this owner."""
        return self.db.get_budget(owner_id, budget_id)

    def create_budget(
        self,
        owner_id: str,
        category: Category | str,
        amount: object,
        period: BudgetPeriod | str = BudgetPeriod.MONTHLY,
        currency_code: Optional[str] = None,
    ) -> Budget:
        """Create a budget.

        Args:
            owner_id: Owner ID
            category: Budgeted category
            amount: Limit amount, not negative
            period: weekly, monthly or yearly
            currency_code: Optional currency; defaults to the owner's currency

        Returns:
            Stored budget

        Raises:
            ValidationError: If any field is malformed
        """
        category = coerce_enum(Category, category, "category")
        amount = coerce_amount(amount)
        period = coerce_enum(BudgetPeriod, period, "period")
        if currency_code is None:
            currency_code = default_currency_for(self.db, owner_id)
        currency_code = coerce_currency(currency_code)

        return self.db.create_budget(
            owner_id=owner_id,
            category=category,
            amount=amount,
            period=period,
            currency_code=currency_code,
        )

    def update_budget(
        self,
        owner_id: str,
        budget_id: int,
        category: Optional[Category | str] = None,
        amount: object = None,
        period: Optional[BudgetPeriod | str] = None,
        currency_code: Optional[str] = None,
    ) -> Budget:
        """Update budget fields.

        Raises:
            ValidationError: If a supplied field is malformed
            NotFoundError: If the budget doesn't exist for this owner
        """
        if category is not None:
            category = coerce_enum(Category, category, "category")
        if amount is not None:
            amount = coerce_amount(amount)
        if period is not None:
            period = coerce_enum(BudgetPeriod, period, "period")
        if currency_code is not None:
            currency_code = coerce_currency(currency_code)

        updated = self.db.update_budget(
            owner_id,
            budget_id,
            category=category,
            amount=amount,
            period=period,
            currency_code=currency_code,
        )
        if updated is None:
            logger.warning("Update of unknown budget %s by owner %s", budget_id, owner_id)
            raise NotFoundError(budget_not_found(budget_id))
        return updated

    def delete_budget(self, owner_id: str, budget_id: int) -> bool:
        """Delete a budget. Returns True if a row was removed."""
        return self.db.delete_budget(owner_id, budget_id)
