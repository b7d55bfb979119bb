"""Savings goal domain service."""

import logging
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import Goal
from fintrack.domain.errors import NotFoundError, ValidationError, goal_not_found
from fintrack.domain.owner import default_currency_for
from fintrack.domain.validation import (
    MAX_AMOUNT,
    coerce_amount,
    coerce_currency,
    coerce_optional_date,
    require_text,
)

logger = logging.getLogger(__name__)


class GoalService:
    """Service for managing savings goals.

    A goal's current amount is tracked independently of transactions and only
    moves through explicit updates or add_funds.
    """

    def __init__(self, db: Database):
        """Initialize goal service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_goals(self, owner_id: str) -> list[Goal]:
        """List an owner's goals, oldest first."""
        return self.db.list_goals(owner_id)

    def get_goal(self, owner_id: str, goal_id: int) -> Optional[Goal]:
        """Get goal by ID, or None if not found for this owner."""
        return self.db.get_goal(owner_id, goal_id)

    def create_goal(
        self,
        owner_id: str,
        name: str,
        target_amount: object,
        current_amount: object = Decimal("0"),
        description: Optional[str] = None,
        target_date: object = None,
        currency_code: Optional[str] = None,
    ) -> Goal:
        """Create a goal.

        Args:
            owner_id: Owner ID
            name: Goal name
            target_amount: Amount to save, greater than zero
            current_amount: Amount already saved, defaults to 0
            description: Optional description
            target_date: Optional date to reach the goal by
            currency_code: Optional currency; defaults to the owner's currency

        Returns:
            Stored goal

        Raises:
            ValidationError: If any field is malformed
        """
        name = require_text(name, "name")
        target_amount = coerce_amount(target_amount, "target amount", positive=True)
        current_amount = coerce_amount(current_amount, "current amount")
        target_date = coerce_optional_date(target_date, "target date")
        if currency_code is None:
            currency_code = default_currency_for(self.db, owner_id)
        currency_code = coerce_currency(currency_code)

        return self.db.create_goal(
            owner_id=owner_id,
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            description=description,
            target_date=target_date,
            currency_code=currency_code,
        )

    def update_goal(
        self,
        owner_id: str,
        goal_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        target_amount: object = None,
        current_amount: object = None,
        target_date: object = None,
        currency_code: Optional[str] = None,
        clear_description: bool = False,
        clear_target_date: bool = False,
    ) -> Goal:
        """Update goal fields.

        Args:
            clear_description: If True, remove the description (description must be None)
            clear_target_date: If True, remove the target date (target_date must be None)

        Raises:
            ValidationError: If a supplied field is malformed
            NotFoundError: If the goal doesn't exist for this owner
        """
        if clear_description and description is not None:
            raise ValidationError("Cannot set both description and clear_description")
        if clear_target_date and target_date is not None:
            raise ValidationError("Cannot set both target_date and clear_target_date")

        if name is not None:
            name = require_text(name, "name")
        if target_amount is not None:
            target_amount = coerce_amount(target_amount, "target amount", positive=True)
        if current_amount is not None:
            current_amount = coerce_amount(current_amount, "current amount")
        target_date = coerce_optional_date(target_date, "target date")
        if currency_code is not None:
            currency_code = coerce_currency(currency_code)

        updated = self.db.update_goal(
            owner_id,
            goal_id,
            name=name,
            description=description,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            currency_code=currency_code,
            clear_description=clear_description,
            clear_target_date=clear_target_date,
        )
        if updated is None:
            logger.warning("Update of unknown goal %s by owner %s", goal_id, owner_id)
            raise NotFoundError(goal_not_found(goal_id))
        return updated

    def add_funds(self, owner_id: str, goal_id: int, amount: object) -> Goal:
        """Add money to a goal's current amount.

        Args:
            owner_id: Owner ID
            goal_id: Goal ID
            amount: Amount to add, greater than zero

        Returns:
            Updated goal

        Raises:
            ValidationError: If the amount is malformed or not positive, or the
                new total would exceed the largest storable amount
            NotFoundError: If the goal doesn't exist for this owner
        """
        delta = coerce_amount(amount, positive=True)
        goal = self.db.get_goal(owner_id, goal_id)
        if goal is not None and goal.current_amount + delta >= MAX_AMOUNT:
            raise ValidationError(
                f"Current amount {goal.current_amount + delta} would be too large"
            )

        updated = self.db.add_goal_funds(owner_id, goal_id, delta)
        if updated is None:
            logger.warning("Funding of unknown goal %s by owner %s", goal_id, owner_id)
            raise NotFoundError(goal_not_found(goal_id))
        return updated

    def delete_goal(self, owner_id: str, goal_id: int) -> bool:
        """Delete a goal. Returns True if a row was removed."""
        return self.db.delete_goal(owner_id, goal_id)
