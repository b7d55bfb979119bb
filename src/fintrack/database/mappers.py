"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay
stable when the table layout changes.
"""

from decimal import Decimal

from fintrack.domain import entities as domain
from fintrack.database.models import (
    Owner as ORMOwner,
    Transaction as ORMTransaction,
    Budget as ORMBudget,
    Goal as ORMGoal,
)


def owner_to_domain(orm_owner: ORMOwner) -> domain.Owner:
    """Convert SQLAlchemy Owner model to domain Owner entity."""
    return domain.Owner(
        id=orm_owner.id,
        email=orm_owner.email,
        first_name=orm_owner.first_name,
        last_name=orm_owner.last_name,
        profile_image_url=orm_owner.profile_image_url,
        default_currency=orm_owner.default_currency,
        created_at=orm_owner.created_at,
        updated_at=orm_owner.updated_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        owner_id=orm_transaction.owner_id,
        kind=domain.TransactionKind(orm_transaction.kind),
        description=orm_transaction.description,
        amount=Decimal(orm_transaction.amount),
        category=domain.Category(orm_transaction.category),
        date=orm_transaction.date,
        currency_code=orm_transaction.currency_code,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )


def budget_to_domain(orm_budget: ORMBudget) -> domain.Budget:
    """Convert SQLAlchemy Budget model to domain Budget entity."""
    return domain.Budget(
        id=orm_budget.id,
        owner_id=orm_budget.owner_id,
        category=domain.Category(orm_budget.category),
        amount=Decimal(orm_budget.amount),
        period=domain.BudgetPeriod(orm_budget.period),
        currency_code=orm_budget.currency_code,
        created_at=orm_budget.created_at,
        updated_at=orm_budget.updated_at,
    )


def goal_to_domain(orm_goal: ORMGoal) -> domain.Goal:
    """Convert SQLAlchemy Goal model to domain Goal entity."""
    return domain.Goal(
        id=orm_goal.id,
        owner_id=orm_goal.owner_id,
        name=orm_goal.name,
        description=orm_goal.description,
        target_amount=Decimal(orm_goal.target_amount),
        current_amount=Decimal(orm_goal.current_amount),
        target_date=orm_goal.target_date,
        currency_code=orm_goal.currency_code,
        created_at=orm_goal.created_at,
        updated_at=orm_goal.updated_at,
    )
