"""Tests for budget domain service."""

from decimal import Decimal

import pytest

from fintrack.domain.entities import BudgetPeriod, Category
from fintrack.domain.errors import NotFoundError, ValidationError


def test_create_budget_defaults_to_monthly(budget_service, owner_id):
    budget = budget_service.create_budget(owner_id, category="food", amount="400")

    assert budget.category is Category.FOOD
    assert budget.amount == Decimal("400.00")
    assert budget.period is BudgetPeriod.MONTHLY
    assert budget.currency_code == "INR"


@pytest.mark.parametrize(
    "category, amount, period",
    [
        ("pets", "100", "monthly"),
        ("food", "-1", "monthly"),
        ("food", "100", "daily"),
    ],
)
def test_create_budget_rejects_malformed_input(budget_service, owner_id, category, amount, period):
    with pytest.raises(ValidationError):
        budget_service.create_budget(owner_id, category=category, amount=amount, period=period)

    assert budget_service.list_budgets(owner_id) == []


def test_list_budgets_ordered_by_category(budget_service, owner_id):
    budget_service.create_budget(owner_id, category="utilities", amount="100")
    budget_service.create_budget(owner_id, category="entertainment", amount="50")
    budget_service.create_budget(owner_id, category="food", amount="300")

    categories = [b.category.value for b in budget_service.list_budgets(owner_id)]

    assert categories == ["entertainment", "food", "utilities"]


def test_duplicate_category_budgets_are_kept_separate(budget_service, owner_id):
    weekly = budget_service.create_budget(owner_id, category="food", amount="80", period="weekly")
    monthly = budget_service.create_budget(owner_id, category="food", amount="300")

    budgets = budget_service.list_budgets(owner_id)

    assert [b.id for b in budgets] == [weekly.id, monthly.id]
    assert [b.amount for b in budgets] == [Decimal("80.00"), Decimal("300.00")]


def test_update_period_alone_keeps_other_fields(budget_service, owner_id):
    budget = budget_service.create_budget(owner_id, category="shopping", amount="250.00")

    updated = budget_service.update_budget(owner_id, budget.id, period="yearly")

    assert updated.period is BudgetPeriod.YEARLY
    assert updated.amount == budget.amount
    assert updated.category == budget.category
    assert updated.updated_at > budget.updated_at
    assert updated.created_at == budget.created_at


def test_update_budget_not_found_for_other_owner(budget_service, owner_id, other_owner_id):
    budget = budget_service.create_budget(owner_id, category="food", amount="300")

    with pytest.raises(NotFoundError, match=f"Budget {budget.id} not found"):
        budget_service.update_budget(other_owner_id, budget.id, amount="1")

    assert budget_service.get_budget(owner_id, budget.id).amount == Decimal("300.00")


def test_update_budget_rejects_bad_amount(budget_service, owner_id):
    budget = budget_service.create_budget(owner_id, category="food", amount="300")

    with pytest.raises(ValidationError):
        budget_service.update_budget(owner_id, budget.id, amount="lots")


def test_delete_budget(budget_service, owner_id, other_owner_id):
    budget = budget_service.create_budget(owner_id, category="food", amount="300")

    assert budget_service.delete_budget(other_owner_id, budget.id) is False
    assert budget_service.delete_budget(owner_id, budget.id) is True
    assert budget_service.delete_budget(owner_id, budget.id) is False
    assert budget_service.list_budgets(owner_id) == []
