"""Tests for savings goal domain service."""

from datetime import date
from decimal import Decimal

import pytest

from fintrack.domain.errors import NotFoundError, ValidationError


def test_create_goal_defaults(goal_service, owner_id):
    goal = goal_service.create_goal(owner_id, name="Vacation", target_amount="2000")

    assert goal.name == "Vacation"
    assert goal.target_amount == Decimal("2000.00")
    assert goal.current_amount == Decimal("0.00")
    assert goal.description is None
    assert goal.target_date is None


def test_create_goal_with_all_fields(goal_service, owner_id):
    goal = goal_service.create_goal(
        owner_id,
        name="Laptop",
        target_amount=Decimal("1500.00"),
        current_amount="200",
        description="New work laptop",
        target_date="2024-12-31",
        currency_code="usd",
    )

    assert goal.current_amount == Decimal("200.00")
    assert goal.description == "New work laptop"
    assert goal.target_date == date(2024, 12, 31)
    assert goal.currency_code == "USD"


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "Car", "target_amount": "0"},
        {"name": "Car", "target_amount": "-100"},
        {"name": "Car", "target_amount": "100", "current_amount": "-1"},
        {"name": "", "target_amount": "100"},
        {"name": "Car", "target_amount": "100", "target_date": "someday"},
    ],
)
def test_create_goal_rejects_malformed_input(goal_service, owner_id, fields):
    with pytest.raises(ValidationError):
        goal_service.create_goal(owner_id, **fields)


def test_list_goals_oldest_first(goal_service, owner_id):
    first = goal_service.create_goal(owner_id, name="First", target_amount="100")
    second = goal_service.create_goal(owner_id, name="Second", target_amount="100")
    third = goal_service.create_goal(owner_id, name="Third", target_amount="100")

    assert [g.id for g in goal_service.list_goals(owner_id)] == [first.id, second.id, third.id]


def test_add_funds_accumulates(goal_service, owner_id):
    goal = goal_service.create_goal(owner_id, name="Bike", target_amount="800", current_amount="100")

    goal_service.add_funds(owner_id, goal.id, "50.25")
    funded = goal_service.add_funds(owner_id, goal.id, Decimal("49.75"))

    assert funded.current_amount == Decimal("200.00")
    assert funded.target_amount == Decimal("800.00")
    assert funded.updated_at > goal.updated_at


@pytest.mark.parametrize("amount", ["0", "-10", "ten"])
def test_add_funds_rejects_non_positive_amounts(goal_service, owner_id, amount):
    goal = goal_service.create_goal(owner_id, name="Bike", target_amount="800")

    with pytest.raises(ValidationError):
        goal_service.add_funds(owner_id, goal.id, amount)

    assert goal_service.get_goal(owner_id, goal.id).current_amount == Decimal("0.00")


def test_add_funds_to_foreign_goal_is_not_found(goal_service, owner_id, other_owner_id):
    goal = goal_service.create_goal(owner_id, name="Bike", target_amount="800")

    with pytest.raises(NotFoundError):
        goal_service.add_funds(other_owner_id, goal.id, "10")


def test_goal_is_independent_of_transactions(goal_service, add_txn, owner_id):
    goal = goal_service.create_goal(owner_id, name="Rainy day", target_amount="500")
    add_txn("income", "1000.00", date(2024, 1, 1))

    assert goal_service.get_goal(owner_id, goal.id).current_amount == Decimal("0.00")


def test_update_goal_partial(goal_service, owner_id):
    goal = goal_service.create_goal(
        owner_id, name="Trip", target_amount="1000", description="Summer", target_date="2024-07-01"
    )

    updated = goal_service.update_goal(owner_id, goal.id, target_amount="1200")

    assert updated.target_amount == Decimal("1200.00")
    assert updated.name == "Trip"
    assert updated.description == "Summer"
    assert updated.target_date == date(2024, 7, 1)


def test_update_goal_clears_optional_fields(goal_service, owner_id):
    goal = goal_service.create_goal(
        owner_id, name="Trip", target_amount="1000", description="Summer", target_date="2024-07-01"
    )

    updated = goal_service.update_goal(
        owner_id, goal.id, clear_description=True, clear_target_date=True
    )

    assert updated.description is None
    assert updated.target_date is None


def test_update_goal_rejects_conflicting_clear(goal_service, owner_id):
    goal = goal_service.create_goal(owner_id, name="Trip", target_amount="1000")

    with pytest.raises(ValidationError):
        goal_service.update_goal(owner_id, goal.id, description="x", clear_description=True)


def test_update_missing_goal(goal_service, owner_id):
    with pytest.raises(NotFoundError, match="Goal 42 not found"):
        goal_service.update_goal(owner_id, 42, name="Nope")


def test_delete_goal(goal_service, owner_id, other_owner_id):
    goal = goal_service.create_goal(owner_id, name="Trip", target_amount="1000")

    assert goal_service.delete_goal(other_owner_id, goal.id) is False
    assert goal_service.delete_goal(owner_id, goal.id) is True
    assert goal_service.list_goals(owner_id) == []


def test_add_funds_rejects_total_beyond_storable_limit(goal_service, owner_id):
    goal = goal_service.create_goal(
        owner_id, name="Moonshot", target_amount="9999999999.99", current_amount="9999999999.99"
    )

    with pytest.raises(ValidationError, match="too large"):
        goal_service.add_funds(owner_id, goal.id, "0.01")

    assert goal_service.get_goal(owner_id, goal.id).current_amount == Decimal("9999999999.99")
