"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import datetime, timedelta, UTC
import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.analytics import AnalyticsService
from fintrack.domain.budget import BudgetService
from fintrack.domain.goal import GoalService
from fintrack.domain.owner import OwnerService
from fintrack.domain.transaction import TransactionService

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"


class TickingClock:
    """Clock that moves forward one second on every call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    """Deterministic, strictly increasing clock."""
    return TickingClock(datetime(2024, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def temp_db(clock):
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.clock = clock
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def owner_id(temp_db):
    """Register the primary test owner and return its ID."""
    return temp_db.upsert_owner_profile(OWNER_ID, email="owner@example.com").id


@pytest.fixture
def other_owner_id(temp_db):
    """Register a second owner whose data must stay invisible to the first."""
    return temp_db.upsert_owner_profile(OTHER_OWNER_ID, default_currency="USD").id


@pytest.fixture
def owner_service(temp_db):
    """Create an OwnerService with a temporary database."""
    return OwnerService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def budget_service(temp_db):
    """Create a BudgetService with a temporary database."""
    return BudgetService(temp_db)


@pytest.fixture
def goal_service(temp_db):
    """Create a GoalService with a temporary database."""
    return GoalService(temp_db)


@pytest.fixture
def analytics_service(temp_db):
    """Create an AnalyticsService with a temporary database."""
    return AnalyticsService(temp_db)


@pytest.fixture
def add_txn(transaction_service, owner_id):
    """Return a helper that records a transaction for the primary owner."""

    def _add(kind, amount, txn_date, category="other", description=None, owner=None):
        return transaction_service.create_transaction(
            owner or owner_id,
            kind=kind,
            description=description or f"{kind} {amount}",
            amount=amount,
            date=txn_date,
            category=category,
        )

    return _add


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
