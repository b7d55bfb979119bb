"""Abstract database interface.

Every ledger operation is scoped to an owner id passed explicitly as the first
argument. Rows belonging to another owner behave exactly as if they did not
exist: reads return None, updates return None and deletes return False.
"""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import (
    Owner,
    Transaction,
    TransactionFilter,
    TransactionKind,
    Budget,
    BudgetPeriod,
    Category,
    Goal,
)


class Database(ABC):
    """Abstract ledger store for fintrack."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Owner operations
    @abstractmethod
    def upsert_owner_profile(
        self,
        owner_id: str,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_image_url: Optional[str] = None,
        default_currency: Optional[str] = None,
    ) -> Owner:
        """Insert an owner profile or overwrite the supplied mutable fields."""
        pass

    @abstractmethod
    def get_owner(self, owner_id: str) -> Optional[Owner]:
        """Get owner profile by ID."""
        pass

    # Transaction operations
    @abstractmethod
    def list_transactions(
        self, owner_id: str, filters: Optional[TransactionFilter] = None
    ) -> list[Transaction]:
        """List transactions, newest date first, ties in insertion order."""
        pass

    @abstractmethod
    def get_transaction(self, owner_id: str, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def create_transaction(
        self,
        owner_id: str,
        kind: TransactionKind,
        description: str,
        amount: Decimal,
        category: Category,
        date: date,
        currency_code: str,
    ) -> Transaction:
        """Create a transaction. Returns the stored entity."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        owner_id: str,
        transaction_id: int,
        kind: Optional[TransactionKind] = None,
        description: Optional[str] = None,
        amount: Optional[Decimal] = None,
        category: Optional[Category] = None,
        date: Optional[date] = None,
        currency_code: Optional[str] = None,
    ) -> Optional[Transaction]:
        """Update the supplied transaction fields. Returns None if not found."""
        pass

    @abstractmethod
    def delete_transaction(self, owner_id: str, transaction_id: int) -> bool:
        """Delete a transaction. Returns True if a row was removed."""
        pass

    # Budget operations
    @abstractmethod
    def list_budgets(self, owner_id: str) -> list[Budget]:
        """List budgets ordered by category."""
        pass

    @abstractmethod
    def get_budget(self, owner_id: str, budget_id: int) -> Optional[Budget]:
        """Get budget by ID."""
        pass

    @abstractmethod
    def create_budget(
        self,
        owner_id: str,
        category: Category,
        amount: Decimal,
        period: BudgetPeriod,
        currency_code: str,
    ) -> Budget:
        """Create a budget. Returns the stored entity."""
        pass

    @abstractmethod
    def update_budget(
        self,
        owner_id: str,
        budget_id: int,
        category: Optional[Category] = None,
        amount: Optional[Decimal] = None,
        period: Optional[BudgetPeriod] = None,
        currency_code: Optional[str] = None,
    ) -> Optional[Budget]:
        """Update the supplied budget fields. Returns None if not found."""
        pass

    @abstractmethod
    def delete_budget(self, owner_id: str, budget_id: int) -> bool:
        """Delete a budget. Returns True if a row was removed."""
        pass

    # Goal operations
    @abstractmethod
    def list_goals(self, owner_id: str) -> list[Goal]:
        """List goals ordered by creation time."""
        pass

    @abstractmethod
    def get_goal(self, owner_id: str, goal_id: int) -> Optional[Goal]:
        """Get goal by ID."""
        pass

    @abstractmethod
    def create_goal(
        self,
        owner_id: str,
        name: str,
        target_amount: Decimal,
        currency_code: str,
        current_amount: Decimal = Decimal("0"),
        description: Optional[str] = None,
        target_date: Optional[date] = None,
    ) -> Goal:
        """Create a goal. Returns the stored entity."""
        pass

    @abstractmethod
    def update_goal(
        self,
        owner_id: str,
        goal_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        target_amount: Optional[Decimal] = None,
        current_amount: Optional[Decimal] = None,
        target_date: Optional[date] = None,
        currency_code: Optional[str] = None,
        clear_description: bool = False,
        clear_target_date: bool = False,
    ) -> Optional[Goal]:
        """Update the supplied goal fields. Returns None if not found."""
        pass

    @abstractmethod
    def add_goal_funds(self, owner_id: str, goal_id: int, delta: Decimal) -> Optional[Goal]:
        """Add ``delta`` to a goal's current amount. Returns None if not found."""
        pass

    @abstractmethod
    def delete_goal(self, owner_id: str, goal_id: int) -> bool:
        """Delete a goal. Returns True if a row was removed."""
        pass
