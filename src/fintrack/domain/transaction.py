"""Transaction domain service."""

import logging
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import (
    Category,
    Transaction,
    TransactionFilter,
    TransactionKind,
)
from fintrack.domain.errors import NotFoundError, transaction_not_found
from fintrack.domain.owner import default_currency_for
from fintrack.domain.validation import (
    coerce_amount,
    coerce_currency,
    coerce_date,
    coerce_enum,
    coerce_optional_date,
    require_text,
)

logger = logging.getLogger(__name__)


def build_filter(
    start_date: object = None,
    end_date: object = None,
    category: object = None,
    kind: object = None,
) -> TransactionFilter:
    """Build a TransactionFilter from loosely typed values.

    Dates may be date objects or date strings; category and kind may be enum
    members or their string values. None leaves a field unconstrained.

    Raises:
        ValidationError: If any supplied value is malformed
    """
    return TransactionFilter(
        start_date=coerce_optional_date(start_date, "start date"),
        end_date=coerce_optional_date(end_date, "end date"),
        category=None if category is None else coerce_enum(Category, category, "category"),
        kind=None if kind is None else coerce_enum(TransactionKind, kind, "kind"),
    )


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_transactions(
        self, owner_id: str, filters: Optional[TransactionFilter] = None
    ) -> list[Transaction]:
        """List an owner's transactions.

        Args:
            owner_id: Owner ID
            filters: Optional filter; every supplied field narrows the result

        Returns:
            Transactions ordered by date descending, ties in insertion order.
            Empty when nothing matches.
        """
        if filters is not None:
            filters = build_filter(
                start_date=filters.start_date,
                end_date=filters.end_date,
                category=filters.category,
                kind=filters.kind,
            )
        return self.db.list_transactions(owner_id, filters)

    def get_transaction(self, owner_id: str, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Returns:
            Transaction entity or None if not found for this owner
        """
        return self.db.get_transaction(owner_id, transaction_id)

    def create_transaction(
        self,
        owner_id: str,
        kind: TransactionKind | str,
        description: str,
        amount: object,
        date: object,
        category: Category | str = Category.OTHER,
        currency_code: Optional[str] = None,
    ) -> Transaction:
        """Create a transaction.

        Args:
            owner_id: Owner ID
            kind: income or expense
            description: Free-text description
            amount: Unsigned amount (Decimal, int or amount string)
            date: Transaction date (date or date string)
            category: Category, defaults to other
            currency_code: Optional currency; defaults to the owner's currency

        Returns:
            Stored transaction with its generated id and timestamps

        Raises:
            ValidationError: If any field is malformed
        """
        kind = coerce_enum(TransactionKind, kind, "kind")
        category = coerce_enum(Category, category, "category")
        description = require_text(description, "description")
        amount = coerce_amount(amount)
        txn_date = coerce_date(date)
        if currency_code is None:
            currency_code = default_currency_for(self.db, owner_id)
        currency_code = coerce_currency(currency_code)

        return self.db.create_transaction(
            owner_id=owner_id,
            kind=kind,
            description=description,
            amount=amount,
            category=category,
            date=txn_date,
            currency_code=currency_code,
        )

    def update_transaction(
        self,
        owner_id: str,
        transaction_id: int,
        kind: Optional[TransactionKind | str] = None,
        description: Optional[str] = None,
        amount: object = None,
        category: Optional[Category | str] = None,
        date: object = None,
        currency_code: Optional[str] = None,
    ) -> Transaction:
        """Update transaction fields.

        Only the supplied (non-None) fields change. All of them are validated
        before anything is written.

        Returns:
            Updated transaction

        Raises:
            ValidationError: If a supplied field is malformed
            NotFoundError: If the transaction doesn't exist for this owner
        """
        if kind is not None:
            kind = coerce_enum(TransactionKind, kind, "kind")
        if description is not None:
            description = require_text(description, "description")
        if amount is not None:
            amount = coerce_amount(amount)
        if category is not None:
            category = coerce_enum(Category, category, "category")
        if date is not None:
            date = coerce_date(date)
        if currency_code is not None:
            currency_code = coerce_currency(currency_code)

        updated = self.db.update_transaction(
            owner_id,
            transaction_id,
            kind=kind,
            description=description,
            amount=amount,
            category=category,
            date=date,
            currency_code=currency_code,
        )
        if updated is None:
            logger.warning("Update of unknown transaction %s by owner %s", transaction_id, owner_id)
            raise NotFoundError(transaction_not_found(transaction_id))
        return updated

    def delete_transaction(self, owner_id: str, transaction_id: int) -> bool:
        """Delete a transaction.

        Returns:
            True if a row was removed, False if it didn't exist for this owner
        """
        return self.db.delete_transaction(owner_id, transaction_id)
