"""Owner profile domain service."""

import os
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import DEFAULT_CURRENCY, Owner
from fintrack.domain.errors import ValidationError
from fintrack.domain.validation import coerce_currency


def default_currency_for(db: Database, owner_id: str) -> str:
    """Resolve the currency used for new rows when none is given.

    Uses the owner's profile, then FINTRACK_DEFAULT_CURRENCY, then INR.
    """
    owner = db.get_owner(owner_id)
    if owner is not None and owner.default_currency:
        return owner.default_currency
    return coerce_currency(os.environ.get("FINTRACK_DEFAULT_CURRENCY", DEFAULT_CURRENCY))


class OwnerService:
    """Service for managing owner profiles."""

    def __init__(self, db: Database):
        """Initialize owner service.

        Args:
            db: Database instance
        """
        self.db = db

    def upsert_owner_profile(
        self,
        owner_id: str,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_image_url: Optional[str] = None,
        default_currency: Optional[str] = None,
    ) -> Owner:
        """Insert a profile or overwrite the supplied fields of an existing one.

        Args:
            owner_id: Stable owner identifier
            email: Optional email address
            first_name: Optional first name
            last_name: Optional last name
            profile_image_url: Optional avatar URL
            default_currency: Optional three-letter currency code

        Returns:
            Stored owner profile

        Raises:
            ValidationError: If owner_id is missing or the currency is malformed
        """
        if not isinstance(owner_id, str) or not owner_id.strip():
            raise ValidationError("Owner id is required")
        if default_currency is not None:
            default_currency = coerce_currency(default_currency)

        return self.db.upsert_owner_profile(
            owner_id=owner_id.strip(),
            email=email,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
            default_currency=default_currency,
        )

    def get_owner(self, owner_id: str) -> Optional[Owner]:
        """Get owner profile by ID."""
        return self.db.get_owner(owner_id)
