"""Database layer for fintrack application."""

from fintrack.database.base import Database
from fintrack.database.factories import (
    create_database,
    create_default_database,
    create_sqlite_database,
)

__all__ = ["Database", "create_database", "create_default_database", "create_sqlite_database"]
