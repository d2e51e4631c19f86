"""Database layer for rewardit application."""

from rewardit.database.base import Database
from rewardit.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
