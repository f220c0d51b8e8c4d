"""SQLite database layer: connection management and repository implementations."""

from shared.db.connection import Database
from shared.db.result_repository import SqliteResultRepository

__all__ = [
    "Database",
    "SqliteResultRepository",
]
