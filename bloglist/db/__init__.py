"""Database access."""

from bloglist.db.database import Database, engine_kwargs, get_database, get_session

__all__ = [
    "Database",
    "engine_kwargs",
    "get_database",
    "get_session",
]
