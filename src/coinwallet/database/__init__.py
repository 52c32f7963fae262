"""Storage layer for coinwallet application."""

from coinwallet.database.base import Store
from coinwallet.database.factories import create_session_store, create_sqlite_store

__all__ = ["Store", "create_session_store", "create_sqlite_store"]
