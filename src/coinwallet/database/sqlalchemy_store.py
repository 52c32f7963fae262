"""Generic SQLAlchemy key-value store implementation."""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session

from coinwallet.database.base import Store
from coinwallet.database.models import (
    LOCAL_SCOPE,
    StorageItem,
    create_session_factory,
)


class SQLAlchemyStore(Store):
    """SQLAlchemy-based implementation of the Store interface."""

    def __init__(self, database_url: str, scope: str = LOCAL_SCOPE):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
            scope: Scope all keys of this store live in
        """
        self.database_url = database_url
        self.scope = scope
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _get_row(self, key: str) -> Optional[StorageItem]:
        session = self._get_session()
        return (
            session.query(StorageItem)
            .filter(StorageItem.scope == self.scope, StorageItem.key == key)
            .first()
        )

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None."""
        row = self._get_row(key)
        if row is None:
            return None
        return row.value

    def set_item(self, key: str, value: str) -> None:
        """Store value under key in a single commit."""
        session = self._get_session()
        row = self._get_row(key)
        if row is None:
            session.add(StorageItem(scope=self.scope, key=key, value=value))
        else:
            row.value = value
        session.commit()

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        session = self._get_session()
        row = self._get_row(key)
        if row is not None:
            session.delete(row)
            session.commit()

    def clear(self) -> None:
        """Remove every key in this store's scope."""
        session = self._get_session()
        session.query(StorageItem).filter(StorageItem.scope == self.scope).delete()
        session.commit()

    def remove_stale_scopes(self, prefix: str, before: datetime) -> int:
        """Delete entries of other scopes under prefix last updated before a cutoff.

        Returns:
            Number of entries deleted
        """
        session = self._get_session()
        removed = (
            session.query(StorageItem)
            .filter(
                StorageItem.scope.startswith(prefix, autoescape=True),
                StorageItem.scope != self.scope,
                StorageItem.updated_at < before,
            )
            .delete(synchronize_session=False)
        )
        session.commit()
        return removed
