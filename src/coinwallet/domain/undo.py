"""Session-bounded undo.

Only records created in the current session can be undone. Records from
earlier sessions are historical facts, so undo is keyed by the ids this
session pushed rather than by "the most recent record in the ledger".
"""

import json
import logging
from typing import Optional

from coinwallet.database.base import Store
from coinwallet.domain.entities import AppData
from coinwallet.domain.errors import (
    NO_SESSION_UNDO,
    NoSessionUndoError,
    RecordNotFoundError,
    record_not_found,
)
from coinwallet.domain.repository import WalletRepository

logger = logging.getLogger(__name__)

SESSION_UNDO_KEY = "coinwallet-session-undo"


class SessionUndoStack:
    """LIFO of record ids created in the current session."""

    def __init__(self, store: Store):
        """Initialize undo stack.

        Args:
            store: Session-scoped store, cleared when the session ends
        """
        self.store = store

    def _read(self) -> list[str]:
        text = self.store.get_item(SESSION_UNDO_KEY)
        if not text:
            return []
        try:
            ids = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable session undo list")
            return []
        if not isinstance(ids, list):
            return []
        return [i for i in ids if isinstance(i, str)]

    def _write(self, ids: list[str]) -> None:
        self.store.set_item(SESSION_UNDO_KEY, json.dumps(ids))

    def push(self, record_id: str) -> None:
        ids = self._read()
        ids.append(record_id)
        self._write(ids)

    def pop(self) -> Optional[str]:
        ids = self._read()
        if not ids:
            return None
        record_id = ids.pop()
        self._write(ids)
        return record_id

    def has_undo(self) -> bool:
        return bool(self._read())

    def clear(self) -> None:
        """End the session: nothing added so far can be undone anymore."""
        self.store.clear()


def remove_record(data: AppData, record_id: str) -> AppData:
    """Return ``data`` without the record ``record_id``.

    Raises:
        RecordNotFoundError: If no record has that id
    """
    remaining = tuple(r for r in data.records if r.id != record_id)
    if len(remaining) == len(data.records):
        raise RecordNotFoundError(record_not_found(record_id))
    return AppData(
        initial_coin_amount=data.initial_coin_amount,
        records=remaining,
        settings=data.settings,
    )


class UndoService:
    """Service for undoing records added in the current session."""

    def __init__(self, repository: WalletRepository, undo_stack: SessionUndoStack):
        """Initialize undo service.

        Args:
            repository: Wallet repository
            undo_stack: Current session's undo stack
        """
        self.repository = repository
        self.undo_stack = undo_stack

    def has_undo(self) -> bool:
        return self.undo_stack.has_undo()

    def undo_last_session_record(self, data: AppData) -> AppData:
        """Remove the last record added in this session.

        Args:
            data: Current wallet data

        Returns:
            Wallet data without the undone record

        Raises:
            NoSessionUndoError: If nothing was added in this session
            RecordNotFoundError: If the popped id is no longer in the ledger
        """
        record_id = self.undo_stack.pop()
        if record_id is None:
            raise NoSessionUndoError(NO_SESSION_UNDO)

        new_data = remove_record(data, record_id)
        self.repository.save(new_data)
        logger.info("Undid record %s", record_id)
        self.repository.notify()
        return new_data
