"""Shared pytest fixtures for coinwallet tests."""

import tempfile
import os
from datetime import date
import pytest

from coinwallet.database.factories import create_session_store, create_sqlite_store
from coinwallet.domain.entities import CoinRecord, Settings
from coinwallet.domain.ledger import LedgerService
from coinwallet.domain.repository import WalletRepository
from coinwallet.domain.undo import SessionUndoStack, UndoService


@pytest.fixture
def db_path():
    """Create a temporary database file path."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    yield path

    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def temp_store(db_path):
    """Create a durable store backed by a temporary database."""
    store = create_sqlite_store(database_path=db_path)
    store.connect()

    yield store

    store.disconnect()


@pytest.fixture
def session_store(db_path):
    """Create a session-scoped store for session 'test'."""
    store = create_session_store(database_path=db_path, session_id="test")
    store.connect()

    yield store

    store.disconnect()


@pytest.fixture
def repository(temp_store):
    """Create a WalletRepository with a temporary store."""
    return WalletRepository(temp_store)


@pytest.fixture
def undo_stack(session_store):
    """Create a SessionUndoStack for the test session."""
    return SessionUndoStack(session_store)


@pytest.fixture
def ledger_service(repository, undo_stack):
    """Create a LedgerService with a temporary store."""
    return LedgerService(repository, undo_stack)


@pytest.fixture
def undo_service(repository, undo_stack):
    """Create an UndoService with a temporary store."""
    return UndoService(repository, undo_stack)


@pytest.fixture
def wallet(repository):
    """Initialize a wallet with 1000 coins."""
    return repository.initialize(1000)


@pytest.fixture
def make_record():
    """Build CoinRecord instances with sensible defaults."""

    def _make(day, timestamp=0, coin_amount=0, record_id=None, **fields):
        if isinstance(day, str):
            day = date.fromisoformat(day)
        return CoinRecord(
            id=record_id or f"r-{day.isoformat()}-{timestamp}",
            date=day,
            timestamp=timestamp,
            coin_amount=coin_amount,
            **fields,
        )

    return _make


@pytest.fixture
def flat_goal_settings():
    """Settings with a primary goal of 500 every day."""
    return Settings(primary_goal=500, daily_goal=500)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
