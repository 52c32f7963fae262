"""Store factory functions for creating store instances."""

import logging
import os
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Optional

from coinwallet.database.sqlalchemy_store import SQLAlchemyStore

logger = logging.getLogger(__name__)

SESSION_SCOPE_PREFIX = "session:"

# Session lists idle this long belong to sessions that ended without `session end`
SESSION_MAX_AGE = timedelta(days=1)


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Resolve the SQLite database path.

    Args:
        database_path: Path to SQLite database file. If None, checks COINWALLET_DB_PATH
            environment variable, then defaults to ~/.coinwallet/coinwallet.db
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("COINWALLET_DB_PATH")

    if database_path is None:
        # Default to ~/.coinwallet/coinwallet.db
        home = Path.home()
        db_dir = home / ".coinwallet"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "coinwallet.db")

    return database_path


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyStore:
    """Create the durable SQLite store holding the wallet data.

    Returns:
        SQLAlchemyStore instance configured for SQLite
    """
    database_url = f"sqlite:///{resolve_database_path(database_path)}"
    return SQLAlchemyStore(database_url)


def _process_start_time(pid: int, proc_root: Path = Path("/proc")) -> Optional[str]:
    """Start time of process pid in clock ticks, where /proc exposes it."""
    try:
        stat = (proc_root / str(pid) / "stat").read_text()
    except OSError:
        return None
    # The command name may hold spaces, so fields are counted after its ')'
    fields = stat.rsplit(")", 1)[-1].split()
    if len(fields) < 20:
        return None
    return fields[19]


def resolve_session_id(session_id: Optional[str] = None) -> str:
    """Resolve the current session id.

    Falls back to the COINWALLET_SESSION environment variable, then to the
    parent process, so one terminal session is one wallet session. The
    parent's start time is part of the id where available, so a reused
    pid does not pick up an earlier shell's session.
    """
    if session_id is None:
        session_id = os.environ.get("COINWALLET_SESSION")
    if session_id is None:
        ppid = os.getppid()
        started = _process_start_time(ppid)
        session_id = f"{ppid}-{started}" if started is not None else str(ppid)
    return f"{SESSION_SCOPE_PREFIX}{session_id}"


def create_session_store(
    database_path: Optional[str] = None, session_id: Optional[str] = None
) -> SQLAlchemyStore:
    """Create a store scoped to the current session.

    Session lists left behind by other sessions and untouched for
    SESSION_MAX_AGE are deleted.

    Returns:
        SQLAlchemyStore instance whose keys are only visible to this session
    """
    database_url = f"sqlite:///{resolve_database_path(database_path)}"
    store = SQLAlchemyStore(database_url, scope=resolve_session_id(session_id))
    removed = store.remove_stale_scopes(
        SESSION_SCOPE_PREFIX, datetime.now(UTC) - SESSION_MAX_AGE
    )
    if removed:
        logger.info("Removed %d stale session entries", removed)
    return store
