"""Persistence of the single wallet blob."""

import json
import logging
from typing import Callable, Optional

from coinwallet.database.base import Store
from coinwallet.domain.entities import AppData, Settings
from coinwallet.domain.errors import (
    NOT_INITIALIZED,
    InvalidAmountError,
    NotInitializedError,
    SchemaError,
    negative_amount,
)
from coinwallet.domain.schema import app_data_from_dict, app_data_to_dict

logger = logging.getLogger(__name__)

STORAGE_KEY = "coinwallet-data"


class WalletRepository:
    """Loads and saves the whole ``AppData`` blob.

    Every write replaces the complete blob, so readers never observe a
    partially applied change. Listeners registered with ``subscribe`` are
    called by ``notify`` after settings saves, undo and imports.
    """

    def __init__(self, store: Store):
        """Initialize wallet repository.

        Args:
            store: Durable store instance
        """
        self.store = store
        self._listeners: list[Callable[[], None]] = []

    def load(self) -> Optional[AppData]:
        """Load wallet data.

        Returns:
            AppData, or None when nothing (or nothing readable) is stored
        """
        text = self.store.get_item(STORAGE_KEY)
        if not text:
            return None
        try:
            return app_data_from_dict(json.loads(text))
        except (json.JSONDecodeError, SchemaError) as e:
            logger.error("Stored wallet data is unreadable, ignoring it: %s", e)
            return None

    def require(self) -> AppData:
        """Load wallet data.

        Raises:
            NotInitializedError: If the wallet has not been initialized
        """
        data = self.load()
        if data is None:
            raise NotInitializedError(NOT_INITIALIZED)
        return data

    def save(self, data: AppData) -> None:
        """Persist wallet data, replacing what was stored."""
        self.store.set_item(STORAGE_KEY, json.dumps(app_data_to_dict(data)))

    def initialize(self, initial_coin_amount: int) -> AppData:
        """Create and persist empty wallet data.

        Raises:
            InvalidAmountError: If initial_coin_amount is negative
        """
        data = initialize_data(initial_coin_amount)
        self.save(data)
        logger.info("Initialized wallet with %s coins", initial_coin_amount)
        return data

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Function that unregisters the listener
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def notify(self) -> None:
        """Signal that wallet data changed."""
        for listener in list(self._listeners):
            listener()


def initialize_data(initial_coin_amount: int) -> AppData:
    """Build empty wallet data with default settings.

    Raises:
        InvalidAmountError: If initial_coin_amount is negative
    """
    if initial_coin_amount < 0:
        raise InvalidAmountError(negative_amount(initial_coin_amount))
    return AppData(
        initial_coin_amount=initial_coin_amount,
        records=(),
        settings=Settings(primary_goal=0, daily_goal=0),
    )
