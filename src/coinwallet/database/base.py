"""Abstract key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Store(ABC):
    """Abstract string key-value store.

    One store instance is bound to a single scope: the durable wallet scope
    or one session's scope.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the backing storage."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the backing storage."""
        pass

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every key in this store's scope."""
        pass
