"""Key-value storage abstraction - plugin interface for durable persistence."""

from abc import ABC, abstractmethod
from typing import Optional


class StorageLoadError(Exception):
    """Raised when persisted data exists but cannot be read."""


class StorageWriteError(Exception):
    """Raised when a value cannot be durably written."""


class KeyValueStorage(ABC):
    """
    Abstract interface for process-external key-value persistence.

    Implementations (JsonFileStorage, SqliteStorage, InMemoryStorage) handle
    storage details. Values are opaque strings; callers own serialization.
    """

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """
        Retrieve the value stored under key.

        Returns:
            The stored string, or None if the key has never been written.

        Raises:
            StorageLoadError: if the backing store exists but is unreadable.
        """
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """
        Store value under key, replacing any previous value.

        Raises:
            StorageWriteError: if the value could not be persisted.
        """
        pass
