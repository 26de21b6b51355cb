"""IO layer - durable key-value storage backends."""

from .in_memory_storage import InMemoryStorage
from .json_file_storage import JsonFileStorage
from .key_value_storage import KeyValueStorage, StorageLoadError, StorageWriteError
from .sqlite_storage import SqliteStorage

__all__ = [
    "KeyValueStorage",
    "StorageLoadError",
    "StorageWriteError",
    "InMemoryStorage",
    "JsonFileStorage",
    "SqliteStorage",
]
