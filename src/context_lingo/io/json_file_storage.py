"""File-based key-value storage persisted as a single JSON document."""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from context_lingo.log import get_logger

from .key_value_storage import KeyValueStorage, StorageLoadError, StorageWriteError

logger = get_logger(__name__)


class JsonFileStorage(KeyValueStorage):
    """
    Stores all keys in one JSON file.

    Format:
    {
        "version": 1,
        "values": {
            "vocabulary": "<serialized value>"
        }
    }

    Writes go to a sibling temporary file that then replaces the original, so
    a crash mid-write never leaves a truncated document behind.
    """

    STORAGE_VERSION = 1

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self, key: str) -> Optional[str]:
        if not self.path.exists():
            return None
        return self._load_values().get(key)

    def write(self, key: str, value: str) -> None:
        try:
            values = self._load_values() if self.path.exists() else {}
        except StorageLoadError:
            logger.warning("Overwriting unreadable storage file %s", self.path)
            values = {}
        values[key] = value

        data = {"version": self.STORAGE_VERSION, "values": values}
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageWriteError(f"Could not write {self.path}: {e}") from e

    def _load_values(self) -> Dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageLoadError(f"Could not read {self.path}: {e}") from e

        values = data.get("values") if isinstance(data, dict) else None
        if not isinstance(values, dict):
            raise StorageLoadError(f"Unexpected storage format in {self.path}")
        return values
