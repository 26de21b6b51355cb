"""Vocabulary Store - ordered, deduplicated list of saved analyses."""

import json
import uuid
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from context_lingo.core import AnalysisResult, VocabularyItem
from context_lingo.io import KeyValueStorage, StorageLoadError
from context_lingo.log import get_logger

logger = get_logger(__name__)


def is_saved(items: Iterable[VocabularyItem], word: str, sentence: str) -> bool:
    """Return True if an item with the (word, sentence) dedup key exists."""
    return any(item.dedup_key == (word, sentence) for item in items)


def _new_id() -> str:
    return uuid.uuid4().hex


class VocabularyStore:
    """Application service owning the user's saved vocabulary.

    Items are kept newest-first. The in-memory list is the source of truth for
    the session; every mutation is written through to storage in full before
    returning.
    """

    STORAGE_KEY = "vocabulary"

    def __init__(
        self,
        storage: KeyValueStorage,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._storage = storage
        self._id_factory = id_factory
        self._clock = clock
        self._items: List[VocabularyItem] = self._load()

    @property
    def items(self) -> Tuple[VocabularyItem, ...]:
        """Snapshot of saved items, newest first."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[VocabularyItem]:
        return iter(self.items)

    def get(self, item_id: str) -> Optional[VocabularyItem]:
        return next((item for item in self._items if item.id == item_id), None)

    def is_saved(self, word: str, sentence: str) -> bool:
        return is_saved(self._items, word, sentence)

    def save(self, word: str, analysis: AnalysisResult) -> Optional[VocabularyItem]:
        """Save an analysis for a word.

        Returns:
            The new VocabularyItem, or None if an item with the same word and
            sentence is already saved.

        Raises:
            StorageWriteError: if persisting fails (the store is left unchanged).
        """
        if self.is_saved(word, analysis.sentence):
            return None

        item = VocabularyItem(
            id=self._unique_id(),
            word=word,
            analysis=analysis,
            created_at=self._clock(),
        )
        self._commit([item] + self._items)
        logger.info("Saved '%s' to vocabulary (%d items)", word, len(self._items))
        return item

    def delete(self, item_id: str) -> None:
        """Remove an item by id. Unknown ids are ignored.

        Raises:
            StorageWriteError: if persisting fails (the store is left unchanged).
        """
        remaining = [item for item in self._items if item.id != item_id]
        if len(remaining) == len(self._items):
            return
        self._commit(remaining)
        logger.info("Deleted vocabulary item %s (%d items)", item_id, len(self._items))

    def _commit(self, items: List[VocabularyItem]) -> None:
        payload = json.dumps([item.to_dict() for item in items], ensure_ascii=False)
        self._storage.write(self.STORAGE_KEY, payload)
        self._items = items

    def _unique_id(self) -> str:
        existing = {item.id for item in self._items}
        item_id = self._id_factory()
        while item_id in existing:
            item_id = self._id_factory()
        return item_id

    def _load(self) -> List[VocabularyItem]:
        try:
            raw = self._storage.read(self.STORAGE_KEY)
        except StorageLoadError as e:
            logger.warning("Could not load vocabulary, starting empty: %s", e)
            return []

        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("vocabulary payload is not a list")
            items = [VocabularyItem.from_dict(entry) for entry in data]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Stored vocabulary is malformed, starting empty: %s", e)
            return []

        logger.info("Loaded %d vocabulary item(s)", len(items))
        return items
