"""Unit tests for VocabularyStore."""

import json
from datetime import datetime

import pytest

from conftest import make_analysis
from context_lingo.io import InMemoryStorage, JsonFileStorage, KeyValueStorage, StorageLoadError, StorageWriteError
from context_lingo.services import VocabularyStore, is_saved


class FailingWriteStorage(InMemoryStorage):
    def write(self, key, value):
        raise StorageWriteError("disk full")


class UnreadableStorage(KeyValueStorage):
    def read(self, key):
        raise StorageLoadError("corrupt")

    def write(self, key, value):
        pass


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    return VocabularyStore(storage)


class TestSave:
    """Tests for saving analyses."""

    def test_save_creates_item(self, store, sample_analysis):
        item = store.save("got", sample_analysis)

        assert item is not None
        assert item.word == "got"
        assert item.analysis == sample_analysis
        assert isinstance(item.created_at, datetime)
        assert store.items == (item,)

    def test_duplicate_word_and_sentence_saved_once(self, store, sample_analysis):
        first = store.save("got", sample_analysis)
        second = store.save("got", make_analysis(nuance="different notes"))

        assert first is not None
        assert second is None
        assert len(store) == 1

    def test_same_word_in_different_sentence_is_kept(self, store):
        store.save("run", make_analysis(sentence="I run daily."))
        store.save("run", make_analysis(sentence="They run a shop."))

        assert len(store) == 2

    def test_dedup_is_case_sensitive(self, store, sample_analysis):
        store.save("Got", sample_analysis)
        store.save("got", sample_analysis)

        assert len(store) == 2

    def test_newest_first_ordering(self, store):
        a = store.save("a", make_analysis(sentence="A."))
        b = store.save("b", make_analysis(sentence="B."))
        c = store.save("c", make_analysis(sentence="C."))

        assert [i.id for i in store.items] == [c.id, b.id, a.id]

    def test_ids_are_unique(self, store):
        ids = {store.save(f"w{n}", make_analysis(sentence=f"S{n}.")).id for n in range(20)}
        assert len(ids) == 20

    def test_colliding_id_factory_is_retried(self, storage):
        ids = iter(["same", "same", "other"])
        store = VocabularyStore(storage, id_factory=lambda: next(ids))

        first = store.save("a", make_analysis(sentence="A."))
        second = store.save("b", make_analysis(sentence="B."))

        assert (first.id, second.id) == ("same", "other")

    def test_every_mutation_persists_full_collection(self, storage, store, sample_analysis):
        store.save("got", sample_analysis)

        stored = json.loads(storage.read(VocabularyStore.STORAGE_KEY))
        assert len(stored) == 1
        assert stored[0]["word"] == "got"
        assert stored[0]["analysis"]["sentence"] == sample_analysis.sentence
        assert storage.write_count == 1

    def test_failed_write_leaves_store_unchanged(self, sample_analysis):
        store = VocabularyStore(FailingWriteStorage())

        with pytest.raises(StorageWriteError):
            store.save("got", sample_analysis)

        assert len(store) == 0
        assert not store.is_saved("got", sample_analysis.sentence)


class TestDelete:
    """Tests for deleting items."""

    def test_delete_removes_item(self, store, sample_analysis):
        item = store.save("got", sample_analysis)

        store.delete(item.id)

        assert len(store) == 0
        assert store.get(item.id) is None

    def test_delete_unknown_id_is_noop(self, storage, store, sample_analysis):
        store.save("got", sample_analysis)
        before = store.items
        writes = storage.write_count

        store.delete("does-not-exist")

        assert store.items == before
        assert storage.write_count == writes

    def test_delete_twice_is_idempotent(self, store, sample_analysis):
        item = store.save("got", sample_analysis)
        store.delete(item.id)
        store.delete(item.id)
        assert len(store) == 0


class TestIsSaved:
    """Tests for the dedup-key membership query."""

    def test_is_saved_matches_word_and_sentence(self, store, sample_analysis):
        store.save("got", sample_analysis)

        assert store.is_saved("got", sample_analysis.sentence)
        assert not store.is_saved("got", "Another sentence.")
        assert not store.is_saved("it", sample_analysis.sentence)

    def test_pure_is_saved_over_items(self, store, sample_analysis):
        store.save("got", sample_analysis)
        assert is_saved(store.items, "got", sample_analysis.sentence)
        assert not is_saved((), "got", sample_analysis.sentence)


class TestLoad:
    """Tests for loading persisted vocabulary."""

    def test_persistence_survives_restart(self, tmp_path):
        path = tmp_path / "vocabulary.json"
        analysis = make_analysis(
            phrase_detected="got it right",
            phrase_explanation="做对了",
        )
        saved = VocabularyStore(JsonFileStorage(path)).save("got", analysis)

        reloaded = VocabularyStore(JsonFileStorage(path))

        assert reloaded.items == (saved,)
        assert reloaded.items[0].analysis.phrase_explanation == "做对了"
        assert reloaded.items[0].created_at == saved.created_at

    def test_missing_data_gives_empty_store(self, store):
        assert store.items == ()

    def test_unparseable_data_gives_empty_store(self):
        storage = InMemoryStorage({VocabularyStore.STORAGE_KEY: "{not json"})
        assert len(VocabularyStore(storage)) == 0

    def test_malformed_item_gives_empty_store(self):
        payload = json.dumps([{"id": "1", "word": "x"}])
        storage = InMemoryStorage({VocabularyStore.STORAGE_KEY: payload})
        assert len(VocabularyStore(storage)) == 0

    @pytest.mark.parametrize("analysis", ["oops", ["a"], 5])
    def test_non_object_analysis_gives_empty_store(self, analysis):
        payload = json.dumps(
            [{"id": "1", "word": "x", "analysis": analysis, "createdAt": "2024-01-01T00:00:00"}]
        )
        storage = InMemoryStorage({VocabularyStore.STORAGE_KEY: payload})
        assert len(VocabularyStore(storage)) == 0

    def test_non_object_item_gives_empty_store(self):
        storage = InMemoryStorage({VocabularyStore.STORAGE_KEY: json.dumps(["x", 1])})
        assert len(VocabularyStore(storage)) == 0

    def test_non_string_phrase_gives_empty_store(self):
        analysis = make_analysis().to_dict()
        analysis.update(phraseDetected=5, phraseExplanation=["x"])
        payload = json.dumps(
            [{"id": "1", "word": "x", "analysis": analysis, "createdAt": "2024-01-01T00:00:00"}]
        )
        storage = InMemoryStorage({VocabularyStore.STORAGE_KEY: payload})
        assert len(VocabularyStore(storage)) == 0

    def test_non_list_payload_gives_empty_store(self):
        storage = InMemoryStorage({VocabularyStore.STORAGE_KEY: '{"items": []}'})
        assert len(VocabularyStore(storage)) == 0

    def test_storage_load_error_gives_empty_store(self):
        assert len(VocabularyStore(UnreadableStorage())) == 0

    def test_load_preserves_order(self, storage):
        store = VocabularyStore(storage)
        store.save("a", make_analysis(sentence="A."))
        store.save("b", make_analysis(sentence="B."))

        reloaded = VocabularyStore(storage)
        assert [i.word for i in reloaded.items] == ["b", "a"]
