"""Unit tests for the memory and file storage backends and the factory."""

import pytest

from hacker_stories.exceptions import StorageError
from hacker_stories.state.persisted import PersistedValue
from hacker_stories.storage import FileStorage, MemoryStorage, get_storage
from hacker_stories.utils.config import Settings


class TestMemoryStorage:
    def test_get_missing(self):
        assert MemoryStorage().get("search") is None

    def test_last_write_wins(self):
        s = MemoryStorage()
        s.set("search", "a")
        s.set("search", "b")
        assert s.get("search") == "b"


class TestFileStorage:
    def test_missing_file_reads_as_empty(self, tmp_path):
        assert FileStorage(tmp_path / "none.json").get("search") is None

    def test_survives_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        FileStorage(path).set("search", "rust")
        assert FileStorage(path).get("search") == "rust"

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "storage.json"
        store = FileStorage(path)
        store.set("theme", "dark")
        store.set("search", "go")
        assert store.get("theme") == "dark"
        assert store.get("search") == "go"

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            FileStorage(path).get("search")

    def test_non_object_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(StorageError):
            FileStorage(path).get("search")

    def test_persisted_value_falls_back_on_corrupt_file(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        cell = PersistedValue(FileStorage(path), "search", "React")
        assert cell.value == "React"


    def test_set_overwrites_corrupt_file(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{bad", encoding="utf-8")
        PersistedValue(FileStorage(path), "search", "React").set("rust")
        assert PersistedValue(FileStorage(path), "search", "React").value == "rust"

    def test_set_overwrites_non_object_file(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]", encoding="utf-8")
        FileStorage(path).set("search", "go")
        assert FileStorage(path).get("search") == "go"


class TestGetStorage:
    def test_memory(self):
        assert isinstance(get_storage(Settings(), backend="memory"), MemoryStorage)

    def test_file_uses_configured_path(self, tmp_path):
        storage = get_storage(Settings(storage_path=str(tmp_path / "s.json")), backend="file")
        assert isinstance(storage, FileStorage)
        assert storage.path == tmp_path / "s.json"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            get_storage(Settings(), backend="sqlite")
