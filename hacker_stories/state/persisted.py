"""A value cell restored from storage on creation and written back on change."""

from hacker_stories.exceptions import StorageError
from hacker_stories.storage.base import Storage
from hacker_stories.utils.logger import get_logger

log = get_logger(__name__)


class PersistedValue:
    """Semi-persistent string value keyed in a ``Storage``.

    Storage is best-effort: when it fails the in-memory value stays
    authoritative for this session and nothing is raised.
    """

    def __init__(self, storage: Storage, key: str, default: str):
        self.storage = storage
        self.key = key
        stored = None
        try:
            stored = storage.get(key)
        except StorageError as exc:
            log.warning("Could not restore %r, using default: %s", key, exc)
        # Absent key: use the default but do not write it yet.
        self._value = default if stored is None else stored

    @property
    def value(self) -> str:
        return self._value

    def set(self, new_value: str) -> None:
        self._value = new_value
        try:
            self.storage.set(self.key, new_value)
        except StorageError as exc:
            log.warning("Could not persist %r: %s", self.key, exc)

    def __repr__(self) -> str:
        return f"PersistedValue(key={self.key!r}, value={self._value!r})"
