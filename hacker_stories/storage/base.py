"""Abstract key/value storage interface and the in-memory implementation."""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class Storage(ABC):
    """Durable string store -- swap backends without touching callers.

    Implementations translate their own failures into ``StorageError``.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under *key*, or None when absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...


class MemoryStorage(Storage):
    """Process-lifetime storage backed by a dict (tests, ``--storage memory``)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
