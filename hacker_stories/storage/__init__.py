"""Storage module -- durable key/value backends for persisted values."""

from hacker_stories.storage.base import MemoryStorage, Storage
from hacker_stories.storage.factory import get_storage
from hacker_stories.storage.file_store import FileStorage

__all__ = ["Storage", "MemoryStorage", "FileStorage", "get_storage"]
