"""Pick a storage backend from settings."""

from hacker_stories.storage.base import MemoryStorage, Storage
from hacker_stories.storage.file_store import FileStorage
from hacker_stories.utils.config import Settings, settings as default_settings

BACKENDS = ("file", "memory", "redis")


def get_storage(settings: Settings | None = None, backend: str | None = None) -> Storage:
    """Build the backend named by *backend* or ``settings.storage_backend``."""
    settings = settings or default_settings
    name = (backend or settings.storage_backend).lower()
    if name == "memory":
        return MemoryStorage()
    if name == "file":
        return FileStorage(settings.storage_path)
    if name == "redis":
        # Imported lazily so the redis driver is only touched when selected.
        from hacker_stories.storage.redis_store import RedisStorage

        return RedisStorage(
            host=settings.redis_host,
            port=settings.redis_port,
            password=settings.redis_password,
            prefix=settings.redis_key_prefix,
        )
    raise ValueError(f"Unknown storage backend {name!r}; expected one of {', '.join(BACKENDS)}")
