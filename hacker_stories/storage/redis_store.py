"""Redis-backed storage for deployments that share the persisted query."""

from typing import Optional

import redis

from hacker_stories.exceptions import StorageError
from hacker_stories.storage.base import Storage
from hacker_stories.utils.config import settings
from hacker_stories.utils.logger import get_logger

log = get_logger(__name__)


class RedisStorage(Storage):
    """Thin wrapper around redis-py storing plain string keys under a prefix."""

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        password: str | None = None,
        prefix: str | None = None,
        client: redis.Redis | None = None,
    ):
        self.client = client or redis.Redis(
            host=host or settings.redis_host,
            port=port or settings.redis_port,
            password=password or settings.redis_password or None,
            decode_responses=True,
        )
        self.prefix = settings.redis_key_prefix if prefix is None else prefix

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(self._key(key))
        except redis.RedisError as exc:
            raise StorageError(f"Redis GET {key} failed: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self._key(key), value)
        except redis.RedisError as exc:
            raise StorageError(f"Redis SET {key} failed: {exc}") from exc
        log.debug("Stored %s in Redis", key)

    # -- Utilities ----------------------------------------------------------

    def delete(self, key: str) -> None:
        """Remove *key* (useful in tests)."""
        try:
            self.client.delete(self._key(key))
        except redis.RedisError as exc:
            raise StorageError(f"Redis DEL {key} failed: {exc}") from exc

    def ping(self) -> bool:
        return self.client.ping()

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"
