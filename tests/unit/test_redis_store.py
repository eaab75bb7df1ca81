"""Unit tests for RedisStorage.

The live class needs a running Redis (``docker run -p 6379:6379 redis``) and
skips itself otherwise.
"""

from unittest.mock import MagicMock

import pytest
import redis

from hacker_stories.exceptions import StorageError
from hacker_stories.storage.redis_store import RedisStorage


def test_get_and_set_use_prefix():
    client = MagicMock()
    client.get.return_value = "rust"
    store = RedisStorage(client=client, prefix="hs:")

    assert store.get("search") == "rust"
    client.get.assert_called_once_with("hs:search")

    store.set("search", "go")
    client.set.assert_called_once_with("hs:search", "go")


def test_redis_errors_become_storage_errors():
    client = MagicMock()
    client.get.side_effect = redis.ConnectionError("refused")
    client.set.side_effect = redis.ConnectionError("refused")
    store = RedisStorage(client=client, prefix="hs:")

    with pytest.raises(StorageError):
        store.get("search")
    with pytest.raises(StorageError):
        store.set("search", "go")


@pytest.mark.integration
class TestRedisStorageLive:
    """Tests that talk to a real Redis instance."""

    @pytest.fixture(autouse=True)
    def setup(self):
        try:
            self.store = RedisStorage(prefix="hacker_stories_test:")
            self.store.ping()
        except Exception:
            pytest.skip("Redis not available")
        self.store.delete("search")
        yield
        self.store.delete("search")

    def test_round_trip(self):
        assert self.store.get("search") is None
        self.store.set("search", "rust")
        assert RedisStorage(prefix="hacker_stories_test:").get("search") == "rust"
