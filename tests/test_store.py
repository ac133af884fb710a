"""
Tests for key-value store implementations and the store factory
"""
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from redisdocs.exceptions import ConfigurationError, StoreUnavailable
from redisdocs.store.factory import StoreFactory
from redisdocs.store.memory import MemoryStore
from redisdocs.store.redis_store import RedisStore, escape_pattern

pytestmark = pytest.mark.asyncio


class FakeRedisClient:
    """Async stand-in for redis.asyncio.Redis covering the calls RedisStore makes"""

    def __init__(self, fail: bool = False):
        self.data = {}
        self.fail = fail
        self.closed = False
        self.scan_patterns = []

    def _check(self):
        if self.fail:
            raise RedisConnectionError("connection refused")

    async def ping(self):
        self._check()
        return True

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def set(self, key, value):
        self._check()
        self.data[key] = value
        return True

    async def delete(self, key):
        self._check()
        return 1 if self.data.pop(key, None) is not None else 0

    async def scan_iter(self, match=None, count=None):
        self._check()
        self.scan_patterns.append(match)
        prefix = match[:-1].replace("\\", "")
        for key in list(self.data):
            if key.startswith(prefix):
                yield key
                # SCAN may return duplicates
                yield key

    async def aclose(self):
        self.closed = True


class TestMemoryStore:
    async def test_operations_require_connect(self):
        store = MemoryStore()
        with pytest.raises(ConfigurationError):
            await store.get("k")
        await store.connect()
        assert store.is_connected
        await store.set("k", "v")
        assert await store.get("k") == "v"

    async def test_delete_counts(self, store):
        await store.set("a:1", "x")
        assert await store.delete("a:1") == 1
        assert await store.delete("a:1") == 0

    async def test_keys_by_prefix(self, store):
        for key in ("a:1", "a:2", "ab:1", "b:1"):
            await store.set(key, "x")
        assert sorted(await store.keys("a:")) == ["a:1", "a:2"]

    async def test_close_disconnects(self, store):
        await store.close()
        with pytest.raises(ConfigurationError):
            await store.keys("a:")


class TestRedisStore:
    async def test_crud_through_client(self):
        client = FakeRedisClient()
        store = RedisStore(client=client)
        await store.connect()

        await store.set("user:1", '{"_id": "1"}')
        assert await store.get("user:1") == '{"_id": "1"}'
        assert await store.keys("user:") == ["user:1"]
        assert await store.delete("user:1") == 1
        assert await store.get("user:1") is None

    async def test_keys_escape_glob_characters(self):
        client = FakeRedisClient()
        store = RedisStore(client=client)
        await store.connect()
        await store.keys("odd*name:")
        assert client.scan_patterns == ["odd\\*name:*"]

    async def test_escape_pattern(self):
        assert escape_pattern("a[b]?:") == "a\\[b\\]\\?:"
        assert escape_pattern("plain:") == "plain:"

    async def test_not_connected(self):
        store = RedisStore(client=FakeRedisClient())
        with pytest.raises(ConfigurationError):
            await store.get("user:1")

    async def test_connect_failure_is_store_unavailable(self):
        client = FakeRedisClient(fail=True)
        store = RedisStore(client=client)
        with pytest.raises(StoreUnavailable) as excinfo:
            await store.connect()
        assert isinstance(excinfo.value.error, RedisConnectionError)
        assert not store.is_connected

    async def test_connect_failure_releases_client(self):
        client = FakeRedisClient(fail=True)
        store = RedisStore(client=client)
        with pytest.raises(StoreUnavailable):
            await store.connect()
        assert client.closed
        assert store._client is None

    async def test_io_failure_is_store_unavailable(self):
        client = FakeRedisClient()
        store = RedisStore(client=client)
        await store.connect()
        client.fail = True
        for call in (store.get("k"), store.set("k", "v"), store.delete("k"), store.keys("k:")):
            with pytest.raises(StoreUnavailable):
                await call

    async def test_close(self):
        client = FakeRedisClient()
        store = RedisStore(client=client)
        await store.connect()
        await store.close()
        assert client.closed
        assert not store.is_connected


class TestStoreFactory:
    async def test_get_instance_before_initialize(self):
        assert not StoreFactory.is_initialized()
        with pytest.raises(ConfigurationError):
            StoreFactory.get_instance()

    async def test_initialize_memory(self):
        store = await StoreFactory.initialize("memory")
        assert StoreFactory.get_instance() is store
        assert StoreFactory.get_store_type() == "memory"
        assert store.is_connected
        assert await StoreFactory.initialize("memory") is store

        await StoreFactory.close()
        assert not StoreFactory.is_initialized()
        assert not store.is_connected

    async def test_create_redis_store(self):
        store = StoreFactory.create("redis", "redis://cache:6380/1")
        assert isinstance(store, RedisStore)
        assert store.url == "redis://cache:6380/1"

    async def test_unknown_store_type(self):
        with pytest.raises(ConfigurationError):
            await StoreFactory.initialize("mongodb")
        assert not StoreFactory.is_initialized()
