"""
Redis implementation of the key-value store over redis.asyncio.
"""

import logging
import re
from typing import Any, List, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from .base import KeyValueStore
from redisdocs.config import Config
from redisdocs.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r'([\\*?\[\]])')


def escape_pattern(prefix: str) -> str:
    """Escape glob metacharacters so a collection name matches literally in SCAN MATCH"""
    return _GLOB_SPECIAL.sub(r'\\\1', prefix)


class RedisStore(KeyValueStore):
    """Redis implementation of KeyValueStore"""

    def __init__(self, url: str = "redis://localhost:6379/0", client: Optional[Any] = None):
        super().__init__()
        self.url = url
        self._client = client

    async def connect(self) -> None:
        """Initialize Redis connection"""
        if self._connected:
            logger.info("RedisStore: Already connected")
            return

        if self._client is None:
            self._client = redis.Redis.from_url(self.url, encoding="utf-8", decode_responses=True)

        # Test connection
        try:
            await self._client.ping()
        except RedisError as e:
            logger.error(f"RedisStore: Connection to {self.url} failed: {e}")
            await self._client.aclose()
            self._client = None
            raise StoreUnavailable(e, f"Redis connection error: {e}")
        self._connected = True
        logger.info(f"RedisStore: Connected to {self.url}")

    async def close(self) -> None:
        """Close Redis connection"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._connected = False
        logger.info("RedisStore: Connection closed")

    def get_connection(self) -> Any:
        """Get the Redis client instance"""
        self._ensure_connected()
        return self._client

    async def get(self, key: str) -> Optional[str]:
        client = self.get_connection()
        try:
            return await client.get(key)
        except RedisError as e:
            raise StoreUnavailable(e, f"Redis get error: {e}")

    async def set(self, key: str, value: str) -> None:
        client = self.get_connection()
        try:
            await client.set(key, value)
        except RedisError as e:
            raise StoreUnavailable(e, f"Redis set error: {e}")

    async def delete(self, key: str) -> int:
        client = self.get_connection()
        try:
            return int(await client.delete(key))
        except RedisError as e:
            raise StoreUnavailable(e, f"Redis delete error: {e}")

    async def keys(self, prefix: str) -> List[str]:
        client = self.get_connection()
        pattern = escape_pattern(prefix) + '*'
        try:
            # SCAN may report a key more than once
            found = []
            seen = set()
            async for key in client.scan_iter(match=pattern, count=Config.scan_count()):
                if key not in seen:
                    seen.add(key)
                    found.append(key)
            return found
        except RedisError as e:
            raise StoreUnavailable(e, f"Redis scan error: {e}")
