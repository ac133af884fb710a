"""
Key-value store layer.

Architecture:
- KeyValueStore: get/set/delete/keys interface consumed by collections
- RedisStore: redis.asyncio implementation
- MemoryStore: in-process dict implementation
- StoreFactory: process-wide store instance
"""

from .base import KeyValueStore
from .memory import MemoryStore
from .redis_store import RedisStore
from .factory import StoreFactory

__all__ = ['KeyValueStore', 'MemoryStore', 'RedisStore', 'StoreFactory']
