"""
Store factory that creates and holds the process-wide store instance.
"""

import logging
from typing import Optional

from .base import KeyValueStore
from .memory import MemoryStore
from .redis_store import RedisStore
from redisdocs.exceptions import ConfigurationError


class StoreFactory:
    """
    Factory for creating and managing the shared store instance.

    Usage:
        # Initialize
        store = await StoreFactory.initialize("redis", "redis://localhost:6379/0")

        # Later, anywhere in the process
        store = StoreFactory.get_instance()
    """

    _instance: Optional[KeyValueStore] = None
    _store_type: Optional[str] = None

    @classmethod
    def create(cls, store_type: str, url: str = "") -> KeyValueStore:
        """Create an unconnected store of the given type"""
        if store_type.lower() == "redis":
            return RedisStore(url) if url else RedisStore()
        elif store_type.lower() == "memory":
            return MemoryStore()
        raise ConfigurationError(message=f"Unsupported store type: {store_type}")

    @classmethod
    async def initialize(cls, store_type: str, url: str = "") -> KeyValueStore:
        """
        Create and connect the shared store.

        Args:
            store_type: Store type ("redis" or "memory")
            url: Connection url for network stores

        Returns:
            Connected KeyValueStore instance
        """
        if cls._instance is not None:
            logging.info("StoreFactory: Already initialized")
            return cls._instance

        try:
            store = cls.create(store_type, url)
            await store.connect()

            cls._instance = store
            cls._store_type = store_type

            logging.info(f"StoreFactory: Initialized {store_type} store")

        except Exception as e:
            logging.error(f"Failed to initialize store: {str(e)}")
            raise

        return store

    @classmethod
    def get_instance(cls) -> KeyValueStore:
        """Get the current store instance"""
        if cls._instance is None:
            raise ConfigurationError(message="Store not initialized. Call initialize() first.")
        return cls._instance

    @classmethod
    def set_instance(cls, instance: KeyValueStore, store_type: str) -> None:
        """
        Set the current store instance (mainly for testing).
        """
        cls._instance = instance
        cls._store_type = store_type
        logging.info(f"Store instance set to: {store_type}")

    @classmethod
    def get_store_type(cls) -> Optional[str]:
        """Get the currently configured store type"""
        return cls._store_type

    @classmethod
    async def close(cls) -> None:
        """Close the store connection and clean up"""
        if cls._instance is not None:
            await cls._instance.close()
            cls._instance = None
            cls._store_type = None
            logging.info("Store instance closed and cleaned up")

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if a store instance has been initialized"""
        return cls._instance is not None
