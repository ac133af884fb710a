"""
Minimal key-value store interface consumed by collections.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from redisdocs.exceptions import ConfigurationError


class KeyValueStore(ABC):
    """
    Async key-value store with single-key operations only.

    No ordering or atomicity guarantees beyond a single key. keys() returns
    an unordered snapshot that may reflect concurrent mutations.
    """

    def __init__(self):
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    def _ensure_connected(self) -> None:
        """Ensure store is connected"""
        if not self._connected:
            raise ConfigurationError(message=f"{self.__class__.__name__} not connected. Call connect() first.")

    @abstractmethod
    async def connect(self) -> None:
        """Establish the store connection"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the store connection"""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored value or None when the key is absent"""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> int:
        """Remove the key and return the number of keys removed (0 or 1)"""
        pass

    @abstractmethod
    async def keys(self, prefix: str) -> List[str]:
        """Return every key starting with prefix"""
        pass
