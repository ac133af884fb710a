"""
In-process store backed by a dict.
"""

import logging
from typing import Dict, List, Optional

from .base import KeyValueStore

logger = logging.getLogger(__name__)


class MemoryStore(KeyValueStore):
    """Dict-backed implementation of KeyValueStore"""

    def __init__(self):
        super().__init__()
        self._data: Dict[str, str] = {}

    async def connect(self) -> None:
        self._connected = True
        logger.info("MemoryStore: Connected")

    async def close(self) -> None:
        self._connected = False
        logger.info("MemoryStore: Closed")

    async def get(self, key: str) -> Optional[str]:
        self._ensure_connected()
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._ensure_connected()
        self._data[key] = value

    async def delete(self, key: str) -> int:
        self._ensure_connected()
        return 1 if self._data.pop(key, None) is not None else 0

    async def keys(self, prefix: str) -> List[str]:
        self._ensure_connected()
        return [key for key in list(self._data) if key.startswith(prefix)]
