"""
Entry point owning a store connection and handing out collection models.
"""

import logging
from typing import Dict, Optional

from redisdocs.config import Config
from redisdocs.model import Model
from redisdocs.schema import Schema
from redisdocs.store.base import KeyValueStore
from redisdocs.store.factory import StoreFactory

logger = logging.getLogger(__name__)


class DocumentORM:
    """
    Usage:
        async with DocumentORM("redis://localhost:6379/0") as orm:
            users = orm.model("user", Schema({"name": str, "age": int}))
            await users.create({"name": "Alice", "age": 25})
            adults = await users.find({"age": {"$gte": 18}}).sort({"age": -1}).exec()
    """

    def __init__(self, url: Optional[str] = None, store: Optional[KeyValueStore] = None):
        if store is None:
            store_type, default_url = Config.get_store_params()
            store = StoreFactory.create(store_type, url or default_url)
        self.store = store
        self._models: Dict[str, Model] = {}

    async def connect(self) -> "DocumentORM":
        await self.store.connect()
        return self

    async def close(self) -> None:
        await self.store.close()

    async def __aenter__(self) -> "DocumentORM":
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def model(self, name: str, schema: Optional[Schema] = None) -> Model:
        """Return the collection model for name, created on first use"""
        existing = self._models.get(name)
        if existing is not None and (schema is None or existing.schema is schema):
            return existing
        model = Model(name, schema, store=self.store)
        self._models[name] = model
        logger.debug(f"Registered model {name} with {schema!r}")
        return model
