"""
Collection CRUD operations over a key-value store.

Each document is one key "<collection>:<_id>" holding its JSON text. Every
query is a full collection scan; there are no indexes.

Bulk operations (update_many, delete_many) are not transactional: documents
are processed one at a time and an interruption leaves the earlier ones
mutated. Concurrent bulk operations on overlapping queries may race.
"""

import logging
from typing import Any, Dict, Optional

from redisdocs.codec import DocumentCodec
from redisdocs.query.builder import QueryBuilder
from redisdocs.query.scanner import CancellationToken, FullScanner, Scanner, ScanResult, collection_prefix
from redisdocs.schema import ID_FIELD, Schema
from redisdocs.store.base import KeyValueStore
from redisdocs.store.factory import StoreFactory
from redisdocs.utils import generate_id, validate_id

logger = logging.getLogger(__name__)

Document = Dict[str, Any]
Query = Dict[str, Any]


class Model:
    """A named collection of documents with a mongo-like CRUD surface"""

    def __init__(
        self,
        name: str,
        schema: Optional[Schema] = None,
        store: Optional[KeyValueStore] = None,
        scanner: Optional[Scanner] = None,
        codec: Optional[DocumentCodec] = None
    ):
        if not name or ":" in name:
            raise ValueError(f"Invalid collection name: {name!r}")
        self.name = name
        self.schema = schema
        self._store = store
        self.codec = codec or DocumentCodec()
        self.scanner = scanner or FullScanner(self.codec)

    @property
    def store(self) -> KeyValueStore:
        """Bound store, or the process-wide one from StoreFactory"""
        if self._store is not None:
            return self._store
        return StoreFactory.get_instance()

    def key(self, id: str) -> str:
        return f"{collection_prefix(self.name)}{id}"

    async def _scan(self, query: Optional[Query], token: Optional[CancellationToken] = None) -> ScanResult:
        return await self.scanner.scan(self.store, self.name, query or {}, token)

    async def _write(self, doc: Document) -> None:
        await self.store.set(self.key(doc[ID_FIELD]), self.codec.encode(doc))

    @staticmethod
    def _merge(doc: Document, data: Optional[Dict[str, Any]]) -> Document:
        # shallow merge; the identity field never changes
        merged = dict(doc)
        merged.update({k: v for k, v in (data or {}).items() if k != ID_FIELD})
        return merged

    # ==================== Create ====================

    async def create(self, data: Optional[Dict[str, Any]] = None) -> Document:
        """
        Create a document. A non-empty string `_id` in data is used as the id,
        otherwise one is generated.

        This is an upsert: an existing document with the same id is
        overwritten without any existence check.
        """
        data = data or {}
        id = data.get(ID_FIELD)
        if not validate_id(id):
            id = generate_id()

        if self.schema is not None:
            body = self.schema.apply(data)
        else:
            body = {k: v for k, v in data.items() if k != ID_FIELD}
        doc: Document = {ID_FIELD: id, **body}

        await self._write(doc)
        logger.debug(f"Created {self.key(id)}")
        return doc

    # ==================== Read ====================

    def find(self, query: Optional[Query] = None) -> QueryBuilder:
        """Return a deferred query; chain sort/skip/limit then await exec()"""
        query = query or {}

        async def fetch(token: Optional[CancellationToken]) -> ScanResult:
            return await self._scan(query, token)

        return QueryBuilder(fetch)

    async def find_one(self, query: Optional[Query] = None) -> Optional[Document]:
        results = await self.find(query).limit(1).exec()
        return results[0] if results else None

    async def find_by_id(self, id: str) -> Optional[Document]:
        raw = await self.store.get(self.key(id))
        if raw is None:
            return None
        doc = self.codec.decode(raw)
        doc[ID_FIELD] = id
        return doc

    async def count_documents(self, query: Optional[Query] = None) -> int:
        """Count matches by materializing the full scan"""
        scan = await self._scan(query)
        return len(scan.documents)

    # ==================== Update ====================

    async def update(self, id: str, data: Optional[Dict[str, Any]] = None) -> Optional[Document]:
        """Shallow-merge data into the document; None when it does not exist"""
        doc = await self.find_by_id(id)
        if doc is None:
            return None

        doc = self._merge(doc, data)
        await self._write(doc)
        return doc

    update_one = update

    async def update_many(self, query: Query, data: Optional[Dict[str, Any]] = None) -> int:
        """Merge data into every match; returns the number of documents written"""
        scan = await self._scan(query)
        count = 0
        for doc in scan.documents:
            await self._write(self._merge(doc, data))
            count += 1
        logger.debug(f"update_many on {self.name}: {count} documents updated")
        return count

    async def find_one_and_update(
        self,
        query: Query,
        data: Optional[Dict[str, Any]] = None,
        return_new: bool = False
    ) -> Optional[Document]:
        """
        Update the first match in scan order.

        Returns the document as it was BEFORE the update unless return_new is
        True. Scan order is the store's key enumeration order, which is
        arbitrary.
        """
        original = await self.find_one(query)
        if original is None:
            return None

        updated = self._merge(original, data)
        await self._write(updated)
        return updated if return_new else original

    # ==================== Delete ====================

    async def delete(self, id: str) -> int:
        """Delete by id; returns the store's removed-key count (0 or 1)"""
        return await self.store.delete(self.key(id))

    delete_one = delete

    async def delete_many(self, query: Optional[Query] = None) -> int:
        """Delete every match; returns the number of documents processed"""
        scan = await self._scan(query)
        count = 0
        for doc in scan.documents:
            await self.store.delete(self.key(doc[ID_FIELD]))
            count += 1
        logger.debug(f"delete_many on {self.name}: {count} documents deleted")
        return count

    async def find_one_and_delete(self, query: Query) -> Optional[Document]:
        doc = await self.find_one(query)
        if doc is None:
            return None
        await self.store.delete(self.key(doc[ID_FIELD]))
        return doc

    def __repr__(self) -> str:
        return f"Model({self.name!r})"
