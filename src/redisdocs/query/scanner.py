"""
Collection scanners.

FullScanner is the only access path: every query enumerates the whole
collection namespace, decodes each entry and filters it through the
predicate evaluator. Scanner is the seam where an index-backed strategy
can replace it without touching the evaluator or the result pipeline.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from redisdocs.codec import DocumentCodec
from redisdocs.exceptions import EncodingError, ScanCancelled
from redisdocs.schema import ID_FIELD
from redisdocs.store.base import KeyValueStore
from .evaluator import match_query

logger = logging.getLogger(__name__)


class CancellationToken:
    """Cooperative cancellation flag checked between store round-trips"""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise ScanCancelled()


@dataclass
class ScanWarning:
    """A stored entry that could not be decoded and was skipped"""
    key: str
    message: str


@dataclass
class ScanResult:
    documents: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[ScanWarning] = field(default_factory=list)
    scanned: int = 0


def collection_prefix(collection: str) -> str:
    return f"{collection}:"


class Scanner(ABC):
    """Produces the documents of a collection that match a query"""

    @abstractmethod
    async def scan(
        self,
        store: KeyValueStore,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        token: Optional[CancellationToken] = None
    ) -> ScanResult:
        pass


class FullScanner(Scanner):
    """O(collection size) scan over every key in the collection namespace"""

    def __init__(self, codec: Optional[DocumentCodec] = None):
        self.codec = codec or DocumentCodec()

    async def scan(
        self,
        store: KeyValueStore,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        token: Optional[CancellationToken] = None
    ) -> ScanResult:
        result = ScanResult()
        prefix = collection_prefix(collection)
        keys = await store.keys(prefix)

        for key in keys:
            if token is not None:
                token.raise_if_cancelled()

            raw = await store.get(key)
            if raw is None:
                # deleted between enumeration and fetch
                continue
            result.scanned += 1

            try:
                doc = self.codec.decode(raw)
            except EncodingError as e:
                logger.warning(f"Skipping undecodable document {key}: {e}")
                result.warnings.append(ScanWarning(key, str(e)))
                continue

            # the scanned key is authoritative for the document id
            doc[ID_FIELD] = key[len(prefix):]

            if match_query(doc, query):
                result.documents.append(doc)

        logger.debug(f"Scanned {result.scanned} documents in {collection}, {len(result.documents)} matched")
        return result
