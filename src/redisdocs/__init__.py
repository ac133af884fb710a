"""
Document collections (CRUD, filtering, sorting, pagination) on top of a
key-value store such as Redis.

Architecture:
- store: KeyValueStore interface with Redis and in-memory implementations
- codec: JSON text encoding of documents
- query: predicate evaluator, collection scanner, result pipeline
- model: per-collection CRUD surface
- orm: store ownership and model registry
"""

from .codec import DocumentCodec
from .config import Config
from .exceptions import (
    RedisDocsError,
    ConfigurationError,
    EncodingError,
    StoreUnavailable,
    ScanCancelled,
    ScanTimeout,
)
from .model import Model
from .orm import DocumentORM
from .query import CancellationToken, FullScanner, QueryBuilder, Scanner, match_query
from .schema import ID_FIELD, Schema
from .store import KeyValueStore, MemoryStore, RedisStore, StoreFactory

__all__ = [
    'DocumentCodec', 'Config',
    'RedisDocsError', 'ConfigurationError', 'EncodingError', 'StoreUnavailable',
    'ScanCancelled', 'ScanTimeout',
    'Model', 'DocumentORM',
    'CancellationToken', 'FullScanner', 'QueryBuilder', 'Scanner', 'match_query',
    'ID_FIELD', 'Schema',
    'KeyValueStore', 'MemoryStore', 'RedisStore', 'StoreFactory',
]
