"""
Exceptions for consistent error handling across stores and collections.
Organized by concern: configuration, encoding, store I/O, scans.

Absence of a document is not an error: point lookups return None and
deletes return 0.
"""


class RedisDocsError(Exception):
    """Base class for all redisdocs errors."""

    default_message = "redisdocs error"

    def __init__(self, e=None, message=None):
        if message:
            super().__init__(message)
        elif e:
            super().__init__(str(e))
        else:
            super().__init__(self.default_message)
        self.error = e
        self.message = message


# ==================== Configuration ====================

class ConfigurationError(RedisDocsError):
    """Raised when a store is used before it is connected or is misconfigured."""

    default_message = "Store not initialized. Call connect() first."


# ==================== Documents ====================

class EncodingError(RedisDocsError):
    """Raised when a document cannot be serialized or deserialized faithfully."""

    default_message = "Document encoding error"


# ==================== Store I/O ====================

class StoreUnavailable(RedisDocsError):
    """Raised for any I/O failure talking to the backing key-value store."""

    default_message = "Key-value store unavailable"


# ==================== Scans ====================

class ScanCancelled(RedisDocsError):
    """Raised when a collection scan is cancelled before it completes."""

    default_message = "Collection scan cancelled"


class ScanTimeout(ScanCancelled):
    """Raised when a collection scan exceeds its deadline."""

    default_message = "Collection scan timed out"
