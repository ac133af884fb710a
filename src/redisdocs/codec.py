"""
JSON text codec for documents stored as single key-value entries.
"""

import json
from typing import Any, Dict

from redisdocs.exceptions import EncodingError


class DocumentCodec:
    """Serializes documents to JSON text and back.

    Values JSON cannot represent faithfully (NaN, Infinity, cyclic structures,
    arbitrary objects) raise EncodingError instead of being stored lossily.
    """

    @staticmethod
    def encode(doc: Dict[str, Any]) -> str:
        if not isinstance(doc, dict):
            raise EncodingError(message=f"Document must be a dict, got {type(doc).__name__}")
        try:
            return json.dumps(doc, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise EncodingError(e, f"Cannot encode document: {e}")

    @staticmethod
    def decode(raw: str | bytes) -> Dict[str, Any]:
        try:
            doc = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise EncodingError(e, f"Cannot decode document: {e}")
        if not isinstance(doc, dict):
            raise EncodingError(message=f"Stored value is not a document: {type(doc).__name__}")
        return doc
