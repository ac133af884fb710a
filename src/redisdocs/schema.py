"""
Schema metadata for collections.

A schema is a field list compiled into defaults. It shapes documents on
create but is never used to validate values at runtime.
"""

import copy
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

ID_FIELD = "_id"


class Schema:
    """Declared fields of a collection with their create-time defaults"""

    def __init__(self, definition: Dict[str, Any], defaults: Optional[Dict[str, Any]] = None):
        # definition values are type labels kept as metadata only
        self.definition: Dict[str, Any] = {k: v for k, v in definition.items() if k != ID_FIELD}
        defaults = defaults or {}
        unknown = set(defaults) - set(self.definition)
        if unknown:
            raise ValueError(f"Defaults given for undeclared fields: {sorted(unknown)}")
        self.defaults: Dict[str, Any] = {f: defaults.get(f) for f in self.definition}

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> "Schema":
        """Compile a pydantic model's fields and defaults into a Schema"""
        definition = {}
        defaults = {}
        for name, info in model_class.model_fields.items():
            field_name = info.alias or name
            if field_name in (ID_FIELD, "id"):
                continue
            definition[field_name] = info.annotation
            if not info.is_required():
                defaults[field_name] = info.get_default(call_default_factory=True)
        return cls(definition, defaults)

    @property
    def fields(self) -> list[str]:
        return list(self.definition)

    def apply(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a document holding exactly the declared fields, filled from data or defaults"""
        doc = {}
        for field in self.definition:
            value = data.get(field)
            doc[field] = value if value is not None else copy.deepcopy(self.defaults[field])
        return doc

    def __repr__(self) -> str:
        return f"Schema({self.fields})"
