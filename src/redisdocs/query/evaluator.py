"""
Predicate evaluator deciding whether a document matches a query.

A query maps field names to either a literal (strict equality) or an operator
dict such as {"$gte": 21, "$lt": 65}. Fields are combined with AND and an
empty query matches every document.
"""

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for a field absent from the document"""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

COMPARATORS = {"$gt", "$gte", "$lt", "$lte", "$in", "$nin", "$ne"}


def strict_equals(a: Any, b: Any) -> bool:
    """Type-sensitive equality: "5" != 5 and True != 1, while 1 == 1.0"""
    if a is MISSING or b is MISSING:
        return False
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(strict_equals(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(strict_equals(a[k], b[k]) for k in a)
    return a == b


def _ordered(value: Any, op: str, operand: Any) -> bool:
    # missing fields and incomparable types never satisfy an ordering operator
    if value is MISSING or value is None or operand is None:
        return False
    try:
        if op == "$gt": return value > operand
        if op == "$gte": return value >= operand
        if op == "$lt": return value < operand
        return value <= operand
    except TypeError:
        return False


def _contains(values: Any, value: Any) -> bool:
    return any(strict_equals(value, v) for v in values)


def eval_op(value: Any, op: str, operand: Any) -> bool:
    """Evaluate one operator against a field value; unknown operators never match"""
    if op in ("$gt", "$gte", "$lt", "$lte"):
        return _ordered(value, op, operand)
    if op == "$in":
        return isinstance(operand, list) and _contains(operand, value)
    if op == "$nin":
        return not (isinstance(operand, list) and _contains(operand, value))
    if op == "$ne":
        return not strict_equals(value, operand)
    logger.debug(f"Unsupported query operator {op!r}; document rejected")
    return False


def eval_field(doc: Dict[str, Any], field: str, cond: Any) -> bool:
    value = doc.get(field, MISSING)
    if isinstance(cond, dict):
        for op, operand in cond.items():
            if not eval_op(value, op, operand):
                return False
        return True
    return strict_equals(value, cond)


def match_query(doc: Dict[str, Any], query: Dict[str, Any] | None) -> bool:
    """Return True when doc satisfies every field condition of query"""
    if not query:
        return True
    for field, cond in query.items():
        if not eval_field(doc, field, cond):
            return False
    return True
