"""
Deferred, chainable result pipeline over a materialized scan.
"""

import asyncio
import json
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple, Union

from redisdocs.exceptions import ScanTimeout
from .evaluator import MISSING
from .scanner import CancellationToken, ScanResult, ScanWarning


SortSpec = Union[Dict[str, Any], Sequence[Tuple[str, Any]]]
Fetcher = Callable[[Optional[CancellationToken]], Awaitable[ScanResult]]


def normalize_sort(spec: SortSpec) -> List[Tuple[str, int]]:
    """Turn {"age": -1} or [("age", "desc")] into [("age", -1)]"""
    items = spec.items() if isinstance(spec, dict) else spec
    normalized = []
    for field, direction in items:
        if isinstance(direction, str):
            if direction.lower() not in ("asc", "desc"):
                raise ValueError(f"Sort direction must be 'asc' or 'desc', got: {direction}")
            direction = 1 if direction.lower() == "asc" else -1
        elif isinstance(direction, bool) or direction not in (1, -1):
            raise ValueError(f"Sort direction must be 1 or -1, got: {direction}")
        normalized.append((field, int(direction)))
    return normalized


def sort_key(value: Any) -> Tuple[int, Any]:
    """
    Rank a field value for sorting: missing and None first, then numbers,
    then strings, then any other value ordered by its JSON text.
    """
    if value is MISSING or value is None:
        return (0, 0)
    if isinstance(value, (bool, int, float)):
        return (1, value)
    if isinstance(value, str):
        return (2, value)
    return (3, json.dumps(value, sort_keys=True, default=str))


def sort_documents(documents: List[Dict[str, Any]], sort_keys: List[Tuple[str, int]]) -> List[Dict[str, Any]]:
    # one stable pass per key, least significant first
    results = list(documents)
    for field, direction in reversed(sort_keys):
        results.sort(key=lambda doc: sort_key(doc.get(field, MISSING)), reverse=direction == -1)
    return results


class QueryBuilder:
    """
    Records sort/skip/limit intents and applies them on exec().

    exec() always applies sort, then skip, then limit, whatever order the
    methods were chained in. The sort is stable; missing and None values
    rank before every other value and mixed types sort by type group.
    """

    def __init__(self, fetcher: Fetcher):
        self._fetcher = fetcher
        self._sort: Optional[List[Tuple[str, int]]] = None
        self._skip: int = 0
        self._limit: Optional[int] = None
        self.warnings: List[ScanWarning] = []

    def sort(self, spec: SortSpec) -> "QueryBuilder":
        self._sort = normalize_sort(spec)
        return self

    def skip(self, n: int) -> "QueryBuilder":
        self._skip = n
        return self

    def limit(self, n: Optional[int]) -> "QueryBuilder":
        if n is not None and n < 0:
            raise ValueError(f"Limit must be >= 0, got: {n}")
        self._limit = n
        return self

    async def exec(
        self,
        token: Optional[CancellationToken] = None,
        timeout: Optional[float] = None
    ) -> List[Dict[str, Any]]:
        if timeout is None:
            scan = await self._fetcher(token)
        else:
            try:
                scan = await asyncio.wait_for(self._fetcher(token), timeout)
            except asyncio.TimeoutError as e:
                raise ScanTimeout(e, f"Collection scan exceeded {timeout}s")

        self.warnings = scan.warnings
        return self.apply(scan.documents)

    def apply(self, documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Apply sort, skip and limit to an already materialized result set"""
        results = list(documents)

        if self._sort:
            results = sort_documents(results, self._sort)

        if self._skip > 0:
            results = results[self._skip:]

        if self._limit is not None:
            results = results[:self._limit]

        return results

    def __await__(self):
        return self.exec().__await__()
