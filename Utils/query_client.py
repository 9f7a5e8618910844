"""
Query Cache
Results of list queries keyed by their query identity. The only mutation
besides storing a freshly fetched page is `invalidate_queries`, which tells
active lists of that kind to refetch. Cached pages stay readable until the
refetched page replaces them.
"""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Optional

from PyQt6.QtCore import QObject, pyqtSignal


@dataclass(frozen=True)
class QueryKey:
    """(entity kind, {page, search term, take}); any field change is a new identity"""
    kind: str
    page: int = 0
    search_term: str = ""
    take: int = 5

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.take <= 0:
            raise ValueError(f"take must be > 0, got {self.take}")

    def with_changes(self, **changes) -> "QueryKey":
        values = {
            "kind": self.kind,
            "page": self.page,
            "search_term": self.search_term,
            "take": self.take,
        }
        values.update(changes)
        return QueryKey(**values)


@dataclass
class CacheEntry:
    """Represents a cache entry with metadata"""
    value: Any
    created_at: float


class QueryClient(QObject):
    """Bounded LRU store of query results with kind-level invalidation"""

    queries_invalidated = pyqtSignal(str)

    def __init__(self, max_size: int = 200, parent=None):
        super().__init__(parent)
        self._entries: "OrderedDict[QueryKey, CacheEntry]" = OrderedDict()
        self._max_size = max_size

    def set_query_data(self, key: QueryKey, value: Any):
        """Store a freshly fetched result; it replaces any previous entry wholesale"""
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(value=value, created_at=time.time())
        while len(self._entries) > self._max_size:
            evicted, entry = self._entries.popitem(last=False)
            logging.debug(f"Evicted cached query {evicted} (cached {time.time() - entry.created_at:.0f}s ago)")

    def get_query_data(self, key: Optional[QueryKey]) -> Optional[Any]:
        if key is None:
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return entry.value

    def invalidate_queries(self, kind: str):
        """Notify observers that every cached query of `kind` is out of date"""
        count = sum(1 for key in self._entries if key.kind == kind)
        logging.info(f"Invalidated {count} cached '{kind}' queries")
        self.queries_invalidated.emit(kind)

    def clear(self):
        self._entries.clear()

    def dispose(self):
        self.clear()

    def __len__(self):
        return len(self._entries)
