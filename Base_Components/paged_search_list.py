"""
Paged Search List - drives page-by-page, search-filtered loading of a list.

The composite QueryKey (kind, page, search term, take) is both the fetch
trigger and the cache identity. Every fetch gets a sequence number and only
the response of the latest fetch is ever applied; superseded responses are
dropped when they arrive.
"""

import logging
import math
from enum import Enum
from typing import Callable, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from log_handler import method_logger
from Services.models import PageResult
from Utils.enhanced_worker import EnhancedBaseWorker
from Utils.query_client import QueryClient, QueryKey


class ListState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"


class QueryWorker(EnhancedBaseWorker):
    """Runs the list query function for one key"""

    def __init__(self, key: QueryKey, sequence: int, query_function: Callable[[QueryKey], PageResult]):
        super().__init__(f"query_{key.kind}_{sequence}")
        self.key = key
        self.sequence = sequence
        self.query_function = query_function

    def execute(self):
        return self.query_function(self.key)


class PagedSearchList(QObject):
    """Presentation state for a paged, searchable list backed by a query function"""

    state_changed = pyqtSignal(object)
    key_changed = pyqtSignal(object)

    def __init__(self,
                 kind: str,
                 query_function: Callable[[QueryKey], PageResult],
                 query_client: QueryClient,
                 thread_manager,
                 take: int = 5,
                 search_term: str = "",
                 page: int = 0,
                 parent=None):
        super().__init__(parent)
        self._key = QueryKey(kind=kind, page=page, search_term=search_term, take=take)
        self._query_function = query_function
        self._query_client = query_client
        self._thread_manager = thread_manager

        self._state = ListState.IDLE
        self._sequence = 0
        self._displayed_key: Optional[QueryKey] = None
        self._error: Optional[str] = None

        self._query_client.queries_invalidated.connect(self._on_queries_invalidated)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def key(self) -> QueryKey:
        return self._key

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_fetching(self) -> bool:
        return self._state is ListState.LOADING

    @property
    def results(self) -> Tuple:
        page = self._displayed_page()
        return page.results if page else ()

    @property
    def has_more(self) -> bool:
        page = self._displayed_page()
        return page.has_more if page else False

    @property
    def total(self) -> int:
        page = self._displayed_page()
        return page.total if page else 0

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(self.total / self._key.take))

    @property
    def can_go_previous(self) -> bool:
        return self._key.page > 0

    @property
    def can_go_next(self) -> bool:
        return self.has_more

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    def start(self):
        """Initial load; later calls are no-ops"""
        if self._state is ListState.IDLE:
            self._fetch()

    def set_page(self, page: int) -> bool:
        return self._set_key(self._key.with_changes(page=page))

    def set_search_term(self, search_term: str) -> bool:
        """A new search term always starts again from the first page"""
        return self._set_key(self._key.with_changes(search_term=search_term, page=0))

    def set_take(self, take: int) -> bool:
        return self._set_key(self._key.with_changes(take=take, page=0))

    def next_page(self) -> bool:
        if not self.can_go_next:
            return False
        return self.set_page(self._key.page + 1)

    def previous_page(self) -> bool:
        if not self.can_go_previous:
            return False
        return self.set_page(self._key.page - 1)

    @method_logger(log_level=logging.INFO)
    def retry(self):
        """Re-issue the current key"""
        self._fetch()

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    def _set_key(self, key: QueryKey) -> bool:
        if key == self._key:
            return False
        self._key = key
        self._displayed_key = None
        self.key_changed.emit(key)
        self._fetch()
        return True

    def _fetch(self):
        self._sequence += 1
        sequence = self._sequence
        key = self._key
        self._error = None
        self._set_state(ListState.LOADING)

        worker = QueryWorker(key, sequence, self._query_function)
        worker.signals.finished.connect(lambda result: self._on_loaded(sequence, key, result))
        worker.signals.error.connect(lambda error: self._on_failed(sequence, key, error))
        self._thread_manager.submit_worker(worker.worker_id, worker)
        logging.debug(f"Fetching {key} (request #{sequence})")

    def _on_loaded(self, sequence: int, key: QueryKey, result: PageResult):
        if sequence != self._sequence:
            logging.debug(f"Discarding stale response #{sequence} for {key}")
            return

        self._query_client.set_query_data(key, result)
        self._displayed_key = key
        self._set_state(ListState.EMPTY if result.is_empty else ListState.LOADED)

    def _on_failed(self, sequence: int, key: QueryKey, error):
        if sequence != self._sequence:
            logging.debug(f"Discarding stale failure #{sequence} for {key}: {error}")
            return

        logging.error(f"Loading {key.kind} failed: {error}")
        self._error = str(error) or type(error).__name__
        self._displayed_key = None
        self._set_state(ListState.FAILED)

    def _on_queries_invalidated(self, kind: str):
        if kind != self._key.kind or self._state is ListState.IDLE:
            return
        logging.debug(f"Refetching {self._key} after invalidation")
        self._fetch()

    def _displayed_page(self) -> Optional[PageResult]:
        if self._state is ListState.FAILED:
            return None
        return self._query_client.get_query_data(self._displayed_key)

    def _set_state(self, state: ListState):
        self._state = state
        self.state_changed.emit(state)
