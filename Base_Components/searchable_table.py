"""
Searchable Table - generic list card: title, count, debounced search box,
paged table with per-column renderers, and empty/error/loading states.

The widget owns no list state of its own; it renders whatever the
PagedSearchList it is bound to reports.
"""

import logging
from typing import Callable, Dict, List, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QTableWidget, QTableWidgetItem, QHeaderView, QStackedWidget, QAbstractItemView
)
from PyQt6.QtCore import Qt, QObject, QTimer

from Base_Components.base_components import EmptyState, ErrorState
from Base_Components.paged_search_list import ListState, PagedSearchList
from UI.LoadingSpinner import CircularSpinner, LoadingPanel
from UI.Styles import AppColors, AppConstants, AppStyles
from Utils.data_formatters import format_items_count
from Utils.debounced_updater import DebouncedUpdater
from Utils.ui_config import SEARCH_DEBOUNCE_MS

SEARCH_UPDATE_KEY = "search"


class SimpleColumn:
    """Default renderer: the row's display value as plain text"""

    def create_cell(self, row, key: str, parent: QWidget):
        item = QTableWidgetItem(str(row.value_for(key)))
        item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
        return item


class SearchableTable(QWidget):
    """Paged, searchable table bound to a PagedSearchList"""

    TABLE_PAGE, EMPTY_PAGE, ERROR_PAGE, LOADING_PAGE = range(4)

    def __init__(self,
                 title: str,
                 attributes: List[Dict[str, str]],
                 paged_list: PagedSearchList,
                 column_renderers: Optional[Dict[str, object]] = None,
                 empty_message: str = "No items found",
                 empty_description: str = "",
                 search_placeholder: str = "Search",
                 item_noun: str = "item",
                 debounce_ms: int = SEARCH_DEBOUNCE_MS,
                 timer_factory: Optional[Callable[[QObject], QTimer]] = None,
                 parent=None):
        super().__init__(parent)
        self.attributes = attributes
        self.paged_list = paged_list
        self.column_renderers = column_renderers or {}
        self.default_renderer = SimpleColumn()
        self.empty_message = empty_message
        self.empty_description = empty_description
        self.item_noun = item_noun
        self._debounce_ms = debounce_ms
        self._debouncer = DebouncedUpdater(debounce_ms, timer_factory=timer_factory, parent=self)
        self._rows = ()

        self.setup_ui(title, search_placeholder)

        paged_list.state_changed.connect(self._on_state_changed)
        self.error_state.retry_requested.connect(paged_list.retry)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def setup_ui(self, title: str, search_placeholder: str):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(AppConstants.SPACING["MEDIUM"])

        layout.addLayout(self._create_header(title, search_placeholder))

        self.stack = QStackedWidget()
        self.table = self._create_table()
        self.empty_state = EmptyState(self.empty_message, self.empty_description)
        self.error_state = ErrorState()
        self.loading_panel = LoadingPanel()
        for widget in (self.table, self.empty_state, self.error_state, self.loading_panel):
            self.stack.addWidget(widget)
        layout.addWidget(self.stack, 1)

        layout.addLayout(self._create_pagination())

    def _create_header(self, title: str, search_placeholder: str):
        header_layout = QHBoxLayout()

        title_label = QLabel(title)
        title_label.setStyleSheet(AppStyles.TITLE_STYLE)
        header_layout.addWidget(title_label)

        self.items_count = QLabel(format_items_count(0, self.item_noun))
        self.items_count.setObjectName("itemsCount")
        self.items_count.setStyleSheet(AppStyles.ITEMS_COUNT_STYLE)
        self.items_count.setAlignment(Qt.AlignmentFlag.AlignVCenter)
        header_layout.addWidget(self.items_count)

        # Shown during a same-key refetch while the previous rows stay visible
        self.fetching_spinner = CircularSpinner(16, parent=self)
        self.fetching_spinner.hide()
        header_layout.addWidget(self.fetching_spinner)

        header_layout.addStretch()

        self.search_bar = QLineEdit()
        self.search_bar.setObjectName("searchInput")
        self.search_bar.setPlaceholderText(search_placeholder)
        self.search_bar.setClearButtonEnabled(True)
        self.search_bar.setMinimumWidth(AppColors.SEARCH_BAR_MIN_WIDTH)
        self.search_bar.setFixedHeight(AppColors.SEARCH_BAR_HEIGHT)
        self.search_bar.setStyleSheet(AppStyles.SEARCH_STYLE)
        self.search_bar.textChanged.connect(self._on_search_text_changed)
        header_layout.addWidget(self.search_bar)

        return header_layout

    def _create_table(self):
        table = QTableWidget()
        table.setColumnCount(len(self.attributes))
        table.setHorizontalHeaderLabels([attribute["label"] for attribute in self.attributes])
        table.setStyleSheet(AppStyles.TABLE_STYLE)
        table.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        table.setShowGrid(False)
        table.verticalHeader().setVisible(False)
        table.verticalHeader().setDefaultSectionSize(AppConstants.SIZES["ROW_HEIGHT"])
        table.setMouseTracking(True)

        header = table.horizontalHeader()
        header.setSectionsMovable(False)
        header.setDefaultAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        for column in range(len(self.attributes)):
            header.setSectionResizeMode(column, QHeaderView.ResizeMode.Stretch)
        return table

    def _create_pagination(self):
        pagination_layout = QHBoxLayout()
        pagination_layout.addStretch()

        self.previous_button = QPushButton("Previous")
        self.previous_button.setObjectName("previousPageButton")
        self.previous_button.setStyleSheet(AppStyles.BUTTON_SECONDARY_STYLE)
        self.previous_button.clicked.connect(self.paged_list.previous_page)
        pagination_layout.addWidget(self.previous_button)

        self.page_label = QLabel("")
        self.page_label.setObjectName("pageLabel")
        self.page_label.setStyleSheet(AppStyles.PAGINATION_LABEL_STYLE)
        pagination_layout.addWidget(self.page_label)

        self.next_button = QPushButton("Next")
        self.next_button.setObjectName("nextPageButton")
        self.next_button.setStyleSheet(AppStyles.BUTTON_SECONDARY_STYLE)
        self.next_button.clicked.connect(self.paged_list.next_page)
        pagination_layout.addWidget(self.next_button)

        self._update_pagination()
        return pagination_layout

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    @property
    def rows(self):
        """Rows currently rendered in the table"""
        return self._rows

    @property
    def current_page(self) -> int:
        return self.stack.currentIndex()

    def start(self):
        self.paged_list.start()

    def flush_search(self):
        """Apply a pending debounced search immediately"""
        self._debouncer.flush_update(SEARCH_UPDATE_KEY)

    def cell_widget(self, row: int, key: str) -> Optional[QWidget]:
        return self.table.cellWidget(row, self._column_index(key))

    def cleanup(self):
        self._debouncer.cleanup()
        self.loading_panel.hide_loading()
        self.fetching_spinner.stop_animation()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _on_search_text_changed(self, _text: str):
        self._debouncer.schedule_update(SEARCH_UPDATE_KEY, self._apply_search, self._debounce_ms)

    def _apply_search(self):
        search_term = self.search_bar.text().strip()
        logging.debug(f"Applying search term '{search_term}'")
        self.paged_list.set_search_term(search_term)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _on_state_changed(self, state: ListState):
        self.fetching_spinner.hide()
        self.fetching_spinner.stop_animation()

        if state is ListState.LOADING:
            if self.paged_list.results:
                # same-key refetch: keep the previous rows on screen
                self.fetching_spinner.show()
                self.fetching_spinner.start_animation()
            else:
                self._clear_rows()
                self.loading_panel.show_loading()
                self.stack.setCurrentIndex(self.LOADING_PAGE)
        elif state is ListState.LOADED:
            self.loading_panel.hide_loading()
            self._render_rows(self.paged_list.results)
            self.stack.setCurrentIndex(self.TABLE_PAGE)
        elif state is ListState.EMPTY:
            self.loading_panel.hide_loading()
            self._clear_rows()
            self.empty_state.set_text(self.empty_message, self.empty_description)
            self.stack.setCurrentIndex(self.EMPTY_PAGE)
        elif state is ListState.FAILED:
            self.loading_panel.hide_loading()
            self._clear_rows()
            self.error_state.set_error(self.paged_list.error or "Failed to load")
            self.stack.setCurrentIndex(self.ERROR_PAGE)

        self.items_count.setText(format_items_count(self.paged_list.total, self.item_noun))
        self._update_pagination()

    def _render_rows(self, rows):
        self._clear_rows()
        self._rows = tuple(rows)
        self.table.setRowCount(len(self._rows))
        for row_index, row in enumerate(self._rows):
            for column, attribute in enumerate(self.attributes):
                key = attribute["key"]
                renderer = self.column_renderers.get(key, self.default_renderer)
                cell = renderer.create_cell(row, key, self.table)
                if isinstance(cell, QTableWidgetItem):
                    self.table.setItem(row_index, column, cell)
                else:
                    self.table.setCellWidget(row_index, column, cell)

    def _clear_rows(self):
        self._rows = ()
        self.table.clearContents()
        self.table.setRowCount(0)

    def _update_pagination(self):
        key = self.paged_list.key
        self.page_label.setText(f"Page {key.page + 1} of {self.paged_list.page_count}")
        self.previous_button.setEnabled(self.paged_list.can_go_previous)
        self.next_button.setEnabled(self.paged_list.can_go_next)

    def _column_index(self, key: str) -> int:
        for index, attribute in enumerate(self.attributes):
            if attribute["key"] == key:
                return index
        raise KeyError(key)
