"""
Nodes page: paged, searchable inventory of the managed nodes with
per-row copy, start, stop and open-channel actions.
"""

import functools
import logging
from typing import Callable, Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QToolButton
from PyQt6.QtCore import Qt, QObject, QSize, QTimer, pyqtSignal
from PyQt6.QtGui import QCursor

from Base_Components.base_components import StatusLabel
from Base_Components.paged_search_list import PagedSearchList
from Base_Components.searchable_table import SearchableTable
from Pages.node_row_actions import RowAction, RowActionController
from Pages.StartNodeForm import StartNodeForm
from Services.models import DisplayRow, NodeStatus, PageResult
from UI.Icons import Icons
from UI.Styles import AppColors, AppConstants, AppStyles
from Utils.clipboard_feedback import ClipboardFeedback, write_to_clipboard
from Utils.data_formatters import transform_results
from Utils.error_handler import error_handler
from Utils.query_client import QueryKey
from Utils.ui_config import COPIED_LABEL, COPY_FEEDBACK_MS, DEFAULT_ITEMS_PER_PAGE, NODES_QUERY_KIND

NODE_ATTRIBUTES = [
    {"key": "username", "label": "Username"},
    {"key": "alias", "label": "Alias"},
    {"key": "role", "label": "Role"},
    {"key": "connectionInfo", "label": "Connection Info"},
    {"key": "status", "label": "Status"},
    {"key": "actions", "label": "Actions"},
]

EMPTY_MESSAGE = "No nodes found"
EMPTY_DESCRIPTION = "Try changing the search term"


def make_nodes_query_function(client) -> Callable[[QueryKey], PageResult]:
    """Query function for the nodes list: fetch one page and build its display rows"""
    def query_nodes(key: QueryKey) -> PageResult:
        listing = client.list_nodes(key.page, key.search_term, key.take)
        return PageResult(
            results=tuple(transform_results(listing.nodes)),
            has_more=listing.has_more,
            total=listing.total,
        )
    return query_nodes


#------------------------------------------------------------------
# Column renderers
#------------------------------------------------------------------
class StatusColumn:
    """Status pill; green while running"""

    def create_cell(self, row: DisplayRow, key: str, parent: QWidget):
        is_running = row.status is NodeStatus.RUNNING
        color = AppColors.STATUS_ACTIVE if is_running else AppColors.STATUS_STOPPED
        label = StatusLabel(row.status.label, color, parent)
        label.setObjectName("statusLabel")
        return label


class ConnectionInfoCell(QWidget):
    """Truncated connection string; click copies the full string, hover reveals the copy icon"""

    def __init__(self, row: DisplayRow, clipboard_writer, timer_factory=None,
                 delay_ms: int = COPY_FEEDBACK_MS, parent=None):
        super().__init__(parent)
        self.row = row
        self.feedback = ClipboardFeedback(
            clipboard_writer=clipboard_writer,
            delay_ms=delay_ms,
            timer_factory=timer_factory,
            parent=self,
        )
        self.feedback.copied_changed.connect(self._on_copied_changed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(AppConstants.SPACING["TINY"])

        self.text_button = QPushButton(row.connection_info)
        self.text_button.setObjectName("connectionInfoButton")
        self.text_button.setToolTip(row.full_connection_string)
        self.text_button.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.text_button.setStyleSheet(AppStyles.LINK_BUTTON_STYLE)
        self.text_button.clicked.connect(self.copy)
        layout.addWidget(self.text_button)

        self.copy_button = QToolButton()
        self.copy_button.setObjectName("copyButton")
        self.copy_button.setIcon(Icons.get_icon(Icons.COPY))
        self.copy_button.setIconSize(QSize(AppConstants.SIZES["ICON_SIZE"], AppConstants.SIZES["ICON_SIZE"]))
        self.copy_button.setToolTip("Copy connection info")
        self.copy_button.setStyleSheet(AppStyles.ACTION_BUTTON_STYLE)
        self.copy_button.clicked.connect(self.copy)
        self.copy_button.hide()
        layout.addWidget(self.copy_button)

        self.copied_label = QLabel(COPIED_LABEL)
        self.copied_label.setObjectName("copiedLabel")
        self.copied_label.setStyleSheet(AppStyles.COPIED_LABEL_STYLE)
        self.copied_label.hide()
        layout.addWidget(self.copied_label)

        layout.addStretch()
        self._hovered = False
        self.setStyleSheet("background-color: transparent;")

    @property
    def copied(self) -> bool:
        return self.feedback.copied

    def copy(self):
        self.feedback.trigger(self.row.full_connection_string)

    def enterEvent(self, event):
        self._hovered = True
        self._update_visibility()
        super().enterEvent(event)

    def leaveEvent(self, event):
        self._hovered = False
        self._update_visibility()
        super().leaveEvent(event)

    def _on_copied_changed(self, _copied: bool):
        self._update_visibility()

    def _update_visibility(self):
        copied = self.feedback.copied
        self.text_button.setVisible(not copied)
        self.copied_label.setVisible(copied)
        self.copy_button.setVisible(self._hovered and not copied)


class ConnectionInfoColumn:
    """Builds one ConnectionInfoCell (with its own feedback timer) per row"""

    def __init__(self, clipboard_writer=write_to_clipboard, timer_factory=None):
        self.clipboard_writer = clipboard_writer
        self.timer_factory = timer_factory

    def create_cell(self, row: DisplayRow, key: str, parent: QWidget):
        return ConnectionInfoCell(row, self.clipboard_writer, self.timer_factory, parent=parent)


class ActionsCell(QWidget):
    """Icon buttons for the actions available to one row"""

    BUTTONS = {
        RowAction.START: ("startButton", Icons.START, "Start node"),
        RowAction.STOP: ("stopButton", Icons.STOP, "Stop node"),
        RowAction.OPEN_CHANNEL: ("openChannelButton", Icons.OPEN_CHANNEL, "Open channel"),
    }

    def __init__(self, row: DisplayRow, controller: RowActionController, parent=None):
        super().__init__(parent)
        self.row = row
        self.controller = controller
        self.buttons = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(AppConstants.SPACING["SMALL"])

        for action in controller.actions_for(row):
            object_name, pixmap, tooltip = self.BUTTONS[action]
            button = QToolButton()
            button.setObjectName(object_name)
            button.setIcon(Icons.get_icon(pixmap))
            button.setIconSize(QSize(AppConstants.SIZES["ICON_SIZE"], AppConstants.SIZES["ICON_SIZE"]))
            button.setToolTip(tooltip)
            button.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
            button.setStyleSheet(AppStyles.ACTION_BUTTON_STYLE)
            button.clicked.connect(functools.partial(self._handle_action, action))
            layout.addWidget(button)
            self.buttons[action] = button

        if RowAction.OPEN_CHANNEL in self.buttons:
            self.buttons[RowAction.OPEN_CHANNEL].setStatusTip(controller.open_channel_link(row))

        layout.addStretch()
        self.setStyleSheet("background-color: transparent;")

    @error_handler("handling node action", show_dialog=True)
    def _handle_action(self, action: RowAction, _checked=False):
        if action is RowAction.START:
            self.controller.start_node_clicked(self.row)
        elif action is RowAction.STOP:
            self.controller.stop_node_clicked(self.row)
        elif action is RowAction.OPEN_CHANNEL:
            self.controller.open_channel_clicked(self.row)


class ActionsColumn:
    def __init__(self, controller: RowActionController):
        self.controller = controller

    def create_cell(self, row: DisplayRow, key: str, parent: QWidget):
        return ActionsCell(row, self.controller, parent)


#------------------------------------------------------------------
# Page
#------------------------------------------------------------------
class NodesPage(QWidget):
    """Nodes list card wired to the application context"""

    command_failed = pyqtSignal(str, str)

    def __init__(self, context,
                 items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
                 clipboard_writer=write_to_clipboard,
                 timer_factory: Optional[Callable[[QObject], QTimer]] = None,
                 parent=None):
        super().__init__(parent)
        self.context = context

        self.paged_list = PagedSearchList(
            kind=NODES_QUERY_KIND,
            query_function=make_nodes_query_function(context.client),
            query_client=context.query_client,
            thread_manager=context.thread_manager,
            take=items_per_page,
            parent=self,
        )

        self.controller = RowActionController(
            client=context.client,
            query_client=context.query_client,
            confirmation_gate=context.confirmation_gate,
            modal_host=context.modal_host,
            navigator=context.navigator,
            thread_manager=context.thread_manager,
            start_form_factory=functools.partial(
                StartNodeForm, context.client, context.thread_manager
            ),
            parent=self,
        )
        self.controller.command_failed.connect(self.command_failed)

        self.table = SearchableTable(
            title="Nodes",
            attributes=NODE_ATTRIBUTES,
            paged_list=self.paged_list,
            column_renderers={
                "status": StatusColumn(),
                "connectionInfo": ConnectionInfoColumn(clipboard_writer, timer_factory),
                "actions": ActionsColumn(self.controller),
            },
            empty_message=EMPTY_MESSAGE,
            empty_description=EMPTY_DESCRIPTION,
            search_placeholder="Search",
            item_noun="node",
            timer_factory=timer_factory,
            parent=self,
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.table)

    def load_data(self):
        logging.info("Loading nodes")
        self.table.start()

    def cleanup(self):
        self.table.cleanup()
