"""
Row actions for the nodes table.

The available actions are a pure function of the node status. Start is
delegated to the start-node form shown in the modal host; stop goes through
the confirmation gate and only invalidates the cached listing once the stop
command has reported success.
"""

import logging
from enum import Enum
from typing import Callable, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from Base_Components.confirmation_gate import ConfirmationGate, ConfirmationRequest
from Base_Components.modal_host import ModalHost
from Services.models import CommandResult, DisplayRow, NodeStatus
from Services.node_workers import StopNodeWorker
from Utils.error_handler import get_error_handler
from Utils.navigator import Navigator, open_channel_route
from Utils.query_client import QueryClient
from Utils.ui_config import NODES_QUERY_KIND

STOP_NODE_TITLE = "Are you sure you want to stop this node?"
STOP_NODE_DESCRIPTION = (
    "A stopped node can no longer send, receive, or route payments.  "
    "The node will also no longer be monitoring the chain for misbehavior."
)
STOP_NODE_CTA = "Yes, stop it"


class RowAction(Enum):
    START = "start"
    STOP = "stop"
    OPEN_CHANNEL = "open_channel"


_STATUS_ACTIONS = {
    NodeStatus.STOPPED: (RowAction.START, RowAction.OPEN_CHANNEL),
    NodeStatus.RUNNING: (RowAction.STOP, RowAction.OPEN_CHANNEL),
}


def actions_for_status(status: NodeStatus) -> Tuple[RowAction, ...]:
    """Stopped -> start + open channel; Running -> stop + open channel"""
    return _STATUS_ACTIONS[status]


class RowActionController(QObject):
    """Mediates start/stop/open-channel for table rows"""

    command_failed = pyqtSignal(str, str)

    def __init__(self,
                 client,
                 query_client: QueryClient,
                 confirmation_gate: ConfirmationGate,
                 modal_host: ModalHost,
                 navigator: Navigator,
                 thread_manager,
                 start_form_factory: Callable,
                 parent=None):
        super().__init__(parent)
        self._client = client
        self._query_client = query_client
        self._confirmation_gate = confirmation_gate
        self._modal_host = modal_host
        self._navigator = navigator
        self._thread_manager = thread_manager
        self._start_form_factory = start_form_factory

    def actions_for(self, row: DisplayRow) -> Tuple[RowAction, ...]:
        return actions_for_status(row.status)

    # ------------------------------------------------------------------
    # Start
    # ------------------------------------------------------------------
    def start_node_clicked(self, row: DisplayRow):
        pubkey = row.pubkey
        form = None

        def started():
            self._node_started(form)

        form = self._start_form_factory(
            pubkey=pubkey,
            callback=started,
            on_cancel=self._modal_host.hide_modal,
            on_failed=lambda error: self._on_start_failed(pubkey, error),
        )
        self._modal_host.show_modal(form)

    def _node_started(self, form):
        self._query_client.invalidate_queries(NODES_QUERY_KIND)
        # The form may have been dismissed or replaced while the node was starting
        if self._modal_host.component is form:
            self._modal_host.hide_modal()

    def _on_start_failed(self, pubkey: str, error):
        get_error_handler().handle_error(error, "starting node", show_dialog=False)
        self.command_failed.emit(pubkey, str(error) or type(error).__name__)

    # ------------------------------------------------------------------
    # Stop
    # ------------------------------------------------------------------
    def stop_node_clicked(self, row: DisplayRow):
        pubkey = row.pubkey
        self._confirmation_gate.show_confirm(ConfirmationRequest(
            title=STOP_NODE_TITLE,
            description=STOP_NODE_DESCRIPTION,
            cta_text=STOP_NODE_CTA,
            callback=lambda done: self._stop_node(pubkey, done),
        ))

    def _stop_node(self, pubkey: str, done: Callable[[CommandResult], None]):
        worker = StopNodeWorker(self._client, pubkey)
        worker.signals.finished.connect(lambda _result: self._on_stop_finished(pubkey, done))
        worker.signals.error.connect(lambda error: self._on_stop_failed(pubkey, error, done))
        self._thread_manager.submit_worker(worker.worker_id, worker)

    def _on_stop_finished(self, pubkey: str, done: Callable[[CommandResult], None]):
        logging.info(f"Node {pubkey[:10]}... stopped")
        self._query_client.invalidate_queries(NODES_QUERY_KIND)
        done(CommandResult.ok())

    def _on_stop_failed(self, pubkey: str, error, done: Callable[[CommandResult], None]):
        get_error_handler().handle_error(error, "stopping node", show_dialog=False)
        message = str(error) or type(error).__name__
        self.command_failed.emit(pubkey, message)
        done(CommandResult.failure(message))

    # ------------------------------------------------------------------
    # Open channel
    # ------------------------------------------------------------------
    def open_channel_link(self, row: DisplayRow) -> str:
        return open_channel_route(row.pubkey, row.listen_port)

    def open_channel_clicked(self, row: DisplayRow):
        self._navigator.navigate(self.open_channel_link(row))
