"""
Confirmation Gate - generic yes/no interstitial for destructive actions.

Closed -> Open(request) -> Pending -> Closed. Only one request can be open
at a time; opening a new one discards the previous one (last request wins).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from Services.models import CommandResult

# callback(done) must eventually call done(CommandResult)
ConfirmCallback = Callable[[Callable[[CommandResult], None]], None]


@dataclass(frozen=True, eq=False)
class ConfirmationRequest:
    """Pending destructive action; identity-compared"""
    title: str
    description: str
    cta_text: str
    callback: ConfirmCallback


class GateState(Enum):
    CLOSED = "closed"
    OPEN = "open"
    PENDING = "pending"


class ConfirmationGate(QObject):
    """Single-slot confirmation state machine shared by the whole window"""

    opened = pyqtSignal(object)
    closed = pyqtSignal()
    pending_changed = pyqtSignal(bool)
    failed = pyqtSignal(object, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._state = GateState.CLOSED
        self._request: Optional[ConfirmationRequest] = None
        self._error: Optional[str] = None

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def request(self) -> Optional[ConfirmationRequest]:
        return self._request

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_open(self) -> bool:
        return self._state is not GateState.CLOSED

    def show_confirm(self, request: ConfirmationRequest):
        """Open the gate; any request already open is discarded"""
        if self._request is not None:
            logging.info(f"Discarding confirmation '{self._request.title}' in favour of '{request.title}'")
        was_pending = self._state is GateState.PENDING
        self._request = request
        self._error = None
        self._state = GateState.OPEN
        if was_pending:
            self.pending_changed.emit(False)
        self.opened.emit(request)

    def accept(self):
        """Invoke the request's callback once; closes when it reports success"""
        if self._state is not GateState.OPEN:
            logging.debug(f"Ignoring accept while gate is {self._state.value}")
            return

        request = self._request
        self._state = GateState.PENDING
        self._error = None
        self.pending_changed.emit(True)

        def done(result: CommandResult):
            self._on_callback_done(request, result)

        try:
            request.callback(done)
        except Exception as e:
            logging.error(f"Confirmation callback for '{request.title}' raised: {e}")
            done(CommandResult.failure(str(e)))

    def dismiss(self):
        """Close without invoking the callback"""
        if self._state is GateState.CLOSED:
            return
        logging.debug(f"Confirmation '{self._request.title}' dismissed")
        self._close()

    def reset(self):
        self._close()

    def _on_callback_done(self, request: ConfirmationRequest, result: CommandResult):
        if request is not self._request or self._state is not GateState.PENDING:
            logging.debug(f"Ignoring completion of discarded confirmation '{request.title}'")
            return

        if result.success:
            self._close()
            return

        self._state = GateState.OPEN
        self._error = result.error or "The action failed"
        self.pending_changed.emit(False)
        self.failed.emit(request, self._error)

    def _close(self):
        was_pending = self._state is GateState.PENDING
        was_open = self._state is not GateState.CLOSED
        self._state = GateState.CLOSED
        self._request = None
        self._error = None
        if was_pending:
            self.pending_changed.emit(False)
        if was_open:
            self.closed.emit()

    def dispose(self):
        self.reset()
