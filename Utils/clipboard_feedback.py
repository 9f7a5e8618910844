"""
Per-row clipboard copy feedback: Idle -> Copied -> Idle.
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from PyQt6.QtWidgets import QApplication

from Services.errors import ClipboardError
from Utils.ui_config import COPY_FEEDBACK_MS


def write_to_clipboard(text: str):
    """Write text to the system clipboard; raises ClipboardError when there is none"""
    app = QApplication.instance()
    if app is None or not isinstance(app, QApplication):
        raise ClipboardError("No GUI application available for clipboard access")
    clipboard = app.clipboard()
    if clipboard is None:
        raise ClipboardError("System clipboard is not available")
    clipboard.setText(text)


class ClipboardFeedback(QObject):
    """Copy state for one row; each instance owns its own reset timer"""

    copied_changed = pyqtSignal(bool)

    def __init__(self,
                 clipboard_writer: Callable[[str], None] = write_to_clipboard,
                 delay_ms: int = COPY_FEEDBACK_MS,
                 timer_factory: Optional[Callable[[QObject], QTimer]] = None,
                 parent=None):
        super().__init__(parent)
        self._clipboard_writer = clipboard_writer
        self._delay_ms = delay_ms
        self._copied = False

        self._timer = timer_factory(self) if timer_factory else QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._reset)

    @property
    def copied(self) -> bool:
        return self._copied

    def trigger(self, text: str) -> bool:
        """Copy text and show feedback; retriggering restarts the reset window"""
        try:
            self._clipboard_writer(text)
        except ClipboardError as e:
            logging.warning(f"Clipboard copy skipped: {e}")
            return False

        # start() on an active single-shot timer restarts it
        self._timer.start(self._delay_ms)
        self._set_copied(True)
        return True

    def cancel(self):
        """Stop the pending reset and return to idle"""
        self._timer.stop()
        self._set_copied(False)

    def _reset(self):
        self._set_copied(False)

    def _set_copied(self, copied: bool):
        if self._copied != copied:
            self._copied = copied
            self.copied_changed.emit(copied)
