"""
Modal overlay view: hosts whatever widget the ModalHost currently holds.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QDialog, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt

from Base_Components.modal_host import ModalHost
from UI.Styles import AppStyles


class ModalOverlay(QDialog):
    """Window-modal dialog mirroring a ModalHost; never closes on its own"""

    def __init__(self, host: ModalHost, parent=None):
        super().__init__(parent)
        self.host = host
        self._content: Optional[QWidget] = None

        self.setWindowModality(Qt.WindowModality.WindowModal)
        self.setWindowFlags(Qt.WindowType.Dialog | Qt.WindowType.WindowCloseButtonHint)
        self.setMinimumWidth(420)
        self.setStyleSheet(AppStyles.DIALOG_STYLE)

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(16, 16, 16, 16)

        host.shown.connect(self._on_shown)
        host.replaced.connect(self._on_replaced)
        host.hidden.connect(self._on_hidden)

    @property
    def content(self) -> Optional[QWidget]:
        return self._content

    def _on_shown(self, component: QWidget):
        if component is self._content:
            return
        self._content = component
        self._layout.addWidget(component)
        self.setWindowTitle(component.windowTitle() or "")
        component.show()
        if not self.isVisible():
            self.open()

    def _on_replaced(self, previous: QWidget):
        if previous is self._content:
            self._content = None
        self._detach(previous)

    def _on_hidden(self):
        if self._content is not None:
            self._detach(self._content)
            self._content = None
        self.hide()

    def _detach(self, widget: QWidget):
        logging.debug(f"Removing modal content {type(widget).__name__}")
        self._layout.removeWidget(widget)
        widget.hide()
        widget.setParent(None)
        widget.deleteLater()

    def reject(self):
        """Escape and the window close button hide the hosted content"""
        self.host.hide_modal()
        super().reject()
