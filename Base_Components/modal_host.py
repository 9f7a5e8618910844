"""
Modal Host - single-slot overlay for arbitrary form content.
"""

import logging
from typing import Any, Optional

from PyQt6.QtCore import QObject, pyqtSignal


class ModalHost(QObject):
    """At most one modal content is mounted; show() replaces, never stacks"""

    shown = pyqtSignal(object)
    replaced = pyqtSignal(object)
    hidden = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._component: Optional[Any] = None

    @property
    def component(self) -> Optional[Any]:
        return self._component

    @property
    def is_showing(self) -> bool:
        return self._component is not None

    def show_modal(self, component: Any):
        previous = self._component
        self._component = component
        if previous is not None and previous is not component:
            logging.debug(f"Replacing modal {type(previous).__name__} with {type(component).__name__}")
            self.replaced.emit(previous)
        self.shown.emit(component)

    def hide_modal(self):
        if self._component is None:
            return
        self._component = None
        self.hidden.emit()

    def dispose(self):
        self.hide_modal()
