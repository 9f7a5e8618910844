"""
Confirmation dialog view. All state lives in the ConfirmationGate; this
widget only mirrors it and forwards the user's choice.
"""

import logging

from PyQt6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame
from PyQt6.QtCore import Qt

from Base_Components.confirmation_gate import ConfirmationGate, ConfirmationRequest
from UI.Styles import AppColors, AppStyles


class ConfirmDialog(QDialog):
    """Window-modal yes/no dialog driven by a ConfirmationGate"""

    def __init__(self, gate: ConfirmationGate, parent=None):
        super().__init__(parent)
        self.gate = gate

        self.setWindowTitle("Confirm")
        self.setWindowModality(Qt.WindowModality.WindowModal)
        self.setWindowFlags(Qt.WindowType.Dialog | Qt.WindowType.WindowCloseButtonHint)
        self.setMinimumWidth(420)
        self.setStyleSheet(AppStyles.DIALOG_STYLE)

        self.setup_ui()

        gate.opened.connect(self._on_opened)
        gate.closed.connect(self._on_closed)
        gate.pending_changed.connect(self._on_pending_changed)
        gate.failed.connect(self._on_failed)

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        self.title_label = QLabel("")
        self.title_label.setObjectName("confirmTitle")
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(self.title_label)

        self.description_label = QLabel("")
        self.description_label.setObjectName("confirmDescription")
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(AppStyles.DIALOG_DESCRIPTION_STYLE)
        layout.addWidget(self.description_label)

        self.error_label = QLabel("")
        self.error_label.setObjectName("confirmError")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(AppStyles.ERROR_TEXT_STYLE)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setStyleSheet(f"color: {AppColors.BORDER_COLOR};")
        layout.addWidget(divider)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setObjectName("confirmCancelButton")
        self.cancel_button.setStyleSheet(AppStyles.BUTTON_SECONDARY_STYLE)
        self.cancel_button.clicked.connect(self.reject)
        button_layout.addWidget(self.cancel_button)

        self.confirm_button = QPushButton("")
        self.confirm_button.setObjectName("confirmButton")
        self.confirm_button.setStyleSheet(AppStyles.BUTTON_DANGER_STYLE)
        self.confirm_button.clicked.connect(self.gate.accept)
        button_layout.addWidget(self.confirm_button)

        layout.addLayout(button_layout)

    def _on_opened(self, request: ConfirmationRequest):
        self.title_label.setText(request.title)
        self.description_label.setText(request.description)
        self.confirm_button.setText(request.cta_text)
        self.confirm_button.setEnabled(True)
        self.error_label.clear()
        self.error_label.hide()
        if not self.isVisible():
            self.open()

    def _on_closed(self):
        # Gate already closed; hide without routing back through reject()
        self.hide()

    def _on_pending_changed(self, pending: bool):
        self.confirm_button.setEnabled(not pending)
        if pending:
            self.error_label.hide()

    def _on_failed(self, request: ConfirmationRequest, message: str):
        logging.warning(f"Confirmation '{request.title}' failed: {message}")
        self.error_label.setText(message)
        self.error_label.show()

    def reject(self):
        """Cancel button, Escape and the window close button all dismiss the gate"""
        self.gate.dismiss()
        super().reject()
