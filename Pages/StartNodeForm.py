"""
Start-node form shown in the modal overlay. Starting a node needs the
node's passphrase, so the start command is issued from here rather than
directly from the table row.
"""

import logging
from typing import Callable, Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton
from PyQt6.QtCore import Qt

from Services.node_workers import StartNodeWorker
from UI.Styles import AppStyles
from Utils.data_formatters import truncate_middle


class StartNodeForm(QWidget):
    """Passphrase prompt that starts one node and reports back through callbacks"""

    def __init__(self, client, thread_manager, pubkey: str,
                 callback: Callable[[], None], on_cancel: Callable[[], None],
                 on_failed: Optional[Callable[[Exception], None]] = None, parent=None):
        super().__init__(parent)
        self.client = client
        self.thread_manager = thread_manager
        self.pubkey = pubkey
        self._callback = callback
        self._on_cancel = on_cancel
        self._on_failed = on_failed
        self._submitting = False

        self.setWindowTitle("Start Node")
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        title_label = QLabel("Start Node")
        title_label.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(title_label)

        pubkey_label = QLabel(truncate_middle(self.pubkey))
        pubkey_label.setObjectName("startNodePubkey")
        pubkey_label.setToolTip(self.pubkey)
        pubkey_label.setStyleSheet(AppStyles.DIALOG_DESCRIPTION_STYLE)
        layout.addWidget(pubkey_label)

        self.passphrase_input = QLineEdit()
        self.passphrase_input.setObjectName("passphraseInput")
        self.passphrase_input.setPlaceholderText("Passphrase")
        self.passphrase_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.passphrase_input.returnPressed.connect(self.submit)
        layout.addWidget(self.passphrase_input)

        self.error_label = QLabel("")
        self.error_label.setObjectName("startNodeError")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(AppStyles.ERROR_TEXT_STYLE)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setObjectName("startNodeCancelButton")
        self.cancel_button.setStyleSheet(AppStyles.BUTTON_SECONDARY_STYLE)
        self.cancel_button.clicked.connect(self.cancel)
        button_layout.addWidget(self.cancel_button)

        self.start_button = QPushButton("Start Node")
        self.start_button.setObjectName("startNodeSubmitButton")
        self.start_button.setStyleSheet(AppStyles.BUTTON_PRIMARY_STYLE)
        self.start_button.setDefault(True)
        self.start_button.clicked.connect(self.submit)
        button_layout.addWidget(self.start_button)

        layout.addLayout(button_layout)

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def submit(self):
        if self._submitting:
            return

        passphrase = self.passphrase_input.text()
        if not passphrase:
            self._show_error("Passphrase is required")
            return

        self._set_submitting(True)
        self.error_label.hide()

        worker = StartNodeWorker(self.client, self.pubkey, passphrase)
        worker.signals.finished.connect(self._on_started)
        worker.signals.error.connect(self._on_start_failed)

        # Outcome continuations hold no reference to the form: the node may finish
        # starting after the form was dismissed and deleted
        callback, on_failed = self._callback, self._on_failed
        worker.signals.finished.connect(lambda _pubkey: callback())
        if on_failed is not None:
            worker.signals.error.connect(lambda error: on_failed(error))
        self.thread_manager.submit_worker(worker.worker_id, worker)

    def cancel(self):
        self._on_cancel()

    def _on_started(self, _pubkey):
        self._set_submitting(False)
        logging.info(f"Node {self.pubkey[:10]}... started")

    def _on_start_failed(self, error):
        self._set_submitting(False)
        logging.error(f"Starting node {self.pubkey[:10]}... failed: {error}")
        self._show_error(str(error) or type(error).__name__)

    def _show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def _set_submitting(self, submitting: bool):
        self._submitting = submitting
        self.start_button.setEnabled(not submitting)
        self.passphrase_input.setEnabled(not submitting)
        self.start_button.setText("Starting..." if submitting else "Start Node")
