"""
Open-channel page, reached from a node row with the peer connection
pre-filled. Submitting emits the channel request for the host to act on.
"""

import logging

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QFormLayout, QSpinBox
)
from PyQt6.QtCore import pyqtSignal

from UI.Icons import Icons
from UI.Styles import AppStyles
from Utils.ui_config import NODES_ROUTE


class OpenChannelPage(QWidget):
    """Channel form: peer connection string and channel amount"""

    open_channel_requested = pyqtSignal(dict)
    back_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        header_layout = QHBoxLayout()
        self.back_button = QPushButton("Back to nodes")
        self.back_button.setObjectName("backButton")
        self.back_button.setIcon(Icons.get_icon(Icons.BACK))
        self.back_button.setStyleSheet(AppStyles.BUTTON_SECONDARY_STYLE)
        self.back_button.clicked.connect(lambda: self.back_requested.emit(NODES_ROUTE))
        header_layout.addWidget(self.back_button)

        title_label = QLabel("Open Channel")
        title_label.setStyleSheet(AppStyles.TITLE_STYLE)
        header_layout.addWidget(title_label)
        header_layout.addStretch()
        layout.addLayout(header_layout)

        form_layout = QFormLayout()
        self.connection_input = QLineEdit()
        self.connection_input.setObjectName("connectionInput")
        self.connection_input.setPlaceholderText("pubkey@host:port")
        self.connection_input.setStyleSheet(AppStyles.SEARCH_STYLE)
        self.connection_input.textChanged.connect(self._update_submit_state)
        form_layout.addRow("Connection", self.connection_input)

        self.amount_input = QSpinBox()
        self.amount_input.setObjectName("amountInput")
        self.amount_input.setRange(20000, 16777215)
        self.amount_input.setSingleStep(10000)
        self.amount_input.setSuffix(" sats")
        form_layout.addRow("Amount", self.amount_input)
        layout.addLayout(form_layout)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.submit_button = QPushButton("Open Channel")
        self.submit_button.setObjectName("openChannelSubmitButton")
        self.submit_button.setStyleSheet(AppStyles.BUTTON_PRIMARY_STYLE)
        self.submit_button.clicked.connect(self.submit)
        button_layout.addWidget(self.submit_button)
        layout.addLayout(button_layout)

        layout.addStretch()
        self._update_submit_state()

    def load_route_params(self, params: dict):
        """Pre-fill the form from the route's query parameters"""
        self.connection_input.setText(params.get("connection", ""))

    @property
    def connection(self) -> str:
        return self.connection_input.text().strip()

    def submit(self):
        if not self.connection:
            return
        request = {"connection": self.connection, "amount_sats": self.amount_input.value()}
        logging.info(f"Open channel requested to {self.connection.split('@')[0][:10]}...")
        self.open_channel_requested.emit(request)

    def _update_submit_state(self, *_args):
        self.submit_button.setEnabled(bool(self.connection))
