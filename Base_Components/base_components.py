"""
Shared building blocks for list pages: status pill, empty and error states.
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor

from UI.Styles import AppStyles


class StatusLabel(QWidget):
    """
    Status text with consistent styling and a transparent background
    so it can sit inside a table cell.
    """
    clicked = pyqtSignal()

    def __init__(self, status_text, color=None, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)

        self.label = QLabel(status_text)
        layout.addWidget(self.label)
        self.setColor(color)
        self.setStyleSheet("background-color: transparent;")

    def text(self):
        return self.label.text()

    def setText(self, text):
        self.label.setText(text)

    def setColor(self, color):
        if color:
            self.label.setStyleSheet(f"color: {QColor(color).name()}; background-color: transparent;")
        else:
            self.label.setStyleSheet("background-color: transparent;")

    def mousePressEvent(self, event):
        self.clicked.emit()
        super().mousePressEvent(event)


class EmptyState(QWidget):
    """Headline plus optional supporting text, shown instead of an empty table"""

    def __init__(self, message, description=None, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setContentsMargins(30, 40, 30, 40)

        self.message_label = QLabel(message)
        self.message_label.setObjectName("emptyHeadline")
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.setStyleSheet(AppStyles.EMPTY_LABEL_STYLE)
        layout.addWidget(self.message_label)

        self.description_label = QLabel(description or "")
        self.description_label.setObjectName("emptySubtext")
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(AppStyles.EMPTY_SUBTEXT_STYLE)
        self.description_label.setVisible(bool(description))
        layout.addWidget(self.description_label)

    def set_text(self, message, description=None):
        self.message_label.setText(message)
        self.description_label.setText(description or "")
        self.description_label.setVisible(bool(description))


class ErrorState(QWidget):
    """Load failure message with a retry button"""

    retry_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(12)

        self.message_label = QLabel("")
        self.message_label.setObjectName("errorMessage")
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet(AppStyles.ERROR_TEXT_STYLE)
        layout.addWidget(self.message_label)

        self.retry_button = QPushButton("Retry")
        self.retry_button.setObjectName("retryButton")
        self.retry_button.setStyleSheet(AppStyles.BUTTON_SECONDARY_STYLE)
        self.retry_button.clicked.connect(self.retry_requested)
        layout.addWidget(self.retry_button, 0, Qt.AlignmentFlag.AlignCenter)

    def set_error(self, message):
        self.message_label.setText(message)
