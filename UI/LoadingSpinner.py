"""
Loading indicators for list pages and forms
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt6.QtCore import QTimer, QRect, Qt
from PyQt6.QtGui import QPainter, QPen, QColor
from UI.Styles import AppColors


class CircularSpinner(QWidget):
    """Rotating arc spinner"""

    def __init__(self, size=32, color=None, parent=None):
        super().__init__(parent)
        self.color = QColor(color) if color else QColor(AppColors.ACCENT_BLUE)
        self.angle = 0
        self.setFixedSize(size, size)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_rotation)
        self.timer.setInterval(16)  # ~60fps

    @property
    def is_spinning(self) -> bool:
        return self.timer.isActive()

    def start_animation(self):
        self.timer.start()

    def stop_animation(self):
        self.timer.stop()

    def update_rotation(self):
        self.angle = (self.angle + 8) % 360
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        center_x = self.width() // 2
        center_y = self.height() // 2
        radius = min(center_x, center_y) - 2
        rect = QRect(center_x - radius, center_y - radius, radius * 2, radius * 2)

        pen = QPen(self.color)
        pen.setWidth(3)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)

        # Fading trail of arcs
        for i in range(8):
            color = QColor(self.color)
            color.setAlphaF(1.0 - (i * 0.1))
            pen.setColor(color)
            painter.setPen(pen)
            painter.drawArc(rect, (self.angle + i * 45) * 16, 45 * 16)


class LoadingPanel(QWidget):
    """Centered spinner with a message, shown in place of content while fetching"""

    def __init__(self, message="Loading...", parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(12)

        self.spinner = CircularSpinner(36, parent=self)
        layout.addWidget(self.spinner, 0, Qt.AlignmentFlag.AlignCenter)

        self.message_label = QLabel(message)
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.setStyleSheet(f"color: {AppColors.TEXT_SUBTLE}; font-size: 13px; background: transparent;")
        layout.addWidget(self.message_label)

    def show_loading(self, message=None):
        if message:
            self.message_label.setText(message)
        self.spinner.start_animation()

    def hide_loading(self):
        self.spinner.stop_animation()
