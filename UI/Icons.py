"""
Icons for the nodes console, taken from the active Qt style so no image
files need to ship with the application.
"""

import logging

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication, QStyle


class Icons:
    """Static class to provide consistent icons throughout the app"""

    START = QStyle.StandardPixmap.SP_MediaPlay
    STOP = QStyle.StandardPixmap.SP_MediaStop
    OPEN_CHANNEL = QStyle.StandardPixmap.SP_ArrowForward
    COPY = QStyle.StandardPixmap.SP_FileDialogDetailedView
    BACK = QStyle.StandardPixmap.SP_ArrowBack

    # Cache to store resolved icons
    _icon_cache = {}

    @staticmethod
    def get_icon(pixmap: QStyle.StandardPixmap) -> QIcon:
        """Resolve a standard icon, returning an empty icon without a running application"""
        if pixmap in Icons._icon_cache:
            return Icons._icon_cache[pixmap]

        app = QApplication.instance()
        if not isinstance(app, QApplication):
            logging.debug(f"No QApplication to resolve icon {pixmap}")
            return QIcon()

        icon = app.style().standardIcon(pixmap)
        Icons._icon_cache[pixmap] = icon
        return icon
