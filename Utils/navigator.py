"""
In-app navigation between pages using route strings (path + query string).
"""

import logging
from typing import Dict, Tuple
from urllib.parse import parse_qs, urlencode, urlsplit

from PyQt6.QtCore import QObject, pyqtSignal

from Utils.ui_config import LOOPBACK_HOST, OPEN_CHANNEL_ROUTE


def build_route(path: str, params: Dict[str, str] = None) -> str:
    """Build a route; '@' and ':' are left readable in query values"""
    if not params:
        return path
    return f"{path}?{urlencode(params, safe='@:')}"


def parse_route(route: str) -> Tuple[str, Dict[str, str]]:
    """Split a route into its path and single-valued query parameters"""
    parts = urlsplit(route)
    params = {key: values[-1] for key, values in parse_qs(parts.query).items()}
    return parts.path, params


def open_channel_route(pubkey: str, listen_port: int) -> str:
    """Route to the open-channel flow pre-filled with a local connection string"""
    return build_route(OPEN_CHANNEL_ROUTE, {"connection": f"{pubkey}@{LOOPBACK_HOST}:{listen_port}"})


class Navigator(QObject):
    """Emits navigation requests; the main window decides which page to show"""

    navigation_requested = pyqtSignal(str, dict)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.current_route = None

    def navigate(self, route: str):
        path, params = parse_route(route)
        self.current_route = route
        logging.info(f"Navigating to {path}")
        self.navigation_requested.emit(path, params)
