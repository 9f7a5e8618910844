"""
Centralized Error Handling
Consistent logging and optional user notification for unexpected errors.
Expected failures (fetch/command errors) are surfaced by the component that
owns them; this handler is for logging them and for everything else.
"""

import logging
import threading
import time
import traceback
from datetime import datetime
from typing import Any, Callable
from functools import wraps

from PyQt6.QtWidgets import QMessageBox, QApplication

APP_TITLE = "Sensei Admin"


class ErrorHandler:
    """Centralized error handler with consistent patterns"""

    def __init__(self):
        self._error_lock = threading.RLock()
        self._last_error_time = 0
        self._error_cooldown = 2.0  # seconds between error dialogs
        self._recent_errors = {}  # message hash -> last shown time
        self._error_message_cooldown = 10.0  # seconds before showing same error again

    def handle_error(self, error: Exception, context: str = "", show_dialog: bool = True) -> None:
        """Handle errors with consistent logging and optional user notification"""
        error_message = str(error)

        logging.error(f"Error in {context}: {error_message}")
        logging.debug(f"Full traceback: {traceback.format_exc()}")

        if show_dialog and self._should_show_dialog(error_message):
            self._show_error_dialog(context, error_message)

    def _should_show_dialog(self, error_message: str) -> bool:
        """Cooldown and duplicate suppression for error dialogs"""
        with self._error_lock:
            current_time = time.time()

            error_hash = hash(error_message)
            last_shown = self._recent_errors.get(error_hash)
            if last_shown is not None and current_time - last_shown < self._error_message_cooldown:
                logging.debug(f"Suppressing duplicate error dialog: {error_message[:50]}...")
                return False

            if current_time - self._last_error_time <= self._error_cooldown:
                return False

            self._last_error_time = current_time
            self._recent_errors[error_hash] = current_time

            old_entries = [k for k, v in self._recent_errors.items()
                           if current_time - v > self._error_message_cooldown * 2]
            for k in old_entries:
                del self._recent_errors[k]
            return True

    def _show_error_dialog(self, context: str, error_message: str) -> None:
        """Show an error dialog when a GUI application is running"""
        if not isinstance(QApplication.instance(), QApplication):
            return

        msg = QMessageBox()
        msg.setIcon(QMessageBox.Icon.Critical)
        msg.setWindowTitle(f"{APP_TITLE} - Error")
        msg.setText(self.format_user_friendly_message(context, error_message))
        msg.setDetailedText(
            f"Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n"
            f"Context: {context}\n"
            f"Original Error: {error_message}"
        )
        msg.setStandardButtons(QMessageBox.StandardButton.Ok)
        msg.exec()

    def format_user_friendly_message(self, context: str, error_message: str) -> str:
        """Replace common transport errors with readable explanations"""
        user_message = error_message

        friendly_patterns = {
            'connection refused': 'Unable to connect to the admin API. Please check that the Sensei server is running.',
            'failed to establish a new connection': 'Unable to connect to the admin API. Please check the configured URL.',
            'timed out': 'Connection timeout. The operation took too long to complete.',
            'unauthorized': 'Authentication failed. Please log in to the admin API again.',
            'not found': 'Node not found. It may have been deleted.',
        }

        error_lower = error_message.lower()
        for pattern, friendly_msg in friendly_patterns.items():
            if pattern in error_lower:
                user_message = friendly_msg
                break

        if not context:
            return user_message
        return f"An error occurred while {context}:\n\n{user_message}"


def error_handler(context: str = "", show_dialog: bool = False):
    """Decorator for UI slots: log (and optionally show) errors instead of crashing the event loop"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _global_error_handler.handle_error(e, context or func.__name__, show_dialog)
                return None
        return wrapper
    return decorator


# Global instance
_global_error_handler = ErrorHandler()


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance"""
    return _global_error_handler


def safe_execute(func: Callable, context: str = "", default_return: Any = None) -> Any:
    """Execute function with error handling, return default on error"""
    try:
        return func()
    except Exception as e:
        _global_error_handler.handle_error(e, context, show_dialog=False)
        return default_return
