"""
Debounced Update Manager - collapses bursts of input (typing) into one call
"""

from PyQt6.QtCore import QTimer, QObject
from typing import Callable, Optional
import logging


class DebouncedUpdater(QObject):
    """Manages keyed debounced updates; rescheduling a key restarts its window"""

    def __init__(self, default_delay_ms: int = 200,
                 timer_factory: Optional[Callable[[QObject], QTimer]] = None,
                 parent=None):
        super().__init__(parent)
        self._timers = {}  # Dict of update_key -> QTimer
        self._pending_updates = {}  # Dict of update_key -> (callback, args, kwargs)
        self._default_delay = default_delay_ms
        self._timer_factory = timer_factory

    def schedule_update(self, update_key: str, callback: Callable,
                        delay_ms: int = None, *args, **kwargs):
        """Schedule an update with debouncing"""
        if delay_ms is None:
            delay_ms = self._default_delay

        if update_key in self._timers:
            self._timers[update_key].stop()
        else:
            timer = self._timer_factory(self) if self._timer_factory else QTimer(self)
            timer.setSingleShot(True)
            timer.timeout.connect(lambda: self._execute_update(update_key))
            self._timers[update_key] = timer

        self._pending_updates[update_key] = (callback, args, kwargs)
        self._timers[update_key].start(delay_ms)

        logging.debug(f"Scheduled debounced update: {update_key} (delay: {delay_ms}ms)")

    def _execute_update(self, update_key: str):
        """Execute the pending update"""
        pending = self._pending_updates.pop(update_key, None)
        if pending is None:
            return
        callback, args, kwargs = pending
        try:
            callback(*args, **kwargs)
            logging.debug(f"Executed debounced update: {update_key}")
        except Exception as e:
            logging.error(f"Error executing debounced update {update_key}: {e}")

    def has_pending(self, update_key: str) -> bool:
        return update_key in self._pending_updates

    def cancel_update(self, update_key: str):
        """Cancel a scheduled update"""
        if update_key in self._timers:
            self._timers[update_key].stop()
            self._pending_updates.pop(update_key, None)
            logging.debug(f"Cancelled debounced update: {update_key}")

    def flush_update(self, update_key: str):
        """Immediately execute a scheduled update"""
        if update_key in self._timers:
            self._timers[update_key].stop()
            self._execute_update(update_key)

    def cleanup(self):
        """Clean up all timers and pending updates"""
        for timer in self._timers.values():
            if timer.isActive():
                timer.stop()

        self._timers.clear()
        self._pending_updates.clear()

