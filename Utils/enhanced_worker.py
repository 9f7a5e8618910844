from PyQt6.QtCore import QRunnable, QObject, pyqtSignal
import threading
import logging
import time

from Utils.ui_config import WORKER_TIMEOUT_SECONDS


class WorkerSignals(QObject):
    finished = pyqtSignal(object)
    error = pyqtSignal(object)
    cancelled = pyqtSignal()


class EnhancedBaseWorker(QRunnable):
    def __init__(self, worker_id, timeout=WORKER_TIMEOUT_SECONDS):
        super().__init__()
        self.signals = WorkerSignals()
        self.worker_id = worker_id
        self._cancelled = threading.Event()
        self._completed = threading.Event()
        self._queued_at = time.time()
        self._start_time = None
        self._timeout = timeout

    def cancel(self):
        self._cancelled.set()
        if not self._completed.is_set():
            self.signals.cancelled.emit()

    def is_cancelled(self):
        return self._cancelled.is_set()

    def is_completed(self):
        return self._completed.is_set()

    def waited_too_long(self):
        return (time.time() - self._queued_at) > self._timeout

    def is_timed_out(self):
        if self._start_time is None:
            return False
        return (time.time() - self._start_time) > self._timeout

    def safe_emit_finished(self, result):
        if not self.is_cancelled():
            try:
                self._completed.set()
                self.signals.finished.emit(result)
            except RuntimeError:
                logging.warning(f"Failed to emit finished signal for worker {self.worker_id}")

    def safe_emit_error(self, error):
        if not self.is_cancelled():
            try:
                self._completed.set()
                self.signals.error.emit(error)
            except RuntimeError:
                logging.warning(f"Failed to emit error signal for worker {self.worker_id}")

    def run(self):
        if self.is_cancelled():
            return
        # Give up before doing anything; a finished execute() is always reported as such
        if self.waited_too_long():
            logging.warning(f"Worker {self.worker_id} queued longer than {self._timeout}s, not started")
            self.safe_emit_error(TimeoutError(f"Worker {self.worker_id} was not started within {self._timeout}s"))
            return

        self._start_time = time.time()
        try:
            result = self.execute()
        except Exception as e:
            logging.error(f"Worker {self.worker_id} failed: {e}")
            self.safe_emit_error(e)
            return

        if self.is_timed_out():
            logging.warning(f"Worker {self.worker_id} took longer than {self._timeout}s")
        self.safe_emit_finished(result)

    def execute(self):
        raise NotImplementedError("Subclasses must implement execute method")
