from PyQt6.QtCore import QObject, QThreadPool
import threading
import logging

from Utils.ui_config import MAX_CONCURRENT_WORKERS


class EnhancedThreadPoolManager(QObject):
    def __init__(self, max_threads=MAX_CONCURRENT_WORKERS):
        super().__init__()
        self.thread_pool = QThreadPool()
        self.thread_pool.setMaxThreadCount(max_threads)
        self.active_workers = {}
        self.lock = threading.RLock()
        self._shutdown = False

    def submit_worker(self, worker_id, worker):
        if self._shutdown:
            logging.warning(f"Thread manager is shut down, dropping worker {worker_id}")
            return False

        with self.lock:
            def cleanup(*_args):
                with self.lock:
                    if self.active_workers.get(worker_id) is worker:
                        self.active_workers.pop(worker_id, None)

            worker.signals.finished.connect(cleanup)
            worker.signals.error.connect(cleanup)
            worker.signals.cancelled.connect(cleanup)

            self.active_workers[worker_id] = worker
            worker.setAutoDelete(True)
            self.thread_pool.start(worker)
            logging.debug(f"Submitted worker {worker_id}")
            return True

    def shutdown(self):
        self._shutdown = True

        with self.lock:
            for worker in list(self.active_workers.values()):
                worker.cancel()

            if not self.thread_pool.waitForDone(1000):
                logging.warning("Thread pool did not shut down gracefully within 1 second")

            self.active_workers.clear()

    def dispose(self):
        self.shutdown()

