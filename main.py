import os
import sys
import argparse
import logging
import traceback
from datetime import datetime

from PyQt6.QtWidgets import QApplication, QMainWindow, QMessageBox, QStackedWidget
from PyQt6.QtCore import qVersion

from log_handler import setup_logging, log_exception
from core.app_context import AppContext
from Pages.NodesPage import NodesPage
from Pages.OpenChannelPage import OpenChannelPage
from UI.ConfirmDialog import ConfirmDialog
from UI.ModalOverlay import ModalOverlay
from UI.Styles import AppStyles
from Utils.admin_config import get_admin_config
from Utils.error_handler import safe_execute
from Utils.ui_config import NODES_ROUTE, OPEN_CHANNEL_ROUTE

log_file = setup_logging()


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Global handler for uncaught exceptions"""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logging.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    app = QApplication.instance()
    if app is not None and not getattr(app, '_showing_error', False):
        app._showing_error = True
        QMessageBox.critical(None, "Error",
                             f"An unexpected error occurred:\n{str(exc_value)}\n\nDetails have been logged to: {log_file}")
        app._showing_error = False


class MainWindow(QMainWindow):
    """Console window: nodes inventory plus the open-channel flow"""

    def __init__(self, context: AppContext, items_per_page: int):
        super().__init__()
        self.context = context
        self._shutting_down = False

        self.setWindowTitle("Sensei Admin - Nodes")
        self.setMinimumSize(1100, 600)
        self.setStyleSheet(AppStyles.MAIN_STYLE)

        self.init_ui(items_per_page)

        context.navigator.navigation_requested.connect(self.handle_navigation)

    def init_ui(self, items_per_page: int):
        self.stacked_widget = QStackedWidget()
        self.setCentralWidget(self.stacked_widget)

        self.nodes_page = NodesPage(self.context, items_per_page=items_per_page)
        self.nodes_page.command_failed.connect(self._on_command_failed)
        self.stacked_widget.addWidget(self.nodes_page)

        self.open_channel_page = OpenChannelPage()
        self.open_channel_page.back_requested.connect(self.context.navigator.navigate)
        self.open_channel_page.open_channel_requested.connect(self._on_open_channel_requested)
        self.stacked_widget.addWidget(self.open_channel_page)

        # Window-wide overlays mirroring the shared gate and modal host
        self.confirm_dialog = ConfirmDialog(self.context.confirmation_gate, self)
        self.modal_overlay = ModalOverlay(self.context.modal_host, self)

        self.stacked_widget.setCurrentWidget(self.nodes_page)

    def handle_navigation(self, path: str, params: dict):
        if path == OPEN_CHANNEL_ROUTE:
            self.open_channel_page.load_route_params(params)
            self.stacked_widget.setCurrentWidget(self.open_channel_page)
        elif path == NODES_ROUTE:
            self.stacked_widget.setCurrentWidget(self.nodes_page)
        else:
            logging.warning(f"Unknown route: {path}")

    def _on_command_failed(self, pubkey: str, message: str):
        self.statusBar().showMessage(f"Node {pubkey[:10]}...: {message}", 5000)

    def _on_open_channel_requested(self, request: dict):
        logging.info(f"Open channel request submitted: {request['amount_sats']} sats")
        self.statusBar().showMessage("Channel request submitted", 5000)

    def showEvent(self, event):
        super().showEvent(event)
        self.nodes_page.load_data()

    def closeEvent(self, event):
        if self._shutting_down:
            super().closeEvent(event)
            return

        logging.info("Starting application shutdown sequence...")
        self._shutting_down = True
        try:
            safe_execute(self.nodes_page.cleanup, "cleaning up nodes page")
            self.context.dispose()
            logging.info("Application shutdown completed successfully.")
        except Exception as e:
            log_exception(e, "Error during application shutdown")
        super().closeEvent(event)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sensei admin console: nodes inventory")
    parser.add_argument("--base-url", help="Admin API base URL (overrides the saved setting)")
    parser.add_argument("--items-per-page", type=int, help="Rows per page (saved for later runs)")
    return parser.parse_args(argv)


def main(argv=None):
    """Application entry point"""
    sys.excepthook = global_exception_handler
    args = parse_args(argv)

    logging.info(f"Python version: {sys.version}")
    logging.info(f"PyQt version: {qVersion()}")
    logging.info(f"Process ID: {os.getpid()}")

    config = get_admin_config()
    if args.base_url:
        config.set_base_url(args.base_url)
    if args.items_per_page:
        config.set_items_per_page(args.items_per_page)
    logging.info(f"Admin API: {config.get_base_url()}")

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    app.setQuitOnLastWindowClosed(True)

    context = AppContext(config)
    window = MainWindow(context, items_per_page=config.get_items_per_page())
    window.show()

    exit_code = app.exec()
    logging.info(f"Application exited with code: {exit_code}")
    return exit_code


if __name__ == "__main__":
    exit_status = 1
    try:
        exit_status = main()
    except SystemExit as se:
        exit_status = se.code if se.code is not None else 0
    except Exception as e:
        current_time = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        logging.critical(f"[{current_time}] FATAL EXCEPTION: {str(e)}\n{traceback.format_exc()}")
    finally:
        logging.info(f"Exiting application with status code: {exit_status}")
        sys.exit(exit_status)
