"""
Timeline Window - Standalone host window for the trace timeline.

This module provides the TimelineWindow class which plays the host role
around the engine: it reads trace files, posts them to the engine as update
messages and fulfils the engine's outbound open-file and copy-path requests.
"""

import logging
import os

from PyQt5.QtCore import QUrl
from PyQt5.QtGui import QDesktopServices, QKeySequence
from PyQt5.QtWidgets import QAction, QApplication, QFileDialog, QMainWindow

from trace_timeline.channel import QtHostChannel, update_message
from trace_timeline.config import DEFAULT_CONFIG
from trace_timeline.data.trace_loader import load_trace_file
from trace_timeline.session import TraceSession
from trace_timeline.styles import TimelineStyles
from trace_timeline.timeline_canvas import TimelineCanvas
from trace_timeline.utils.error_handler import ErrorHandler, TraceLoadError
from trace_timeline.utils.path_utils import split_location
from trace_timeline.utils.tooltip_manager import TooltipManager

# Configure logger
logger = logging.getLogger(__name__)


class TimelineWindow(QMainWindow):
    """
    Main window showing one trace at a time.

    Opening or reloading a file always replaces the whole dataset.
    """

    STATUS_TIMEOUT_MS = 4000

    def __init__(self, config=DEFAULT_CONFIG, parent=None):
        """
        Initialize the window.

        Args:
            config (ViewerConfig): Engine configuration
            parent: Parent widget
        """
        super().__init__(parent)
        self.trace_path = None
        self.error_handler = ErrorHandler(self)

        self.session = TraceSession(config)
        self.channel = QtHostChannel(self)
        self.channel.open_file_requested.connect(self._open_source_file)
        self.channel.copy_path_requested.connect(self._copy_path)

        self.canvas = TimelineCanvas(self.session, self.channel, self)
        self.setCentralWidget(self.canvas)

        self._init_menu()
        self.statusBar().setStyleSheet(TimelineStyles.STATUS_BAR_STYLE)
        self.statusBar().showMessage(TooltipManager.get_usage_hint())

        self.setWindowTitle("Time trace")
        self.resize(1200, 700)

    def _init_menu(self):
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("&Open...", self)
        open_action.setShortcut(QKeySequence.Open)
        open_action.triggered.connect(self._choose_trace_file)
        file_menu.addAction(open_action)

        reload_action = QAction("&Reload", self)
        reload_action.setShortcut(QKeySequence.Refresh)
        reload_action.triggered.connect(self.reload_trace)
        file_menu.addAction(reload_action)

        file_menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    def _choose_trace_file(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Open Trace", os.path.dirname(self.trace_path or ''),
            "Trace files (*.json);;All files (*)")
        if path:
            self.open_trace(path)

    def open_trace(self, path):
        """
        Load a trace file and send it to the engine.

        Args:
            path (str): Trace file path

        Returns:
            bool: True on success; failures are reported through the error handler
        """
        try:
            dataset = load_trace_file(path)
        except TraceLoadError as e:
            self.error_handler.handle_error(e, context="loading trace file")
            return False

        self.trace_path = path
        stem = os.path.splitext(os.path.basename(path))[0]
        self.setWindowTitle(f"Time trace: {stem}")
        self.channel.post(update_message(dataset))
        layout = self.session.layout
        self.statusBar().showMessage(
            f"{layout.event_count} events on {len(layout.threads)} threads",
            self.STATUS_TIMEOUT_MS)
        return True

    def reload_trace(self):
        """Re-read the current trace file, replacing the displayed data."""
        if self.trace_path:
            self.open_trace(self.trace_path)

    def _open_source_file(self, detail):
        """
        Open the file named by an event detail with the desktop's default handler.

        QDesktopServices cannot jump to a position, so the parsed line and
        column are only logged.
        """
        path, line, column = split_location(detail)
        if not path or not os.path.exists(path):
            logger.warning(f"Cannot open '{detail}': file not found")
            self.statusBar().showMessage(f"File not found: {path or detail}", self.STATUS_TIMEOUT_MS)
            return
        logger.info(f"Opening {path} (line {line}, column {column})")
        QDesktopServices.openUrl(QUrl.fromLocalFile(path))

    def _copy_path(self, path):
        QApplication.clipboard().setText(path)
        self.statusBar().showMessage(f"Copied: {path}", self.STATUS_TIMEOUT_MS)
