"""
Error Handler Utility
=====================

Error types and reporting for the trace viewer host.

The engine itself never raises on malformed trace data. Errors come from the
host side: reading trace files and painting frames. They are logged at the
level matching their severity, kept in a short history and, when the handler
has a parent widget, shown in a message box.
"""

import logging
import traceback
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtWidgets import QMessageBox

# Configure logger
logger = logging.getLogger(__name__)


class ErrorSeverity:
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


# severity -> (log level, message box icon, message box title)
_SEVERITY_PRESENTATION = {
    ErrorSeverity.INFO: (logging.INFO, QMessageBox.Information, "Information"),
    ErrorSeverity.WARNING: (logging.WARNING, QMessageBox.Warning, "Warning"),
    ErrorSeverity.ERROR: (logging.ERROR, QMessageBox.Critical, "Error"),
    ErrorSeverity.CRITICAL: (logging.CRITICAL, QMessageBox.Critical, "Error"),
}


class TraceViewerError(Exception):
    """Base exception for trace viewer errors."""

    def __init__(self, message: str, details: Optional[str] = None,
                 severity: str = ErrorSeverity.ERROR):
        """
        Args:
            message: Short text shown to the user
            details: Longer technical text for the log and the dialog's details pane
            severity: One of the ErrorSeverity values
        """
        super().__init__(message)
        self.message = message
        self.details = details or message
        self.severity = severity


class TraceLoadError(TraceViewerError):
    """A trace file is missing, unreadable or not a trace."""

    def __init__(self, message: str, path: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        lines = [message]
        if path:
            lines.append(f"Trace file: {path}")
        if original_error:
            lines.append(f"Original error: {original_error}")
        super().__init__(message, "\n".join(lines), ErrorSeverity.ERROR)
        self.path = path
        self.original_error = original_error


class RenderError(TraceViewerError):
    """Painting a timeline frame failed."""


@dataclass
class ErrorRecord:
    severity: str
    message: str
    details: str
    context: str = ""
    timestamp: datetime = field(default_factory=datetime.now)


class ErrorHandler(QObject):
    """
    Reports host-side errors.

    Signals:
        error_occurred: Emitted for every handled error (severity, message, details)
    """

    error_occurred = pyqtSignal(str, str, str)

    def __init__(self, parent=None, max_stored_errors: int = 10):
        """
        Args:
            parent: Widget that owns message boxes; no dialogs are shown without one
            max_stored_errors: Number of records kept in the history
        """
        super().__init__(parent)
        self.parent_widget = parent
        self._history = deque(maxlen=max_stored_errors)
        self._error_count = 0

    def handle_error(self, error: Exception, context: str = "",
                     show_dialog: bool = True) -> ErrorRecord:
        """
        Log, record and optionally display an error.

        Args:
            error: The exception raised
            context: What was being done, e.g. "loading trace file"
            show_dialog: Show a message box when the handler has a parent widget

        Returns:
            ErrorRecord: The stored record
        """
        if isinstance(error, TraceViewerError):
            record = ErrorRecord(error.severity, error.message, error.details, context)
        else:
            # Unexpected exceptions keep their traceback in the details
            message = "An unexpected error occurred"
            if context:
                message += f" while {context}"
            trace = ''.join(traceback.format_exception(type(error), error, error.__traceback__))
            record = ErrorRecord(ErrorSeverity.ERROR, message,
                                 f"{type(error).__name__}: {error}\n{trace}", context)

        level = _SEVERITY_PRESENTATION.get(record.severity, _SEVERITY_PRESENTATION[ErrorSeverity.ERROR])[0]
        prefix = f"Error in {context}" if context else "Error"
        logger.log(level, f"{prefix}: {record.details}")

        self._error_count += 1
        self._history.append(record)
        self.error_occurred.emit(record.severity, record.message, record.details)

        if show_dialog and self.parent_widget is not None:
            self._show_error_dialog(record)
        return record

    def _show_error_dialog(self, record: ErrorRecord):
        _, icon, title = _SEVERITY_PRESENTATION.get(
            record.severity, _SEVERITY_PRESENTATION[ErrorSeverity.ERROR])
        box = QMessageBox(icon, title, record.message, QMessageBox.Ok, self.parent_widget)
        if record.details != record.message:
            box.setDetailedText(record.details)
        box.exec_()

    def get_error_history(self) -> List[ErrorRecord]:
        """Most recent errors, oldest first."""
        return list(self._history)

    def get_error_count(self) -> int:
        return self._error_count

    def clear_error_history(self):
        self._history.clear()
        self._error_count = 0
