"""
Host Channel - Message passing between the timeline engine and its host.

Inbound messages carry datasets (``{"command": "update", "data": ...}``);
outbound messages are fire-and-forget requests the host fulfils
(``openFile`` and ``copyPath``).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from PyQt5.QtCore import QObject, pyqtSignal

# Configure logger
logger = logging.getLogger(__name__)

COMMAND_UPDATE = 'update'
COMMAND_OPEN_FILE = 'openFile'
COMMAND_COPY_PATH = 'copyPath'


def open_file_message(path: str) -> Dict[str, str]:
    return {'command': COMMAND_OPEN_FILE, 'path': path}


def copy_path_message(path: str) -> Dict[str, str]:
    return {'command': COMMAND_COPY_PATH, 'path': path}


def update_message(data: Any) -> Dict[str, Any]:
    return {'command': COMMAND_UPDATE, 'data': data}


class InboundDispatcher:
    """Inbound half of a channel: one handler, fed by ``post``."""

    _inbound_handler: Optional[Callable[[Dict[str, Any]], None]] = None

    def set_inbound_handler(self, handler: Callable[[Dict[str, Any]], None]):
        self._inbound_handler = handler

    def post(self, message: Dict[str, Any]):
        """
        Deliver an inbound message to the engine.

        Args:
            message: Message dict with a ``command`` key
        """
        if self._inbound_handler is None:
            logger.debug(f"Dropping inbound '{message.get('command')}' message: no handler registered")
            return
        self._inbound_handler(message)


class HostChannel(InboundDispatcher, ABC):
    """
    Bidirectional channel between engine and host.

    The engine registers one inbound handler and calls ``send`` for outbound
    requests. ``post`` is how the host delivers inbound messages.
    """

    @abstractmethod
    def send(self, message: Dict[str, Any]):
        """Deliver an outbound request to the host."""


class QtHostChannel(QObject, InboundDispatcher):
    """
    HostChannel for a Qt host, exposing outbound requests as signals.

    Signals:
        open_file_requested: Emitted with the event's detail string
        copy_path_requested: Emitted with the cleaned path
    """

    open_file_requested = pyqtSignal(str)
    copy_path_requested = pyqtSignal(str)

    def send(self, message: Dict[str, Any]):
        command = message.get('command')
        path = message.get('path', '')
        logger.debug(f"Outbound request: {command} {path}")
        if command == COMMAND_OPEN_FILE:
            self.open_file_requested.emit(path)
        elif command == COMMAND_COPY_PATH:
            self.copy_path_requested.emit(path)
        else:
            logger.warning(f"Unknown outbound command: {command}")


HostChannel.register(QtHostChannel)
