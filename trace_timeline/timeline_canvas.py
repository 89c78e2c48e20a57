"""
Timeline Canvas - Qt widget that displays a trace session.

This module provides the TimelineCanvas class which paints the session with a
QPainter and forwards mouse, wheel, keyboard and resize events to the
InteractionController. The hover tooltip and the context menu are regular Qt
widgets driven by the controller's state.
"""

import logging

from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtGui import QColor, QPainter
from PyQt5.QtWidgets import QAction, QLabel, QMenu, QWidget

from trace_timeline.interaction.interaction_controller import (
    Button, ContextMenuAction, InputKind, InteractionController,
    KeyInput, PointerInput, ResizeInput, WheelInput
)
from trace_timeline.rendering.qt_surface import QtPainterSurface
from trace_timeline.styles import Colors, TimelineStyles
from trace_timeline.utils.error_handler import ErrorHandler, RenderError
from trace_timeline.utils.tooltip_manager import TooltipManager

# Configure logger
logger = logging.getLogger(__name__)

_BUTTONS = {
    Qt.LeftButton: Button.PRIMARY,
    Qt.RightButton: Button.SECONDARY,
    Qt.MiddleButton: Button.MIDDLE,
}

_NAMED_KEYS = {
    Qt.Key_Escape: 'Escape',
    Qt.Key_Home: 'Home',
    Qt.Key_Plus: '+',
    Qt.Key_Minus: '-',
    Qt.Key_Equal: '=',
    Qt.Key_0: '0',
}


class TimelineCanvas(QWidget):
    """
    Flame-timeline view of a TraceSession.

    The canvas owns no trace state; everything lives in the session and the
    interaction controller, and every paint event renders a complete frame.
    """

    def __init__(self, session, channel, parent=None):
        """
        Initialize the canvas.

        Args:
            session (TraceSession): Engine state to display
            channel (QtHostChannel): Channel used for inbound updates and outbound requests
            parent: Parent widget
        """
        super().__init__(parent)
        self.session = session
        self.controller = InteractionController(session, channel, on_render=self.update)
        self.error_handler = ErrorHandler(self)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMinimumSize(320, 200)
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)

        self._init_tooltip()
        self._init_context_menu()

    def _init_tooltip(self):
        self.tooltip_label = QLabel(self)
        self.tooltip_label.setTextFormat(Qt.RichText)
        self.tooltip_label.setStyleSheet(TimelineStyles.TOOLTIP_STYLE)
        self.tooltip_label.setAttribute(Qt.WA_TransparentForMouseEvents, True)
        self.tooltip_label.hide()

    def _init_context_menu(self):
        self.context_menu = QMenu(self)
        self.context_menu.setStyleSheet(TimelineStyles.CONTEXT_MENU_STYLE)

        open_action = QAction("Open File", self)
        open_action.triggered.connect(
            lambda: self.controller.trigger_menu_action(ContextMenuAction.OPEN_FILE))
        copy_action = QAction("Copy Path", self)
        copy_action.triggered.connect(
            lambda: self.controller.trigger_menu_action(ContextMenuAction.COPY_PATH))

        self.context_menu.addAction(open_action)
        self.context_menu.addAction(copy_action)
        self.context_menu.aboutToHide.connect(self.controller.hide_context_menu)

    # Painting

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor(Colors.BG_PRIMARY))
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.setRenderHint(QPainter.TextAntialiasing, True)
            surface = QtPainterSurface(painter, self.width(), self.height())
            stats = self.session.render(surface)
            logger.debug(
                f"Frame: {stats.bars_drawn} bars drawn, {stats.bars_culled} culled, "
                f"{stats.ticks_drawn} ticks"
            )
        except Exception as e:
            self.error_handler.handle_error(
                RenderError("Failed to draw the timeline", details=str(e)),
                context="painting timeline", show_dialog=False)
        finally:
            painter.end()

    # Input forwarding

    def _dispatch(self, event_input):
        handled = self.controller.dispatch(event_input)
        self._sync_overlays()
        return handled

    def _pointer(self, kind, event):
        button = _BUTTONS.get(event.button(), Button.PRIMARY)
        return PointerInput(kind, event.x(), event.y(), button)

    def mousePressEvent(self, event):
        if event.button() not in _BUTTONS:
            super().mousePressEvent(event)
            return
        self._dispatch(self._pointer(InputKind.POINTER_DOWN, event))
        if self.controller.is_panning:
            self.setCursor(Qt.ClosedHandCursor)
        event.accept()

    def mouseMoveEvent(self, event):
        self._dispatch(PointerInput(InputKind.POINTER_MOVE, event.x(), event.y()))
        event.accept()

    def mouseReleaseEvent(self, event):
        self._dispatch(self._pointer(InputKind.POINTER_UP, event))
        self.unsetCursor()
        event.accept()

    def mouseDoubleClickEvent(self, event):
        self._dispatch(self._pointer(InputKind.DOUBLE_CLICK, event))
        event.accept()

    def wheelEvent(self, event):
        # Qt reports scrolling up (away from the user) as a positive angle
        delta_y = -event.angleDelta().y()
        if delta_y == 0:
            event.ignore()
            return
        self._dispatch(WheelInput(event.x(), event.y(), delta_y))
        event.accept()

    def keyPressEvent(self, event):
        key = _NAMED_KEYS.get(event.key(), event.text())
        if key and self._dispatch(KeyInput(key)):
            event.accept()
            return
        super().keyPressEvent(event)

    def leaveEvent(self, event):
        self._dispatch(PointerInput(InputKind.POINTER_LEAVE, 0, 0))
        super().leaveEvent(event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._dispatch(ResizeInput(self.width(), self.height()))

    def contextMenuEvent(self, event):
        # Opened from the secondary-button press
        event.accept()

    # Overlays

    def _sync_overlays(self):
        """Apply the controller's tooltip and context menu state to the widgets."""
        tooltip = self.controller.tooltip
        if tooltip.visible:
            self.tooltip_label.setText(tooltip.text)
            self.tooltip_label.adjustSize()
            size = (self.tooltip_label.width(), self.tooltip_label.height())
            if size != self.controller.tooltip_size:
                # Re-place now that the real size is known
                self.controller.tooltip_size = size
                x, y = TooltipManager.position_tooltip(
                    *self.controller.last_pointer, self.width(), self.height(), *size,
                    offset=self.session.config.view.tooltip_offset)
                tooltip.x, tooltip.y = x, y
            self.tooltip_label.move(int(tooltip.x), int(tooltip.y))
            self.tooltip_label.show()
            self.tooltip_label.raise_()
        else:
            self.tooltip_label.hide()

        menu = self.controller.context_menu
        if menu.visible and not self.context_menu.isVisible():
            self.context_menu.popup(self.mapToGlobal(QPoint(int(menu.x), int(menu.y))))
        elif not menu.visible and self.context_menu.isVisible():
            self.context_menu.hide()
