"""
Interaction Controller - Pointer, wheel and keyboard handling for the timeline.

Input arrives as small dataclasses rather than toolkit events, so the whole
interaction model (panning, selection, tooltip, context menu, outbound
requests) runs without a display. The Qt canvas only translates its events
into these inputs and applies the resulting tooltip/menu state.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from trace_timeline.channel import copy_path_message, open_file_message
from trace_timeline.utils.path_utils import clean_detail_path
from trace_timeline.utils.tooltip_manager import TooltipManager, TooltipState

# Configure logger
logger = logging.getLogger(__name__)


class InputKind(Enum):
    POINTER_DOWN = 'pointer_down'
    POINTER_MOVE = 'pointer_move'
    POINTER_UP = 'pointer_up'
    DOUBLE_CLICK = 'double_click'
    POINTER_LEAVE = 'pointer_leave'
    WHEEL = 'wheel'
    KEY = 'key'
    RESIZE = 'resize'


class Button(Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    MIDDLE = 'middle'


class InteractionMode(Enum):
    IDLE = 'idle'
    PANNING = 'panning'


class ContextMenuAction(Enum):
    OPEN_FILE = 'open_file'
    COPY_PATH = 'copy_path'


@dataclass
class PointerInput:
    kind: InputKind
    x: float
    y: float
    button: Button = Button.PRIMARY


@dataclass
class WheelInput:
    x: float
    y: float
    delta_y: float
    kind: InputKind = field(default=InputKind.WHEEL, init=False)


@dataclass
class KeyInput:
    key: str
    kind: InputKind = field(default=InputKind.KEY, init=False)


@dataclass
class ResizeInput:
    width: int
    height: int
    kind: InputKind = field(default=InputKind.RESIZE, init=False)


@dataclass
class ContextMenuState:
    visible: bool = False
    x: float = 0
    y: float = 0


class InteractionController:
    """
    State machine translating input into view, selection and host requests.

    Modes:
        IDLE: Pointer moves drive the hover tooltip
        PANNING: Primary button held; pointer moves translate the view

    Attributes:
        tooltip (TooltipState): Hover tooltip to display
        context_menu (ContextMenuState): Context menu to display
        tooltip_size (tuple): Measured (width, height) of the tooltip widget, if known
    """

    ZOOM_IN_KEYS = ('+', '=')
    ZOOM_OUT_KEYS = ('-', '_')
    RESET_KEYS = ('0', 'Home')

    def __init__(self, session, channel=None, on_render=None):
        """
        Initialize the controller.

        Args:
            session (TraceSession): Engine state
            channel (HostChannel): Outbound request target; inbound updates are registered on it
            on_render (callable): Called with no arguments whenever a repaint is needed
        """
        self.session = session
        self.channel = channel
        self.on_render = on_render
        self.mode = InteractionMode.IDLE
        self.last_pointer = (0.0, 0.0)
        self.press_pointer = None
        self.tooltip = TooltipState()
        self.context_menu = ContextMenuState()
        self.tooltip_size = None

        self._handlers = {
            InputKind.POINTER_DOWN: self._on_pointer_down,
            InputKind.POINTER_MOVE: self._on_pointer_move,
            InputKind.POINTER_UP: self._on_pointer_up,
            InputKind.DOUBLE_CLICK: self._on_double_click,
            InputKind.POINTER_LEAVE: self._on_pointer_leave,
            InputKind.WHEEL: self._on_wheel,
            InputKind.KEY: self._on_key,
            InputKind.RESIZE: self._on_resize,
        }

        if channel is not None:
            channel.set_inbound_handler(self.handle_message)

    @property
    def selected(self):
        return self.session.selected

    @property
    def context_event(self):
        return self.session.context_event

    @property
    def is_panning(self):
        return self.mode == InteractionMode.PANNING

    def dispatch(self, event):
        """
        Route an input event to its handler.

        Args:
            event: PointerInput, WheelInput, KeyInput or ResizeInput

        Returns:
            bool: True when the input was consumed
        """
        handler = self._handlers.get(event.kind)
        if handler is None:
            return False
        return handler(event)

    def request_render(self):
        if self.on_render is not None:
            self.on_render()

    def handle_message(self, message):
        """
        Apply an inbound host message; a dataset update resets all interaction state.

        Returns:
            bool: True when the dataset was replaced
        """
        if not self.session.handle_message(message):
            return False
        self.mode = InteractionMode.IDLE
        self.press_pointer = None
        self.hide_tooltip()
        self.hide_context_menu()
        self.request_render()
        return True

    # Pointer handling

    def _on_pointer_down(self, event):
        if event.button == Button.SECONDARY:
            return self._on_context_request(event)
        if event.button != Button.PRIMARY:
            return False

        # The canvas only sees clicks outside the context menu
        self.hide_context_menu()
        self.mode = InteractionMode.PANNING
        self.last_pointer = (event.x, event.y)
        self.press_pointer = (event.x, event.y)
        return True

    def _on_pointer_move(self, event):
        if self.mode == InteractionMode.PANNING:
            dx = event.x - self.last_pointer[0]
            dy = event.y - self.last_pointer[1]
            self.last_pointer = (event.x, event.y)
            self.session.viewport.pan(dx, dy)
            self.request_render()
            return True

        self.last_pointer = (event.x, event.y)
        self.update_tooltip(event.x, event.y)
        return True

    def _on_pointer_up(self, event):
        if self.mode != InteractionMode.PANNING:
            return False
        self.mode = InteractionMode.IDLE

        press = self.press_pointer
        self.press_pointer = None
        slop = self.session.config.view.click_slop
        if press is not None and abs(event.x - press[0]) <= slop and abs(event.y - press[1]) <= slop:
            self._on_click(event)
        return True

    def _on_click(self, event):
        hit = self.session.hit_test(event.x, event.y)
        if hit is not self.session.selected:
            self.session.selected = hit
            self.request_render()

    def _on_double_click(self, event):
        if event.button != Button.PRIMARY:
            return False
        hit = self.session.hit_test(event.x, event.y)
        if hit is not None and hit.detail:
            self._send(open_file_message(hit.detail))
        return True

    def _on_context_request(self, event):
        hit = self.session.hit_test(event.x, event.y)
        if hit is None:
            self.hide_context_menu()
            return True

        self.session.selected = hit
        self.session.context_event = hit
        self.request_render()
        self.hide_tooltip()
        self.context_menu = ContextMenuState(visible=True, x=event.x, y=event.y)
        return True

    def _on_pointer_leave(self, event):
        self.hide_tooltip()
        return True

    def _on_wheel(self, event):
        viewport = self.session.viewport
        factor = viewport.zoom_factor_for_wheel(event.delta_y)
        if viewport.zoom(event.x, factor):
            self.request_render()
        return True

    def _on_key(self, event):
        viewport = self.session.viewport
        sensitivity = self.session.config.view.zoom_sensitivity

        if event.key in self.ZOOM_IN_KEYS:
            changed = viewport.zoom(viewport.width / 2, 1 + sensitivity)
        elif event.key in self.ZOOM_OUT_KEYS:
            changed = viewport.zoom(viewport.width / 2, 1 - sensitivity)
        elif event.key in self.RESET_KEYS:
            changed = self.session.reset_view()
        elif event.key == 'Escape':
            changed = self.session.selected is not None
            self.session.selected = None
            self.hide_tooltip()
            self.hide_context_menu()
        else:
            return False

        if changed:
            self.request_render()
        return True

    def _on_resize(self, event):
        self.session.resize(event.width, event.height)
        self.request_render()
        return True

    # Tooltip and context menu

    def update_tooltip(self, px, py):
        """
        Show the tooltip for the event under the pointer, or hide it.

        Args:
            px, py: Pointer position in canvas pixels
        """
        hit = self.session.hit_test(px, py)
        if hit is None:
            self.hide_tooltip()
            return

        viewport = self.session.viewport
        width, height = self.tooltip_size or (None, None)
        pos_x, pos_y = TooltipManager.position_tooltip(
            px, py, viewport.width, viewport.height, width, height,
            offset=self.session.config.view.tooltip_offset,
        )
        self.tooltip = TooltipState(
            visible=True,
            text=TooltipManager.format_event_tooltip(hit),
            x=pos_x,
            y=pos_y,
        )

    def hide_tooltip(self):
        self.tooltip = TooltipState()

    def hide_context_menu(self):
        self.context_menu = ContextMenuState()

    def trigger_menu_action(self, action):
        """
        Run a context menu entry on the right-clicked event.

        Args:
            action (ContextMenuAction): Selected menu entry

        Returns:
            bool: True when a request was sent to the host
        """
        self.hide_context_menu()
        event = self.session.context_event
        if event is None or not event.detail:
            return False

        if action == ContextMenuAction.OPEN_FILE:
            self._send(open_file_message(event.detail))
        elif action == ContextMenuAction.COPY_PATH:
            self._send(copy_path_message(clean_detail_path(event.detail)))
        else:
            return False
        return True

    def _send(self, message):
        if self.channel is None:
            logger.debug(f"No host channel; dropping {message['command']} request")
            return
        self.channel.send(message)
