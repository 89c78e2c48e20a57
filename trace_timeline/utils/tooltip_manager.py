"""
Tooltip Manager - Tooltip text and placement for the trace timeline.

Provides the hover tooltip content for event bars, the smart positioning
that keeps it inside the viewport, and the short usage hints shown by the
host window.
"""

import html
from dataclasses import dataclass


@dataclass
class TooltipState:
    """What the hover tooltip should show, and where."""
    visible: bool = False
    text: str = ""
    x: int = 0
    y: int = 0


class TooltipManager:
    """
    Centralized tooltip content for the timeline canvas.
    """

    # Fallback size used before the tooltip widget has been laid out
    DEFAULT_WIDTH = 200
    DEFAULT_HEIGHT = 60

    CANVAS_TOOLTIPS = {
        'pan_hint': 'Drag to pan the timeline',
        'zoom_hint': 'Use the mouse wheel to zoom around the pointer (Keyboard: + / -, 0 to fit)',
        'select_hint': 'Click an event to select it, double-click to open its file',
        'menu_hint': 'Right-click an event to open or copy its file path',
    }

    @classmethod
    def get_canvas_tooltip(cls, key):
        """
        Get a usage hint for the canvas.

        Args:
            key (str): Tooltip key

        Returns:
            str: Tooltip text
        """
        return cls.CANVAS_TOOLTIPS.get(key, '')

    @classmethod
    def get_usage_hint(cls):
        """All canvas hints joined for a status bar."""
        return ' | '.join(cls.CANVAS_TOOLTIPS.values())

    @staticmethod
    def format_event_tooltip(event):
        """
        Create rich-text tooltip content for an event bar.

        Args:
            event (ProcessedEvent): Hovered event

        Returns:
            str: Name, duration in milliseconds and detail
        """
        duration_ms = event.duration / 1000
        return (f"<strong>{html.escape(event.name)}</strong><br/>"
                f"{duration_ms:.3f} ms<br/>"
                f"<small>{html.escape(event.detail)}</small>")

    @classmethod
    def position_tooltip(cls, pointer_x, pointer_y, viewport_width, viewport_height,
                         tooltip_width=None, tooltip_height=None, offset=15):
        """
        Place the tooltip below-right of the pointer, flipping left/up on overflow.

        Args:
            pointer_x, pointer_y: Pointer position in viewport pixels
            viewport_width, viewport_height: Size of the visible area
            tooltip_width, tooltip_height: Measured tooltip size, if known
            offset (int): Gap between pointer and tooltip

        Returns:
            tuple: (x, y) of the tooltip's top-left corner
        """
        width = tooltip_width or cls.DEFAULT_WIDTH
        height = tooltip_height or cls.DEFAULT_HEIGHT

        pos_x = pointer_x + offset
        pos_y = pointer_y + offset
        if pos_x + width > viewport_width:
            pos_x = pointer_x - width - offset
        if pos_y + height > viewport_height:
            pos_y = pointer_y - height - offset
        return pos_x, pos_y
