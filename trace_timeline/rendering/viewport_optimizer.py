"""
Viewport Optimizer - Bar geometry and viewport culling for the timeline.

This module provides the ViewportOptimizer class which implements:
- The pixel rectangle of every event bar for the current ViewState
- Walking threads and lanes in rendering order with their vertical offsets
- Culling of threads and bars that fall outside the visible canvas

Rendering and hit-testing both go through this module so a bar is hit
exactly where it is drawn.
"""

from dataclasses import dataclass

from trace_timeline.config import DEFAULT_CONFIG


@dataclass
class BarRect:
    """Pixel rectangle of one event bar."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def contains(self, px, py):
        return self.x <= px <= self.right and self.y <= py <= self.bottom


@dataclass
class LaneBand:
    """Vertical band occupied by one lane of one thread."""
    thread_index: int
    thread: object
    lane: object
    top: float
    height: float

    def contains_y(self, py):
        return self.top <= py <= self.top + self.height


class ViewportOptimizer:
    """
    Computes bar geometry and decides what is visible.

    Events are never drawn or hit outside the canvas, and nothing behind the
    ruler band counts as visible.
    """

    def __init__(self, config=DEFAULT_CONFIG):
        """
        Initialize the viewport optimizer.

        Args:
            config (ViewerConfig): Engine configuration
        """
        self.config = config

    def thread_height(self, thread, state):
        return thread.height(state.row_height, self.config.view.lane_gap, state.track_spacing)

    def iter_threads(self, layout, state):
        """
        Walk threads in rendering order.

        Yields:
            tuple: (index, thread, top, height) where height includes track spacing
        """
        current_y = state.y
        for index, thread in enumerate(layout.threads):
            height = self.thread_height(thread, state)
            yield index, thread, current_y, height
            current_y += height

    def iter_lane_bands(self, thread_index, thread, top, state):
        """
        Walk the lanes of one thread.

        Yields:
            LaneBand: One band per non-empty lane
        """
        lane_top = top
        for lane in thread.lanes:
            height = lane.height(state.row_height)
            yield LaneBand(thread_index, thread, lane, lane_top, height)
            lane_top += height + self.config.view.lane_gap

    def bar_rect(self, event, lane_top, state):
        """
        Get the pixel rectangle of an event bar.

        Args:
            event (ProcessedEvent): Event to place
            lane_top (float): Top of the event's lane band
            state (ViewState): Current transform

        Returns:
            BarRect: Bar rectangle with the minimum visual width applied
        """
        x = event.start * state.scale + state.x
        width = max(self.config.rendering.min_bar_width, event.duration * state.scale)
        y = lane_top + event.depth * state.row_height
        return BarRect(x, y, width, state.row_height - 1)

    def is_thread_visible(self, top, height, canvas_height):
        return not (top + height < self.config.timeline.height or top > canvas_height)

    def is_bar_visible(self, rect, state, canvas_width, canvas_height):
        """
        Check whether any part of a bar is on screen below the ruler.

        Args:
            rect (BarRect): Bar rectangle
            state (ViewState): Current transform
            canvas_width, canvas_height: Canvas size

        Returns:
            bool: True when the bar needs drawing
        """
        if rect.right < 0 or rect.x > canvas_width:
            return False
        if rect.y + state.row_height < self.config.timeline.height or rect.y > canvas_height:
            return False
        return True
