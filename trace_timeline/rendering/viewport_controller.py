"""
Viewport Controller - Owns the pan/zoom transform of the trace timeline.

This module provides the ViewportController class which manages:
- The pixel origin and scale (pixels per microsecond) of the view
- Fitting the whole trace into the canvas
- Zooming around a fixed time value under the cursor
- Clamping so the content cannot be scrolled out of sight
"""

from trace_timeline.config import DEFAULT_CONFIG
from trace_timeline.data.trace_models import ViewState


class ViewportController:
    """
    Manages the ViewState and its clamping policy.

    Content metrics (trace time extent and total layout height) are pushed
    in with ``set_content`` whenever a dataset is ingested; the canvas size
    with ``resize``. Every operation leaves the view clamped.
    """

    def __init__(self, config=DEFAULT_CONFIG):
        """
        Initialize the controller.

        Args:
            config (ViewerConfig): Engine configuration
        """
        self.config = config
        view = config.view
        self.state = ViewState(
            x=view.margin_side,
            y=config.top_offset,
            scale=0.1,
            row_height=view.default_row_height,
            track_spacing=view.default_track_spacing,
        )
        self.width = 0
        self.height = 0
        self.max_time = 0.0
        self.content_height = 0.0

    @property
    def drawable_width(self):
        """Canvas width minus the side margins."""
        return self.width - self.config.view.margin_side * 2

    @property
    def content_width(self):
        return self.max_time * self.state.scale

    @property
    def min_scale(self):
        """Scale at which the whole trace exactly fills the drawable width."""
        if self.max_time <= 0:
            return 0.0
        return self.drawable_width / self.max_time

    @property
    def max_scale(self):
        return self.config.view.max_scale

    def set_content(self, max_time, content_height):
        """
        Update the content extent after an ingest.

        Args:
            max_time (float): Largest event end time in microseconds
            content_height (float): Total height of all threads in pixels
        """
        self.max_time = max_time
        self.content_height = content_height

    def resize(self, width, height):
        """Store a new canvas size and re-clamp."""
        self.width = width
        self.height = height
        self.clamp_view()

    def reset_view(self, width=None, height=None):
        """
        Fit the full time extent into the drawable width.

        Args:
            width, height: New canvas size; the current size is kept when omitted

        Returns:
            bool: False when there is nothing to show
        """
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height
        if self.max_time <= 0 or self.drawable_width <= 0:
            return False

        self.state.scale = self.drawable_width / self.max_time
        self.state.x = self.config.view.margin_side
        self.state.y = self.config.top_offset
        self.clamp_view()
        return True

    def pan(self, dx, dy):
        """Translate the origin by a pixel delta."""
        self.state.x += dx
        self.state.y += dy
        self.clamp_view()

    def zoom(self, cursor_x, factor):
        """
        Multiply the scale by ``factor`` keeping the time under ``cursor_x`` fixed.

        The new scale is bounded below by the full-fit scale and above by the
        configured maximum.

        Args:
            cursor_x (float): Pointer x in canvas pixels
            factor (float): Zoom multiplier (> 1 zooms in)

        Returns:
            bool: False when there is nothing to zoom
        """
        if self.max_time <= 0 or self.state.scale <= 0:
            return False

        world_x = self.pixel_to_time(cursor_x)
        new_scale = self.state.scale * factor
        new_scale = max(self.min_scale, min(new_scale, self.max_scale))
        if new_scale <= 0:
            return False

        self.state.scale = new_scale
        # Shift the origin so world_x lands back under the cursor
        self.state.x += cursor_x - self.time_to_pixel(world_x)
        self.clamp_view()
        return True

    def zoom_factor_for_wheel(self, delta_y):
        """
        Get the zoom multiplier for one wheel step.

        Args:
            delta_y (float): Wheel delta; positive scrolls down (zoom out)

        Returns:
            float: Zoom factor
        """
        sensitivity = self.config.view.zoom_sensitivity
        return 1 - sensitivity if delta_y > 0 else 1 + sensitivity

    def clamp_range_x(self):
        """
        Get the allowed horizontal origin range.

        Returns:
            tuple: (min_x, max_x); both equal the side margin when the content fits
        """
        margin = self.config.view.margin_side
        if self.content_width > self.drawable_width:
            return self.width - self.content_width - margin, margin
        return margin, margin

    def clamp_range_y(self):
        """
        Get the allowed vertical origin range.

        Returns:
            tuple: (min_y, max_y); both equal the top offset when the content fits
        """
        top = self.config.top_offset
        if self.content_height > self.height - top:
            return self.height - self.content_height - self.config.view.bottom_margin, top
        return top, top

    def clamp_view(self):
        """Constrain the origin so the content stays within the canvas."""
        min_x, max_x = self.clamp_range_x()
        if self.state.x > max_x:
            self.state.x = max_x
        if self.state.x < min_x:
            self.state.x = min_x

        min_y, max_y = self.clamp_range_y()
        if self.state.y > max_y:
            self.state.y = max_y
        if self.state.y < min_y:
            self.state.y = min_y

    def time_to_pixel(self, time_value):
        return time_value * self.state.scale + self.state.x

    def pixel_to_time(self, pixel_x):
        return (pixel_x - self.state.x) / self.state.scale

    def visible_time_range(self):
        """
        Get the time span currently covered by the canvas.

        Returns:
            tuple: (start_time, end_time) in microseconds
        """
        return self.pixel_to_time(0), self.pixel_to_time(self.width)

    def __repr__(self):
        return (
            f"ViewportController(x={self.state.x:.1f}, y={self.state.y:.1f}, "
            f"scale={self.state.scale:.6f}, size={self.width}x{self.height})"
        )
