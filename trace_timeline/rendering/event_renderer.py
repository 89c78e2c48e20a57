"""
Event Renderer - Paints the time ruler and event bars of the trace timeline.

This module provides the EventRenderer class which draws a full frame onto a
DrawSurface:
- Event bars per thread and lane, culled against the viewport
- Bar labels fitted to the bar width
- Separators between threads
- The time ruler with "nice number" tick steps
"""

import colorsys
import math
from dataclasses import dataclass

from trace_timeline.config import DEFAULT_CONFIG
from trace_timeline.rendering.viewport_optimizer import ViewportOptimizer
from trace_timeline.utils.path_utils import shorten_path


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def name_hash(name):
    """
    Hash a string the way ``h = c + ((h << 5) - h)`` behaves with 32-bit shifts.

    The result only depends on the string, so colors are stable across runs
    (unlike the built-in ``hash``).
    """
    value = 0
    units = name.encode('utf-16-le')
    for i in range(0, len(units), 2):
        code = units[i] | (units[i + 1] << 8)
        value = code + (_to_int32(_to_int32(value) << 5) - value)
    return value


def color_for_name(name, saturation=0.5, lightness=0.45):
    """
    Get the fill color for an event name.

    Args:
        name (str): Event name
        saturation (float): HSL saturation (0-1)
        lightness (float): HSL lightness (0-1)

    Returns:
        str: Color as ``#RRGGBB``
    """
    hue = abs(name_hash(name)) % 360
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)
    return f"#{round(r * 255):02X}{round(g * 255):02X}{round(b * 255):02X}"


def compute_tick_step(scale, min_tick_gap):
    """
    Choose the time interval between ruler ticks.

    The target time gap is the one that puts ticks ``min_tick_gap`` pixels
    apart; it is rounded to 1, 2, 2.5 or 5 times a power of ten.

    Args:
        scale (float): Pixels per microsecond
        min_tick_gap (float): Target pixel distance between ticks

    Returns:
        float: Tick step in microseconds
    """
    target_gap = min_tick_gap / scale
    power = 10 ** math.floor(math.log10(target_gap))
    ratio = target_gap / power
    if ratio > 5:
        return 5 * power
    if ratio > 2.5:
        return 2.5 * power
    if ratio > 2:
        return 2 * power
    return power


def format_tick_label(time_value, step):
    """
    Format a ruler label.

    Args:
        time_value (float): Tick time in microseconds
        step (float): Current tick step

    Returns:
        str: Milliseconds with two decimals for steps of 1 ms or more, else whole microseconds
    """
    if step >= 1000:
        # + 0.0 turns a negative zero tick into "0.00"
        return f"{time_value / 1000 + 0.0:.2f} ms"
    return f"{int(math.floor(time_value + 0.5))} μs"


@dataclass
class RenderStats:
    """Counters collected while painting one frame."""
    bars_drawn: int = 0
    bars_culled: int = 0
    threads_skipped: int = 0
    ticks_drawn: int = 0


class EventRenderer:
    """
    Draws one complete timeline frame.

    Rendering is a pure function of (layout, ViewState, surface size); the
    selected event only changes how its own bar is decorated.
    """

    def __init__(self, config=DEFAULT_CONFIG, optimizer=None):
        """
        Initialize the renderer.

        Args:
            config (ViewerConfig): Engine configuration
            optimizer (ViewportOptimizer): Shared geometry helper
        """
        self.config = config
        self.optimizer = optimizer or ViewportOptimizer(config)
        self._color_cache = {}

    def get_color(self, name):
        color = self._color_cache.get(name)
        if color is None:
            rendering = self.config.rendering
            color = color_for_name(name, rendering.hue_saturation, rendering.hue_lightness)
            self._color_cache[name] = color
        return color

    def render(self, layout, state, surface, selected=None):
        """
        Paint a frame.

        Args:
            layout (TraceLayout): Ingested trace
            state (ViewState): Current transform
            surface (DrawSurface): Drawing target
            selected (ProcessedEvent): Currently selected event, if any

        Returns:
            RenderStats: What was drawn and culled; empty for an empty trace
        """
        stats = RenderStats()
        if layout is None or layout.max_time <= 0 or state.scale <= 0:
            return stats

        rendering = self.config.rendering
        width, height = surface.width, surface.height
        surface.clear(rendering.background_color)

        for index, thread, top, thread_height in self.optimizer.iter_threads(layout, state):
            if not self.optimizer.is_thread_visible(top, thread_height, height):
                stats.threads_skipped += 1
                continue

            if index > 0:
                separator_y = top - state.track_spacing / 2
                surface.draw_line(0, separator_y, width, separator_y, rendering.separator_color)

            for band in self.optimizer.iter_lane_bands(index, thread, top, state):
                if not self.optimizer.is_thread_visible(band.top, band.height, height):
                    stats.bars_culled += len(band.lane.events)
                    continue
                for event in band.lane.events:
                    rect = self.optimizer.bar_rect(event, band.top, state)
                    if not self.optimizer.is_bar_visible(rect, state, width, height):
                        stats.bars_culled += 1
                        continue
                    self._draw_bar(surface, event, rect, state, event is selected)
                    stats.bars_drawn += 1

        stats.ticks_drawn = self.render_ruler(state, surface)
        return stats

    def _draw_bar(self, surface, event, rect, state, is_selected):
        rendering = self.config.rendering
        radius = rendering.rounding
        clip = (rect.x, rect.y, rect.width, rect.height)

        surface.fill_rounded_rect(rect.x, rect.y, rect.width, rect.height, radius,
                                  self.get_color(event.name))

        # Text decisions use the unpadded bar width
        bar_width = event.duration * state.scale
        if bar_width > rendering.min_width_for_text:
            text_x = max(rect.x, 0) + rendering.text_padding
            baseline = rect.y + rendering.text_baseline
            if text_x < rect.x + bar_width - 5:
                surface.draw_text(event.name, text_x, baseline, rendering.event_font,
                                  rendering.text_color, clip=clip)
                if event.detail and bar_width > rendering.min_width_for_detail:
                    name_width = surface.text_width(event.name, rendering.event_font)
                    surface.draw_text(shorten_path(event.detail),
                                      text_x + name_width + rendering.detail_spacing,
                                      baseline, rendering.detail_font,
                                      rendering.detail_color, clip=clip)

        if is_selected:
            surface.fill_rounded_rect(rect.x, rect.y, rect.width, rect.height, radius,
                                      rendering.selection_overlay)
            surface.stroke_rounded_rect(rect.x, rect.y, rect.width, rect.height, radius,
                                        rendering.selection_outline, line_width=2)

    def render_ruler(self, state, surface):
        """
        Paint the time ruler band.

        Args:
            state (ViewState): Current transform
            surface (DrawSurface): Drawing target

        Returns:
            int: Number of ticks drawn
        """
        timeline = self.config.timeline
        width = surface.width

        surface.fill_rect(0, 0, width, timeline.height, timeline.bg_color)

        step = compute_tick_step(state.scale, timeline.min_tick_gap)
        start_time = (0 - state.x) / state.scale
        end_time = (width - state.x) / state.scale
        first_tick = math.ceil(start_time / step) * step

        ticks = 0
        index = 0
        while True:
            tick_time = first_tick + index * step
            if tick_time > end_time:
                break
            index += 1
            x = tick_time * state.scale + state.x
            if x < 0 or x > width:
                continue

            surface.draw_line(x, timeline.tick_top, x, timeline.height - timeline.tick_bottom_inset,
                              timeline.tick_color)
            label = format_tick_label(tick_time, step)
            label_width = surface.text_width(label, timeline.label_font)
            surface.draw_text(label, x - label_width / 2,
                              timeline.height - timeline.label_baseline_inset,
                              timeline.label_font, timeline.text_color)
            ticks += 1

        surface.draw_line(0, timeline.height, width, timeline.height, timeline.border_color)
        return ticks
