"""
Viewer Configuration - Immutable settings for the trace timeline engine.

All layout constants, thresholds, fonts and colours live here so the engine
can be constructed with a single value. Use ``dataclasses.replace`` to derive
variants, e.g. a taller row height for tests or high-DPI screens.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TimelineConfig:
    """Time ruler drawn along the top edge of the canvas."""
    height: int = 40
    min_tick_gap: int = 160  # Target pixels between two ruler ticks
    label_font: str = "10px sans-serif"
    tick_color: str = "#555555"
    text_color: str = "#888888"
    bg_color: str = "#1E1E1E"
    border_color: str = "#333333"
    tick_top: int = 10
    tick_bottom_inset: int = 18
    label_baseline_inset: int = 5


@dataclass(frozen=True)
class ViewConfig:
    """Viewport geometry and pan/zoom behaviour."""
    margin_side: int = 40
    top_gap: int = 10  # Space between ruler and first thread
    bottom_margin: int = 20
    default_row_height: int = 24
    default_track_spacing: int = 30
    lane_gap: int = 6
    zoom_sensitivity: float = 0.15
    max_scale: float = 10000.0
    click_slop: int = 3  # Max pointer travel (px) for a press/release to count as a click
    tooltip_offset: int = 15


@dataclass(frozen=True)
class RenderingConfig:
    """Event bar appearance."""
    event_font: str = "bold 11px sans-serif"
    detail_font: str = "10px sans-serif"
    rounding: int = 2
    min_width_for_text: int = 20
    min_width_for_detail: int = 120
    min_bar_width: float = 0.5
    text_padding: int = 4
    detail_spacing: int = 8
    text_baseline: int = 16
    text_color: str = "#FFFFFF"
    detail_color: str = "#B3FFFFFF"  # 70% white
    separator_color: str = "#0DFFFFFF"  # 5% white
    background_color: str = "#1E1E1E"
    selection_outline: str = "#FFFFFF"
    selection_overlay: str = "#40FFFFFF"
    hue_saturation: float = 0.5
    hue_lightness: float = 0.45


@dataclass(frozen=True)
class ViewerConfig:
    """Complete engine configuration passed to ``TraceSession``."""
    timeline: TimelineConfig = field(default_factory=TimelineConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)

    @property
    def top_offset(self):
        """Vertical pixel origin used when content fits or after a reset."""
        return self.timeline.height + self.view.top_gap


DEFAULT_CONFIG = ViewerConfig()
