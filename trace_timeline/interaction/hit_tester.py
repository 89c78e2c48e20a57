"""
Hit Tester - Finds the event bar under a pointer position.
"""

from trace_timeline.config import DEFAULT_CONFIG
from trace_timeline.rendering.viewport_optimizer import ViewportOptimizer


class HitTester:
    """
    Maps canvas pixels back to events using the same geometry as rendering.

    Threads are walked in rendering order; only the lane band containing the
    pointer is scanned. Within a lane, bars at one depth never overlap in
    time and the depth offset separates rows, so at most one bar matches.
    """

    def __init__(self, config=DEFAULT_CONFIG, optimizer=None):
        self.config = config
        self.optimizer = optimizer or ViewportOptimizer(config)

    def hit_test(self, layout, state, px, py):
        """
        Get the event under a pointer.

        Args:
            layout (TraceLayout): Ingested trace
            state (ViewState): Current transform
            px, py: Pointer position in canvas pixels

        Returns:
            ProcessedEvent or None: Event whose bar contains the pointer
        """
        if layout is None or layout.is_empty:
            return None
        if py < self.config.timeline.height:
            return None

        for index, thread, top, height in self.optimizer.iter_threads(layout, state):
            if py < top:
                break
            if py > top + height:
                continue
            for band in self.optimizer.iter_lane_bands(index, thread, top, state):
                if not band.contains_y(py):
                    continue
                for event in band.lane.events:
                    if self.optimizer.bar_rect(event, band.top, state).contains(px, py):
                        return event
                return None
        return None
