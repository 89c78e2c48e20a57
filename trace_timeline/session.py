"""
Trace Session - Owns everything the timeline engine knows about one trace.

A session holds the ingested layout, the viewport transform and the current
selection. A new dataset replaces all of it at once: the previous layout,
selection and view are discarded before the next frame is painted.
"""

import logging

from trace_timeline.channel import COMMAND_UPDATE
from trace_timeline.config import DEFAULT_CONFIG
from trace_timeline.data.event_ingestor import EventIngestor
from trace_timeline.data.trace_models import TraceLayout
from trace_timeline.interaction.hit_tester import HitTester
from trace_timeline.rendering.event_renderer import EventRenderer
from trace_timeline.rendering.viewport_controller import ViewportController
from trace_timeline.rendering.viewport_optimizer import ViewportOptimizer

# Configure logger
logger = logging.getLogger(__name__)


def extract_trace_events(dataset):
    """
    Get the event list out of a dataset.

    Args:
        dataset: ``{"traceEvents": [...]}`` or a bare list of events

    Returns:
        list: Raw events; empty for anything else
    """
    if isinstance(dataset, dict):
        events = dataset.get('traceEvents')
        return events if isinstance(events, list) else []
    if isinstance(dataset, list):
        return dataset
    return []


class TraceSession:
    """
    The engine's single piece of mutable state.

    Attributes:
        layout (TraceLayout): Current threads, lanes and depths
        viewport (ViewportController): Pan/zoom transform
        selected: Selected ProcessedEvent or None
        context_event: Event the context menu was opened on, or None
    """

    def __init__(self, config=DEFAULT_CONFIG):
        """
        Initialize an empty session.

        Args:
            config (ViewerConfig): Engine configuration
        """
        self.config = config
        self.ingestor = EventIngestor()
        self.optimizer = ViewportOptimizer(config)
        self.viewport = ViewportController(config)
        self.renderer = EventRenderer(config, self.optimizer)
        self.hit_tester = HitTester(config, self.optimizer)
        self.layout = TraceLayout()
        self.selected = None
        self.context_event = None
        self._fit_pending = False

    @property
    def state(self):
        return self.viewport.state

    def content_height(self):
        state = self.viewport.state
        return self.layout.content_height(state.row_height, self.config.view.lane_gap,
                                          state.track_spacing)

    def ingest(self, dataset):
        """
        Replace the current trace with a new dataset and fit it to the view.

        Args:
            dataset: ``{"traceEvents": [...]}`` or a bare list of events

        Returns:
            TraceLayout: The new layout
        """
        self.reset()
        self.layout = self.ingestor.ingest(extract_trace_events(dataset))
        self.viewport.set_content(self.layout.max_time, self.content_height())
        # The canvas may not have a size yet; fit on the first resize instead
        fitted = self.viewport.reset_view()
        self._fit_pending = not fitted and not self.layout.is_empty
        logger.info(
            f"Loaded trace: {len(self.layout.threads)} threads, "
            f"{self.layout.event_count} events, {self.layout.max_time / 1000:.3f} ms"
        )
        return self.layout

    def reset(self):
        """Discard the current layout and selection."""
        self.layout = TraceLayout()
        self.selected = None
        self.context_event = None
        self.viewport.set_content(0.0, 0.0)

    def handle_message(self, message):
        """
        Handle an inbound host message.

        Args:
            message (dict): Message with a ``command`` key

        Returns:
            bool: True when the message replaced the dataset
        """
        if not isinstance(message, dict):
            return False
        if message.get('command') == COMMAND_UPDATE and message.get('data') is not None:
            self.ingest(message['data'])
            return True
        logger.debug(f"Ignoring inbound message: {message.get('command')}")
        return False

    def reset_view(self, width=None, height=None):
        fitted = self.viewport.reset_view(width, height)
        self._fit_pending = self._fit_pending and not fitted
        return fitted

    def resize(self, width, height):
        """Track a canvas size change, fitting a freshly loaded trace if still pending."""
        self.viewport.resize(width, height)
        if self._fit_pending:
            self._fit_pending = not self.viewport.reset_view()

    def render(self, surface):
        """
        Paint the current frame.

        Args:
            surface (DrawSurface): Drawing target

        Returns:
            RenderStats: Frame statistics
        """
        return self.renderer.render(self.layout, self.viewport.state, surface, self.selected)

    def hit_test(self, px, py):
        return self.hit_tester.hit_test(self.layout, self.viewport.state, px, py)
