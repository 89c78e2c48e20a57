"""
Trace Models - Data classes shared by ingestion, layout and rendering.

Raw records come straight from the ``traceEvents`` array of a Chrome trace
event file. Processed events are the closed intervals laid out on screen.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# Trace event phases understood by the ingestor
PHASE_COMPLETE = 'X'
PHASE_BEGIN = ('b', 'B')
PHASE_END = ('e', 'E')

# Lanes, in rendering order
LANE_MAIN = 'main'
LANE_SOURCE = 'source'
LANE_ORDER = (LANE_MAIN, LANE_SOURCE)


def classify_lane(name: str, category: Optional[str] = None) -> str:
    """
    Decide which lane an event belongs to.

    Source-processing spans (clang emits them as ``Source`` events) get their
    own stack so they do not interleave with frontend/backend timing.

    Args:
        name: Event name
        category: Event category, if any

    Returns:
        str: LANE_SOURCE or LANE_MAIN
    """
    if name == 'Source':
        return LANE_SOURCE
    if category and category.lower() == 'source':
        return LANE_SOURCE
    return LANE_MAIN


@dataclass
class RawEvent:
    """One record from the ``traceEvents`` array."""
    phase: str
    tid: Optional[str]
    name: str
    ts: float
    dur: Optional[float] = None
    category: Optional[str] = None
    detail: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RawEvent':
        """
        Build a RawEvent from a decoded JSON object.

        Raises:
            TypeError, ValueError: If ``ts`` or ``dur`` is not a finite number
        """
        tid = data.get('tid')
        args = data.get('args') or {}
        detail = args.get('detail') if isinstance(args, dict) else None
        ts = float(data.get('ts', 0))
        dur = data.get('dur')
        dur = None if dur is None else float(dur)
        # json accepts Infinity and NaN
        if not math.isfinite(ts) or (dur is not None and not math.isfinite(dur)):
            raise ValueError(f"Non-finite time in trace event: ts={ts}, dur={dur}")
        return cls(
            phase=str(data.get('ph', '')),
            tid=None if tid is None else str(tid),
            name=str(data.get('name', '')),
            ts=ts,
            dur=dur,
            category=data.get('cat'),
            detail=str(detail) if detail else "",
        )


@dataclass
class ProcessedEvent:
    """A closed interval on one thread/lane, ready for layout."""
    name: str
    detail: str
    start: float
    duration: float
    tid: str
    lane: str = LANE_MAIN
    depth: int = 0

    @property
    def end(self) -> float:
        return self.start + self.duration


@dataclass
class LaneLayout:
    """Sorted events of one lane plus the deepest nesting level reached."""
    name: str
    events: List[ProcessedEvent] = field(default_factory=list)
    max_depth: int = 0

    def height(self, row_height: float) -> float:
        return (self.max_depth + 1) * row_height


@dataclass
class Thread:
    """A trace thread and its non-empty lanes, in rendering order."""
    tid: str
    lanes: List[LaneLayout] = field(default_factory=list)

    @property
    def max_depth(self) -> int:
        return max((lane.max_depth for lane in self.lanes), default=0)

    @property
    def events(self) -> List[ProcessedEvent]:
        """All events of the thread, lane by lane."""
        return [event for lane in self.lanes for event in lane.events]

    def lane(self, name: str) -> Optional[LaneLayout]:
        for lane in self.lanes:
            if lane.name == name:
                return lane
        return None

    def height(self, row_height: float, lane_gap: float, track_spacing: float) -> float:
        """Total vertical extent including the spacing before the next thread."""
        lanes_height = sum(lane.height(row_height) for lane in self.lanes)
        gaps = lane_gap * max(0, len(self.lanes) - 1)
        return lanes_height + gaps + track_spacing


@dataclass
class TraceLayout:
    """Result of ingesting one dataset."""
    threads: List[Thread] = field(default_factory=list)
    max_time: float = 0.0
    event_count: int = 0
    dropped_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.max_time <= 0 or not self.threads

    def content_height(self, row_height: float, lane_gap: float, track_spacing: float) -> float:
        return sum(thread.height(row_height, lane_gap, track_spacing) for thread in self.threads)


@dataclass
class ViewState:
    """The pan/zoom transform: pixel origin, pixels per microsecond and row metrics."""
    x: float
    y: float
    scale: float
    row_height: float
    track_spacing: float
