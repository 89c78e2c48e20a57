"""
Event Ingestor - Turns a raw trace event stream into a nested interval layout.

This module provides the EventIngestor class which:
- Pairs begin/end records into closed intervals
- Groups intervals by thread and lane
- Assigns each interval its nesting depth within its lane
- Tracks the overall time extent of the trace
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Union

from trace_timeline.data.trace_models import (
    LANE_ORDER, PHASE_BEGIN, PHASE_COMPLETE, PHASE_END,
    LaneLayout, ProcessedEvent, RawEvent, Thread, TraceLayout, classify_lane
)

# Configure logger
logger = logging.getLogger(__name__)


def assign_depths(events: List[ProcessedEvent]) -> int:
    """
    Sort one lane's events and assign nesting depths in place.

    Events are ordered by start time; ties put the longer interval first so
    an enclosing span is seen before the spans it contains. A stack holds the
    intervals still open at the current start time, and its size is the depth.

    Args:
        events: Events of a single (thread, lane)

    Returns:
        int: Maximum depth reached
    """
    events.sort(key=lambda e: (e.start, -e.duration))

    stack: List[ProcessedEvent] = []
    max_depth = 0
    for event in events:
        while stack and stack[-1].end <= event.start:
            stack.pop()
        event.depth = len(stack)
        if event.depth > max_depth:
            max_depth = event.depth
        stack.append(event)
    return max_depth


class EventIngestor:
    """
    Builds a TraceLayout from the ``traceEvents`` array of a trace file.

    Ingestion never raises on malformed records: events without a thread id,
    unmatched end records, unknown phases and records with non-numeric
    timestamps are dropped.

    Begin/end records are paired last-in-first-out per (thread, name). This is
    correct for properly nested scopes; overlapping same-named scopes on one
    thread may be paired differently from how they were emitted.
    """

    def ingest(self, raw_events: Optional[Iterable[Union[Dict[str, Any], RawEvent]]]) -> TraceLayout:
        """
        Ingest a complete dataset.

        Args:
            raw_events: Decoded ``traceEvents`` entries (dicts) or RawEvent objects

        Returns:
            TraceLayout: Threads in first-seen order with per-lane depth layout
        """
        lanes_by_thread: Dict[str, Dict[str, List[ProcessedEvent]]] = {}
        open_events: Dict[tuple, List[RawEvent]] = defaultdict(list)
        max_time = 0.0
        dropped = 0

        for record in raw_events or []:
            event = self._to_raw_event(record)
            if event is None or event.tid is None:
                dropped += 1
                continue

            # Thread order follows first reference; threads left without intervals are dropped below
            thread_lanes = lanes_by_thread.setdefault(event.tid, defaultdict(list))

            if event.phase == PHASE_COMPLETE:
                processed = ProcessedEvent(
                    name=event.name,
                    detail=event.detail,
                    start=event.ts,
                    duration=event.dur or 0.0,
                    tid=event.tid,
                    lane=classify_lane(event.name, event.category),
                )
            elif event.phase in PHASE_BEGIN:
                open_events[(event.tid, event.name)].append(event)
                continue
            elif event.phase in PHASE_END:
                stack = open_events.get((event.tid, event.name))
                if not stack:
                    dropped += 1
                    continue
                begin = stack.pop()
                processed = ProcessedEvent(
                    name=begin.name,
                    detail=begin.detail,
                    start=begin.ts,
                    duration=event.ts - begin.ts,
                    tid=event.tid,
                    lane=classify_lane(begin.name, begin.category),
                )
            else:
                continue

            thread_lanes[processed.lane].append(processed)
            if processed.end > max_time:
                max_time = processed.end

        layout = TraceLayout(max_time=max_time, dropped_count=dropped)
        for tid, thread_lanes in lanes_by_thread.items():
            thread = Thread(tid=tid)
            for lane_name in LANE_ORDER:
                events = thread_lanes.get(lane_name)
                if not events:
                    continue
                max_depth = assign_depths(events)
                thread.lanes.append(LaneLayout(name=lane_name, events=events, max_depth=max_depth))
                layout.event_count += len(events)
            if thread.lanes:
                layout.threads.append(thread)

        logger.debug(
            f"Ingested {layout.event_count} events on {len(layout.threads)} threads "
            f"(dropped {dropped}, max time {max_time})"
        )
        return layout

    @staticmethod
    def _to_raw_event(record) -> Optional[RawEvent]:
        if isinstance(record, RawEvent):
            return record
        if not isinstance(record, dict):
            return None
        try:
            return RawEvent.from_dict(record)
        except (TypeError, ValueError):
            return None
