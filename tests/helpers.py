"""Headless stand-ins for the drawing surface and the host channel."""

from trace_timeline.channel import HostChannel
from trace_timeline.rendering.draw_surface import DrawSurface

CHAR_WIDTH = 6


class RecordingSurface(DrawSurface):
    """Records every drawing call as a (name, args) tuple."""

    def __init__(self, width=1000, height=600):
        self._width = width
        self._height = height
        self.calls = []

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def clear(self, color):
        self.calls.append(('clear', (color,)))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(('fill_rect', (x, y, width, height, color)))

    def fill_rounded_rect(self, x, y, width, height, radius, color):
        self.calls.append(('fill_rounded_rect', (x, y, width, height, radius, color)))

    def stroke_rounded_rect(self, x, y, width, height, radius, color, line_width=1):
        self.calls.append(('stroke_rounded_rect', (x, y, width, height, radius, color)))

    def draw_line(self, x1, y1, x2, y2, color, line_width=1):
        self.calls.append(('draw_line', (x1, y1, x2, y2, color)))

    def draw_text(self, text, x, y, font, color, clip=None):
        self.calls.append(('draw_text', (text, x, y, font, color, clip)))

    def text_width(self, text, font):
        return len(text) * CHAR_WIDTH

    def of(self, name):
        return [args for call, args in self.calls if call == name]

    def texts(self):
        return [args[0] for args in self.of('draw_text')]


class FakeChannel(HostChannel):
    """Collects outbound requests instead of delivering them."""

    def __init__(self):
        self.sent = []

    def send(self, message):
        self.sent.append(message)


def complete(tid, name, ts, dur, detail=None, cat=None):
    event = {'ph': 'X', 'tid': tid, 'name': name, 'ts': ts, 'dur': dur, 'pid': 1}
    if detail is not None:
        event['args'] = {'detail': detail}
    if cat is not None:
        event['cat'] = cat
    return event


def begin(tid, name, ts, detail=None):
    event = {'ph': 'b', 'tid': tid, 'name': name, 'ts': ts, 'pid': 1}
    if detail is not None:
        event['args'] = {'detail': detail}
    return event


def end(tid, name, ts):
    return {'ph': 'e', 'tid': tid, 'name': name, 'ts': ts, 'pid': 1}
