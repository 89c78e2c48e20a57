"""
Qt Painter Surface - DrawSurface implementation backed by a QPainter.
"""

import re

from PyQt5.QtCore import QRectF, QPointF, Qt
from PyQt5.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainterPath, QPen

from trace_timeline.rendering.draw_surface import DrawSurface

_FONT_PATTERN = re.compile(r'^(?:(bold)\s+)?(\d+(?:\.\d+)?)px\s+(.+)$')


def parse_font(spec):
    """
    Convert a CSS-like font string into a QFont.

    Args:
        spec (str): e.g. ``"bold 11px sans-serif"``

    Returns:
        QFont: Font with pixel size and weight applied
    """
    font = QFont()
    match = _FONT_PATTERN.match(spec.strip())
    if not match:
        return font
    bold, size, family = match.groups()
    if family == 'sans-serif':
        font.setStyleHint(QFont.SansSerif)
    else:
        font.setFamily(family)
    font.setPixelSize(max(1, int(round(float(size)))))
    font.setBold(bool(bold))
    return font


class QtPainterSurface(DrawSurface):
    """
    Paints onto an active QPainter.

    Fonts and colors are converted once and cached for the lifetime of the
    surface, which normally spans one paint event.
    """

    def __init__(self, painter, width, height):
        """
        Args:
            painter (QPainter): Painter already begun on the target device
            width, height: Size of the paint device in pixels
        """
        self.painter = painter
        self._width = width
        self._height = height
        self._fonts = {}
        self._metrics = {}
        self._colors = {}

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def _color(self, color):
        qcolor = self._colors.get(color)
        if qcolor is None:
            qcolor = QColor(color)
            self._colors[color] = qcolor
        return qcolor

    def _font(self, spec):
        font = self._fonts.get(spec)
        if font is None:
            font = parse_font(spec)
            self._fonts[spec] = font
            self._metrics[spec] = QFontMetricsF(font)
        return font

    def clear(self, color):
        self.painter.fillRect(QRectF(0, 0, self._width, self._height), self._color(color))

    def fill_rect(self, x, y, width, height, color):
        self.painter.fillRect(QRectF(x, y, width, height), self._color(color))

    def fill_rounded_rect(self, x, y, width, height, radius, color):
        path = QPainterPath()
        path.addRoundedRect(QRectF(x, y, width, height), radius, radius)
        self.painter.fillPath(path, QBrush(self._color(color)))

    def stroke_rounded_rect(self, x, y, width, height, radius, color, line_width=1):
        self.painter.save()
        self.painter.setPen(QPen(self._color(color), line_width))
        self.painter.setBrush(Qt.NoBrush)
        self.painter.drawRoundedRect(QRectF(x, y, width, height), radius, radius)
        self.painter.restore()

    def draw_line(self, x1, y1, x2, y2, color, line_width=1):
        self.painter.save()
        self.painter.setPen(QPen(self._color(color), line_width))
        self.painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))
        self.painter.restore()

    def draw_text(self, text, x, y, font, color, clip=None):
        self.painter.save()
        if clip is not None:
            self.painter.setClipRect(QRectF(*clip))
        self.painter.setFont(self._font(font))
        self.painter.setPen(self._color(color))
        self.painter.drawText(QPointF(x, y), text)
        self.painter.restore()

    def text_width(self, text, font):
        self._font(font)
        return self._metrics[font].horizontalAdvance(text)
