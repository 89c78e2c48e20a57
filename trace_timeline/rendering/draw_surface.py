"""
Draw Surface - Abstract drawing target used by the renderer.

The renderer only talks to this interface, so frames can be painted with a
QPainter on screen or recorded headlessly. Colors are ``#RRGGBB`` or
``#AARRGGBB`` strings and fonts are CSS-like strings such as
``"bold 11px sans-serif"``. Text ``y`` coordinates are baselines.
"""

from abc import ABC, abstractmethod


class DrawSurface(ABC):
    """Minimal 2D drawing API needed to paint a timeline frame."""

    @property
    @abstractmethod
    def width(self):
        """Surface width in pixels."""

    @property
    @abstractmethod
    def height(self):
        """Surface height in pixels."""

    @abstractmethod
    def clear(self, color):
        """Fill the whole surface."""

    @abstractmethod
    def fill_rect(self, x, y, width, height, color):
        pass

    @abstractmethod
    def fill_rounded_rect(self, x, y, width, height, radius, color):
        pass

    @abstractmethod
    def stroke_rounded_rect(self, x, y, width, height, radius, color, line_width=1):
        pass

    @abstractmethod
    def draw_line(self, x1, y1, x2, y2, color, line_width=1):
        pass

    @abstractmethod
    def draw_text(self, text, x, y, font, color, clip=None):
        """
        Draw a single line of text.

        Args:
            text (str): Text to draw
            x, y: Left edge and baseline
            font (str): Font description
            color (str): Text color
            clip (tuple): Optional (x, y, width, height) clip rectangle
        """

    @abstractmethod
    def text_width(self, text, font):
        """Measure the advance width of ``text`` in pixels."""
