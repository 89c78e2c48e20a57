"""
Trace Timeline Visualization

Interactive flame-timeline viewer for Chrome trace event files such as the
ones written by ``clang -ftime-trace``. The engine (ingestion, viewport,
rendering, interaction) is toolkit-independent; the Qt widgets in
``timeline_canvas`` and ``timeline_window`` host it on the desktop.
"""

__version__ = "1.0.0"

from .config import DEFAULT_CONFIG, ViewerConfig
from .session import TraceSession

__all__ = ['DEFAULT_CONFIG', 'TraceSession', 'ViewerConfig']
