"""
Launch the trace timeline viewer.

Usage:
    python -m trace_timeline [-v] [trace.json]
"""

import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication

from trace_timeline.timeline_window import TimelineWindow


def main(argv=None):
    parser = argparse.ArgumentParser(prog="trace_timeline",
                                     description="Interactive flame-timeline for trace event files")
    parser.add_argument("trace", nargs="?", help="Trace JSON file to open")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = QApplication(sys.argv[:1])
    window = TimelineWindow()
    window.show()
    if args.trace:
        window.open_trace(args.trace)
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
