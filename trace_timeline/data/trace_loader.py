"""
Trace Loader - Reads Chrome trace event JSON files for the host window.
"""

import json
import logging
import os

from trace_timeline.utils.error_handler import TraceLoadError

# Configure logger
logger = logging.getLogger(__name__)


def load_trace_file(path):
    """
    Read and decode a trace file.

    Args:
        path (str): Path to a ``.json`` trace (e.g. written by ``clang -ftime-trace``)

    Returns:
        dict: Dataset with a ``traceEvents`` list

    Raises:
        TraceLoadError: If the file is missing, unreadable or not a trace
    """
    if not path or not os.path.exists(path):
        raise TraceLoadError("Trace file not found", path=path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise TraceLoadError("Trace file is not valid JSON", path=path, original_error=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TraceLoadError("Failed to read trace file", path=path, original_error=e) from e

    # Traces may also be a bare array of events
    if isinstance(data, list):
        data = {'traceEvents': data}
    if not isinstance(data, dict) or not isinstance(data.get('traceEvents'), list):
        raise TraceLoadError("File does not contain a traceEvents array", path=path)

    logger.info(f"Read {len(data['traceEvents'])} trace events from {path}")
    return data
