"""Helpers for the file paths carried in trace event details."""

import re

# Trailing ":line" or ":line:col"
_LOCATION_SUFFIX = re.compile(r':\d+(?::\d+)?$')
_PATH_SEPARATORS = re.compile(r'[\\/]')


def shorten_path(text):
    """
    Return the last path segment of a detail string.

    Args:
        text (str): Detail string, usually a file path

    Returns:
        str: Last segment, or the text itself when it ends with a separator
    """
    if not text:
        return ""
    parts = _PATH_SEPARATORS.split(text)
    return parts[-1] or text


def _strip_angle_suffix(text):
    """Remove a trailing, possibly nested, ``<...>`` group."""
    if not text.endswith('>'):
        return text
    depth = 0
    for index in range(len(text) - 1, -1, -1):
        char = text[index]
        if char == '>':
            depth += 1
        elif char == '<':
            depth -= 1
            if depth == 0:
                return text[:index].rstrip()
    # Unbalanced brackets are left alone
    return text


def clean_detail_path(text):
    """
    Strip trailing location and angle-bracket suffixes from a detail string.

    ``/src/a.h:12:5`` becomes ``/src/a.h`` and ``/src/b.h <Foo<int>>``
    becomes ``/src/b.h``. Suffixes are removed repeatedly so combinations
    such as ``a.cpp:3 <inline>`` are handled too.

    Args:
        text (str): Detail string

    Returns:
        str: Path without suffixes
    """
    if not text:
        return ""
    cleaned = text.strip()
    while True:
        stripped = _strip_angle_suffix(cleaned)
        stripped = _LOCATION_SUFFIX.sub('', stripped).rstrip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def split_location(text):
    """
    Split a detail string into (path, line, column).

    Line and column are None when absent.
    """
    path = clean_detail_path(text)
    if not path:
        return "", None, None
    match = re.match(r':(\d+)(?::(\d+))?', text.strip()[len(path):])
    if not match:
        return path, None, None
    line = int(match.group(1))
    column = int(match.group(2)) if match.group(2) else None
    return path, line, column
