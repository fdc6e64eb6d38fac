"""Line classification helpers for markdown block detection.

Each function takes a single document line and returns True/False to
classify it as a table row, a table separator row, or a task-list item.
"""

from mdblocks.blocks.patterns import SEPARATOR_ROW_RE, TASK_LINE_RE


def is_table_row(line: str) -> bool:
    """Return True if the line is pipe-delimited on both ends, e.g. '| a | b |'."""
    stripped = line.strip()
    return stripped.startswith("|") and stripped.endswith("|") and len(stripped) > 2


def is_separator_row(line: str) -> bool:
    """Return True if the line is a header separator like '| --- | :-: |'."""
    return bool(SEPARATOR_ROW_RE.match(line.strip()))


def is_task_line(line: str) -> bool:
    """Return True if the line is a checkbox item such as '- [ ] buy milk'."""
    return bool(TASK_LINE_RE.match(line))
