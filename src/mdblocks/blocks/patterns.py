"""Compiled regex patterns and constants for markdown block detection.

These patterns identify the two structured block shapes the editor knows
how to round-trip: GitHub-style pipe tables and checkbox task lists.  Used
by classifiers.py, tables.py, and tasks.py.
"""

import re

# ─── Table Patterns ───────────────────────────────────────────────────────────

# Separator row under a table header, e.g. "| --- | :-: | --: |".
# The first cell needs at least one hyphen; later cells may be hyphen-free.
SEPARATOR_ROW_RE = re.compile(r"^\|[\s:]*-+[\s:]*(\|[\s:]*-*[\s:]*)*\|$")

# Narrowest rendered column; "---" is the shortest valid separator cell
MIN_COLUMN_WIDTH = 3

# Header label used for synthesised columns ("Header 1", "Header 2", ...)
DEFAULT_HEADER = "Header {}"

# Cycle order for the per-column alignment toggle
ALIGN_ORDER = ("left", "center", "right")


# ─── Task Patterns ────────────────────────────────────────────────────────────

# Start of a checkbox list item: "- [ ] " or "  - [x] "
TASK_LINE_RE = re.compile(r"^\s*-\s+\[(x| )\]\s")

# Full task item: (leading whitespace, checkbox mark, item text)
TASK_ITEM_RE = re.compile(r"^(\s*)-\s+\[(x| )\]\s(.*)")

# Leading spaces per indent level
INDENT_WIDTH = 2

# Deepest nesting the task editor allows (three levels: 0, 1, 2)
MAX_TASK_INDENT = 2

# Text emitted for a lone task that was never filled in
BLANK_TASK_TEXT = "..."
