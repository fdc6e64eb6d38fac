"""Block detection over a whole markdown document.

Scans the document line by line with a single forward cursor and groups runs
of lines into table and task-list blocks.  The result is keyed by line number
so the editor gutter can ask "which block does line N belong to?" in O(1).
Detection is a pure function of the text and is re-run on every change.
"""

import logging

from mdblocks.blocks.classifiers import is_separator_row, is_table_row, is_task_line
from mdblocks.blocks.schema import BlockRange

logger = logging.getLogger(__name__)


# ─── Block Scanning ──────────────────────────────────────────────────────────


def _scan_table(lines: list[str], start: int) -> int:
    """Return the last line index of the table whose header is at *start*.

    The header and separator are already known to match; every following
    pipe-delimited row belongs to the table.
    """
    i = start + 2  # skip header and separator
    while i < len(lines) and is_table_row(lines[i]):
        i += 1
    return i - 1


def _scan_tasks(lines: list[str], start: int) -> int:
    """Return the last line index of the run of task lines starting at *start*."""
    i = start
    while i < len(lines) and is_task_line(lines[i]):
        i += 1
    return i - 1


def detect_blocks(text: str) -> dict[int, BlockRange]:
    """Map every line index inside a table or task block to its BlockRange.

    A table needs a table row immediately followed by a separator row; it
    then extends over all consecutive table rows.  A task block is a run of
    consecutive task lines.  Lines outside any block have no entry.  Every
    line of one block maps to the same BlockRange instance.
    """
    lines = text.split("\n")
    line_to_block: dict[int, BlockRange] = {}
    n = len(lines)
    i = 0

    while i < n:
        if is_table_row(lines[i]) and i + 1 < n and is_separator_row(lines[i + 1]):
            block = BlockRange(type="table", start_line=i, end_line=_scan_table(lines, i))
        elif is_task_line(lines[i]):
            block = BlockRange(type="tasks", start_line=i, end_line=_scan_tasks(lines, i))
        else:
            i += 1
            continue

        for line_idx in range(block.start_line, block.end_line + 1):
            line_to_block[line_idx] = block
        i = block.end_line + 1

    logger.debug("Detected blocks in %d lines: %d lines mapped", n, len(line_to_block))
    return line_to_block


# ─── Block Lookup ────────────────────────────────────────────────────────────


def list_blocks(line_to_block: dict[int, BlockRange]) -> list[BlockRange]:
    """Return the distinct blocks of a detection map, ordered by start line.

    Used to place exactly one gutter marker per block, at its first line.
    """
    unique = {block.start_line: block for block in line_to_block.values()}
    return [unique[start] for start in sorted(unique)]


def block_at(text: str, line: int) -> BlockRange | None:
    """Return the block containing *line*, or None if the line is plain text."""
    return detect_blocks(text).get(line)


def extract_block_text(text: str, block: BlockRange) -> str:
    """Return the block's lines from *text*, joined with newlines."""
    lines = text.split("\n")
    return "\n".join(lines[block.start_line : block.end_line + 1])
