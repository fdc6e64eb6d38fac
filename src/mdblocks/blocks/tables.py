"""Pipe-table parsing, markdown rendering, and table editor operations.

parse_table() turns the lines of a detected table block into a ParsedTable;
render_table() turns a ParsedTable back into padded, aligned markdown.  The
pair round-trips: rendering then parsing returns the same table, since the
padding added by the renderer is stripped again by the parser.

The editor operations (add_row, cycle_align, ...) back the structured table
form.  They never mutate their input; each returns a new ParsedTable.
"""

import logging

from mdblocks.blocks.patterns import ALIGN_ORDER, DEFAULT_HEADER, MIN_COLUMN_WIDTH
from mdblocks.blocks.schema import Align, ParsedTable

logger = logging.getLogger(__name__)


# ─── Parsing ─────────────────────────────────────────────────────────────────


def _parse_pipe_row(line: str) -> list[str]:
    """Split a pipe-delimited row into stripped cell strings.

    Only one leading and one trailing pipe are removed.  Escaped pipes are
    not recognised, so a literal '|' inside a cell splits it.
    """
    inner = line.strip().removeprefix("|").removesuffix("|")
    return [cell.strip() for cell in inner.split("|")]


def _infer_align(separator_cell: str) -> Align:
    """Map a separator cell like ':---:' to its column alignment."""
    cell = separator_cell.strip()
    if cell.startswith(":") and cell.endswith(":"):
        return "center"
    if cell.endswith(":"):
        return "right"
    return "left"


def _fit_row(cells: list[str], n_cols: int) -> list[str]:
    """Pad with empty cells or truncate so the row has exactly *n_cols* cells."""
    return (cells + [""] * n_cols)[:n_cols]


def parse_table(lines: list[str]) -> ParsedTable:
    """Parse a table block (header, separator, data rows) into a ParsedTable.

    Never raises.  Fewer than two lines yields a one-column table with a
    single empty row; ragged rows are padded or truncated to the header
    width; a table without data rows gets one empty row so the editor always
    has something to fill in.
    """
    if len(lines) < 2:
        logger.debug("Table block has %d line(s); using default table", len(lines))
        return ParsedTable(headers=[DEFAULT_HEADER.format(1)], aligns=["left"], rows=[[""]])

    headers = _parse_pipe_row(lines[0])
    n_cols = len(headers)

    # Separator cells beyond the header width are ignored; missing ones are left-aligned
    aligns = [_infer_align(cell) for cell in _parse_pipe_row(lines[1])][:n_cols]
    aligns += ["left"] * (n_cols - len(aligns))

    rows = [_fit_row(_parse_pipe_row(line), n_cols) for line in lines[2:]]
    if not rows:
        rows.append([""] * n_cols)

    return ParsedTable(headers=headers, aligns=aligns, rows=rows)


# ─── Markdown Rendering ──────────────────────────────────────────────────────


def _column_widths(table: ParsedTable) -> list[int]:
    """Return the rendered width of each column (at least MIN_COLUMN_WIDTH)."""
    grid = [table.headers, *table.rows]
    return [max(MIN_COLUMN_WIDTH, *(len(row[ci]) for row in grid)) for ci in range(table.column_count)]


def _separator_cell(align: Align, width: int) -> str:
    """Build one separator cell of *width* characters encoding *align*."""
    if align == "center":
        return ":" + "-" * (width - 2) + ":"
    if align == "right":
        return "-" * (width - 1) + ":"
    return "-" * width


def _render_row(cells: list[str], widths: list[int]) -> str:
    # Empty cells become a single space so the column stays visible
    padded = [(cell or " ").ljust(width) for cell, width in zip(cells, widths)]
    return "| " + " | ".join(padded) + " |"


def render_table(table: ParsedTable) -> str:
    """Convert a ParsedTable into an aligned markdown pipe table (no trailing newline)."""
    widths = _column_widths(table)
    separator = "| " + " | ".join(_separator_cell(a, w) for a, w in zip(table.aligns, widths)) + " |"

    lines = [_render_row(table.headers, widths), separator]
    lines.extend(_render_row(row, widths) for row in table.rows)
    return "\n".join(lines)


# ─── Editor Operations ───────────────────────────────────────────────────────


def new_table(rows: int = 3, cols: int = 3) -> ParsedTable:
    """Return a blank table of *rows* grid lines (header included) by *cols* columns."""
    rows = max(2, rows)
    cols = max(1, cols)
    return ParsedTable(
        headers=[DEFAULT_HEADER.format(ci + 1) for ci in range(cols)],
        aligns=["left"] * cols,
        rows=[[""] * cols for _ in range(rows - 1)],
    )


def add_row(table: ParsedTable) -> ParsedTable:
    """Append an empty data row."""
    return table.model_copy(update={"rows": [*table.rows, [""] * table.column_count]})


def remove_row(table: ParsedTable) -> ParsedTable:
    """Drop the last data row, keeping at least one."""
    if len(table.rows) <= 1:
        return table
    return table.model_copy(update={"rows": table.rows[:-1]})


def add_column(table: ParsedTable) -> ParsedTable:
    """Append a left-aligned column with a default header and empty cells."""
    return table.model_copy(
        update={
            "headers": [*table.headers, DEFAULT_HEADER.format(table.column_count + 1)],
            "aligns": [*table.aligns, "left"],
            "rows": [[*row, ""] for row in table.rows],
        }
    )


def remove_column(table: ParsedTable) -> ParsedTable:
    """Drop the last column, keeping at least one."""
    if table.column_count <= 1:
        return table
    return table.model_copy(
        update={
            "headers": table.headers[:-1],
            "aligns": table.aligns[:-1],
            "rows": [row[:-1] for row in table.rows],
        }
    )


def cycle_align(table: ParsedTable, column: int) -> ParsedTable:
    """Advance one column's alignment: left -> center -> right -> left."""
    aligns = list(table.aligns)
    current = ALIGN_ORDER.index(aligns[column])
    aligns[column] = ALIGN_ORDER[(current + 1) % len(ALIGN_ORDER)]
    return table.model_copy(update={"aligns": aligns})


def set_cell(table: ParsedTable, row: int, column: int, value: str) -> ParsedTable:
    """Set one cell.  Row 0 is the header; data rows start at 1."""
    if row == 0:
        headers = list(table.headers)
        headers[column] = value
        return table.model_copy(update={"headers": headers})

    rows = [list(r) for r in table.rows]
    rows[row - 1][column] = value
    return table.model_copy(update={"rows": rows})
