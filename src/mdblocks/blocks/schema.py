"""Pydantic models for detected blocks and their structured contents.

BlockRange values come out of the detector and are recomputed on every
document change.  ParsedTable and ParsedTask are the working copies held by
the structured editors until the user confirms an edit.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

BlockType = Literal["table", "tasks"]
Align = Literal["left", "center", "right"]


class BlockRange(BaseModel):
    """An inclusive, 0-indexed line span recognised as one table or task list.

    Frozen so that two ranges describing the same span compare (and hash)
    equal; the detector maps every line of a block to the same instance.
    """

    model_config = ConfigDict(frozen=True)

    type: BlockType
    start_line: int = Field(ge=0)
    end_line: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_span(self) -> "BlockRange":
        """Ensure the range is not inverted."""
        if self.end_line < self.start_line:
            raise ValueError(f"end_line {self.end_line} is before start_line {self.start_line}")
        return self

    @property
    def line_count(self) -> int:
        """Number of document lines covered by the block."""
        return self.end_line - self.start_line + 1


class ParsedTable(BaseModel):
    """Structured pipe table: column headers, per-column alignment, and data rows.

    The model_validator guarantees one alignment per header and exactly
    len(headers) cells in every row, so the renderer never has to deal with
    ragged input.  parse_table() pads and truncates before constructing.
    """

    headers: list[str]
    aligns: list[Align]
    rows: list[list[str]]

    @model_validator(mode="after")
    def validate_shape(self) -> "ParsedTable":
        """Ensure aligns and every row match the header column count."""
        n_cols = len(self.headers)
        if len(self.aligns) != n_cols:
            raise ValueError(f"Got {len(self.aligns)} aligns, expected {n_cols} (matching headers)")
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching headers)")
        return self

    @property
    def column_count(self) -> int:
        return len(self.headers)


class ParsedTask(BaseModel):
    """One checkbox list item.  Nesting is the indent depth only, not a tree."""

    text: str
    done: bool = False
    indent: int = Field(default=0, ge=0)


class DocumentStats(BaseModel):
    """Character, word, and line counts shown in the editor status bar."""

    chars: int
    words: int
    lines: int
