"""Splicing rendered blocks back into a document, plus document statistics.

The host owns the document text; these helpers take the current text and
return a new string, leaving every line outside the edited range verbatim.
"""

import logging

from mdblocks.blocks.schema import BlockRange, DocumentStats

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split document text on '\\n'.  Empty text is a single empty line."""
    return text.split("\n")


def replace_block(text: str, block: BlockRange, content: str) -> str:
    """Replace the lines of *block* with *content* (which may span several lines).

    Lines before block.start_line and after block.end_line are kept as-is.
    """
    lines = split_lines(text)
    before = lines[: block.start_line]
    after = lines[block.end_line + 1 :]
    logger.debug(
        "Replacing %s block at lines %d-%d with %d line(s)",
        block.type,
        block.start_line,
        block.end_line,
        content.count("\n") + 1,
    )
    return "\n".join([*before, content, *after])


def insert_block(text: str, position: int, content: str) -> str:
    """Insert a newly created block at character offset *position*.

    A blank line is added in front when the insertion point is mid-line, and
    the block is always followed by a newline.
    """
    position = max(0, min(position, len(text)))
    before, after = text[:position], text[position:]
    spacer = "\n\n" if before and not before.endswith("\n") else ""
    return f"{before}{spacer}{content}\n{after}"


def document_stats(text: str) -> DocumentStats:
    """Count characters, whitespace-separated words, and lines."""
    stripped = text.strip()
    return DocumentStats(
        chars=len(text),
        words=len(stripped.split()) if stripped else 0,
        lines=len(split_lines(text)),
    )
