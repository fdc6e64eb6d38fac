"""Whole-document canonicalisation of table and task blocks.

Detects every block in a markdown document, re-renders each one through its
codec, and splices the result back in.  Tables come out padded and aligned,
task lists with two-space indents and blank items dropped.  Prose between
blocks is never touched.

Usage:
    python -m mdblocks.blocks.pipeline notes.md            # rewrite in place
    python -m mdblocks.blocks.pipeline notes.md -o out.md
    python -m mdblocks.blocks.pipeline notes.md --check    # exit 1 if not canonical
"""

import argparse
import logging
import sys
from pathlib import Path

from mdblocks import config
from mdblocks.blocks.detection import detect_blocks, extract_block_text, list_blocks
from mdblocks.blocks.document import replace_block, split_lines
from mdblocks.blocks.schema import BlockRange
from mdblocks.blocks.tables import parse_table, render_table
from mdblocks.blocks.tasks import parse_tasks, render_tasks

logger = logging.getLogger(__name__)


# ─── Block Rendering ─────────────────────────────────────────────────────────


def render_block(text: str, block: BlockRange) -> str:
    """Parse *block* out of *text* and return its canonical markdown."""
    lines = split_lines(extract_block_text(text, block))
    if block.type == "table":
        return render_table(parse_table(lines))
    return render_tasks(None, parse_tasks(lines))


# ─── Main Pipeline Step ──────────────────────────────────────────────────────


def run(text: str) -> str:
    """Return *text* with every table and task block in canonical form.

    Blocks are spliced bottom-up so the line numbers of blocks still to be
    processed stay valid.  Running the pass twice gives the same result as
    running it once.
    """
    blocks = list_blocks(detect_blocks(text))
    logger.info("Detected %d blocks", len(blocks))

    changed = 0
    for block in reversed(blocks):
        canonical = render_block(text, block)
        if canonical == extract_block_text(text, block):
            continue
        logger.debug("Rewriting %s block at lines %d-%d", block.type, block.start_line, block.end_line)
        text = replace_block(text, block, canonical)
        changed += 1

    logger.info("Rewrote %d/%d blocks", changed, len(blocks))
    return text


# ─── Entrypoint ──────────────────────────────────────────────────────────────


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Canonicalise markdown tables and task lists.")
    parser.add_argument("input", type=Path, help="Markdown file to process")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write here instead of in place")
    parser.add_argument("--check", action="store_true", help="Only report whether the file is canonical")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point.  Returns the process exit status."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    args = _parse_args(argv)

    if not args.input.is_file():
        logger.error("Input file not found: %s", args.input)
        return 2

    original = args.input.read_text(encoding="utf-8").replace("\r\n", "\n")
    result = run(original)

    if args.check:
        if result != original:
            logger.warning("%s is not canonical", args.input)
            return 1
        logger.info("%s is canonical", args.input)
        return 0

    output = args.output or args.input
    output.write_text(result, encoding="utf-8")
    logger.info("Wrote %s (%d chars)", output, len(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
