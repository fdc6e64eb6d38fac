"""FastAPI JSON API exposing block detection and editing to the browser editor.

The server holds no document state: every request carries the current
buffer, and every response is computed by the pure functions in
mdblocks.blocks.  The browser re-posts the text to /api/blocks on each change
to place gutter markers, and round-trips a block through the parse/render
endpoints when the user edits it.

Usage:
    python -m mdblocks.web.app
    # => Uvicorn running on http://127.0.0.1:8000
"""

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from mdblocks import config
from mdblocks.blocks.detection import detect_blocks, extract_block_text, list_blocks
from mdblocks.blocks.document import document_stats, insert_block, replace_block, split_lines
from mdblocks.blocks.pipeline import run as normalise_document
from mdblocks.blocks.schema import BlockRange, DocumentStats, ParsedTable, ParsedTask
from mdblocks.blocks.tables import parse_table, render_table
from mdblocks.blocks.tasks import parse_tasks, render_tasks

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Request / response bodies
# ---------------------------------------------------------------------------


class DocumentBody(BaseModel):
    text: str


class BlockBody(BaseModel):
    text: str
    block: BlockRange


class ReplaceBody(BaseModel):
    text: str
    block: BlockRange
    content: str


class InsertBody(BaseModel):
    text: str
    position: int
    content: str


class LinesBody(BaseModel):
    lines: list[str]


class RenderTasksBody(BaseModel):
    title: str | None = None
    tasks: list[ParsedTask]


class BlocksResponse(BaseModel):
    blocks: list[BlockRange]
    stats: DocumentStats


class TextResponse(BaseModel):
    text: str


class MarkdownResponse(BaseModel):
    markdown: str


class TasksResponse(BaseModel):
    tasks: list[ParsedTask]


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _check_size(text: str) -> None:
    """Raise 413 if the document exceeds MAX_DOCUMENT_CHARS."""
    if len(text) > config.MAX_DOCUMENT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Document is {len(text)} chars; limit is {config.MAX_DOCUMENT_CHARS}",
        )


def _check_block(text: str, block: BlockRange) -> None:
    """Raise 400 if the block's range runs past the end of the document."""
    n_lines = len(split_lines(text))
    if block.end_line >= n_lines:
        raise HTTPException(
            status_code=400,
            detail=f"Block ends at line {block.end_line} but the document has {n_lines} lines",
        )


app = FastAPI(title="mdblocks")


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/api/health")
async def health():
    return {"ok": True}


@app.post("/api/blocks", response_model=BlocksResponse)
async def blocks(body: DocumentBody):
    """Detect table and task blocks (one entry per block) and document stats."""
    _check_size(body.text)
    found = list_blocks(detect_blocks(body.text))
    logger.debug("Detected %d blocks in %d chars", len(found), len(body.text))
    return BlocksResponse(blocks=found, stats=document_stats(body.text))


@app.post("/api/blocks/extract", response_model=TextResponse)
async def extract(body: BlockBody):
    """Return the raw markdown of one block."""
    _check_size(body.text)
    _check_block(body.text, body.block)
    return TextResponse(text=extract_block_text(body.text, body.block))


@app.post("/api/blocks/replace", response_model=TextResponse)
async def replace(body: ReplaceBody):
    """Splice edited block markdown back into the document at the block's lines."""
    _check_size(body.text)
    _check_block(body.text, body.block)
    logger.info("Replacing %s block at lines %d-%d", body.block.type, body.block.start_line, body.block.end_line)
    return TextResponse(text=replace_block(body.text, body.block, body.content))


@app.post("/api/blocks/insert", response_model=TextResponse)
async def insert(body: InsertBody):
    """Insert a newly created block at a character offset."""
    _check_size(body.text)
    logger.info("Inserting block at offset %d", body.position)
    return TextResponse(text=insert_block(body.text, body.position, body.content))


@app.post("/api/table/parse", response_model=ParsedTable)
async def table_parse(body: LinesBody):
    return parse_table(body.lines)


@app.post("/api/table/render", response_model=MarkdownResponse)
async def table_render(table: ParsedTable):
    return MarkdownResponse(markdown=render_table(table))


@app.post("/api/tasks/parse", response_model=TasksResponse)
async def tasks_parse(body: LinesBody):
    return TasksResponse(tasks=parse_tasks(body.lines))


@app.post("/api/tasks/render", response_model=MarkdownResponse)
async def tasks_render(body: RenderTasksBody):
    return MarkdownResponse(markdown=render_tasks(body.title, body.tasks))


@app.post("/api/document/normalise", response_model=TextResponse)
async def normalise(body: DocumentBody):
    """Canonicalise every table and task block in the document."""
    _check_size(body.text)
    return TextResponse(text=normalise_document(body.text))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main():
    """Start the web server via uvicorn."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
