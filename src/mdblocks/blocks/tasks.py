"""Task-list parsing, markdown rendering, and task editor operations.

Tasks are a flat, ordered list of ParsedTask records.  Nesting is carried by
each item's indent depth alone (two spaces per level); there are no parent
links, so the list is never rebuilt into a tree.
"""

import logging

from mdblocks.blocks.patterns import BLANK_TASK_TEXT, INDENT_WIDTH, MAX_TASK_INDENT, TASK_ITEM_RE
from mdblocks.blocks.schema import ParsedTask

logger = logging.getLogger(__name__)


# ─── Parsing ─────────────────────────────────────────────────────────────────


def _parse_task_line(line: str) -> ParsedTask:
    """Parse one '- [x] text' line; non-matching lines become plain unchecked items."""
    match = TASK_ITEM_RE.match(line)
    if match is None:
        logger.debug("Not a task line, keeping as plain item: %r", line)
        return ParsedTask(text=line.strip(), done=False, indent=0)

    leading, mark, text = match.groups()
    return ParsedTask(text=text, done=mark == "x", indent=len(leading) // INDENT_WIDTH)


def parse_tasks(lines: list[str]) -> list[ParsedTask]:
    """Parse the lines of a task block into ParsedTask records, in document order."""
    return [_parse_task_line(line) for line in lines]


# ─── Markdown Rendering ──────────────────────────────────────────────────────


def render_tasks(title: str | None, tasks: list[ParsedTask]) -> str:
    """Convert tasks into an indented checkbox list, optionally under a '## title' heading.

    Blank items are dropped when the list has more than one item.  A lone
    item is always emitted, with '...' standing in for missing text, so the
    output is never an empty list.  Indent depth is taken as given.
    """
    lines: list[str] = []
    if title and title.strip():
        lines.extend([f"## {title}", ""])

    keep_blank = len(tasks) == 1
    for task in tasks:
        if not task.text.strip() and not keep_blank:
            continue
        checkbox = "[x]" if task.done else "[ ]"
        indent = " " * (INDENT_WIDTH * task.indent)
        lines.append(f"{indent}- {checkbox} {task.text or BLANK_TASK_TEXT}")

    return "\n".join(lines)


# ─── Editor Operations ───────────────────────────────────────────────────────


def new_task_list() -> list[ParsedTask]:
    """Return the starting state of the task editor: one blank item."""
    return [ParsedTask(text="")]


def add_task(tasks: list[ParsedTask], after_index: int, indent: int = 0) -> list[ParsedTask]:
    """Insert a blank task directly after *after_index*."""
    return [*tasks[: after_index + 1], ParsedTask(text="", indent=indent), *tasks[after_index + 1 :]]


def remove_task(tasks: list[ParsedTask], index: int) -> list[ParsedTask]:
    """Remove one task.  Removing the last remaining task resets to a blank list."""
    if len(tasks) <= 1:
        return new_task_list()
    return [task for i, task in enumerate(tasks) if i != index]


def update_task(tasks: list[ParsedTask], index: int, **changes) -> list[ParsedTask]:
    """Return a copy of *tasks* with fields of the task at *index* replaced."""
    updated = list(tasks)
    updated[index] = ParsedTask(**{**tasks[index].model_dump(), **changes})
    return updated


def toggle_task(tasks: list[ParsedTask], index: int) -> list[ParsedTask]:
    """Flip the done flag of one task."""
    return update_task(tasks, index, done=not tasks[index].done)


def indent_task(tasks: list[ParsedTask], index: int) -> list[ParsedTask]:
    """Nest one task a level deeper, up to MAX_TASK_INDENT."""
    return update_task(tasks, index, indent=min(MAX_TASK_INDENT, tasks[index].indent + 1))


def outdent_task(tasks: list[ParsedTask], index: int) -> list[ParsedTask]:
    """Move one task a level shallower, down to 0."""
    return update_task(tasks, index, indent=max(0, tasks[index].indent - 1))
