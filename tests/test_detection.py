"""Unit tests for block detection, block listing, and block text extraction."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from mdblocks.blocks.detection import block_at, detect_blocks, extract_block_text, list_blocks
from mdblocks.blocks.schema import BlockRange
from mdblocks.blocks.tasks import parse_tasks

MIXED_DOC = "| A | B |\n|---|---|\n| 1 | 2 |\nplain text\n- [ ] buy milk\n  - [x] eggs"


# ===========================================================================
# detect_blocks tests
# ===========================================================================


class TestDetectBlocks:

    def test_mixed_document(self):
        blocks = detect_blocks(MIXED_DOC)
        table = BlockRange(type="table", start_line=0, end_line=2)
        tasks = BlockRange(type="tasks", start_line=4, end_line=5)
        assert blocks == {0: table, 1: table, 2: table, 4: tasks, 5: tasks}
        assert 3 not in blocks

    def test_mixed_document_task_indents(self):
        block = detect_blocks(MIXED_DOC)[4]
        lines = MIXED_DOC.split("\n")[block.start_line : block.end_line + 1]
        assert [t.indent for t in parse_tasks(lines)] == [0, 1]

    def test_lines_of_one_block_share_instance(self):
        blocks = detect_blocks(MIXED_DOC)
        assert blocks[0] is blocks[1] is blocks[2]
        assert blocks[4] is blocks[5]

    def test_empty_text(self):
        assert not detect_blocks("")

    def test_single_line(self):
        assert not detect_blocks("| lonely | row |")

    def test_single_task_line(self):
        assert detect_blocks("- [ ] one") == {0: BlockRange(type="tasks", start_line=0, end_line=0)}

    def test_header_and_separator_only(self):
        blocks = detect_blocks("| A |\n| --- |")
        assert blocks[0] == BlockRange(type="table", start_line=0, end_line=1)

    def test_table_row_without_separator_is_prose(self):
        assert not detect_blocks("| A | B |\n| 1 | 2 |")

    def test_separator_without_header_restarts_detection(self):
        """A separator-shaped line is itself a table row, so it can head a table."""
        text = "intro\n|---|---|\n|---|---|\n| 1 | 2 |"
        blocks = detect_blocks(text)
        assert 0 not in blocks
        assert blocks[1] == BlockRange(type="table", start_line=1, end_line=3)

    def test_table_stops_at_non_row(self):
        text = "| A |\n|---|\n| 1 |\n\n| 2 |"
        blocks = detect_blocks(text)
        assert blocks[0].end_line == 2
        assert 3 not in blocks
        assert 4 not in blocks

    def test_table_takes_precedence_then_tasks_follow(self):
        text = "| A |\n|---|\n- [ ] after"
        blocks = detect_blocks(text)
        assert blocks[0].type == "table"
        assert blocks[0].end_line == 1
        assert blocks[2] == BlockRange(type="tasks", start_line=2, end_line=2)

    def test_blank_line_splits_task_blocks(self):
        text = "- [ ] a\n\n- [x] b"
        blocks = detect_blocks(text)
        assert blocks[0] != blocks[2]
        assert blocks[0].end_line == 0
        assert blocks[2].start_line == 2

    def test_adjacent_tables_merge(self):
        """Table rows after the first table's body are consumed greedily."""
        text = "| A |\n|---|\n| 1 |\n| B |\n|---|"
        blocks = detect_blocks(text)
        assert blocks[0].end_line == 4

    def test_repeated_calls_are_independent(self):
        assert detect_blocks(MIXED_DOC) == detect_blocks(MIXED_DOC)
        assert not detect_blocks("nothing here")


# ===========================================================================
# list_blocks / block_at tests
# ===========================================================================


class TestListBlocks:

    def test_one_entry_per_block_in_order(self):
        result = list_blocks(detect_blocks(MIXED_DOC))
        assert result == [
            BlockRange(type="table", start_line=0, end_line=2),
            BlockRange(type="tasks", start_line=4, end_line=5),
        ]

    def test_empty_map(self):
        assert not list_blocks({})


class TestBlockAt:

    def test_inside_block(self):
        assert block_at(MIXED_DOC, 5) == BlockRange(type="tasks", start_line=4, end_line=5)

    def test_plain_line(self):
        assert block_at(MIXED_DOC, 3) is None

    def test_past_end(self):
        assert block_at(MIXED_DOC, 99) is None


# ===========================================================================
# extract_block_text tests
# ===========================================================================


class TestExtractBlockText:

    def test_table_block(self):
        block = BlockRange(type="table", start_line=0, end_line=2)
        assert extract_block_text(MIXED_DOC, block) == "| A | B |\n|---|---|\n| 1 | 2 |"

    def test_tasks_block(self):
        block = BlockRange(type="tasks", start_line=4, end_line=5)
        assert extract_block_text(MIXED_DOC, block) == "- [ ] buy milk\n  - [x] eggs"
