"""Unit tests for splicing blocks into documents and document statistics."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from mdblocks.blocks.detection import detect_blocks
from mdblocks.blocks.document import document_stats, insert_block, replace_block, split_lines
from mdblocks.blocks.schema import BlockRange, DocumentStats

SIX_LINE_DOC = "# Title\nintro\n| A | B |\n|---|---|\n| 1 | 2 |\noutro"


# ===========================================================================
# replace_block tests
# ===========================================================================


class TestReplaceBlock:

    def test_replace_detected_table(self):
        block = detect_blocks(SIX_LINE_DOC)[2]
        assert (block.start_line, block.end_line) == (2, 4)

        result = replace_block(SIX_LINE_DOC, block, "| X |\n| --- |")
        lines = split_lines(result)
        assert len(lines) == 6 - 3 + 2
        assert lines[:2] == ["# Title", "intro"]
        assert lines[2:4] == ["| X |", "| --- |"]
        assert lines[4:] == ["outro"]

    def test_untouched_lines_keep_carriage_returns(self):
        text = "keep\r\n- [ ] a\nafter\r"
        block = BlockRange(type="tasks", start_line=1, end_line=1)
        assert replace_block(text, block, "- [x] a") == "keep\r\n- [x] a\nafter\r"

    def test_block_at_document_start(self):
        text = "- [ ] a\n- [ ] b\ntail"
        block = BlockRange(type="tasks", start_line=0, end_line=1)
        assert replace_block(text, block, "- [x] c") == "- [x] c\ntail"

    def test_block_at_document_end(self):
        text = "head\n- [ ] a"
        block = BlockRange(type="tasks", start_line=1, end_line=1)
        assert replace_block(text, block, "- [ ] a\n- [ ] b") == "head\n- [ ] a\n- [ ] b"

    def test_replace_with_empty_content_leaves_blank_line(self):
        text = "a\n- [ ] x\nb"
        block = BlockRange(type="tasks", start_line=1, end_line=1)
        assert replace_block(text, block, "") == "a\n\nb"


# ===========================================================================
# insert_block tests
# ===========================================================================


class TestInsertBlock:

    def test_insert_into_empty_document(self):
        assert insert_block("", 0, "- [ ] a") == "- [ ] a\n"

    def test_insert_mid_line_adds_blank_line(self):
        assert insert_block("hello world", 5, "- [ ] a") == "hello\n\n- [ ] a\n world"

    def test_insert_at_line_start(self):
        assert insert_block("one\ntwo", 4, "| A |") == "one\n| A |\ntwo"

    def test_position_clamped(self):
        assert insert_block("text", 999, "X") == "text\n\nX\n"
        assert insert_block("text", -5, "X") == "X\ntext"


# ===========================================================================
# document_stats tests
# ===========================================================================


class TestDocumentStats:

    def test_basic_counts(self):
        assert document_stats("hello world\nbye") == DocumentStats(chars=15, words=3, lines=2)

    def test_empty_document(self):
        assert document_stats("") == DocumentStats(chars=0, words=0, lines=1)

    def test_whitespace_only(self):
        assert document_stats("  \n\t ") == DocumentStats(chars=5, words=0, lines=2)

    def test_trailing_newline_counts_line(self):
        assert document_stats("a\n").lines == 2
