"""Detection, parsing, and rendering of editable markdown blocks.

Submodules:
  patterns     -- compiled regex patterns and constants
  classifiers  -- line classification helpers
  schema       -- BlockRange, ParsedTable, ParsedTask Pydantic models
  detection    -- block detection over a whole document
  tables       -- pipe-table parse/render and table editor operations
  tasks        -- task-list parse/render and task editor operations
  document     -- splicing rendered blocks back into the document, stats
  pipeline     -- whole-document canonicalisation pass and CLI entry point
"""
