"""Markdown block detection and round-trip editing for tables and task lists."""
