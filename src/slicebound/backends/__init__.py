"""Backends for rendering policy reports (Markdown, etc.)."""

from .markdown_table import TableMode, generate_markdown, save_markdown_file

__all__ = ["TableMode", "generate_markdown", "save_markdown_file"]
