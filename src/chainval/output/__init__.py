"""Display helpers for validation results."""

from .report import render_json, render_markdown, render_table

__all__ = ["render_json", "render_markdown", "render_table"]
