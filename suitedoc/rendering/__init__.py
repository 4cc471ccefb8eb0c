"""Markdown rendering for grouped documentation sections."""

from __future__ import annotations

from .lint import MarkdownLinter
from .renderer import (
    DocRenderer,
    chapter_filename,
    render_chapter,
    render_index,
    render_overview,
    title_case,
)

__all__ = [
    "DocRenderer",
    "MarkdownLinter",
    "chapter_filename",
    "render_chapter",
    "render_index",
    "render_overview",
    "title_case",
]
