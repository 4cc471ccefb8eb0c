"""Doc-comment extraction for test specification files."""

from __future__ import annotations

from .comments import locate_comment
from .sections import parse_file, parse_text
from .tags import extract_tags

__all__ = ["extract_tags", "locate_comment", "parse_file", "parse_text"]
