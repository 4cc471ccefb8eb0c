"""Section parsing for ``describe(...)`` blocks in test files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from ..errors import SourceReadError
from ..logging import get_logger
from ..models import OVERVIEW_CHAPTER, DocSection
from .comments import locate_comment
from .tags import extract_tags

_DESCRIBE_RE = re.compile(
    r"""\bdescribe\(\s*(["'])(?P<name>.+?)\1\s*,\s*"""
    r"""(?:async\s+)?(?:function\s*\(\s*\)|\(\s*\)\s*=>)"""
)

_LOGGER = get_logger("parsing")


def parse_text(text: str) -> List[DocSection]:
    """Build one section per ``describe`` opener in ``text``, in source order."""
    sections: List[DocSection] = []
    for match in _DESCRIBE_RE.finditer(text):
        name = match.group("name")
        tags = extract_tags(locate_comment(text, match.start()))
        # "overview" is the bucket for untagged sections, never a declared chapter.
        chapters = tuple(chapter for chapter in tags.chapters if chapter != OVERVIEW_CHAPTER)
        if len(chapters) != len(tags.chapters):
            _LOGGER.debug("Ignoring reserved @chapter %s on %r", OVERVIEW_CHAPTER, name)
        sections.append(
            DocSection(
                title=tags.title or name,
                description=tags.notice or "",
                details=tags.dev or "",
                chapters=chapters,
            )
        )
    return sections


def parse_file(path: Path) -> List[DocSection]:
    """Read ``path`` and return its documented sections."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(Path(path), str(exc)) from exc
    sections = parse_text(text)
    _LOGGER.debug("Parsed %d section(s) from %s", len(sections), path)
    return sections


__all__ = ["parse_file", "parse_text"]
