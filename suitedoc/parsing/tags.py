"""Tag extraction for the fixed ``@title``/``@notice``/``@dev``/``@chapter`` vocabulary."""

from __future__ import annotations

import re

from ..models import TagSet

_GUTTER_RE = re.compile(r"^[ \t]*\*(?!/)[ \t]?", re.MULTILINE)
_TITLE_RE = re.compile(r"@title\s+(.+)")
_NOTICE_RE = re.compile(r"@notice\s+(.+)")
# Lazy up to the next marker; an "@" inside the body ends the capture too.
_DEV_RE = re.compile(r"@dev\s+(.+?)(?=@|\Z)", re.DOTALL)
_CHAPTER_RE = re.compile(r"@chapter\s+(\S+)")
_WHITESPACE_RE = re.compile(r"\s+")


def extract_tags(comment: str) -> TagSet:
    """Return the tags found in ``comment``; unknown or missing markers are ignored."""
    text = _GUTTER_RE.sub("", comment)
    tags = TagSet()

    title_match = _TITLE_RE.search(text)
    if title_match:
        tags.title = title_match.group(1).strip()

    notice_match = _NOTICE_RE.search(text)
    if notice_match:
        tags.notice = notice_match.group(1).strip()

    dev_match = _DEV_RE.search(text)
    if dev_match:
        tags.dev = _WHITESPACE_RE.sub(" ", dev_match.group(1).strip())

    tags.chapters = [match.group(1) for match in _CHAPTER_RE.finditer(text)]
    return tags


__all__ = ["extract_tags"]
