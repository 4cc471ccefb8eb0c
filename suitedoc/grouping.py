"""Chapter grouping for extracted doc sections."""

from __future__ import annotations

from typing import Iterable, List

from .models import OVERVIEW_CHAPTER, ChapterMap, DocSection


def group_by_chapter(sections: Iterable[DocSection]) -> ChapterMap:
    """Bucket sections by declared chapter, keeping discovery order.

    Sections without chapters land in the ``overview`` bucket. A section that
    names a chapter more than once is appended once per mention. Declaring the
    reserved ``overview`` id is a ValueError.
    """
    chapters: ChapterMap = {OVERVIEW_CHAPTER: []}
    for section in sections:
        if not section.chapters:
            chapters[OVERVIEW_CHAPTER].append(section)
            continue
        if OVERVIEW_CHAPTER in section.chapters:
            raise ValueError(
                f"Section {section.title!r} declares the reserved chapter {OVERVIEW_CHAPTER!r}"
            )
        for chapter in section.chapters:
            chapters.setdefault(chapter, []).append(section)
    return chapters


def chapter_ids(chapters: ChapterMap) -> List[str]:
    """Return the non-overview chapter identifiers in discovery order."""
    return [name for name in chapters if name != OVERVIEW_CHAPTER]


__all__ = ["chapter_ids", "group_by_chapter"]
