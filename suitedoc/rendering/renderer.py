"""Jinja-backed rendering of the overview, chapter and index documents."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Sequence

from jinja2 import Environment, FileSystemLoader

from ..grouping import chapter_ids
from ..models import OVERVIEW_CHAPTER, ChapterMap, DocSection
from .lint import MarkdownLinter

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
DEFAULT_OVERVIEW_LINK = "../README.md"
DEFAULT_INDEX_LINK = "docs/SUMMARY.md"


def title_case(identifier: str) -> str:
    """Turn ``user-decryption`` into ``User Decryption``."""
    pieces = [piece for piece in identifier.split("-") if piece]
    return " ".join(piece[0].upper() + piece[1:] for piece in pieces)


def chapter_filename(identifier: str) -> str:
    """Return the file name a chapter is written to inside the docs directory."""
    return f"{identifier}.md"


class DocRenderer:
    """Renders chapter-grouped sections into markdown documents."""

    OVERVIEW_TEMPLATE = "overview.md.j2"
    CHAPTER_TEMPLATE = "chapter.md.j2"
    INDEX_TEMPLATE = "summary.md.j2"

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        linter: MarkdownLinter | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.linter = linter or MarkdownLinter()
        self._env = self._create_env(templates_dir)

    def render_overview(
        self,
        project_name: str,
        description: str,
        chapters: ChapterMap,
        *,
        index_link: str = DEFAULT_INDEX_LINK,
    ) -> str:
        return self._render(
            self.OVERVIEW_TEMPLATE,
            project_name=project_name,
            description=description,
            overview_sections=list(chapters.get(OVERVIEW_CHAPTER, [])),
            chapters=self._chapter_entries(chapters),
            index_link=index_link,
        )

    def render_chapter(self, identifier: str, sections: Sequence[DocSection]) -> str:
        return self._render(
            self.CHAPTER_TEMPLATE,
            heading=title_case(identifier),
            sections=list(sections),
        )

    def render_index(
        self, chapters: ChapterMap, *, overview_link: str = DEFAULT_OVERVIEW_LINK
    ) -> str:
        return self._render(
            self.INDEX_TEMPLATE,
            overview_link=overview_link,
            chapters=self._chapter_entries(chapters),
        )

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return self.linter.lint(template.render(**context))

    @staticmethod
    def _chapter_entries(chapters: ChapterMap) -> List[Dict[str, object]]:
        return [
            {
                "id": name,
                "heading": title_case(name),
                "file": chapter_filename(name),
                "sections": list(chapters[name]),
            }
            for name in chapter_ids(chapters)
        ]

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(DEFAULT_TEMPLATES_DIR)
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


@lru_cache(maxsize=1)
def _default_renderer() -> DocRenderer:
    return DocRenderer()


def render_overview(project_name: str, description: str, chapters: ChapterMap) -> str:
    """Render the root overview page with the packaged templates."""
    return _default_renderer().render_overview(project_name, description, chapters)


def render_chapter(identifier: str, sections: Sequence[DocSection]) -> str:
    """Render a single chapter page with the packaged templates."""
    return _default_renderer().render_chapter(identifier, sections)


def render_index(chapters: ChapterMap, overview_link: str = DEFAULT_OVERVIEW_LINK) -> str:
    """Render the SUMMARY index with the packaged templates."""
    return _default_renderer().render_index(chapters, overview_link=overview_link)


__all__ = [
    "DocRenderer",
    "chapter_filename",
    "render_chapter",
    "render_index",
    "render_overview",
    "title_case",
]
