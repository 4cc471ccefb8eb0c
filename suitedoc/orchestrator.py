"""Pipeline orchestration: discover, parse, group, render, write."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from .config import SuiteDocConfig, load_config
from .errors import OutputWriteError
from .grouping import chapter_ids, group_by_chapter
from .logging import get_logger
from .metadata import load_metadata
from .models import ChapterMap, DocSection
from .parsing import parse_file
from .rendering import DocRenderer, chapter_filename


@dataclass
class GenerationOutcome:
    """Result of a documentation generation run."""

    root: Path
    source_files: List[Path] = field(default_factory=list)
    sections: List[DocSection] = field(default_factory=list)
    chapters: ChapterMap = field(default_factory=dict)
    written: List[Path] = field(default_factory=list)

    @property
    def generated(self) -> bool:
        return bool(self.written)


class Orchestrator:
    """Coordinates the documentation pipeline for one project root."""

    def __init__(self, renderer: DocRenderer | None = None) -> None:
        self._renderer = renderer
        self.logger = get_logger("orchestrator")

    def generate(self, path: str | os.PathLike[str] = ".") -> GenerationOutcome:
        """Regenerate the overview, chapter pages and index under ``path``."""
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        if not root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")

        config = load_config(root)
        outcome = GenerationOutcome(root=root)

        outcome.source_files = self.discover_sources(config)
        if not outcome.source_files:
            self.logger.warning(
                "No %s files found in %s/; nothing to generate",
                config.source.suffix,
                config.source.directory,
            )
            return outcome

        # Every source is read before the first write so a bad file leaves no partial output.
        for source in outcome.source_files:
            self.logger.info("Parsing %s", _display(source, root))
            outcome.sections.extend(parse_file(source))
        outcome.chapters = group_by_chapter(outcome.sections)
        self.logger.debug(
            "Collected %d section(s) across %d chapter(s)",
            len(outcome.sections),
            len(chapter_ids(outcome.chapters)),
        )

        metadata = load_metadata(
            config.metadata_path,
            default_name=config.project.name,
            default_description=config.project.description,
        )
        renderer = self._resolve_renderer(config)

        # Render everything up front; nothing touches disk until all documents exist.
        documents: List[Tuple[Path, str]] = [
            (
                config.overview_path,
                renderer.render_overview(
                    metadata.name,
                    metadata.description,
                    outcome.chapters,
                    index_link=_relative_link(config.summary_path, config.overview_path.parent),
                ),
            )
        ]
        for name in chapter_ids(outcome.chapters):
            documents.append(
                (
                    config.docs_dir / chapter_filename(name),
                    renderer.render_chapter(name, outcome.chapters[name]),
                )
            )
        documents.append(
            (
                config.summary_path,
                renderer.render_index(
                    outcome.chapters,
                    overview_link=_relative_link(config.overview_path, config.summary_path.parent),
                ),
            )
        )

        self._prepare_directories(target for target, _ in documents)
        for target, content in documents:
            outcome.written.append(self._write(target, content, root))
        return outcome

    def discover_sources(self, config: SuiteDocConfig) -> List[Path]:
        """Return matching source files in name order; empty when the directory is missing."""
        source_dir = config.source_dir
        if not source_dir.is_dir():
            self.logger.debug("Source directory %s does not exist", source_dir)
            return []
        return sorted(
            (
                entry
                for entry in source_dir.iterdir()
                if entry.name.endswith(config.source.suffix) and entry.is_file()
            ),
            key=lambda entry: entry.name,
        )

    def _resolve_renderer(self, config: SuiteDocConfig) -> DocRenderer:
        if self._renderer is not None:
            return self._renderer
        return DocRenderer(config.output.templates_dir)

    def _prepare_directories(self, targets: Iterable[Path]) -> None:
        for directory in sorted({target.parent for target in targets}):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise OutputWriteError(directory, str(exc)) from exc

    def _write(self, target: Path, content: str, root: Path) -> Path:
        try:
            with target.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(content)
        except OSError as exc:
            raise OutputWriteError(target, str(exc)) from exc
        self.logger.info("Generated %s", _display(target, root))
        return target


def generate(path: str | os.PathLike[str] = ".") -> GenerationOutcome:
    """Run the documentation pipeline with default collaborators."""
    return Orchestrator().generate(path)


def _relative_link(target: Path, start: Path) -> str:
    return Path(os.path.relpath(target, start)).as_posix()


def _display(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


__all__ = ["GenerationOutcome", "Orchestrator", "generate"]
