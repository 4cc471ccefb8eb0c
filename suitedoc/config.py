"""Configuration loading for suitedoc (.suitedoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".suitedoc.yml"

DEFAULT_PROJECT_NAME = "Project Documentation"
DEFAULT_PROJECT_DESCRIPTION = "Documentation generated from the test suite."


@dataclass
class SourceConfig:
    """Where annotated test files are discovered."""

    directory: str = "test"
    suffix: str = ".test.ts"


@dataclass
class OutputConfig:
    """Locations of the generated documents."""

    overview: str = "README.md"
    docs_dir: str = "docs"
    summary: str = "SUMMARY.md"
    templates_dir: Optional[Path] = None


@dataclass
class ProjectConfig:
    """Project metadata source and fallback values."""

    metadata_file: str = "package.json"
    name: str = DEFAULT_PROJECT_NAME
    description: str = DEFAULT_PROJECT_DESCRIPTION


@dataclass
class SuiteDocConfig:
    """Represents the settings defined in .suitedoc.yml."""

    root: Path
    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    project: ProjectConfig = field(default_factory=ProjectConfig)

    @property
    def source_dir(self) -> Path:
        return self.root / self.source.directory

    @property
    def overview_path(self) -> Path:
        return self.root / self.output.overview

    @property
    def docs_dir(self) -> Path:
        return self.root / self.output.docs_dir

    @property
    def summary_path(self) -> Path:
        return self.docs_dir / self.output.summary

    @property
    def metadata_path(self) -> Path:
        return self.root / self.project.metadata_file


def load_config(config_path: Path) -> SuiteDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SuiteDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source = SourceConfig()
    source_data = _as_dict(data.get("source"))
    source.directory = _as_str(source_data.get("dir")) or source.directory
    source.suffix = _as_str(source_data.get("suffix")) or source.suffix

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    output.overview = _as_str(output_data.get("overview")) or output.overview
    output.docs_dir = _as_str(output_data.get("docs_dir")) or output.docs_dir
    output.summary = _as_str(output_data.get("summary")) or output.summary
    templates_dir = _as_str(output_data.get("templates_dir"))
    output.templates_dir = root / templates_dir if templates_dir else None

    project = ProjectConfig()
    project_data = _as_dict(data.get("project"))
    project.metadata_file = _as_str(project_data.get("metadata_file")) or project.metadata_file
    project.name = _as_str(project_data.get("name")) or project.name
    project.description = _as_str(project_data.get("description")) or project.description

    return SuiteDocConfig(root=root, source=source, output=output, project=project)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "OutputConfig",
    "ProjectConfig",
    "SourceConfig",
    "SuiteDocConfig",
    "load_config",
]
