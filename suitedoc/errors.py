"""Exception hierarchy shared by suitedoc components."""

from __future__ import annotations

from pathlib import Path


class SuiteDocError(RuntimeError):
    """Base class for fatal documentation generation failures."""


class ConfigError(SuiteDocError):
    """Raised when the configuration file cannot be parsed."""


class SourceReadError(SuiteDocError):
    """Raised when a test source file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path


class OutputWriteError(SuiteDocError):
    """Raised when a generated document or its directory cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to write {path}: {reason}")
        self.path = path


__all__ = ["ConfigError", "OutputWriteError", "SourceReadError", "SuiteDocError"]
