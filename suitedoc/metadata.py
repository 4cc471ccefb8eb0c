"""Project metadata lookup (package.json name and description)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .logging import get_logger
from .models import ProjectMetadata

_LOGGER = get_logger("metadata")


def load_metadata(path: Path, *, default_name: str, default_description: str) -> ProjectMetadata:
    """Return name/description from ``path``; any problem falls back to the defaults."""
    fallback = ProjectMetadata(name=default_name, description=default_description)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _LOGGER.debug("No project metadata at %s; using defaults", path)
        return fallback
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        _LOGGER.warning("Ignoring unreadable project metadata %s: %s", path.name, exc)
        return fallback

    if not isinstance(payload, dict):
        _LOGGER.warning("Ignoring project metadata %s: expected a JSON object", path.name)
        return fallback

    return ProjectMetadata(
        name=_as_text(payload.get("name")) or default_name,
        description=_as_text(payload.get("description")) or default_description,
    )


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


__all__ = ["load_metadata"]
