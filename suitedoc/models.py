"""Core data models shared across suitedoc components."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

OVERVIEW_CHAPTER = "overview"


@dataclass(frozen=True)
class DocSection:
    """One documented test group and the tags from its preceding comment."""

    title: str
    description: str = ""
    details: str = ""
    chapters: Tuple[str, ...] = ()


@dataclass
class TagSet:
    """Structured tags extracted from a single doc comment."""

    title: Optional[str] = None
    notice: Optional[str] = None
    dev: Optional[str] = None
    chapters: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProjectMetadata:
    """Project name and description embedded in the overview page."""

    name: str
    description: str


ChapterMap = Dict[str, List[DocSection]]
