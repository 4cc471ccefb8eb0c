"""Generate markdown documentation from annotated test suites."""

from __future__ import annotations

from .orchestrator import GenerationOutcome, Orchestrator, generate

__all__ = ["GenerationOutcome", "Orchestrator", "generate"]
