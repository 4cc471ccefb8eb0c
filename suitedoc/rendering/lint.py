"""Whitespace normalisation applied to every rendered document."""

from __future__ import annotations

from typing import List

_FENCE = "```"


class MarkdownLinter:
    """Makes template output stable: identical sections render byte for byte.

    Outside code fences the linter keeps at most one blank line in a row,
    separates headings from the preceding paragraph and drops blank lines at
    either end of the document. Fenced blocks are copied with only trailing
    spaces removed.
    """

    def lint(self, markdown: str) -> str:
        lines: List[str] = []
        in_fence = False
        for raw in markdown.splitlines():
            line = raw.rstrip()
            if line.startswith(_FENCE):
                in_fence = not in_fence
            elif not in_fence:
                self._append_prose(lines, line)
                continue
            lines.append(line)

        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines) + "\n"

    @staticmethod
    def _append_prose(lines: List[str], line: str) -> None:
        if not line:
            if lines and lines[-1]:
                lines.append("")
            return
        if line.startswith("#") and lines and lines[-1]:
            lines.append("")
        lines.append(line)


__all__ = ["MarkdownLinter"]
