"""Locate the doc comment attached to a declaration."""

from __future__ import annotations

_OPEN = "/**"
_CLOSE = "*/"


def locate_comment(text: str, position: int) -> str:
    """Return the body of the ``/** ... */`` block ending right before ``position``.

    Only whitespace may separate the closing ``*/`` from ``position``; a block
    followed by any code (a ``//`` comment included) belongs to something else
    and yields an empty string.
    """
    before = text[:position].rstrip()
    if not before.endswith(_CLOSE):
        return ""
    close_index = len(before) - len(_CLOSE)
    # Block comments do not nest: the opener is the first "/*" after the previous "*/".
    previous_close = before.rfind(_CLOSE, 0, close_index)
    search_from = previous_close + len(_CLOSE) if previous_close != -1 else 0
    open_index = before.find("/*", search_from, close_index)
    if open_index == -1 or not before.startswith(_OPEN, open_index):
        return ""
    body_start = open_index + len(_OPEN)
    if body_start > close_index:
        # "/**/" is an empty plain comment, not a doc block.
        return ""
    return before[body_start:close_index]


__all__ = ["locate_comment"]
