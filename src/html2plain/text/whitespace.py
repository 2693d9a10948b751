"""Blank line normalization and word wrapping."""

from __future__ import annotations

import re
import textwrap

_BLANK_LINE_RX = re.compile(r"\n\s+\n", re.ASCII)
_NEWLINE_RUN_RX = re.compile(r"\n{3,}")


def normalize_whitespace(text: str) -> str:
    """Collapse blank lines to at most one and drop leading blank lines.

    Lines holding only whitespace count as blank.
    """

    text = _BLANK_LINE_RX.sub("\n\n", text)
    text = _NEWLINE_RUN_RX.sub("\n\n", text)
    return text.lstrip("\n")


def wrap_text(text: str, width: int) -> str:
    """Greedily wrap every line of ``text`` to ``width`` columns.

    Existing line breaks are kept and words longer than ``width`` are never
    split.  Tabs count as a single column.  A ``width`` of zero or less
    disables wrapping.
    """

    if width <= 0:
        return text

    wrapper = textwrap.TextWrapper(
        width=width,
        expand_tabs=False,
        replace_whitespace=False,
        break_long_words=False,
        break_on_hyphens=False,
    )
    lines: list[str] = []
    for line in text.split("\n"):
        lines.extend(wrapper.wrap(line) or [""])
    return "\n".join(lines)


__all__ = ["normalize_whitespace", "wrap_text"]
