"""Utility functions for replacing spans of a text buffer.

Spans are half-open intervals ``[start, end)``.  Replacements are applied from
right to left so that earlier offsets stay valid while the buffer changes
length; callers never track running offset deltas themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from html2plain.utils.errors import OverlapError, SpanOutOfBoundsError


@dataclass(slots=True, frozen=True)
class Replacement:
    """Replace ``text[start:end]`` with ``text``."""

    start: int
    end: int
    text: str


def apply_replacements(text: str, replacements: Iterable[Replacement]) -> str:
    """Return ``text`` with every replacement applied.

    Raises :class:`SpanOutOfBoundsError` for spans outside ``text`` and
    :class:`OverlapError` when two spans overlap.
    """

    ordered = sorted(replacements, key=lambda r: (r.start, r.end))
    if not ordered:
        return text

    prev_end = 0
    for rep in ordered:
        if not (0 <= rep.start <= rep.end <= len(text)):
            raise SpanOutOfBoundsError(f"replacement out of bounds: {rep.start}-{rep.end}")
        if prev_end > rep.start:
            raise OverlapError(f"replacements overlap: {prev_end} > {rep.start}")
        prev_end = rep.end

    last = len(text)
    parts: list[str] = []
    for rep in reversed(ordered):
        parts.append(text[rep.end : last])
        parts.append(rep.text)
        last = rep.start
    parts.append(text[:last])
    return "".join(reversed(parts))


__all__ = ["Replacement", "apply_replacements"]
