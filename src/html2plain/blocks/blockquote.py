"""Blockquote conversion.

Only outermost ``<blockquote>`` regions are captured.  Their body is converted
by a full recursive conversion at a width reduced by two columns, every line of
the result is prefixed with ``"> "`` and the quoted text is escaped and wrapped
in ``<pre>`` so the following pre-block stage keeps its layout.  Nested
blockquotes need no special treatment here: the recursive conversion meets them
as outermost blocks of the body and quotes them again, so markers accumulate
(``">> "``) with the nesting depth.

Malformed markup never fails.  A closing tag without an opening one is
ignored (and later removed with the other leftover tags); an opening tag that
is never closed is not captured.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Callable, Iterator

from ..utils.logging import get_logger
from ..utils.textspan import Replacement, apply_replacements

__all__ = [
    "BLOCKQUOTE_TAG_RX",
    "BlockquoteFrame",
    "BlockquoteSpan",
    "iter_blockquotes",
    "quote_lines",
    "convert_blockquotes",
]

BLOCKQUOTE_TAG_RX = re.compile(r"</*blockquote[^>]*>", re.IGNORECASE)
WIDTH_STEP = 2

_QUOTE_PREFIX_RX = re.compile(r"^(>*)", re.MULTILINE)

ConvertFunc = Callable[[str, int], str]

logger = get_logger(__name__)


@dataclass(slots=True)
class BlockquoteFrame:
    """Nesting state while scanning blockquote tags.

    ``start`` and ``tag_length`` describe the opening tag of the outermost
    open blockquote.
    """

    depth: int = 0
    start: int = 0
    tag_length: int = 0

    def open(self, start: int, tag_length: int) -> None:
        if self.depth == 0:
            self.start = start
            self.tag_length = tag_length
        self.depth += 1

    def close(self) -> bool:
        """Close one level; return ``True`` when the outermost block ended."""

        if self.depth == 0:
            # Unmatched closing tag.
            return False
        self.depth -= 1
        return self.depth == 0


@dataclass(slots=True, frozen=True)
class BlockquoteSpan:
    """Offsets of one outermost blockquote.

    ``[start, end)`` covers the tags, ``[body_start, body_end)`` the content.
    """

    start: int
    body_start: int
    body_end: int
    end: int


def iter_blockquotes(text: str) -> Iterator[BlockquoteSpan]:
    """Yield the outermost, properly closed blockquotes of ``text``."""

    frame = BlockquoteFrame()
    for match in BLOCKQUOTE_TAG_RX.finditer(text):
        if match.group(0).startswith("</"):
            if frame.close():
                yield BlockquoteSpan(
                    start=frame.start,
                    body_start=frame.start + frame.tag_length,
                    body_end=match.start(),
                    end=match.end(),
                )
        else:
            frame.open(match.start(), len(match.group(0)))


def _quote_marker(match: re.Match[str]) -> str:
    markers = match.group(1)
    return f">{markers}" if markers else "> "


def quote_lines(text: str) -> str:
    """Prefix every line of ``text`` with a quote marker.

    Lines that are already quoted gain one more ``>`` so that ``"> b"``
    becomes ``">> b"`` (mail-style stacking).  Appending a full ``"> "`` to
    every line instead would give ``">>  b"`` with a doubled space.
    """

    return _QUOTE_PREFIX_RX.sub(_quote_marker, text)


def convert_blockquotes(text: str, width: int, convert: ConvertFunc) -> str:
    """Replace every outermost blockquote of ``text`` with quoted text.

    Parameters
    ----------
    text:
        HTML buffer.
    width:
        Line width of the enclosing conversion.  Bodies are converted at
        ``width - 2`` (wrapping stays disabled for widths of zero or less).
    convert:
        Full conversion of an HTML fragment at a given width.
    """

    replacements: list[Replacement] = []
    inner_width = width - WIDTH_STEP if width > 0 else width
    for span in iter_blockquotes(text):
        body = convert(text[span.body_start : span.body_end].strip(), inner_width)
        quoted = html.escape(quote_lines(body.strip()))
        replacements.append(Replacement(span.start, span.end, f"<pre>{quoted}</pre>"))

    if replacements:
        logger.debug("converted %d blockquote(s) at width %d", len(replacements), inner_width)
    return apply_replacements(text, replacements)
