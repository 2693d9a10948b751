"""Preformatted block conversion.

Pre blocks are handled one at a time, first match first, until none is left.
Their content goes through the content callbacks only (links, headings and
bold text still render inside ``<pre>``) and then has its whitespace
protected: newlines become ``<br>`` and every space becomes ``&nbsp;``, which
the structural tag pass and the whitespace normalizer leave untouched.  The
result is spliced back inside ``<div><br>...<br></div>``.
"""

from __future__ import annotations

import re

from ..links import LinkCollector
from ..rewrite.callbacks import rewrite_callbacks
from ..utils.logging import get_logger

__all__ = ["PRE_BLOCK_RX", "WHITESPACE_RULES", "protect_whitespace", "convert_pre_blocks"]

PRE_BLOCK_RX = re.compile(r"<pre\b[^>]*>(.*?)</pre>", re.IGNORECASE | re.DOTALL)

WHITESPACE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\n"), "<br>"),
    (re.compile(r"\t"), "&nbsp; &nbsp;"),
    (re.compile(r" "), "&nbsp;"),
    (re.compile(r"<pre\b[^>]*>", re.IGNORECASE), ""),
    (re.compile(r"</pre>", re.IGNORECASE), ""),
)

logger = get_logger(__name__)


def protect_whitespace(content: str) -> str:
    """Return ``content`` with its whitespace turned into markup."""

    for pattern, replacement in WHITESPACE_RULES:
        content = pattern.sub(replacement, content)
    return content


def convert_pre_blocks(text: str, links: LinkCollector) -> str:
    """Convert every ``<pre>`` block of ``text``."""

    count = 0
    while True:
        match = PRE_BLOCK_RX.search(text)
        if match is None:
            break
        content = protect_whitespace(rewrite_callbacks(match.group(1), links))
        text = f"{text[: match.start()]}<div><br>{content}<br></div>{text[match.end() :]}"
        count += 1

    if count:
        logger.debug("converted %d pre block(s)", count)
    return text
