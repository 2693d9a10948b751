"""Content dependent tag rewriting.

Each :class:`CallbackRule` pairs a pattern with a render function receiving the
match and the active :class:`~html2plain.links.LinkCollector`.  Rules run in
table order over the whole buffer, so link text is rendered before any bold or
heading rule upper-cases its surroundings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import partial
from typing import Callable

from ..links import LinkCollector
from ..text.case import to_upper

__all__ = ["CallbackRule", "CALLBACK_RULES", "LINK_OVERRIDE_PREFIX", "rewrite_callbacks"]

LINK_OVERRIDE_PREFIX = "_html2text_link_"

_LINK_OVERRIDE_RX = re.compile(rf"{LINK_OVERRIDE_PREFIX}(\w+)")

RenderFunc = Callable[[re.Match[str], LinkCollector], str]


@dataclass(slots=True, frozen=True)
class CallbackRule:
    """A tag pattern and the function rendering its replacement."""

    name: str
    pattern: re.Pattern[str]
    render: RenderFunc


def _render_link(match: re.Match[str], links: LinkCollector) -> str:
    override = _LINK_OVERRIDE_RX.search(match.group(4))
    url = match.group(3).replace(" ", "")
    return links.register(url, match.group(5), override.group(1) if override else None)


def _render_heading(match: re.Match[str], links: LinkCollector) -> str:
    return to_upper(f"\n\n{match.group(3)}\n\n")


def _render_bold(match: re.Match[str], links: LinkCollector) -> str:
    return to_upper(match.group(3))


def _render_table_header(match: re.Match[str], links: LinkCollector) -> str:
    return to_upper(f"\t\t{match.group(3)}\n")


def _rx(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


CALLBACK_RULES: tuple[CallbackRule, ...] = (
    CallbackRule(
        "link",
        _rx(r"""<(a) [^>]*href=("|')([^"']+)\2([^>]*)>(.*?)</a>"""),
        _render_link,
    ),
    CallbackRule("heading", _rx(r"<(h)[123456]( [^>]*)?>(.*?)</h[123456]>"), _render_heading),
    CallbackRule("bold", _rx(r"<(b)( [^>]*)?>(.*?)</b>"), _render_bold),
    CallbackRule("strong", _rx(r"<(strong)( [^>]*)?>(.*?)</strong>"), _render_bold),
    CallbackRule("th", _rx(r"<(th)( [^>]*)?>(.*?)</th>"), _render_table_header),
)


def rewrite_callbacks(text: str, links: LinkCollector) -> str:
    """Apply every rule of :data:`CALLBACK_RULES` to ``text`` in order."""

    for rule in CALLBACK_RULES:
        text = rule.pattern.sub(partial(rule.render, links=links), text)
    return text
