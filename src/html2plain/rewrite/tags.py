"""Structural tag rewriting.

:data:`TAG_RULES` is an ordered table of ``(pattern, replacement)`` pairs
applied one after another to the whole buffer.  Order matters:

* raw line breaks and tabs are folded into spaces first so that only markup
  decides the layout;
* ``<head>``, ``<script>`` and ``<style>`` regions are dropped before any
  generic rule could expose their content;
* container rules (lists, tables) run before the bare item rules that catch
  whatever the paired patterns could not match.

Patterns are compiled without ``re.DOTALL``.  After the raw newlines are folded
away, paired patterns never span a newline produced by an earlier rule.
"""

from __future__ import annotations

import re

__all__ = ["TAG_RULES", "IGNORE_CLASS", "rewrite_tags"]

IGNORE_CLASS = "_html2text_ignore"

HR_LINE = "-" * 25


def _rx(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


TAG_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\r"), ""),
    (re.compile(r"[\n\t]+"), " "),
    (_rx(r"<head\b[^>]*>.*?</head>"), ""),
    (_rx(r"<script\b[^>]*>.*?</script>"), ""),
    (_rx(r"<style\b[^>]*>.*?</style>"), ""),
    (_rx(r"<p\b[^>]*>"), "\n\n"),
    (_rx(r"<br\b[^>]*>"), "\n"),
    (_rx(r"<i\b[^>]*>(.*?)</i>"), "_\\1_"),
    (_rx(r"<em\b[^>]*>(.*?)</em>"), "_\\1_"),
    (_rx(r"(<ul\b[^>]*>|</ul>)"), "\n\n"),
    (_rx(r"(<ol\b[^>]*>|</ol>)"), "\n\n"),
    (_rx(r"(<dl\b[^>]*>|</dl>)"), "\n\n"),
    (_rx(r"<li\b[^>]*>(.*?)</li>"), "\t* \\1\n"),
    (_rx(r"<dd\b[^>]*>(.*?)</dd>"), " \\1\n"),
    (_rx(r"<dt\b[^>]*>(.*?)</dt>"), "\t* \\1"),
    (_rx(r"<li\b[^>]*>"), "\n\t* "),
    (_rx(r"<hr\b[^>]*>"), f"\n{HR_LINE}\n"),
    (_rx(r"<div\b[^>]*>"), "<div>\n"),
    (_rx(r"(<table\b[^>]*>|</table>)"), "\n\n"),
    (_rx(r"(<tr\b[^>]*>|</tr>)"), "\n"),
    (_rx(r"<td\b[^>]*>(.*?)</td>"), "\t\t\\1\n"),
    (_rx(rf'<span class="{IGNORE_CLASS}">.+?</span>'), ""),
)


def rewrite_tags(text: str) -> str:
    """Apply every rule of :data:`TAG_RULES` to ``text`` in order."""

    for pattern, replacement in TAG_RULES:
        text = pattern.sub(replacement, text)
    return text
