"""Removal of leftover markup.

Everything that looks like a tag, comment, declaration or processing
instruction is deleted unless its tag name is in the passthrough set.  A ``<``
that does not start a tag name (``a < b``, ``1<2``) is left alone for the
entity stage.
"""

from __future__ import annotations

import re
from collections.abc import Collection

_COMMENT_RX = re.compile(r"<!--.*?-->", re.DOTALL)
_MARKUP_RX = re.compile(
    r"""
    </?([a-zA-Z][a-zA-Z0-9:-]*)\b[^>]*>   # start or end tag
    | <![^>]*>                           # doctype and other declarations
    | <\?.*?\?>                          # processing instructions
    """,
    re.VERBOSE | re.DOTALL,
)


def strip_tags(text: str, allowed: Collection[str] = frozenset()) -> str:
    """Remove markup from ``text`` keeping tags whose name is in ``allowed``."""

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name and name.lower() in allowed:
            return match.group(0)
        return ""

    text = _COMMENT_RX.sub("", text)
    return _MARKUP_RX.sub(_replace, text)


__all__ = ["strip_tags"]
