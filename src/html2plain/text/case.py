"""Upper-casing of HTML fragments used to render emphasis in plain text.

Headings, bold/strong text and table headers have no typographic equivalent in
plain text, so their content is shown in capitals instead.  Fragments may still
contain markup at this point; tags are kept verbatim and only the text between
them is transformed.  Entities are decoded before upper-casing (``&eacute;``
must become ``É`` rather than ``&EACUTE;``) and the unsafe characters are
re-encoded afterwards so later stages see well-formed markup.
"""

from __future__ import annotations

import html
import re

from .entities import unescape_references

_TAG_SPLIT_RX = re.compile(r"(<[^>]*>)")


def escape_compat(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and double quotes, leaving single quotes."""

    return html.escape(text, quote=False).replace('"', "&quot;")


def upper_text(text: str) -> str:
    """Upper-case a markup-free chunk, honouring entities."""

    return escape_compat(unescape_references(text).upper())


def to_upper(fragment: str) -> str:
    """Return ``fragment`` with all text outside of tags upper-cased."""

    chunks = [chunk for chunk in _TAG_SPLIT_RX.split(fragment) if chunk]
    return "".join(chunk if chunk.startswith("<") else upper_text(chunk) for chunk in chunks)


__all__ = ["escape_compat", "upper_text", "to_upper"]
