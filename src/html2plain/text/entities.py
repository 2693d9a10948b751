"""Entity decoding for converted text.

Decoding runs in three passes:

1. A curated table maps a handful of entities to fixed plain-text
   equivalents (``&trade;`` becomes ``(tm)``, ``&mdash;`` becomes ``--``, the
   euro sign becomes ``EUR``).  ``&amp;`` is swapped for a placeholder so that
   ``&amp;quot;`` ends up as the literal ``&quot;`` rather than ``"``.
2. :func:`unescape_references` resolves every remaining standard entity.
   Only complete references ending in ``;`` are decoded, so a raw ``&``
   in a URL query such as ``?a=1&section=2`` is left alone.
3. Entity-looking leftovers are deleted and the placeholder becomes ``&``.

Runs of plain spaces collapse to a single space before the curated table is
applied.  Non-breaking spaces are converted afterwards and therefore survive,
which is what keeps the layout of preformatted blocks intact.
"""

from __future__ import annotations

import html
import re
from html.entities import html5

AMP_PLACEHOLDER = "|+|amp|+|"

_SPACE_RUN_RX = re.compile(r"[ ]{2,}")
_UNKNOWN_ENTITY_RX = re.compile(r"&([a-zA-Z0-9]{2,6}|#[0-9]{2,4});")
_REFERENCE_RX = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")


def _entity(names: str) -> re.Pattern[str]:
    return re.compile(rf"&({names});", re.IGNORECASE)


CURATED_ENTITIES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_entity(r"nbsp|#160"), " "),
    (_entity(r"quot|rdquo|ldquo|#8220|#8221|#147|#148"), '"'),
    (_entity(r"apos|rsquo|lsquo|#8216|#8217"), "'"),
    (_entity(r"gt"), ">"),
    (_entity(r"lt"), "<"),
    (_entity(r"copy|#169"), "©"),
    (_entity(r"trade|#8482|#153"), "(tm)"),
    (_entity(r"reg|#174"), "®"),
    (_entity(r"mdash|#151|#8212"), "--"),
    (_entity(r"ndash|minus|#8211|#8722"), "-"),
    (_entity(r"bull|#149|#8226"), "*"),
    (_entity(r"pound|#163"), "£"),
    (_entity(r"euro|#8364"), "EUR"),
    (_entity(r"amp|#38"), AMP_PLACEHOLDER),
)


def _decode_reference(match: re.Match[str]) -> str:
    ref = match.group(0)
    if ref.startswith("&#"):
        return html.unescape(ref)
    return html5.get(ref[1:], ref)


def unescape_references(text: str) -> str:
    """Decode the complete character references of ``text``.

    Named references must match a known entity name exactly; anything else is
    returned unchanged.
    """

    return _REFERENCE_RX.sub(_decode_reference, text)


def decode_entities(text: str) -> str:
    """Resolve entities in ``text`` to plain characters."""

    text = _SPACE_RUN_RX.sub(" ", text)
    for pattern, replacement in CURATED_ENTITIES:
        text = pattern.sub(replacement, text)
    text = unescape_references(text)
    text = _UNKNOWN_ENTITY_RX.sub("", text)
    return text.replace(AMP_PLACEHOLDER, "&")


__all__ = ["AMP_PLACEHOLDER", "CURATED_ENTITIES", "unescape_references", "decode_entities"]
