"""Link target rendering.

:class:`LinkCollector` turns an anchor into plain text according to the
configured :class:`~html2plain.config.LinkStyle`.  Relative targets are
resolved against the configured base URL by plain concatenation; targets that
carry a URI scheme are used as-is.  ``javascript:``, ``mailto:`` and same-page
``#fragment`` targets are never rendered.

In table style every distinct absolute URL receives a stable 1-based index the
first time it is seen; later occurrences of the exact same string reuse that
index.  The :class:`LinkTable` holding these indices is shared across nested
conversions so blockquote bodies number their links in the same sequence as
the surrounding document.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..config import ConversionConfig, LinkStyle

__all__ = ["LinkTable", "LinkCollector", "resolve_url", "is_ignored_target"]

_IGNORED_TARGET_RX = re.compile(r"^(javascript:|mailto:|#)", re.IGNORECASE)
_SCHEME_RX = re.compile(r"^[a-z][a-z0-9.+-]+:", re.IGNORECASE)

LINKS_HEADING = "Links:"
LINKS_SEPARATOR = "------"


@dataclass(slots=True)
class LinkTable:
    """Ordered, de-duplicated list of absolute URLs."""

    urls: list[str] = field(default_factory=list)
    _positions: dict[str, int] = field(default_factory=dict, repr=False)

    def register(self, url: str) -> int:
        """Return the 1-based index of ``url``, appending it when new."""

        index = self._positions.get(url)
        if index is None:
            self.urls.append(url)
            index = len(self.urls)
            self._positions[url] = index
        return index

    def __len__(self) -> int:
        return len(self.urls)

    def render(self) -> str:
        """Return the reference section, or an empty string without links."""

        if not self.urls:
            return ""
        lines = [LINKS_HEADING, LINKS_SEPARATOR]
        lines.extend(f"[{idx}] {url}" for idx, url in enumerate(self.urls, 1))
        return "\n".join(lines)


def is_ignored_target(target: str) -> bool:
    """Return ``True`` for script, mail and same-page anchor targets."""

    return _IGNORED_TARGET_RX.match(target) is not None


def resolve_url(target: str, base_url: str) -> str:
    """Resolve ``target`` against ``base_url``."""

    if _SCHEME_RX.match(target):
        return target
    if target.startswith("/"):
        return base_url + target
    return f"{base_url}/{target}"


class LinkCollector:
    """Render anchors according to the configured link style."""

    def __init__(self, config: ConversionConfig, table: LinkTable | None = None) -> None:
        self.config = config
        self.table = table if table is not None else LinkTable()

    def effective_style(self, override: str | None = None) -> LinkStyle:
        """Return ``override`` when it names a valid style, else the default."""

        if override:
            style = LinkStyle.parse(override)
            if style is not None:
                return style
        return self.config.link_style

    def register(self, url: str, display_text: str, style_override: str | None = None) -> str:
        """Return ``display_text`` decorated with the link target."""

        style = self.effective_style(style_override)
        if style is LinkStyle.NONE or is_ignored_target(url):
            return display_text

        resolved = resolve_url(url, self.config.base_url)
        if style is LinkStyle.TABLE:
            return f"{display_text} [{self.table.register(resolved)}]"
        if style is LinkStyle.NEXTLINE:
            return f"{display_text}\n[{resolved}]"
        return f"{display_text} [{resolved}]"
