"""HTML to plain text conversion pipeline.

:func:`convert` is the entry point.  Stages run in a fixed order over one text
buffer:

1. blockquotes (recursively converted at a narrower width and quoted),
2. ``<pre>`` blocks (whitespace protected),
3. structural tags,
4. content callbacks (links, headings, bold text, table headers),
5. stripping of remaining markup,
6. entity decoding,
7. blank line normalization and word wrapping,
8. the numbered link list when links were collected in table style.

The function is pure: every call owns its buffer and link table, so converting
the same input twice yields the same text.  :class:`HtmlToText` wraps it for
callers that want to load a document once, tweak options and read the result
repeatedly.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from functools import partial
from typing import Any, TextIO

from .blocks import convert_blockquotes, convert_pre_blocks
from .config import ConversionConfig
from .io.readers.html_reader import read_html
from .links import LinkCollector, LinkTable
from .rewrite import rewrite_callbacks, rewrite_tags, strip_tags
from .text.entities import decode_entities
from .text.whitespace import normalize_whitespace, wrap_text
from .utils.logging import get_logger

__all__ = ["ConversionState", "convert", "convert_fragment", "HtmlToText"]

logger = get_logger(__name__)


@dataclass(slots=True)
class ConversionState:
    """Settings and link table shared by one conversion and its nested calls."""

    config: ConversionConfig
    links: LinkTable = field(default_factory=LinkTable)


def convert_fragment(text: str, width: int, state: ConversionState) -> str:
    """Convert an HTML fragment to wrapped text without the link list.

    ``width`` is passed explicitly because blockquote bodies are converted
    narrower than the configured line width.
    """

    links = LinkCollector(state.config, state.links)
    text = convert_blockquotes(text, width, partial(convert_fragment, state=state))
    text = convert_pre_blocks(text, links)
    text = rewrite_tags(text)
    text = rewrite_callbacks(text, links)
    text = strip_tags(text, state.config.allowed_passthrough_tags)
    text = decode_entities(text)
    text = normalize_whitespace(text)
    return wrap_text(text, width)


def convert(html: str, config: ConversionConfig | None = None) -> str:
    """Convert the HTML document ``html`` to plain text."""

    state = ConversionState(config if config is not None else ConversionConfig())
    text = convert_fragment(html.strip(), state.config.line_width, state).rstrip("\n")

    footer = state.links.render()
    if footer:
        text = f"{text}\n\n{footer}"
    logger.debug(
        "converted %d chars of HTML to %d chars of text (%d link(s) listed)",
        len(html),
        len(text),
        len(state.links),
    )
    return text


class HtmlToText:
    """Stateful front end around :func:`convert`.

    The result is cached until the source or any option changes.
    """

    def __init__(
        self,
        source: str = "",
        *,
        from_file: bool = False,
        config: ConversionConfig | None = None,
    ) -> None:
        self._config = config if config is not None else ConversionConfig()
        self._html = ""
        self._text: str | None = None
        if source:
            self.set_html(source, from_file=from_file)

    @property
    def config(self) -> ConversionConfig:
        return self._config

    @property
    def html(self) -> str:
        return self._html

    @property
    def converted(self) -> bool:
        """``True`` while a cached result matches the current source."""

        return self._text is not None

    def set_html(self, source: str | os.PathLike[str], from_file: bool = False) -> None:
        """Load HTML from ``source``.

        With ``from_file`` the source is read from disk when the path exists,
        whatever its extension; otherwise it is used as the HTML itself.
        """

        if from_file and os.path.isfile(source):
            self._html = read_html(source)
        else:
            self._html = os.fspath(source)
        self._text = None

    def set_option(self, name: str, value: Any) -> None:
        """Set the option ``name`` (case-insensitive) to ``value``.

        Raises
        ------
        UnknownOptionError
            If ``name`` is not a configuration field.
        """

        self._config = self._config.with_options(**{name.lower(): value})
        self._text = None

    def set_allowed_elements(self, elements: object = ()) -> None:
        """Set the tags kept verbatim, e.g. ``"<p><span>"`` or ``["p", "span"]``."""

        self.set_option("allowed_passthrough_tags", elements)

    def set_base_url(self, url: str = "") -> None:
        """Set the base URL relative links resolve against.

        The ``HTTP_HOST`` fallback for an empty URL is applied by
        :func:`~html2plain.config.load_config` only, never here.
        """

        self.set_option("base_url", url)

    def get_text(self) -> str:
        """Return the converted text, converting on first use."""

        if self._text is None:
            self._text = convert(self._html, self._config)
        return self._text

    def get_result(self) -> str:
        return self.get_text()

    def print_text(self, stream: TextIO | None = None) -> None:
        """Write the converted text to ``stream`` (standard output by default)."""

        (stream if stream is not None else sys.stdout).write(self.get_text())

    def print_result(self, stream: TextIO | None = None) -> None:
        self.print_text(stream)
