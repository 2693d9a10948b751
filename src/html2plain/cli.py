"""Typer-based command line interface for the converter.

The ``convert`` command reads an HTML document, converts it and writes the
plain text to a file or standard output.  Options given on the command line
override the configuration file, which overrides the packaged defaults.

Exit codes
----------
0 success
3 I/O error (missing reader/writer, filesystem issues)
4 configuration error
5 conversion error (unexpected exception during conversion)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConversionConfig, load_config
from .converter import convert
from .io import read_file, write_file
from .utils.errors import UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="html2plain",
    help="Convert HTML documents to plain text. Use 'html2plain convert' to run a conversion.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConversionConfig,
    *,
    link_style: str | None,
    width: int | None,
    allow: str | None,
    base_url: str | None,
) -> ConversionConfig:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    changes: dict[str, Any] = {}
    if link_style is not None:
        changes["link_style"] = link_style
    if width is not None:
        changes["line_width"] = width
    if allow is not None:
        changes["allowed_passthrough_tags"] = allow
    if base_url is not None:
        changes["base_url"] = base_url
    return cfg.with_options(**changes) if changes else cfg


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the html2plain command group."""
    pass


@app.command("convert")
def convert_command(  # noqa: PLR0913
    source: Path = typer.Argument(..., help="HTML document (.html, .htm, .xhtml, .txt)"),  # noqa: B008
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", "-o", help="Output file (.txt); standard output when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    link_style: Optional[str] = typer.Option(  # noqa: B008
        None, "--link-style", help="Link rendering [none|inline|nextline|table]"
    ),
    width: Optional[int] = typer.Option(  # noqa: B008
        None, "--width", help="Maximum line width (at least 45)"
    ),
    allow: Optional[str] = typer.Option(  # noqa: B008
        None, "--allow", help="Tags kept verbatim, e.g. 'p, span' or '<p><span>'"
    ),
    base_url: Optional[str] = typer.Option(  # noqa: B008
        None, "--base-url", help="Base URL for relative links"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    encoding_out: str = typer.Option("utf-8", help="Output file encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Convert ``source`` to plain text."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(
            cfg, link_style=link_style, width=width, allow=allow, base_url=base_url
        )
    except (OSError, ValidationError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if verbose:
        typer.echo(
            f"Loaded config (link_style={cfg.link_style.value}, line_width={cfg.line_width})",
            err=True,
        )

    try:
        html = read_file(source, encoding=encoding_in)
    except (UnsupportedFormatError, OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Read {len(html)} chars", err=True)

    try:
        with Timing() as t_conv:
            text = convert(html, cfg)
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)
    if verbose:
        typer.echo(f"Converted to {len(text)} chars in {t_conv.ms:.1f} ms", err=True)

    if out_path is None:
        typer.echo(text)
        return

    try:
        write_file(out_path, text, encoding=encoding_out)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {out_path}", err=True)
