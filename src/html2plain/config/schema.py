"""Typed configuration schema and loader for the converter."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from enum import Enum
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from ..utils.errors import UnknownOptionError

MIN_LINE_WIDTH = 45
DEFAULT_LINE_WIDTH = 120

_TAG_SPLIT_RX = re.compile(r",\s*|>\s*<")


class LinkStyle(str, Enum):
    """How hyperlink targets are rendered in the plain text."""

    NONE = "none"
    INLINE = "inline"
    NEXTLINE = "nextline"
    TABLE = "table"

    @classmethod
    def parse(cls, value: object) -> "LinkStyle | None":
        """Return the style named by ``value`` or ``None`` when unknown."""

        if isinstance(value, LinkStyle):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


def parse_tag_names(value: object) -> frozenset[str]:
    """Normalize passthrough tag declarations to lower-case tag names.

    Accepted forms are ``"<p><span>"``, ``"p, span"`` and iterables such as
    ``["<p>", "span"]``.  Anything else yields an empty set.
    """

    if value is None:
        return frozenset()
    if isinstance(value, str):
        items: list[object] = list(_TAG_SPLIT_RX.split(value))
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        return frozenset()

    names = set()
    for item in items:
        if not isinstance(item, str):
            continue
        name = item.strip().strip("<>").strip().lower()
        if name:
            names.add(name)
    return frozenset(names)


class ConversionConfig(BaseModel):
    """Settings for one conversion run.

    Invalid values never fail validation: they fall back to defaults, and
    widths below :data:`MIN_LINE_WIDTH` are clamped up.  Unknown keys are
    rejected.
    """

    link_style: LinkStyle = LinkStyle.INLINE
    line_width: int = DEFAULT_LINE_WIDTH
    allowed_passthrough_tags: frozenset[str] = frozenset()
    base_url: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("link_style", mode="before")
    @classmethod
    def _coerce_link_style(cls, value: object) -> LinkStyle:
        return LinkStyle.parse(value) or LinkStyle.INLINE

    @field_validator("line_width", mode="before")
    @classmethod
    def _clamp_line_width(cls, value: object) -> int:
        if isinstance(value, bool):
            return DEFAULT_LINE_WIDTH
        if isinstance(value, str):
            value = value.strip()
            try:
                value = float(value)
            except ValueError:
                return DEFAULT_LINE_WIDTH
        if not isinstance(value, (int, float)) or value != value:  # NaN
            return DEFAULT_LINE_WIDTH
        try:
            width = int(value)
        except OverflowError:
            return DEFAULT_LINE_WIDTH
        return max(width, MIN_LINE_WIDTH)

    @field_validator("allowed_passthrough_tags", mode="before")
    @classmethod
    def _parse_tags(cls, value: object) -> frozenset[str]:
        return parse_tag_names(value)

    @field_validator("base_url", mode="before")
    @classmethod
    def _strip_base_url(cls, value: object) -> str:
        if not isinstance(value, str) or not value:
            return ""
        # Relative links may already start with a slash.
        if value.endswith("/"):
            value = value[:-1]
        return value

    def with_options(self, **changes: Any) -> "ConversionConfig":
        """Return a validated copy with ``changes`` applied.

        Raises
        ------
        UnknownOptionError
            If a key does not name a configuration field.
        """

        for name in changes:
            if name not in type(self).model_fields:
                raise UnknownOptionError(name)
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConversionConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML.  When
    no base URL is configured and ``HTTP_HOST`` is present in the environment,
    relative links resolve against ``http://<HTTP_HOST>``.
    """

    with (
        importlib_resources.files("html2plain.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Configuration file must contain a mapping: {path}")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if not merged.get("base_url") and environ.get("HTTP_HOST"):
        merged["base_url"] = "http://" + environ["HTTP_HOST"]

    return ConversionConfig.model_validate(merged)


__all__ = [
    "MIN_LINE_WIDTH",
    "DEFAULT_LINE_WIDTH",
    "LinkStyle",
    "ConversionConfig",
    "parse_tag_names",
    "deep_merge_dicts",
    "load_config",
]
