"""Configuration values are repaired, unknown keys are rejected."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from html2plain.config import ConversionConfig, LinkStyle, load_config
from html2plain.utils.errors import UnknownOptionError


@pytest.mark.parametrize("width", [0, -5, 10, 44, "12"])
def test_line_width_clamped_to_floor(width: object) -> None:
    assert ConversionConfig(line_width=width).line_width == 45


@pytest.mark.parametrize("width, expected", [(45, 45), (46, 46), (80, 80), ("72", 72), (99.7, 99)])
def test_line_width_numeric_values(width: object, expected: int) -> None:
    assert ConversionConfig(line_width=width).line_width == expected


@pytest.mark.parametrize("width", ["wide", None, [], True, float("nan")])
def test_line_width_non_numeric_falls_back(width: object) -> None:
    assert ConversionConfig(line_width=width).line_width == 120


@pytest.mark.parametrize(
    "value, expected",
    [
        ("table", LinkStyle.TABLE),
        ("NextLine", LinkStyle.NEXTLINE),
        (LinkStyle.NONE, LinkStyle.NONE),
        ("footnotes", LinkStyle.INLINE),
        (3, LinkStyle.INLINE),
        (None, LinkStyle.INLINE),
    ],
)
def test_link_style_values(value: object, expected: LinkStyle) -> None:
    assert ConversionConfig(link_style=value).link_style is expected


@pytest.mark.parametrize(
    "value",
    ["<p><span>", "p, span", "P,SPAN", ["<p>", "span"], ("p", "span"), {"p", "span"}],
)
def test_allowed_tags_forms(value: object) -> None:
    cfg = ConversionConfig(allowed_passthrough_tags=value)
    assert cfg.allowed_passthrough_tags == frozenset({"p", "span"})


def test_allowed_tags_garbage_is_empty() -> None:
    assert ConversionConfig(allowed_passthrough_tags=42).allowed_passthrough_tags == frozenset()
    assert ConversionConfig(allowed_passthrough_tags="").allowed_passthrough_tags == frozenset()


def test_base_url_trailing_slash_stripped() -> None:
    assert ConversionConfig(base_url="http://example.com/foo/").base_url == "http://example.com/foo"
    assert ConversionConfig(base_url=None).base_url == ""


def test_unknown_key_rejected() -> None:
    with pytest.raises(ValidationError):
        ConversionConfig(line_length=80)
    with pytest.raises(ValueError):
        ConversionConfig(colour="blue")


def test_config_is_frozen() -> None:
    cfg = ConversionConfig()
    with pytest.raises(ValidationError):
        cfg.line_width = 60  # type: ignore[misc]


def test_with_options() -> None:
    cfg = ConversionConfig().with_options(line_width=30, link_style="table")
    assert cfg.line_width == 45
    assert cfg.link_style is LinkStyle.TABLE
    with pytest.raises(UnknownOptionError) as excinfo:
        cfg.with_options(linelength=60)
    assert excinfo.value.name == "linelength"
    assert isinstance(excinfo.value, ValueError)


def test_unknown_key_in_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_file_overrides(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("link_style: table\nline_width: 20\nallowed_passthrough_tags: [b]\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.link_style is LinkStyle.TABLE
    assert cfg.line_width == 45
    assert cfg.allowed_passthrough_tags == frozenset({"b"})


def test_non_mapping_file_rejected(tmp_path: Path) -> None:
    cfg_file = tmp_path / "list.yml"
    cfg_file.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(cfg_file, env={})
