"""Tests for feed.yaml loading."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from quire.config import RenderOptions, SiteConfigError, load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path

FEED_ONLY = dedent(
    """
    title: Plain
    id: urn:uuid:plain
    author_name: A
    author_email: a@example.invalid
    author_uri: https://example.invalid
    link_site: https://example.invalid/
    link_feed: https://example.invalid/blog/atom.xml
    """
).lstrip()


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "feed.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_from_source_directory(site_source: Path) -> None:
    """A directory argument resolves to its feed.yaml."""
    config = load_site_config(site_source)
    assert config.feed.title == "Fixture Journal"
    assert config.site_name == "Fixture Journal"
    assert config.url_base == "https://example.invalid"
    assert config.rendering.highlight_languages == ("gdscript",)


def test_rendering_defaults(tmp_path: Path) -> None:
    """Without a rendering section the defaults apply."""
    config = load_site_config(_write(tmp_path, FEED_ONLY))
    assert config.rendering == RenderOptions()
    assert config.rendering.highlight_languages == ("gdscript",)
    assert config.rendering.pygments_style == "default"
    assert config.url_base == "https://example.invalid"


def test_languages_as_string(tmp_path: Path) -> None:
    """A whitespace-separated string is split into lowercase labels."""
    text = FEED_ONLY + "rendering:\n  highlight_languages: GDScript Rust\n"
    config = load_site_config(_write(tmp_path, text))
    assert config.rendering.highlight_languages == ("gdscript", "rust")


def test_pygments_style_override(tmp_path: Path) -> None:
    """The pygments style can be chosen per site."""
    text = FEED_ONLY + "rendering:\n  pygments_style: monokai\n"
    config = load_site_config(_write(tmp_path, text))
    assert config.rendering.pygments_style == "monokai"


def test_missing_fields_are_reported_together(tmp_path: Path) -> None:
    """Every absent feed field is named in one error."""
    with pytest.raises(SiteConfigError) as excinfo:
        load_site_config(_write(tmp_path, "title: Lonely\n"))
    message = str(excinfo.value)
    for field in ("id", "author_name", "link_site", "link_feed"):
        assert field in message, f"expected {field!r} in {message!r}"


def test_missing_file(tmp_path: Path) -> None:
    """A missing configuration file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path)


def test_non_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(SiteConfigError, match="mapping"):
        load_site_config(_write(tmp_path, "- a\n- b\n"))


def test_rendering_must_be_mapping(tmp_path: Path) -> None:
    """The rendering section must be a mapping when present."""
    with pytest.raises(SiteConfigError, match="rendering"):
        load_site_config(_write(tmp_path, FEED_ONLY + "rendering: [gdscript]\n"))
