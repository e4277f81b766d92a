"""Tests for loading posts and pages from the source tree."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from quire.content import (
    asset_files,
    load_page,
    load_pages,
    load_post,
    load_posts,
    parse_date,
)
from quire.errors import ContentError

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_posts_are_newest_first(site_source: Path) -> None:
    """Posts sort by published date, descending; dot-directories are skipped."""
    posts = load_posts(site_source)
    assert [post.id for post in posts] == ["second-wind", "first-light"]


def test_post_fields(site_source: Path) -> None:
    """Metadata values and dates are loaded from meta.yaml."""
    post = load_post(site_source / "entries" / "first-light")
    assert post.title == "First Light"
    assert post.image == "cover.png"
    assert post.image_alt == "A sunrise"
    assert post.published == dt.date(2024, 3, 5)
    assert post.updated == dt.date(2024, 4, 1)
    assert post.markdown.startswith("Opening paragraph.")
    assert post.source_dir == site_source / "entries" / "first-light"


def test_pages_follow_numeric_prefix(site_source: Path) -> None:
    """Pages are ordered by the number before the underscore."""
    pages = load_pages(site_source)
    assert [(page.order, page.id, page.name) for page in pages] == [
        (1, "about", "About"),
        (2, "projects", "Projects"),
    ]
    assert pages[0].image == ""
    assert pages[0].author_fediverse == "@sam@example.invalid"


def test_page_directory_needs_order_prefix(tmp_path: Path) -> None:
    """A page directory without ``<order>_`` is rejected."""
    directory = tmp_path / "about"
    directory.mkdir()
    with pytest.raises(ContentError, match="<order>_<id>"):
        load_page(directory)


def test_missing_required_field(site_source: Path) -> None:
    """Missing metadata names the absent field."""
    meta = site_source / "entries" / "second-wind" / "meta.yaml"
    meta.write_text("title: Only a title\n", encoding="utf-8")
    with pytest.raises(ContentError, match="summary"):
        load_post(meta.parent)


def test_non_mapping_metadata(site_source: Path) -> None:
    """A metadata file that is not a mapping is a content error."""
    meta = site_source / "pages" / "1_about" / "meta.yaml"
    meta.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ContentError, match="mapping"):
        load_page(meta.parent)


def test_missing_markdown(site_source: Path) -> None:
    """A directory without content.md cannot be loaded."""
    (site_source / "entries" / "second-wind" / "content.md").unlink()
    with pytest.raises(ContentError, match="markdown"):
        load_post(site_source / "entries" / "second-wind")


def test_missing_content_root(tmp_path: Path) -> None:
    """Loading from a tree without entries/ raises ContentError."""
    with pytest.raises(ContentError, match="not found"):
        load_posts(tmp_path)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03-05", dt.date(2024, 3, 5)),
        (" 2024-03-05 ", dt.date(2024, 3, 5)),
        (dt.date(2024, 3, 5), dt.date(2024, 3, 5)),
        (dt.datetime(2024, 3, 5, 12, 30), dt.date(2024, 3, 5)),
    ],
)
def test_parse_date(value: object, expected: dt.date) -> None:
    """Strings and YAML date values both produce dates."""
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", ["05/03/2024", "2024-13-01", None, 20240305])
def test_parse_date_rejects(value: object) -> None:
    """Anything other than ``YYYY-MM-DD`` is rejected."""
    with pytest.raises(ContentError, match="YYYY-MM-DD"):
        parse_date(value, field="published date")


def test_asset_files_exclude_sources(site_source: Path) -> None:
    """Only non-markdown, non-metadata files count as assets."""
    assets = asset_files(site_source / "entries" / "first-light")
    assert [asset.name for asset in assets] == ["cover.png", "diagram.png"]
