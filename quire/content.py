"""Load blog posts and static pages from a quire source tree.

Each post lives in ``entries/<id>/`` and each page in
``pages/<order>_<id>/``. Both directories hold a ``meta.yaml`` file with the
document metadata and a ``content.md`` file with the markdown body; any other
file is an asset copied next to the rendered page.

Examples
--------
>>> from pathlib import Path
>>> from quire.content import load_posts
>>> posts = load_posts(Path("site"))  # doctest: +SKIP
>>> posts[0].published  # doctest: +SKIP
datetime.date(2024, 3, 5)
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from quire._constants import CONTENT_FILENAME, META_FILENAME, PAGES_DIR, POSTS_DIR
from quire.errors import ContentError

logger = logging.getLogger(__name__)

PAGE_DIR_PATTERN = re.compile(r"^(?P<order>\d+)_(?P<id>.+)$")
DATE_FORMAT = "%Y-%m-%d"


@dc.dataclass(slots=True, kw_only=True)
class Document:
    """Metadata and markdown shared by posts and pages."""

    id: str
    title: str
    summary: str
    markdown: str
    image: str = ""
    image_alt: str = ""
    source_dir: Path | None = dc.field(default=None, compare=False)


@dc.dataclass(slots=True, kw_only=True)
class BlogPost(Document):
    """A dated blog entry rendered under ``blog/<id>/``."""

    author_name: str
    author_email: str
    author_uri: str
    published: dt.date
    updated: dt.date


@dc.dataclass(slots=True, kw_only=True)
class StaticPage(Document):
    """A standalone page rendered under ``<id>/`` and linked from navigation."""

    name: str
    order: int = 0
    author_fediverse: str = ""


def _read_meta(path: Path) -> dict[str, typ.Any]:
    """Load a ``meta.yaml`` mapping, raising ContentError on any problem."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except (OSError, YAMLError) as exc:
        msg = f"Unable to read metadata '{path}': {exc}"
        raise ContentError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Metadata '{path}' must be a mapping."
        raise ContentError(msg)
    return dict(loaded)


def _read_markdown(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Unable to read markdown '{path}': {exc}"
        raise ContentError(msg) from exc


def _require(meta: typ.Mapping[str, typ.Any], key: str, source: Path) -> str:
    value = meta.get(key)
    if value is None:
        msg = f"'{source}' is missing required field '{key}'."
        raise ContentError(msg)
    return str(value)


def parse_date(value: object, *, field: str = "date") -> dt.date:
    """Return a date from a ``YYYY-MM-DD`` string or a YAML date value."""
    match value:
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            try:
                return dt.datetime.strptime(text.strip(), DATE_FORMAT).date()
            except ValueError as exc:
                msg = f"Invalid {field} {text!r}; expected YYYY-MM-DD."
                raise ContentError(msg) from exc
        case _:
            msg = f"Invalid {field} {value!r}; expected YYYY-MM-DD."
            raise ContentError(msg)


def load_post(path: Path) -> BlogPost:
    """Load the post stored in directory ``path``."""
    meta_path = path / META_FILENAME
    meta = _read_meta(meta_path)
    return BlogPost(
        id=path.name,
        title=_require(meta, "title", meta_path),
        summary=_require(meta, "summary", meta_path),
        author_name=_require(meta, "author_name", meta_path),
        author_email=_require(meta, "author_email", meta_path),
        author_uri=_require(meta, "author_uri", meta_path),
        image=_require(meta, "image", meta_path),
        image_alt=_require(meta, "image_alt", meta_path),
        published=parse_date(meta.get("published"), field="published date"),
        updated=parse_date(meta.get("updated"), field="updated date"),
        markdown=_read_markdown(path / CONTENT_FILENAME),
        source_dir=path,
    )


def load_page(path: Path) -> StaticPage:
    """Load the page stored in directory ``path`` (named ``<order>_<id>``)."""
    match = PAGE_DIR_PATTERN.match(path.name)
    if match is None:
        msg = f"Page directory '{path.name}' must be named '<order>_<id>'."
        raise ContentError(msg)
    meta_path = path / META_FILENAME
    meta = _read_meta(meta_path)
    return StaticPage(
        id=match.group("id"),
        order=int(match.group("order")),
        name=_require(meta, "name", meta_path),
        title=_require(meta, "title", meta_path),
        summary=_require(meta, "summary", meta_path),
        author_fediverse=str(meta.get("author_fediverse") or ""),
        image=str(meta.get("image") or ""),
        image_alt=str(meta.get("image_alt") or ""),
        markdown=_read_markdown(path / CONTENT_FILENAME),
        source_dir=path,
    )


def _content_dirs(root: Path) -> list[Path]:
    """Return visible subdirectories of ``root`` in name order."""
    if not root.is_dir():
        msg = f"Content directory '{root}' not found."
        raise ContentError(msg)
    return sorted(
        entry
        for entry in root.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    )


def load_posts(source_dir: Path) -> list[BlogPost]:
    """Load every post, newest published first."""
    posts = [load_post(path) for path in _content_dirs(source_dir / POSTS_DIR)]
    posts.sort(key=lambda post: post.published, reverse=True)
    logger.debug("Loaded %d posts from %s", len(posts), source_dir)
    return posts


def load_pages(source_dir: Path) -> list[StaticPage]:
    """Load every static page, ordered by its numeric prefix."""
    pages = [load_page(path) for path in _content_dirs(source_dir / PAGES_DIR)]
    pages.sort(key=lambda page: page.order)
    logger.debug("Loaded %d pages from %s", len(pages), source_dir)
    return pages


def asset_files(path: Path) -> list[Path]:
    """Return files in a content directory other than metadata and markdown."""
    return sorted(
        entry
        for entry in path.iterdir()
        if entry.is_file() and entry.name not in (CONTENT_FILENAME, META_FILENAME)
    )


__all__ = [
    "BlogPost",
    "Document",
    "StaticPage",
    "asset_files",
    "load_page",
    "load_pages",
    "load_post",
    "load_posts",
    "parse_date",
]
