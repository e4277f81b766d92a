"""Build the site's Atom feed.

Each post becomes one ``<entry>`` carrying its summary and the complete
rendered page as HTML content. The feed's ``updated`` timestamp is the most
recent entry update. Dates are midnight UTC of the post's ``YYYY-MM-DD``
metadata.

Example
-------
>>> from quire.feed import atom_timestamp
>>> import datetime as dt
>>> atom_timestamp(dt.date(2024, 3, 5))
'2024-03-05T00:00:00+00:00'
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from quire._constants import BLOG_OUTPUT_DIR

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from quire.config import FeedInfo
    from quire.content import BlogPost

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
GENERATOR_NAME = "quire"
GENERATOR_URI = "https://pypi.org/project/quire/"


def atom_timestamp(value: dt.date) -> str:
    """Return an RFC 3339 timestamp for midnight UTC on ``value``."""
    moment = dt.datetime.combine(value, dt.time.min, tzinfo=dt.UTC)
    return moment.isoformat()


@dc.dataclass(frozen=True, slots=True)
class FeedEntry:
    """One post as it appears in the feed."""

    title: str
    url: str
    summary: str
    author_name: str
    author_email: str
    author_uri: str
    published: dt.date
    updated: dt.date
    html: str

    @classmethod
    def from_post(cls, post: BlogPost, *, html: str, url_base: str) -> FeedEntry:
        """Build the entry for ``post`` whose rendered page is ``html``."""
        return cls(
            title=post.title,
            url=f"{url_base.rstrip('/')}/{BLOG_OUTPUT_DIR}/{post.id}",
            summary=post.summary,
            author_name=post.author_name,
            author_email=post.author_email,
            author_uri=post.author_uri,
            published=post.published,
            updated=post.updated,
            html=html,
        )


class AtomFeedBuilder:
    """Render ``atom.xml`` from feed metadata and entries."""

    def __init__(self, feed: FeedInfo, *, templates_dir: Path | None = None) -> None:
        """Initialize the builder and its XML-escaping Jinja environment."""
        self.feed = feed
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("atom.jinja")

    def render(self, entries: cabc.Sequence[FeedEntry]) -> str:
        """Return the feed document for ``entries`` in the given order."""
        if entries:
            updated = atom_timestamp(max(entry.updated for entry in entries))
        else:
            logger.warning("Feed has no entries; using the current time as updated.")
            updated = dt.datetime.now(dt.UTC).replace(microsecond=0).isoformat()
        context = {
            "feed": self.feed,
            "updated": updated,
            "generator_name": GENERATOR_NAME,
            "generator_uri": GENERATOR_URI,
            "entries": [
                {
                    **dc.asdict(entry),
                    "published": atom_timestamp(entry.published),
                    "updated": atom_timestamp(entry.updated),
                }
                for entry in entries
            ],
        }
        xml = self.template.render(**context)
        if not xml.endswith("\n"):
            xml += "\n"
        return xml

    def run(self, entries: cabc.Sequence[FeedEntry], output_path: Path) -> Path:
        """Render and write the feed, returning the output path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(entries), encoding="utf-8")
        return output_path


__all__ = ["AtomFeedBuilder", "FeedEntry", "atom_timestamp"]
