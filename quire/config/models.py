"""Typed dataclasses describing quire site configuration structures."""

from __future__ import annotations

import dataclasses as dc

from quire._constants import DEFAULT_HIGHLIGHT_LANGUAGES
from quire.errors import SiteConfigError


@dc.dataclass(slots=True)
class FeedInfo:
    """Site identity used by the Atom feed and page metadata."""

    title: str
    id: str
    author_name: str
    author_email: str
    author_uri: str
    link_site: str
    link_feed: str


@dc.dataclass(slots=True)
class RenderOptions:
    """Code highlighting choices applied to every rendered document."""

    highlight_languages: tuple[str, ...] = DEFAULT_HIGHLIGHT_LANGUAGES
    pygments_style: str = "default"


@dc.dataclass(slots=True)
class SiteConfig:
    """Feed identity alongside rendering defaults."""

    feed: FeedInfo
    rendering: RenderOptions = dc.field(default_factory=RenderOptions)

    @property
    def site_name(self) -> str:
        """Return the human-readable site name used in OpenGraph tags."""
        return self.feed.title

    @property
    def url_base(self) -> str:
        """Return the absolute site URL without a trailing slash."""
        return self.feed.link_site.rstrip("/")


__all__ = ["FeedInfo", "RenderOptions", "SiteConfig", "SiteConfigError"]
