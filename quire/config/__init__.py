"""Load and validate the site configuration for quire builds.

This subpackage parses the source tree's ``feed.yaml`` file into strongly
typed dataclasses (:class:`SiteConfig`, :class:`FeedInfo`,
:class:`RenderOptions`) that the generators consume. The primary entry point
is :func:`load_site_config`, which ensures required feed fields are present
and applies rendering defaults.

Examples
--------
>>> from pathlib import Path
>>> from quire.config import load_site_config
>>> site = load_site_config(Path("site/feed.yaml"))  # doctest: +SKIP
>>> site.feed.link_feed  # doctest: +SKIP
'https://example.org/blog/atom.xml'
"""

from .loader import load_site_config
from .models import FeedInfo, RenderOptions, SiteConfig, SiteConfigError

__all__ = [
    "FeedInfo",
    "RenderOptions",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
