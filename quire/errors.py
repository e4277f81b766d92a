"""Exception types raised while loading and rendering a quire site."""

from __future__ import annotations


class QuireError(Exception):
    """Base class for every error raised by quire."""


class SiteConfigError(QuireError, ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class ContentError(QuireError, ValueError):
    """Raised when a post or page directory cannot be loaded."""


class FragmentNotFoundError(QuireError, FileNotFoundError):
    """Raised when a header or footer HTML fragment is missing."""


__all__ = [
    "ContentError",
    "FragmentNotFoundError",
    "QuireError",
    "SiteConfigError",
]
