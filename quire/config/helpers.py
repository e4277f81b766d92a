"""Utility helpers shared by the quire configuration loader."""

from __future__ import annotations

import typing as typ

from .models import FeedInfo, RenderOptions, SiteConfigError

FEED_FIELDS = (
    "title",
    "id",
    "author_name",
    "author_email",
    "author_uri",
    "link_site",
    "link_feed",
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_languages(value: str | list[object] | None) -> tuple[str, ...] | None:
    """Normalize a language list into lowercase, non-empty labels."""
    if isinstance(value, str):
        return tuple(segment.lower() for segment in value.split() if segment)
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip().lower()
            if text:
                normalized.append(text)
        return tuple(normalized)
    return None


def _build_feed_info(payload: typ.Mapping[str, typ.Any]) -> FeedInfo:
    """Build FeedInfo, reporting every missing field at once."""
    values = {key: _optional_str(payload.get(key)) for key in FEED_FIELDS}
    missing = [key for key, value in values.items() if value is None]
    if missing:
        msg = f"Feed configuration is missing: {', '.join(missing)}."
        raise SiteConfigError(msg)
    return FeedInfo(**typ.cast("dict[str, str]", values))


def _build_render_options(payload: typ.Mapping[str, typ.Any] | None) -> RenderOptions:
    """Build RenderOptions from the optional ``rendering`` mapping."""
    base = RenderOptions()
    if not payload:
        return base
    if not isinstance(payload, dict):
        msg = "'rendering' must be a mapping."
        raise SiteConfigError(msg)
    languages = _normalize_languages(payload.get("highlight_languages"))
    style = _optional_str(payload.get("pygments_style"))
    return RenderOptions(
        highlight_languages=base.highlight_languages if languages is None else languages,
        pygments_style=style or base.pygments_style,
    )


__all__ = [
    "FEED_FIELDS",
    "_build_feed_info",
    "_build_render_options",
    "_normalize_languages",
    "_optional_str",
]
