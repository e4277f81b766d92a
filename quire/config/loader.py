"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from quire._constants import FEED_FILENAME

from .helpers import _build_feed_info, _build_render_options
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing the feed identity and render options.

    Parameters
    ----------
    path : Path
        Filesystem path to ``feed.yaml``, or to the source directory that
        contains it.

    Returns
    -------
    SiteConfig
        Parsed configuration with feed metadata and rendering defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level YAML structure is not a mapping or required feed
        fields are missing.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from quire.config import load_site_config
    >>> config = load_site_config(Path("site"))  # doctest: +SKIP
    >>> config.rendering.highlight_languages  # doctest: +SKIP
    ('gdscript',)
    """
    if path.is_dir():
        path = path / FEED_FILENAME
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return SiteConfig(
        feed=_build_feed_info(raw),
        rendering=_build_render_options(raw.get("rendering")),
    )


__all__ = ["load_site_config"]
