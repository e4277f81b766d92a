"""Static site generator for markdown blogs with directive-aware rendering.

This package exposes the CLI entry points used by the ``quire`` console
script to render blog posts, static pages, the landing page, and the Atom
feed from a source tree of ``meta.yaml`` + ``content.md`` directories.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from quire import main
>>> main()  # doctest: +SKIP
>>> from quire import app
>>> "quire" in app.name
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
