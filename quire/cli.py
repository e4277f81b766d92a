"""Cyclopts CLI entrypoint for building a quire site.

The ``quire`` console script defined here renders blog posts, static pages,
the landing page, and the Atom feed from a source tree into a target
directory. ``quire build SOURCE TARGET`` runs every step; the remaining
commands run a single step, which is handy while editing one kind of content.

Examples
--------
Build the whole site:

>>> from quire.cli import main
>>> main()  # doctest: +SKIP

Regenerate only the posts:

>>> from quire.cli import app
>>> app(["posts", "site", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .site import SiteGenerator

if typ.TYPE_CHECKING:
    from .generator.models import BuildReport

LOG_FORMAT = "[%(levelname)s] %(message)s"

app = App(name="quire", config=cyclopts.config.Env("QUIRE_", command=False))  # type: ignore[unknown-argument]

SourceArg = typ.Annotated[
    Path, Parameter(help="Source tree with feed.yaml, fragments, entries and pages")
]
TargetArg = typ.Annotated[Path, Parameter(help="Directory receiving the rendered site")]
VerboseOpt = typ.Annotated[bool, Parameter(help="Log debug output")]


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr at INFO, or DEBUG when ``verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _report(report: BuildReport) -> None:
    """Print written paths and exit non-zero when any document failed."""
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for document_id, error in sorted(report.failures.items()):
        print(f"failed {document_id}: {error}", file=sys.stderr)
    if not report.ok:
        raise SystemExit(1)


@app.command(help="Render posts, pages, landing page, feed and code stylesheet.")
def build(source: SourceArg, target: TargetArg, *, verbose: VerboseOpt = False) -> None:
    """Render the complete site.

    Parameters
    ----------
    source : Path
        Source tree containing ``feed.yaml``, ``fragments/``, ``entries/`` and
        ``pages/``.
    target : Path
        Output directory; created when missing.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    SystemExit
        With status 1 when one or more documents failed to render. Every
        other document is still written.
    """
    _configure_logging(verbose)
    _report(SiteGenerator(source, target).run())


@app.command(help="Render blog posts into TARGET/blog.")
def posts(source: SourceArg, target: TargetArg, *, verbose: VerboseOpt = False) -> None:
    """Render every blog post and copy its assets."""
    _configure_logging(verbose)
    _report(SiteGenerator(source, target).write_posts())


@app.command(help="Render static pages into TARGET/<page>.")
def pages(source: SourceArg, target: TargetArg, *, verbose: VerboseOpt = False) -> None:
    """Render every static page and copy its assets."""
    _configure_logging(verbose)
    _report(SiteGenerator(source, target).write_pages())


@app.command(help="Render the landing page into TARGET/index.html.")
def landing(source: SourceArg, target: TargetArg, *, verbose: VerboseOpt = False) -> None:
    """Render the landing page listing every post."""
    _configure_logging(verbose)
    _report(SiteGenerator(source, target).write_landing())


@app.command(help="Render the Atom feed into TARGET/blog/atom.xml.")
def feed(source: SourceArg, target: TargetArg, *, verbose: VerboseOpt = False) -> None:
    """Render the Atom feed for every post."""
    _configure_logging(verbose)
    _report(SiteGenerator(source, target).write_feed())


def main() -> None:
    """Invoke the Cyclopts application that powers the ``quire`` console command.

    Returns
    -------
    None
        This function executes for its side effects of parsing CLI arguments
        and running the requested subcommand.
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
