"""High-level orchestration for post and page generation.

This module loads a quire source tree, renders each document through
:class:`~quire.generator.line_renderer.LineRenderer`, wraps it with
:class:`~quire.generator.assembler.DocumentAssembler`, and writes the result
plus the document's assets into the target directory.

A document whose render fails (for example because a fragment is missing) is
recorded in the returned :class:`~quire.generator.models.BuildReport`; the
remaining documents are still written.

Example
-------
>>> from pathlib import Path
>>> from quire.site import SiteGenerator
>>> generator = SiteGenerator(Path("site"), Path("public"))  # doctest: +SKIP
>>> report = generator.run()  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import functools
import logging
import shutil
import typing as typ
from pathlib import Path

from quire._constants import BLOG_OUTPUT_DIR, FEED_OUTPUT, STYLESHEET_OUTPUT
from quire.config import SiteConfig, load_site_config
from quire.content import (
    BlogPost,
    Document,
    StaticPage,
    asset_files,
    load_pages,
    load_posts,
)
from quire.errors import QuireError
from quire.feed import AtomFeedBuilder, FeedEntry
from quire.generator.assembler import (
    PAGE_PROFILE,
    POST_PROFILE,
    DocumentAssembler,
    FragmentStore,
)
from quire.generator.line_renderer import render_document
from quire.generator.models import BuildReport
from quire.generator.renderer import HtmlContentRenderer
from quire.landing import LandingPageBuilder

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

LANDING_ID = "index"


class SiteGenerator:
    """Render every post, page, the landing page, and the feed of a site."""

    def __init__(
        self,
        source_dir: Path,
        target_dir: Path,
        *,
        site_config: SiteConfig | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with a source tree and output directory.

        Parameters
        ----------
        source_dir : Path
            Directory holding ``feed.yaml``, ``fragments/``, ``entries/`` and
            ``pages/``.
        target_dir : Path
            Directory that receives the rendered site.
        site_config : SiteConfig, optional
            Pre-loaded configuration; read from ``source_dir`` when omitted.
        templates_dir : Path, optional
            Override for the Jinja templates directory.
        """
        self.source_dir = source_dir
        self.target_dir = target_dir
        self.config = site_config or load_site_config(source_dir)
        self.templates_dir = templates_dir
        self.renderer = HtmlContentRenderer(
            self.config.rendering.pygments_style,
            self.config.rendering.highlight_languages,
        )
        fragments = FragmentStore(source_dir)
        self.fragments = fragments
        self.post_assembler = DocumentAssembler(
            POST_PROFILE, fragments, templates_dir=templates_dir
        )
        self.page_assembler = DocumentAssembler(
            PAGE_PROFILE, fragments, templates_dir=templates_dir
        )

    @functools.cached_property
    def posts(self) -> list[BlogPost]:
        """Return the site's posts, newest first."""
        return load_posts(self.source_dir)

    @functools.cached_property
    def pages(self) -> list[StaticPage]:
        """Return the site's static pages in navigation order."""
        return load_pages(self.source_dir)

    def run(self) -> BuildReport:
        """Write posts, landing page, feed, pages, and the code stylesheet.

        Returns
        -------
        BuildReport
            Every written path and the documents that failed to render.
        """
        report = self.write_posts()
        report.extend(self.write_landing())
        report.extend(self.write_feed())
        report.extend(self.write_pages())
        report.written.append(self.write_stylesheet())
        return report

    def render_post(self, post: BlogPost) -> str:
        """Return the complete HTML page for ``post``."""
        rendered = render_document(post.markdown, self.renderer)
        return self.post_assembler.assemble(
            post,
            rendered,
            site_name=self.config.site_name,
            url_base=self.config.url_base,
        )

    def render_page(self, page: StaticPage) -> str:
        """Return the complete HTML page for ``page``."""
        rendered = render_document(page.markdown, self.renderer)
        return self.page_assembler.assemble(
            page,
            rendered,
            site_name=self.config.site_name,
            url_base=self.config.url_base,
            pages=self.pages,
        )

    def write_posts(self) -> BuildReport:
        """Render every post into ``blog/<id>/index.html`` with its assets."""
        return self._write_documents(
            self.posts,
            self.render_post,
            lambda post: self.target_dir / BLOG_OUTPUT_DIR / post.id,
        )

    def write_pages(self) -> BuildReport:
        """Render every static page into ``<id>/index.html`` with its assets."""
        return self._write_documents(
            self.pages,
            self.render_page,
            lambda page: self.target_dir / page.id,
        )

    def write_landing(self) -> BuildReport:
        """Write the landing page listing every post.

        A missing landing fragment is recorded under ``index`` in the returned
        report instead of aborting the build.
        """
        report = BuildReport()
        builder = LandingPageBuilder(
            self.fragments, self.target_dir, templates_dir=self.templates_dir
        )
        try:
            report.written.append(builder.run(self.posts, self.pages))
        except QuireError as exc:
            logger.error("Failed to render the landing page: %s", exc)
            report.failures[LANDING_ID] = str(exc)
        return report

    def write_feed(self) -> BuildReport:
        """Write the Atom feed containing every post that renders.

        Posts that fail to render are left out of the feed and recorded in
        the returned report.
        """
        report = BuildReport()
        entries: list[FeedEntry] = []
        for post in self.posts:
            try:
                html = self.render_post(post)
            except QuireError as exc:
                logger.error("Leaving post %r out of the feed: %s", post.id, exc)
                report.failures[post.id] = str(exc)
                continue
            entries.append(
                FeedEntry.from_post(post, html=html, url_base=self.config.url_base)
            )
        builder = AtomFeedBuilder(self.config.feed, templates_dir=self.templates_dir)
        report.written.append(builder.run(entries, self.target_dir / FEED_OUTPUT))
        return report

    def write_stylesheet(self) -> Path:
        """Write the Pygments token stylesheet for highlighted code."""
        path = self.target_dir / STYLESHEET_OUTPUT
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.renderer.stylesheet + "\n", encoding="utf-8")
        return path

    def _write_documents(
        self,
        documents: cabc.Iterable[Document],
        render: cabc.Callable[[typ.Any], str],
        directory_for: cabc.Callable[[typ.Any], Path],
    ) -> BuildReport:
        """Render and write each document, isolating per-document failures."""
        report = BuildReport()
        for document in documents:
            try:
                html = render(document)
            except QuireError as exc:
                logger.error("Failed to render %r: %s", document.id, exc)
                report.failures[document.id] = str(exc)
                continue
            directory = directory_for(document)
            directory.mkdir(parents=True, exist_ok=True)
            output_path = directory / "index.html"
            output_path.write_text(html, encoding="utf-8")
            report.written.append(output_path)
            logger.debug("Wrote %s", output_path)
            report.written.extend(self._copy_assets(document, directory))
        return report

    @staticmethod
    def _copy_assets(document: Document, directory: Path) -> list[Path]:
        """Copy every non-markdown, non-metadata file next to the rendered page."""
        if document.source_dir is None:
            return []
        copied: list[Path] = []
        for asset in asset_files(document.source_dir):
            target = directory / asset.name
            logger.debug("Copying %s to %s", asset, target)
            shutil.copy2(asset, target)
            copied.append(target)
        return copied


__all__ = ["SiteGenerator"]
