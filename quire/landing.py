"""quire landing page rendering pipeline.

The landing page is the site's root ``index.html``: the ``landing_header``
fragment (with its static-pages placeholder filled in), one entry card per
post rendered from ``post_entry.jinja``, and the ``landing_footer`` fragment.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from quire._constants import STATIC_PAGES_PLACEHOLDER
from quire.generator.assembler import DEFAULT_TEMPLATES_DIR, format_date, page_links

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from quire.content import BlogPost, StaticPage
    from quire.generator.assembler import FragmentStore


class LandingPageBuilder:
    """Render the landing page from the site's posts and pages."""

    def __init__(
        self,
        fragments: FragmentStore,
        target_dir: Path,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment."""
        self.fragments = fragments
        self.target_dir = target_dir
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("post_entry.jinja")

    def entry(self, post: BlogPost) -> str:
        """Render the landing-page card for ``post``."""
        return self.template.render(post=post, published=format_date(post.published))

    def render(
        self,
        posts: cabc.Sequence[BlogPost],
        pages: cabc.Sequence[StaticPage],
    ) -> str:
        """Return the landing page HTML.

        Raises
        ------
        FragmentNotFoundError
            If either landing fragment is missing.
        """
        header = self.fragments.read("landing_header.html")
        footer = self.fragments.read("landing_footer.html")
        header = header.replace(STATIC_PAGES_PLACEHOLDER, page_links(pages, prefix=""))
        return header + "".join(self.entry(post) for post in posts) + footer

    def run(
        self,
        posts: cabc.Sequence[BlogPost],
        pages: cabc.Sequence[StaticPage],
    ) -> Path:
        """Render and write ``index.html``, returning the output path."""
        output_path = self.target_dir / "index.html"
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(posts, pages), encoding="utf-8")
        return output_path


__all__ = ["LandingPageBuilder"]
