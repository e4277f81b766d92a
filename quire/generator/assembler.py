"""Assemble complete HTML pages around a rendered markdown body.

Posts and pages share one layout that differs in a handful of switches, which
are captured by :class:`PageProfile`. Assembly happens after the body has been
rendered, so the sidebar is built from the final section list and inserted
while the page is first put together.

Example
-------
>>> from pathlib import Path
>>> from quire.generator.assembler import (
...     POST_PROFILE, DocumentAssembler, FragmentStore
... )
>>> assembler = DocumentAssembler(POST_PROFILE, FragmentStore(Path("site")))  # doctest: +SKIP
>>> html = assembler.assemble(post, rendered, site_name="Blog", url_base="https://x")  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from quire._constants import FRAGMENTS_DIR, STATIC_PAGES_PLACEHOLDER
from quire.content import BlogPost
from quire.errors import FragmentNotFoundError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from quire.content import Document, StaticPage
    from quire.generator.models import RenderedDocument
    from quire.generator.sections import Section

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class SidebarStyle(enum.StrEnum):
    """When the hero image and sidebar are shown."""

    ALWAYS = "always"
    WITH_HERO = "with_hero"


@dc.dataclass(frozen=True, slots=True)
class PageProfile:
    """Capabilities that distinguish post pages from static pages.

    Attributes
    ----------
    header_fragment : str
        Fragment file written after the ``<head>`` metadata.
    footer_fragment : str
        Fragment file closing the page.
    has_dates : bool
        Whether the sidebar lists published/updated dates.
    has_fediverse_creator : bool
        Whether a ``fediverse:creator`` meta tag is emitted.
    home_link_depth : int
        Number of ``../`` segments in the home link.
    sidebar_style : SidebarStyle
        ``ALWAYS`` renders the hero image and sidebar for every document;
        ``WITH_HERO`` only when the document has an image.
    nav_strip : bool
        Replace the static-pages placeholder in the header with page links.
    url_prefix : str
        Path prefix of the document's public URL.
    """

    header_fragment: str
    footer_fragment: str
    has_dates: bool
    has_fediverse_creator: bool
    home_link_depth: int
    sidebar_style: SidebarStyle
    nav_strip: bool
    url_prefix: str


POST_PROFILE = PageProfile(
    header_fragment="post_header.html",
    footer_fragment="post_footer.html",
    has_dates=True,
    has_fediverse_creator=False,
    home_link_depth=2,
    sidebar_style=SidebarStyle.ALWAYS,
    nav_strip=False,
    url_prefix="blog/",
)

PAGE_PROFILE = PageProfile(
    header_fragment="page_header.html",
    footer_fragment="post_footer.html",
    has_dates=False,
    has_fediverse_creator=True,
    home_link_depth=1,
    sidebar_style=SidebarStyle.WITH_HERO,
    nav_strip=True,
    url_prefix="",
)


class FragmentStore:
    """Read header and footer HTML fragments from a source tree."""

    def __init__(self, source_dir: Path) -> None:
        self.root = source_dir / FRAGMENTS_DIR

    def read(self, name: str) -> str:
        """Return fragment ``name`` verbatim.

        Raises
        ------
        FragmentNotFoundError
            If the fragment file does not exist or cannot be read.
        """
        path = self.root / name
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Fragment '{path}' could not be read."
            raise FragmentNotFoundError(msg) from exc


def format_date(value: dt.date) -> str:
    """Format a date as ``March 5, 2024``."""
    return f"{value:%B} {value.day}, {value:%Y}"


def page_links(pages: cabc.Sequence[StaticPage], *, prefix: str) -> str:
    """Return one anchor per page, each pointing at ``<prefix><id>/index.html``."""
    return "".join(
        f'<a href="{prefix}{page.id}/index.html">{escape(page.name)}</a>'
        for page in pages
    )


def section_list(sections: cabc.Iterable[Section]) -> str:
    """Return the ordered list of same-page section links."""
    items = "".join(
        f"<li><a href='#{section.slug}'>{section.title}</a></li>"
        for section in sections
    )
    return f"<ol>{items}</ol>"


class DocumentAssembler:
    """Wrap rendered bodies with metadata, fragments, sidebar, and boilerplate."""

    def __init__(
        self,
        profile: PageProfile,
        fragments: FragmentStore,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the assembler and its Jinja environment.

        Parameters
        ----------
        profile : PageProfile
            Layout switches for the kind of document being assembled.
        fragments : FragmentStore
            Source of the header and footer fragments.
        templates_dir : Path, optional
            Directory containing ``head.jinja``; defaults to the package
            templates.
        """
        self.profile = profile
        self.fragments = fragments
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.head_template = self.env.get_template("head.jinja")

    def assemble(
        self,
        document: Document,
        rendered: RenderedDocument,
        *,
        site_name: str,
        url_base: str,
        pages: cabc.Sequence[StaticPage] = (),
    ) -> str:
        """Return the complete HTML page for ``document``.

        Parameters
        ----------
        document : Document
            Post or page metadata.
        rendered : RenderedDocument
            Body HTML and sections produced by the line renderer.
        site_name : str
            Site name for the OpenGraph metadata.
        url_base : str
            Absolute site URL used to build the page URL.
        pages : Sequence[StaticPage], optional
            Every static page, listed in the navigation strip when the profile
            asks for one.

        Raises
        ------
        FragmentNotFoundError
            If the header or footer fragment is missing. Only this document's
            render is affected.
        """
        header = self.fragments.read(self.profile.header_fragment)
        footer = self.fragments.read(self.profile.footer_fragment)
        if self.profile.nav_strip:
            header = header.replace(STATIC_PAGES_PLACEHOLDER, self._nav_strip(pages))

        parts = [self._head(document, site_name=site_name, url_base=url_base), header]
        if self.profile.sidebar_style is SidebarStyle.ALWAYS or document.image:
            parts.append(self._hero(document))
            parts.append(self.sidebar(document, rendered.sections))
        parts.append(f"<div class='post-text'><h1>{escape(document.title)}</h1>")
        parts.append(rendered.html)
        parts.append(self._post_end())
        parts.append(footer)
        return "".join(parts)

    def sidebar(self, document: Document, sections: cabc.Sequence[Section]) -> str:
        """Return the sidebar markup for ``document`` and its sections."""
        info = ""
        if self.profile.has_dates and isinstance(document, BlogPost):
            info = (
                "<div class='sidebar-info'>"
                f"Published <span class='sidebar-date'>{format_date(document.published)}</span><br>"
                f"Updated <span class='sidebar-date'>{format_date(document.updated)}</span><br>"
                "</div><hr>"
            )
        return f"<div id='sidebar'>{info}{section_list(sections)}</div>"

    def _head(self, document: Document, *, site_name: str, url_base: str) -> str:
        page_url = f"{url_base.rstrip('/')}/{self.profile.url_prefix}{document.id}"
        fediverse_creator = ""
        if self.profile.has_fediverse_creator:
            fediverse_creator = getattr(document, "author_fediverse", "")
        return self.head_template.render(
            document=document,
            site_name=site_name,
            page_url=page_url,
            fediverse_creator=fediverse_creator,
        )

    @staticmethod
    def _hero(document: Document) -> str:
        return (
            "<div class='post-header-image'>"
            f"<img alt='{escape(document.image_alt)}' src='{escape(document.image)}'"
            " class='post-image'><br /></div>"
        )

    @staticmethod
    def _nav_strip(pages: cabc.Sequence[StaticPage]) -> str:
        return '<a href="../index.html">Blog</a>' + page_links(pages, prefix="../")

    def _post_end(self) -> str:
        home = "../" * self.profile.home_link_depth + "index.html"
        return (
            "<div class='post-end'>\n"
            f"\t<a href='{home}'><div id='home-link'></div>Home</a>\n"
            "\t<a href='#page-top'><div id='top-link'></div>Back to the top</a>\n"
            "</div></div>"
        )


__all__ = [
    "PAGE_PROFILE",
    "POST_PROFILE",
    "DocumentAssembler",
    "FragmentStore",
    "PageProfile",
    "SidebarStyle",
    "format_date",
    "page_links",
    "section_list",
]
