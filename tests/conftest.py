"""Shared fixtures that lay out a small quire source tree on disk."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

FEED_YAML = dedent(
    """
    title: Fixture Journal
    id: urn:uuid:4f8e1d2c-0000-4000-8000-000000000001
    author_name: Sam Writer
    author_email: sam@example.invalid
    author_uri: https://example.invalid/about
    link_site: https://example.invalid
    link_feed: https://example.invalid/blog/atom.xml
    rendering:
      highlight_languages: [GDScript]
    """
).lstrip()

FRAGMENTS = {
    "post_header.html": "</head><body id='page-top'><header>posts</header>",
    "post_footer.html": "<footer>fin</footer></body></html>",
    "page_header.html": "</head><body id='page-top'><nav>___STATIC_PAGES___</nav>",
    "landing_header.html": "<html><body><nav>___STATIC_PAGES___</nav><main>",
    "landing_footer.html": "</main></body></html>",
}

POSTS = {
    "first-light": (
        dedent(
            """
            title: First Light
            summary: Where it all began.
            author_name: Sam Writer
            author_email: sam@example.invalid
            author_uri: https://example.invalid/about
            image: cover.png
            image_alt: A sunrise
            published: 2024-03-05
            updated: '2024-04-01'
            """
        ).lstrip(),
        dedent(
            """
            Opening paragraph.
            ## Getting Started: Part 2
            Some *emphasis* here.
            !insert bg ![diagram](diagram.png)
            !image_subtitle The overall layout
            ```GDScript
            var speed = max(1, 2)
            ```
            ## Wrap up
            Done.
            """
        ).lstrip(),
    ),
    "second-wind": (
        dedent(
            """
            title: Second Wind
            summary: A follow-up.
            author_name: Sam Writer
            author_email: sam@example.invalid
            author_uri: https://example.invalid/about
            image: hero.jpg
            image_alt: Wind turbines
            published: 2024-06-10
            updated: 2024-06-12
            """
        ).lstrip(),
        "## Notes\nShort post.\n",
    ),
}

PAGES = {
    "1_about": (
        dedent(
            """
            name: About
            title: About this site
            summary: Who writes here.
            author_fediverse: '@sam@example.invalid'
            """
        ).lstrip(),
        "## Contact\nWrite to me.\n",
    ),
    "2_projects": (
        dedent(
            """
            name: Projects
            title: Projects
            summary: Things I made.
            author_fediverse: '@sam@example.invalid'
            image: banner.png
            image_alt: Workbench
            """
        ).lstrip(),
        "## Games\nA list.\n## Tools\nAnother list.\n",
    ),
}


def write_site(root: Path) -> Path:
    """Write the fixture source tree under ``root`` and return it."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "feed.yaml").write_text(FEED_YAML, encoding="utf-8")
    fragments = root / "fragments"
    fragments.mkdir()
    for name, body in FRAGMENTS.items():
        (fragments / name).write_text(body, encoding="utf-8")
    for post_id, (meta, markdown) in POSTS.items():
        directory = root / "entries" / post_id
        directory.mkdir(parents=True)
        (directory / "meta.yaml").write_text(meta, encoding="utf-8")
        (directory / "content.md").write_text(markdown, encoding="utf-8")
    (root / "entries" / "first-light" / "cover.png").write_bytes(b"\x89PNG fixture")
    (root / "entries" / "first-light" / "diagram.png").write_bytes(b"\x89PNG diagram")
    (root / "entries" / ".drafts").mkdir()
    for dirname, (meta, markdown) in PAGES.items():
        directory = root / "pages" / dirname
        directory.mkdir(parents=True)
        (directory / "meta.yaml").write_text(meta, encoding="utf-8")
        (directory / "content.md").write_text(markdown, encoding="utf-8")
    (root / "pages" / "2_projects" / "banner.png").write_bytes(b"\x89PNG banner")
    return root


@pytest.fixture
def site_source(tmp_path: Path) -> Path:
    """Return a freshly written fixture source tree."""
    return write_site(tmp_path / "site")


@pytest.fixture
def site_target(tmp_path: Path) -> Path:
    """Return the output directory for a site build."""
    return tmp_path / "public"
