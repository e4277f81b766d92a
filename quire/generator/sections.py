"""Turn level-two headings into anchored sections for the sidebar.

Every ``<h2>`` produced by the markdown converter becomes an anchored heading
with a trailing section-link icon, and its title and slug are recorded so the
sidebar can list the document's sections in order.

Example
-------
>>> from quire.generator.sections import slugify
>>> slugify("Getting Started: Part 2")
'getting_started_part_2'
"""

from __future__ import annotations

import dataclasses as dc
import re

HEADING_PATTERN = re.compile(r"^\s*<h2>(?P<title>.*)</h2>\s*$", re.DOTALL)
WORD_BOUNDARIES = (
    re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])"),
    re.compile(r"(?<=[a-z])(?=[A-Z])"),
    re.compile(r"(?<=[A-Za-z])(?=[0-9])"),
    re.compile(r"(?<=[0-9])(?=[A-Za-z])"),
)


@dc.dataclass(frozen=True, slots=True)
class Section:
    """Second-level heading recorded for the table of contents.

    Attributes
    ----------
    title : str
        Inner HTML of the heading as produced by the markdown converter.
    slug : str
        Anchor id assigned to the heading. Not unique within a document.
    """

    title: str
    slug: str


def slugify(title: str) -> str:
    """Return the snake_case slug of the alphanumerics and spaces in ``title``.

    Words also break where case or digits change, so ``"GDScript"`` becomes
    ``gd_script`` and ``"Part2"`` becomes ``part_2``.
    """
    kept = "".join(char for char in title if char.isalnum() or char == " ")
    for boundary in WORD_BOUNDARIES:
        kept = boundary.sub(" ", kept)
    return "_".join(kept.lower().split())


def heading_title(html: str) -> str | None:
    """Return the inner HTML of a lone ``<h2>`` element, or ``None``."""
    match = HEADING_PATTERN.match(html)
    if match is None:
        return None
    return match.group("title")


def anchored_heading(section: Section) -> str:
    """Render the heading element with its id and same-page section link."""
    return (
        f"<h2 id='{section.slug}'>{section.title}"
        f"<a href='#{section.slug}'><div class='section-link' alt='Section link'>"
        "</div></a></h2>"
    )


def index_heading(html: str) -> tuple[str, Section] | None:
    """Convert a rendered ``<h2>`` into anchored markup and its Section.

    Parameters
    ----------
    html : str
        Output of the markdown converter for a single line.

    Returns
    -------
    tuple[str, Section] or None
        The anchored heading markup and the recorded section, or ``None`` when
        ``html`` is not a level-two heading.
    """
    title = heading_title(html)
    if title is None:
        return None
    section = Section(title=title, slug=slugify(title))
    return anchored_heading(section), section


__all__ = [
    "HEADING_PATTERN",
    "Section",
    "anchored_heading",
    "heading_title",
    "index_heading",
    "slugify",
]
