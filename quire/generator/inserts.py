"""Directive handling for inset media blocks and raw HTML lines.

An ``!insert`` line breaks out of the running ``post-text`` column and opens
a nested wrapper for an image or short piece of content. The wrapper stays
open until the following line, which either supplies a caption with
``!image_subtitle`` or is ordinary content that closes the insert first.
"""

from __future__ import annotations

import dataclasses as dc

from quire._constants import (
    CAPTION_PREFIX,
    HTML_PREFIX,
    INSERT_BG_PREFIX,
    INSERT_PREFIX,
)

INSERT_OPEN = (
    "</div><div class='{classes}'><div class='insert-content'>"
    "<div class='insert-content-inner'>"
)
INSERT_CLOSE = "</div></div></div><div class='post-text'>\n"
CAPTION_TEMPLATE = "<br><div class='insert-description'><em>{caption}</em>"


@dc.dataclass(frozen=True, slots=True)
class InsertDirective:
    """Parsed ``!insert`` line."""

    markdown: str
    background: bool = False

    @property
    def classes(self) -> str:
        if self.background:
            return "post-insert with-background"
        return "post-insert"


def parse_insert(line: str) -> InsertDirective | None:
    """Return the insert directive on ``line``, or ``None`` for other lines."""
    if line.startswith(INSERT_BG_PREFIX):
        return InsertDirective(line[len(INSERT_BG_PREFIX) :], background=True)
    if line.startswith(INSERT_PREFIX):
        return InsertDirective(line[len(INSERT_PREFIX) :])
    return None


def strip_paragraph(html: str) -> str:
    """Remove one enclosing ``<p>...</p>`` pair from a rendered fragment."""
    stripped = html.strip()
    if stripped.startswith("<p>") and stripped.endswith("</p>"):
        return stripped[len("<p>") : -len("</p>")]
    return html


def open_insert(directive: InsertDirective, rendered: str) -> str:
    """Return the wrapper opening markup followed by the insert content.

    Parameters
    ----------
    directive : InsertDirective
        Parsed directive; ``background`` adds the ``with-background`` class
        to the outermost wrapper.
    rendered : str
        The directive's markdown after conversion to HTML.
    """
    return INSERT_OPEN.format(classes=directive.classes) + strip_paragraph(rendered)


def close_insert(line: str | None) -> tuple[str, bool]:
    """Close a pending insert, consuming ``line`` when it is a caption.

    Returns
    -------
    tuple[str, bool]
        The closing markup and whether ``line`` was consumed as the caption.
    """
    if line is not None and line.startswith(CAPTION_PREFIX):
        caption = CAPTION_TEMPLATE.format(caption=line[len(CAPTION_PREFIX) :])
        return f"{caption}</div>{INSERT_CLOSE}", True
    return INSERT_CLOSE, False


def raw_html(line: str) -> str | None:
    """Return the passthrough HTML of an ``!html`` line, or ``None``."""
    if line.startswith(HTML_PREFIX):
        return line[len(HTML_PREFIX) :]
    return None


__all__ = [
    "INSERT_CLOSE",
    "InsertDirective",
    "close_insert",
    "open_insert",
    "parse_insert",
    "raw_html",
    "strip_paragraph",
]
