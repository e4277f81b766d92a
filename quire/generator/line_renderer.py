r"""Single-pass renderer for line-oriented markdown with quire directives.

The renderer walks a document one line at a time. Each line is handed to
:meth:`LineRenderer.step` together with the current :data:`RenderState`; the
step returns the next state, the HTML fragments to append, and the section
recorded for a level-two heading, if any. Nothing is revisited once emitted.

States
------
``Normal``
    Lines are matched against the fence marker, the ``!insert`` and ``!html``
    directives, and finally rendered as markdown.
``InCodeBlock``
    Lines are buffered verbatim until the closing fence.
``AwaitingCaption``
    An insert wrapper is open. The next line either supplies the caption or
    closes the wrapper and is then rendered normally.

Example
-------
>>> from quire.generator.line_renderer import LineRenderer
>>> from quire.generator.renderer import HtmlContentRenderer
>>> rendered = LineRenderer(HtmlContentRenderer()).render("## Intro\nHello")
>>> [section.slug for section in rendered.sections]
['intro']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from quire._constants import FENCE_MARKER
from quire.generator.inserts import close_insert, open_insert, parse_insert, raw_html
from quire.generator.models import RenderedDocument
from quire.generator.sections import Section, index_heading

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from quire.generator.renderer import HtmlContentRenderer

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class Normal:
    """Ordinary content; directives and markdown are recognised."""


@dc.dataclass(frozen=True, slots=True)
class InCodeBlock:
    """Inside a fenced block, buffering raw lines."""

    language: str | None = None
    buffer: str = ""


@dc.dataclass(frozen=True, slots=True)
class AwaitingCaption:
    """An insert wrapper is open and may receive a caption next."""


RenderState = Normal | InCodeBlock | AwaitingCaption


@dc.dataclass(frozen=True, slots=True)
class Step:
    """Result of feeding one line to the renderer."""

    state: RenderState
    fragments: tuple[str, ...] = ()
    section: Section | None = None


class LineRenderer:
    """Render one document's markdown body into HTML and a section list."""

    def __init__(self, content_renderer: HtmlContentRenderer) -> None:
        """Bind the renderer to its markdown and code collaborators.

        Parameters
        ----------
        content_renderer : HtmlContentRenderer
            Supplies the markdown converter and the code block renderer. A
            dedicated python-markdown instance is created for this renderer,
            so separate ``LineRenderer`` objects never share parser state.
        """
        self.content = content_renderer
        self._md = content_renderer.converter()

    def convert(self, text: str) -> str:
        """Render a single markdown line with the generic converter."""
        return self._md.reset().convert(text)

    def step(self, state: RenderState, line: str) -> Step:
        """Advance the state machine by one line.

        Parameters
        ----------
        state : RenderState
            State left by the previous line.
        line : str
            The current raw line, without its newline.

        Returns
        -------
        Step
            Next state plus the fragments and section produced by ``line``.
        """
        match state:
            case InCodeBlock(language=language, buffer=buffer):
                if line.startswith(FENCE_MARKER):
                    html = self.content.code_block(buffer, language)
                    return Step(Normal(), (html,))
                return Step(InCodeBlock(language, f"{buffer}{line}\n"))
            case AwaitingCaption():
                closing, consumed = close_insert(line)
                if consumed:
                    return Step(Normal(), (closing,))
                following = self._step_normal(line)
                return dc.replace(following, fragments=(closing, *following.fragments))
            case _:
                return self._step_normal(line)

    def _step_normal(self, line: str) -> Step:
        if line.startswith(FENCE_MARKER):
            return Step(InCodeBlock(self.content.fence_language(line)))

        directive = parse_insert(line)
        if directive is not None:
            html = open_insert(directive, self.convert(directive.markdown))
            return Step(AwaitingCaption(), (html,))

        passthrough = raw_html(line)
        if passthrough is not None:
            return Step(Normal(), (passthrough,))

        html = self.convert(line)
        indexed = index_heading(html)
        if indexed is None:
            return Step(Normal(), (html,))
        heading, section = indexed
        return Step(Normal(), (heading,), section)

    def finish(self, state: RenderState) -> tuple[str, ...]:
        """Return fragments that close whatever the last line left open."""
        match state:
            case InCodeBlock(language=language, buffer=buffer):
                logger.warning("Unterminated code fence; closing it at end of input.")
                return (self.content.code_block(buffer, language),)
            case AwaitingCaption():
                closing, _consumed = close_insert(None)
                return (closing,)
            case _:
                return ()

    def render_lines(self, lines: cabc.Iterable[str]) -> RenderedDocument:
        """Render an iterable of raw lines into a :class:`RenderedDocument`."""
        state: RenderState = Normal()
        fragments: list[str] = []
        sections: list[Section] = []
        for line in lines:
            result = self.step(state, line)
            fragments.extend(result.fragments)
            if result.section is not None:
                sections.append(result.section)
            state = result.state
        fragments.extend(self.finish(state))
        return RenderedDocument(html="".join(fragments), sections=tuple(sections))

    def render(self, markdown_text: str) -> RenderedDocument:
        """Render a markdown document body."""
        return self.render_lines(markdown_text.splitlines())


def render_document(
    markdown_text: str, content_renderer: HtmlContentRenderer
) -> RenderedDocument:
    """Render ``markdown_text`` with a fresh :class:`LineRenderer`."""
    return LineRenderer(content_renderer).render(markdown_text)


__all__ = [
    "AwaitingCaption",
    "InCodeBlock",
    "LineRenderer",
    "Normal",
    "RenderState",
    "Step",
    "render_document",
]
