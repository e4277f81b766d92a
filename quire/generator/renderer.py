"""Utilities for rendering markdown lines and syntax-highlighted code blocks."""

from __future__ import annotations

import logging
import re
import typing as typ

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from quire._constants import DEFAULT_HIGHLIGHT_LANGUAGES
from quire.generator.symbols import highlight_symbols

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"^```\s*([A-Za-z0-9_+#.-]+)?")
MARKDOWN_EXTENSIONS = ("tables", "sane_lists")


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(
        self,
        pygments_style: str = "default",
        highlight_languages: cabc.Iterable[str] = DEFAULT_HIGHLIGHT_LANGUAGES,
    ) -> None:
        """Initialize a renderer with a pygments style and highlighted languages.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for the generated stylesheet.
            Defaults to ``"default"``.
        highlight_languages : Iterable[str], optional
            Fence labels (case-insensitive) whose code is passed through
            Pygments. Any other label renders as plain preformatted text.
        """
        self.pygments_style = pygments_style
        self.highlight_languages = frozenset(
            language.lower() for language in highlight_languages
        )
        self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code tokens."""
        return self._formatter.get_style_defs("pre")

    def converter(self) -> Markdown:
        """Return a fresh python-markdown instance owned by a single render."""
        extensions: list[Extension | str] = list(MARKDOWN_EXTENSIONS)
        return Markdown(extensions=extensions)

    def markdown(self, text: str) -> str:
        """Render a standalone markdown fragment into HTML."""
        return self.converter().convert(text)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render buffered fenced code into a ``<pre>`` block.

        Parameters
        ----------
        code : str
            Raw code collected between the fence markers.
        language : str, optional
            Label captured from the opening fence.

        Returns
        -------
        str
            ``<pre>`` markup. Highlighted languages carry Pygments token spans
            with punctuation wrapped by :func:`highlight_symbols`; everything
            else is emitted verbatim.
        """
        lexer_name = (language or "").lower()
        if lexer_name not in self.highlight_languages:
            return _preformatted(code)
        try:
            lexer = get_lexer_by_name(lexer_name)
        except ClassNotFound:
            logger.warning(
                "No highlighter for language %r; rendering plain text.", language
            )
            return _preformatted(code)
        markup = highlight(code, lexer, self._formatter)
        return _preformatted(highlight_symbols(markup))

    @staticmethod
    def fence_language(line: str) -> str | None:
        """Return the language label following a fence marker, if any."""
        match = FENCE_PATTERN.match(line)
        if match is None:
            return None
        return match.group(1)


def _preformatted(body: str) -> str:
    return f"<pre>{body}</pre>"


__all__ = ["DEFAULT_HIGHLIGHT_LANGUAGES", "FENCE_PATTERN", "HtmlContentRenderer"]
