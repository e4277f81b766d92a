"""Wrap punctuation in highlighted code so stylesheets can colour it.

Pygments classifies tokens but leaves operators and brackets inside generic
spans (or none at all). The site theme styles punctuation separately, so the
highlighted markup is post-processed in two passes:

1. :func:`escape_equals` replaces ``=`` in program text with ``&equals;``.
2. :func:`wrap_symbols` wraps each symbol in ``<span class='symbol'>``.

Both passes only look at text between tags; attribute syntax emitted by the
highlighter is left untouched.

Example
-------
>>> from quire.generator.symbols import highlight_symbols
>>> print(highlight_symbols('<span class="n">f</span>(x = 1)'))
<span class="n">f</span><span class='symbol'>(</span>x <span class='symbol'>&equals;</span> 1<span class='symbol'>)</span>
"""

from __future__ import annotations

import re

SYMBOL_OPEN_TAG = "<span class='symbol'>"
SYMBOL_CLOSE_TAG = "</span>"
EQUALS_ENTITY = "&equals;"
TAG_PATTERN = re.compile(r"(<[^>]*>)")
SYMBOL_PATTERN = re.compile(r"&gt;|&#x2f;|&equals;|[()\[\]:+\-*{}/]")


def escape_equals(markup: str) -> str:
    """Replace every ``=`` outside an HTML tag with its named entity."""
    inside_tag = False
    result: list[str] = []
    for character in markup:
        if character == "<":
            inside_tag = True
        elif character == ">":
            inside_tag = False
        elif character == "=" and not inside_tag:
            result.append(EQUALS_ENTITY)
            continue
        result.append(character)
    return "".join(result)


def _wrap(match: re.Match[str]) -> str:
    return f"{SYMBOL_OPEN_TAG}{match.group(0)}{SYMBOL_CLOSE_TAG}"


def wrap_symbols(markup: str) -> str:
    """Wrap punctuation and escaped operator entities in symbol spans.

    Parameters
    ----------
    markup : str
        Highlighted HTML whose text may contain ``( ) [ ] : + - * { } /`` or
        the entities ``&gt;``, ``&#x2f;`` and ``&equals;``.

    Returns
    -------
    str
        Markup where each matched symbol sits in its own
        ``<span class='symbol'>`` element. Entities are wrapped as a whole.
        Text already inside a symbol span is left alone, so running the pass
        twice yields the same output as running it once.
    """
    parts: list[str] = []
    in_symbol = False
    for index, segment in enumerate(TAG_PATTERN.split(markup)):
        if index % 2:
            if segment == SYMBOL_OPEN_TAG:
                in_symbol = True
            elif segment == SYMBOL_CLOSE_TAG:
                in_symbol = False
            parts.append(segment)
        elif in_symbol:
            parts.append(segment)
        else:
            parts.append(SYMBOL_PATTERN.sub(_wrap, segment))
    return "".join(parts)


def highlight_symbols(markup: str) -> str:
    """Run both symbol passes over highlighter output."""
    return wrap_symbols(escape_equals(markup))


__all__ = [
    "SYMBOL_OPEN_TAG",
    "SYMBOL_PATTERN",
    "escape_equals",
    "highlight_symbols",
    "wrap_symbols",
]
