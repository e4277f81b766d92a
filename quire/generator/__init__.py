"""The quire rendering engine: markdown lines in, assembled HTML pages out."""

from .assembler import PAGE_PROFILE, POST_PROFILE, DocumentAssembler, FragmentStore
from .line_renderer import LineRenderer, render_document
from .models import BuildReport, RenderedDocument
from .renderer import HtmlContentRenderer
from .sections import Section

__all__ = [
    "PAGE_PROFILE",
    "POST_PROFILE",
    "BuildReport",
    "DocumentAssembler",
    "FragmentStore",
    "HtmlContentRenderer",
    "LineRenderer",
    "RenderedDocument",
    "Section",
    "render_document",
]
