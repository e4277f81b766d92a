"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from quire.generator.sections import Section  # noqa: TC001 - dataclass field type


@dc.dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Body HTML of one document and the sections discovered while rendering.

    Attributes
    ----------
    html : str
        Rendered body fragments concatenated in line order.
    sections : tuple[Section, ...]
        Level-two headings in document order, duplicates included.
    """

    html: str
    sections: tuple[Section, ...]


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of writing a batch of documents.

    Attributes
    ----------
    written : list[Path]
        Files written successfully, in generation order.
    failures : dict[str, str]
        Document identifiers mapped to the error that aborted their render.
    """

    written: list[Path] = dc.field(default_factory=list)
    failures: dict[str, str] = dc.field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every document rendered."""
        return not self.failures

    def extend(self, other: BuildReport) -> None:
        """Merge another report into this one."""
        self.written.extend(other.written)
        self.failures.update(other.failures)


__all__ = ["BuildReport", "RenderedDocument"]
