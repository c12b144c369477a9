"""Data models used across extraction pipeline stages.

This module defines explicit immutable contracts between stages so each stage
has a narrow, testable interface: extracted document text feeds the outline
stages, which produce ``ContentRecord`` values that the router and aggregator
place into level/category buckets.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal, Union

LEVELS = ("A1", "A2", "B1", "B2")
CATEGORIES = ("vocabulary", "grammar", "reading", "others")

# Pseudo-level key -> real levels that share its content.
SHARED_LEVELS = {"B": ("B1", "B2")}

DocumentStatus = Literal["processed", "skipped", "failed"]


@dataclass(frozen=True)
class ExtractedDocument:
    """Plain-text rendering of one source PDF.

    ``page_count`` is advisory and only surfaces in logs and run reports.
    """

    name: str
    text: str
    page_count: int


@dataclass(frozen=True)
class ContentRecord:
    """One outline entry: a heading pair and the body text under it."""

    section: str
    subsection: str
    content: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready mapping consumed by the display layer."""

        return asdict(self)


@dataclass(frozen=True)
class Section:
    """Top-level heading line with its numeric prefix stripped."""

    text: str


@dataclass(frozen=True)
class Subsection:
    """Second-level ``<int>.<int>`` heading line with its prefix stripped."""

    text: str


@dataclass(frozen=True)
class Body:
    """Body content line kept after noise filtering."""

    text: str


TaggedLine = Union[Section, Subsection, Body]


@dataclass(frozen=True)
class RouteTarget:
    """Destination bucket for a document's records."""

    level: str
    category: str

    def __str__(self) -> str:
        return f"{self.level}/{self.category}"


@dataclass(frozen=True)
class DocumentOutcome:
    """Per-document diagnostics captured for CLI output and the run report.

    Attributes:
        name: Source file name.
        status: ``processed``, ``skipped`` (unmapped) or ``failed`` (read error).
        page_count: Pages reported by the text extractor, ``0`` when unread.
        record_count: Records extracted from the document.
        targets: Buckets the records were appended to.
        error: Failure message for ``failed`` documents.
    """

    name: str
    status: DocumentStatus
    page_count: int = 0
    record_count: int = 0
    targets: tuple[RouteTarget, ...] = ()
    error: str = ""
