"""Stage 4: Build outline records from tagged lines.

The builder walks tagged lines in order, tracking the current section and
subsection headings and buffering body lines until the next heading. Each
buffer flush emits one ``ContentRecord``. Documents with text but no headings
fall back to a single record holding the whole text.
"""

from __future__ import annotations

from typing import Iterable

from materials_pipeline.models import Body, ContentRecord, Section, Subsection, TaggedLine
from materials_pipeline.stages.stage2_normalize import normalize_text
from materials_pipeline.stages.stage3_classify import classify_lines, iter_lines

BODY_SEPARATOR = "\n\n"
FALLBACK_SECTION = "内容"
FALLBACK_SUBSECTION = "全部内容"


class OutlineBuilder:
    """Sequential state machine turning tagged lines into records.

    Body lines seen before the first section heading are dropped: they are
    never flushed while ``current_section`` is empty and the buffer is cleared
    on every heading.
    """

    def __init__(self) -> None:
        self.current_section = ""
        self.current_subsection = ""
        self.pending_body: list[str] = []
        self.records: list[ContentRecord] = []

    def _flush(self) -> None:
        if self.current_section and self.pending_body:
            self.records.append(
                ContentRecord(
                    section=self.current_section,
                    subsection=self.current_subsection or self.current_section,
                    content=BODY_SEPARATOR.join(self.pending_body),
                )
            )
        self.pending_body = []

    def feed(self, tagged: TaggedLine) -> None:
        """Apply one tagged line to the builder state."""

        if isinstance(tagged, Subsection):
            self._flush()
            self.current_subsection = tagged.text
        elif isinstance(tagged, Section):
            self._flush()
            self.current_section = tagged.text
            self.current_subsection = ""
        elif isinstance(tagged, Body):
            self.pending_body.append(tagged.text)
        else:
            raise TypeError(f"Unsupported tagged line: {tagged!r}")

    def finish(self) -> list[ContentRecord]:
        """Flush trailing body text and return all emitted records."""

        self._flush()
        return list(self.records)


def build_outline(tagged_lines: Iterable[TaggedLine]) -> list[ContentRecord]:
    """Build records for one document from its tagged lines.

    Args:
        tagged_lines: Output of :func:`classify_lines` in source order.

    Returns:
        Records in emission order; every record has non-empty ``content``.
    """

    builder = OutlineBuilder()
    for tagged in tagged_lines:
        builder.feed(tagged)
    return builder.finish()


def fallback_records(normalized_text: str) -> list[ContentRecord]:
    """Return the single whole-document record for heading-less text.

    Args:
        normalized_text: Output of :func:`normalize_text`.

    Returns:
        One synthetic record, or an empty list for empty text.
    """

    if not normalized_text:
        return []
    return [
        ContentRecord(
            section=FALLBACK_SECTION,
            subsection=FALLBACK_SUBSECTION,
            content=normalized_text,
        )
    ]


def extract_records(raw_text: str) -> list[ContentRecord]:
    """Run normalization, classification and outline building for one document.

    Args:
        raw_text: Text as produced by Stage 1.

    Returns:
        Outline records, the fallback record when no heading produced a
        record, or an empty list for empty documents.
    """

    normalized = normalize_text(raw_text)
    records = build_outline(classify_lines(iter_lines(normalized)))
    if not records:
        return fallback_records(normalized)
    return records
