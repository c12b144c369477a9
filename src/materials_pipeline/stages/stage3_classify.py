"""Stage 3: Classify normalized text lines as headings or body content.

Headings are recognized purely by numeric prefix: ``1.1 Formal`` opens a
subsection and ``1. Greetings`` opens a section. The rules are an ordered
heuristic, so a numbered list item inside body text is also read as a section.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from materials_pipeline.models import Body, Section, Subsection, TaggedLine

SUBSECTION_RE = re.compile(r"^[0-9]+\.[0-9]+[.、]?\s*[^0-9]+\s*[：:]?")
SECTION_RE = re.compile(r"^[0-9]+[.、]?\s*[^0-9]+\s*[：:]?")
SUBSECTION_PREFIX_RE = re.compile(r"^[0-9]+\.[0-9]+[.、]?\s*")
SECTION_PREFIX_RE = re.compile(r"^[0-9]+[.、]?\s*")
TRAILING_COLON_RE = re.compile(r"[：:]$")

# Lines this short are page numbers or running-header fragments.
MAX_NOISE_LENGTH = 3


def _heading_text(line: str, prefix_re: re.Pattern[str]) -> str:
    """Strip the numeric prefix and one trailing colon from a heading line.

    Args:
        line: Trimmed heading line.
        prefix_re: Prefix pattern for the heading level.

    Returns:
        Heading text with surrounding whitespace removed.
    """

    text = prefix_re.sub("", line, count=1)
    return TRAILING_COLON_RE.sub("", text).strip()


def iter_lines(text: str) -> Iterator[str]:
    """Yield trimmed, non-empty lines from normalized text."""

    for line in text.split("\n"):
        line = line.strip()
        if line:
            yield line


def classify_line(line: str) -> TaggedLine | None:
    """Classify one trimmed line.

    The two-level pattern is checked first because ``1.1 ...`` also satisfies
    the looser single-level pattern.

    Args:
        line: Non-empty trimmed line.

    Returns:
        ``Subsection``, ``Section`` or ``Body``; ``None`` for noise lines of
        three characters or fewer that are not heading-shaped.
    """

    if SUBSECTION_RE.match(line):
        return Subsection(_heading_text(line, SUBSECTION_PREFIX_RE))
    if SECTION_RE.match(line):
        return Section(_heading_text(line, SECTION_PREFIX_RE))
    if len(line) <= MAX_NOISE_LENGTH:
        return None
    return Body(line)


def classify_lines(lines: Iterable[str]) -> Iterator[TaggedLine]:
    """Lazily tag trimmed lines, dropping noise lines.

    Args:
        lines: Trimmed non-empty lines, typically from :func:`iter_lines`.

    Yields:
        Tagged lines in source order.
    """

    for line in lines:
        tagged = classify_line(line)
        if tagged is not None:
            yield tagged
