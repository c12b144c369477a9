"""Stage 2: Canonicalize line endings and blank-line runs in extracted text."""

from __future__ import annotations

import re

BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Normalize a raw text blob into canonical multi-line form.

    ``\\r\\n`` and lone ``\\r`` become ``\\n``, any run of three or more newlines
    collapses to a single blank line, and surrounding whitespace is trimmed.
    Applying the function to its own output returns it unchanged.

    Args:
        text: Raw extracted text, possibly empty.

    Returns:
        Normalized text; empty string for empty or whitespace-only input.
    """

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()
