"""Stage 1: Extract plain text from a course-notes PDF.

The module renders each page of a PDF to plain text with ``pdfplumber`` and
returns one ``ExtractedDocument`` holding the page texts joined in page order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pdfplumber

from materials_pipeline.models import ExtractedDocument

logger = logging.getLogger(__name__)


class DocumentReadError(Exception):
    """Raised when a source PDF cannot be opened or its text extracted."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


def iter_page_texts(pdf) -> Iterator[str]:
    """Yield extracted text for each page of an open ``pdfplumber`` document.

    Pages without a text layer yield an empty string so page boundaries are
    still represented in the joined output.

    Args:
        pdf: Open ``pdfplumber.PDF`` handle.

    Yields:
        Per-page text in page order.
    """

    for page in pdf.pages:
        yield page.extract_text() or ""


def extract_document(pdf_path: Path) -> ExtractedDocument:
    """Run Stage 1 text extraction for one PDF.

    Args:
        pdf_path: Path to the source PDF.

    Returns:
        ``ExtractedDocument`` with the file name, joined page text, and page
        count.

    Raises:
        DocumentReadError: If the file cannot be opened or any page fails to
            render to text.
    """

    try:
        with pdfplumber.open(pdf_path) as pdf:
            page_count = len(pdf.pages)
            text = "\n".join(iter_page_texts(pdf))
    except Exception as exc:
        raise DocumentReadError(pdf_path.name, str(exc) or type(exc).__name__) from exc

    logger.info("Extracted %s: %d pages", pdf_path.name, page_count)
    return ExtractedDocument(name=pdf_path.name, text=text, page_count=page_count)
