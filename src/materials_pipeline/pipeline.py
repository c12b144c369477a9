"""Top-level orchestration for the course-notes extraction pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from materials_pipeline.aggregate import MaterialsAggregate, MaterialsData
from materials_pipeline.models import SHARED_LEVELS, DocumentOutcome, RouteTarget
from materials_pipeline.routing.router import resolve_targets
from materials_pipeline.stages.stage1_extract import DocumentReadError, extract_document
from materials_pipeline.stages.stage4_outline import extract_records
from materials_pipeline.validation import validate_aggregate, validate_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        data: Finalized level/category aggregate ready for JSON output.
        outcomes: Per-document diagnostics in processing order.
    """

    data: MaterialsData
    outcomes: tuple[DocumentOutcome, ...]


def list_source_pdfs(notes_dir: Path) -> list[Path]:
    """Return PDF files directly under ``notes_dir`` sorted by name.

    Raises:
        FileNotFoundError: If ``notes_dir`` is not a directory.
    """

    if not notes_dir.is_dir():
        raise FileNotFoundError(f"Notes directory not found: {notes_dir}")
    return sorted(
        (path for path in notes_dir.iterdir() if path.is_file() and path.suffix == ".pdf"),
        key=lambda path: path.name,
    )


def process_document(
    pdf_path: Path,
    targets: tuple[RouteTarget, ...],
    aggregate: MaterialsAggregate,
) -> DocumentOutcome:
    """Extract one mapped document and append its records to ``aggregate``.

    Read failures are contained here: the document contributes no records and
    the failure is reported in the returned outcome.

    Args:
        pdf_path: Source PDF path.
        targets: Buckets resolved for the document.
        aggregate: Run-wide aggregate to append into.

    Returns:
        Outcome describing what the document contributed.
    """

    try:
        document = extract_document(pdf_path)
    except DocumentReadError as exc:
        logger.error("Failed to extract %s: %s", pdf_path.name, exc.reason)
        return DocumentOutcome(
            name=pdf_path.name, status="failed", targets=targets, error=exc.reason
        )

    records = extract_records(document.text)
    validate_records(records)
    aggregate.append(targets, records)

    if any(target.level in SHARED_LEVELS for target in targets):
        logger.warning(
            "%s routed to shared level without fan-out; %d records will be dropped",
            pdf_path.name,
            len(records),
        )
    logger.info("Extracted %d records from %s", len(records), pdf_path.name)
    return DocumentOutcome(
        name=pdf_path.name,
        status="processed",
        page_count=document.page_count,
        record_count=len(records),
        targets=targets,
    )


def run_pipeline(notes_dir: Path, mapping: Mapping[str, RouteTarget]) -> PipelineResult:
    """Execute extraction, routing and aggregation for every PDF in a directory.

    Documents are processed one at a time in file-name order. Unmapped files
    are skipped with a warning; unreadable files contribute nothing. Neither
    stops the run.

    Args:
        notes_dir: Directory holding the source PDFs.
        mapping: File name to bucket table.

    Returns:
        ``PipelineResult`` with the finalized aggregate and per-document outcomes.

    Raises:
        FileNotFoundError: If ``notes_dir`` does not exist.
    """

    pdf_paths = list_source_pdfs(notes_dir)
    logger.info("Found %d PDF files in %s", len(pdf_paths), notes_dir)

    aggregate = MaterialsAggregate()
    outcomes: list[DocumentOutcome] = []
    for pdf_path in pdf_paths:
        targets = resolve_targets(pdf_path.name, mapping)
        if not targets:
            logger.warning("Skipping unmapped file: %s", pdf_path.name)
            outcomes.append(DocumentOutcome(name=pdf_path.name, status="skipped"))
            continue

        logger.info(
            "Processing %s -> %s", pdf_path.name, ", ".join(str(target) for target in targets)
        )
        outcomes.append(process_document(pdf_path, targets, aggregate))

    data = aggregate.finalize()
    validate_aggregate(data)
    return PipelineResult(data=data, outcomes=tuple(outcomes))
