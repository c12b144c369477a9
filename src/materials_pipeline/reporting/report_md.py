"""Markdown report generation for extraction run summaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from materials_pipeline.models import CATEGORIES, LEVELS
from materials_pipeline.pipeline import PipelineResult
from materials_pipeline.validation import collect_bucket_counts, total_records


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(result: PipelineResult) -> str:
    """Build the extraction markdown report for one pipeline run.

    Args:
        result: Pipeline output with aggregate data and document outcomes.

    Returns:
        Full markdown content with summary tables.
    """

    counts = collect_bucket_counts(result.data)
    bucket_rows = [
        (level, *(str(counts.get((level, category), 0)) for category in CATEGORIES))
        for level in LEVELS
    ]

    document_rows = [
        (
            outcome.name,
            outcome.status,
            ", ".join(str(target) for target in outcome.targets),
            str(outcome.page_count),
            str(outcome.record_count),
            outcome.error,
        )
        for outcome in result.outcomes
    ]

    sections = [
        "# Extraction Report",
        "",
        f"Total records: {total_records(result.data)}",
        "",
        "## Records per level and category",
        _markdown_table(["level", *CATEGORIES], bucket_rows),
        "",
        "## Source documents",
        _markdown_table(
            ["file", "status", "targets", "pages", "records", "error"],
            document_rows,
        ),
    ]

    return "\n".join(sections) + "\n"
