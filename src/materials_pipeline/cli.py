"""CLI entrypoint for the course-notes extraction pipeline."""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path
from typing import Sequence

from materials_pipeline.io.json_io import write_materials_json
from materials_pipeline.pipeline import PipelineResult, run_pipeline
from materials_pipeline.reporting.report_md import build_report_md
from materials_pipeline.routing.table import DEFAULT_FILE_MAPPING, FileMappingRepository
from materials_pipeline.validation import total_records

logger = logging.getLogger(__name__)


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the extraction command.
    """

    parser = argparse.ArgumentParser(
        description="Extract course-notes PDFs into the materials JSON outline."
    )
    parser.add_argument(
        "--notes-dir",
        type=Path,
        default=Path("notes"),
        help="Directory containing source PDFs (default: notes).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("client") / "public" / "materials-data.json",
        help="Destination JSON output path.",
    )
    parser.add_argument(
        "--mapping",
        type=Path,
        default=None,
        help="TSV file mapping file_name to level and category (default: built-in table).",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional markdown report output path.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _print_run_summary(result: PipelineResult) -> None:
    """Print per-status document counts and failed documents.

    Args:
        result: Pipeline output.
    """

    status_counts = Counter(outcome.status for outcome in result.outcomes)
    status_rows = [
        [status, str(status_counts.get(status, 0))]
        for status in ("processed", "skipped", "failed")
    ]
    print("\nSource documents:")
    print(_format_table(["status", "count"], status_rows))

    failed = [outcome for outcome in result.outcomes if outcome.status == "failed"]
    if failed:
        print(f"\nWARNING: {len(failed)} documents could not be read:")
        for outcome in failed:
            print(f"  {outcome.name}: {outcome.error}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Args:
        argv: Argument list; ``None`` reads ``sys.argv``.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.notes_dir.is_dir():
        raise SystemExit(f"Notes directory not found: {args.notes_dir}")

    if args.mapping is not None:
        try:
            mapping = FileMappingRepository(args.mapping).load()
        except (FileNotFoundError, ValueError) as exc:
            raise SystemExit(str(exc)) from exc
    else:
        mapping = DEFAULT_FILE_MAPPING

    result = run_pipeline(notes_dir=args.notes_dir, mapping=mapping)

    try:
        write_materials_json(result.data, output_path=args.output)
    except OSError as exc:
        raise SystemExit(f"Failed to write materials JSON to {args.output}: {exc}") from exc

    print(f"Wrote {total_records(result.data)} records to {args.output}")
    if args.report is not None:
        try:
            args.report.parent.mkdir(parents=True, exist_ok=True)
            args.report.write_text(build_report_md(result), encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to write report to %s: %s", args.report, exc)
        else:
            print(f"Wrote report to {args.report}")
    _print_run_summary(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
