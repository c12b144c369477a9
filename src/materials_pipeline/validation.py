"""Validation helpers for extracted records and the final materials aggregate."""

from __future__ import annotations

from collections import Counter
from typing import Mapping, Sequence

from materials_pipeline.models import CATEGORIES, LEVELS, ContentRecord


def _raise_if_errors(label: str, errors: Sequence[str]) -> None:
    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_records(records: Sequence[ContentRecord]) -> None:
    """Validate outline records for the non-empty field contract.

    Args:
        records: Records produced for one document.

    Raises:
        ValueError: If any record has an empty ``section``, ``subsection`` or
            ``content``.
    """

    errors: list[str] = []
    for idx, record in enumerate(records, start=1):
        if not record.content:
            errors.append(f"Record {idx}: empty content under '{record.section}'")
        if not record.section:
            errors.append(f"Record {idx}: empty section")
        if not record.subsection:
            errors.append(f"Record {idx}: empty subsection")

    _raise_if_errors("Record", errors)


def validate_aggregate(data: Mapping[str, Mapping[str, Sequence[Mapping[str, str]]]]) -> None:
    """Validate the finalized aggregate shape before it is written.

    Args:
        data: Output of ``MaterialsAggregate.finalize``.

    Raises:
        ValueError: If level keys differ from the fixed level set, any level
            lacks exactly the four categories, or a record misses a field.
    """

    errors: list[str] = []
    if set(data) != set(LEVELS):
        errors.append(f"levels {sorted(data)} do not match {list(LEVELS)}")

    for level, bucket in data.items():
        if set(bucket) != set(CATEGORIES):
            errors.append(f"{level}: categories {sorted(bucket)} do not match {list(CATEGORIES)}")
            continue
        for category, records in bucket.items():
            for idx, record in enumerate(records, start=1):
                missing = [key for key in ("section", "subsection", "content") if not record.get(key)]
                if missing:
                    errors.append(f"{level}/{category} record {idx}: empty {', '.join(missing)}")

    _raise_if_errors("Aggregate", errors)


def collect_bucket_counts(
    data: Mapping[str, Mapping[str, Sequence[object]]],
) -> dict[tuple[str, str], int]:
    """Count records per ``(level, category)`` bucket.

    Args:
        data: Finalized aggregate.

    Returns:
        Dictionary of bucket key to record count, including empty buckets.
    """

    counter: Counter[tuple[str, str]] = Counter()
    for level, bucket in data.items():
        for category, records in bucket.items():
            counter[(level, category)] += len(records)
    return dict(counter)


def total_records(data: Mapping[str, Mapping[str, Sequence[object]]]) -> int:
    """Return the number of records across all buckets."""

    return sum(collect_bucket_counts(data).values())
