"""Unit tests for record and aggregate validation."""

from __future__ import annotations

import pytest

from materials_pipeline.aggregate import MaterialsAggregate
from materials_pipeline.models import ContentRecord, RouteTarget
from materials_pipeline.validation import (
    collect_bucket_counts,
    total_records,
    validate_aggregate,
    validate_records,
)


def test_validate_records_accepts_complete_records() -> None:
    validate_records([ContentRecord("Verbes", "Présent", "Je parle.")])


def test_validate_records_rejects_empty_content() -> None:
    with pytest.raises(ValueError, match="empty content"):
        validate_records([ContentRecord("Verbes", "Présent", "")])


def test_validate_aggregate_rejects_pseudo_level_key() -> None:
    data = MaterialsAggregate().finalize()
    data["B"] = {"vocabulary": [], "grammar": [], "reading": [], "others": []}

    with pytest.raises(ValueError, match="do not match"):
        validate_aggregate(data)


def test_validate_aggregate_rejects_missing_category() -> None:
    data = MaterialsAggregate().finalize()
    del data["A2"]["others"]

    with pytest.raises(ValueError, match="A2: categories"):
        validate_aggregate(data)


def test_bucket_counts_and_total() -> None:
    aggregate = MaterialsAggregate()
    aggregate.append(
        (RouteTarget("B1", "grammar"), RouteTarget("B2", "grammar")),
        [ContentRecord("a", "a", "texte un"), ContentRecord("b", "b", "texte deux")],
    )
    data = aggregate.finalize()

    validate_aggregate(data)
    counts = collect_bucket_counts(data)
    assert counts[("B1", "grammar")] == 2
    assert counts[("B2", "grammar")] == 2
    assert counts[("A1", "vocabulary")] == 0
    assert total_records(data) == 4
