"""Unit tests for the level/category aggregate."""

from __future__ import annotations

import json

import pytest

from materials_pipeline.aggregate import MaterialsAggregate
from materials_pipeline.models import CATEGORIES, LEVELS, ContentRecord, RouteTarget


def test_finalize_initializes_every_bucket_and_drops_pseudo_level() -> None:
    data = MaterialsAggregate().finalize()

    assert list(data) == list(LEVELS)
    assert "B" not in data
    for bucket in data.values():
        assert list(bucket) == list(CATEGORIES)
        assert all(records == [] for records in bucket.values())


def test_append_preserves_document_order_within_bucket() -> None:
    aggregate = MaterialsAggregate()
    first = [ContentRecord("Un", "Un", "premier"), ContentRecord("Un", "Deux", "second")]
    second = [ContentRecord("Trois", "Trois", "troisième")]

    aggregate.append((RouteTarget("A1", "reading"),), first)
    aggregate.append((RouteTarget("A1", "reading"),), second)

    assert [item["content"] for item in aggregate.finalize()["A1"]["reading"]] == [
        "premier",
        "second",
        "troisième",
    ]


def test_fan_out_produces_identical_independent_copies() -> None:
    aggregate = MaterialsAggregate()
    records = [ContentRecord("Grammaire", "Subjonctif", "Il faut que tu viennes.")]

    aggregate.append((RouteTarget("B1", "grammar"), RouteTarget("B2", "grammar")), records)
    data = aggregate.finalize()

    assert json.dumps(data["B1"]["grammar"]) == json.dumps(data["B2"]["grammar"])
    assert data["B1"]["grammar"] is not data["B2"]["grammar"]
    assert data["B1"]["grammar"][0] is not data["B2"]["grammar"][0]


def test_pseudo_level_records_are_discarded_on_finalize() -> None:
    aggregate = MaterialsAggregate()
    aggregate.append((RouteTarget("B", "others"),), [ContentRecord("Culture", "Culture", "Paris")])

    data = aggregate.finalize()

    assert "B" not in data
    assert all(not records for bucket in data.values() for records in bucket.values())


def test_append_unknown_level_raises() -> None:
    with pytest.raises(KeyError):
        MaterialsAggregate().append((RouteTarget("C1", "grammar"),), [])
