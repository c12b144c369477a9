"""Append-only level/category aggregate of extracted records."""

from __future__ import annotations

from typing import Sequence

from materials_pipeline.models import CATEGORIES, LEVELS, SHARED_LEVELS, ContentRecord, RouteTarget

MaterialsData = dict[str, dict[str, list[dict[str, str]]]]


class MaterialsAggregate:
    """Collects records into buckets in document processing order.

    Every real and pseudo-level starts with all four categories initialized to
    empty lists. Records are only ever appended; :meth:`finalize` removes the
    pseudo-levels so they never reach the output.
    """

    def __init__(self) -> None:
        self.buckets: dict[str, dict[str, list[ContentRecord]]] = {
            level: {category: [] for category in CATEGORIES}
            for level in (*LEVELS, *SHARED_LEVELS)
        }

    def append(self, targets: Sequence[RouteTarget], records: Sequence[ContentRecord]) -> None:
        """Append one document's records to each target bucket.

        Args:
            targets: Buckets resolved by the router.
            records: Records in document order.

        Raises:
            KeyError: If a target names a level or category outside the table.
        """

        for target in targets:
            self.buckets[target.level][target.category].extend(records)

    def finalize(self) -> MaterialsData:
        """Return JSON-ready data keyed by real levels only.

        Each bucket is serialized independently, so records shared by several
        buckets become separate, equal objects.
        """

        return {
            level: {
                category: [record.to_dict() for record in self.buckets[level][category]]
                for category in CATEGORIES
            }
            for level in LEVELS
        }
