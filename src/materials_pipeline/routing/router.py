"""Resolve source documents to the buckets their records belong in."""

from __future__ import annotations

from typing import Mapping

from materials_pipeline.models import SHARED_LEVELS, RouteTarget

FAN_OUT_CATEGORY = "grammar"


def resolve_targets(name: str, mapping: Mapping[str, RouteTarget]) -> tuple[RouteTarget, ...]:
    """Return the bucket targets for a document file name.

    A document mapped to a shared pseudo-level with the ``grammar`` category is
    routed to the ``grammar`` bucket of every level sharing it. Other
    pseudo-level mappings keep their own target, which is dropped when the
    aggregate is finalized.

    Args:
        name: Exact source file name.
        mapping: File name to target table.

    Returns:
        Targets in append order; empty when the file is not mapped.
    """

    target = mapping.get(name)
    if target is None:
        return ()
    if target.level in SHARED_LEVELS and target.category == FAN_OUT_CATEGORY:
        return tuple(
            RouteTarget(level, target.category) for level in SHARED_LEVELS[target.level]
        )
    return (target,)
