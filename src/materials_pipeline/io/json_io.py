"""JSON read/write helpers for the materials output artifact."""

from __future__ import annotations

import json
from pathlib import Path

from materials_pipeline.aggregate import MaterialsData


def write_materials_json(data: MaterialsData, output_path: Path) -> None:
    """Write the finalized aggregate as UTF-8 JSON.

    The parent directory is created when missing. Non-ASCII text is written
    as-is so the Chinese headings stay readable in the artifact.

    Args:
        data: Finalized level/category aggregate.
        output_path: Destination JSON file path.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, ensure_ascii=False, indent=2)
        handle.write("\n")


def read_materials_json(path: Path) -> MaterialsData:
    """Load a previously written materials artifact."""

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
