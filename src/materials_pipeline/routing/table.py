"""File-name to bucket mapping table and its TSV-backed override."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from materials_pipeline.models import CATEGORIES, LEVELS, SHARED_LEVELS, RouteTarget

TSV_COLUMNS = ("file_name", "level", "category")

DEFAULT_FILE_MAPPING: dict[str, RouteTarget] = {
    "A1词汇.pdf": RouteTarget("A1", "vocabulary"),
    "A2词汇.pdf": RouteTarget("A2", "vocabulary"),
    "B1词汇.pdf": RouteTarget("B1", "vocabulary"),
    "B2词汇.pdf": RouteTarget("B2", "vocabulary"),
    "A1语法讲义.pdf": RouteTarget("A1", "grammar"),
    "A2语法讲义.pdf": RouteTarget("A2", "grammar"),
    "B级别语法讲义.pdf": RouteTarget("B", "grammar"),
    "A1课文讲义.pdf": RouteTarget("A1", "reading"),
    "A2课文讲义.pdf": RouteTarget("A2", "reading"),
    "B1课文讲义.pdf": RouteTarget("B1", "reading"),
    "B2课文讲义.pdf": RouteTarget("B2", "reading"),
    "A1文化讲义.pdf": RouteTarget("A1", "others"),
    "A2文化讲义.pdf": RouteTarget("A2", "others"),
    "B1文化.pdf": RouteTarget("B1", "others"),
    "B2文化.pdf": RouteTarget("B2", "others"),
    "A1 情景对话讲义.pdf": RouteTarget("A1", "others"),
    "A2 情景对话讲义.pdf": RouteTarget("A2", "others"),
    "B1情景对话讲义.pdf": RouteTarget("B1", "others"),
    "B2情景对话.pdf": RouteTarget("B2", "others"),
}


@dataclass(frozen=True)
class FileMappingRepository:
    """Lookup repository for an externally edited file mapping table.

    Each TSV record maps an exact file name to a ``(level, category)`` pair.
    Levels may be a real level or a shared pseudo-level such as ``B``.
    """

    path: Path

    def load(self) -> dict[str, RouteTarget]:
        """Load mapping rows from a TSV file.

        The parser accepts either a header row with columns ``file_name``,
        ``level``, ``category`` or plain three-column rows in that order.
        Blank lines and ``#`` comments are ignored.

        Returns:
            Mapping keyed by exact file name.

        Raises:
            FileNotFoundError: If the TSV file does not exist.
            ValueError: If any row names an unknown level or category.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"File mapping not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            raw_lines = [line.rstrip("\n") for line in handle]

        lines = [line for line in raw_lines if line.strip() and not line.lstrip().startswith("#")]
        if not lines:
            return {}

        header_cells = [cell.strip() for cell in lines[0].split("\t")]
        if set(TSV_COLUMNS).issubset(set(header_cells)):
            idx_name, idx_level, idx_category = (header_cells.index(col) for col in TSV_COLUMNS)
            data_lines = lines[1:]
        else:
            idx_name, idx_level, idx_category = 0, 1, 2
            data_lines = lines

        mapping: dict[str, RouteTarget] = {}
        errors: list[str] = []
        for line_no, line in enumerate(data_lines, start=1):
            cells = [cell.strip() for cell in line.split("\t")]
            if len(cells) <= max(idx_name, idx_level, idx_category):
                errors.append(f"Row {line_no}: expected {len(TSV_COLUMNS)} columns in '{line}'")
                continue
            name = cells[idx_name]
            level = cells[idx_level]
            category = cells[idx_category]
            if level not in LEVELS and level not in SHARED_LEVELS:
                errors.append(f"Row {line_no}: unknown level '{level}'")
                continue
            if category not in CATEGORIES:
                errors.append(f"Row {line_no}: unknown category '{category}'")
                continue
            mapping[name] = RouteTarget(level, category)

        if errors:
            preview = "\n".join(f"- {item}" for item in errors[:25])
            raise ValueError(f"File mapping {self.path} has {len(errors)} invalid rows:\n{preview}")
        return mapping
