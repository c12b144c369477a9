"""Unit tests for file mapping and bucket routing."""

from __future__ import annotations

from pathlib import Path

import pytest

from materials_pipeline.models import RouteTarget
from materials_pipeline.routing.router import resolve_targets
from materials_pipeline.routing.table import DEFAULT_FILE_MAPPING, FileMappingRepository

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def test_resolve_targets_single_target() -> None:
    assert resolve_targets("A1词汇.pdf", DEFAULT_FILE_MAPPING) == (RouteTarget("A1", "vocabulary"),)


def test_resolve_targets_fans_out_shared_grammar() -> None:
    assert resolve_targets("B级别语法讲义.pdf", DEFAULT_FILE_MAPPING) == (
        RouteTarget("B1", "grammar"),
        RouteTarget("B2", "grammar"),
    )


def test_resolve_targets_keeps_non_grammar_shared_target() -> None:
    mapping = {"B文化.pdf": RouteTarget("B", "others")}

    assert resolve_targets("B文化.pdf", mapping) == (RouteTarget("B", "others"),)


def test_resolve_targets_unmapped_returns_empty() -> None:
    assert resolve_targets("unknown.pdf", DEFAULT_FILE_MAPPING) == ()
    assert resolve_targets("a1词汇.pdf", DEFAULT_FILE_MAPPING) == ()


def test_shipped_mapping_tsv_matches_default_table() -> None:
    assert FileMappingRepository(DATA_DIR / "file_mapping.tsv").load() == DEFAULT_FILE_MAPPING


def test_mapping_repository_accepts_headerless_rows(tmp_path: Path) -> None:
    path = tmp_path / "mapping.tsv"
    path.write_text(
        "# comment\nA1 情景对话讲义.pdf\tA1\tothers\n\nB级别语法讲义.pdf\tB\tgrammar\n",
        encoding="utf-8",
    )

    assert FileMappingRepository(path).load() == {
        "A1 情景对话讲义.pdf": RouteTarget("A1", "others"),
        "B级别语法讲义.pdf": RouteTarget("B", "grammar"),
    }


def test_mapping_repository_rejects_unknown_level_and_category(tmp_path: Path) -> None:
    path = tmp_path / "mapping.tsv"
    path.write_text(
        "file_name\tlevel\tcategory\nx.pdf\tC1\tgrammar\ny.pdf\tA1\tlistening\n",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="2 invalid rows"):
        FileMappingRepository(path).load()


def test_mapping_repository_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileMappingRepository(tmp_path / "missing.tsv").load()
