"""Pytest configuration and shared fixtures."""

import os
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any
from xml.etree import ElementTree

import pytest
from openpyxl import Workbook

from mergesplit.config import Config
from mergesplit.models import MergeRegion, SheetGrid


def make_sheet(rows: list[list[Any]], name: str = "Inventory") -> SheetGrid:
    """Helper to create a SheetGrid from a 2D array."""
    return SheetGrid(name=name, rows=[list(row) for row in rows])


def region(start_row: int, end_row: int, start_col: int, end_col: int) -> MergeRegion:
    """Shorthand for a merge region in sheet coordinates."""
    return MergeRegion(start_row=start_row, end_row=end_row, start_col=start_col, end_col=end_col)


@pytest.fixture
def config() -> Config:
    """Default configuration, independent of the environment."""
    return Config()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MERGESPLIT_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("MERGESPLIT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def inventory_sheet() -> SheetGrid:
    """PHOTO/STYLE/NOTES sheet whose NOTES cells C2:C4 are merged."""
    return make_sheet(
        [
            ["PHOTO", "STYLE", "NOTES"],
            ["img1.png", "ST-100", "Fragile"],
            ["img2.png", "ST-101", None],
            ["img3.png", "ST-102", None],
        ]
    )


@pytest.fixture
def inventory_merges() -> list[MergeRegion]:
    return [region(1, 3, 2, 2)]


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an xlsx file with the given rows and merged ranges."""

    def _make(
        rows: list[list[Any]],
        merges: list[str] | None = None,
        name: str = "inventory.xlsx",
        sheet_title: str = "Inventory",
        extra_sheets: dict[str, list[list[Any]]] | None = None,
    ) -> Path:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = sheet_title
        for row in rows:
            worksheet.append(row)
        for merged in merges or []:
            worksheet.merge_cells(merged)

        for title, sheet_rows in (extra_sheets or {}).items():
            extra = workbook.create_sheet(title)
            for row in sheet_rows:
                extra.append(row)

        path = tmp_path / name
        workbook.save(path)
        return path

    return _make


@pytest.fixture
def inventory_file(make_workbook: Callable[..., Path]) -> Path:
    """Workbook with NOTES merged over C2:C4 and STYLE merged over B5:B6."""
    return make_workbook(
        [
            ["PHOTO", "STYLE", "NOTES"],
            ["img1.png", "ST-100", "Fragile"],
            ["img2.png", "ST-101", None],
            ["img3.png", "ST-102", None],
            ["img4.png", "ST-200", "Keep dry"],
            ["img5.png", None, None],
        ],
        merges=["C2:C4", "B5:B6"],
    )


@pytest.fixture
def broken_workbook(inventory_file: Path, tmp_path: Path) -> Path:
    """A valid workbook archive whose xl/workbook.xml is not XML."""
    path = tmp_path / "broken.xlsx"
    with zipfile.ZipFile(inventory_file) as source, zipfile.ZipFile(path, "w") as target:
        for item in source.infolist():
            data = source.read(item.filename)
            if item.filename == "xl/workbook.xml":
                data = b"<not-xml"
            target.writestr(item, data)
    return path


def content_type(path: Path) -> str:
    """Content type declared for the workbook part in [Content_Types].xml."""
    with zipfile.ZipFile(path) as archive:
        root = ElementTree.fromstring(archive.read("[Content_Types].xml"))
    for override in root:
        if override.get("PartName") == "/xl/workbook.xml":
            return override.get("ContentType")
    raise AssertionError(f"No workbook part declared in {path}")
