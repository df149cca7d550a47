"""Tests for the workbook writers."""

import pytest
from conftest import content_type, make_sheet, region
from openpyxl import load_workbook
from openpyxl.styles import Font
from openpyxl.xml.constants import XLSM, XLSX, XLTX

from mergesplit.core.exceptions import CorruptedFileError, WriterError
from mergesplit.resolver import resolve
from mergesplit.writers import ExcelWriter, StylePreservingWriter, build_sheet, write_file


class TestExcelWriter:
    """Test the plain writer."""

    def test_build_sheet(self):
        workbook = build_sheet([["PHOTO", "NOTES"], ["a.png", "Fragile"]], "Inventory")

        worksheet = workbook.active
        assert worksheet.title == "Inventory"
        assert worksheet["A1"].value == "PHOTO"
        assert worksheet["B2"].value == "Fragile"

    def test_write_file_round_trip(self, tmp_path, inventory_sheet, inventory_merges):
        resolved = resolve(inventory_sheet, inventory_merges, "NOTES")
        output = tmp_path / "out.xlsx"

        assert ExcelWriter().write(resolved, output) == output

        worksheet = load_workbook(output).active
        assert worksheet.title == "Inventory"
        notes = [cell.value for cell in worksheet["C"]]
        assert notes == ["NOTES", "Fragile", "Fragile", "Fragile"]
        assert not worksheet.merged_cells.ranges

    def test_write_file_unwritable_path(self, tmp_path):
        workbook = build_sheet([["NOTES"]])

        with pytest.raises(WriterError):
            write_file(tmp_path / "missing" / "out.xlsx", workbook)

    def test_xlsx_content_type(self, tmp_path):
        output = write_file(tmp_path / "out.xlsx", build_sheet([["NOTES"], ["a"]]))

        assert content_type(output) == XLSX

    def test_template_extension_writes_template(self, tmp_path):
        output = write_file(tmp_path / "out.xltx", build_sheet([["NOTES"], ["a"]]))

        assert content_type(output) == XLTX
        assert load_workbook(output).active["A2"].value == "a"

    @pytest.mark.parametrize("name", ["out.xlsm", "out.xltm"])
    def test_macro_extension_without_macros_rejected(self, tmp_path, name):
        output = tmp_path / name

        with pytest.raises(WriterError, match="has no macros"):
            write_file(output, build_sheet([["NOTES"]]))

        assert not output.exists()


class TestStylePreservingWriter:
    """Test the writer that keeps source formatting."""

    @pytest.fixture
    def styled_file(self, make_workbook):
        path = make_workbook(
            [
                ["PHOTO", "STYLE", "NOTES"],
                ["img1.png", "ST-100", "Fragile"],
                ["img2.png", None, None],
                ["img3.png", "ST-300", None],
            ],
            merges=["C2:C4", "B2:B3"],
            extra_sheets={"Other": [["untouched"]]},
        )
        workbook = load_workbook(path)
        worksheet = workbook["Inventory"]
        worksheet["C2"].font = Font(bold=True, color="FF0000")
        worksheet.column_dimensions["C"].width = 42
        workbook.save(path)
        return path

    def test_unmerges_target_column_and_keeps_styles(self, tmp_path, styled_file):
        sheet = make_sheet(
            [
                ["PHOTO", "STYLE", "NOTES"],
                ["img1.png", "ST-100", "Fragile"],
                ["img2.png", None, None],
                ["img3.png", "ST-300", None],
            ]
        )
        merges = [region(1, 2, 1, 1), region(1, 3, 2, 2)]
        resolved = resolve(sheet, merges, "NOTES")
        output = tmp_path / "styled_out.xlsx"

        StylePreservingWriter(styled_file).write(resolved, output)

        workbook = load_workbook(output)
        worksheet = workbook["Inventory"]
        assert [worksheet.cell(row=r, column=3).value for r in range(2, 5)] == ["Fragile"] * 3
        for row in range(2, 5):
            assert worksheet.cell(row=row, column=3).font.bold
        assert worksheet.column_dimensions["C"].width == 42
        assert [str(rng) for rng in worksheet.merged_cells.ranges] == ["B2:B3"]
        assert workbook["Other"]["A1"].value == "untouched"

    def test_missing_sheet(self, tmp_path, styled_file):
        resolved = resolve(make_sheet([["NOTES"]], name="Nope"), [], "NOTES")

        with pytest.raises(WriterError):
            StylePreservingWriter(styled_file).write(resolved, tmp_path / "x.xlsx")

    def test_macro_workbook_keeps_macro_content_type(self, tmp_path, make_workbook):
        source = make_workbook([["NOTES"], ["a"], [None]], merges=["A2:A3"], name="stock.xlsm")
        resolved = resolve(make_sheet([["NOTES"], ["a"], [None]]), [region(1, 2, 0, 0)], "NOTES")

        output = StylePreservingWriter(source).write(resolved, tmp_path / "stock_out.xlsm")

        assert content_type(output) == XLSM
        assert [cell.value for cell in load_workbook(output).active["A"]] == ["NOTES", "a", "a"]

    def test_macro_workbook_saved_as_xlsx_drops_macros(self, tmp_path, make_workbook):
        source = make_workbook([["NOTES"], ["a"]], name="stock.xlsm")
        resolved = resolve(make_sheet([["NOTES"], ["a"]]), [], "NOTES")

        output = StylePreservingWriter(source).write(resolved, tmp_path / "stock_out.xlsx")

        assert content_type(output) == XLSX

    def test_damaged_source(self, tmp_path, broken_workbook):
        resolved = resolve(make_sheet([["NOTES"]], name="Inventory"), [], "NOTES")
        output = tmp_path / "x.xlsx"

        with pytest.raises(CorruptedFileError):
            StylePreservingWriter(broken_workbook).write(resolved, output)

        assert not output.exists()
