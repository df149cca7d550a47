"""Excel reader built on openpyxl."""

import logging
import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..models import MergeRegion, SheetGrid
from ..tools.merge_cell_handler import parse_range_reference
from .base_reader import BaseReader, CorruptedFileError, ReaderError

logger = logging.getLogger(__name__)


class ExcelReader(BaseReader):
    """Reader for OOXML workbooks (.xlsx, .xlsm and templates)."""

    def __init__(self, file_path: str | Path):
        super().__init__(file_path)
        self._workbook = None

    def open(self) -> None:
        if self._workbook is not None:
            return

        logger.debug(f"Loading workbook {self.file_path}")
        try:
            # Merged ranges are only available in full (non read-only) mode.
            # data_only returns cached formula results instead of formulas.
            self._workbook = load_workbook(self.file_path, data_only=True)
        except (
            InvalidFileException,
            zipfile.BadZipFile,
            KeyError,
            SyntaxError,
            ValueError,
            TypeError,
        ) as e:
            # SyntaxError covers ElementTree and lxml parse errors of damaged parts
            raise CorruptedFileError(f"Could not read workbook {self.file_path}: {e}") from e
        except OSError as e:
            raise ReaderError(f"Could not open {self.file_path}: {e}") from e

    def close(self) -> None:
        if self._workbook is not None:
            self._workbook.close()
            self._workbook = None

    @property
    def workbook(self):
        if self._workbook is None:
            raise ReaderError("Workbook is not open; use the reader as a context manager")
        return self._workbook

    def _worksheet(self, sheet_name: str):
        try:
            return self.workbook[sheet_name]
        except KeyError:
            raise ReaderError(f"Sheet {sheet_name!r} not found in {self.file_path}") from None

    def list_sheet_names(self) -> list[str]:
        return list(self.workbook.sheetnames)

    def read_cells(self, sheet_name: str) -> SheetGrid:
        worksheet = self._worksheet(sheet_name)

        # Always start at A1 so grid indices match merge coordinates
        rows = [
            list(row)
            for row in worksheet.iter_rows(
                min_row=1,
                min_col=1,
                max_row=worksheet.max_row,
                max_col=worksheet.max_column,
                values_only=True,
            )
        ]
        logger.debug(f"Read {len(rows)} rows x {worksheet.max_column} columns from {sheet_name}")

        return SheetGrid(name=sheet_name, rows=rows)

    def read_merge_regions(self, sheet_name: str) -> list[MergeRegion]:
        """
        Read merged ranges, ordered top to bottom then left to right.

        openpyxl keeps merged ranges in an unordered collection, so they are
        sorted here to give overlapping regions a stable precedence.
        """
        worksheet = self._worksheet(sheet_name)

        regions = []
        for merged_range in worksheet.merged_cells.ranges:
            try:
                regions.append(parse_range_reference(merged_range.coord))
            except ValueError as e:
                logger.warning(f"Skipping malformed merged range {merged_range}: {e}")

        regions.sort(key=lambda r: (r.start_row, r.start_col, r.end_row, r.end_col))
        return regions
