"""Writer that keeps the source workbook's formatting."""

import logging
import zipfile
from copy import copy
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..core.constants import WORKBOOK_FORMATS
from ..core.exceptions import CorruptedFileError, ReaderError, WriterError
from ..models import ResolvedSheet
from ..tools.merge_cell_handler import parse_range_reference, select_column_merges
from .excel_writer import write_file

logger = logging.getLogger(__name__)


class StylePreservingWriter:
    """
    Writes resolved values back into a copy of the source workbook.

    Only the merges that were propagated are unmerged. Their anchor cell's
    style is copied onto every cell they covered, so fonts, fills, borders,
    column widths, other merges and other sheets stay as they were.
    """

    def __init__(self, source_path: str | Path):
        self.source_path = Path(source_path)

    def _load(self):
        try:
            return load_workbook(
                self.source_path,
                keep_vba=self.source_path.suffix.lower() in WORKBOOK_FORMATS.MACRO_EXTENSIONS,
            )
        except (
            InvalidFileException,
            zipfile.BadZipFile,
            KeyError,
            SyntaxError,
            ValueError,
            TypeError,
        ) as e:
            raise CorruptedFileError(f"Could not reload {self.source_path}: {e}") from e
        except OSError as e:
            raise ReaderError(f"Could not reload {self.source_path}: {e}") from e

    def write(self, resolved: ResolvedSheet, output_path: str | Path) -> Path:
        workbook = self._load()
        if resolved.sheet_name not in workbook.sheetnames:
            workbook.close()
            raise WriterError(f"Sheet {resolved.sheet_name!r} not found in {self.source_path}")

        worksheet = workbook[resolved.sheet_name]
        column = resolved.target_index + 1

        merged = {
            parse_range_reference(rng.coord): rng.coord for rng in worksheet.merged_cells.ranges
        }
        for region in select_column_merges(merged, resolved.target_index):
            anchor_style = copy(worksheet.cell(row=region.start_row + 1, column=column)._style)
            worksheet.unmerge_cells(merged[region])

            for row in region.rows():
                if row == 0 or row >= len(resolved.raw_rows):
                    continue
                cell = worksheet.cell(row=row + 1, column=column)
                cell.value = resolved.raw_rows[row][resolved.target_index]
                cell._style = copy(anchor_style)

        logger.debug(f"Unmerged target column merges in {resolved.sheet_name}")
        return write_file(output_path, workbook)
