"""Plain workbook writer built on openpyxl."""

import logging
from pathlib import Path

from openpyxl import Workbook

from ..core.constants import WORKBOOK_FORMATS
from ..core.exceptions import WriterError
from ..models import CellValue, ResolvedSheet

logger = logging.getLogger(__name__)


def build_sheet(raw_rows: list[list[CellValue]], sheet_name: str = "Sheet1") -> Workbook:
    """
    Build a single-sheet workbook from raw rows.

    Args:
        raw_rows: Header row followed by data rows
        sheet_name: Title of the sheet

    Returns:
        openpyxl Workbook holding the rows from A1
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_name

    for row in raw_rows:
        worksheet.append(row)

    return workbook


def match_extension(workbook: Workbook, path: Path) -> None:
    """
    Make the workbook content type agree with the file extension.

    Template extensions mark the workbook as a template. A macro-enabled
    extension needs a VBA project to carry; any other extension drops it.

    Raises:
        WriterError: If a macro-enabled extension is used without macros
    """
    extension = path.suffix.lower()
    if extension in WORKBOOK_FORMATS.MACRO_EXTENSIONS:
        if workbook.vba_archive is None:
            plain = ".xltx" if extension in WORKBOOK_FORMATS.TEMPLATE_EXTENSIONS else ".xlsx"
            raise WriterError(f"Cannot write {path}: the workbook has no macros, use {plain}")
    else:
        workbook.vba_archive = None
    workbook.template = extension in WORKBOOK_FORMATS.TEMPLATE_EXTENSIONS


def write_file(path: str | Path, workbook: Workbook) -> Path:
    """
    Save a workbook to disk.

    Raises:
        WriterError: If the file cannot be written
    """
    path = Path(path)
    try:
        match_extension(workbook, path)
        workbook.save(path)
    except OSError as e:
        raise WriterError(f"Could not write {path}: {e}") from e
    finally:
        workbook.close()

    logger.debug(f"Processed file saved to: {path}")
    return path


class ExcelWriter:
    """Writes resolved rows into a fresh workbook, without source formatting."""

    def write(self, resolved: ResolvedSheet, output_path: str | Path) -> Path:
        workbook = build_sheet(resolved.raw_rows, resolved.sheet_name)
        return write_file(output_path, workbook)
