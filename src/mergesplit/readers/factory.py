"""Factory for picking a reader for a spreadsheet file."""

import logging
import zipfile
from pathlib import Path

from ..core.constants import WORKBOOK_FORMATS
from .base_reader import BaseReader, CorruptedFileError, UnsupportedFileError
from .excel_reader import ExcelReader

logger = logging.getLogger(__name__)


def is_excel_archive(file_path: Path) -> bool:
    """Check that the file is a ZIP archive carrying workbook parts."""
    try:
        with zipfile.ZipFile(file_path, "r") as zip_file:
            file_list = set(zip_file.namelist())
    except (zipfile.BadZipFile, OSError) as e:
        logger.debug(f"ZIP analysis failed: {e}")
        return False

    return all(indicator in file_list for indicator in WORKBOOK_FORMATS.EXCEL_ZIP_INDICATORS)


def create_reader(file_path: str | Path) -> BaseReader:
    """
    Create a reader for the given file.

    Args:
        file_path: Path to the spreadsheet

    Returns:
        Reader instance (not yet opened)

    Raises:
        UnsupportedFileError: If the extension is not a supported workbook format
        CorruptedFileError: If the file is not a readable workbook archive
    """
    file_path = Path(file_path)
    extension = file_path.suffix.lower()

    if extension not in WORKBOOK_FORMATS.SUPPORTED_EXTENSIONS:
        supported = ", ".join(WORKBOOK_FORMATS.SUPPORTED_EXTENSIONS)
        raise UnsupportedFileError(
            f"Unsupported file format '{extension or file_path.name}' (supported: {supported})"
        )

    if not is_excel_archive(file_path):
        raise CorruptedFileError(f"{file_path} is not a valid Excel workbook")

    return ExcelReader(file_path)
