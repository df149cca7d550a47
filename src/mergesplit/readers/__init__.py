"""File readers for spreadsheet formats."""

from .base_reader import (
    BaseReader,
    CorruptedFileError,
    ReaderError,
    UnsupportedFileError,
)
from .excel_reader import ExcelReader
from .factory import create_reader, is_excel_archive

__all__ = [
    "BaseReader",
    "ExcelReader",
    "create_reader",
    "is_excel_archive",
    "ReaderError",
    "UnsupportedFileError",
    "CorruptedFileError",
]
