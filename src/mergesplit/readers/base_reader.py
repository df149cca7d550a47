"""Base class for spreadsheet readers."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..core.exceptions import CorruptedFileError, ReaderError, UnsupportedFileError
from ..models import MergeRegion, SheetGrid

__all__ = [
    "BaseReader",
    "CorruptedFileError",
    "ReaderError",
    "UnsupportedFileError",
]


class BaseReader(ABC):
    """
    Reads one workbook and exposes its sheets as grids plus merge regions.

    Readers hold an open workbook handle between ``open()`` and ``close()``;
    use them as context managers so the handle is always released.
    """

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @abstractmethod
    def open(self) -> None:
        """Load the workbook."""

    @abstractmethod
    def close(self) -> None:
        """Release the workbook handle."""

    @abstractmethod
    def list_sheet_names(self) -> list[str]:
        """Sheet names in workbook order."""

    @abstractmethod
    def read_cells(self, sheet_name: str) -> SheetGrid:
        """Read a sheet as a grid anchored at A1; missing cells are None."""

    @abstractmethod
    def read_merge_regions(self, sheet_name: str) -> list[MergeRegion]:
        """Read the merged ranges of a sheet."""

    def read_first_sheet(self) -> tuple[SheetGrid, list[MergeRegion]]:
        """Read the first sheet of the workbook with its merge regions."""
        sheet_names = self.list_sheet_names()
        if not sheet_names:
            raise CorruptedFileError(f"No sheets found in {self.file_path}")

        sheet_name = sheet_names[0]
        return self.read_cells(sheet_name), self.read_merge_regions(sheet_name)
