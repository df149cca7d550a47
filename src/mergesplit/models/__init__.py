"""Data models for MergeSplit."""

from .merge_region import MergeRegion, col_to_letter
from .sheet_data import CellValue, ResolvedSheet, SheetGrid, header_label

__all__ = [
    "CellValue",
    "MergeRegion",
    "ResolvedSheet",
    "SheetGrid",
    "col_to_letter",
    "header_label",
]
