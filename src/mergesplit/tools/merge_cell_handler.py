"""Tool for handling merged cells in spreadsheets."""

import re
from collections.abc import Iterable

from ..core.constants import RESOLUTION
from ..models import CellValue, MergeRegion, SheetGrid

_CELL_REFERENCE = re.compile(r"^\$?([A-Z]+)\$?(\d+)$")


def parse_range_reference(range_ref: str) -> MergeRegion:
    """
    Parse an Excel range reference into a merge region.

    Accepts ranges such as "C2:C4" or "$C$2:$C$4", and single cells such as
    "C5" which become a one-cell region.

    Args:
        range_ref: Range reference in A1 notation

    Returns:
        MergeRegion with 0-indexed, inclusive bounds

    Raises:
        ValueError: If the reference cannot be parsed
    """
    if not isinstance(range_ref, str) or not range_ref.strip():
        raise ValueError(f"Invalid range reference: {range_ref!r}")

    parts = range_ref.strip().split(":")
    if len(parts) == 1:
        parts = parts * 2
    if len(parts) != 2:
        raise ValueError(f"Invalid range reference: {range_ref}")

    start_row, start_col = _parse_cell_reference(parts[0])
    end_row, end_col = _parse_cell_reference(parts[1])

    return MergeRegion(
        start_row=min(start_row, end_row),
        end_row=max(start_row, end_row),
        start_col=min(start_col, end_col),
        end_col=max(start_col, end_col),
    )


def _parse_cell_reference(cell_ref: str) -> tuple[int, int]:
    """Parse Excel cell reference to row, col indices."""
    match = _CELL_REFERENCE.match(cell_ref.strip().upper())
    if not match:
        raise ValueError(f"Invalid cell reference: {cell_ref}")

    col_str, row_str = match.groups()

    # Convert column letters to index
    col = 0
    for char in col_str:
        col = col * 26 + (ord(char) - ord("A") + 1)
    col -= 1  # 0-indexed

    row = int(row_str) - 1  # 0-indexed
    if row < 0:
        raise ValueError(f"Invalid cell reference: {cell_ref}")

    return row, col


def select_column_merges(regions: Iterable[MergeRegion], column: int) -> list[MergeRegion]:
    """
    Keep the merges that span exactly one column, the given one.

    Merges covering the column together with neighbouring columns are not
    selected. Input order is preserved because it decides overlaps.
    """
    return [r for r in regions if r.start_col == column and r.end_col == column]


def find_wide_merges(regions: Iterable[MergeRegion], column: int) -> list[MergeRegion]:
    """Find multi-column merges that cover the given column."""
    return [r for r in regions if not r.is_single_column and r.covers_column(column)]


def anchor_value(sheet: SheetGrid, region: MergeRegion, column: int) -> CellValue:
    """Value of the region's top cell in the given column, "" when empty."""
    value = sheet.get_value(region.start_row, column)
    if value is None or value == "":
        return RESOLUTION.EMPTY_VALUE
    return value


def build_row_value_map(
    sheet: SheetGrid, regions: Iterable[MergeRegion], column: int
) -> dict[int, CellValue]:
    """
    Map every row covered by a merge on the column to the merge's anchor value.

    Regions are applied in the order given; when two regions cover the same
    row the later one wins.

    Args:
        sheet: Sheet holding the anchor values
        regions: Merge regions, already filtered to the column
        column: Target column index

    Returns:
        Dictionary of row index to propagated value
    """
    row_values: dict[int, CellValue] = {}
    for region in regions:
        value = anchor_value(sheet, region, column)
        for row in region.rows():
            row_values[row] = value
    return row_values
