"""Merge resolver: propagate merged values down a single column."""

from collections.abc import Iterable

from .core.constants import RESOLUTION
from .core.exceptions import ColumnNotFoundError
from .models import CellValue, MergeRegion, ResolvedSheet, SheetGrid
from .tools.merge_cell_handler import (
    build_row_value_map,
    find_wide_merges,
    select_column_merges,
)
from .utils.logging_context import ColumnContext, get_contextual_logger

logger = get_contextual_logger(__name__)


def find_target_column(headers: list[str], target_column: str) -> int:
    """
    Locate the target column in the header row.

    Matching is exact and case-sensitive; the first match wins.

    Raises:
        ColumnNotFoundError: If no header cell equals the target name
    """
    try:
        return headers.index(target_column)
    except ValueError:
        raise ColumnNotFoundError(target_column, headers) from None


def resolve(
    sheet: SheetGrid,
    merge_regions: Iterable[MergeRegion],
    target_column: str = RESOLUTION.TARGET_COLUMN,
    warn_on_wide_merges: bool = True,
) -> ResolvedSheet:
    """
    Rewrite a sheet so every row covered by a merge on the target column
    carries the merge's anchor value.

    The header row is kept as-is. Data rows covered by a single-column merge
    on the target column get the anchor (top) cell value of that merge; other
    rows keep their own value, with missing values written as "". Every output
    row has exactly the header width: short rows are padded with "" and cells
    past the last header are dropped, with a warning when any of them holds a
    value. Overlapping merges resolve in the order given, the last one winning.

    Args:
        sheet: Sheet data, row 0 being the header row
        merge_regions: Merge regions of the sheet, in workbook order
        target_column: Header name of the column to resolve
        warn_on_wide_merges: Log a warning for multi-column merges that cover
            the target column, since those are not propagated

    Returns:
        ResolvedSheet with row dictionaries and raw rows

    Raises:
        ColumnNotFoundError: If the target column is not in the header row
    """
    headers = sheet.headers
    target_index = find_target_column(headers, target_column)
    regions = list(merge_regions)

    with ColumnContext(target_column):
        column_merges = select_column_merges(regions, target_index)
        logger.debug(
            f"{len(column_merges)} of {len(regions)} merge regions sit on column {target_index}"
        )

        if warn_on_wide_merges:
            for region in find_wide_merges(regions, target_index):
                logger.warning(
                    f"Merge {region.excel_range} spans {region.col_count} columns "
                    f"including the target column; its value is not propagated"
                )

        row_values = build_row_value_map(sheet, column_merges, target_index)

    raw_rows: list[list[CellValue]] = [list(sheet.rows[0])]
    for row_index, source_row in enumerate(sheet.data_rows, start=1):
        row = list(source_row[: len(headers)])
        dropped = [value for value in source_row[len(headers) :] if value not in (None, "")]
        if dropped:
            logger.warning(
                f"Dropped {len(dropped)} value(s) past the last header in row {row_index + 1}"
            )
        while len(row) < len(headers):
            row.append(RESOLUTION.EMPTY_VALUE)

        if row_index in row_values:
            row[target_index] = row_values[row_index]
        elif row[target_index] is None:
            row[target_index] = RESOLUTION.EMPTY_VALUE

        raw_rows.append(row)

    rows = [_row_to_dict(headers, row) for row in raw_rows[1:]]

    return ResolvedSheet(
        sheet_name=sheet.name,
        target_column=target_column,
        target_index=target_index,
        headers=headers,
        rows=rows,
        raw_rows=raw_rows,
        merges_applied=len(column_merges),
    )


def _row_to_dict(headers: list[str], row: list[CellValue]) -> dict[str, CellValue]:
    """Key a row by header name; None becomes ""."""
    record: dict[str, CellValue] = {}
    for index, header in enumerate(headers):
        value = row[index]
        record[header] = RESOLUTION.EMPTY_VALUE if value is None else value
    return record
