"""Pure helper functions used by the merge resolver."""

from .merge_cell_handler import (
    anchor_value,
    build_row_value_map,
    find_wide_merges,
    parse_range_reference,
    select_column_merges,
)

__all__ = [
    "anchor_value",
    "build_row_value_map",
    "find_wide_merges",
    "parse_range_reference",
    "select_column_merges",
]
