"""Merge region model."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


def col_to_letter(col: int) -> str:
    """Convert a 0-based column index to Excel letters (0 -> 'A')."""
    result = ""
    while col >= 0:
        result = chr(col % 26 + ord("A")) + result
        col = col // 26 - 1
    return result


class MergeRegion(BaseModel):
    """A merged cell range in sheet coordinates (row 0 is the header row)."""

    model_config = ConfigDict(strict=True, frozen=True)

    start_row: int = Field(..., ge=0, description="First row (0-indexed)")
    end_row: int = Field(..., ge=0, description="Last row (inclusive)")
    start_col: int = Field(..., ge=0, description="First column (0-indexed)")
    end_col: int = Field(..., ge=0, description="Last column (inclusive)")

    @model_validator(mode="after")
    def _check_bounds(self) -> "MergeRegion":
        if self.start_row > self.end_row:
            raise ValueError(f"start_row {self.start_row} is after end_row {self.end_row}")
        if self.start_col > self.end_col:
            raise ValueError(f"start_col {self.start_col} is after end_col {self.end_col}")
        return self

    @property
    def excel_range(self) -> str:
        """Convert to Excel-style range (e.g., 'C2:C4')."""
        start = f"{col_to_letter(self.start_col)}{self.start_row + 1}"
        end = f"{col_to_letter(self.end_col)}{self.end_row + 1}"
        return f"{start}:{end}"

    @property
    def row_count(self) -> int:
        """Number of rows in the region."""
        return self.end_row - self.start_row + 1

    @property
    def col_count(self) -> int:
        """Number of columns in the region."""
        return self.end_col - self.start_col + 1

    @property
    def is_single_column(self) -> bool:
        return self.start_col == self.end_col

    def covers_column(self, column: int) -> bool:
        """Check whether the region spans the given column."""
        return self.start_col <= column <= self.end_col

    def rows(self) -> range:
        """Row indices covered by the region."""
        return range(self.start_row, self.end_row + 1)
