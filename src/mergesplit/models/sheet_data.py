"""Data models for representing sheet content."""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CellValue = str | int | float | bool | datetime | date | time | timedelta | Decimal | None


def header_label(value: Any) -> str:
    """Render a header cell as the column name used for lookups."""
    if value is None:
        return ""
    return str(value)


class SheetGrid(BaseModel):
    """A sheet as an ordered list of rows, row 0 being the header row."""

    model_config = ConfigDict(strict=True)

    name: str = Field("Sheet1", description="Sheet name")
    rows: list[list[CellValue]] = Field(
        default_factory=list, description="Cell values, row-major, anchored at A1"
    )

    @property
    def headers(self) -> list[str]:
        """Column names taken from the header row."""
        if not self.rows:
            return []
        return [header_label(value) for value in self.rows[0]]

    @property
    def data_rows(self) -> list[list[CellValue]]:
        """All rows after the header row."""
        return self.rows[1:]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        """Width of the widest row."""
        return max((len(row) for row in self.rows), default=0)

    def get_value(self, row: int, column: int) -> CellValue:
        """Get a cell value, or None when the position is outside the grid."""
        if row < 0 or row >= len(self.rows):
            return None
        cells = self.rows[row]
        if column < 0 or column >= len(cells):
            return None
        return cells[column]

    def get_dimensions(self) -> tuple[int, int]:
        """Get sheet dimensions as (rows, columns)."""
        return (self.row_count, self.column_count)


class ResolvedSheet(BaseModel):
    """A sheet whose target column no longer depends on merged cells."""

    model_config = ConfigDict(strict=True)

    sheet_name: str = Field(..., description="Name of the source sheet")
    target_column: str = Field(..., description="Header name of the resolved column")
    target_index: int = Field(..., ge=0, description="Index of the resolved column")
    headers: list[str] = Field(default_factory=list, description="Column names")
    rows: list[dict[str, CellValue]] = Field(
        default_factory=list, description="Data rows keyed by header name"
    )
    raw_rows: list[list[CellValue]] = Field(
        default_factory=list, description="Header row followed by the data rows"
    )
    merges_applied: int = Field(0, ge=0, description="Merge regions propagated")

    @property
    def row_count(self) -> int:
        """Number of data rows (header excluded)."""
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def preview(self, count: int = 3) -> list[dict[str, CellValue]]:
        """First few data rows, for console display."""
        return self.rows[:count]
