"""Utility helpers for MergeSplit."""

from .logging_context import (
    ColumnContext,
    FileContext,
    SheetContext,
    get_contextual_logger,
)

__all__ = [
    "ColumnContext",
    "FileContext",
    "SheetContext",
    "get_contextual_logger",
]
