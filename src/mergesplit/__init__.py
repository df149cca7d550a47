"""MergeSplit - split merged spreadsheet columns into explicit per-row values."""

__version__ = "0.1.0"

from mergesplit.config import Config
from mergesplit.core.exceptions import (
    ColumnNotFoundError,
    ConfigurationError,
    InputNotFoundError,
    MergeSplitError,
    ReaderError,
    UsageError,
    WriterError,
)
from mergesplit.models import MergeRegion, ResolvedSheet, SheetGrid
from mergesplit.processor import MergeSplit, default_output_path
from mergesplit.resolver import resolve

__all__ = [
    "ColumnNotFoundError",
    "Config",
    "ConfigurationError",
    "InputNotFoundError",
    "MergeRegion",
    "MergeSplit",
    "MergeSplitError",
    "ReaderError",
    "ResolvedSheet",
    "SheetGrid",
    "UsageError",
    "WriterError",
    "default_output_path",
    "resolve",
]
