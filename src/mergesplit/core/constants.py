"""Centralized constants for MergeSplit.

Defaults shared by the config model, the CLI and the readers, grouped by
concern the same way throughout the codebase.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ResolutionDefaults:
    """Defaults for merge resolution and output naming."""

    TARGET_COLUMN: Final[str] = "NOTES"
    OUTPUT_SUFFIX: Final[str] = "_processed"
    PREVIEW_ROWS: Final[int] = 3
    EMPTY_VALUE: Final[str] = ""


@dataclass(frozen=True)
class WorkbookFormats:
    """Workbook formats understood by the openpyxl reader."""

    SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (".xlsx", ".xlsm", ".xltx", ".xltm")
    MACRO_EXTENSIONS: Final[tuple[str, ...]] = (".xlsm", ".xltm")
    TEMPLATE_EXTENSIONS: Final[tuple[str, ...]] = (".xltx", ".xltm")

    # Members every OOXML workbook archive carries
    EXCEL_ZIP_INDICATORS: Final[tuple[str, ...]] = (
        "[Content_Types].xml",
        "xl/workbook.xml",
        "xl/_rels/workbook.xml.rels",
    )


# Create singleton instances for easy access
RESOLUTION = ResolutionDefaults()
WORKBOOK_FORMATS = WorkbookFormats()
