"""Workbook writers for resolved sheets."""

from .excel_writer import ExcelWriter, build_sheet, write_file
from .style_writer import StylePreservingWriter

__all__ = ["ExcelWriter", "StylePreservingWriter", "build_sheet", "write_file"]
