"""Custom exceptions for MergeSplit."""


class MergeSplitError(Exception):
    """Base exception for all MergeSplit errors."""

    pass


class UsageError(MergeSplitError):
    """Raised when the command line is missing required arguments."""

    pass


class ConfigurationError(MergeSplitError):
    """Raised when configuration values are invalid."""

    pass


class InputNotFoundError(MergeSplitError):
    """Raised when the input spreadsheet does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'Input file "{path}" not found')


class ColumnNotFoundError(MergeSplitError):
    """Raised when the target column is missing from the header row."""

    def __init__(self, column: str, available: list[str] | None = None):
        self.column = column
        self.available = list(available or [])
        super().__init__(f"{column} column not found in the Excel file")


class ReaderError(MergeSplitError):
    """Raised when a spreadsheet cannot be read."""

    pass


class UnsupportedFileError(ReaderError):
    """Raised when the file format is not supported by any reader."""

    pass


class CorruptedFileError(ReaderError):
    """Raised when the file is damaged or not a valid workbook."""

    pass


class WriterError(MergeSplitError):
    """Raised when the processed workbook cannot be written."""

    pass
