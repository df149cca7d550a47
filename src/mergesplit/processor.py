"""Main MergeSplit class."""

import logging
import time
from pathlib import Path

from pydantic import ValidationError

from .config import Config
from .core.constants import WORKBOOK_FORMATS
from .core.exceptions import ConfigurationError, InputNotFoundError
from .models import ResolvedSheet
from .readers import create_reader
from .resolver import resolve
from .utils.logging_context import FileContext, SheetContext, get_contextual_logger
from .writers import ExcelWriter, StylePreservingWriter

logger = get_contextual_logger(__name__)


def default_output_path(
    input_path: str | Path, suffix: str = "_processed", extension: str | None = None
) -> Path:
    """Insert the suffix before the extension: inventory.xlsx -> inventory_processed.xlsx.

    The input extension is kept unless another one is given.
    """
    input_path = Path(input_path)
    extension = input_path.suffix if extension is None else extension
    return input_path.with_name(f"{input_path.stem}{suffix}{extension}")


class MergeSplit:
    """Splits a merged column of a spreadsheet into one explicit value per row."""

    def __init__(
        self,
        config: Config | None = None,
        target_column: str | None = None,
        preserve_formatting: bool | None = None,
        **kwargs,
    ):
        """Initialize MergeSplit.

        Args:
            config: Configuration object. If None, loads from environment.
            target_column: Override for the column to resolve
            preserve_formatting: Override for the style-preserving writer
            **kwargs: Additional config overrides

        Raises:
            ConfigurationError: If an override is not a valid config value
        """
        if config is None:
            config = Config.from_env()

        overrides = dict(kwargs)
        if target_column is not None:
            overrides["target_column"] = target_column
        if preserve_formatting is not None:
            overrides["preserve_formatting"] = preserve_formatting

        unknown = sorted(key for key in overrides if key not in Config.model_fields)
        if unknown:
            raise TypeError(f"Unknown config options: {', '.join(unknown)}")

        if overrides:
            try:
                config = Config.model_validate({**config.model_dump(), **overrides})
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
        self.config = config
        self._setup_logging()

        logger.debug(f"MergeSplit initialized with config: {self.config}")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper(), logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename=self.config.log_file,
        )

    def process(
        self, input_path: str | Path, output_path: str | Path | None = None
    ) -> ResolvedSheet:
        """Resolve the merged target column of the first sheet of a workbook.

        Args:
            input_path: Path to the source workbook
            output_path: Where to save the processed workbook. Nothing is
                written when None.

        Returns:
            ResolvedSheet with headers, row dictionaries and raw rows

        Raises:
            InputNotFoundError: If the input file doesn't exist
            ColumnNotFoundError: If the target column is missing
            ReaderError: If the workbook cannot be read
            WriterError: If the output cannot be written
        """
        start_time = time.time()
        input_path = Path(input_path)

        with FileContext(str(input_path)):
            self._validate_file(input_path)
            logger.debug(f"Reading Excel file: {input_path}")

            with create_reader(input_path) as reader:
                sheet, merge_regions = reader.read_first_sheet()

            with SheetContext(sheet.name):
                rows, columns = sheet.get_dimensions()
                logger.info(
                    f"Loaded {rows} rows x {columns} columns with "
                    f"{len(merge_regions)} merged ranges"
                )

                resolved = resolve(
                    sheet,
                    merge_regions,
                    target_column=self.config.target_column,
                    warn_on_wide_merges=self.config.warn_on_wide_merges,
                )

                if output_path is not None:
                    self._write(input_path, resolved, Path(output_path))

            logger.info(
                f"Resolved {resolved.merges_applied} merges over {resolved.row_count} rows "
                f"in {time.time() - start_time:.2f}s"
            )

        return resolved

    def _write(self, input_path: Path, resolved: ResolvedSheet, output_path: Path) -> Path:
        if self.config.preserve_formatting:
            writer = StylePreservingWriter(input_path)
        else:
            writer = ExcelWriter()
        return writer.write(resolved, output_path)

    def _validate_file(self, file_path: Path) -> None:
        """Validate that the input file exists."""
        if not file_path.is_file():
            raise InputNotFoundError(file_path)

    def output_path_for(self, input_path: str | Path) -> Path:
        """Default output path for an input workbook.

        The plain writer carries no macros over, so macro-enabled inputs get
        the matching macro-free extension (.xlsm -> .xlsx, .xltm -> .xltx).
        """
        input_path = Path(input_path)
        extension = input_path.suffix
        if not self.config.preserve_formatting and extension.lower() in (
            WORKBOOK_FORMATS.MACRO_EXTENSIONS
        ):
            is_template = extension.lower() in WORKBOOK_FORMATS.TEMPLATE_EXTENSIONS
            extension = ".xltx" if is_template else ".xlsx"
        return default_output_path(input_path, self.config.output_suffix, extension)
