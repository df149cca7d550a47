"""Configuration model for MergeSplit."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .core.constants import RESOLUTION
from .core.exceptions import ConfigurationError


class Config(BaseModel):
    """Configuration for MergeSplit."""

    # Resolution
    target_column: str = Field(
        RESOLUTION.TARGET_COLUMN, min_length=1, description="Header of the column to resolve"
    )
    warn_on_wide_merges: bool = Field(
        True, description="Log a warning for multi-column merges covering the target column"
    )

    # Output
    output_suffix: str = Field(
        RESOLUTION.OUTPUT_SUFFIX, description="Suffix added to the input name for the output file"
    )
    preserve_formatting: bool = Field(
        False, description="Write into a copy of the source workbook, keeping its styles"
    )
    preview_rows: int = Field(
        RESOLUTION.PREVIEW_ROWS, ge=0, description="Processed rows shown in the console preview"
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from ``MERGESPLIT_*`` environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        log_file = os.getenv("MERGESPLIT_LOG_FILE")
        warn_on_wide_merges = os.getenv("MERGESPLIT_WARN_ON_WIDE_MERGES", "true")
        preserve_formatting = os.getenv("MERGESPLIT_PRESERVE_FORMATTING", "false")
        preview_rows = os.getenv("MERGESPLIT_PREVIEW_ROWS", str(RESOLUTION.PREVIEW_ROWS))

        try:
            return cls(
                target_column=os.getenv("MERGESPLIT_TARGET_COLUMN", RESOLUTION.TARGET_COLUMN),
                warn_on_wide_merges=warn_on_wide_merges.lower() == "true",
                output_suffix=os.getenv("MERGESPLIT_OUTPUT_SUFFIX", RESOLUTION.OUTPUT_SUFFIX),
                preserve_formatting=preserve_formatting.lower() == "true",
                preview_rows=int(preview_rows),
                log_level=os.getenv("MERGESPLIT_LOG_LEVEL", "INFO"),
                log_file=Path(log_file) if log_file else None,
            )
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(f"Invalid MERGESPLIT_* configuration: {e}") from e
