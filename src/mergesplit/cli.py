"""Command-line interface for MergeSplit."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Config
from .core.exceptions import MergeSplitError, UsageError
from .models import ResolvedSheet
from .processor import MergeSplit

USAGE_EXAMPLE = "Example: mergesplit input.xlsx output.xlsx"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mergesplit",
        description=(
            "Split a merged spreadsheet column so every row carries its own copy of the value."
        ),
        epilog=USAGE_EXAMPLE,
    )
    parser.add_argument("input_file", nargs="?", help="Excel file to process")
    parser.add_argument(
        "output_file",
        nargs="?",
        help="Where to save the result (default: <input>_processed.<ext>)",
    )
    parser.add_argument("-c", "--column", help="Header of the merged column (default: NOTES)")
    parser.add_argument(
        "--keep-formatting",
        action="store_true",
        default=None,
        help="Write into a copy of the source workbook, keeping styles and column widths",
    )
    parser.add_argument(
        "--preview-rows", type=int, help="Number of processed rows to preview (default: 3)"
    )
    parser.add_argument(
        "--no-preview", action="store_true", help="Do not print the processed rows"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from MERGESPLIT_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_summary(
    console: Console, resolved: ResolvedSheet, output_path: Path, preview_rows: int
) -> None:
    """Print the row/column summary and a preview of the processed rows."""
    console.print(f"\nProcessed {resolved.row_count} rows")
    console.print(f"Headers: {escape(', '.join(resolved.headers))}")

    if preview_rows > 0:
        console.print(f"\nPreview of processed data (first {preview_rows} rows):")
        for index, row in enumerate(resolved.preview(preview_rows), start=1):
            console.print(f"Row {index}:")
            console.print_json(data=row, default=str)

    console.print(
        f"\n[green]✓[/green] Successfully processed file. "
        f"Output saved to: {escape(str(output_path))}"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    console = Console(soft_wrap=True, highlight=False)
    err_console = Console(stderr=True, soft_wrap=True, highlight=False)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if not args.input_file:
            raise UsageError("missing input file")

        config = Config.from_env()
        overrides = {}
        if args.column:
            overrides["target_column"] = args.column
        if args.keep_formatting:
            overrides["preserve_formatting"] = True
        if args.preview_rows is not None:
            overrides["preview_rows"] = max(args.preview_rows, 0)
        if args.no_preview:
            overrides["preview_rows"] = 0
        if args.log_level:
            overrides["log_level"] = args.log_level

        splitter = MergeSplit(config, **overrides)

        input_path = Path(args.input_file)
        if args.output_file:
            output_path = Path(args.output_file)
        else:
            output_path = splitter.output_path_for(input_path)

        console.print(f"Reading Excel file: {escape(str(input_path))}")
        resolved = splitter.process(input_path, output_path)
    except UsageError:
        console.print(escape(parser.format_usage().strip()))
        console.print(USAGE_EXAMPLE)
        return 1
    except MergeSplitError as e:
        err_console.print(f"[red]Error processing file:[/red] {escape(str(e))}")
        return 1

    print_summary(console, resolved, output_path, splitter.config.preview_rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
