"""Basic usage example for MergeSplit."""

from pathlib import Path

from mergesplit import Config, MergeRegion, MergeSplit, SheetGrid, resolve


def split_file_example():
    """Resolve the merged NOTES column of a workbook and save the result."""
    splitter = MergeSplit(Config())

    # Example file path (you'll need to provide your own Excel file)
    file_path = Path("examples/data/inventory.xlsx")

    if not file_path.exists():
        print(f"Please add a sample file at: {file_path}")
        return

    print(f"Splitting merged notes in: {file_path}")
    print("-" * 50)

    result = splitter.process(file_path, file_path.with_name("inventory_processed.xlsx"))

    print(f"Sheet: {result.sheet_name}")
    print(f"Rows: {result.row_count}")
    print(f"Merges propagated: {result.merges_applied}")
    for index, row in enumerate(result.preview(3), 1):
        print(f"  Row {index}: {row}")


def in_memory_example():
    """Resolve a sheet already held in memory, without touching the disk."""
    sheet = SheetGrid(
        name="Inventory",
        rows=[
            ["PHOTO", "STYLE", "NOTES"],
            ["img1.png", "ST-100", "Fragile"],
            ["img2.png", "ST-101", None],
            ["img3.png", "ST-102", None],
        ],
    )
    merges = [MergeRegion(start_row=1, end_row=3, start_col=2, end_col=2)]

    result = resolve(sheet, merges, target_column="NOTES")

    for row in result.rows:
        print(f"  {row['STYLE']}: {row['NOTES']}")


def keep_formatting_example():
    """Write into a copy of the source workbook so styles and widths survive."""
    splitter = MergeSplit(Config(), preserve_formatting=True, target_column="REMARKS")

    file_path = Path("examples/data/styled_inventory.xlsx")
    if not file_path.exists():
        print(f"Please add a sample file at: {file_path}")
        return

    splitter.process(file_path, file_path.with_name("styled_inventory_processed.xlsx"))


if __name__ == "__main__":
    print("=== In-memory resolution ===")
    in_memory_example()

    print("\n=== File processing ===")
    split_file_example()

    print("\n=== Keeping formatting ===")
    keep_formatting_example()
