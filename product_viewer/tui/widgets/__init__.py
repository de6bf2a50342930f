"""TUI widgets for the product viewer."""

from product_viewer.tui.widgets.product_table import (
    COLUMN_PERCENTAGES,
    MARKER,
    ProductTable,
    column_widths,
)

__all__ = [
    # Product table
    "ProductTable",
    # Layout helpers
    "COLUMN_PERCENTAGES",
    "MARKER",
    "column_widths",
]
