"""
Data loader utilities for the product catalog viewer.

This module is the viewer's single entry point for reading the catalog and
for turning a Product into the cells shown in the table.

Record Structure:
    See product_viewer.data_formats.product_schema for the full field list.
    The table shows title, brand, actual_price, discount, average_rating
    and category, in that order.
"""

from __future__ import annotations

from product_viewer.data_formats import JSONLoader, Product

DEFAULT_DATA_PATH = "data/product.json"

# Header label -> Product attribute, in display order
TABLE_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Title", "title"),
    ("Brand", "brand"),
    ("Price", "actual_price"),
    ("Discount", "discount"),
    ("Rating", "average_rating"),
    ("Category", "category"),
)


def load_products(filename: str = DEFAULT_DATA_PATH) -> tuple[Product, ...]:
    """Load the whole product catalog from a JSON file.

    Either every element decodes or the call fails; there is no partial
    result and the file is closed before returning.

    Args:
        filename: Path to the JSON catalog.

    Returns:
        The products in document order.

    Raises:
        RecordIOError: If the file cannot be opened or read.
        RecordDecodeError: If the file is not valid JSON or a record does
            not match the product schema.

    Examples:
        >>> products = load_products("data/product.json")
        >>> products[0].title
        'Solid Women Multicolor Track Pants'
    """
    return JSONLoader().load_all(filename)


def get_row_cells(product: Product) -> list[str]:
    """Return the table cells for a product, in TABLE_COLUMNS order.

    Examples:
        >>> get_row_cells(product)
        ['Solid Women Multicolor Track Pants', 'York', '2,999', '69% off', '3.9', ...]
    """
    return [getattr(product, attribute) for _, attribute in TABLE_COLUMNS]
