"""
Data formats module for loading product catalogs.

Usage:
    from product_viewer.data_formats import JSONLoader

    loader = JSONLoader()
    for product in loader.load_all("data/product.json"):
        print(product.title, product.actual_price)
"""

from product_viewer.data_formats.base import DataLoader
from product_viewer.data_formats.json_loader import JSONLoader
from product_viewer.data_formats.product_schema import (
    Product,
    json_key,
    product_from_dict,
)

__all__ = [
    # Base class
    "DataLoader",
    # Schema
    "Product",
    "json_key",
    "product_from_dict",
    # Loaders
    "JSONLoader",
]
