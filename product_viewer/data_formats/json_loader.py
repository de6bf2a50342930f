"""
JSON format data loader.

This module provides the JSONLoader class for loading product catalogs stored
as a JSON array of objects.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from product_viewer.data_formats.base import DataLoader
from product_viewer.data_formats.product_schema import Product, product_from_dict
from product_viewer.errors import RecordDecodeError, RecordIOError

logger = logging.getLogger(__name__)


class JSONLoader(DataLoader):
    """Data loader for JSON product catalogs.

    The file must contain an array of product objects: [{...}, {...}, ...].
    Unlike a generic JSON reader, a single top-level object is rejected, since
    the catalog is always a list.

    Attributes:
        format_name: Returns 'json'.
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "json"

    def _read_text(self, filename: str) -> str:
        """Read the whole file, mapping OS failures to RecordIOError."""
        try:
            with open(filename, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise RecordDecodeError(f"{filename} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise RecordIOError(filename, e.strerror or str(e)) from e

    def _load_json_data(self, filename: str) -> list[Any]:
        """Load the JSON file and return the top-level array.

        Args:
            filename: Path to the JSON file.

        Returns:
            The decoded array, elements not yet validated.

        Raises:
            RecordIOError: If the file cannot be opened or read.
            RecordDecodeError: If the file is not valid JSON or not an array.
        """
        text = self._read_text(filename)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordDecodeError(
                f"Invalid JSON in {filename} at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e

        if not isinstance(data, list):
            raise RecordDecodeError(
                f"{filename} must contain an array of products (got {type(data).__name__})"
            )
        return data

    def load_all(self, filename: str) -> tuple[Product, ...]:
        """Load all products from a JSON file into memory.

        Examples:
            >>> loader = JSONLoader()
            >>> products = loader.load_all("data/product.json")
            >>> print(f"Loaded {len(products)} products")
        """
        data = self._load_json_data(filename)
        products = tuple(product_from_dict(item, i) for i, item in enumerate(data))
        logger.info(
            "Loaded %d products from %s (%s)", len(products), filename, self.format_name
        )
        return products

