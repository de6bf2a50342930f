"""
Abstract base class for product data loaders.

This module defines the DataLoader interface that the viewer reads its
catalog through, keeping the decoding library behind a narrow surface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from product_viewer.data_formats.product_schema import Product


class DataLoader(ABC):
    """Abstract base class for loading product catalogs.

    Loaders decode the whole document before returning anything, so a
    malformed file never produces a partial result.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'json')."""
        pass

    @abstractmethod
    def load_all(self, filename: str) -> tuple[Product, ...]:
        """Load every product from file.

        Args:
            filename: Path to the file.

        Returns:
            All products in document order.

        Raises:
            RecordIOError: If the file cannot be opened or read.
            RecordDecodeError: If the content is invalid.
        """
        pass
