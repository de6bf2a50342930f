"""
Selection state for the product table.

SelectionState owns the loaded products and the single highlighted row.
The index wraps around at both ends and is never out of range while there
are products; with no products it stays None and navigation does nothing.
"""

from __future__ import annotations

from typing import Sequence

from product_viewer.data_formats import Product


class SelectionState:
    """The products shown by the viewer and the currently selected row."""

    def __init__(self, products: Sequence[Product]) -> None:
        self.products: tuple[Product, ...] = tuple(products)
        self.selected: int | None = 0 if self.products else None

    def __len__(self) -> int:
        return len(self.products)

    def advance(self) -> None:
        """Move the selection down one row, wrapping from the last to the first."""
        if not self.products:
            return
        if self.selected is None or self.selected >= len(self.products) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def retreat(self) -> None:
        """Move the selection up one row, wrapping from the first to the last."""
        if not self.products:
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.products) - 1
        else:
            self.selected -= 1

    @property
    def selected_product(self) -> Product | None:
        """Get the currently selected product."""
        if self.selected is None:
            return None
        return self.products[self.selected]
