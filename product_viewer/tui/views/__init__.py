"""TUI views for the product viewer."""

from product_viewer.tui.views.product_list import ProductListScreen

__all__ = ["ProductListScreen"]
