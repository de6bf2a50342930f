"""
Product Viewer.

A Textual-based terminal UI for browsing a JSON product catalog as a table
with a single selected row.

Usage:
    python -m product_viewer data/product.json

Components:
    - JSONLoader: Reads and validates the catalog
    - SelectionState: Selected row with wrap-around navigation
    - ProductViewerApp: Main application class
    - ProductListScreen: The product table screen
"""
