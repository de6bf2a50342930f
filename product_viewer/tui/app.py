"""
Main Textual application for the Product Viewer.

Loads the product catalog, then shows it as a table with a single selected
row. Up/Down move the selection with wrap-around and q quits.

Usage:
    python -m product_viewer                    # reads data/product.json
    python -m product_viewer path/to/catalog.json --log-file viewer.log
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from textual.app import App

from product_viewer.data_formats import Product
from product_viewer.errors import TerminalError, ViewerError
from product_viewer.log import DEFAULT_LEVEL, setup_logging
from product_viewer.tui.data_loader import DEFAULT_DATA_PATH, load_products
from product_viewer.tui.selection import SelectionState
from product_viewer.tui.views import ProductListScreen

logger = logging.getLogger(__name__)


class ProductViewerApp(App):
    """A Textual app for browsing a product catalog."""

    TITLE = "Product Viewer"

    ENABLE_COMMAND_PALETTE = False

    # Drop App defaults such as ctrl+q; the screen owns every binding
    inherit_bindings = False

    BINDINGS = []

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, products: Sequence[Product]):
        """Initialize the app with the loaded products.

        Args:
            products: The catalog in document order.
        """
        super().__init__()
        self.selection = SelectionState(products)

    def on_mount(self) -> None:
        """Show the product table."""
        self.push_screen(ProductListScreen(self.selection))


def run_viewer(app: App) -> None:
    """Run the app inside the terminal's application mode.

    Textual enters application mode (raw input, alternate screen, mouse
    capture, hidden cursor) when the run starts and restores the terminal
    on every exit path before ``run()`` returns or raises. Failures are
    reported only after that restore.

    Args:
        app: The app to run.

    Raises:
        TerminalError: If the run raised or ended with a non-zero return code.
    """
    logger.info("Starting terminal session")
    try:
        app.run()
    except Exception as e:
        logger.error("Terminal session failed", exc_info=True)
        raise TerminalError(f"Terminal session failed: {e}") from e
    finally:
        logger.info("Terminal session closed")

    if app.return_code:
        raise TerminalError(f"Terminal session exited with code {app.return_code}")


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, load the catalog and run the viewer."""
    parser = argparse.ArgumentParser(
        description="Browse a JSON product catalog in a terminal table. "
        "Use Up/Down to move the selection and q to quit."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_DATA_PATH,
        help=f"Path to the JSON product catalog (default: {DEFAULT_DATA_PATH})",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file (default: stderr, warnings only)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LEVEL,
        help="Log level name (default: $PRODUCT_VIEWER_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    # Load before touching the terminal so errors print on a normal screen
    try:
        products = load_products(args.path)
    except ViewerError as e:
        print(f"Error reading product data: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        run_viewer(ProductViewerApp(products))
    except TerminalError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
