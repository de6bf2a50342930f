"""
Product List Screen for the product viewer.

Displays the loaded products in a bordered table titled "Product Details".
Up/Down move the selection with wrap-around, q quits, every other key is
ignored.
"""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen

from product_viewer.tui.keys import KeyAction, LoopState, handle_key, resolve_key
from product_viewer.tui.selection import SelectionState
from product_viewer.tui.widgets import ProductTable


class ProductListScreen(Screen):
    """Screen that displays the product catalog in a ProductTable."""

    CSS = """
    ProductListScreen {
        layout: vertical;
    }
    """

    # Drop Screen's focus bindings; only the keys below do anything
    inherit_bindings = False

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("Q", "quit", "Quit", show=False),
        Binding("shift+q", "quit", "Quit", show=False),
        Binding("down", "advance", "Down", show=False),
        Binding("up", "retreat", "Up", show=False),
    ]

    def __init__(
        self,
        state: SelectionState,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the ProductListScreen.

        Args:
            state: The products and selection shared with the app.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._state = state

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield ProductTable(self._state, id="product-table")

    def on_mount(self) -> None:
        """Title the frame and draw the initial selection."""
        table = self.query_one("#product-table", ProductTable)
        table.border_title = "Product Details"
        if not self._state.products:
            table.border_subtitle = "No products found"
        table.draw()

    def _dispatch(self, key: str) -> None:
        """Apply a key to the selection, then redraw or exit."""
        if handle_key(self._state, key) is LoopState.STOPPED:
            self.app.exit(return_code=0)
            return

        self.query_one("#product-table", ProductTable).draw()

    def action_quit(self) -> None:
        """Quit the application."""
        self._dispatch("q")

    def action_advance(self) -> None:
        """Select the next product, wrapping to the first."""
        self._dispatch("down")

    def action_retreat(self) -> None:
        """Select the previous product, wrapping to the last."""
        self._dispatch("up")

    def on_key(self, event: events.Key) -> None:
        """Swallow keys that have no binding on this screen."""
        if resolve_key(event.key) is KeyAction.IGNORE:
            event.stop()
            event.prevent_default()

    @property
    def record_count(self) -> int:
        """Return the number of loaded products."""
        return len(self._state)
