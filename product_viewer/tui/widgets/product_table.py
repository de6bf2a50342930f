"""
Product table widget.

A DataTable that draws a SelectionState: a marker column followed by the six
product columns, with the selected row highlighted and marked. The table
never moves its own cursor; the cursor always follows the selection.

Column widths are fixed shares of the available width:
    Title 25%, Brand 15%, Price 10%, Discount 10%, Rating 10%, Category 30%
"""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.widgets import DataTable

from product_viewer.tui.data_loader import TABLE_COLUMNS, get_row_cells
from product_viewer.tui.selection import SelectionState

MARKER = ">> "
MARKER_COLUMN = "marker"
COLUMN_PERCENTAGES: tuple[int, ...] = (25, 15, 10, 10, 10, 30)
ROW_HEIGHT = 2


def column_widths(available: int) -> list[int]:
    """Split the available width across the product columns.

    Args:
        available: Width in cells left for the product columns.

    Returns:
        One width per entry in TABLE_COLUMNS, each at least 1.

    Examples:
        >>> column_widths(100)
        [25, 15, 10, 10, 10, 30]
    """
    available = max(available, 0)
    return [max(available * pct // 100, 1) for pct in COLUMN_PERCENTAGES]


class ProductTable(DataTable):
    """DataTable bound to a SelectionState."""

    can_focus = False

    DEFAULT_CSS = """
    ProductTable {
        height: 1fr;
        margin: 2;
        border: solid white;
        border-title-align: left;
        color: white;
        background: $surface;
    }

    ProductTable > .datatable--header {
        background: $surface;
        color: yellow;
        text-style: none;
    }

    ProductTable > .datatable--cursor {
        background: $surface;
        color: yellow;
        text-style: reverse;
    }

    ProductTable > .datatable--hover {
        background: $surface;
    }
    """

    def __init__(
        self,
        state: SelectionState,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            state: The products and selection to draw.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes for the widget.
        """
        super().__init__(
            cursor_type="row",
            header_height=2,
            zebra_stripes=False,
            show_cursor=state.selected is not None,
            name=name,
            id=id,
            classes=classes,
        )
        self.state = state
        self._layout_width: int | None = None
        self._marked_row: int | None = None

    def _available_width(self) -> int:
        """Width left for the product columns after marker, padding and scrollbar."""
        padding = self.cell_padding * 2 * (len(TABLE_COLUMNS) + 1)
        scrollbar = self.styles.scrollbar_size_vertical
        return self.content_region.width - scrollbar - len(MARKER) - padding

    def draw(self) -> None:
        """Draw the table against the current selection."""
        width = self._available_width()
        if width != self._layout_width:
            self._rebuild(width)
        self._draw_selection()

    def _rebuild(self, width: int) -> None:
        """Recreate columns and rows for a new width."""
        self.clear(columns=True)
        self._layout_width = width
        self._marked_row = None

        self.add_column("", key=MARKER_COLUMN, width=len(MARKER))
        for (label, attribute), col_width in zip(TABLE_COLUMNS, column_widths(width)):
            self.add_column(label, key=attribute, width=col_width)

        for idx, product in enumerate(self.state.products):
            cells = [
                Text(cell, no_wrap=True, overflow="ellipsis")
                for cell in get_row_cells(product)
            ]
            self.add_row("", *cells, height=ROW_HEIGHT, key=str(idx))

    def _draw_selection(self) -> None:
        """Move the marker and cursor to the selected row."""
        selected = self.state.selected
        if self._marked_row is not None and self._marked_row != selected:
            self.update_cell(str(self._marked_row), MARKER_COLUMN, "")
            self._marked_row = None

        if selected is None:
            self.show_cursor = False
            return

        self.update_cell(str(selected), MARKER_COLUMN, MARKER)
        self._marked_row = selected
        self.move_cursor(row=selected)

    def on_resize(self, event: events.Resize) -> None:
        """Recompute column widths when the terminal size changes."""
        self.draw()

    def on_click(self, event: events.Click) -> None:
        """Ignore mouse clicks so only the keyboard moves the selection."""
        event.prevent_default()
