"""Ticker display widget."""

from textual.app import ComposeResult
from textual.widgets import DataTable, Static


class TickerWidget(Static):
    """Latest price and feed state."""

    DEFAULT_CSS = """
    TickerWidget {
        height: auto;
    }

    DataTable {
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the ticker widget."""
        yield DataTable(id="ticker-table")

    def on_mount(self) -> None:
        """Initialize the ticker table."""
        table = self.query_one("#ticker-table", DataTable)
        table.add_columns("Symbol", "Price", "Feed", "Candles")
        table.add_row("--", "--", "--", "--")

    def update_ticker(self, symbol: str, price: str, feed_state: str, candles: str) -> None:
        """Update ticker data."""
        table = self.query_one("#ticker-table", DataTable)
        # Clear and re-add (single symbol)
        table.clear()
        table.add_row(symbol, price, feed_state, candles)
