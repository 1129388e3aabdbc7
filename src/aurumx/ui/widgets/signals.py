"""Recent trading signals widget."""

from textual.app import ComposeResult
from textual.widgets import DataTable, Static

from aurumx.core.types import SignalType
from aurumx.strategy.signals.types import Signal

EMPTY_MESSAGE = "No trading signals available at the moment"


def format_signal_row(signal: Signal) -> tuple[str, ...]:
    """Format a signal as a table row."""
    color = "green" if signal.signal_type == SignalType.ENTRY and not signal.is_short else "red"
    return (
        f"{signal.time:%H:%M}",
        f"{signal.strategy.label} Strategy",
        f"[{color}]{signal.signal_type.value} {signal.side.value.upper()}[/]",
        f"${signal.price:.2f}",
        f"${signal.stop_loss:.2f}",
        f"${signal.take_profit_1:.2f}",
        f"${signal.take_profit_2:.2f}",
        signal.reason,
    )


class SignalsWidget(Static):
    """Most recent signals, newest first."""

    DEFAULT_CSS = """
    SignalsWidget {
        height: 100%;
        width: 100%;
    }

    DataTable {
        height: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the signals widget."""
        yield DataTable(id="signals-table")

    def on_mount(self) -> None:
        """Initialize the signals table."""
        table = self.query_one("#signals-table", DataTable)
        table.add_columns(
            "Time",
            "Strategy",
            "Signal",
            "Entry",
            "Stop Loss",
            "TP (1:1)",
            "TP (Extended)",
            "Reason",
        )
        self.update_signals([])

    def update_signals(self, signals: list[Signal]) -> None:
        """Replace displayed signals."""
        table = self.query_one("#signals-table", DataTable)
        table.clear()

        if not signals:
            table.add_row("", EMPTY_MESSAGE, "", "", "", "", "", "")
            return

        for signal in signals:
            table.add_row(*format_signal_row(signal))
