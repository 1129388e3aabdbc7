"""Signal dashboard screen."""

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Static

from aurumx.ui.widgets import SignalsWidget, TickerWidget

STRATEGY_NOTES = (
    ("Deep Value Strategy", "Buys gold after significant drops with strong recovery signals"),
    ("Monthly Income Strategy", "Trades breakouts with volume confirmation"),
    ("Reversal Strategy", "Identifies failed breakouts and potential reversals"),
)


class DashboardScreen(Screen[None]):
    """Latest price, recent signals and strategy notes.

    Layout:
    ┌───────────────────────────────────────┐
    │              TICKER BAR               │
    ├───────────────────────────────────────┤
    │           TRADING SIGNALS             │
    ├────────────┬────────────┬─────────────┤
    │ DEEP VALUE │  BREAKOUT  │  REVERSAL   │
    └────────────┴────────────┴─────────────┘
    """

    CSS = """
    DashboardScreen {
        layout: grid;
        grid-size: 3 3;
        grid-gutter: 1;
        grid-rows: 3 1fr 5;
        padding: 0 1;
    }

    .panel {
        border: solid $primary-darken-2;
        padding: 0 1;
    }

    .panel-title {
        text-style: bold;
        color: $primary;
        height: 1;
    }

    #ticker-panel {
        column-span: 3;
        height: 3;
    }

    #signals-panel {
        column-span: 3;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the dashboard layout."""
        with Container(id="ticker-panel"):
            yield TickerWidget(id="ticker")

        with Container(id="signals-panel", classes="panel"):
            yield Static("Trading Signals", classes="panel-title")
            yield SignalsWidget(id="signals")

        for title, description in STRATEGY_NOTES:
            with Container(classes="panel"):
                yield Static(title, classes="panel-title")
                yield Static(description)

    @property
    def ticker_widget(self) -> TickerWidget:
        return self.query_one("#ticker", TickerWidget)

    @property
    def signals_widget(self) -> SignalsWidget:
        return self.query_one("#signals", SignalsWidget)
