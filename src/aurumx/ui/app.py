"""Main Textual application."""

import asyncio
import contextlib
from typing import TYPE_CHECKING, Any

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header

from aurumx.ui.screens.dashboard import DashboardScreen

if TYPE_CHECKING:
    from aurumx.bot import SignalBot


class SignalApp(App[None]):
    """AurumX TUI showing the latest price and recent signals."""

    TITLE = "AurumX Algo"
    SUB_TITLE = "Gold Price Signals"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("r", "refresh", "Refresh"),
    ]

    SCREENS = {
        "dashboard": DashboardScreen,
    }

    def __init__(self, bot: "SignalBot", refresh_interval: float = 1.0, **kwargs: Any) -> None:
        """Initialize the signal app.

        Args:
            bot: Running signal bot to read from
            refresh_interval: Seconds between UI refreshes
        """
        super().__init__(**kwargs)
        self._bot = bot
        self._refresh_interval = refresh_interval
        self._update_task: asyncio.Task | None = None
        self._running = False

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header()
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("dashboard")
        self._running = True
        self._update_task = asyncio.create_task(self._update_loop())

    async def on_unmount(self) -> None:
        """Called when app is unmounted."""
        self._running = False
        if self._update_task:
            self._update_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._update_task

    async def action_refresh(self) -> None:
        """Refresh immediately."""
        self._update_ui()

    async def _update_loop(self) -> None:
        """Periodically update UI from the bot."""
        while self._running:
            try:
                self._update_ui()
            except Exception as e:
                self.log.error(f"UI update error: {e}")

            await asyncio.sleep(self._refresh_interval)

    def _update_ui(self) -> None:
        """Update all widgets with current bot state."""
        dashboard = self.get_screen("dashboard")
        if not isinstance(dashboard, DashboardScreen):
            return

        price = self._bot.latest_price
        window = self._bot.window
        dashboard.ticker_widget.update_ticker(
            symbol=self._bot.symbol,
            price=f"${price:.2f}" if price is not None else "--",
            feed_state=self._bot.distributor_state.value,
            candles=f"{len(window)}/{window.capacity}",
        )
        dashboard.signals_widget.update_signals(self._bot.signals)

        summary = self._bot.health.get_status_summary()
        health = "healthy" if summary["all_healthy"] else "degraded"
        self.sub_title = f"{self.SUB_TITLE} | {health} | up {summary['uptime']}"
