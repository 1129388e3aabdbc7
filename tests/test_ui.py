"""Test TUI formatting and dashboard refresh."""

import pytest

pytest.importorskip("textual")

from conftest import BASE_TS, ScriptedFeed  # noqa: E402
from textual.widgets import DataTable  # noqa: E402

from aurumx.bot import SignalBot  # noqa: E402
from aurumx.config import Config  # noqa: E402
from aurumx.core.types import Side, SignalType, Strategy  # noqa: E402
from aurumx.strategy.signals.types import Signal  # noqa: E402
from aurumx.ui.app import SignalApp  # noqa: E402
from aurumx.ui.widgets.signals import format_signal_row  # noqa: E402


class TestFormatSignalRow:
    """Test format_signal_row."""

    def test_long_entry(self):
        signal = Signal(
            signal_type=SignalType.ENTRY,
            strategy=Strategy.MONTHLY_INCOME,
            price=2015.0,
            stop_loss=2005.0,
            take_profit_1=2025.0,
            take_profit_2=2035.0,
            timestamp=BASE_TS,
            reason="Strong breakout with volume confirmation",
        )

        row = format_signal_row(signal)

        assert row == (
            "22:13",
            "Monthly Income Strategy",
            "[green]ENTRY LONG[/]",
            "$2015.00",
            "$2005.00",
            "$2025.00",
            "$2035.00",
            "Strong breakout with volume confirmation",
        )

    def test_short_entry_is_red(self):
        signal = Signal(
            signal_type=SignalType.ENTRY,
            strategy=Strategy.REVERSAL,
            price=1996.0,
            stop_loss=2010.0,
            take_profit_1=1982.0,
            take_profit_2=1968.0,
            timestamp=BASE_TS,
            side=Side.SHORT,
        )

        row = format_signal_row(signal)

        assert row[1] == "Reversal Strategy"
        assert row[2].startswith("[red]")
        assert "SHORT" in row[2]


class TestSignalApp:
    """Test the dashboard against an idle bot."""

    @pytest.mark.asyncio
    async def test_refresh_shows_ticker_and_empty_signals(self):
        bot = SignalBot(Config(), feed=ScriptedFeed())
        app = SignalApp(bot, refresh_interval=60.0)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("r")
            await pilot.pause()

            ticker = app.screen.query_one("#ticker-table", DataTable)
            assert ticker.get_row_at(0) == ["XAUUSDT", "--", "idle", "0/288"]

            signals = app.screen.query_one("#signals-table", DataTable)
            assert signals.row_count == 1
            assert "No trading signals" in signals.get_row_at(0)[1]

            # Feed never started, so health reports degraded
            assert app.sub_title.startswith("Gold Price Signals | degraded | up ")
