"""AurumX Signals - Entry point.

This bot:
1. Loads 24 hours of candles for the configured instrument (TRADING_SYMBOL)
2. Polls the latest closed candle and deduplicates by timestamp
3. Runs three independent analyzers on every new candle
4. Keeps the five most recent signals for display

Strategies:
- Deep Value: significant drop followed by a strong recovery candle
- Monthly Income: volume-confirmed breakout above recent resistance
- Reversal: failed breakout faded with a short entry

Signals are advisory only; no orders are placed.
"""

import asyncio
import contextlib
import signal
import sys

from aurumx.bot import SignalBot
from aurumx.config import Config
from aurumx.logging import setup_logging

# TUI support - imported only when needed
TUI_AVAILABLE = False
SignalApp: type | None = None
try:
    from aurumx.ui.app import SignalApp as _SignalApp

    SignalApp = _SignalApp
    TUI_AVAILABLE = True
except ImportError:
    pass


async def main_async(use_tui: bool = False) -> None:
    """Async main entry point.

    Args:
        use_tui: Whether to start with TUI interface
    """
    config = Config.from_env()
    # Console output would garble the TUI; the log file is kept
    logger = setup_logging(config.log_level, console=not use_tui)

    bot = SignalBot(config)

    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("Shutdown signal received")
        asyncio.create_task(bot.stop())

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, shutdown_handler)

    try:
        if use_tui and SignalApp is not None:
            tui_app = SignalApp(bot=bot)

            bot_task = asyncio.create_task(bot.start())

            # Run TUI (blocks until quit)
            await tui_app.run_async()

            await bot.stop()
            bot_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await bot_task
        else:
            await bot.start()
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    finally:
        await bot.stop()


def main() -> None:
    """Application entry point."""
    use_tui = "--tui" in sys.argv or "-t" in sys.argv

    if use_tui and not TUI_AVAILABLE:
        print("TUI not available. Install with: pip install 'aurumx-signals[tui]'")
        sys.exit(1)

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(main_async(use_tui=use_tui))


if __name__ == "__main__":
    main()
