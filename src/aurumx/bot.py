"""Signal bot - wires the price distributor to the signal engine.

The bot:
1. Loads recent history into a bounded candle window
2. Subscribes to the price distributor for new candles
3. Evaluates every analyzer on each new candle
4. Keeps the most recent signals for the presentation layer
"""

import asyncio
import logging
from datetime import datetime, timedelta

from aurumx.config import Config
from aurumx.core.health import HealthMonitor
from aurumx.core.signal_board import SignalBoard
from aurumx.core.types import DistributorState
from aurumx.data.binance.rest import BinanceKlineFeed
from aurumx.data.distributor import PriceDistributor, RetryPolicy, Subscription
from aurumx.data.feed import PriceFeed
from aurumx.data.models import Candle, CandleWindow
from aurumx.strategy.signals.engine import SignalEngine, default_analyzers
from aurumx.strategy.signals.types import Signal

logger = logging.getLogger(__name__)


class SignalBot:
    """Owns the distributor, candle window, signal engine and signal board."""

    def __init__(self, config: Config, feed: PriceFeed | None = None) -> None:
        """Initialize signal bot.

        Args:
            config: Application configuration
            feed: Price feed adapter (default: Binance klines)
        """
        self._config = config
        self._feed = feed or BinanceKlineFeed(
            api_key=config.api.binance_api_key,
            api_secret=config.api.binance_api_secret,
        )
        self._distributor = PriceDistributor(
            feed=self._feed,
            symbol=config.feed.symbol,
            interval=config.feed.interval,
            poll_interval=config.feed.poll_interval,
            retry=RetryPolicy(
                max_attempts=config.retry.max_attempts,
                base_delay=config.retry.base_delay,
                multiplier=config.retry.multiplier,
                max_delay=config.retry.max_delay,
            ),
        )
        self._window = CandleWindow(capacity=config.feed.window_capacity)
        self._engine = SignalEngine(default_analyzers(config.strategy))
        self._board = SignalBoard(capacity=config.strategy.max_recent_signals)
        self._health = HealthMonitor(
            distributor=self._distributor,
            window=self._window,
            board=self._board,
            interval_seconds=config.health_interval,
        )

        self._subscription: Subscription | None = None
        self._running = False
        self._stopped = asyncio.Event()

    @property
    def symbol(self) -> str:
        return self._config.feed.symbol

    @property
    def distributor(self) -> PriceDistributor:
        return self._distributor

    @property
    def window(self) -> CandleWindow:
        return self._window

    @property
    def health(self) -> HealthMonitor:
        return self._health

    @property
    def signals(self) -> list[Signal]:
        """Recent signals, most recent first."""
        return self._board.items()

    @property
    def latest_price(self) -> float | None:
        latest = self._window.latest
        return latest.close if latest else None

    @property
    def distributor_state(self) -> DistributorState:
        return self._distributor.state

    async def start(self) -> None:
        """Start the bot and run until stop() is called."""
        await self.setup()
        await self._stopped.wait()

    async def setup(self) -> None:
        """Load history, subscribe to new candles and start polling."""
        if self._running:
            return
        self._running = True
        self._stopped.clear()

        feed_config = self._config.feed
        logger.info(f"Starting signal bot for {feed_config.symbol} ({feed_config.interval})")

        now = datetime.now()
        history = await self._distributor.get_historical_data(
            now - timedelta(hours=feed_config.history_hours), now
        )
        accepted = self._window.extend(history)
        if accepted:
            logger.info(f"Candle window primed with {accepted} candles")
        else:
            logger.warning("No historical candles loaded; signals wait for live data")

        self._subscription = self._distributor.subscribe(self._on_candle)
        self._distributor.start()
        await self._health.start()

    async def stop(self) -> None:
        """Stop polling and health checks. Safe to call more than once."""
        if not self._running:
            return
        self._running = False
        logger.info("Stopping signal bot...")

        if self._subscription is not None:
            self._subscription()
            self._subscription = None

        await self._health.stop()
        await self._distributor.stop()

        self._stopped.set()
        logger.info("Signal bot stopped")

    def _on_candle(self, candle: Candle) -> None:
        """Handle a new candle from the distributor."""
        if not self._window.append(candle):
            logger.debug(f"Candle {candle.timestamp} already in window, skipped")
            return

        signals = self._engine.evaluate(self._window.snapshot())
        if not signals:
            return

        self._board.add(signals)
        for signal in signals:
            logger.info(
                f"{signal.strategy.label} {signal.signal_type.value} ({signal.side.value}) "
                f"@ {signal.price:.2f} | SL {signal.stop_loss:.2f} | "
                f"TP1 {signal.take_profit_1:.2f} | TP2 {signal.take_profit_2:.2f} | "
                f"{signal.reason}"
            )
