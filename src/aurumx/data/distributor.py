"""Streaming price distributor.

Polls the latest candle from a price feed and fans it out to subscribers.
Features:
- Deduplication by candle timestamp
- Replay of the latest candle to new subscribers
- Capped exponential backoff on feed failures
- Explicit lifecycle owned by the caller (start / disconnect)
"""

import asyncio
import contextlib
import itertools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

from aurumx.core.errors import ExhaustedRetryError, FeedError, TransientFeedError
from aurumx.core.types import DistributorState
from aurumx.data.feed import PriceFeed
from aurumx.data.models import Candle

logger = logging.getLogger(__name__)

CandleCallback = Callable[[Candle], None]
T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Backoff schedule for feed failures."""

    max_attempts: int = 3
    base_delay: float = 1.0  # Initial delay in seconds
    multiplier: float = 2.0  # Exponential backoff multiplier
    max_delay: float = 30.0  # Maximum delay in seconds

    def delay(self, attempt: int) -> float:
        """Delay before retrying after the given failed attempt (1-based)."""
        return min(self.base_delay * self.multiplier ** (attempt - 1), self.max_delay)


class Subscription:
    """Handle for a registered subscriber.

    Calling the subscription unsubscribes it. Repeated calls are no-ops.
    """

    def __init__(self, handle: int, distributor: "PriceDistributor | None") -> None:
        self._handle = handle
        self._distributor = distributor

    @property
    def handle(self) -> int:
        return self._handle

    @property
    def active(self) -> bool:
        return self._distributor is not None and self._distributor._has_subscriber(self._handle)

    def __call__(self) -> None:
        if self._distributor is not None:
            self._distributor._unsubscribe(self._handle)
            self._distributor = None


class PriceDistributor:
    """Deduplicated stream of the latest candle for one instrument.

    Exactly one polling task runs per instance, so polls never overlap and
    candles reach subscribers in ascending timestamp order.
    """

    def __init__(
        self,
        feed: PriceFeed,
        symbol: str,
        interval: str = "5m",
        poll_interval: float = 5.0,
        retry: RetryPolicy | None = None,
    ) -> None:
        """Initialize price distributor.

        Args:
            feed: Price feed adapter
            symbol: Instrument identifier (e.g., "XAUUSDT")
            interval: Candle interval requested from the feed
            poll_interval: Seconds between polls while active
            retry: Backoff schedule for feed failures
        """
        self._feed = feed
        self._symbol = symbol
        self._interval = interval
        self._poll_interval = poll_interval
        self._retry = retry or RetryPolicy()

        self._state = DistributorState.IDLE
        self._task: asyncio.Task | None = None
        self._subscribers: dict[int, CandleCallback] = {}
        self._handles = itertools.count(1)
        self._latest: Candle | None = None
        self._last_error: FeedError | None = None
        self._last_update: datetime | None = None

    @property
    def state(self) -> DistributorState:
        return self._state

    @property
    def latest(self) -> Candle | None:
        """Most recently delivered candle."""
        return self._latest

    @property
    def last_update(self) -> datetime | None:
        """Wall-clock time of the last delivered candle."""
        return self._last_update

    @property
    def last_error(self) -> FeedError | None:
        return self._last_error

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def get_historical_data(self, start: datetime, end: datetime) -> list[Candle]:
        """Fetch candles for a time range.

        Feed failures are logged and yield an empty list; callers treat an
        empty result as "no data yet".

        Args:
            start: Range start
            end: Range end

        Returns:
            Candles ascending by timestamp
        """
        try:
            raw_bars = await self._call_feed(
                self._feed.fetch_range(self._symbol, self._interval, start, end)
            )
            candles = [Candle.from_raw(raw) for raw in raw_bars]
        except FeedError as e:
            logger.error(f"Error fetching historical data: {e}")
            return []

        candles.sort(key=lambda c: c.timestamp)
        logger.info(f"Loaded {len(candles)} historical {self._interval} candles for {self._symbol}")
        return candles

    def subscribe(self, callback: CandleCallback) -> Subscription:
        """Register a callback for every newly observed candle.

        If a candle has already been observed, the callback receives it
        immediately.

        Args:
            callback: Function called with each new Candle

        Returns:
            Subscription; call it to unsubscribe
        """
        if self._state == DistributorState.STOPPED:
            logger.warning("Subscribe on stopped distributor ignored")
            return Subscription(0, None)

        handle = next(self._handles)
        self._subscribers[handle] = callback
        logger.debug(f"Subscriber #{handle} registered ({len(self._subscribers)} total)")

        if self._latest is not None:
            self._deliver(handle, callback, self._latest)

        return Subscription(handle, self)

    def _unsubscribe(self, handle: int) -> None:
        if self._subscribers.pop(handle, None) is not None:
            logger.debug(f"Subscriber #{handle} removed ({len(self._subscribers)} remaining)")

    def _has_subscriber(self, handle: int) -> bool:
        return handle in self._subscribers

    def start(self) -> None:
        """Start polling.

        Also restarts a distributor that went idle after exhausting retries.

        Raises:
            RuntimeError: If the distributor has been disconnected
        """
        if self._state == DistributorState.STOPPED:
            raise RuntimeError("Distributor is stopped; create a new instance")
        if self.is_running:
            return

        self._last_error = None
        self._state = DistributorState.INITIALIZING
        self._task = asyncio.create_task(self._run())
        logger.info(
            f"Price distributor started for {self._symbol} {self._interval} "
            f"(poll every {self._poll_interval}s)"
        )

    def disconnect(self) -> None:
        """Stop polling and clear subscribers. Safe to call from any state."""
        if self._state == DistributorState.STOPPED:
            return

        if self._task is not None:
            self._task.cancel()
        self._subscribers.clear()
        self._state = DistributorState.STOPPED
        logger.info("Price distributor disconnected")

    async def stop(self) -> None:
        """Disconnect and wait for the polling task to finish."""
        task = self._task
        self.disconnect()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task
            self._task = None

    async def _run(self) -> None:
        """Polling loop: initialize, poll while healthy, back off on failure."""
        attempt = 0

        while True:
            self._set_state(DistributorState.INITIALIZING)
            try:
                await self._poll_once()
                attempt = 0
                self._set_state(DistributorState.ACTIVE)

                while True:
                    await asyncio.sleep(self._poll_interval)
                    await self._poll_once()

            except FeedError as e:
                attempt += 1
                if attempt >= self._retry.max_attempts:
                    self._last_error = ExhaustedRetryError(attempt, e)
                    self._set_state(DistributorState.IDLE)
                    logger.error(f"{self._last_error}. Polling halted until restarted")
                    return

                delay = self._retry.delay(attempt)
                self._last_error = e
                self._set_state(DistributorState.RETRYING)
                logger.warning(
                    f"Price feed error: {e}. Retrying in {delay:.1f}s "
                    f"(attempt {attempt}/{self._retry.max_attempts})..."
                )
                await asyncio.sleep(delay)

    def _set_state(self, state: DistributorState) -> None:
        # A subscriber may disconnect mid-delivery; STOPPED is terminal
        if self._state != DistributorState.STOPPED:
            self._state = state

    async def _call_feed(self, call: Awaitable[T]) -> T:
        """Await a feed call, reporting any failure as a FeedError."""
        try:
            return await call
        except FeedError:
            raise
        except Exception as e:
            raise TransientFeedError(f"Price feed call failed: {e!r}") from e

    async def _poll_once(self) -> None:
        raw = await self._call_feed(self._feed.fetch_latest(self._symbol, self._interval))
        if raw is None:
            logger.debug("No completed candle available yet")
            return
        self._publish(Candle.from_raw(raw))

    def _publish(self, candle: Candle) -> None:
        """Store and broadcast a candle only if it is newer than the last delivered one."""
        if self._latest is not None and candle.timestamp <= self._latest.timestamp:
            logger.debug(
                f"Candle {candle.timestamp} does not advance past "
                f"{self._latest.timestamp}, dropped"
            )
            return

        self._latest = candle
        self._last_update = datetime.now()
        for handle, callback in list(self._subscribers.items()):
            if handle in self._subscribers:
                self._deliver(handle, callback, candle)

    @staticmethod
    def _deliver(handle: int, callback: CandleCallback, candle: Candle) -> None:
        try:
            callback(candle)
        except Exception as e:
            logger.error(f"Error in subscriber #{handle}: {e}")
