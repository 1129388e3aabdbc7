"""Pytest configuration and shared fixtures."""

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from aurumx.data.feed import PriceFeed
from aurumx.data.models import Candle

FIVE_MINUTES_MS = 5 * 60 * 1000
BASE_TS = 1_700_000_000_000


def make_candle(
    index: int,
    open: float,
    high: float,
    low: float,
    close: float,
    volume: float = 100.0,
) -> Candle:
    """Candle at the given 5-minute slot."""
    return Candle(
        timestamp=BASE_TS + index * FIVE_MINUTES_MS,
        open=open,
        high=high,
        low=low,
        close=close,
        volume=volume,
    )


def flat_candles(
    count: int,
    price: float = 2000.0,
    spread: float = 2.0,
    volume: float = 100.0,
    start: int = 0,
) -> list[Candle]:
    """Quiet market: open == close == price, range of +/- spread."""
    return [
        make_candle(start + i, price, price + spread, price - spread, price, volume)
        for i in range(count)
    ]


def raw_bar(index: int, close: float = 2000.0, volume: float = 100.0) -> dict[str, Any]:
    """Raw feed bar for the given 5-minute slot."""
    return {
        "t": BASE_TS + index * FIVE_MINUTES_MS,
        "o": close,
        "h": close + 1.0,
        "l": close - 1.0,
        "c": close,
        "v": volume,
    }


class ScriptedFeed(PriceFeed):
    """Price feed replaying a script of results.

    Each fetch_latest call consumes the next item; the last item repeats.
    Exception instances are raised instead of returned.
    """

    def __init__(
        self,
        latest: list[Any] | None = None,
        history: list[dict[str, Any]] | Exception | None = None,
    ) -> None:
        self.latest_script = list(latest or [None])
        self.history = history if history is not None else []
        self.latest_calls = 0
        self.range_calls: list[tuple[datetime, datetime]] = []

    async def fetch_range(
        self,
        symbol: str,
        interval: str,
        start: datetime,
        end: datetime,
    ) -> list[dict[str, Any]]:
        self.range_calls.append((start, end))
        if isinstance(self.history, Exception):
            raise self.history
        return list(self.history)

    async def fetch_latest(self, symbol: str, interval: str) -> dict[str, Any] | None:
        self.latest_calls += 1
        if len(self.latest_script) > 1:
            item = self.latest_script.pop(0)
        else:
            item = self.latest_script[0]
        if isinstance(item, Exception):
            raise item
        return item


async def wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Yield to the event loop until predicate() holds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(0.002)


@pytest.fixture
def sample_ohlcv():
    """Sample raw OHLCV bars."""
    return [raw_bar(0, 2000.0), raw_bar(1, 2001.5, 120.0), raw_bar(2, 1999.0, 90.0)]
