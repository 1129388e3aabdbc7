"""Data models for market data."""

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from aurumx.core.errors import MalformedDataError


class RawBar(BaseModel):
    """Raw OHLCV bar as returned by a price feed."""

    t: int = Field(..., ge=0, description="Open time, epoch milliseconds")
    o: float = Field(..., description="Open price")
    h: float = Field(..., description="High price")
    l: float = Field(..., description="Low price")  # noqa: E741
    c: float = Field(..., description="Close price")
    v: float = Field(..., ge=0, description="Volume")

    model_config = {"frozen": True}


@dataclass(frozen=True)
class Candle:
    """One sampling interval of trading activity."""

    timestamp: int  # epoch milliseconds
    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self) -> None:
        body_low = min(self.open, self.close)
        body_high = max(self.open, self.close)
        if not (self.low <= body_low <= body_high <= self.high):
            raise MalformedDataError(
                f"Inconsistent candle at {self.timestamp}: "
                f"o={self.open} h={self.high} l={self.low} c={self.close}"
            )
        if self.volume < 0:
            raise MalformedDataError(f"Negative volume at {self.timestamp}: {self.volume}")

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Candle":
        """Normalize a raw feed bar into a Candle.

        Raises:
            MalformedDataError: If a field is missing, non-numeric, or the
                bar violates the OHLC invariant.
        """
        try:
            bar = RawBar.model_validate(raw)
        except ValidationError as e:
            raise MalformedDataError(f"Malformed bar {raw!r}: {e.error_count()} error(s)") from e

        return cls(
            timestamp=bar.t,
            open=bar.o,
            high=bar.h,
            low=bar.l,
            close=bar.c,
            volume=bar.v,
        )

    @property
    def is_bullish(self) -> bool:
        return self.close > self.open

    @property
    def range(self) -> float:
        return self.high - self.low


class CandleWindow:
    """Bounded, time-ascending sliding window of candles.

    Only candles strictly newer than the newest held candle are accepted,
    so the window never holds duplicates or out-of-order bars. The oldest
    candle is evicted once capacity is reached.
    """

    def __init__(self, capacity: int = 288) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._candles: deque[Candle] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._candles.maxlen or 0

    @property
    def latest(self) -> Candle | None:
        return self._candles[-1] if self._candles else None

    def append(self, candle: Candle) -> bool:
        """Append a candle if it is newer than the current latest.

        Returns:
            True if the candle was added, False if it was stale or a duplicate
        """
        latest = self.latest
        if latest is not None and candle.timestamp <= latest.timestamp:
            return False
        self._candles.append(candle)
        return True

    def extend(self, candles: Iterable[Candle]) -> int:
        """Append candles in order, returning how many were accepted."""
        return sum(1 for candle in candles if self.append(candle))

    def snapshot(self) -> tuple[Candle, ...]:
        """Immutable copy of the current window, oldest first."""
        return tuple(self._candles)

    def __len__(self) -> int:
        return len(self._candles)
