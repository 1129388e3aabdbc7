"""Signal type definitions."""

from dataclasses import dataclass
from datetime import UTC, datetime

from aurumx.core.types import Side, SignalType, Strategy


@dataclass(frozen=True)
class Signal:
    """A single trade recommendation.

    Signals are immutable - once created, they describe the setup seen on
    the candle that produced them.
    """

    signal_type: SignalType
    strategy: Strategy
    price: float  # Entry price
    stop_loss: float
    take_profit_1: float  # 1:1 reward/risk
    take_profit_2: float  # Extended target
    timestamp: int  # Candle open time, epoch milliseconds
    reason: str = ""
    side: Side = Side.LONG

    @property
    def is_short(self) -> bool:
        return self.side == Side.SHORT

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=UTC)
