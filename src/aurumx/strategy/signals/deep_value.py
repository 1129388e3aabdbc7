"""Deep value signal.

Buys after a significant drop when the current candle closes near its
high, i.e. a strong recovery off the recent low.
"""

import logging
import math
from collections.abc import Sequence

from aurumx.core.types import Side, SignalType, Strategy
from aurumx.data.models import Candle
from aurumx.strategy.signals.base import SignalAnalyzer
from aurumx.strategy.signals.types import Signal

logger = logging.getLogger(__name__)


def recovery_strength(candle: Candle) -> float:
    """Fraction of the candle's range recovered by the close.

    A zero-range candle has no recovery.
    """
    if candle.range <= 0:
        return 0.0
    return (candle.close - candle.low) / candle.range


class DeepValueAnalyzer(SignalAnalyzer):
    """Detects a significant drop followed by a strong recovery candle.

    Uses a 12-candle lookback by default (1 hour of 5m candles).
    """

    def __init__(
        self,
        lookback: int = 12,
        min_drop: float = 0.005,
        min_recovery: float = 0.7,
    ) -> None:
        """Initialize deep value analyzer.

        Args:
            lookback: Candles to scan for the recent low, current included
            min_drop: Minimum drop from current high to recent low (0.005 = 0.5%)
            min_recovery: Minimum recovery strength of the current candle
        """
        super().__init__(name="deep_value", lookback=lookback)
        self._min_drop = min_drop
        self._min_recovery = min_recovery

    def _evaluate(self, window: Sequence[Candle]) -> Signal | None:
        current = window[-1]
        if current.high <= 0:
            return None

        recent_low = min(c.low for c in window)
        drop = (current.high - recent_low) / current.high
        strength = recovery_strength(current)

        if drop <= self._min_drop or strength <= self._min_recovery:
            return None

        stop_loss = math.floor(recent_low * 100) / 100
        entry = current.close
        risk = entry - stop_loss

        logger.debug(
            f"[{self._name}] drop={drop:.4%} recovery={strength:.2f} "
            f"recent_low={recent_low:.2f}"
        )
        return Signal(
            signal_type=SignalType.ENTRY,
            strategy=Strategy.DEEP_VALUE,
            price=entry,
            stop_loss=stop_loss,
            take_profit_1=entry + risk,
            take_profit_2=entry + risk * 1.5,
            timestamp=current.timestamp,
            reason="Significant drop with strong recovery candle detected",
            side=Side.LONG,
        )
