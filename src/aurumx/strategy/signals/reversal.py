"""Reversal signal.

Fades a failed breakout: the previous candle pushed above the swing high,
and the current candle closes back below the previous candle's low.
"""

import logging
from collections.abc import Sequence

from aurumx.core.types import Side, SignalType, Strategy
from aurumx.data.models import Candle
from aurumx.strategy.signals.base import SignalAnalyzer
from aurumx.strategy.signals.types import Signal

logger = logging.getLogger(__name__)


class ReversalAnalyzer(SignalAnalyzer):
    """Detects a failed breakout and signals a short entry.

    The swing high is the highest high before the breakout candle, so the
    breakout candle is never compared against itself.
    Uses a 12-candle lookback by default (1 hour of 5m candles).
    """

    def __init__(self, lookback: int = 12, min_strength: float = 0.001) -> None:
        """Initialize reversal analyzer.

        Args:
            lookback: Window size, current candle included (minimum 3)
            min_strength: Minimum drop from breakout high to close (0.001 = 0.1%)
        """
        if lookback < 3:
            raise ValueError(f"Reversal lookback must be at least 3, got {lookback}")
        super().__init__(name="reversal", lookback=lookback)
        self._min_strength = min_strength

    def _evaluate(self, window: Sequence[Candle]) -> Signal | None:
        current = window[-1]
        previous = window[-2]
        swing_high = max(c.high for c in window[:-2])

        false_breakout = previous.high > swing_high and current.close < previous.low
        if not false_breakout or previous.high <= 0:
            return None

        strength = (previous.high - current.close) / previous.high
        if strength <= self._min_strength:
            return None

        entry = current.close
        stop_loss = max(current.high, previous.high)
        risk = stop_loss - entry

        logger.debug(
            f"[{self._name}] strength={strength:.4%} swing_high={swing_high:.2f} "
            f"breakout_high={previous.high:.2f}"
        )
        return Signal(
            signal_type=SignalType.ENTRY,
            strategy=Strategy.REVERSAL,
            price=entry,
            stop_loss=stop_loss,
            take_profit_1=entry - risk,
            take_profit_2=entry - risk * 2,
            timestamp=current.timestamp,
            reason="Failed breakout with strong reversal",
            side=Side.SHORT,
        )
