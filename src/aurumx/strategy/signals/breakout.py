"""Monthly income (breakout) signal.

Buys a bullish close above recent resistance with rising volume.
"""

import logging
from collections.abc import Sequence

from aurumx.core.types import Side, SignalType, Strategy
from aurumx.data.models import Candle
from aurumx.strategy.signals.base import SignalAnalyzer
from aurumx.strategy.signals.types import Signal

logger = logging.getLogger(__name__)


class BreakoutAnalyzer(SignalAnalyzer):
    """Detects a volume-confirmed breakout above the recent high.

    Resistance is the highest high of the candles before the current one.
    Uses a 24-candle lookback by default (2 hours of 5m candles).
    """

    def __init__(self, lookback: int = 24, min_strength: float = 0.001) -> None:
        """Initialize breakout analyzer.

        Args:
            lookback: Window size, current candle included
            min_strength: Minimum close above resistance (0.001 = 0.1%)
        """
        super().__init__(name="breakout", lookback=lookback)
        self._min_strength = min_strength

    def _evaluate(self, window: Sequence[Candle]) -> Signal | None:
        current = window[-1]
        reference = window[:-1]
        previous = reference[-1]

        recent_high = max(c.high for c in reference)
        if recent_high <= 0:
            return None

        strength = (current.close - recent_high) / recent_high
        if not (
            strength > self._min_strength
            and current.is_bullish
            and current.volume > previous.volume
        ):
            return None

        entry = current.close
        stop_loss = min(current.low, recent_high)
        risk = entry - stop_loss

        logger.debug(
            f"[{self._name}] strength={strength:.4%} resistance={recent_high:.2f} "
            f"volume={current.volume:.0f} vs {previous.volume:.0f}"
        )
        return Signal(
            signal_type=SignalType.ENTRY,
            strategy=Strategy.MONTHLY_INCOME,
            price=entry,
            stop_loss=stop_loss,
            take_profit_1=entry + risk,
            take_profit_2=entry + risk * 2,
            timestamp=current.timestamp,
            reason="Strong breakout with volume confirmation",
            side=Side.LONG,
        )
