"""Signal engine - runs every analyzer over the current candle window."""

import logging
from collections.abc import Sequence

from aurumx.config import StrategyConfig
from aurumx.data.models import Candle
from aurumx.strategy.signals.base import SignalAnalyzer
from aurumx.strategy.signals.breakout import BreakoutAnalyzer
from aurumx.strategy.signals.deep_value import DeepValueAnalyzer
from aurumx.strategy.signals.reversal import ReversalAnalyzer
from aurumx.strategy.signals.types import Signal

logger = logging.getLogger(__name__)


def default_analyzers(config: StrategyConfig | None = None) -> list[SignalAnalyzer]:
    """Build the deep value, breakout and reversal analyzers, in that order."""
    config = config or StrategyConfig()
    return [
        DeepValueAnalyzer(
            lookback=config.deep_value_lookback,
            min_drop=config.deep_value_min_drop,
            min_recovery=config.deep_value_min_recovery,
        ),
        BreakoutAnalyzer(
            lookback=config.breakout_lookback,
            min_strength=config.breakout_min_strength,
        ),
        ReversalAnalyzer(
            lookback=config.reversal_lookback,
            min_strength=config.reversal_min_strength,
        ),
    ]


class SignalEngine:
    """Evaluates independent analyzers over a candle window.

    Owns no mutable state: every call sees only the window passed in.
    """

    def __init__(self, analyzers: Sequence[SignalAnalyzer] | None = None) -> None:
        self._analyzers = tuple(analyzers) if analyzers is not None else tuple(default_analyzers())

    @property
    def analyzers(self) -> tuple[SignalAnalyzer, ...]:
        return self._analyzers

    @property
    def max_lookback(self) -> int:
        """Largest lookback of any analyzer."""
        return max((a.lookback for a in self._analyzers), default=0)

    def evaluate(self, candles: Sequence[Candle]) -> list[Signal]:
        """Run every analyzer, collecting at most one signal from each.

        Args:
            candles: Time-ascending candles, newest last

        Returns:
            Signals in analyzer order (0 to len(analyzers))
        """
        signals: list[Signal] = []
        for analyzer in self._analyzers:
            try:
                signal = analyzer.analyze(candles)
            except Exception as e:
                logger.error(f"Analyzer {analyzer.name} failed: {e}")
                continue
            if signal is not None:
                signals.append(signal)
        return signals
