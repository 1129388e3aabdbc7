"""Base class for candle-window analyzers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from aurumx.data.models import Candle
from aurumx.strategy.signals.types import Signal


class SignalAnalyzer(ABC):
    """Stateless pattern analyzer over a window of candles.

    Each analyzer:
    1. Declares the number of recent candles it needs (lookback)
    2. Holds only immutable thresholds, never state between calls
    3. Returns at most one signal per evaluation

    The same window always produces the same result. Windows shorter than
    the lookback return None: insufficient data is a normal "not yet".
    """

    def __init__(self, name: str, lookback: int) -> None:
        self._name = name
        self._lookback = lookback

    @property
    def name(self) -> str:
        """Analyzer name."""
        return self._name

    @property
    def lookback(self) -> int:
        """Number of most recent candles required."""
        return self._lookback

    def analyze(self, candles: Sequence[Candle]) -> Signal | None:
        """Evaluate the most recent candles.

        Args:
            candles: Time-ascending candles, newest last

        Returns:
            Signal if the pattern is present, None otherwise
        """
        if len(candles) < self._lookback:
            return None
        return self._evaluate(candles[-self._lookback :])

    @abstractmethod
    def _evaluate(self, window: Sequence[Candle]) -> Signal | None:
        """Evaluate exactly ``lookback`` candles, the current one last."""
        ...
