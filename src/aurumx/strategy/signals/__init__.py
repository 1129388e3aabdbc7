"""Candle-window signal analyzers.

Each analyzer is stateless and inspects only the candles passed to it:
- Deep Value: significant drop followed by a strong recovery candle
- Monthly Income (Breakout): bullish close above resistance on rising volume
- Reversal: failed breakout faded with a short entry
"""

from aurumx.strategy.signals.base import SignalAnalyzer
from aurumx.strategy.signals.breakout import BreakoutAnalyzer
from aurumx.strategy.signals.deep_value import DeepValueAnalyzer, recovery_strength
from aurumx.strategy.signals.engine import SignalEngine, default_analyzers
from aurumx.strategy.signals.reversal import ReversalAnalyzer
from aurumx.strategy.signals.types import Signal

__all__ = [
    "BreakoutAnalyzer",
    "DeepValueAnalyzer",
    "ReversalAnalyzer",
    "Signal",
    "SignalAnalyzer",
    "SignalEngine",
    "default_analyzers",
    "recovery_strength",
]
