"""Test signal engine and recent-signal board."""

import random

import pytest
from conftest import make_candle
from test_signals import breakout_window, deep_value_window, reversal_window

from aurumx.config import StrategyConfig
from aurumx.core.signal_board import SignalBoard
from aurumx.core.types import SignalType, Strategy
from aurumx.strategy.signals import (
    BreakoutAnalyzer,
    DeepValueAnalyzer,
    ReversalAnalyzer,
    Signal,
    SignalAnalyzer,
    SignalEngine,
    default_analyzers,
)


def random_walk_window(rng: random.Random, length: int = 24):
    """Valid candles following a random walk around 2000."""
    candles = []
    price = 2000.0
    for i in range(length):
        open_ = price
        close = open_ + rng.uniform(-8.0, 8.0)
        high = max(open_, close) + rng.uniform(0.0, 6.0)
        low = min(open_, close) - rng.uniform(0.0, 6.0)
        candles.append(make_candle(i, open_, high, low, close, volume=rng.uniform(50, 500)))
        price = close
    return candles


def make_signal(timestamp: int, strategy: Strategy = Strategy.DEEP_VALUE) -> Signal:
    return Signal(
        signal_type=SignalType.ENTRY,
        strategy=strategy,
        price=2000.0,
        stop_loss=1990.0,
        take_profit_1=2010.0,
        take_profit_2=2015.0,
        timestamp=timestamp,
    )


class FailingAnalyzer(SignalAnalyzer):
    def __init__(self) -> None:
        super().__init__(name="failing", lookback=1)

    def _evaluate(self, window):
        raise RuntimeError("boom")


class TestDefaultAnalyzers:
    """Test default_analyzers factory."""

    def test_order_and_defaults(self):
        analyzers = default_analyzers()

        assert [type(a) for a in analyzers] == [
            DeepValueAnalyzer,
            BreakoutAnalyzer,
            ReversalAnalyzer,
        ]
        assert [a.lookback for a in analyzers] == [12, 24, 12]

    def test_lookbacks_from_config(self):
        config = StrategyConfig(deep_value_lookback=6, breakout_lookback=10, reversal_lookback=5)

        analyzers = default_analyzers(config)

        assert [a.lookback for a in analyzers] == [6, 10, 5]
        assert SignalEngine(analyzers).max_lookback == 10


class TestSignalEngine:
    """Test SignalEngine.evaluate."""

    def test_empty_window_yields_nothing(self):
        assert SignalEngine().evaluate([]) == []

    def test_reversal_window(self):
        signals = SignalEngine().evaluate(reversal_window())
        assert [s.strategy for s in signals] == [Strategy.REVERSAL]

    def test_deep_value_window(self):
        signals = SignalEngine().evaluate(deep_value_window())
        assert [s.strategy for s in signals] == [Strategy.DEEP_VALUE]

    def test_signals_in_analyzer_order(self):
        """The breakout candle also recovers strongly off the recent low."""
        signals = SignalEngine().evaluate(breakout_window())

        assert [s.strategy for s in signals] == [Strategy.DEEP_VALUE, Strategy.MONTHLY_INCOME]
        assert all(s.timestamp == breakout_window()[-1].timestamp for s in signals)

    def test_failing_analyzer_is_skipped(self):
        engine = SignalEngine([FailingAnalyzer(), ReversalAnalyzer()])

        signals = engine.evaluate(reversal_window())

        assert [s.strategy for s in signals] == [Strategy.REVERSAL]


class TestBreakoutReversalOverlap:
    """Breakout (long) and reversal (short) never fire on the same window."""

    def test_scenario_windows(self):
        engine = SignalEngine()
        for window in (breakout_window(), reversal_window(), deep_value_window()):
            strategies = {s.strategy for s in engine.evaluate(window)}
            assert not {Strategy.MONTHLY_INCOME, Strategy.REVERSAL} <= strategies

    def test_random_walks(self):
        rng = random.Random(7)
        breakout, reversal = BreakoutAnalyzer(), ReversalAnalyzer()

        for _ in range(500):
            window = random_walk_window(rng)
            fired = (breakout.analyze(window), reversal.analyze(window))
            assert None in fired


class TestSignalBoard:
    """Test SignalBoard."""

    def test_most_recent_first(self):
        board = SignalBoard(capacity=5)
        first = make_signal(1)
        second, third = make_signal(2), make_signal(2, Strategy.MONTHLY_INCOME)

        board.add([first])
        board.add([second, third])

        assert board.items() == [second, third, first]

    def test_capacity_discards_oldest(self):
        board = SignalBoard(capacity=5)
        signals = [make_signal(ts) for ts in range(7)]

        for signal in signals:
            board.add([signal])

        assert len(board) == 5
        assert [s.timestamp for s in board.items()] == [6, 5, 4, 3, 2]

    def test_oversized_batch_keeps_head_of_batch(self):
        board = SignalBoard(capacity=2)
        batch = [make_signal(1), make_signal(2), make_signal(3)]

        assert board.add(batch) == 3
        assert [s.timestamp for s in board.items()] == [1, 2]

    def test_empty_batch_is_noop(self):
        board = SignalBoard()
        assert board.add([]) == 0
        assert board.items() == []

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            SignalBoard(capacity=0)
