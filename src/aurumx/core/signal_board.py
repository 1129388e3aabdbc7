"""Bounded list of the most recent signals."""

from collections import deque
from collections.abc import Iterable

from aurumx.strategy.signals.types import Signal


class SignalBoard:
    """Most-recent-first list of signals with a fixed capacity.

    Each batch from one evaluation is placed ahead of older signals in the
    order it was produced; anything beyond capacity is discarded.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._signals: deque[Signal] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._signals.maxlen or 0

    def add(self, signals: Iterable[Signal]) -> int:
        """Prepend a batch of signals.

        Returns:
            Number of signals added
        """
        batch = list(signals)
        # appendleft in reverse keeps the batch order at the front
        for signal in reversed(batch):
            self._signals.appendleft(signal)
        return len(batch)

    def items(self) -> list[Signal]:
        """Signals, most recent first."""
        return list(self._signals)

    def __len__(self) -> int:
        return len(self._signals)
