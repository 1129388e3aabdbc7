"""Price feed adapter contract."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any


class PriceFeed(ABC):
    """Source of raw OHLCV bars for a single instrument.

    Raw bars are mappings with keys ``t`` (open time, epoch millis), ``o``,
    ``h``, ``l``, ``c`` and ``v``. Implementations raise
    :class:`~aurumx.core.errors.TransientFeedError` for any failure so the
    distributor can retry uniformly.
    """

    @abstractmethod
    async def fetch_range(
        self,
        symbol: str,
        interval: str,
        start: datetime,
        end: datetime,
    ) -> list[dict[str, Any]]:
        """Fetch all bars in ``[start, end]``, ascending by open time."""
        ...

    @abstractmethod
    async def fetch_latest(self, symbol: str, interval: str) -> dict[str, Any] | None:
        """Fetch the most recent completed bar, or None if there is none yet."""
        ...
