"""Binance kline price feed."""

import asyncio
import logging
import time
from datetime import datetime
from typing import Any

from binance_common.configuration import ConfigurationRestAPI
from binance_common.constants import DERIVATIVES_TRADING_USDS_FUTURES_REST_API_PROD_URL
from binance_sdk_derivatives_trading_usds_futures.derivatives_trading_usds_futures import (
    DerivativesTradingUsdsFutures,
)

from aurumx.core.errors import TransientFeedError
from aurumx.data.feed import PriceFeed

logger = logging.getLogger(__name__)


class BinanceKlineFeed(PriceFeed):
    """Binance USDS-M Futures kline feed.

    Fetches candlestick data over REST. Blocking SDK calls run in a worker
    thread; every SDK failure surfaces as TransientFeedError.
    """

    MAX_KLINES_PER_REQUEST = 1500

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
    ) -> None:
        """Initialize Binance kline feed.

        Args:
            api_key: Binance API key (optional for public endpoints)
            api_secret: Binance API secret (optional for public endpoints)
        """
        self._api_key = api_key
        self._api_secret = api_secret
        self._client: DerivativesTradingUsdsFutures | None = None

    def _get_client(self) -> DerivativesTradingUsdsFutures:
        """Get or create Binance client."""
        if self._client is None:
            config = ConfigurationRestAPI(
                api_key=self._api_key if self._api_key else None,
                api_secret=self._api_secret if self._api_secret else None,
                base_path=DERIVATIVES_TRADING_USDS_FUTURES_REST_API_PROD_URL,
            )
            self._client = DerivativesTradingUsdsFutures(config_rest_api=config)
        return self._client

    async def _get_klines(
        self,
        symbol: str,
        interval: str,
        limit: int,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> list[list[Any]]:
        client = self._get_client()

        def _fetch() -> list[list[Any]]:
            response = client.rest_api.kline_candlestick_data(
                symbol=symbol,
                interval=interval,
                start_time=start_time,
                end_time=end_time,
                limit=limit,
            )
            data = response.data()
            return [item.root if hasattr(item, "root") else item for item in data]

        try:
            return await asyncio.to_thread(_fetch)
        except Exception as e:
            raise TransientFeedError(f"Binance klines request failed for {symbol}: {e}") from e

    @staticmethod
    def _to_raw_bar(item: list[Any]) -> dict[str, Any]:
        """Map a Binance kline array to a raw bar.

        Binance kline format: [open_time, open, high, low, close, volume, close_time, ...]
        """
        if len(item) < 6:
            return {}
        return {
            "t": item[0],
            "o": item[1],
            "h": item[2],
            "l": item[3],
            "c": item[4],
            "v": item[5],
        }

    @staticmethod
    def _is_closed(item: list[Any], now_ms: int) -> bool:
        """Whether the kline's close time has passed."""
        return len(item) < 7 or int(item[6]) < now_ms

    async def fetch_range(
        self,
        symbol: str,
        interval: str,
        start: datetime,
        end: datetime,
    ) -> list[dict[str, Any]]:
        """Fetch closed klines between start and end, paginating as needed.

        The kline still forming at the end of the range is left out, so history
        only ever holds bars that fetch_latest would also report.

        Args:
            symbol: Trading pair (e.g., "XAUUSDT")
            interval: Kline interval (e.g., "5m")
            start: Range start
            end: Range end

        Returns:
            Raw bars ascending by open time
        """
        start_ms = int(start.timestamp() * 1000)
        end_ms = int(end.timestamp() * 1000)
        bars: list[dict[str, Any]] = []
        forming = 0

        while start_ms <= end_ms:
            page = await self._get_klines(
                symbol,
                interval,
                limit=self.MAX_KLINES_PER_REQUEST,
                start_time=start_ms,
                end_time=end_ms,
            )
            if not page:
                break

            now_ms = int(time.time() * 1000)
            try:
                for item in page:
                    if self._is_closed(item, now_ms):
                        bars.append(self._to_raw_bar(item))
                    else:
                        forming += 1
                next_start = int(page[-1][0]) + 1
            except (TypeError, ValueError, IndexError) as e:
                raise TransientFeedError(f"Unexpected kline format for {symbol}: {e}") from e

            if len(page) < self.MAX_KLINES_PER_REQUEST:
                break
            # Next page starts after the last open time received
            start_ms = next_start

        logger.debug(
            f"Fetched {len(bars)} closed {interval} klines for {symbol} "
            f"({forming} still forming skipped)"
        )
        return bars

    async def fetch_latest(self, symbol: str, interval: str) -> dict[str, Any] | None:
        """Fetch the most recent closed kline.

        The newest kline is still forming and keeps its open time until it
        closes, so the one before it is returned.
        """
        page = await self._get_klines(symbol, interval, limit=2)
        if len(page) < 2:
            return None
        try:
            return self._to_raw_bar(page[-2])
        except TypeError as e:
            raise TransientFeedError(f"Unexpected kline format for {symbol}: {e}") from e
