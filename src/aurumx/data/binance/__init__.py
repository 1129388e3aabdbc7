"""Binance data source module."""

from aurumx.data.binance.rest import BinanceKlineFeed

__all__ = [
    "BinanceKlineFeed",
]
