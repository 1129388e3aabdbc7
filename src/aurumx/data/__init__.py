"""Data module - price feed, candles and the streaming distributor."""

from aurumx.data.distributor import PriceDistributor, RetryPolicy, Subscription
from aurumx.data.feed import PriceFeed
from aurumx.data.models import Candle, CandleWindow, RawBar

__all__ = [
    "Candle",
    "CandleWindow",
    "PriceDistributor",
    "PriceFeed",
    "RawBar",
    "RetryPolicy",
    "Subscription",
]
