"""Core infrastructure module."""

from aurumx.core.errors import (
    ExhaustedRetryError,
    FeedError,
    MalformedDataError,
    TransientFeedError,
)
from aurumx.core.types import DistributorState, Side, SignalType, Strategy

__all__ = [
    "DistributorState",
    "ExhaustedRetryError",
    "FeedError",
    "MalformedDataError",
    "Side",
    "SignalType",
    "Strategy",
    "TransientFeedError",
]
