"""Strategy module - signal detection."""

from aurumx.strategy.signals import Signal, SignalEngine

__all__ = [
    "Signal",
    "SignalEngine",
]
