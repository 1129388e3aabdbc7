"""UI widgets."""

from aurumx.ui.widgets.signals import SignalsWidget, format_signal_row
from aurumx.ui.widgets.ticker import TickerWidget

__all__ = [
    "SignalsWidget",
    "TickerWidget",
    "format_signal_row",
]
