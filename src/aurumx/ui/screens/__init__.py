"""UI screens."""

from aurumx.ui.screens.dashboard import DashboardScreen

__all__ = [
    "DashboardScreen",
]
