"""Global type definitions."""

from enum import Enum


class Side(str, Enum):
    """Directional bias of a signal."""

    LONG = "long"
    SHORT = "short"


class SignalType(str, Enum):
    """Signal kind."""

    ENTRY = "ENTRY"
    EXIT = "EXIT"


class Strategy(str, Enum):
    """Strategy that produced a signal."""

    DEEP_VALUE = "DEEP_VALUE"
    MONTHLY_INCOME = "MONTHLY_INCOME"  # Breakout
    REVERSAL = "REVERSAL"

    @property
    def label(self) -> str:
        """Human-readable strategy name."""
        return self.value.replace("_", " ").title()


class DistributorState(str, Enum):
    """Lifecycle state of the price distributor."""

    IDLE = "idle"  # Not started, or retries exhausted
    INITIALIZING = "initializing"
    ACTIVE = "active"
    RETRYING = "retrying"
    STOPPED = "stopped"
