"""Health check module - periodic status reporting."""

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from aurumx.core.types import DistributorState

if TYPE_CHECKING:
    from aurumx.core.signal_board import SignalBoard
    from aurumx.data.distributor import PriceDistributor
    from aurumx.data.models import CandleWindow

logger = logging.getLogger(__name__)


@dataclass
class ModuleStatus:
    """Status of a single module."""

    name: str
    connected: bool
    details: str = ""


class HealthMonitor:
    """Monitors and reports health status of all modules.

    Periodically logs:
    - Price distributor state
    - Freshness of the last delivered candle
    - Candle window fill level
    - Recent signal count
    """

    def __init__(
        self,
        distributor: "PriceDistributor",
        window: "CandleWindow",
        board: "SignalBoard",
        interval_seconds: int = 60,
        stale_after_seconds: float = 900.0,
    ) -> None:
        """Initialize health monitor.

        Args:
            distributor: Price distributor
            window: Candle window fed by the distributor
            board: Recent signals
            interval_seconds: Health check interval in seconds (default: 60)
            stale_after_seconds: Age after which the last candle counts as stale
        """
        self._distributor = distributor
        self._window = window
        self._board = board
        self._interval = interval_seconds
        self._stale_after = stale_after_seconds
        self._running = False
        self._task: asyncio.Task | None = None
        self._start_time: datetime | None = None
        self._check_count = 0

    async def start(self) -> None:
        """Start periodic health checks."""
        self._running = True
        self._start_time = datetime.now()
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"Health monitor started (interval: {self._interval}s)")

    async def stop(self) -> None:
        """Stop health checks."""
        self._running = False
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
            logger.info("Health monitor stopped")

    async def _run_loop(self) -> None:
        """Main health check loop."""
        while self._running:
            try:
                await asyncio.sleep(self._interval)
                if self._running:
                    self._check_count += 1
                    self._log_health_status()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Health check error: {e}")

    def _log_health_status(self) -> None:
        """Log current health status of all modules."""
        statuses = self.collect_statuses()
        uptime = self._format_uptime()

        status_parts = []
        all_ok = True

        for status in statuses:
            icon = "OK" if status.connected else "DOWN"
            if not status.connected:
                all_ok = False
            part = f"{status.name}:{icon}"
            if status.details:
                part += f"({status.details})"
            status_parts.append(part)

        status_line = " | ".join(status_parts)
        level = logging.INFO if all_ok else logging.WARNING
        logger.log(level, f"Health #{self._check_count} [{uptime}] {status_line}")

    def collect_statuses(self) -> list[ModuleStatus]:
        """Collect status from all modules."""
        statuses = []

        # 1. Price distributor
        state = self._distributor.state
        feed_details = state.value
        if state == DistributorState.IDLE and self._distributor.last_error is not None:
            feed_details = "exhausted"
        statuses.append(
            ModuleStatus(
                name="Feed",
                connected=state == DistributorState.ACTIVE,
                details=feed_details,
            )
        )

        # 2. Candle freshness
        last_update = self._distributor.last_update
        if last_update:
            age = (datetime.now() - last_update).total_seconds()
            statuses.append(
                ModuleStatus(
                    name="Data",
                    connected=age < self._stale_after,
                    details=f"{age:.0f}s",
                )
            )
        else:
            statuses.append(ModuleStatus(name="Data", connected=False, details="no candle"))

        # 3. Candle window
        statuses.append(
            ModuleStatus(
                name="Window",
                connected=len(self._window) > 0,
                details=f"{len(self._window)}/{self._window.capacity}",
            )
        )

        # 4. Signals
        statuses.append(
            ModuleStatus(name="Signals", connected=True, details=str(len(self._board)))
        )

        return statuses

    def _format_uptime(self) -> str:
        """Format uptime as human-readable string."""
        if not self._start_time:
            return "0s"

        delta = datetime.now() - self._start_time
        total_seconds = int(delta.total_seconds())

        hours, remainder = divmod(total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}h{minutes}m"
        elif minutes > 0:
            return f"{minutes}m{seconds}s"
        else:
            return f"{seconds}s"

    def get_status_summary(self) -> dict:
        """Get status summary as a dictionary (dashboard subtitle)."""
        statuses = self.collect_statuses()
        return {
            "uptime": self._format_uptime(),
            "check_count": self._check_count,
            "modules": [
                {
                    "name": s.name,
                    "connected": s.connected,
                    "details": s.details,
                }
                for s in statuses
            ],
            "all_healthy": all(s.connected for s in statuses),
        }
