"""Logging setup for AurumX.

Everything logs under the ``aurumx`` logger tree via
``logging.getLogger(__name__)``. The console handler is left out when the
dashboard owns the terminal; the daily file under ``logs/`` is kept either
way so a signal run can be reviewed afterwards.
"""

import logging
import sys
from datetime import date
from pathlib import Path

LOG_DIR = Path(__file__).resolve().parents[2] / "logs"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# SDK and HTTP client chatter stays at WARNING whatever the app level
QUIET_LOGGERS = (
    "binance_common",
    "binance_sdk_derivatives_trading_usds_futures",
    "urllib3",
)


def setup_logging(
    level: str | int = "INFO",
    console: bool = True,
    log_to_file: bool = True,
) -> logging.Logger:
    """Configure the ``aurumx`` logger.

    Safe to call again: existing handlers are replaced, so the level and
    console choice of the latest call win.

    Args:
        level: Level name (e.g. "DEBUG") or number
        console: Log to stdout (off while the TUI is running)
        log_to_file: Also log to logs/signals_YYYYMMDD.log

    Returns:
        The ``aurumx`` logger
    """
    logger = logging.getLogger("aurumx")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        log_file = LOG_DIR / f"signals_{date.today():%Y%m%d}.log"
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger
