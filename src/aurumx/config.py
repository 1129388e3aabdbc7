"""Configuration management for AurumX."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class APIConfig:
    """API configuration for the price feed."""

    binance_api_key: str = ""
    binance_api_secret: str = ""


@dataclass
class FeedConfig:
    """Price feed and candle window configuration."""

    symbol: str = "XAUUSDT"
    interval: str = "5m"
    poll_interval: float = 5.0  # Seconds between polls
    history_hours: int = 24
    window_capacity: int = 288  # 24 hours of 5m candles


@dataclass
class RetryConfig:
    """Backoff schedule for feed failures."""

    max_attempts: int = 3
    base_delay: float = 1.0
    multiplier: float = 2.0
    max_delay: float = 30.0


@dataclass
class StrategyConfig:
    """Analyzer lookbacks and thresholds."""

    deep_value_lookback: int = 12  # 1 hour of 5m candles
    deep_value_min_drop: float = 0.005  # 0.5% drop
    deep_value_min_recovery: float = 0.7
    breakout_lookback: int = 24  # 2 hours of 5m candles
    breakout_min_strength: float = 0.001  # 0.1% breakout
    reversal_lookback: int = 12
    reversal_min_strength: float = 0.001  # 0.1% reversal
    max_recent_signals: int = 5


@dataclass
class Config:
    """Main configuration container."""

    api: APIConfig = field(default_factory=APIConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    strategy: StrategyConfig = field(default_factory=StrategyConfig)
    health_interval: int = 60  # Seconds between health reports
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_path: Path to .env file (optional)

        Returns:
            Config instance populated from environment
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        api = APIConfig(
            binance_api_key=os.getenv("BINANCE_API_KEY", ""),
            binance_api_secret=os.getenv("BINANCE_API_SECRET", ""),
        )

        feed = FeedConfig(
            symbol=os.getenv("TRADING_SYMBOL", "XAUUSDT").strip().upper(),
            interval=os.getenv("KLINE_INTERVAL", "5m").strip(),
            poll_interval=max(_env_float("POLL_INTERVAL_SECONDS", 5.0), 0.1),
            history_hours=max(_env_int("HISTORY_HOURS", 24), 1),
            window_capacity=max(_env_int("WINDOW_CAPACITY", 288), 1),
        )

        retry = RetryConfig(
            max_attempts=max(_env_int("RETRY_MAX_ATTEMPTS", 3), 1),
            base_delay=max(_env_float("RETRY_BASE_DELAY", 1.0), 0.0),
            multiplier=max(_env_float("RETRY_MULTIPLIER", 2.0), 1.0),
            max_delay=max(_env_float("RETRY_MAX_DELAY", 30.0), 0.0),
        )

        strategy = StrategyConfig(
            deep_value_lookback=max(_env_int("DEEP_VALUE_LOOKBACK", 12), 2),
            deep_value_min_drop=_env_float("DEEP_VALUE_MIN_DROP", 0.005),
            deep_value_min_recovery=_env_float("DEEP_VALUE_MIN_RECOVERY", 0.7),
            breakout_lookback=max(_env_int("BREAKOUT_LOOKBACK", 24), 2),
            breakout_min_strength=_env_float("BREAKOUT_MIN_STRENGTH", 0.001),
            reversal_lookback=max(_env_int("REVERSAL_LOOKBACK", 12), 3),
            reversal_min_strength=_env_float("REVERSAL_MIN_STRENGTH", 0.001),
            max_recent_signals=max(_env_int("MAX_RECENT_SIGNALS", 5), 1),
        )

        return cls(
            api=api,
            feed=feed,
            retry=retry,
            strategy=strategy,
            health_interval=max(_env_int("HEALTH_INTERVAL_SECONDS", 60), 1),
            log_level=_env_log_level("LOG_LEVEL", "INFO"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}={raw!r}, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid number for {name}={raw!r}, using {default}")
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip().upper()
    if not raw:
        return default
    if raw not in logging.getLevelNamesMapping():
        logger.warning(f"Unknown log level {name}={raw!r}, using {default}")
        return default
    return raw
