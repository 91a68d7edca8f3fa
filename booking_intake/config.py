"""
Centralized configuration with environment variable overrides.

Backend location, session storage and the calendar exclusion list are
configurable here. Business hours are fixed in the scheduling package.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date

from dotenv import load_dotenv

from booking_intake.logging_context import session_log_handler

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_UNAVAILABLE_DATES = "2025-07-20,2025-07-25,2025-08-01"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _safe_dates(env_var: str, default: str) -> tuple[date, ...]:
    """Parse a comma-separated list of ISO dates from an env var."""
    raw = os.getenv(env_var, default)
    try:
        return tuple(
            date.fromisoformat(part.strip()) for part in raw.split(",") if part.strip()
        )
    except ValueError:
        raise ValueError(
            f"Invalid date list for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class ApiConfig:
    """Remote booking service settings."""

    base_url: str = os.getenv("BOOKING_API_URL", "http://localhost:5000/api")
    timeout_sec: float = _safe_float("BOOKING_API_TIMEOUT", "10.0")


@dataclass(frozen=True)
class SessionConfig:
    """Where the persisted user session (and its token) lives."""

    session_file: str = os.getenv("SESSION_FILE", ".session.json")
    storage_key: str = os.getenv("SESSION_STORAGE_KEY", "userInfo")


@dataclass(frozen=True)
class ScheduleConfig:
    """Calendar dates that may not be booked."""

    unavailable_dates: tuple[date, ...] = _safe_dates(
        "UNAVAILABLE_DATES", DEFAULT_UNAVAILABLE_DATES
    )


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    api: ApiConfig = field(default_factory=ApiConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "Photography Booking")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.api.base_url.startswith(("http://", "https://")):
        raise ValueError(
            f"BOOKING_API_URL must be an http(s) URL, got {config.api.base_url!r}"
        )
    if config.api.timeout_sec <= 0:
        raise ValueError(
            f"BOOKING_API_TIMEOUT must be > 0, got {config.api.timeout_sec}"
        )
    if not config.session.storage_key:
        raise ValueError("SESSION_STORAGE_KEY must not be empty")
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"LOG_LEVEL is not a logging level, got {config.log_level!r}")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[session_log_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
