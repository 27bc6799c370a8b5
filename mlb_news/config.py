"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_REQUEST_DELAY = 1.0
DEFAULT_WINDOW_BUFFER_HOURS = 6.0
DEFAULT_USER_AGENT = "mlb-news/0.1 (RSS reader)"


@dataclass(frozen=True)
class Settings:
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    request_delay: float = DEFAULT_REQUEST_DELAY
    window_buffer_hours: float = DEFAULT_WINDOW_BUFFER_HOURS
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def window_buffer(self) -> timedelta:
        return timedelta(hours=self.window_buffer_hours)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}")
        return default
    if value < 0:
        logger.warning(f"Ignoring {name}={raw!r}: must not be negative, using {default}")
        return default
    return value


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Build Settings from MLB_NEWS_* environment variables, loading .env first."""
    load_dotenv(dotenv_path)
    return Settings(
        request_timeout=_env_float("MLB_NEWS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        request_delay=_env_float("MLB_NEWS_REQUEST_DELAY", DEFAULT_REQUEST_DELAY),
        window_buffer_hours=_env_float("MLB_NEWS_WINDOW_BUFFER_HOURS", DEFAULT_WINDOW_BUFFER_HOURS),
        user_agent=os.getenv("MLB_NEWS_USER_AGENT") or DEFAULT_USER_AGENT,
    )
