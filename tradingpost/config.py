from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from . import __version__
from .core.errors import ValidationError


DEFAULT_BASE_URL = "https://api.guildwars2.com"
DEFAULT_TIMEOUT = 15.0
# The API allows bursts of 300 requests refilled at 5 per second.
DEFAULT_RATE_CAPACITY = 300
DEFAULT_RATE_REFILL = 5.0


def getenv(key: str, default: Optional[str] = None, *aliases: str) -> Optional[str]:
    """Return first non-empty env var among key and aliases."""

    for k in (key, *aliases):
        v = os.getenv(k)
        if v not in (None, ""):
            return v
    return default


def getenv_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def getenv_float(key: str, default: float) -> float:
    v = getenv(key)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError as e:
        raise ValidationError(f"{key} must be a number, got {v!r}", context={"key": key}) from e


def getenv_int(key: str, default: int) -> int:
    v = getenv(key)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError as e:
        raise ValidationError(f"{key} must be an integer, got {v!r}", context={"key": key}) from e


@dataclass
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    user_agent: str = f"tradingpost/{__version__}"
    timeout: float = DEFAULT_TIMEOUT
    rate_capacity: int = DEFAULT_RATE_CAPACITY
    rate_refill: float = DEFAULT_RATE_REFILL

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            base_url=getenv("TRADINGPOST_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            api_key=getenv("TRADINGPOST_API_KEY", None, "GW2_API_KEY"),
            timeout=getenv_float("TRADINGPOST_TIMEOUT", DEFAULT_TIMEOUT),
            rate_capacity=getenv_int("TRADINGPOST_RATE_CAPACITY", DEFAULT_RATE_CAPACITY),
            rate_refill=getenv_float("TRADINGPOST_RATE_REFILL", DEFAULT_RATE_REFILL),
        )

    def headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.user_agent}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers
