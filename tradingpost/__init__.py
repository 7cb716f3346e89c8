"""
tradingpost: rate-limited client for the Guild Wars 2 trading post API.

This package provides:
- A token-bucket rate limiter and paginated fetching in `tradingpost.net`
- Errors, pagination schemas and the `Client` facade in `tradingpost.core`
- Endpoint modules (listings, prices, transactions) in `tradingpost.api`
- A spread-profit ranking utility in `tradingpost.strategy`

Environment variables are loaded from a .env file via python-dotenv.
"""

from __future__ import annotations

__version__ = "0.1.0"

from dotenv import load_dotenv

load_dotenv()

# core before config: config imports core.errors, core.client imports config
from .core.client import Client  # noqa: E402
from .config import ClientConfig  # noqa: E402
from .core.schemas import Paginated, PaginationMetadata, PaginationParams  # noqa: E402
from .core.errors import (  # noqa: E402
    TradingPostError,
    ValidationError,
    TooManyIdsError,
    RateLimitError,
    TransportError,
    RequestFailedError,
    MissingHeaderError,
    HeaderParseError,
    DeserializationError,
)
from .net.ratelimiter import TokenBucket  # noqa: E402

__all__ = [
    "Client",
    "ClientConfig",
    "TokenBucket",
    # Schemas
    "Paginated",
    "PaginationMetadata",
    "PaginationParams",
    # Errors
    "TradingPostError",
    "ValidationError",
    "TooManyIdsError",
    "RateLimitError",
    "TransportError",
    "RequestFailedError",
    "MissingHeaderError",
    "HeaderParseError",
    "DeserializationError",
]
