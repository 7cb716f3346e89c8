from __future__ import annotations

from typing import Any, Optional


class TradingPostError(Exception):
    """Base error for tradingpost."""

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None) -> None:  # noqa: D401
        super().__init__(message)
        self.context = context or {}


class ValidationError(TradingPostError):
    """Input validation failed."""


class TooManyIdsError(ValidationError):
    """A batch lookup was given more ids than the API accepts per request."""

    def __init__(self, count: int, limit: int = 200) -> None:
        super().__init__(
            f"max of {limit} ids are allowed, got {count}",
            context={"count": count, "limit": limit},
        )
        self.count = count
        self.limit = limit


class RateLimitError(TradingPostError):
    """Requested more tokens than the bucket can ever hold."""

    def __init__(self, requested: float, capacity: int) -> None:
        super().__init__(
            f"requested {requested} tokens but bucket capacity is {capacity}",
            context={"requested": requested, "capacity": capacity},
        )
        self.requested = requested
        self.capacity = capacity


class TransportError(TradingPostError):
    """Network, connection or TLS failure."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"GET {url} failed: {message}", context={"url": url})
        self.url = url


class RequestFailedError(TradingPostError):
    """HTTP response with a non-2xx status."""

    def __init__(self, status: int, url: str, body: str) -> None:
        super().__init__(
            f"Request failed with status {status}, url: {url}, body: {body}",
            context={"status": status, "url": url, "body": body},
        )
        self.status = status
        self.url = url
        self.body = body


class PaginationError(TradingPostError):
    """Pagination headers were missing or malformed."""


class MissingHeaderError(PaginationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing pagination header: {name}", context={"name": name})
        self.name = name


class HeaderParseError(PaginationError):
    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(
            f"Failed to parse pagination header {name}: {cause}",
            context={"name": name, "cause": cause},
        )
        self.name = name
        self.cause = cause


class DeserializationError(TradingPostError):
    """Response body did not match the expected JSON shape."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Failed to decode response from {url}: {message}", context={"url": url})
        self.url = url
