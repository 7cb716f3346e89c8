"""Core errors, schemas and the client facade."""

from .errors import (
    TradingPostError,
    ValidationError,
    TooManyIdsError,
    RateLimitError,
    TransportError,
    RequestFailedError,
    PaginationError,
    MissingHeaderError,
    HeaderParseError,
    DeserializationError,
)
from .schemas import MAX_PAGE_SIZE, Paginated, PaginationMetadata, PaginationParams
from .client import Client

__all__ = [
    # Errors
    "TradingPostError",
    "ValidationError",
    "TooManyIdsError",
    "RateLimitError",
    "TransportError",
    "RequestFailedError",
    "PaginationError",
    "MissingHeaderError",
    "HeaderParseError",
    "DeserializationError",
    # Schemas
    "MAX_PAGE_SIZE",
    "Paginated",
    "PaginationMetadata",
    "PaginationParams",
    # Facade
    "Client",
]
