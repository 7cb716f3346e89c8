"""Networking: token-bucket rate limiter, HTTP executor and page fetching."""

from .http import RequestExecutor
from .pagination import PageAggregator, PageFetcher
from .ratelimiter import TokenBucket, rate_limited

__all__ = ["RequestExecutor", "PageAggregator", "PageFetcher", "TokenBucket", "rate_limited"]
