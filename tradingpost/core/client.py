from __future__ import annotations

from typing import Any, List, Optional

import requests

from ..config import ClientConfig
from ..net.http import RequestExecutor
from ..net.pagination import PageAggregator, PageFetcher, Parser
from ..net.ratelimiter import TokenBucket, rate_limited
from .errors import DeserializationError
from .schemas import Paginated, PaginationParams


class Client:
    """Facade over the rate limiter, request executor and page fetching.

    Every HTTP call, paginated or not, costs one token from a shared bucket.
    The bucket starts full so the first burst goes out immediately.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        limiter: Optional[TokenBucket] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.limiter = limiter or TokenBucket(
            self.config.rate_capacity,
            self.config.rate_refill,
            initial_tokens=self.config.rate_capacity,
        )
        self.executor = RequestExecutor(
            headers=self.config.headers(),
            timeout=self.config.timeout,
            session=session,
        )
        self.fetcher = PageFetcher(self.executor, self.limiter)
        self.aggregator = PageAggregator(self.fetcher)
        self._get_json = rate_limited(self.limiter)(self.executor.get_json)

    # --- Construction helpers ---
    @classmethod
    def from_env(cls) -> "Client":
        return cls(ClientConfig.from_env())

    def url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}{path}"

    # --- Requests ---
    def get(self, url: str, parse: Optional[Parser] = None) -> Any:
        body = self._get_json(url)
        if parse is None:
            return body
        try:
            return parse(body)
        except (KeyError, TypeError, ValueError) as e:
            raise DeserializationError(url, f"{type(e).__name__}: {e}") from e

    def get_page(self, url: str, params: Optional[PaginationParams] = None, parse: Optional[Parser] = None) -> Paginated[Any]:
        return self.fetcher.fetch(url, params or PaginationParams(), parse)

    def get_all(self, url: str, params: Optional[PaginationParams] = None, parse: Optional[Parser] = None) -> List[Any]:
        return self.aggregator.fetch_all(url, params or PaginationParams(), parse)

    def close(self) -> None:
        self.executor.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
