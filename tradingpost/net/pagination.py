from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from ..core.errors import DeserializationError, HeaderParseError, MissingHeaderError
from ..core.schemas import Paginated, PaginationMetadata, PaginationParams
from ..logging import get_logger
from .http import RequestExecutor, decode_json
from .ratelimiter import TokenBucket


T = TypeVar("T")

Parser = Callable[[Any], T]

PAGE_SIZE_HEADER = "X-Page-Size"
PAGE_TOTAL_HEADER = "X-Page-Total"
RESULT_COUNT_HEADER = "X-Result-Count"
RESULT_TOTAL_HEADER = "X-Result-Total"

logger = get_logger(__name__)


def page_url(url: str, params: PaginationParams) -> str:
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{params.to_query()}"


def _header_text(name: str, value: str) -> str:
    # requests hands header values over latin-1 decoded; recover the raw
    # bytes and insist on UTF-8.
    try:
        raw = value.encode("latin-1")
    except UnicodeEncodeError:
        return value
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HeaderParseError(name, e) from e


def parse_header(headers: Mapping[str, str], name: str) -> int:
    value = headers.get(name)
    if value is None:
        raise MissingHeaderError(name)
    text = _header_text(name, value)
    if not (text.isascii() and text.isdigit()):
        raise HeaderParseError(name, ValueError(f"invalid digit found in {text!r}"))
    return int(text)


def parse_metadata(headers: Mapping[str, str]) -> PaginationMetadata:
    return PaginationMetadata(
        page_size=parse_header(headers, PAGE_SIZE_HEADER),
        page_total=parse_header(headers, PAGE_TOTAL_HEADER),
        result_count=parse_header(headers, RESULT_COUNT_HEADER),
        result_total=parse_header(headers, RESULT_TOTAL_HEADER),
    )


def decode_items(body: Any, url: str, parse: Optional[Parser] = None) -> List[Any]:
    if not isinstance(body, list):
        raise DeserializationError(url, f"expected a JSON array, got {type(body).__name__}")
    if parse is None:
        return list(body)
    try:
        return [parse(item) for item in body]
    except (KeyError, TypeError, ValueError) as e:
        raise DeserializationError(url, f"{type(e).__name__}: {e}") from e


class PageFetcher:
    """Fetches one page of a paginated collection.

    Each call costs exactly one token from ``limiter``. The four pagination
    headers are parsed before the body is decoded, so a bad header wins over
    a bad body.
    """

    def __init__(self, executor: RequestExecutor, limiter: TokenBucket) -> None:
        self.executor = executor
        self.limiter = limiter

    def fetch(self, url: str, params: PaginationParams, parse: Optional[Parser] = None) -> Paginated[Any]:
        self.limiter.acquire(1)
        full_url = page_url(url, params)
        r = self.executor.execute(full_url)
        metadata = parse_metadata(r.headers)
        data = decode_items(decode_json(r, full_url), full_url, parse)
        return Paginated(data=data, metadata=metadata)


class PageAggregator:
    """Fetches every page of a collection in order and concatenates them."""

    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher = fetcher

    def fetch_all(self, url: str, params: PaginationParams, parse: Optional[Parser] = None) -> List[Any]:
        first = self.fetcher.fetch(url, params, parse)
        page_total = first.metadata.page_total
        items: List[Any] = list(first.data)
        last = first.metadata
        logger.debug("Fetched page 1/%s of %s (%s items)", page_total, url, len(first.data))

        for _ in range(1, page_total):
            params = params.next()
            page = self.fetcher.fetch(url, params, parse)
            items.extend(page.data)
            last = page.metadata
            logger.debug("Fetched page %s/%s of %s (%s items)", params.page + 1, page_total, url, len(page.data))

        if len(items) != last.result_total:
            logger.debug("Collected %s items from %s but server reported %s", len(items), url, last.result_total)
        return items
