from __future__ import annotations

import json
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from tradingpost import Client, ClientConfig, TokenBucket
from tradingpost.logging import set_level


BASE_URL = "https://api.test"

PAGE_HEADERS = ("X-Page-Size", "X-Page-Total", "X-Result-Count", "X-Result-Total")


def make_response(
    body: Any = None,
    *,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None,
    raw: Optional[bytes] = None,
    url: str = BASE_URL,
) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    r.headers = CaseInsensitiveDict(headers or {})
    r.encoding = "utf-8"
    r.url = url
    return r


def page_headers(page_size: int, page_total: int, result_count: int, result_total: int) -> Dict[str, str]:
    return dict(zip(PAGE_HEADERS, (str(page_size), str(page_total), str(result_count), str(result_total))))


def page_response(items: List[Any], *, page_size: int = 2, page_total: int = 1, result_total: Optional[int] = None) -> requests.Response:
    total = len(items) if result_total is None else result_total
    return make_response(items, headers=page_headers(page_size, page_total, len(items), total))


class FakeClock:
    """Manual clock; ``sleep`` advances it instead of blocking."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session() -> Mock:
    s = Mock(spec=requests.Session)
    s.headers = CaseInsensitiveDict()
    return s


@pytest.fixture
def client(session: Mock, clock: FakeClock) -> Client:
    limiter = TokenBucket(100, 10.0, initial_tokens=100, clock=clock, sleep=clock.sleep)
    return Client(ClientConfig(base_url=BASE_URL), limiter=limiter, session=session)


def requested_urls(session: Mock) -> List[str]:
    return [c.args[0] for c in session.get.call_args_list]


@pytest.fixture
def reset_log_level():
    yield
    set_level(None)
