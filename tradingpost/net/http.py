from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from ..core.errors import DeserializationError, RequestFailedError, TransportError
from ..logging import get_logger


DEFAULT_TIMEOUT = 15

logger = get_logger(__name__)


def is_success(status: int) -> bool:
    return 200 <= status < 300


def read_body(response: requests.Response) -> str:
    """Best-effort body text for diagnostics; never raises."""

    try:
        return response.text
    except Exception as e:  # noqa: BLE001
        return f"<failed to read response body: {e}>"


class RequestExecutor:
    """Issues single GET requests and classifies their outcome."""

    def __init__(
        self,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.session = session or requests.Session()
        if headers:
            self.session.headers.update(headers)
        self.timeout = timeout

    def execute(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e
        if not is_success(r.status_code):
            body = read_body(r)
            logger.warning("HTTP %s for %s: %s", r.status_code, url, body[:200])
            raise RequestFailedError(r.status_code, url, body)
        return r

    def get_json(self, url: str) -> Any:
        r = self.execute(url)
        return decode_json(r, url)

    def close(self) -> None:
        self.session.close()


def decode_json(response: requests.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise DeserializationError(url, str(e)) from e
