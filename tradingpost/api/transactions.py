"""Account transactions: ``/v2/commerce/transactions/{period}/{side}``.

These endpoints need an API key with the ``tradingpost`` scope; configure
it through ``ClientConfig.api_key`` (or ``TRADINGPOST_API_KEY``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from ..core.client import Client
from ..core.enums import TransactionPeriod, TransactionSide
from ..core.errors import ValidationError
from ..core.schemas import Paginated, PaginationParams


ENDPOINT = "/v2/commerce/transactions"


def _parse_time(value: str) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"expected an ISO-8601 timestamp, got {value!r}")
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass
class Transaction:
    id: int
    item_id: int
    price: int
    quantity: int
    created: datetime
    purchased: Optional[datetime] = None  # only set for history

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Transaction":
        return cls(
            id=int(d["id"]),
            item_id=int(d["item_id"]),
            price=int(d["price"]),
            quantity=int(d["quantity"]),
            created=_parse_time(d["created"]),
            purchased=_parse_time(d["purchased"]) if d.get("purchased") is not None else None,
        )


def _url(client: Client, period: Union[TransactionPeriod, str], side: Union[TransactionSide, str]) -> str:
    try:
        p = TransactionPeriod(period)
        s = TransactionSide(side)
    except ValueError as e:
        raise ValidationError(str(e), context={"period": str(period), "side": str(side)}) from e
    return client.url(f"{ENDPOINT}/{p.value}/{s.value}")


def get_page(
    client: Client,
    period: Union[TransactionPeriod, str],
    side: Union[TransactionSide, str],
    params: Optional[PaginationParams] = None,
) -> Paginated[Transaction]:
    return client.get_page(_url(client, period, side), params, parse=Transaction.from_dict)


def get_all(
    client: Client,
    period: Union[TransactionPeriod, str],
    side: Union[TransactionSide, str],
    params: Optional[PaginationParams] = None,
) -> List[Transaction]:
    return client.get_all(_url(client, period, side), params, parse=Transaction.from_dict)
