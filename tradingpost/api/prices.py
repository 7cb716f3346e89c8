"""Best buy/sell prices: ``/v2/commerce/prices``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..core.client import Client
from ..core.schemas import Paginated, PaginationParams
from .common import join_ids


ENDPOINT = "/v2/commerce/prices"


@dataclass
class PriceInfo:
    unit_price: int
    quantity: int

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PriceInfo":
        return cls(unit_price=int(d["unit_price"]), quantity=int(d["quantity"]))


@dataclass
class Price:
    id: int
    whitelisted: bool
    buys: PriceInfo
    sells: PriceInfo

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Price":
        return cls(
            id=int(d["id"]),
            whitelisted=bool(d.get("whitelisted", False)),
            buys=PriceInfo.from_dict(d["buys"]),
            sells=PriceInfo.from_dict(d["sells"]),
        )

    @property
    def spread(self) -> int:
        return self.sells.unit_price - self.buys.unit_price


def get_ids(client: Client) -> List[int]:
    return client.get(client.url(ENDPOINT), parse=lambda body: [int(i) for i in body])


def get_price(client: Client, id: int) -> Price:
    return client.get(client.url(f"{ENDPOINT}/{id}"), parse=Price.from_dict)


def get_many(client: Client, ids: Sequence[int]) -> List[Price]:
    param = join_ids(ids)
    return client.get(client.url(f"{ENDPOINT}?ids={param}"), parse=lambda body: [Price.from_dict(x) for x in body])


def get_page(client: Client, params: Optional[PaginationParams] = None) -> Paginated[Price]:
    return client.get_page(client.url(ENDPOINT), params, parse=Price.from_dict)


def get_all(client: Client, params: Optional[PaginationParams] = None) -> List[Price]:
    return client.get_all(client.url(ENDPOINT), params, parse=Price.from_dict)
