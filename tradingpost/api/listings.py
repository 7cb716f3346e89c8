"""Order-book listings: ``/v2/commerce/listings``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..core.client import Client
from ..core.schemas import Paginated, PaginationParams
from .common import join_ids


ENDPOINT = "/v2/commerce/listings"


@dataclass
class ListingItem:
    listings: int  # individual listings merged into this price level
    unit_price: int  # coins
    quantity: int

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ListingItem":
        return cls(listings=int(d["listings"]), unit_price=int(d["unit_price"]), quantity=int(d["quantity"]))


@dataclass
class Listings:
    id: int
    buys: List[ListingItem] = field(default_factory=list)
    sells: List[ListingItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Listings":
        return cls(
            id=int(d["id"]),
            buys=[ListingItem.from_dict(x) for x in d.get("buys", [])],
            sells=[ListingItem.from_dict(x) for x in d.get("sells", [])],
        )

    @property
    def best_buy(self) -> Optional[ListingItem]:
        return max(self.buys, key=lambda x: x.unit_price, default=None)

    @property
    def best_sell(self) -> Optional[ListingItem]:
        return min(self.sells, key=lambda x: x.unit_price, default=None)


def get_ids(client: Client) -> List[int]:
    return client.get(client.url(ENDPOINT), parse=lambda body: [int(i) for i in body])


def get_listing(client: Client, id: int) -> Listings:
    return client.get(client.url(f"{ENDPOINT}/{id}"), parse=Listings.from_dict)


def get_many(client: Client, ids: Sequence[int]) -> List[Listings]:
    param = join_ids(ids)
    return client.get(client.url(f"{ENDPOINT}?ids={param}"), parse=lambda body: [Listings.from_dict(x) for x in body])


def get_page(client: Client, params: Optional[PaginationParams] = None) -> Paginated[Listings]:
    return client.get_page(client.url(ENDPOINT), params, parse=Listings.from_dict)


def get_all(client: Client, params: Optional[PaginationParams] = None) -> List[Listings]:
    return client.get_all(client.url(ENDPOINT), params, parse=Listings.from_dict)
