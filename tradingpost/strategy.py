"""Spread-profit ranking over order-book snapshots.

Buying at the best bid and relisting at the best ask earns the spread minus
the trading post's cut of the sale price.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

if TYPE_CHECKING:
    from .api.listings import Listings


SELL_FEE = Decimal("0.15")  # 5% listing fee + 10% exchange fee


@dataclass(frozen=True)
class Level:
    price: Decimal
    size: Decimal


class Orderbook:
    def __init__(self, bids: Iterable[Level], asks: Iterable[Level]) -> None:
        # one level per price; later entries win
        self._bids = {level.price: level for level in bids}
        self._asks = {level.price: level for level in asks}

    def bids(self) -> List[Level]:
        """Bids, highest price first."""
        return [self._bids[p] for p in sorted(self._bids, reverse=True)]

    def asks(self) -> List[Level]:
        """Asks, lowest price first."""
        return [self._asks[p] for p in sorted(self._asks)]

    @property
    def best_bid(self) -> Optional[Level]:
        return self._bids[max(self._bids)] if self._bids else None

    @property
    def best_ask(self) -> Optional[Level]:
        return self._asks[min(self._asks)] if self._asks else None


@dataclass
class Market:
    id: int
    orderbook: Orderbook


def market_from_listings(listings: "Listings") -> Market:
    return Market(
        id=listings.id,
        orderbook=Orderbook(
            bids=[Level(Decimal(x.unit_price), Decimal(x.quantity)) for x in listings.buys],
            asks=[Level(Decimal(x.unit_price), Decimal(x.quantity)) for x in listings.sells],
        ),
    )


def calc_profit_from_spread(ob: Orderbook) -> Optional[Decimal]:
    """Profit from the spread, or None when either side of the book is empty."""

    best_ask = ob.best_ask
    best_bid = ob.best_bid
    if best_ask is None or best_bid is None:
        return None
    gross_profit = best_ask.price - best_bid.price
    return gross_profit - best_ask.price * SELL_FEE


class ProfitResult:
    def __init__(self, ranked: List[Tuple[Decimal, Market]]) -> None:
        self._ranked = ranked

    def iter(self) -> Iterator[Tuple[Decimal, Market]]:
        return iter(self._ranked)

    __iter__ = iter

    def __len__(self) -> int:
        return len(self._ranked)

    def best(self) -> Optional[Tuple[Decimal, Market]]:
        return self._ranked[0] if self._ranked else None

    def to_frame(self) -> pd.DataFrame:
        rows = []
        for profit, market in self._ranked:
            bid = market.orderbook.best_bid
            ask = market.orderbook.best_ask
            rows.append(
                {
                    "id": market.id,
                    "best_bid": bid.price if bid else None,
                    "best_ask": ask.price if ask else None,
                    "profit": profit,
                }
            )
        return pd.DataFrame(rows, columns=["id", "best_bid", "best_ask", "profit"])


def find_profit(markets: Iterable[Market]) -> ProfitResult:
    """Rank markets by spread profit, highest first; markets without a full book are skipped."""

    scored = []
    for market in markets:
        profit = calc_profit_from_spread(market.orderbook)
        if profit is not None:
            scored.append((profit, market))
    scored.sort(key=lambda x: x[0], reverse=True)
    return ProfitResult(scored)
