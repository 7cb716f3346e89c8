"""Tests for spread-profit ranking."""

from decimal import Decimal as D

from tradingpost.api.listings import Listings
from tradingpost.strategy import (
    SELL_FEE,
    Level,
    Market,
    Orderbook,
    calc_profit_from_spread,
    find_profit,
    market_from_listings,
)


def book(bids, asks):
    return Orderbook([Level(D(p), D(1)) for p in bids], [Level(D(p), D(1)) for p in asks])


def test_orderbook_ordering():
    ob = book(bids=[1, 3, 2], asks=[6, 4, 5])
    assert [lvl.price for lvl in ob.bids()] == [D(3), D(2), D(1)]
    assert [lvl.price for lvl in ob.asks()] == [D(4), D(5), D(6)]
    assert ob.best_bid.price == D(3)
    assert ob.best_ask.price == D(4)


def test_naive_profit():
    ob = book(bids=[1, 2], asks=[3, 4])
    assert calc_profit_from_spread(ob) == D(1) - D(3) * SELL_FEE


def test_profit_needs_both_sides():
    assert calc_profit_from_spread(book(bids=[], asks=[3])) is None
    assert calc_profit_from_spread(book(bids=[2], asks=[])) is None


def test_find_best_profit():
    markets = [
        Market(id=1, orderbook=book(bids=[2], asks=[3])),
        Market(id=2, orderbook=book(bids=[2], asks=[4])),
        Market(id=3, orderbook=book(bids=[2], asks=[5])),
    ]
    result = find_profit(markets)
    profit, market = result.best()
    assert profit == D(3) - D(5) * SELL_FEE
    assert market.id == 3
    assert len(result) == 3
    assert [m.id for _, m in result.iter()] == [3, 2, 1]


def test_find_profit_skips_empty_books_and_keeps_ties():
    markets = [
        Market(id=1, orderbook=book(bids=[], asks=[3])),
        Market(id=2, orderbook=book(bids=[2], asks=[4])),
        Market(id=3, orderbook=book(bids=[2], asks=[4])),
    ]
    result = find_profit(markets)
    assert [m.id for _, m in result] == [2, 3]


def test_empty_result():
    result = find_profit([])
    assert result.best() is None
    assert result.to_frame().empty


def test_market_from_listings():
    listings = Listings.from_dict(
        {
            "id": 19699,
            "buys": [{"listings": 1, "unit_price": 30, "quantity": 10}],
            "sells": [{"listings": 1, "unit_price": 40, "quantity": 5}],
        }
    )
    market = market_from_listings(listings)
    assert market.id == 19699
    assert market.orderbook.best_bid == Level(D(30), D(10))
    assert calc_profit_from_spread(market.orderbook) == D(10) - D(40) * SELL_FEE


def test_to_frame():
    result = find_profit([Market(id=7, orderbook=book(bids=[100], asks=[200]))])
    frame = result.to_frame()
    assert list(frame.columns) == ["id", "best_bid", "best_ask", "profit"]
    row = frame.iloc[0]
    assert row["id"] == 7
    assert row["profit"] == D(100) - D(200) * SELL_FEE
