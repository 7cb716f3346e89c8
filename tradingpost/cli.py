"""Command-line entry point: ``tradingpost <command>``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from .api import listings, prices, transactions
from .api.common import chunked
from .config import ClientConfig, getenv_bool
from .core.client import Client
from .core.enums import TransactionPeriod, TransactionSide
from .core.errors import TradingPostError
from .logging import get_logger, set_level
from .strategy import find_profit, market_from_listings


logger = get_logger(__name__)


def _cmd_ids(client: Client, args: argparse.Namespace) -> None:
    ids = listings.get_ids(client)
    logger.info("got %d listing ids", len(ids))
    print("\n".join(str(i) for i in ids))


def _cmd_listing(client: Client, args: argparse.Namespace) -> None:
    listing = listings.get_listing(client, args.id)
    best_buy, best_sell = listing.best_buy, listing.best_sell
    print(f"item {listing.id}: {len(listing.buys)} buy levels, {len(listing.sells)} sell levels")
    if best_buy:
        print(f"  best buy : {best_buy.unit_price} x {best_buy.quantity}")
    if best_sell:
        print(f"  best sell: {best_sell.unit_price} x {best_sell.quantity}")


def _cmd_prices(client: Client, args: argparse.Namespace) -> None:
    if args.all:
        rows = prices.get_all(client)
    else:
        ids = prices.get_ids(client)[: args.limit]
        rows = prices.get_many(client, ids)
    logger.info("got %d prices", len(rows))
    frame = pd.DataFrame(
        [
            {"id": p.id, "buy": p.buys.unit_price, "sell": p.sells.unit_price, "spread": p.spread}
            for p in rows
        ],
        columns=["id", "buy", "sell", "spread"],
    )
    print(frame.to_string(index=False))


def _cmd_rank(client: Client, args: argparse.Namespace) -> None:
    ids = listings.get_ids(client)[: args.limit]
    fetched = []
    for chunk in chunked(ids):
        fetched.extend(listings.get_many(client, chunk))
    result = find_profit(market_from_listings(x) for x in fetched)
    logger.info("ranked %d of %d markets", len(result), len(fetched))
    print(result.to_frame().head(args.top).to_string(index=False))


def _cmd_transactions(client: Client, args: argparse.Namespace) -> None:
    rows = transactions.get_all(client, args.period, args.side)
    logger.info("got %d %s %s transactions", len(rows), args.period, args.side)
    for t in rows:
        print(f"{t.created:%Y-%m-%d %H:%M} item={t.item_id} price={t.price} qty={t.quantity}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tradingpost", description="Guild Wars 2 trading post client")
    parser.add_argument("--base-url", help="API base URL (default from TRADINGPOST_BASE_URL)")
    parser.add_argument("--debug", action="store_true", help="verbose logging (or set TRADINGPOST_DEBUG=1)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("ids", help="list every item id with listings")
    p.set_defaults(func=_cmd_ids)

    p = sub.add_parser("listing", help="show the order book of one item")
    p.add_argument("id", type=int)
    p.set_defaults(func=_cmd_listing)

    p = sub.add_parser("prices", help="show best buy/sell prices")
    p.add_argument("--all", action="store_true", help="fetch every page instead of a batch")
    p.add_argument("--limit", type=int, default=10, help="number of items when not using --all")
    p.set_defaults(func=_cmd_prices)

    p = sub.add_parser("rank", help="rank items by spread profit")
    p.add_argument("--limit", type=int, default=200, help="number of items to inspect")
    p.add_argument("--top", type=int, default=20, help="rows to print")
    p.set_defaults(func=_cmd_rank)

    p = sub.add_parser("transactions", help="list account transactions (needs an API key)")
    p.add_argument("period", choices=[x.value for x in TransactionPeriod])
    p.add_argument("side", choices=[x.value for x in TransactionSide])
    p.set_defaults(func=_cmd_transactions)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug or getenv_bool("TRADINGPOST_DEBUG"):
        set_level(logging.DEBUG)

    try:
        config = ClientConfig.from_env()
        if args.base_url:
            config.base_url = args.base_url
        with Client(config) as client:
            args.func(client, args)
    except TradingPostError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
