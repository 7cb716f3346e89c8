"""Commerce endpoint catalog: listings, prices and transactions."""

from . import listings, prices, transactions
from .common import MAX_IDS, join_ids

__all__ = ["listings", "prices", "transactions", "MAX_IDS", "join_ids"]
