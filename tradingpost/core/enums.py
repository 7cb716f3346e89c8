from __future__ import annotations

from enum import Enum


class TransactionPeriod(str, Enum):
    CURRENT = "current"  # open orders
    HISTORY = "history"  # fulfilled within the last 90 days


class TransactionSide(str, Enum):
    BUYS = "buys"
    SELLS = "sells"
