"""
Account and brokerage identifiers shared by every brokerage model.
"""

from enum import Enum


class AccountType(Enum):
    """Cash accounts cannot borrow; margin accounts can."""

    CASH = "cash"
    MARGIN = "margin"


class BrokerageName(Enum):
    """Closed set of venues with a registered brokerage model."""

    DEFAULT = "default"
    GDAX = "gdax"
    TD_AMERITRADE = "td_ameritrade"
