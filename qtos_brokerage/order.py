"""
Order: a requested trade, and UpdateOrderRequest: a requested change to one.

Immutable. The brokerage models never send orders; they only decide whether
a venue would accept them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from qtos_brokerage.security import Symbol


class OrderType(Enum):
    MARKET = "market"
    LIMIT = "limit"
    STOP_MARKET = "stop_market"
    STOP_LIMIT = "stop_limit"
    MARKET_ON_OPEN = "market_on_open"
    MARKET_ON_CLOSE = "market_on_close"
    LIMIT_IF_TOUCHED = "limit_if_touched"
    OPTION_EXERCISE = "option_exercise"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Stop Market'."""
        return self.value.replace("_", " ").title()


class TimeInForce(Enum):
    GOOD_TIL_CANCELED = "good_til_canceled"
    DAY = "day"
    GOOD_TIL_DATE = "good_til_date"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Good Til Canceled'."""
        return self.value.replace("_", " ").title()


def to_utc_naive(time: datetime) -> datetime:
    """Aware times are converted to UTC and stripped; naive times are taken as UTC already."""
    if time.tzinfo is None or time.utcoffset() is None:
        return time
    return time.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Order:
    """
    An order as seen by a brokerage model.

    quantity is signed (negative = sell); its magnitude is the order size.
    time is stored as naive UTC; timezone-aware values are converted.
    broker_ids stays empty until the brokerage has acknowledged the order.
    """

    symbol: Symbol
    quantity: Decimal
    order_type: OrderType = OrderType.MARKET
    time_in_force: TimeInForce = TimeInForce.GOOD_TIL_CANCELED
    time: datetime | None = None
    broker_ids: tuple[str, ...] = ()
    limit_price: Decimal | None = None
    stop_price: Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "quantity", Decimal(str(self.quantity)))
        object.__setattr__(self, "broker_ids", tuple(self.broker_ids))
        if self.time is not None:
            object.__setattr__(self, "time", to_utc_naive(self.time))

    @property
    def abs_quantity(self) -> Decimal:
        return abs(self.quantity)

    @property
    def is_submitted(self) -> bool:
        """True once the brokerage has assigned at least one id."""
        return len(self.broker_ids) > 0


@dataclass(frozen=True)
class UpdateOrderRequest:
    """Requested changes to an open order. None means 'leave unchanged'."""

    quantity: Decimal | None = None
    limit_price: Decimal | None = None
    stop_price: Decimal | None = None
    tag: str | None = None
