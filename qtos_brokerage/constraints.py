"""
Constraint predicates: narrow yes/no questions used by brokerage models.

Pure functions. Only is_valid_order_size produces a message, because it is the
one check whose diagnostic is the same for every venue.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from datetime import datetime
from decimal import Decimal

from qtos_brokerage.messages import PolicyDecision, PolicyMessage
from qtos_brokerage.order import OrderType, TimeInForce, to_utc_naive
from qtos_brokerage.security import Security, SecurityType


def is_valid_order_size(security: Security, quantity: Decimal | int | float) -> PolicyDecision:
    """
    Check the order magnitude against the symbol's minimum order size and lot size.
    A lot size of zero (or less) disables the lot check.
    """
    size = abs(Decimal(str(quantity)))
    props = security.properties

    minimum = props.minimum_order_size
    if minimum is not None and size < minimum:
        return PolicyDecision.reject(
            PolicyMessage.warning(
                f"The minimum order size for {security.symbol.value} is {minimum}. "
                f"Order quantity was {quantity}."
            )
        )

    lot = props.lot_size
    if lot > 0 and size % lot != 0:
        return PolicyDecision.reject(
            PolicyMessage.warning(
                f"The order quantity for {security.symbol.value} must be a multiple "
                f"of the lot size {lot}. Order quantity was {quantity}."
            )
        )

    return PolicyDecision.accept()


def supports_security_type(
    supported: Collection[SecurityType] | None, security_type: SecurityType
) -> bool:
    """None means the venue places no restriction."""
    return supported is None or security_type in supported


def supports_order_type(supported: Collection[OrderType] | None, order_type: OrderType) -> bool:
    """None means the venue places no restriction."""
    return supported is None or order_type in supported


def supports_time_in_force(required: TimeInForce | None, time_in_force: TimeInForce) -> bool:
    """A venue accepts either any time in force (None) or exactly one."""
    return required is None or time_in_force == required


def is_past_cutoff(
    cutoffs: Mapping[OrderType, datetime], order_type: OrderType, time: datetime | None
) -> bool:
    """
    True when the order type was withdrawn at or before `time`.
    An order without a time counts as past the cutoff.
    Both sides are compared as naive UTC.
    """
    cutoff = cutoffs.get(order_type)
    if cutoff is None:
        return False
    if time is None:
        return True
    return to_utc_naive(time) >= to_utc_naive(cutoff)
