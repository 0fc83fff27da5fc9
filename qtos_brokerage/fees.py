"""
Fee models selected by brokerage models.

FeeModel ABC: get_order_fee. Brokerage models only choose which model applies;
the schedules below are flat approximations of each venue's published fees.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from qtos_brokerage.order import Order, OrderType
from qtos_brokerage.security import Security, SecurityType


class FeeModel(ABC):
    """Computes the fee, in quote currency, for filling an order at a price."""

    @abstractmethod
    def get_order_fee(self, security: Security, order: Order, price: Decimal) -> Decimal:
        ...


class ConstantFeeModel(FeeModel):
    """Same fee for every order."""

    def __init__(self, fee: Decimal | int | float = 0) -> None:
        self.fee = Decimal(str(fee))

    def get_order_fee(self, security: Security, order: Order, price: Decimal) -> Decimal:
        return self.fee


class InteractiveBrokersFeeModel(FeeModel):
    """
    Per-unit schedule: equities per share with a per-order minimum,
    options and futures per contract.
    """

    EQUITY_PER_SHARE = Decimal("0.005")
    EQUITY_MINIMUM = Decimal("1")
    OPTION_PER_CONTRACT = Decimal("0.7")
    FUTURE_PER_CONTRACT = Decimal("0.85")

    def get_order_fee(self, security: Security, order: Order, price: Decimal) -> Decimal:
        qty = order.abs_quantity
        if security.type == SecurityType.EQUITY:
            return max(qty * self.EQUITY_PER_SHARE, self.EQUITY_MINIMUM)
        if security.type == SecurityType.OPTION:
            return qty * self.OPTION_PER_CONTRACT
        if security.type == SecurityType.FUTURE:
            return qty * self.FUTURE_PER_CONTRACT
        return Decimal("0")


class GDAXFeeModel(FeeModel):
    """Maker/taker percentage of notional. Resting limit orders pay the maker rate."""

    MAKER_RATE = Decimal("0.0015")
    TAKER_RATE = Decimal("0.0025")

    def get_order_fee(self, security: Security, order: Order, price: Decimal) -> Decimal:
        rate = self.MAKER_RATE if order.order_type == OrderType.LIMIT else self.TAKER_RATE
        return order.abs_quantity * Decimal(str(price)) * rate


class TDAmeritradeFeeModel(FeeModel):
    """Commission-free equities; per-contract fees on options and futures."""

    OPTION_PER_CONTRACT = Decimal("0.65")
    FUTURE_PER_CONTRACT = Decimal("2.25")

    def get_order_fee(self, security: Security, order: Order, price: Decimal) -> Decimal:
        if security.type == SecurityType.OPTION:
            return order.abs_quantity * self.OPTION_PER_CONTRACT
        if security.type == SecurityType.FUTURE:
            return order.abs_quantity * self.FUTURE_PER_CONTRACT
        return Decimal("0")
