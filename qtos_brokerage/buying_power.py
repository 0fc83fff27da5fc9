"""
Buying-power models selected by brokerage models.

Only leverage and the free-buying-power buffer are modelled here; how much
capital an order consumes is the order-management layer's concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class BuyingPowerModel(ABC):
    """Leverage available to positions under this model."""

    @abstractmethod
    def get_leverage(self) -> Decimal:
        ...


class CashBuyingPowerModel(BuyingPowerModel):
    """Cash account: no borrowing, leverage is always 1."""

    def get_leverage(self) -> Decimal:
        return Decimal("1")

    def __repr__(self) -> str:
        return "CashBuyingPowerModel()"


class SecurityMarginModel(BuyingPowerModel):
    """
    Margin account with a fixed leverage.
    required_free_buying_power_percent is held back from every order as a buffer.
    """

    def __init__(
        self,
        leverage: Decimal | int | float = 1,
        required_free_buying_power_percent: Decimal | int | float = 0,
    ) -> None:
        leverage = Decimal(str(leverage))
        if leverage < 1:
            raise ValueError(f"leverage must be >= 1, got {leverage}")
        self._leverage = leverage
        self.required_free_buying_power_percent = Decimal(str(required_free_buying_power_percent))

    def get_leverage(self) -> Decimal:
        return self._leverage

    def __repr__(self) -> str:
        return (
            f"SecurityMarginModel(leverage={self._leverage}, "
            f"required_free_buying_power_percent={self.required_free_buying_power_percent})"
        )
