"""
Default brokerage model: baseline decisions and strategy selections.

Used directly when no venue is configured, and composed into every venue model
as the fallback for anything the venue does not override.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from qtos_brokerage.benchmark import Benchmark, SecurityRegistry, create_benchmark
from qtos_brokerage.buying_power import BuyingPowerModel, CashBuyingPowerModel, SecurityMarginModel
from qtos_brokerage.constraints import is_valid_order_size
from qtos_brokerage.errors import ConfigurationError
from qtos_brokerage.fees import ConstantFeeModel, FeeModel, InteractiveBrokersFeeModel
from qtos_brokerage.messages import PolicyDecision
from qtos_brokerage.order import Order, UpdateOrderRequest
from qtos_brokerage.security import Market, Security, SecurityType, Symbol
from qtos_brokerage.types import AccountType

logger = logging.getLogger(__name__)

DEFAULT_BENCHMARK = Symbol.create("SPY", SecurityType.EQUITY, Market.USA)

DEFAULT_MARKETS: Mapping[SecurityType, str] = MappingProxyType({
    SecurityType.BASE: Market.USA,
    SecurityType.EQUITY: Market.USA,
    SecurityType.OPTION: Market.USA,
    SecurityType.INDEX: Market.USA,
    SecurityType.FUTURE: Market.CME,
    SecurityType.FOREX: Market.OANDA,
    SecurityType.CFD: Market.OANDA,
    SecurityType.CRYPTO: Market.GDAX,
})

# Leverage on margin accounts; security types not listed get 1.
_MARGIN_LEVERAGE: Mapping[SecurityType, Decimal] = MappingProxyType({
    SecurityType.EQUITY: Decimal("2"),
    SecurityType.FOREX: Decimal("50"),
    SecurityType.CFD: Decimal("50"),
})

_PER_UNIT_FEE_TYPES = frozenset({SecurityType.EQUITY, SecurityType.OPTION, SecurityType.FUTURE})


def validate_account_type(account_type: object) -> AccountType:
    if not isinstance(account_type, AccountType):
        raise ConfigurationError(f"Unknown account type: {account_type!r}")
    return account_type


class DefaultBrokerageModel:
    """
    Baseline brokerage behaviour: accepts any order of valid size, allows
    updates, and picks strategies by account type and security type.

    required_free_buying_power_percent is the one setting callers may change
    after construction; it feeds every margin model built afterwards.
    """

    def __init__(self, account_type: AccountType = AccountType.MARGIN) -> None:
        self._account_type = validate_account_type(account_type)
        self.required_free_buying_power_percent = Decimal("0")

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def default_markets(self) -> Mapping[SecurityType, str]:
        return DEFAULT_MARKETS

    def can_submit_order(self, security: Security, order: Order) -> PolicyDecision:
        """Accept unless the order size violates the symbol's size constraints."""
        decision = is_valid_order_size(security, order.quantity)
        if not decision:
            logger.debug("Order for %s rejected: %s", security.symbol.value, decision.message.message)
        return decision

    def can_update_order(
        self,
        security: Security,
        order: Order,
        request: UpdateOrderRequest,
    ) -> PolicyDecision:
        return PolicyDecision.accept()

    def get_leverage(self, security: Security) -> Decimal:
        if self._account_type == AccountType.CASH:
            return Decimal("1")
        return _MARGIN_LEVERAGE.get(security.type, Decimal("1"))

    def get_fee_model(self, security: Security) -> FeeModel:
        if security.type in _PER_UNIT_FEE_TYPES:
            return InteractiveBrokersFeeModel()
        return ConstantFeeModel(0)

    def get_buying_power_model(self, security: Security) -> BuyingPowerModel:
        if security.type == SecurityType.CRYPTO and self._account_type == AccountType.CASH:
            return CashBuyingPowerModel()
        return SecurityMarginModel(self.get_leverage(security), self.required_free_buying_power_percent)

    def get_benchmark(self, securities: SecurityRegistry) -> Benchmark:
        return create_benchmark(securities, DEFAULT_BENCHMARK)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(account_type={self._account_type.value!r})"
