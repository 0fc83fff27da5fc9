"""
GDAX (Coinbase Pro): cash-only crypto exchange.
"""

from __future__ import annotations

from datetime import datetime

from qtos_brokerage.fees import GDAXFeeModel
from qtos_brokerage.models.venue import BrokerageModel, VenueRules
from qtos_brokerage.order import OrderType, TimeInForce
from qtos_brokerage.security import Market, SecurityType, Symbol
from qtos_brokerage.types import AccountType

# https://blog.coinbase.com/coinbase-pro-market-structure-update-fbd9d49f43d7
STOP_MARKET_ORDER_SUPPORT_END_DATE = datetime(2019, 3, 23, 1, 0, 0)

GDAX_RULES = VenueRules(
    name="GDAX",
    default_account_type=AccountType.CASH,
    cash_only=True,
    supported_security_types=frozenset({SecurityType.CRYPTO}),
    supported_order_types=frozenset({
        OrderType.MARKET,
        OrderType.LIMIT,
        OrderType.STOP_MARKET,
        OrderType.STOP_LIMIT,
    }),
    order_type_cutoffs={OrderType.STOP_MARKET: STOP_MARKET_ORDER_SUPPORT_END_DATE},
    time_in_force=TimeInForce.GOOD_TIL_CANCELED,
    reject_submitted_orders=True,
    supports_updates=False,
    fee_model=GDAXFeeModel,
    benchmark_symbol=Symbol.create("BTCUSD", SecurityType.CRYPTO, Market.GDAX),
    default_markets={SecurityType.CRYPTO: Market.GDAX},
)


class GDAXBrokerageModel(BrokerageModel):
    """GDAX brokerage model. Margin accounts raise ConfigurationError."""

    def __init__(self, account_type: AccountType = AccountType.CASH) -> None:
        super().__init__(GDAX_RULES, account_type)
