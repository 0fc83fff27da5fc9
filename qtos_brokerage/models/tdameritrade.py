"""
TD Ameritrade: equities, options and futures on cash or margin accounts.
"""

from __future__ import annotations

from qtos_brokerage.fees import TDAmeritradeFeeModel
from qtos_brokerage.models.venue import BrokerageModel, VenueRules
from qtos_brokerage.order import OrderType
from qtos_brokerage.security import SecurityType
from qtos_brokerage.types import AccountType

TD_AMERITRADE_RULES = VenueRules(
    name="TDAmeritrade",
    default_account_type=AccountType.MARGIN,
    supported_security_types=frozenset({SecurityType.EQUITY, SecurityType.OPTION, SecurityType.FUTURE}),
    supported_order_types=frozenset({
        OrderType.MARKET,
        OrderType.LIMIT,
        OrderType.STOP_MARKET,
        OrderType.STOP_LIMIT,
    }),
    supports_updates=True,
    fee_model=TDAmeritradeFeeModel,
    order_type_message="{order_type} order is not supported by {venue}.",
)


class TDAmeritradeBrokerageModel(BrokerageModel):
    """TD Ameritrade brokerage model. Defaults to a margin account."""

    def __init__(self, account_type: AccountType = AccountType.MARGIN) -> None:
        super().__init__(TD_AMERITRADE_RULES, account_type)
