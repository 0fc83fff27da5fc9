"""
Venue brokerage models: a VenueRules record composed with the default model.

VenueRules holds only what a venue changes (supported types, withdrawn order
types, accepted time in force, update capability, strategy choices).
BrokerageModel applies those rules in a fixed order and falls back to
DefaultBrokerageModel for everything else.

Submission checks, first failure wins:
    1. order already carries broker ids (venues that forbid resubmission)
    2. order size
    3. security type
    4. order type
    5. order type withdrawn at or before the order time
    6. time in force
    7. default model
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType

from qtos_brokerage.benchmark import Benchmark, SecurityRegistry, create_benchmark
from qtos_brokerage.buying_power import BuyingPowerModel, CashBuyingPowerModel
from qtos_brokerage.constraints import (
    is_past_cutoff,
    is_valid_order_size,
    supports_order_type,
    supports_security_type,
    supports_time_in_force,
)
from qtos_brokerage.errors import ConfigurationError
from qtos_brokerage.fees import FeeModel
from qtos_brokerage.messages import GENERIC_CODE, PolicyDecision, PolicyMessage
from qtos_brokerage.models.default import DefaultBrokerageModel, validate_account_type
from qtos_brokerage.order import Order, OrderType, TimeInForce, UpdateOrderRequest
from qtos_brokerage.security import Security, SecurityType, Symbol
from qtos_brokerage.types import AccountType

logger = logging.getLogger(__name__)

UPDATE_NOT_SUPPORTED = "Brokerage does not support update. You must cancel and re-create instead."


@dataclass(frozen=True)
class VenueRules:
    """
    What a venue changes relative to the default model. Immutable.

    None for a supported-type set or time_in_force means "no restriction".
    Message templates may use {venue}, {security_type}, {order_type},
    {time_in_force} and {cutoff}.
    """

    name: str
    default_account_type: AccountType = AccountType.MARGIN
    cash_only: bool = False
    supported_security_types: frozenset[SecurityType] | None = None
    supported_order_types: frozenset[OrderType] | None = None
    order_type_cutoffs: Mapping[OrderType, datetime] = field(default_factory=dict)
    time_in_force: TimeInForce | None = None
    reject_submitted_orders: bool = False
    supports_updates: bool = True
    update_message: str = UPDATE_NOT_SUPPORTED
    fee_model: Callable[[], FeeModel] | None = None
    benchmark_symbol: Symbol | None = None
    default_markets: Mapping[SecurityType, str] | None = None
    security_type_message: str = "The {venue} brokerage model does not support {security_type} security type."
    order_type_message: str = "The {venue} brokerage model does not support {order_type} order type."
    cutoff_message: str = "{order_type} orders are no longer supported since {cutoff}."
    time_in_force_message: str = "The {venue} brokerage model does not support {time_in_force} time in force."

    def __post_init__(self) -> None:
        if self.supported_security_types is not None:
            object.__setattr__(self, "supported_security_types", frozenset(self.supported_security_types))
        if self.supported_order_types is not None:
            object.__setattr__(self, "supported_order_types", frozenset(self.supported_order_types))
        object.__setattr__(self, "order_type_cutoffs", MappingProxyType(dict(self.order_type_cutoffs)))
        if self.default_markets is not None:
            object.__setattr__(self, "default_markets", MappingProxyType(dict(self.default_markets)))
        if self.cash_only and self.default_account_type == AccountType.MARGIN:
            raise ConfigurationError(f"{self.name}: a cash-only venue cannot default to a margin account")


class BrokerageModel:
    """
    Brokerage model for one venue and account type.

    Holds a VenueRules record and a DefaultBrokerageModel; decisions are
    PolicyDecision values, never exceptions. Safe to share across threads.
    """

    def __init__(self, rules: VenueRules, account_type: AccountType | None = None) -> None:
        if account_type is None:
            account_type = rules.default_account_type
        account_type = validate_account_type(account_type)
        if rules.cash_only and account_type == AccountType.MARGIN:
            logger.warning("Rejected %s brokerage model configuration: margin account requested", rules.name)
            raise ConfigurationError(f"The {rules.name} brokerage does not currently support margin trading.")
        self.rules = rules
        self._default = DefaultBrokerageModel(account_type)
        logger.info("%s brokerage model ready (account_type=%s)", rules.name, account_type.value)

    @property
    def account_type(self) -> AccountType:
        return self._default.account_type

    @property
    def default(self) -> DefaultBrokerageModel:
        """The default model this venue falls back to."""
        return self._default

    @property
    def default_markets(self) -> Mapping[SecurityType, str]:
        if self.rules.default_markets is not None:
            return self.rules.default_markets
        return self._default.default_markets

    @property
    def required_free_buying_power_percent(self) -> Decimal:
        return self._default.required_free_buying_power_percent

    @required_free_buying_power_percent.setter
    def required_free_buying_power_percent(self, value: Decimal) -> None:
        self._default.required_free_buying_power_percent = Decimal(str(value))

    # --- Decisions ---

    def _reject(self, security: Security, order: Order, message: PolicyMessage) -> PolicyDecision:
        logger.debug(
            "%s rejected %s order for %s: %s",
            self.rules.name,
            order.order_type.value,
            security.symbol.value,
            message.message,
        )
        return PolicyDecision.reject(message)

    def can_submit_order(self, security: Security, order: Order) -> PolicyDecision:
        """Whether the venue would accept `order` for `security` right now."""
        rules = self.rules

        if rules.reject_submitted_orders and order.is_submitted:
            return self._reject(security, order, PolicyMessage.warning(rules.update_message, code=GENERIC_CODE))

        size = is_valid_order_size(security, order.quantity)
        if not size:
            return self._reject(security, order, size.message)

        if not supports_security_type(rules.supported_security_types, security.type):
            text = rules.security_type_message.format(venue=rules.name, security_type=security.type.value)
            return self._reject(security, order, PolicyMessage.warning(text))

        if not supports_order_type(rules.supported_order_types, order.order_type):
            text = rules.order_type_message.format(venue=rules.name, order_type=order.order_type.label)
            return self._reject(security, order, PolicyMessage.warning(text))

        if is_past_cutoff(rules.order_type_cutoffs, order.order_type, order.time):
            cutoff = rules.order_type_cutoffs[order.order_type]
            text = rules.cutoff_message.format(
                venue=rules.name,
                order_type=order.order_type.label,
                cutoff=cutoff.isoformat(sep=" "),
            )
            return self._reject(security, order, PolicyMessage.warning(text))

        if not supports_time_in_force(rules.time_in_force, order.time_in_force):
            text = rules.time_in_force_message.format(venue=rules.name, time_in_force=order.time_in_force.label)
            return self._reject(security, order, PolicyMessage.warning(text))

        return self._default.can_submit_order(security, order)

    def can_update_order(
        self,
        security: Security,
        order: Order,
        request: UpdateOrderRequest,
    ) -> PolicyDecision:
        """Venues either allow every update or none; the request content is not inspected."""
        if not self.rules.supports_updates:
            return self._reject(
                security, order, PolicyMessage.warning(self.rules.update_message, code=GENERIC_CODE)
            )
        return self._default.can_update_order(security, order, request)

    # --- Strategy selection ---

    def get_leverage(self, security: Security) -> Decimal:
        if self.rules.cash_only:
            return Decimal("1")
        return self._default.get_leverage(security)

    def get_fee_model(self, security: Security) -> FeeModel:
        if self.rules.fee_model is not None:
            return self.rules.fee_model()
        return self._default.get_fee_model(security)

    def get_buying_power_model(self, security: Security) -> BuyingPowerModel:
        if self.rules.cash_only:
            return CashBuyingPowerModel()
        return self._default.get_buying_power_model(security)

    def get_benchmark(self, securities: SecurityRegistry) -> Benchmark:
        if self.rules.benchmark_symbol is not None:
            return create_benchmark(securities, self.rules.benchmark_symbol)
        return self._default.get_benchmark(securities)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(venue={self.rules.name!r}, account_type={self.account_type.value!r})"
