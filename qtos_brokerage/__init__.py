"""
qtos-brokerage: brokerage capability and policy models.

Decides whether a venue would accept an order or an order update, and picks the
venue's fee, leverage, buying-power and benchmark strategies. No order routing,
no market data, no broker connections.
"""

__version__ = "0.1.0"

from qtos_brokerage.types import AccountType, BrokerageName
from qtos_brokerage.security import Market, Security, SecurityType, Symbol, SymbolProperties
from qtos_brokerage.order import Order, OrderType, TimeInForce, UpdateOrderRequest
from qtos_brokerage.messages import PolicyDecision, PolicyMessage, PolicyMessageType
from qtos_brokerage.errors import BrokerageModelError, ConfigurationError
from qtos_brokerage.benchmark import SecurityBenchmark, SecurityRegistry, create_benchmark
from qtos_brokerage.models import (
    BrokerageModel,
    DefaultBrokerageModel,
    GDAXBrokerageModel,
    TDAmeritradeBrokerageModel,
    VenueRules,
)
from qtos_brokerage.registry import create_brokerage_model, supported_brokerages
from qtos_brokerage.config import brokerage_model_from_env

__all__ = [
    "AccountType",
    "BrokerageName",
    "Market",
    "Security",
    "SecurityType",
    "Symbol",
    "SymbolProperties",
    "Order",
    "OrderType",
    "TimeInForce",
    "UpdateOrderRequest",
    "PolicyDecision",
    "PolicyMessage",
    "PolicyMessageType",
    "BrokerageModelError",
    "ConfigurationError",
    "SecurityBenchmark",
    "SecurityRegistry",
    "create_benchmark",
    "BrokerageModel",
    "DefaultBrokerageModel",
    "GDAXBrokerageModel",
    "TDAmeritradeBrokerageModel",
    "VenueRules",
    "create_brokerage_model",
    "supported_brokerages",
    "brokerage_model_from_env",
]
