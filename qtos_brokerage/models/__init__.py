"""
Brokerage models: the default model and one rules record per venue.
"""

from qtos_brokerage.models.default import DefaultBrokerageModel
from qtos_brokerage.models.venue import BrokerageModel, VenueRules
from qtos_brokerage.models.gdax import GDAX_RULES, GDAXBrokerageModel
from qtos_brokerage.models.tdameritrade import TD_AMERITRADE_RULES, TDAmeritradeBrokerageModel

__all__ = [
    "DefaultBrokerageModel",
    "BrokerageModel",
    "VenueRules",
    "GDAX_RULES",
    "GDAXBrokerageModel",
    "TD_AMERITRADE_RULES",
    "TDAmeritradeBrokerageModel",
]
