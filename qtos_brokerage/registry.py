"""
Registry: venue name -> rules record, and the factory built on it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from qtos_brokerage.errors import ConfigurationError
from qtos_brokerage.models.gdax import GDAX_RULES
from qtos_brokerage.models.tdameritrade import TD_AMERITRADE_RULES
from qtos_brokerage.models.venue import BrokerageModel, VenueRules
from qtos_brokerage.types import AccountType, BrokerageName

logger = logging.getLogger(__name__)

DEFAULT_RULES = VenueRules(name="Default")

VENUE_RULES: Mapping[BrokerageName, VenueRules] = MappingProxyType({
    BrokerageName.DEFAULT: DEFAULT_RULES,
    BrokerageName.GDAX: GDAX_RULES,
    BrokerageName.TD_AMERITRADE: TD_AMERITRADE_RULES,
})


def _resolve_name(name: BrokerageName | str) -> BrokerageName:
    """Accept the enum or its value in any case, e.g. 'GDAX' or 'td_ameritrade'."""
    if isinstance(name, BrokerageName):
        return name
    try:
        return BrokerageName(str(name).strip().lower())
    except ValueError:
        known = ", ".join(n.value for n in BrokerageName)
        raise ConfigurationError(f"Unknown brokerage {name!r}. Known brokerages: {known}") from None


def supported_brokerages() -> list[BrokerageName]:
    return list(VENUE_RULES)


def get_rules(name: BrokerageName | str) -> VenueRules:
    return VENUE_RULES[_resolve_name(name)]


def create_brokerage_model(
    name: BrokerageName | str,
    account_type: AccountType | None = None,
) -> BrokerageModel:
    """
    Build the brokerage model for a venue.

    account_type None uses the venue's default. Raises ConfigurationError for an
    unknown venue or an account type the venue does not support.
    """
    brokerage = _resolve_name(name)
    logger.debug("Creating brokerage model for %s", brokerage.value)
    return BrokerageModel(VENUE_RULES[brokerage], account_type)
