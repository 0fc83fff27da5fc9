"""
Environment configuration for picking a brokerage model.

QTOS_BROKERAGE selects the venue (default: "default"); QTOS_ACCOUNT_TYPE
("cash" or "margin") overrides the venue's default account type.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from qtos_brokerage.errors import ConfigurationError
from qtos_brokerage.models.venue import BrokerageModel
from qtos_brokerage.registry import create_brokerage_model
from qtos_brokerage.types import AccountType, BrokerageName

logger = logging.getLogger(__name__)

BROKERAGE_ENV = "QTOS_BROKERAGE"
ACCOUNT_TYPE_ENV = "QTOS_ACCOUNT_TYPE"


def _account_type_from_env(value: str) -> AccountType | None:
    value = value.strip().lower()
    if not value:
        return None
    try:
        return AccountType(value)
    except ValueError:
        raise ConfigurationError(
            f"{ACCOUNT_TYPE_ENV}={value!r} is not a valid account type; use 'cash' or 'margin'."
        ) from None


def brokerage_model_from_env(environ: Mapping[str, str] | None = None) -> BrokerageModel:
    """Build the brokerage model named by the environment (os.environ by default)."""
    env = os.environ if environ is None else environ
    name = env.get(BROKERAGE_ENV, "").strip() or BrokerageName.DEFAULT.value
    account_type = _account_type_from_env(env.get(ACCOUNT_TYPE_ENV, ""))
    logger.info(
        "Brokerage from environment: %s=%s, %s=%s",
        BROKERAGE_ENV,
        name,
        ACCOUNT_TYPE_ENV,
        account_type.value if account_type else "<venue default>",
    )
    return create_brokerage_model(name, account_type)
