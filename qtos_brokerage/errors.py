"""
Exceptions raised by brokerage models.

Rejections of orders are not exceptions; see qtos_brokerage.messages.PolicyDecision.
"""


class BrokerageModelError(Exception):
    """Base exception for brokerage model errors."""
    pass


class ConfigurationError(BrokerageModelError, ValueError):
    """Raised when a brokerage model cannot be built for the requested venue/account type."""
    pass
