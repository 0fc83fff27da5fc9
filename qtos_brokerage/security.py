"""
Security: a tradable instrument as seen by the brokerage models.

Immutable. Built by the surrounding system; brokerage models only read it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class SecurityType(Enum):
    BASE = "base"
    EQUITY = "equity"
    OPTION = "option"
    FUTURE = "future"
    FOREX = "forex"
    CFD = "cfd"
    CRYPTO = "crypto"
    INDEX = "index"


class Market:
    """Market identifiers. Plain strings so callers can add their own."""

    USA = "usa"
    GDAX = "gdax"
    CME = "cme"
    OANDA = "oanda"


@dataclass(frozen=True)
class Symbol:
    """Ticker plus the security type and market that disambiguate it."""

    value: str
    security_type: SecurityType
    market: str = Market.USA

    @classmethod
    def create(cls, ticker: str, security_type: SecurityType, market: str) -> Symbol:
        return cls(value=ticker.upper(), security_type=security_type, market=market.lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SymbolProperties:
    """
    Venue trading constraints for one symbol.
    minimum_order_size is None when the venue imposes no minimum.
    """

    lot_size: Decimal = Decimal("1")
    minimum_order_size: Decimal | None = None
    quote_currency: str = "USD"

    def __post_init__(self) -> None:
        object.__setattr__(self, "lot_size", Decimal(str(self.lot_size)))
        if self.minimum_order_size is not None:
            object.__setattr__(self, "minimum_order_size", Decimal(str(self.minimum_order_size)))


@dataclass(frozen=True)
class Security:
    """A tradable instrument: symbol plus its symbol properties."""

    symbol: Symbol
    properties: SymbolProperties = field(default_factory=SymbolProperties)

    @property
    def type(self) -> SecurityType:
        return self.symbol.security_type

    @property
    def market(self) -> str:
        return self.symbol.market
