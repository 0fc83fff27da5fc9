"""
Benchmarks: the reference instrument a brokerage model measures performance against.

SecurityRegistry holds the securities known to the trading session and, optionally,
their price history (OHLC(V) DataFrame). SecurityBenchmark evaluates to the last
close at or before a given time.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

import pandas as pd

from qtos_brokerage.security import Security, Symbol, SymbolProperties

logger = logging.getLogger(__name__)

# Standard column names; lowercase for normalization
OHLCV = ("open", "high", "low", "close", "volume")


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Ensure columns are lowercase; map common aliases to open/high/low/close/volume."""
    out = df.copy()
    out.columns = [str(c).lower().strip() for c in out.columns]
    renames = {
        "o": "open",
        "h": "high",
        "l": "low",
        "c": "close",
        "v": "volume",
        "vol": "volume",
    }
    return out.rename(columns={k: v for k, v in renames.items() if k in out.columns})


def load_price_history(
    df: pd.DataFrame,
    *,
    datetime_index: str | None = None,
) -> pd.DataFrame:
    """
    Normalize a price DataFrame: sorted DatetimeIndex named 'datetime' and
    OHLC(V) columns only.

    Parameters
    ----------
    df : pd.DataFrame
        Raw prices (columns may be mixed case or aliased).
    datetime_index : str, optional
        Column to use as index. If None, the index is converted to datetimes.
    """
    out = _normalize_columns(df)
    if datetime_index is not None and datetime_index.lower() in out.columns:
        col = datetime_index.lower()
        out["datetime"] = pd.to_datetime(out[col])
        out = out.drop(columns=[col]).set_index("datetime")
    elif not isinstance(out.index, pd.DatetimeIndex):
        out.index = pd.to_datetime(out.index)
    out = out.sort_index()
    out.index.name = "datetime"
    return out[[c for c in OHLCV if c in out.columns]]


class SecurityRegistry:
    """Securities known to the session, keyed by Symbol."""

    def __init__(self, securities: Iterable[Security] = ()) -> None:
        self._securities: dict[Symbol, Security] = {}
        self._history: dict[Symbol, pd.DataFrame] = {}
        for security in securities:
            self.add(security)

    def add(self, security: Security) -> Security:
        self._securities[security.symbol] = security
        return security

    def get(self, symbol: Symbol) -> Security | None:
        return self._securities.get(symbol)

    def get_or_add(self, symbol: Symbol, properties: SymbolProperties | None = None) -> Security:
        """Return the registered security, registering a new one if needed."""
        security = self._securities.get(symbol)
        if security is None:
            security = Security(symbol=symbol, properties=properties or SymbolProperties())
            self.add(security)
            logger.debug("Registered security %s (%s, %s)", symbol.value, symbol.security_type.value, symbol.market)
        return security

    def set_price_history(self, symbol: Symbol, data: pd.DataFrame, *, datetime_index: str | None = None) -> None:
        """Attach OHLC(V) history to a symbol, registering it if needed."""
        self.get_or_add(symbol)
        self._history[symbol] = load_price_history(data, datetime_index=datetime_index)

    def price_history(self, symbol: Symbol) -> pd.DataFrame:
        """History for symbol; empty DataFrame if none was attached."""
        history = self._history.get(symbol)
        if history is None:
            return pd.DataFrame(columns=list(OHLCV))
        return history

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._securities

    def __len__(self) -> int:
        return len(self._securities)


class Benchmark(ABC):
    """Reference value at a point in time."""

    @abstractmethod
    def evaluate(self, time: datetime) -> Decimal:
        ...


class SecurityBenchmark(Benchmark):
    """Benchmark that tracks the close price of a single security."""

    def __init__(self, security: Security, securities: SecurityRegistry) -> None:
        self.security = security
        self._securities = securities

    @classmethod
    def create_instance(cls, securities: SecurityRegistry, symbol: Symbol) -> SecurityBenchmark:
        return cls(securities.get_or_add(symbol), securities)

    def evaluate(self, time: datetime) -> Decimal:
        """Last close at or before `time`; 0 when no price is known yet."""
        history = self._securities.price_history(self.security.symbol)
        if history.empty or "close" not in history.columns:
            return Decimal("0")
        close = history["close"].asof(pd.Timestamp(time))
        if pd.isna(close):
            return Decimal("0")
        return Decimal(str(float(close)))

    def __repr__(self) -> str:
        return f"SecurityBenchmark({self.security.symbol.value!r}, market={self.security.market!r})"


def create_benchmark(securities: SecurityRegistry, symbol: Symbol) -> SecurityBenchmark:
    """Build a benchmark on `symbol`, registering the security if it is new."""
    return SecurityBenchmark.create_instance(securities, symbol)
