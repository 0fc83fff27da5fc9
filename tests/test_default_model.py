"""
Tests for DefaultBrokerageModel: submit/update decisions and strategy selection.
"""

from decimal import Decimal

import pytest

from qtos_brokerage import (
    AccountType,
    ConfigurationError,
    DefaultBrokerageModel,
    Market,
    Order,
    OrderType,
    Security,
    SecurityRegistry,
    SecurityType,
    Symbol,
    SymbolProperties,
    TimeInForce,
    UpdateOrderRequest,
)
from qtos_brokerage.buying_power import CashBuyingPowerModel, SecurityMarginModel
from qtos_brokerage.fees import ConstantFeeModel, InteractiveBrokersFeeModel
from qtos_brokerage.models.default import DEFAULT_BENCHMARK


def _security(ticker: str, security_type: SecurityType, market: str = Market.USA, **props) -> Security:
    return Security(Symbol.create(ticker, security_type, market), SymbolProperties(**props))


SPY = _security("SPY", SecurityType.EQUITY)
EURUSD = _security("EURUSD", SecurityType.FOREX, Market.OANDA, lot_size=0)
BTC = _security("BTCUSD", SecurityType.CRYPTO, Market.GDAX, lot_size=Decimal("0.00000001"))


# --- Construction ---


def test_default_account_type_is_margin():
    assert DefaultBrokerageModel().account_type == AccountType.MARGIN


def test_rejects_unknown_account_type():
    with pytest.raises(ConfigurationError):
        DefaultBrokerageModel("margin")


# --- Decisions ---


def test_can_submit_accepts_any_type_of_valid_size():
    model = DefaultBrokerageModel()
    order = Order(symbol=SPY.symbol, quantity=10, order_type=OrderType.MARKET_ON_CLOSE, time_in_force=TimeInForce.DAY)
    decision = model.can_submit_order(SPY, order)
    assert decision.accepted
    assert decision.message is None


def test_can_submit_rejects_invalid_size():
    model = DefaultBrokerageModel()
    order = Order(symbol=SPY.symbol, quantity=Decimal("0.5"))
    decision = model.can_submit_order(SPY, order)
    assert not decision.accepted
    assert "lot size" in decision.message.message


def test_can_update_accepts():
    model = DefaultBrokerageModel()
    order = Order(symbol=SPY.symbol, quantity=10, broker_ids=("1",))
    assert model.can_update_order(SPY, order, UpdateOrderRequest(quantity=Decimal("5"))).accepted


# --- Leverage / buying power ---


def test_margin_leverage_by_security_type():
    model = DefaultBrokerageModel(AccountType.MARGIN)
    assert model.get_leverage(SPY) == Decimal("2")
    assert model.get_leverage(EURUSD) == Decimal("50")
    assert model.get_leverage(BTC) == Decimal("1")


def test_cash_leverage_is_one():
    model = DefaultBrokerageModel(AccountType.CASH)
    for sec in (SPY, EURUSD, BTC):
        assert model.get_leverage(sec) == Decimal("1")


def test_buying_power_crypto_cash_account():
    model = DefaultBrokerageModel(AccountType.CASH)
    assert isinstance(model.get_buying_power_model(BTC), CashBuyingPowerModel)


def test_buying_power_margin_uses_leverage_and_buffer():
    model = DefaultBrokerageModel(AccountType.MARGIN)
    model.required_free_buying_power_percent = Decimal("0.05")
    bp = model.get_buying_power_model(SPY)
    assert isinstance(bp, SecurityMarginModel)
    assert bp.get_leverage() == Decimal("2")
    assert bp.required_free_buying_power_percent == Decimal("0.05")


# --- Fees / benchmark / markets ---


def test_fee_model_by_security_type():
    model = DefaultBrokerageModel()
    assert isinstance(model.get_fee_model(SPY), InteractiveBrokersFeeModel)
    fee = model.get_fee_model(BTC)
    assert isinstance(fee, ConstantFeeModel)
    assert fee.fee == Decimal("0")


def test_benchmark_is_spy():
    registry = SecurityRegistry()
    benchmark = DefaultBrokerageModel().get_benchmark(registry)
    assert benchmark.security.symbol == DEFAULT_BENCHMARK
    assert DEFAULT_BENCHMARK in registry


def test_default_markets():
    markets = DefaultBrokerageModel().default_markets
    assert markets[SecurityType.EQUITY] == Market.USA
    assert markets[SecurityType.FUTURE] == Market.CME
