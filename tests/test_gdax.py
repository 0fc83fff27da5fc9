"""
Tests for GDAXBrokerageModel: cash-only crypto venue with a withdrawn order type.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from qtos_brokerage import (
    AccountType,
    ConfigurationError,
    GDAXBrokerageModel,
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
from qtos_brokerage.buying_power import CashBuyingPowerModel
from qtos_brokerage.fees import GDAXFeeModel
from qtos_brokerage.messages import GENERIC_CODE, NOT_SUPPORTED, PolicyMessageType
from qtos_brokerage.models.gdax import STOP_MARKET_ORDER_SUPPORT_END_DATE
from qtos_brokerage.models.venue import UPDATE_NOT_SUPPORTED

BTC = Security(
    Symbol.create("BTCUSD", SecurityType.CRYPTO, Market.GDAX),
    SymbolProperties(lot_size=Decimal("0.00000001"), minimum_order_size=Decimal("0.001")),
)
SPY = Security(Symbol.create("SPY", SecurityType.EQUITY, Market.USA))
NOW = datetime(2024, 6, 3, 14, 30)


def _order(security: Security, quantity="0.5", **kwargs) -> Order:
    kwargs.setdefault("time", NOW)
    return Order(symbol=security.symbol, quantity=Decimal(quantity), **kwargs)


# --- Construction ---


def test_defaults_to_cash():
    assert GDAXBrokerageModel().account_type == AccountType.CASH


def test_margin_account_rejected():
    with pytest.raises(ConfigurationError, match="margin"):
        GDAXBrokerageModel(AccountType.MARGIN)


# --- Submission precedence ---


def test_accepts_valid_crypto_order():
    decision = GDAXBrokerageModel().can_submit_order(BTC, _order(BTC, order_type=OrderType.LIMIT))
    assert decision.accepted
    assert decision.message is None


def test_submitted_order_rejected_before_anything_else():
    # Equity, tiny size, unsupported type and TIF: the broker id check still wins.
    order = _order(
        SPY,
        quantity="0.1",
        order_type=OrderType.MARKET_ON_OPEN,
        time_in_force=TimeInForce.DAY,
        broker_ids=("gdax-1",),
    )
    decision = GDAXBrokerageModel().can_submit_order(SPY, order)
    assert not decision.accepted
    assert decision.message.message == UPDATE_NOT_SUPPORTED
    assert decision.message.code == GENERIC_CODE
    assert decision.message.type == PolicyMessageType.WARNING


def test_order_size_checked_before_types():
    order = _order(BTC, quantity="0.0001", order_type=OrderType.MARKET_ON_OPEN, time_in_force=TimeInForce.DAY)
    decision = GDAXBrokerageModel().can_submit_order(BTC, order)
    assert not decision.accepted
    assert "minimum order size" in decision.message.message


def test_equity_rejected_naming_security_type():
    decision = GDAXBrokerageModel().can_submit_order(SPY, _order(SPY, quantity="10"))
    assert not decision.accepted
    assert decision.message.code == NOT_SUPPORTED
    assert decision.message.type == PolicyMessageType.WARNING
    assert "equity" in decision.message.message
    assert "security type" in decision.message.message


def test_unsupported_order_type_named():
    order = _order(BTC, order_type=OrderType.MARKET_ON_CLOSE)
    decision = GDAXBrokerageModel().can_submit_order(BTC, order)
    assert not decision.accepted
    assert decision.message.code == NOT_SUPPORTED
    assert "Market On Close order type" in decision.message.message


def test_stop_market_rejected_at_cutoff():
    order = _order(BTC, order_type=OrderType.STOP_MARKET, time=STOP_MARKET_ORDER_SUPPORT_END_DATE)
    decision = GDAXBrokerageModel().can_submit_order(BTC, order)
    assert not decision.accepted
    assert decision.message.code == NOT_SUPPORTED
    assert decision.message.message == "Stop Market orders are no longer supported since 2019-03-23 01:00:00."


def test_stop_market_before_cutoff_proceeds_to_next_check():
    before = STOP_MARKET_ORDER_SUPPORT_END_DATE - timedelta(microseconds=1)
    order = _order(BTC, order_type=OrderType.STOP_MARKET, time=before, time_in_force=TimeInForce.DAY)
    decision = GDAXBrokerageModel().can_submit_order(BTC, order)
    assert not decision.accepted
    assert "time in force" in decision.message.message

    order = _order(BTC, order_type=OrderType.STOP_MARKET, time=before)
    assert GDAXBrokerageModel().can_submit_order(BTC, order).accepted


def test_stop_market_with_aware_time_after_cutoff_rejected():
    order = _order(BTC, order_type=OrderType.STOP_MARKET, time=datetime(2024, 1, 1, tzinfo=timezone.utc))
    decision = GDAXBrokerageModel().can_submit_order(BTC, order)
    assert not decision.accepted
    assert decision.message.message == "Stop Market orders are no longer supported since 2019-03-23 01:00:00."


def test_stop_market_with_aware_time_before_cutoff_accepted():
    order = _order(BTC, order_type=OrderType.STOP_MARKET, time=datetime(2019, 3, 23, 0, 59, tzinfo=timezone.utc))
    assert GDAXBrokerageModel().can_submit_order(BTC, order).accepted


def test_stop_market_without_time_rejected():
    order = _order(BTC, order_type=OrderType.STOP_MARKET, time=None)
    decision = GDAXBrokerageModel().can_submit_order(BTC, order)
    assert not decision.accepted
    assert decision.message.code == NOT_SUPPORTED
    assert decision.message.message == "Stop Market orders are no longer supported since 2019-03-23 01:00:00."


def test_market_order_without_time_accepted():
    assert GDAXBrokerageModel().can_submit_order(BTC, _order(BTC, time=None)).accepted


def test_stop_limit_unaffected_by_cutoff():
    order = _order(BTC, order_type=OrderType.STOP_LIMIT)
    assert GDAXBrokerageModel().can_submit_order(BTC, order).accepted


def test_time_in_force_must_be_gtc():
    decision = GDAXBrokerageModel().can_submit_order(BTC, _order(BTC, time_in_force=TimeInForce.DAY))
    assert not decision.accepted
    assert decision.message.code == NOT_SUPPORTED
    assert decision.message.message == "The GDAX brokerage model does not support Day time in force."


def test_decisions_are_idempotent():
    model = GDAXBrokerageModel()
    for order in (_order(BTC), _order(SPY, quantity="10"), _order(BTC, broker_ids=("x",))):
        security = BTC if order.symbol == BTC.symbol else SPY
        assert model.can_submit_order(security, order) == model.can_submit_order(security, order)


# --- Updates ---


def test_update_always_rejected():
    model = GDAXBrokerageModel()
    order = _order(BTC, broker_ids=("gdax-1",))
    for request in (UpdateOrderRequest(), UpdateOrderRequest(quantity=Decimal("1"), tag="resize")):
        decision = model.can_update_order(BTC, order, request)
        assert not decision.accepted
        assert decision.message.message == UPDATE_NOT_SUPPORTED


# --- Strategy selection ---


def test_leverage_and_buying_power_cash_for_every_type():
    model = GDAXBrokerageModel()
    for security_type in SecurityType:
        sec = Security(Symbol.create("X", security_type, Market.GDAX))
        assert model.get_leverage(sec) == Decimal("1")
        assert isinstance(model.get_buying_power_model(sec), CashBuyingPowerModel)


def test_fee_model():
    assert isinstance(GDAXBrokerageModel().get_fee_model(BTC), GDAXFeeModel)


def test_benchmark_is_btcusd():
    registry = SecurityRegistry()
    benchmark = GDAXBrokerageModel().get_benchmark(registry)
    assert benchmark.security.symbol.value == "BTCUSD"
    assert benchmark.security.type == SecurityType.CRYPTO
    assert benchmark.security.market == Market.GDAX


def test_default_markets():
    assert dict(GDAXBrokerageModel().default_markets) == {SecurityType.CRYPTO: Market.GDAX}
