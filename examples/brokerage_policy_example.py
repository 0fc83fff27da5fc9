"""
Brokerage policy example: ask venue models whether they would accept orders.

Shows: building models directly and from the registry, submit/update decisions
with their diagnostics, and the strategies each venue selects.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

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
    create_brokerage_model,
)


def show(label: str, decision) -> None:
    accepted, message = decision
    print(f"  {label:<40} {'ACCEPTED' if accepted else 'REJECTED'}" + (f" - {message.message}" if message else ""))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    btc = Security(
        Symbol.create("BTCUSD", SecurityType.CRYPTO, Market.GDAX),
        SymbolProperties(lot_size=Decimal("0.00000001"), minimum_order_size=Decimal("0.001")),
    )
    aapl = Security(Symbol.create("AAPL", SecurityType.EQUITY, Market.USA))
    now = datetime(2024, 6, 3, 14, 30)

    print("--- GDAX (cash only) ---")
    gdax = GDAXBrokerageModel()
    show("BTC limit 0.5", gdax.can_submit_order(btc, Order(btc.symbol, Decimal("0.5"), OrderType.LIMIT, time=now)))
    show("BTC limit 0.0001", gdax.can_submit_order(btc, Order(btc.symbol, Decimal("0.0001"), OrderType.LIMIT, time=now)))
    show("AAPL market 10", gdax.can_submit_order(aapl, Order(aapl.symbol, 10, time=now)))
    show("BTC stop market (after cutoff)", gdax.can_submit_order(btc, Order(btc.symbol, 1, OrderType.STOP_MARKET, time=now)))
    show("BTC day order", gdax.can_submit_order(btc, Order(btc.symbol, 1, time_in_force=TimeInForce.DAY, time=now)))
    open_order = Order(btc.symbol, 1, OrderType.LIMIT, time=now, broker_ids=("gdax-1",))
    show("update open BTC order", gdax.can_update_order(btc, open_order, UpdateOrderRequest(limit_price=Decimal("65000"))))
    print(f"  leverage={gdax.get_leverage(btc)}, buying power={gdax.get_buying_power_model(btc)!r}")

    try:
        GDAXBrokerageModel(AccountType.MARGIN)
    except ConfigurationError as e:
        print(f"  margin account: {e}")

    print("\n--- TD Ameritrade (from registry) ---")
    tda = create_brokerage_model("td_ameritrade")
    show("AAPL stop limit 10", tda.can_submit_order(aapl, Order(aapl.symbol, 10, OrderType.STOP_LIMIT, time=now)))
    show("AAPL market on open 10", tda.can_submit_order(aapl, Order(aapl.symbol, 10, OrderType.MARKET_ON_OPEN, time=now)))
    show("update open AAPL order", tda.can_update_order(aapl, Order(aapl.symbol, 10, broker_ids=("td-1",)), UpdateOrderRequest()))

    registry = SecurityRegistry()
    print(f"  fee model={type(tda.get_fee_model(aapl)).__name__}, benchmark={tda.get_benchmark(registry)!r}")
    print(f"  GDAX benchmark={gdax.get_benchmark(registry)!r}")


if __name__ == "__main__":
    main()
