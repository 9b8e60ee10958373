from __future__ import annotations

from bullion_rates.ingestion.strategy import PriceFeedStrategy
from bullion_rates.pipeline import build_rate_table


class _DummyStrategy:
    def __init__(self) -> None:
        self.fetched = 0

    def fetch(self) -> bytes:
        self.fetched += 1
        return b'{"items": [{"curr": "EUR", "xauPrice": 1850.0, "xagPrice": 22.0}]}'


def test_price_feed_strategy_contract() -> None:
    strategy: PriceFeedStrategy = _DummyStrategy()

    table = build_rate_table(strategy)

    assert strategy.fetched == 1
    assert table["EUR"].gold_rates.price_18k == 1387.5
