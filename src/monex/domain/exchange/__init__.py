"""Currency pairs and exchange rates built on top of the monetary domain."""

from monex.domain.exchange.currency_pair import CurrencyPair
from monex.domain.exchange.exchange_rate import ExchangeRate
from monex.domain.exchange.two_way_exchange_rate import TwoWayExchangeRate

__all__ = [
    "CurrencyPair",
    "ExchangeRate",
    "TwoWayExchangeRate",
]
