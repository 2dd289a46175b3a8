__version__ = "0.1.0"

from monex.domain.monetary.currency import Currency
from monex.domain.monetary.money import Money
from monex.domain.exchange.currency_pair import CurrencyPair
from monex.domain.exchange.exchange_rate import ExchangeRate
from monex.domain.exchange.two_way_exchange_rate import TwoWayExchangeRate

__all__ = ["Currency", "Money", "CurrencyPair", "ExchangeRate", "TwoWayExchangeRate"]
