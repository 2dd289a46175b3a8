from __future__ import annotations

from decimal import Decimal, InvalidOperation

from monex.domain.errors import InvalidCurrencyError, InvalidPriceError, MonetaryFormatError
from monex.domain.exchange.currency_pair import CurrencyPair
from monex.domain.exchange.exchange_rate import ExchangeRate, RATE_SEPARATOR
from monex.domain.monetary.money import Money
from monex.utils.numeric_tools import DecimalLike, as_decimal, format_decimal, parse_decimal


class TwoWayExchangeRate:
    """Represents a quote with separate prices for selling and buying the base currency.

    Attributes:
        pair (CurrencyPair): The currency pair.
        bid (Decimal): Quote currency received for selling one unit of base currency. Always > 0.
        ask (Decimal): Quote currency paid for buying one unit of base currency. Always > 0.

    No ordering between $bid and $ask is enforced; a crossed quote (bid > ask) is a valid value.
    """

    __slots__ = ("_pair", "_bid", "_ask")

    def __init__(self, pair: CurrencyPair, bid: DecimalLike, ask: DecimalLike):
        """Initialize a new two-way exchange rate.

        Args:
            pair: The currency pair.
            bid: Price for selling base currency (Decimal-like scalar).
            ask: Price for buying base currency (Decimal-like scalar).

        Raises:
            TypeError: If $pair is not CurrencyPair.
            InvalidPriceError: If $bid or $ask is zero or negative.
        """
        # Raise: $pair must be CurrencyPair
        if not isinstance(pair, CurrencyPair):
            raise TypeError(f"$pair must be a CurrencyPair instance, but provided value is: {pair}")

        # Raise: $bid and $ask must be convertible to Decimal
        try:
            decimal_bid = as_decimal(bid)
            decimal_ask = as_decimal(ask)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `TwoWayExchangeRate` because $bid ({bid}) or $ask ({ask}) cannot be converted to Decimal") from e

        # Raise: Validate prices (zero check on both sides goes first)
        for price in (decimal_bid, decimal_ask):
            if not price.is_finite():
                raise InvalidPriceError(f"Price must be finite ({price})")
        if decimal_bid == 0 or decimal_ask == 0:
            raise InvalidPriceError.cannot_be_zero()
        for price in (decimal_bid, decimal_ask):
            if price < 0:
                raise InvalidPriceError.cannot_be_less_than_zero(format_decimal(price))

        self._pair = pair
        self._bid = decimal_bid
        self._ask = decimal_ask

    @property
    def pair(self) -> CurrencyPair:
        """Get the currency pair."""
        return self._pair

    @property
    def bid(self) -> Decimal:
        """Get the bid price."""
        return self._bid

    @property
    def ask(self) -> Decimal:
        """Get the ask price."""
        return self._ask

    def get_direct_exchange_rate(self) -> ExchangeRate:
        """Rate for selling base currency: the pair priced at $bid."""
        return ExchangeRate(self.pair, self.bid)

    def get_inverted_exchange_rate(self) -> ExchangeRate:
        """Rate for selling quote currency: the swapped pair priced at 1 / $ask."""
        return ExchangeRate(self.pair.swap(), 1 / self.ask)

    def exchange(self, money_to_sell: Money) -> Money:
        """Sell $money_to_sell in either currency of the pair and get the other currency.

        Base currency is sold at $bid, quote currency buys base currency at $ask.

        Raises:
            InvalidCurrencyError: If $money_to_sell is in neither currency of the pair.
        """
        if money_to_sell.currency == self.pair.base_currency:
            return self.get_direct_exchange_rate().exchange(money_to_sell)

        if money_to_sell.currency == self.pair.quote_currency:
            return self.get_inverted_exchange_rate().exchange(money_to_sell)

        raise InvalidCurrencyError(self.pair.base_currency, money_to_sell.currency)

    def get_money_to_exchange(self, money_to_buy: Money) -> Money:
        """Compute how much of the other currency must be sold to get $money_to_buy.

        Exact inverse of `exchange`: `rate.get_money_to_exchange(rate.exchange(m)) == m`.

        Raises:
            InvalidCurrencyError: If $money_to_buy is in neither currency of the pair.
        """
        if money_to_buy.currency == self.pair.quote_currency:
            return self.get_direct_exchange_rate().get_money_to_exchange(money_to_buy)

        if money_to_buy.currency == self.pair.base_currency:
            return self.get_inverted_exchange_rate().get_money_to_exchange(money_to_buy)

        raise InvalidCurrencyError(self.pair.quote_currency, money_to_buy.currency)

    def invert(self) -> TwoWayExchangeRate:
        """Quote the same market from the other side: swapped pair, bid = 1 / ask, ask = 1 / bid."""
        return TwoWayExchangeRate(self.pair.swap(), 1 / self.ask, 1 / self.bid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TwoWayExchangeRate):
            return False
        return self.pair == other.pair and self.bid == other.bid and self.ask == other.ask

    def __hash__(self) -> int:
        return hash((self.pair, self.bid, self.ask))

    def __str__(self) -> str:
        """Return string like 'EUR/USD rate: 0.9/1.1'."""
        return f"{self.pair}{RATE_SEPARATOR}{format_decimal(self.bid)}/{format_decimal(self.ask)}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pair={self.pair}, bid={format_decimal(self.bid)}, ask={format_decimal(self.ask)})"

    @classmethod
    def from_str(cls, value_str: str) -> TwoWayExchangeRate:
        """Parse TwoWayExchangeRate from string like 'EUR/USD rate: 0.9/1.1'.

        Raises:
            TypeError: If $value_str is None.
            MonetaryFormatError: If a delimiter is missing, the pair is invalid or bid/ask is not a decimal.
            InvalidPriceError: If the parsed bid or ask is zero or negative.
        """
        # Raise: None is not a string to parse
        if value_str is None:
            raise TypeError("Cannot call `TwoWayExchangeRate.from_str` because $value_str is None")

        pair_part, separator, prices_part = value_str.partition(RATE_SEPARATOR)
        if not separator:
            raise MonetaryFormatError("TwoWayExchangeRate", value_str, f"separator '{RATE_SEPARATOR}' is missing")

        bid_part, separator, ask_part = prices_part.partition("/")
        if not separator:
            raise MonetaryFormatError("TwoWayExchangeRate", value_str, "prices must be in format 'bid/ask'")

        try:
            pair = CurrencyPair.from_str(pair_part)
        except MonetaryFormatError as e:
            raise MonetaryFormatError("TwoWayExchangeRate", value_str, f"pair part '{pair_part}' is invalid") from e

        try:
            bid = parse_decimal(bid_part)
            ask = parse_decimal(ask_part)
        except ValueError as e:
            raise MonetaryFormatError("TwoWayExchangeRate", value_str, f"bid/ask part '{prices_part}' is invalid") from e

        return cls(pair, bid, ask)
