from __future__ import annotations

from monex.domain.errors import MonetaryFormatError
from monex.domain.monetary.currency import Currency


class CurrencyPair:
    """Represents a currency pair.

    The first currency in the pair is called the base currency, the second one the quote currency.
    The price of the base currency is always expressed in units of the quote currency.
    For example, a EUR/USD rate of 1.08 means that one euro costs 1.08 US dollars.

    Pairs are ordered: EUR/USD and USD/EUR are different pairs. A pair of the same currency
    (e.g., USD/USD) is allowed.

    Attributes:
        base_currency (Currency): Currency being priced.
        quote_currency (Currency): Currency the price is expressed in.
    """

    __slots__ = ("_base_currency", "_quote_currency")

    def __init__(self, base_currency: Currency, quote_currency: Currency):
        # Raise: both sides must be Currency to keep the pair typed
        if not isinstance(base_currency, Currency):
            raise TypeError(f"$base_currency must be a Currency instance, but provided value is: {base_currency}")
        if not isinstance(quote_currency, Currency):
            raise TypeError(f"$quote_currency must be a Currency instance, but provided value is: {quote_currency}")

        self._base_currency = base_currency
        self._quote_currency = quote_currency

    @property
    def base_currency(self) -> Currency:
        """Get the base currency."""
        return self._base_currency

    @property
    def quote_currency(self) -> Currency:
        """Get the quote currency."""
        return self._quote_currency

    def swap(self) -> CurrencyPair:
        """Create the opposite currency pair (quote/base)."""
        return CurrencyPair(self.quote_currency, self.base_currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyPair):
            return False
        return self.base_currency == other.base_currency and self.quote_currency == other.quote_currency

    def __hash__(self) -> int:
        return hash((self.base_currency, self.quote_currency))

    def __str__(self) -> str:
        """Return base and quote currencies separated by a slash, like 'EUR/USD'."""
        return f"{self.base_currency}/{self.quote_currency}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.base_currency!r}, {self.quote_currency!r})"

    @classmethod
    def from_str(cls, value_str: str) -> CurrencyPair:
        """Parse CurrencyPair from string like 'EUR/USD'.

        Args:
            value_str (str): String representation; split on the first slash.

        Returns:
            CurrencyPair: Parsed pair.

        Raises:
            TypeError: If $value_str is None.
            MonetaryFormatError: If there is no slash or either currency code is blank.
        """
        # Raise: None is not a string to parse
        if value_str is None:
            raise TypeError("Cannot call `CurrencyPair.from_str` because $value_str is None")

        base_part, separator, quote_part = value_str.partition("/")
        if not separator:
            raise MonetaryFormatError("CurrencyPair", value_str, "it must be in format 'BASE/QUOTE'")

        try:
            return cls(Currency(base_part), Currency(quote_part))
        except ValueError as e:
            raise MonetaryFormatError("CurrencyPair", value_str, "base or quote currency code is invalid") from e
