from __future__ import annotations

from decimal import Decimal, InvalidOperation

from monex.domain.errors import InvalidCurrencyError, InvalidCurrencyPairError, InvalidPriceError, MonetaryFormatError
from monex.domain.exchange.currency_pair import CurrencyPair
from monex.domain.monetary.money import Money
from monex.utils.numeric_tools import DecimalLike, as_decimal, exact_divide, exact_multiply, format_decimal, parse_decimal

RATE_SEPARATOR = " rate: "


def validate_price(price: Decimal) -> None:
    """Check that $price is usable as an exchange price.

    Raises:
        InvalidPriceError: If $price is zero, negative or not finite.
    """
    # Raise: NaN and Infinity cannot be compared or used as a price
    if not price.is_finite():
        raise InvalidPriceError(f"Price must be finite ({price})")
    if price == 0:
        raise InvalidPriceError.cannot_be_zero()
    if price < 0:
        raise InvalidPriceError.cannot_be_less_than_zero(format_decimal(price))


class ExchangeRate:
    """Represents the price of one unit of base currency in units of quote currency.

    Attributes:
        pair (CurrencyPair): The currency pair the rate is quoted for.
        price (Decimal): Units of quote currency per one unit of base currency. Always > 0.

    Ordering operators (`<`, `>`, `<=`, `>=`, `compare_to`) raise `InvalidCurrencyPairError` when the
    pairs differ, while `==` just returns False. Rates of different pairs are never equal, but asking
    which one is larger has no meaning.
    """

    __slots__ = ("_pair", "_price")

    def __init__(self, pair: CurrencyPair, price: DecimalLike):
        """Initialize a new exchange rate.

        Args:
            pair: The currency pair.
            price: Price of one base currency unit in quote currency (Decimal-like scalar).

        Raises:
            TypeError: If $pair is not CurrencyPair.
            InvalidPriceError: If $price is zero or negative.
        """
        # Raise: $pair must be CurrencyPair
        if not isinstance(pair, CurrencyPair):
            raise TypeError(f"$pair must be a CurrencyPair instance, but provided value is: {pair}")

        # Raise: $price must be convertible to Decimal
        try:
            decimal_price = as_decimal(price)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `ExchangeRate` because $price ({price}) cannot be converted to Decimal") from e

        validate_price(decimal_price)

        self._pair = pair
        self._price = decimal_price

    @property
    def pair(self) -> CurrencyPair:
        """Get the currency pair."""
        return self._pair

    @property
    def price(self) -> Decimal:
        """Get the price."""
        return self._price

    # region Exchange

    def exchange(self, money: Money) -> Money:
        """Sell $money in base currency and get the quote currency equivalent.

        The product is not rounded to the context precision, so `get_money_to_exchange` can undo it exactly.

        Raises:
            InvalidCurrencyError: If $money is not in the base currency.
        """
        if money.currency != self.pair.base_currency:
            raise InvalidCurrencyError(self.pair.base_currency, money.currency)

        return Money(exact_multiply(money.amount, self.price), self.pair.quote_currency)

    def get_money_to_exchange(self, money: Money) -> Money:
        """Compute how much base currency must be exchanged to get $money in quote currency.

        Exact inverse of `exchange`: `rate.get_money_to_exchange(rate.exchange(m)) == m`.

        Raises:
            InvalidCurrencyError: If $money is not in the quote currency.
        """
        if money.currency != self.pair.quote_currency:
            raise InvalidCurrencyError(self.pair.quote_currency, money.currency)

        return Money(exact_divide(money.amount, self.price), self.pair.base_currency)

    # endregion

    # region Comparison

    def _check_same_pair(self, other: ExchangeRate) -> None:
        if self.pair != other.pair:
            raise InvalidCurrencyPairError(self.pair, other.pair)

    def compare_to(self, other: ExchangeRate) -> int:
        """Compare prices of two rates for the same pair.

        Returns:
            int: -1, 0 or 1 when this price is less than, equal to or greater than $other's price.

        Raises:
            InvalidCurrencyPairError: If pairs don't match.
        """
        self._check_same_pair(other)
        if self.price < other.price:
            return -1
        if self.price > other.price:
            return 1
        return 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return False
        return self.pair == other.pair and self.price == other.price

    def __hash__(self) -> int:
        return hash((self.pair, self.price))

    def __lt__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return NotImplemented
        self._check_same_pair(other)
        return self.price < other.price

    def __le__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return NotImplemented
        self._check_same_pair(other)
        return self.price <= other.price

    def __gt__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return NotImplemented
        self._check_same_pair(other)
        return self.price > other.price

    def __ge__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return NotImplemented
        self._check_same_pair(other)
        return self.price >= other.price

    # endregion

    # region Arithmetic

    def __mul__(self, other):
        """Scale the price by a dimensionless number. The result is validated like a new rate."""
        if isinstance(other, (ExchangeRate, Money)):
            return NotImplemented
        try:
            factor = as_decimal(other)
        except (ValueError, TypeError, InvalidOperation):
            return NotImplemented

        return ExchangeRate(self.pair, self.price * factor)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide the price by a dimensionless number. The result is validated like a new rate."""
        if isinstance(other, (ExchangeRate, Money)):
            return NotImplemented
        try:
            divisor = as_decimal(other)
        except (ValueError, TypeError, InvalidOperation):
            return NotImplemented

        # Raise: division by exactly zero
        if divisor == 0:
            raise ZeroDivisionError(f"Cannot divide `ExchangeRate` ({self}) by zero")

        return ExchangeRate(self.pair, self.price / divisor)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like 'EUR/USD rate: 1.08'."""
        return f"{self.pair}{RATE_SEPARATOR}{format_decimal(self.price)}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pair={self.pair}, price={format_decimal(self.price)})"

    @classmethod
    def from_str(cls, value_str: str) -> ExchangeRate:
        """Parse ExchangeRate from string like 'EUR/USD rate: 1.08'.

        A well-formed string with a zero or negative price is not a format problem: the price
        validation of `__init__` applies and `InvalidPriceError` propagates.

        Raises:
            TypeError: If $value_str is None.
            MonetaryFormatError: If the separator is missing, the pair is invalid or the price is not a decimal.
            InvalidPriceError: If the parsed price is zero or negative.
        """
        # Raise: None is not a string to parse
        if value_str is None:
            raise TypeError("Cannot call `ExchangeRate.from_str` because $value_str is None")

        pair_part, separator, price_part = value_str.partition(RATE_SEPARATOR)
        if not separator:
            raise MonetaryFormatError("ExchangeRate", value_str, f"separator '{RATE_SEPARATOR}' is missing")

        try:
            pair = CurrencyPair.from_str(pair_part)
        except MonetaryFormatError as e:
            raise MonetaryFormatError("ExchangeRate", value_str, f"pair part '{pair_part}' is invalid") from e

        try:
            price = parse_decimal(price_part)
        except ValueError as e:
            raise MonetaryFormatError("ExchangeRate", value_str, f"price part '{price_part}' is invalid") from e

        return cls(pair, price)

    # endregion
