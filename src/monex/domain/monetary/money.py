from __future__ import annotations

from decimal import Decimal, getcontext, InvalidOperation, localcontext, ROUND_CEILING, ROUND_FLOOR

from monex.domain.errors import InvalidCurrencyError, MonetaryFormatError
from monex.domain.monetary.currency import Currency
from monex.domain.monetary.precision_provider import PrecisionProvider
from monex.utils.numeric_tools import DecimalLike, as_decimal, format_decimal, parse_decimal

# Set high precision for financial calculations
getcontext().prec = 28


class Money:
    """Represents a monetary amount with currency.

    Uses Python's Decimal for precision arithmetic. The amount is stored exactly as given
    (any sign, trailing zeros kept), so `Money("5.0", EUR)` prints as "EUR 5.0".

    Operations between two Money objects require the same currency and raise
    `InvalidCurrencyError` otherwise. Equality never raises: Money in different
    currencies is simply not equal.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar).
            currency (Currency): Currency object.

        Raises:
            ValueError: If amount cannot be converted to a finite Decimal.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) cannot be converted to Decimal") from e

        # Raise: NaN and Infinity are not amounts
        if not decimal_amount.is_finite():
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) is not finite")

        self._amount = decimal_amount
        self._currency = currency

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Args:
            other (Money): The other Money object.

        Raises:
            InvalidCurrencyError: If currencies don't match.
        """
        if self.currency != other.currency:
            raise InvalidCurrencyError(self.currency, other.currency)

    # region Comparison

    def compare_to(self, other: Money) -> int:
        """Compare amounts of two Money objects in the same currency.

        Returns:
            int: -1, 0 or 1 when this amount is less than, equal to or greater than $other's amount.

        Raises:
            InvalidCurrencyError: If currencies don't match.
        """
        self._check_same_currency(other)
        if self.amount < other.amount:
            return -1
        if self.amount > other.amount:
            return 1
        return 0

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.amount == other.amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    # endregion

    # region Arithmetic

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, other):
        """Multiply Money by a dimensionless number (returns Money)."""
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        try:
            factor = as_decimal(other)
        except (ValueError, TypeError, InvalidOperation):
            return NotImplemented

        return Money(self.amount * factor, self.currency)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by a dimensionless number (returns Money)."""
        if isinstance(other, Money):
            return NotImplemented
        try:
            divisor = as_decimal(other)
        except (ValueError, TypeError, InvalidOperation):
            return NotImplemented

        # Raise: division by exactly zero
        if divisor == 0:
            raise ZeroDivisionError(f"Cannot divide `Money` ({self}) by zero")

        return Money(self.amount / divisor, self.currency)

    def __neg__(self):
        return Money(-self.amount, self.currency)

    def __pos__(self):
        return self

    # endregion

    # region Rounding

    def round_up(self, precision: int | PrecisionProvider) -> Money:
        """Round the amount up (towards positive infinity) to $precision fractional digits.

        The result keeps exactly $precision fractional digits, so `Money(1, USD).round_up(2)`
        prints as "USD 1.00".

        Args:
            precision: Count of fractional digits, or a `PrecisionProvider` resolving it by currency.

        Returns:
            Money: The smallest amount with $precision fractional digits that is >= this amount.
        """
        return self._round(self._resolve_precision(precision, "round_up"), ROUND_CEILING)

    def round_down(self, precision: int | PrecisionProvider) -> Money:
        """Round the amount down (towards negative infinity) to $precision fractional digits.

        Args:
            precision: Count of fractional digits, or a `PrecisionProvider` resolving it by currency.

        Returns:
            Money: The largest amount with $precision fractional digits that is <= this amount.
        """
        return self._round(self._resolve_precision(precision, "round_down"), ROUND_FLOOR)

    def _resolve_precision(self, precision: int | PrecisionProvider, caller: str) -> int:
        if hasattr(precision, "get_precision"):
            precision = precision.get_precision(self.currency)

        # Raise: precision must be a non-negative integer (bool excluded)
        if not isinstance(precision, int) or isinstance(precision, bool):
            raise TypeError(f"Cannot call `{caller}` because $precision is not int (got type '{type(precision).__name__}')")
        if precision < 0:
            raise ValueError(f"Cannot call `{caller}` because $precision ({precision}) < 0")

        return precision

    def _round(self, precision: int, rounding: str) -> Money:
        quantum = Decimal(1).scaleb(-precision)
        with localcontext() as ctx:
            # Room for every integer digit, $precision fractional digits and a carry (9.99 -> 10.00)
            ctx.prec = max(ctx.prec, self.amount.adjusted() + precision + 2)
            rounded = self.amount.quantize(quantum, rounding=rounding)
        return Money(rounded, self.currency)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like 'USD 1000.50'."""
        return f"{self.currency} {format_decimal(self.amount)}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({format_decimal(self.amount)}, {self.currency})"

    def __hash__(self) -> int:
        """Hash based on amount and currency."""
        return hash((self.amount, self.currency))

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like 'USD 1000.50'.

        Everything before the first space is the currency code, everything after it is the amount.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            TypeError: If $value_str is None.
            MonetaryFormatError: If string format is invalid.
        """
        # Raise: None is not a string to parse
        if value_str is None:
            raise TypeError("Cannot call `Money.from_str` because $value_str is None")

        currency_part, separator, amount_part = value_str.partition(" ")
        if not separator:
            raise MonetaryFormatError("Money", value_str, "it must be in format 'currency_code amount'")

        try:
            currency = Currency(currency_part)
        except ValueError as e:
            raise MonetaryFormatError("Money", value_str, f"currency part '{currency_part}' is invalid") from e

        try:
            amount = parse_decimal(amount_part)
        except ValueError as e:
            raise MonetaryFormatError("Money", value_str, f"amount part '{amount_part}' is invalid") from e

        return cls(amount, currency)

    # endregion
