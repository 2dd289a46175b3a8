"""Exceptions raised by the monetary and exchange value types.

Each exception derives from the builtin that describes the same failure, so callers can catch either
the specific type or the builtin (`ValueError`, `LookupError`).
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monex.domain.exchange.currency_pair import CurrencyPair
    from monex.domain.monetary.currency import Currency


class InvalidCurrencyError(ValueError):
    """Raised when an operand uses a currency other than the one required by the operation."""

    def __init__(self, expected: Currency, actual: Currency):
        super().__init__(f"Invalid currency {actual} when {expected} was expected")
        self.expected = expected
        self.actual = actual


class InvalidCurrencyPairError(ValueError):
    """Raised when two exchange rates with different currency pairs are ordered against each other."""

    def __init__(self, expected: CurrencyPair, actual: CurrencyPair):
        super().__init__(f"Invalid currency pair {actual} when {expected} was expected")
        self.expected = expected
        self.actual = actual


class InvalidPriceError(ValueError):
    """Raised when a rate price, bid or ask is not strictly positive."""

    @classmethod
    def cannot_be_zero(cls) -> InvalidPriceError:
        return cls("Price cannot be zero")

    @classmethod
    def cannot_be_less_than_zero(cls, price) -> InvalidPriceError:
        return cls(f"Price cannot be less than zero ({price})")


class PrecisionNotDefinedError(LookupError):
    """Raised when a precision provider has no precision for the requested currency."""

    def __init__(self, currency: Currency):
        super().__init__(f"Precision not defined for {currency}")
        self.currency = currency


class MonetaryFormatError(ValueError):
    """Raised when a string does not match the text format of the type being parsed."""

    def __init__(self, type_name: str, value_str: str, reason: str):
        super().__init__(f"Cannot parse `{type_name}` from $value_str = '{value_str}' because {reason}")
        self.type_name = type_name
        self.value_str = value_str
