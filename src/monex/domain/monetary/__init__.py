"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions, Money calculations with exact decimal arithmetic
and precision providers used for rounding.
"""

from monex.domain.monetary.currency import Currency
from monex.domain.monetary.money import Money
from monex.domain.monetary.precision_provider import FunctionPrecisionProvider, LookupPrecisionProvider, PrecisionProvider

__all__ = [
    "Currency",
    "Money",
    "PrecisionProvider",
    "FunctionPrecisionProvider",
    "LookupPrecisionProvider",
]
