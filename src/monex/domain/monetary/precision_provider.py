from __future__ import annotations

import logging
from typing import Callable, Mapping, Protocol

from monex.domain.errors import PrecisionNotDefinedError
from monex.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)


# region Interface


class PrecisionProvider(Protocol):
    """Provides the number of fractional digits used when rounding amounts of a currency."""

    def get_precision(self, currency: Currency) -> int:
        """Returns precision for the provided $currency.

        Args:
            currency: Currency of the amount being rounded.

        Returns:
            Non-negative count of fractional digits.
        """
        ...


# endregion


# region Implementations


class FunctionPrecisionProvider(PrecisionProvider):
    """Resolves precision with a function defined for every currency.

    Args:
        get_precision: Total function from currency to precision.
            Example: `FunctionPrecisionProvider(lambda currency: 2)`
    """

    __slots__ = ("_get_precision",)

    def __init__(self, get_precision: Callable[[Currency], int]) -> None:
        # Raise: $get_precision is required
        if get_precision is None:
            raise TypeError("Cannot call `FunctionPrecisionProvider.__init__` because $get_precision is None")

        self._get_precision = get_precision

    def get_precision(self, currency: Currency) -> int:
        """Implements: PrecisionProvider.get_precision"""
        return self._get_precision(currency)


class LookupPrecisionProvider(PrecisionProvider):
    """Resolves precision from a partial mapping, with an optional fallback function.

    Currencies found in $precisions use the mapped value. Other currencies go to $fallback; when no
    fallback is configured, `PrecisionNotDefinedError` is raised.

    Args:
        precisions: Known precisions by currency (e.g., `STANDARD_PRECISIONS`).
        fallback: Optional function used for currencies missing from $precisions.
    """

    __slots__ = ("_precisions", "_fallback")

    def __init__(self, precisions: Mapping[Currency, int], fallback: Callable[[Currency], int] | None = None) -> None:
        # Raise: $precisions is required
        if precisions is None:
            raise TypeError("Cannot call `LookupPrecisionProvider.__init__` because $precisions is None")

        self._precisions = precisions
        self._fallback = fallback

    def get_precision(self, currency: Currency) -> int:
        """Implements: PrecisionProvider.get_precision

        Raises:
            PrecisionNotDefinedError: If $currency is not in the mapping and no fallback is configured.
        """
        precision = self._precisions.get(currency)
        if precision is not None:
            return precision

        # Raise: nothing left to resolve precision with
        if self._fallback is None:
            logger.debug(f"Precision for $currency '{currency}' not found and no fallback is configured")
            raise PrecisionNotDefinedError(currency)

        logger.debug(f"Precision for $currency '{currency}' not found; using fallback")
        return self._fallback(currency)


# endregion
