import logging

import pytest

from monex.domain.errors import PrecisionNotDefinedError
from monex.domain.monetary.currency import Currency
from monex.domain.monetary.currency_registry import STANDARD_PRECISIONS
from monex.domain.monetary.precision_provider import FunctionPrecisionProvider, LookupPrecisionProvider

# Constants
USD = Currency("USD")
JPY = Currency("JPY")
XYZ = Currency("XYZ")


def test_function_provider_rejects_none():
    with pytest.raises(TypeError, match=r"\$get_precision is None"):
        FunctionPrecisionProvider(None)


def test_lookup_provider_rejects_none():
    with pytest.raises(TypeError, match=r"\$precisions is None"):
        LookupPrecisionProvider(None)

    with pytest.raises(TypeError):
        LookupPrecisionProvider(None, lambda currency: 2)


def test_function_provider_uses_provided_function():
    provider = FunctionPrecisionProvider(lambda currency: 2)

    assert provider.get_precision(USD) == 2
    assert provider.get_precision(XYZ) == 2


def test_lookup_provider_uses_mapping_when_currency_is_known():
    provider = LookupPrecisionProvider({USD: 2, JPY: 0})

    assert provider.get_precision(USD) == 2
    assert provider.get_precision(JPY) == 0


def test_lookup_provider_uses_fallback_when_currency_is_unknown(caplog):
    provider = LookupPrecisionProvider({USD: 2}, fallback=lambda currency: 4)

    with caplog.at_level(logging.DEBUG, logger="monex.domain.monetary.precision_provider"):
        assert provider.get_precision(XYZ) == 4

    assert "using fallback" in caplog.text
    assert provider.get_precision(USD) == 2


def test_lookup_provider_raises_when_currency_is_unknown_and_no_fallback():
    provider = LookupPrecisionProvider({USD: 2})

    with pytest.raises(PrecisionNotDefinedError, match="Precision not defined for XYZ") as exc_info:
        provider.get_precision(XYZ)

    assert exc_info.value.currency == XYZ
    assert isinstance(exc_info.value, LookupError)


def test_lookup_provider_works_with_standard_precisions():
    provider = LookupPrecisionProvider(STANDARD_PRECISIONS)

    assert provider.get_precision(USD) == 2
    assert provider.get_precision(JPY) == 0
