from decimal import Decimal

import pytest

from monex import Currency, CurrencyPair, ExchangeRate, Money, TwoWayExchangeRate
from monex.domain.errors import InvalidCurrencyError
from monex.domain.monetary.currency_registry import EUR, STANDARD_PRECISIONS, USD
from monex.domain.monetary.precision_provider import LookupPrecisionProvider


def test_wallet_spending_in_one_currency():
    dollars = Money(Decimal("101.52"), USD)
    euros = Money(20, EUR)
    coffee_price = Money(4, EUR)

    # Paying a euro price with dollars is a currency mismatch
    with pytest.raises(InvalidCurrencyError):
        _ = dollars - coffee_price

    euros -= coffee_price
    two_cups = coffee_price * 2

    assert euros == Money(16, EUR)
    assert two_cups == Money(8, EUR)
    assert euros >= two_cups


def test_exchange_and_round_to_currency_precision():
    rate = ExchangeRate.from_str("EUR/USD rate: 1.0837")
    precisions = LookupPrecisionProvider(STANDARD_PRECISIONS, fallback=lambda currency: 4)

    dollars = rate.exchange(Money(50, EUR))

    assert dollars == Money(Decimal("54.185"), USD)
    assert str(dollars.round_down(precisions)) == "USD 54.18"
    assert str(dollars.round_up(precisions)) == "USD 54.19"

    custom = Currency("ABC")
    assert str(Money(Decimal("1.00001"), custom).round_up(precisions)) == "ABC 1.0001"


def test_two_way_quote_round_trip_through_text():
    quote = TwoWayExchangeRate(CurrencyPair(EUR, USD), Decimal("1.0712"), Decimal("1.0715"))
    parsed = TwoWayExchangeRate.from_str(str(quote))

    assert parsed == quote

    # Selling euros and buying them back costs the spread
    dollars = parsed.exchange(Money(1000, EUR))
    euros_back = parsed.exchange(dollars)

    assert dollars == Money(Decimal("1071.2"), USD)
    assert euros_back < Money(1000, EUR)
    assert parsed.get_money_to_exchange(dollars) == Money(1000, EUR)


def test_inverted_quote_prices_the_same_market():
    quote = TwoWayExchangeRate(CurrencyPair(EUR, USD), Decimal("0.8"), Decimal("1.25"))
    inverted = quote.invert()

    assert str(inverted) == "USD/EUR rate: 0.8/1.25"
    assert inverted.exchange(Money(10, USD)) == quote.exchange(Money(10, USD))
    assert inverted.exchange(Money(10, EUR)) == quote.exchange(Money(10, EUR))
