from decimal import Decimal

import pytest

from monex.utils.numeric_tools import as_decimal, exact_divide, exact_multiply, format_decimal, parse_decimal


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("1.08"), Decimal("1.08")),
        (5, Decimal("5")),
        ("3.14", Decimal("3.14")),
        (0.1, Decimal("0.1")),
    ],
)
def test_as_decimal_converts_supported_scalars(value, expected):
    result = as_decimal(value)
    assert isinstance(result, Decimal)
    assert result == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("5.0"), "5.0"),
        (Decimal("12.340"), "12.340"),
        (Decimal("-1.5"), "-1.5"),
        (Decimal("1E+2"), "100"),
        (Decimal("1E-7"), "0.0000001"),
        (Decimal("-0"), "0"),
        (Decimal("-0.00"), "0.00"),
    ],
)
def test_format_decimal_uses_fixed_point_style(value, expected):
    assert format_decimal(value) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("5", Decimal("5")),
        ("-1.08", Decimal("-1.08")),
        ("+2.5", Decimal("2.5")),
        (".5", Decimal("0.5")),
        ("5.", Decimal("5")),
        ("1.00", Decimal("1.00")),
    ],
)
def test_parse_decimal_accepts_plain_literals(text, expected):
    assert parse_decimal(text) == expected


def test_parse_decimal_keeps_trailing_zeros():
    assert str(parse_decimal("1.00")) == "1.00"


@pytest.mark.parametrize("text", ["", " ", "abc", "1,000.5", "1e5", "NaN", "Infinity", " 5", "5 ", "1.2.3", "-", "."])
def test_parse_decimal_rejects_other_text(text):
    with pytest.raises(ValueError, match=r"\$text is not a valid decimal literal"):
        parse_decimal(text)


def test_exact_multiply_keeps_digits_beyond_context_precision():
    a = Decimal("1234567890.123456789")
    b = Decimal(1) / Decimal(3)

    product = exact_multiply(a, b)

    assert len(product.as_tuple().digits) > 28
    assert product == Decimal(f"{1234567890123456789 * int('3' * 28)}E-37")


@pytest.mark.parametrize(
    "amount,rate",
    [
        (Decimal("123.45"), Decimal(1) / Decimal("1.0715")),
        (Decimal("-834.57"), Decimal(1) / Decimal("1.8652")),
        (Decimal("0.01"), Decimal(1) / Decimal(7)),
        (Decimal("9999999.99"), Decimal("1.0712")),
    ],
)
def test_exact_divide_undoes_exact_multiply(amount, rate):
    assert exact_divide(exact_multiply(amount, rate), rate) == amount
