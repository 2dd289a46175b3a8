from __future__ import annotations

import re
from decimal import Decimal, localcontext
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Invariant decimal literal: optional sign, digits with an optional fractional part. No exponent, no grouping.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    """Multiplies $a by $b without rounding the product to the context precision.

    The context precision is raised to the total digit count of both coefficients, which is
    enough to hold every product digit.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(a.as_tuple().digits) + len(b.as_tuple().digits))
        return a * b


def exact_divide(a: Decimal, b: Decimal) -> Decimal:
    """Divides $a by $b with at least as many significant digits as $a carries.

    When the exact quotient fits into that many digits it is returned unrounded, so
    `exact_divide(exact_multiply(m, r), r) == m`.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(a.as_tuple().digits))
        return a / b


def format_decimal(value: Decimal) -> str:
    """Formats $value in the invariant fixed-point style.

    Trailing zeros are kept as stored (`Decimal("5.0")` -> "5.0"), the exponent form is never used
    (`Decimal("1E+2")` -> "100") and negative zero is printed without the sign.

    Args:
        value: Finite decimal to format.

    Returns:
        Text representation that `parse_decimal` reads back to an equal value.
    """
    if value.is_zero():
        value = value.copy_abs()
    return format(value, "f")


def parse_decimal(text: str) -> Decimal:
    """Parses an invariant fixed-point decimal literal.

    Accepts an optional sign followed by digits with an optional fractional part ("5", "-1.08", ".5", "5.").
    Whitespace, exponents, grouping separators, NaN and Infinity are rejected.

    Args:
        text: Text to parse.

    Returns:
        Parsed value.

    Raises:
        ValueError: If $text is not a decimal literal.
    """
    # Raise: only plain literals are accepted
    if not isinstance(text, str) or _DECIMAL_LITERAL.fullmatch(text) is None:
        raise ValueError(f"$text is not a valid decimal literal, but provided value is: '{text}'")

    return Decimal(text)
