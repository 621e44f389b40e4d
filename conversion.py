"""
Text and floating-point conversion for digit tuples.

Decimal output peels off groups of three decimal digits with repeated
short division by 1000 and prints them most significant first::

    -1234567  ->  "-1,234,567"

Decimal input accepts exactly ``[+-]?[0-9]+``.  It walks the digits
from the right, adding ``digit * 10^position`` into an accumulator with
the short multiply and add primitives, and negates at the end.
"""

from __future__ import annotations

import math
from typing import Sequence

from capacity import BASE
from digits import (
    Digits,
    add,
    is_negative,
    is_zero,
    radix_complement,
    short_divide,
    short_multiply,
    significant_length,
    zeros,
)
from errors import InvalidFormatError

DECIMAL_DIGITS = "0123456789"
GROUP_SEPARATOR = ","
RAW_GROUP_WIDTH = 10    # 2^32 - 1 has ten decimal digits


def _magnitude(digits: Sequence[int]) -> Digits:
    """Unsigned digits of |x|.  The minimum value maps onto itself, which
    read as unsigned is exactly its magnitude."""
    if is_negative(digits):
        return radix_complement(digits)
    return tuple(digits)


# ---------------------------------------------------------------------------
# Decimal input
# ---------------------------------------------------------------------------

def validate_decimal(text: str) -> tuple[bool, str]:
    """
    Check ``text`` against ``[+-]?[0-9]+``.

    Returns (negative, numerals).  Raises InvalidFormatError otherwise.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if not text:
        raise InvalidFormatError(text, "empty string")

    negative = text[0] == "-"
    numerals = text[1:] if text[0] in "+-" else text

    if not numerals:
        raise InvalidFormatError(text, "sign without digits")
    for position, char in enumerate(numerals, start=len(text) - len(numerals)):
        if char in "+-":
            raise InvalidFormatError(
                text, f"sign {char!r} at position {position} is not leading"
            )
        if char not in DECIMAL_DIGITS:
            raise InvalidFormatError(
                text, f"non-digit {char!r} at position {position}"
            )
    return negative, numerals


def parse_decimal(text: str, num_digits: int) -> Digits:
    """Decimal string constructor.  Values too wide for N digits wrap."""
    negative, numerals = validate_decimal(text)

    number = zeros(num_digits)
    power_of_ten = (1,) + zeros(num_digits - 1)
    for char in reversed(numerals):
        number = add(number, short_multiply(power_of_ten, ord(char) - ord("0")))
        power_of_ten = short_multiply(power_of_ten, 10)

    if negative:
        return radix_complement(number)
    return number


# ---------------------------------------------------------------------------
# Decimal output
# ---------------------------------------------------------------------------

def _thousands(magnitude: Sequence[int]) -> list[int]:
    """Base-1000 digits of a non-negative value, least significant first."""
    groups = []
    while not is_zero(magnitude):
        magnitude, group = short_divide(magnitude, 1000)
        groups.append(group)
    return groups


def to_decimal_string(digits: Sequence[int], separator: str = GROUP_SEPARATOR) -> str:
    if is_zero(digits):
        return "0"

    groups = _thousands(_magnitude(digits))
    parts = [str(groups[-1])]
    parts.extend(f"{g:03d}" for g in reversed(groups[:-1]))

    sign = "-" if is_negative(digits) else ""
    return sign + separator.join(parts)


def to_raw_string(digits: Sequence[int]) -> str:
    """Significant base-2^32 digits, most significant first, space separated."""
    top = significant_length(digits)
    if top == 0:
        return "0"
    return " ".join(
        f"{digits[i]:0{RAW_GROUP_WIDTH}d}" for i in range(top - 1, -1, -1)
    )


# ---------------------------------------------------------------------------
# Approximations
# ---------------------------------------------------------------------------

def to_float(digits: Sequence[int]) -> float:
    """
    Approximate value as a float.

    Lossy above 2^53 and ``inf`` once the magnitude passes the double
    range (about 1.8e308).  Not an error.
    """
    magnitude = _magnitude(digits)

    value = 0.0
    power_of_base = 1.0
    for i in range(significant_length(magnitude)):
        if magnitude[i]:
            # zero digits would turn an overflowed power into nan
            value += magnitude[i] * power_of_base
        power_of_base *= BASE

    return -value if is_negative(digits) else value


def num_decimal_digits(digits: Sequence[int]) -> int:
    """Exact count of decimal digits in |x|; zero has one digit."""
    groups = _thousands(_magnitude(digits))
    if not groups:
        return 1
    return 3 * (len(groups) - 1) + len(str(groups[-1]))


def log10_abs(digits: Sequence[int]) -> float:
    """log10(|x|) from the top two significant digits; -inf for zero."""
    magnitude = _magnitude(digits)
    top = significant_length(magnitude)
    if top == 0:
        return -math.inf
    if top == 1:
        return math.log10(magnitude[0])
    lead = magnitude[top - 1] * float(BASE) + magnitude[top - 2]
    return math.log10(lead) + (top - 2) * math.log10(BASE)
