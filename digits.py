"""
Digit storage and linear arithmetic.

A huge integer is stored as a fixed-length tuple of N base-2^32 digits,
least significant first.  Negative values use the radix complement:
the tuple of -x is the tuple of (2^32)^N - x, so the top digit of every
negative value is >= 2^31.

Every function here is a pure transformation ``tuple -> tuple`` that
keeps the length N of its input.  Carries are accumulated in a wide
Python int and narrowed back to a digit with ``& DIGIT_MASK`` at each
step; whatever carries out of digit N-1 is discarded, which is exactly
the wrap-around modulo (2^32)^N.

Short multiply and short divide treat their operand as unsigned, so
callers pass non-negative values (or accept the unsigned reading).
"""

from __future__ import annotations

from typing import Sequence

from capacity import BASE, DIGIT_BITS, DIGIT_MASK, HALF_BASE

Digits = tuple[int, ...]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def zeros(num_digits: int) -> Digits:
    return (0,) * num_digits


def significant_length(digits: Sequence[int]) -> int:
    """Number of digits left after trimming leading (high) zero digits."""
    n = len(digits)
    while n > 0 and digits[n - 1] == 0:
        n -= 1
    return n


def is_zero(digits: Sequence[int]) -> bool:
    return significant_length(digits) == 0


def is_negative(digits: Sequence[int]) -> bool:
    return digits[-1] >= HALF_BASE


def radix_complement(digits: Sequence[int]) -> Digits:
    """Return (2^32)^N - x: complement every digit, then add one."""
    if is_zero(digits):
        return tuple(digits)

    out = []
    carry = 1
    for d in digits:
        carry += DIGIT_MASK - d
        out.append(carry & DIGIT_MASK)
        carry >>= DIGIT_BITS
    return tuple(out)


def from_native(value: int, num_digits: int) -> Digits:
    """Encode a native int, wrapping it into N digits if it is too wide."""
    magnitude = abs(value)
    out = []
    for _ in range(num_digits):
        out.append(magnitude % BASE)
        magnitude //= BASE
    digits = tuple(out)

    if value < 0:
        return radix_complement(digits)
    return digits


def to_native(digits: Sequence[int]) -> int:
    """Decode to the exact signed native int."""
    raw = 0
    for d in reversed(digits):
        raw = (raw << DIGIT_BITS) | d
    if is_negative(digits):
        raw -= 1 << (DIGIT_BITS * len(digits))
    return raw


# ---------------------------------------------------------------------------
# Linear arithmetic
# ---------------------------------------------------------------------------

def add(a: Sequence[int], b: Sequence[int]) -> Digits:
    """Digit-wise sum with carry; the carry out of the top digit is dropped."""
    out = []
    carry = 0
    for x, y in zip(a, b):
        carry += x + y
        out.append(carry & DIGIT_MASK)
        carry >>= DIGIT_BITS
    return tuple(out)


def subtract(a: Sequence[int], b: Sequence[int]) -> Digits:
    """a - b computed as a + (-b)."""
    return add(a, radix_complement(b))


def short_multiply(a: Sequence[int], multiplier: int) -> Digits:
    """Multiply by a single digit 0 <= multiplier <= 2^32 - 1."""
    if not 0 <= multiplier <= DIGIT_MASK:
        raise ValueError(f"multiplier {multiplier} is not a base-2^32 digit")

    out = []
    carry = 0
    for d in a:
        carry += d * multiplier
        out.append(carry & DIGIT_MASK)
        carry >>= DIGIT_BITS
    return tuple(out)


def short_divide(a: Sequence[int], divisor: int) -> tuple[Digits, int]:
    """
    Divide by a single digit 0 < divisor <= 2^32 - 1.

    Returns (quotient, remainder) with the remainder a single digit.
    """
    if not 0 < divisor <= DIGIT_MASK:
        raise ValueError(f"divisor {divisor} is not a nonzero base-2^32 digit")

    quotient = [0] * len(a)
    partial = 0
    for i in range(len(a) - 1, -1, -1):
        partial = (partial << DIGIT_BITS) | a[i]
        quotient[i] = partial // divisor
        partial %= divisor
    return tuple(quotient), partial


def shift_left_digits(a: Sequence[int], places: int) -> Digits:
    """Move every digit ``places`` slots toward the top, filling with zeros."""
    if places < 0:
        raise ValueError(f"cannot shift by a negative amount ({places})")
    n = len(a)
    if places == 0:
        return tuple(a)
    if places >= n:
        return zeros(n)
    return (0,) * places + tuple(a[: n - places])


# ---------------------------------------------------------------------------
# Long multiplication
# ---------------------------------------------------------------------------

def multiply(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Schoolbook product in base 2^32, truncated to N digits.

    Each digit b[i] contributes ``short_multiply(a, b[i])`` shifted left
    by i places.  Signs need no special case: both operands are read as
    their raw ring elements and the product is correct modulo (2^32)^N.
    """
    product = zeros(len(a))
    for i in range(significant_length(b)):
        if b[i] == 0:
            continue
        partial = shift_left_digits(short_multiply(a, b[i]), i)
        product = add(product, partial)
    return product
