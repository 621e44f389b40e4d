"""Tests for unsigned and signed long division (Knuth's Algorithm D).

Cases are grouped by the path ``unsigned_divide`` takes:

  m < n      divisor wider than dividend
  n == 1     single-digit divisor, short division
  n >= 2     Algorithm D: normalization, qhat estimate and refinement,
             multiply-subtract, add-back, denormalization
"""
from __future__ import annotations

import itertools

import pytest
from hypothesis import given, settings, assume
from hypothesis.strategies import integers

from conftest import to_digits, value_of
from digits import from_native, to_native
from division import (
    _normalization_shift,
    long_divide,
    signed_divmod,
    unsigned_divide,
)
from errors import HugeIntZeroDivisionError

MASK = 0xFFFFFFFF
SIZE = 4


def divide_ints(a: int, b: int, size: int = SIZE) -> tuple[int, int]:
    q, r = unsigned_divide(to_digits(a, size), to_digits(b, size))
    return value_of(q), value_of(r)


def knuth_ints(a: int, b: int, size: int = SIZE) -> tuple[int, int]:
    q, r = long_divide(to_digits(a, size), to_digits(b, size))
    return value_of(q), value_of(r)


# ===================================================================
# CASE m < n
# ===================================================================

class TestDivisorWiderThanDividend:

    def test_quotient_zero_remainder_dividend(self):
        q, r = unsigned_divide((5, 0, 0), (0, 1, 0))
        assert q == (0, 0, 0)
        assert r == (5, 0, 0)

    def test_zero_dividend(self):
        q, r = unsigned_divide((0, 0, 0), (3, 0, 0))
        assert q == (0, 0, 0)
        assert r == (0, 0, 0)


# ===================================================================
# CASE n == 1  (short division)
# ===================================================================

class TestSingleDigitDivisor:

    def test_small(self):
        assert divide_ints(100, 7) == (14, 2)

    def test_multi_digit_dividend(self):
        a = 2**100 + 12345
        assert divide_ints(a, 1000) == divmod(a, 1000)

    def test_largest_digit_divisor(self):
        a = 2**127 + 2**64 + 1
        assert divide_ints(a, MASK) == divmod(a, MASK)

    def test_divide_by_one(self):
        a = 2**127 - 1
        assert divide_ints(a, 1) == (a, 0)


# ===================================================================
# CASE n >= 2  (Algorithm D)
# ===================================================================

class TestNormalization:

    def test_shift_amounts(self):
        assert _normalization_shift(1) == 31
        assert _normalization_shift(2**31) == 0
        assert _normalization_shift(2**31 - 1) == 1
        assert _normalization_shift(MASK) == 0

    def test_already_normalized_divisor(self):
        b = (2**31 << 32) | 1
        a = 2**127 - 1
        assert divide_ints(a, b) == divmod(a, b)

    def test_maximum_shift(self):
        b = 2**32 + 5          # top digit 1, shift 31
        a = 2**120 + 987654321
        assert divide_ints(a, b) == divmod(a, b)


class TestAlgorithmD:

    def test_two_digit_divisor(self):
        a = 2**96 - 1
        b = 2**64 - 1
        assert divide_ints(a, b) == divmod(a, b)

    def test_dividend_fills_every_digit(self):
        # m == size: the normalization carry needs the extra working digit
        a = 2**128 - 1
        b = 2**32 + 1
        assert divide_ints(a, b) == divmod(a, b)

    def test_equal_lengths(self):
        a = 3 * 2**64 + 17
        b = 2**64 + 1
        assert divide_ints(a, b) == divmod(a, b)

    def test_divisor_equals_dividend(self):
        a = 2**100 + 3
        assert divide_ints(a, a) == (1, 0)

    def test_exact_division(self):
        b = 2**70 + 11
        a = b * 123456789
        assert divide_ints(a, b) == (123456789, 0)

    def test_qhat_clamped_to_largest_digit(self):
        # the first quotient digit is 0 and leaves a remainder whose top
        # digit equals the top divisor digit, so the second estimate is
        # 2^32 and must be clamped
        b = value_of((MASK, MASK))
        a = value_of((5, 7, MASK))
        assert divide_ints(a, b) == divmod(a, b)

    def test_add_back_digit_patterns(self):
        # the 16-bit add-back example of Hacker's Delight, scaled to 32 bits
        a = value_of((0, MASK - 1, 0, 2**31))
        b = value_of((MASK, 0, 2**31, 0))
        assert divide_ints(a, b, size=5) == divmod(a, b)

    def test_digit_patterns_exhaustive(self):
        patterns = (0, 1, 2**31 - 1, 2**31, MASK)
        dividends = [value_of(p) for p in itertools.product(patterns, repeat=3)]
        divisors = [value_of(p) for p in itertools.product(patterns, repeat=2)]
        for a in dividends:
            for b in divisors:
                if b == 0:
                    continue
                assert divide_ints(a, b) == divmod(a, b), (a, b)

    @given(a=integers(min_value=0, max_value=2**128 - 1),
           b=integers(min_value=2**32, max_value=2**128 - 1))
    @settings(max_examples=300)
    def test_matches_divmod(self, a, b):
        assert divide_ints(a, b) == divmod(a, b)


class TestShortAndLongAgree:
    """Algorithm D accepts one-digit divisors too; both paths must agree."""

    def test_examples(self):
        for a, b in [(100, 7), (2**127 + 5, 3), (2**96, MASK), (0, 9)]:
            assert knuth_ints(a, b) == divide_ints(a, b) == divmod(a, b)

    @given(a=integers(min_value=0, max_value=2**128 - 1),
           b=integers(min_value=1, max_value=MASK))
    @settings(max_examples=200)
    def test_agree(self, a, b):
        assert knuth_ints(a, b) == divide_ints(a, b)

    def test_long_divide_rejects_zero(self):
        with pytest.raises(HugeIntZeroDivisionError):
            long_divide((5, 0), (0, 0))


# ===================================================================
# Signed division
# ===================================================================

def signed(a: int, b: int, size: int = SIZE) -> tuple[int, int]:
    q, r = signed_divmod(from_native(a, size), from_native(b, size))
    return to_native(q), to_native(r)


class TestSignedDivision:

    def test_sign_rules(self):
        assert signed(100, 7) == (14, 2)
        assert signed(-100, 7) == (-14, -2)
        assert signed(100, -7) == (-14, 2)
        assert signed(-100, -7) == (14, -2)

    def test_truncates_toward_zero(self):
        assert signed(-7, 2) == (-3, -1)
        assert signed(7, -2) == (-3, 1)

    def test_most_negative_dividend(self):
        lo = -(2**127)
        assert signed(lo, 1) == (lo, 0)
        assert signed(lo, 2) == (-(2**126), 0)
        assert signed(lo, 3) == (-(2**127 // 3), -(2**127 % 3))

    def test_most_negative_over_minus_one_wraps(self):
        lo = -(2**127)
        assert signed(lo, -1) == (lo, 0)

    def test_zero_divisor_raises(self):
        with pytest.raises(HugeIntZeroDivisionError):
            signed_divmod((5, 0), (0, 0))

    def test_zero_divisor_is_a_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            signed_divmod((5, 0), (0, 0))

    @given(a=integers(min_value=-(2**127), max_value=2**127 - 1),
           b=integers(min_value=-(2**127), max_value=2**127 - 1))
    @settings(max_examples=300)
    def test_reconstruction(self, a, b):
        assume(b != 0)
        assume(not (a == -(2**127) and b == -1))
        q, r = signed(a, b)
        assert q * b + r == a
        assert abs(r) < abs(b)
        assert r == 0 or (r < 0) == (a < 0)
