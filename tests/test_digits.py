"""Tests for digit storage, the radix complement, and linear arithmetic."""
from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis.strategies import integers

from capacity import SMALL
from digits import (
    add,
    from_native,
    is_negative,
    is_zero,
    multiply,
    radix_complement,
    short_divide,
    short_multiply,
    shift_left_digits,
    significant_length,
    subtract,
    to_native,
    zeros,
)

MASK = 0xFFFFFFFF

small_ints = integers(min_value=SMALL.lo, max_value=SMALL.hi)
any_ints = integers(min_value=-(2**300), max_value=2**300)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

class TestEncoding:

    def test_zero(self):
        assert from_native(0, 3) == (0, 0, 0)
        assert is_zero((0, 0, 0))
        assert not is_zero((0, 0, 1))

    def test_positive_digits_little_endian(self):
        assert from_native(2**32 + 5, 2) == (5, 1)
        assert from_native(7, 3) == (7, 0, 0)

    def test_minus_one_is_all_ones(self):
        assert from_native(-1, 3) == (MASK, MASK, MASK)

    def test_most_negative(self):
        assert from_native(-(2**63), 2) == (0, 2**31)
        assert is_negative((0, 2**31))

    def test_sign_bit(self):
        assert not is_negative((MASK, 2**31 - 1))
        assert is_negative((0, MASK))

    def test_wide_values_wrap(self):
        assert from_native(2**64, 2) == (0, 0)
        assert from_native(2**64 + 3, 2) == (3, 0)
        assert from_native(-(2**64) - 1, 2) == (MASK, MASK)

    def test_to_native(self):
        assert to_native((MASK, MASK)) == -1
        assert to_native((0, 2**31)) == -(2**63)
        assert to_native((5, 1)) == 2**32 + 5

    @given(v=small_ints)
    def test_native_round_trip(self, v):
        assert to_native(from_native(v, SMALL.num_digits)) == v

    @given(v=any_ints)
    def test_from_native_wraps(self, v):
        assert to_native(from_native(v, SMALL.num_digits)) == SMALL.wrap(v)

    def test_significant_length(self):
        assert significant_length((0, 0, 0)) == 0
        assert significant_length((5, 0, 0)) == 1
        assert significant_length((0, 0, 1)) == 3
        assert significant_length((0, 1, 0)) == 2


# ---------------------------------------------------------------------------
# Radix complement
# ---------------------------------------------------------------------------

class TestRadixComplement:

    def test_zero_is_its_own_complement(self):
        assert radix_complement((0, 0)) == (0, 0)

    def test_one(self):
        assert radix_complement((1, 0)) == (MASK, MASK)

    def test_carry_propagates(self):
        # 2^64 - 2^32
        assert radix_complement((0, 1)) == (0, MASK)

    def test_most_negative_is_its_own_complement(self):
        assert radix_complement((0, 2**31)) == (0, 2**31)

    @given(v=small_ints)
    def test_involution(self, v):
        d = from_native(v, SMALL.num_digits)
        assert radix_complement(radix_complement(d)) == d

    @given(v=small_ints)
    def test_is_negation(self, v):
        d = from_native(v, SMALL.num_digits)
        assert to_native(radix_complement(d)) == SMALL.wrap(-v)


# ---------------------------------------------------------------------------
# Add / subtract
# ---------------------------------------------------------------------------

class TestAddSubtract:

    def test_carry_between_digits(self):
        assert add((MASK, 0), (1, 0)) == (0, 1)

    def test_carry_out_of_top_is_dropped(self):
        assert add((MASK, MASK), (1, 0)) == (0, 0)

    def test_subtract_borrows_through_complement(self):
        assert subtract((0, 1), (1, 0)) == (MASK, 0)

    def test_subtract_below_zero(self):
        assert subtract((0, 0), (1, 0)) == (MASK, MASK)

    @given(a=small_ints, b=small_ints)
    def test_add_matches_reference(self, a, b):
        n = SMALL.num_digits
        assert to_native(add(from_native(a, n), from_native(b, n))) == SMALL.wrap(a + b)

    @given(a=small_ints, b=small_ints)
    def test_subtract_matches_reference(self, a, b):
        n = SMALL.num_digits
        got = subtract(from_native(a, n), from_native(b, n))
        assert to_native(got) == SMALL.wrap(a - b)


# ---------------------------------------------------------------------------
# Short multiply / short divide
# ---------------------------------------------------------------------------

class TestShortOperations:

    def test_short_multiply_carries(self):
        assert short_multiply((MASK, 0), 2) == (MASK - 1, 1)

    def test_short_multiply_by_zero(self):
        assert short_multiply((5, 7, 9), 0) == zeros(3)

    def test_short_multiply_rejects_wide_multiplier(self):
        with pytest.raises(ValueError):
            short_multiply((1, 0), 2**32)
        with pytest.raises(ValueError):
            short_multiply((1, 0), -1)

    def test_short_divide(self):
        assert short_divide((7, 0), 2) == ((3, 0), 1)
        assert short_divide((0, 1), 2) == ((2**31, 0), 0)

    def test_short_divide_largest_digit(self):
        assert short_divide((MASK, MASK), MASK) == ((1, 1), 0)

    def test_short_divide_rejects_zero(self):
        with pytest.raises(ValueError):
            short_divide((1, 0), 0)

    @given(v=integers(min_value=0, max_value=2**128 - 1),
           d=integers(min_value=1, max_value=MASK))
    def test_short_divide_matches_divmod(self, v, d):
        n = SMALL.num_digits
        digits = tuple((v >> (32 * i)) & MASK for i in range(n))
        quotient, remainder = short_divide(digits, d)
        q = sum(x << (32 * i) for i, x in enumerate(quotient))
        assert (q, remainder) == divmod(v, d)


# ---------------------------------------------------------------------------
# Shift and long multiplication
# ---------------------------------------------------------------------------

class TestShiftAndMultiply:

    def test_shift_left(self):
        assert shift_left_digits((1, 2, 3), 1) == (0, 1, 2)
        assert shift_left_digits((1, 2, 3), 2) == (0, 0, 1)

    def test_shift_by_zero(self):
        assert shift_left_digits((1, 2, 3), 0) == (1, 2, 3)

    def test_shift_past_top_discards(self):
        assert shift_left_digits((1, 2, 3), 3) == (0, 0, 0)
        assert shift_left_digits((1, 2, 3), 10) == (0, 0, 0)

    def test_negative_shift_raises(self):
        with pytest.raises(ValueError):
            shift_left_digits((1, 2, 3), -1)

    def test_multiply_full_digits(self):
        # (2^32 - 1)^2 = 2^64 - 2^33 + 1
        assert multiply((MASK, 0), (MASK, 0)) == (1, MASK - 1)

    def test_multiply_negative_operands(self):
        n = 3
        got = multiply(from_native(-6, n), from_native(7, n))
        assert to_native(got) == -42
        got = multiply(from_native(-6, n), from_native(-7, n))
        assert to_native(got) == 42

    @given(a=small_ints, b=small_ints)
    def test_multiply_matches_reference(self, a, b):
        n = SMALL.num_digits
        got = multiply(from_native(a, n), from_native(b, n))
        assert to_native(got) == SMALL.wrap(a * b)
