"""
Long division of fixed-width huge integers.

``signed_divmod`` reduces a signed problem to an unsigned one and then
restores signs with the truncating convention of C and Java: the
quotient is negative when the operand signs differ, and the remainder
takes the sign of the dividend::

    100 /  7 ->  14, remainder  2
   -100 /  7 -> -14, remainder -2

``unsigned_divide`` picks one of three paths:

  m < n      the divisor is wider than the dividend; quotient 0
  n == 1     a single-digit divisor; one short division pass
  n >= 2     Knuth's Algorithm D (TAOCP vol. 2, 4.3.1)

where n and m are the significant digit counts of divisor and dividend.

Algorithm D steps, as implemented in ``long_divide``:

  1. Normalize: shift divisor and dividend left by s bits so the top
     divisor digit has its high bit set.  The dividend gets one extra
     digit to catch the bits shifted out.
  2. For each quotient position k from m-n down to 0, estimate qhat from
     the top two window digits over the top divisor digit, clamp it to a
     single digit and refine it against the second divisor digit.  After
     refinement qhat is the true digit or one too large.
  3. Multiply and subtract qhat * divisor from the n+1 digit window.  A
     borrow out of the window means qhat was one too large: decrement it
     and add the divisor back.
  4. Denormalize: shift the window digits, which now hold the
     remainder, right by s bits.
"""

from __future__ import annotations

from typing import Sequence

from capacity import BASE, DIGIT_BITS, DIGIT_MASK
from digits import (
    Digits,
    is_negative,
    is_zero,
    radix_complement,
    short_divide,
    significant_length,
    zeros,
)
from errors import HugeIntZeroDivisionError


def _normalization_shift(top_digit: int) -> int:
    """Left shift (0..31) that moves the high bit of ``top_digit`` to bit 31."""
    shift = 0
    while top_digit < (BASE >> 1):
        top_digit <<= 1
        shift += 1
    return shift


def _shift_left_bits(digits: Sequence[int], count: int, shift: int) -> list[int]:
    """Shift the low ``count`` digits left by ``shift`` bits into count+1 digits."""
    out = [0] * (count + 1)
    out[count] = digits[count - 1] >> (DIGIT_BITS - shift)
    for i in range(count - 1, 0, -1):
        out[i] = (
            (digits[i] << shift) | (digits[i - 1] >> (DIGIT_BITS - shift))
        ) & DIGIT_MASK
    out[0] = (digits[0] << shift) & DIGIT_MASK
    return out


def _shift_right_bits(digits: Sequence[int], count: int, shift: int) -> list[int]:
    """Undo ``_shift_left_bits`` on the low ``count`` digits."""
    out = [0] * count
    for i in range(count - 1):
        out[i] = (
            (digits[i] >> shift) | (digits[i + 1] << (DIGIT_BITS - shift))
        ) & DIGIT_MASK
    out[count - 1] = digits[count - 1] >> shift
    return out


def long_divide(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[Digits, Digits]:
    """
    Knuth's Algorithm D on non-negative operands with m >= n >= 1.

    ``unsigned_divide`` only sends divisors of two or more digits here;
    a one-digit divisor is accepted too (the second-digit refinement is
    skipped) so both division paths can be cross-checked.
    """
    size = len(dividend)
    n = significant_length(divisor)
    m = significant_length(dividend)
    if n == 0:
        raise HugeIntZeroDivisionError()
    if m < n:
        return zeros(size), tuple(dividend)

    shift = _normalization_shift(divisor[n - 1])
    v = _shift_left_bits(divisor, n, shift)[:n]
    u = _shift_left_bits(dividend, m, shift)

    v_top = v[n - 1]
    v_next = v[n - 2] if n >= 2 else 0
    quotient = [0] * size

    for k in range(m - n, -1, -1):
        # Estimate from the top two digits of the current window.
        qhat, rhat = divmod((u[k + n] << DIGIT_BITS) | u[k + n - 1], v_top)

        while qhat >= BASE:
            qhat -= 1
            rhat += v_top

        if n >= 2:
            while rhat < BASE and (
                qhat * v_next > ((rhat << DIGIT_BITS) | u[k + n - 2])
            ):
                qhat -= 1
                rhat += v_top

        # Multiply and subtract.  borrow > 0 is owed to the next digit.
        borrow = 0
        for i in range(n):
            product = qhat * v[i]
            wide = u[k + i] - borrow - (product & DIGIT_MASK)
            u[k + i] = wide & DIGIT_MASK
            borrow = (product >> DIGIT_BITS) - (wide >> DIGIT_BITS)
        wide = u[k + n] - borrow
        u[k + n] = wide & DIGIT_MASK

        if wide < 0:
            # qhat was one too large: add the divisor back once.
            qhat -= 1
            carry = 0
            for i in range(n):
                carry += u[k + i] + v[i]
                u[k + i] = carry & DIGIT_MASK
                carry >>= DIGIT_BITS
            u[k + n] = (u[k + n] + carry) & DIGIT_MASK

        quotient[k] = qhat

    remainder = _shift_right_bits(u, n, shift)
    remainder.extend([0] * (size - n))
    return tuple(quotient), tuple(remainder)


def unsigned_divide(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[Digits, Digits]:
    """
    Divide dividend >= 0 by divisor > 0, both read as unsigned digits.

    Returns (quotient, remainder) with dividend = quotient * divisor +
    remainder and 0 <= remainder < divisor.  The divisor is not checked
    for zero here.
    """
    size = len(dividend)
    n = significant_length(divisor)
    m = significant_length(dividend)

    if m < n:
        return zeros(size), tuple(dividend)

    if n < 2:
        quotient, rem = short_divide(dividend, divisor[0])
        return quotient, (rem,) + zeros(size - 1)

    return long_divide(dividend, divisor)


def signed_divmod(a: Sequence[int], b: Sequence[int]) -> tuple[Digits, Digits]:
    """Truncating signed division: (a / b, a % b) in radix-complement form."""
    if is_zero(b):
        raise HugeIntZeroDivisionError()

    negative_a = is_negative(a)
    negative_b = is_negative(b)

    magnitude_a = radix_complement(a) if negative_a else tuple(a)
    magnitude_b = radix_complement(b) if negative_b else tuple(b)

    quotient, remainder = unsigned_divide(magnitude_a, magnitude_b)

    if negative_a != negative_b:
        quotient = radix_complement(quotient)
    if negative_a:
        remainder = radix_complement(remainder)
    return quotient, remainder
