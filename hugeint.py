"""
HugeInt: a fixed-width signed integer of N base-2^32 digits.

The default type stores N = 300 digits, enough for about 2890 decimal
digits.  Values live in the ring of integers modulo (2^32)^N read
through the radix complement, so arithmetic that leaves
[minimum(), maximum()] wraps silently instead of raising::

    >>> HugeInt.maximum() + 1 == HugeInt.minimum()
    True

Native ints take part in every operator on either side (``a + 1``,
``10 // a``, ``a < 0``); they are converted with the same rule as
``HugeInt(int)``.  This is the only implicit conversion.  Equality is
the one exception to the wrap: an int outside [minimum(), maximum()]
never compares equal, so ``==`` stays consistent with ``hash``.

Division (``//``, ``%``, ``divmod``) truncates toward zero like C, not
toward negative infinity like Python's int: ``HugeInt(-100) // 7`` is
-14 and ``HugeInt(-100) % 7`` is -2.

Comparisons are derived from subtraction (``a < b`` iff ``a - b`` is
negative), so they agree with the integer order whenever ``a - b``
itself is representable.
"""

from __future__ import annotations

import functools
import math
from typing import ClassVar, Iterable, TextIO

import conversion
import digits as dg
from capacity import DEFAULT, DIGIT_MASK, HALF_BASE, Capacity
from division import signed_divmod

_WHITESPACE = " \t\r\n\v\f"


class HugeInt:
    """Immutable fixed-width signed integer.  See the module docstring."""

    __slots__ = ("_digits",)

    capacity: ClassVar[Capacity] = DEFAULT

    def __init__(self, value: HugeInt | int | str = 0) -> None:
        num_digits = self.capacity.num_digits

        if isinstance(value, HugeInt):
            if value.capacity != self.capacity:
                raise TypeError(
                    f"cannot copy a {value.capacity.num_digits}-digit HugeInt "
                    f"into a {num_digits}-digit one"
                )
            self._digits = value._digits
        elif isinstance(value, int):
            self._digits = dg.from_native(value, num_digits)
        elif isinstance(value, str):
            self._digits = conversion.parse_decimal(value, num_digits)
        else:
            raise TypeError(
                f"cannot build a HugeInt from {type(value).__name__}"
            )

    # -- construction ---------------------------------------------------------

    @classmethod
    def _wrap(cls, digits: dg.Digits) -> HugeInt:
        obj = cls.__new__(cls)
        obj._digits = digits
        return obj

    @classmethod
    def from_digits(cls, values: Iterable[int]) -> HugeInt:
        """Build from raw base-2^32 digits, least significant first."""
        num_digits = cls.capacity.num_digits
        raw = list(values)
        if len(raw) > num_digits:
            raise ValueError(
                f"{len(raw)} digits do not fit in a {num_digits}-digit HugeInt"
            )
        for d in raw:
            if not isinstance(d, int):
                raise TypeError(
                    f"digits must be int, got {type(d).__name__}"
                )
            if not 0 <= d <= DIGIT_MASK:
                raise ValueError(f"{d} is not a base-2^32 digit")
        raw.extend([0] * (num_digits - len(raw)))
        return cls._wrap(tuple(raw))

    @classmethod
    def parse(cls, text: str) -> HugeInt:
        return cls._wrap(conversion.parse_decimal(text, cls.capacity.num_digits))

    @classmethod
    def minimum(cls) -> HugeInt:
        """-(2^32)^N / 2, the most negative value."""
        top = (0,) * (cls.capacity.num_digits - 1) + (HALF_BASE,)
        return cls._wrap(top)

    @classmethod
    def maximum(cls) -> HugeInt:
        """(2^32)^N / 2 - 1, one below the minimum in ring order."""
        return cls.minimum().decrement()

    # -- representation -------------------------------------------------------

    @property
    def digits(self) -> dg.Digits:
        return self._digits

    def is_zero(self) -> bool:
        return dg.is_zero(self._digits)

    def is_negative(self) -> bool:
        return dg.is_negative(self._digits)

    def radix_complement(self) -> HugeInt:
        return self._wrap(dg.radix_complement(self._digits))

    def __setattr__(self, name, value):
        if hasattr(self, "_digits"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    # -- coercion -------------------------------------------------------------

    def _coerce(self, other) -> HugeInt | None:
        if isinstance(other, HugeInt):
            return other if other.capacity == self.capacity else None
        if isinstance(other, int):
            return type(self)(other)
        return None

    # -- arithmetic -----------------------------------------------------------

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._wrap(dg.add(self._digits, other._digits))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._wrap(dg.subtract(self._digits, other._digits))

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._wrap(dg.multiply(self._digits, other._digits))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        quotient, remainder = signed_divmod(self._digits, other._digits)
        return self._wrap(quotient), self._wrap(remainder)

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return divmod(other, self)

    def __floordiv__(self, other):
        result = self.__divmod__(other)
        return result if result is NotImplemented else result[0]

    def __rfloordiv__(self, other):
        result = self.__rdivmod__(other)
        return result if result is NotImplemented else result[0]

    def __mod__(self, other):
        result = self.__divmod__(other)
        return result if result is NotImplemented else result[1]

    def __rmod__(self, other):
        result = self.__rdivmod__(other)
        return result if result is NotImplemented else result[1]

    def __neg__(self):
        return self.radix_complement()

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self.is_negative() else self

    def increment(self) -> HugeInt:
        """self + 1 (the ``++`` operator)."""
        return self + 1

    def decrement(self) -> HugeInt:
        """self - 1 (the ``--`` operator)."""
        return self - 1

    # -- comparison -----------------------------------------------------------

    def __eq__(self, other):
        # an int outside the capacity is never equal, matching __hash__
        if isinstance(other, int) and not self.capacity.contains(other):
            return False
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return (other - self).is_zero()

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return (self - other).is_negative()

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other < self

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return not other < self

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return not self < other

    def __hash__(self):
        return hash(int(self))

    def __bool__(self):
        return not self.is_zero()

    # -- conversion -----------------------------------------------------------

    def __int__(self):
        return dg.to_native(self._digits)

    __index__ = __int__

    def __float__(self):
        return self.to_float()

    def to_float(self) -> float:
        return conversion.to_float(self._digits)

    def to_decimal_string(self, separator: str = conversion.GROUP_SEPARATOR) -> str:
        return conversion.to_decimal_string(self._digits, separator)

    def to_raw_string(self) -> str:
        return conversion.to_raw_string(self._digits)

    def num_decimal_digits(self) -> int:
        return conversion.num_decimal_digits(self._digits)

    def estimate_decimal_digits(self) -> int:
        """
        ceil(log10(|x|)), or 1 when |x| < 10.

        A quick estimate that can be one short at an exact power of ten
        (log10(100) is 2).  For wide values the float log10 is only good
        to about 1e-13, so right at a power of ten the result may land
        on either side; use num_decimal_digits() for the exact count.
        """
        if -10 < self < 10:
            return 1
        return math.ceil(conversion.log10_abs(self._digits))

    def __str__(self):
        return self.to_decimal_string()

    def __repr__(self):
        return f"{type(self).__name__}('{self.to_decimal_string('')}')"


# ---------------------------------------------------------------------------
# Other capacities
# ---------------------------------------------------------------------------

@functools.lru_cache(maxsize=None)
def hugeint_type(num_digits: int) -> type[HugeInt]:
    """Return the HugeInt type with ``num_digits`` digits (one class per N)."""
    if num_digits == HugeInt.capacity.num_digits:
        return HugeInt
    capacity = Capacity(num_digits)
    return type(
        f"HugeInt{num_digits}",
        (HugeInt,),
        {"__slots__": (), "capacity": capacity},
    )


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------

def write_hugeint(stream: TextIO, value: HugeInt, separator: str = conversion.GROUP_SEPARATOR) -> None:
    stream.write(value.to_decimal_string(separator))


def read_hugeint(stream: TextIO, cls: type[HugeInt] = HugeInt) -> HugeInt:
    """Read the next whitespace-delimited token and parse it as a decimal."""
    char = stream.read(1)
    while char and char in _WHITESPACE:
        char = stream.read(1)

    token = []
    while char and char not in _WHITESPACE:
        token.append(char)
        char = stream.read(1)

    return cls.parse("".join(token))
