"""
Capacity layer for fixed-width huge integers.

A Capacity describes the *domain* of a HugeInt type: how many base-2^32
digits it stores and therefore which signed integers it can represent.
Arithmetic never leaves this domain - results that would escape it wrap
modulo (2^32)^N, exactly like a C unsigned type reinterpreted through
two's complement.
"""

from __future__ import annotations

from dataclasses import dataclass

DIGIT_BITS = 32
BASE = 1 << DIGIT_BITS          # 2^32
DIGIT_MASK = BASE - 1
HALF_BASE = BASE >> 1           # sign bit of the top digit

DEFAULT_NUM_DIGITS = 300


@dataclass(frozen=True)
class Capacity:
    """
    The signed range [lo, hi] of an N-digit radix-complement integer.

    lo = -(2^32)^N / 2 and hi = (2^32)^N / 2 - 1.
    """

    num_digits: int = DEFAULT_NUM_DIGITS

    def __post_init__(self):
        if self.num_digits < 1:
            raise ValueError(
                f"num_digits ({self.num_digits}) must be >= 1"
            )

    @property
    def modulus(self) -> int:
        """(2^32)^N, the size of the ring."""
        return 1 << (DIGIT_BITS * self.num_digits)

    @property
    def lo(self) -> int:
        return -(self.modulus >> 1)

    @property
    def hi(self) -> int:
        return (self.modulus >> 1) - 1

    @property
    def width(self) -> int:
        """Total number of representable values."""
        return self.hi - self.lo + 1

    def contains(self, value: int) -> bool:
        return self.lo <= value <= self.hi

    def wrap(self, raw: int) -> int:
        """Reduce a native integer into [lo, hi] by modular wrap-around."""
        if self.lo <= raw <= self.hi:
            return raw
        return self.lo + (raw - self.lo) % self.width

    @property
    def max_decimal_digits(self) -> int:
        """Decimal digits of the largest magnitude, |lo|."""
        return len(str(-self.lo))


# ---------------------------------------------------------------------------
# Common capacity presets
# ---------------------------------------------------------------------------

DEFAULT = Capacity(DEFAULT_NUM_DIGITS)

# Small capacities keep the reference checks cheap and still reach
# every division path (two digits is the smallest Knuth D divisor).
TINY = Capacity(2)      # same range as a signed 64-bit integer
SMALL = Capacity(4)     # signed 128-bit
