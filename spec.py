"""
Declarative contract for HugeInt arithmetic.

A Spec defines the *contract* a HugeInt type must satisfy.  It is
purely declarative - it says WHAT must be true, not HOW.

Each property is a named predicate over a HugeInt type and one or more
native ints drawn from its capacity.  Most predicates compare the
HugeInt result against Python's own int, reduced into the capacity with
``Capacity.wrap``; that reduction is the whole overflow contract.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable

from capacity import BASE, Capacity
from division import long_divide, unsigned_divide


# ---------------------------------------------------------------------------
# Core spec primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Property:
    """A single verifiable property of a HugeInt type."""

    name: str
    description: str
    predicate: Callable[..., bool]
    capacity: Capacity

    @property
    def arity(self) -> int:
        """Number of native int arguments (the type argument excluded)."""
        return len(inspect.signature(self.predicate).parameters) - 1

    def check(self, *args: Any) -> bool:
        return self.predicate(*args)


@dataclass
class Spec:
    """An ordered collection of properties that together form a contract."""

    name: str
    properties: list[Property] = field(default_factory=list)

    def add(self, prop: Property) -> None:
        self.properties.append(prop)

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)


# ---------------------------------------------------------------------------
# Reference helpers
# ---------------------------------------------------------------------------

def truncdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor division)."""
    q, r = divmod(a, b)
    if r != 0 and (a < 0) != (b < 0):
        q += 1
    return q


def truncmod(a: int, b: int) -> int:
    """Remainder matching truncdiv: takes the sign of the dividend."""
    return a - b * truncdiv(a, b)


# ---------------------------------------------------------------------------
# Spec builders
# ---------------------------------------------------------------------------

def addition_spec(capacity: Capacity) -> Spec:
    wrap = capacity.wrap
    spec = Spec(name="addition")

    spec.add(Property(
        name="reference",
        description="int(a + b) == wrap(a + b)",
        predicate=lambda cls, a, b: int(cls(a) + cls(b)) == wrap(a + b),
        capacity=capacity,
    ))

    spec.add(Property(
        name="commutativity",
        description="a + b == b + a",
        predicate=lambda cls, a, b: cls(a) + cls(b) == cls(b) + cls(a),
        capacity=capacity,
    ))

    spec.add(Property(
        name="identity",
        description="a + 0 == a",
        predicate=lambda cls, a: cls(a) + 0 == cls(a),
        capacity=capacity,
    ))

    spec.add(Property(
        name="inverse",
        description="(a + b) - b == a, even when a + b wraps",
        predicate=lambda cls, a, b: (cls(a) + cls(b)) - cls(b) == cls(a),
        capacity=capacity,
    ))

    return spec


def subtraction_spec(capacity: Capacity) -> Spec:
    wrap = capacity.wrap
    spec = Spec(name="subtraction")

    spec.add(Property(
        name="reference",
        description="int(a - b) == wrap(a - b)",
        predicate=lambda cls, a, b: int(cls(a) - cls(b)) == wrap(a - b),
        capacity=capacity,
    ))

    spec.add(Property(
        name="self_inverse",
        description="a - a == 0",
        predicate=lambda cls, a: (cls(a) - cls(a)).is_zero(),
        capacity=capacity,
    ))

    spec.add(Property(
        name="complement_involution",
        description="radix complement applied twice is the identity",
        predicate=lambda cls, a: (
            cls(a).radix_complement().radix_complement().digits == cls(a).digits
        ),
        capacity=capacity,
    ))

    spec.add(Property(
        name="negation",
        description="int(-a) == wrap(-a)",
        predicate=lambda cls, a: int(-cls(a)) == wrap(-a),
        capacity=capacity,
    ))

    return spec


def multiplication_spec(capacity: Capacity) -> Spec:
    wrap = capacity.wrap
    spec = Spec(name="multiplication")

    spec.add(Property(
        name="reference",
        description="int(a * b) == wrap(a * b)",
        predicate=lambda cls, a, b: int(cls(a) * cls(b)) == wrap(a * b),
        capacity=capacity,
    ))

    spec.add(Property(
        name="identity",
        description="a * 1 == a",
        predicate=lambda cls, a: cls(a) * 1 == cls(a),
        capacity=capacity,
    ))

    spec.add(Property(
        name="zero",
        description="a * 0 == 0",
        predicate=lambda cls, a: (cls(a) * 0).is_zero(),
        capacity=capacity,
    ))

    return spec


def _short_and_long_agree(cls, a: int, b: int) -> bool:
    # |a| may be one past hi; its digits still read correctly as unsigned.
    if not 0 < abs(b) < BASE:
        return True
    dividend = cls(abs(a)).digits
    divisor = cls(abs(b)).digits
    return unsigned_divide(dividend, divisor) == long_divide(dividend, divisor)


def _reconstructs(cls, a: int, b: int) -> bool:
    if b == 0:
        return True
    quotient, remainder = divmod(cls(a), cls(b))
    return quotient * cls(b) + remainder == cls(a)


def division_spec(capacity: Capacity) -> Spec:
    wrap = capacity.wrap
    spec = Spec(name="division")

    spec.add(Property(
        name="quotient_reference",
        description="int(a // b) == wrap(truncdiv(a, b))  (b != 0)",
        predicate=lambda cls, a, b: (
            b == 0 or int(cls(a) // cls(b)) == wrap(truncdiv(a, b))
        ),
        capacity=capacity,
    ))

    spec.add(Property(
        name="remainder_reference",
        description="int(a % b) == truncmod(a, b)  (b != 0)",
        predicate=lambda cls, a, b: (
            b == 0 or int(cls(a) % cls(b)) == truncmod(a, b)
        ),
        capacity=capacity,
    ))

    spec.add(Property(
        name="reconstruction",
        description="(a // b) * b + a % b == a  (b != 0)",
        predicate=_reconstructs,
        capacity=capacity,
    ))

    spec.add(Property(
        name="remainder_sign",
        description="a % b is zero or has the sign of a",
        predicate=lambda cls, a, b: (
            b == 0
            or (cls(a) % cls(b)).is_zero()
            or (cls(a) % cls(b)).is_negative() == (a < 0)
        ),
        capacity=capacity,
    ))

    spec.add(Property(
        name="short_long_agree",
        description="one-digit divisors: short division == Algorithm D",
        predicate=_short_and_long_agree,
        capacity=capacity,
    ))

    return spec


def comparison_spec(capacity: Capacity) -> Spec:
    spec = Spec(name="comparison")

    spec.add(Property(
        name="equality",
        description="(a == b) == (a == b as ints)",
        predicate=lambda cls, a, b: (cls(a) == cls(b)) == (a == b),
        capacity=capacity,
    ))

    spec.add(Property(
        name="ordering",
        description="(a < b) matches ints when a - b is representable",
        predicate=lambda cls, a, b: (
            not capacity.contains(a - b) or (cls(a) < cls(b)) == (a < b)
        ),
        capacity=capacity,
    ))

    spec.add(Property(
        name="duality",
        description="a <= b is not (b < a); a >= b is not (a < b)",
        predicate=lambda cls, a, b: (
            (cls(a) <= cls(b)) == (not cls(b) < cls(a))
            and (cls(a) >= cls(b)) == (not cls(a) < cls(b))
        ),
        capacity=capacity,
    ))

    return spec


def conversion_spec(capacity: Capacity) -> Spec:
    spec = Spec(name="conversion")

    spec.add(Property(
        name="decimal_reference",
        description="str(a) is the comma-grouped decimal of a",
        predicate=lambda cls, a: str(cls(a)) == f"{a:,}",
        capacity=capacity,
    ))

    spec.add(Property(
        name="round_trip",
        description="parse(render(a)) == a",
        predicate=lambda cls, a: (
            cls.parse(cls(a).to_decimal_string(separator="")) == cls(a)
        ),
        capacity=capacity,
    ))

    spec.add(Property(
        name="digit_count",
        description="num_decimal_digits() == len(str(abs(a)))",
        predicate=lambda cls, a: cls(a).num_decimal_digits() == len(str(abs(a))),
        capacity=capacity,
    ))

    return spec


def full_spec(capacity: Capacity) -> list[Spec]:
    """Every spec a HugeInt type must pass, in verification order."""
    return [
        addition_spec(capacity),
        subtraction_spec(capacity),
        multiplication_spec(capacity),
        division_spec(capacity),
        comparison_spec(capacity),
        conversion_spec(capacity),
    ]
