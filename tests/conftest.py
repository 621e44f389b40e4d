"""Shared fixtures and helpers for HugeInt tests."""

from __future__ import annotations

import pytest

from capacity import SMALL, TINY
from hugeint import HugeInt, hugeint_type


def to_digits(value: int, num_digits: int) -> tuple[int, ...]:
    """Unsigned base-2^32 digits of a non-negative int, least significant first."""
    return tuple((value >> (32 * i)) & 0xFFFFFFFF for i in range(num_digits))


def value_of(digits) -> int:
    """Unsigned reading of a digit tuple."""
    return sum(d << (32 * i) for i, d in enumerate(digits))


@pytest.fixture
def tiny_cls() -> type[HugeInt]:
    return hugeint_type(TINY.num_digits)


@pytest.fixture
def small_cls() -> type[HugeInt]:
    return hugeint_type(SMALL.num_digits)


@pytest.fixture
def default_cls() -> type[HugeInt]:
    return HugeInt
