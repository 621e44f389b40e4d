"""Counterexample search: discovers gaps in the arithmetic engine.

This module runs independently of the test suite.  It compares every
HugeInt operation against Python's int on operands built from
"dangerous" digit patterns: 0, 1, 2^31 - 1, 2^31 and 2^32 - 1 in each
digit slot.  Those patterns drive Algorithm D through its rare
branches (qhat clamped to 2^32 - 1, qhat refined twice, the add-back
step) far more often than uniform random operands do.

Run directly::

    python -m validation.counterexample_search
"""
from __future__ import annotations

import itertools
import logging
import random
import sys
from dataclasses import dataclass, field
from typing import Callable

from capacity import SMALL, TINY, Capacity
from hugeint import HugeInt, hugeint_type
from spec import truncdiv, truncmod

logger = logging.getLogger(__name__)

DIGIT_PATTERNS = (0, 1, (1 << 31) - 1, 1 << 31, (1 << 32) - 1)
MAX_PAIRS = 20_000


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class Counterexample:
    operation: str
    inputs: tuple
    expected: int
    actual: int | str


@dataclass
class SearchReport:
    capacity: Capacity
    counterexamples: list[Counterexample] = field(default_factory=list)
    checks_run: int = 0

    @property
    def passed(self) -> bool:
        return len(self.counterexamples) == 0

    def summary(self) -> str:
        lines = [
            f"Counterexample Search Report ({self.capacity.num_digits} digits)",
            "=" * 40,
            f"Total checks: {self.checks_run}",
            f"Counterexamples found: {len(self.counterexamples)}",
        ]
        if self.counterexamples:
            lines.append("")
            for i, cx in enumerate(self.counterexamples, 1):
                lines.append(f"  [{i}] {cx.operation}")
                lines.append(f"      Inputs:   {cx.inputs}")
                lines.append(f"      Expected: {cx.expected}")
                lines.append(f"      Actual:   {cx.actual}")
        else:
            lines.append("\nNo counterexamples found - all checks passed.")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Operand generation
# ---------------------------------------------------------------------------

def pattern_values(capacity: Capacity) -> list[int]:
    """Every signed value whose digits are all drawn from DIGIT_PATTERNS."""
    values = []
    for combo in itertools.product(DIGIT_PATTERNS, repeat=capacity.num_digits):
        raw = 0
        for d in reversed(combo):
            raw = (raw << 32) | d
        values.append(capacity.wrap(raw))
    return values


def operand_pairs(
    capacity: Capacity, rng: random.Random, limit: int = MAX_PAIRS
) -> list[tuple[int, int]]:
    values = pattern_values(capacity)
    if len(values) ** 2 <= limit:
        return list(itertools.product(values, repeat=2))
    return [(rng.choice(values), rng.choice(values)) for _ in range(limit)]


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def _operations(
    capacity: Capacity,
) -> dict[str, tuple[Callable, Callable]]:
    wrap = capacity.wrap
    return {
        "add": (lambda x, y: x + y, lambda a, b: wrap(a + b)),
        "sub": (lambda x, y: x - y, lambda a, b: wrap(a - b)),
        "mul": (lambda x, y: x * y, lambda a, b: wrap(a * b)),
        "div": (lambda x, y: x // y, lambda a, b: wrap(truncdiv(a, b))),
        "mod": (lambda x, y: x % y, lambda a, b: truncmod(a, b)),
    }


def run_search(capacity: Capacity, rng: random.Random) -> SearchReport:
    """Compare every operation with the int reference on pattern operands."""
    cls: type[HugeInt] = hugeint_type(capacity.num_digits)
    report = SearchReport(capacity=capacity)
    operations = _operations(capacity)

    for a, b in operand_pairs(capacity, rng):
        x, y = cls(a), cls(b)
        for name, (op, reference) in operations.items():
            if name in ("div", "mod") and b == 0:
                continue
            report.checks_run += 1
            expected = reference(a, b)
            try:
                actual = int(op(x, y))
            except Exception as e:
                actual = f"{type(e).__name__}: {e}"
            if actual != expected:
                report.counterexamples.append(
                    Counterexample(name, (a, b), expected, actual)
                )

    logger.info("%d-digit search: %d checks, %d counterexamples",
                capacity.num_digits, report.checks_run,
                len(report.counterexamples))
    return report


def main() -> None:
    """Run counterexample search across several capacities."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    rng = random.Random(0)

    all_passed = True
    for capacity in (TINY, Capacity(3), SMALL):
        print(f"\n--- Capacity: {capacity.num_digits} digits ---")
        report = run_search(capacity, rng)
        print(report.summary())
        if not report.passed:
            all_passed = False

    print("\n" + "=" * 40)
    if all_passed:
        print("ALL CAPACITIES PASSED")
    else:
        print("SOME CAPACITIES HAD COUNTEREXAMPLES")
        sys.exit(1)


if __name__ == "__main__":
    main()
