"""
The HugeInt factory.

The factory does NOT just construct types - it *verifies* them against
their specs before releasing them.

Flow:
  1. Caller requests a HugeInt type for some HugeIntSettings.
  2. Factory builds (or fetches) the type for that digit count.
  3. Factory runs every spec in ``spec.full_spec`` against the type,
     on edge values of the capacity plus seeded random samples.
  4. If verification passes  -> return the type.
     If verification fails   -> raise, never hand out a broken type.
"""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass, field

from capacity import BASE, Capacity
from errors import VerificationError
from hugeint import HugeInt, hugeint_type
from settings import HugeIntSettings
from spec import Property, Spec, full_spec

logger = logging.getLogger(__name__)

__all__ = [
    "HugeIntFactory",
    "VerificationError",
    "VerificationReport",
    "VerificationResult",
]


@dataclass
class VerificationResult:
    """Outcome of verifying one property."""

    property_name: str
    passed: bool
    counterexample: tuple | None = None
    tests_run: int = 0

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  counterexample={self.counterexample}" if self.counterexample else ""
        return f"[{status}] {self.property_name} ({self.tests_run} tests){ce}"


@dataclass
class VerificationReport:
    """Aggregate result of verifying an entire spec."""

    spec_name: str
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    def summary(self) -> str:
        lines = [f"--- {self.spec_name} ---"]
        for r in self.results:
            lines.append(f"  {r}")
        status = "ALL PASSED" if self.passed else "FAILED"
        lines.append(f"  => {status}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# The factory
# ---------------------------------------------------------------------------

class HugeIntFactory:
    """
    Produces HugeInt types that are checked against their contract.

    A 300-digit ring is far too large to enumerate, so every property
    is run over all combinations of the capacity's edge values and then
    over ``settings.samples`` random tuples.
    """

    @classmethod
    def create(cls, settings: HugeIntSettings | None = None, **overrides) -> type[HugeInt]:
        """Build, verify, and return a HugeInt type."""
        if settings is None:
            settings = HugeIntSettings(**overrides)
        elif overrides:
            settings = settings.model_copy(update=overrides)

        hugeint_cls = hugeint_type(settings.num_digits)
        if settings.verify:
            rng = random.Random(settings.seed)
            cls._verify_all(hugeint_cls, settings.samples, rng)
        else:
            logger.debug("skipping verification of %s", hugeint_cls.__name__)
        return hugeint_cls

    # -- internal ---------------------------------------------------------

    @classmethod
    def _verify_all(
        cls, hugeint_cls: type[HugeInt], samples: int, rng: random.Random
    ) -> None:
        for spec in full_spec(hugeint_cls.capacity):
            report = cls._verify_spec(spec, hugeint_cls, samples, rng)
            if not report.passed:
                logger.warning("%s failed verification\n%s",
                               hugeint_cls.__name__, report.summary())
                raise VerificationError(report)
            logger.info("%s: %s passed (%d properties)",
                        hugeint_cls.__name__, spec.name, len(spec))

    @classmethod
    def _verify_spec(
        cls,
        spec: Spec,
        hugeint_cls: type[HugeInt],
        samples: int = 0,
        rng: random.Random | None = None,
    ) -> VerificationReport:
        report = VerificationReport(spec_name=spec.name)
        for prop in spec:
            result = cls._verify_property(prop, hugeint_cls, samples, rng)
            logger.debug("%r", result)
            report.results.append(result)
        return report

    @classmethod
    def _verify_property(
        cls,
        prop: Property,
        hugeint_cls: type[HugeInt],
        samples: int = 0,
        rng: random.Random | None = None,
    ) -> VerificationResult:
        rng = rng or random.Random()
        tests_run = 0

        for combo in _generate_samples(prop.capacity, prop.arity, samples, rng):
            tests_run += 1
            try:
                holds = prop.check(hugeint_cls, *combo)
            except ZeroDivisionError:
                # Zero divisors are rejected by contract, not a violation.
                continue
            if not holds:
                return VerificationResult(
                    property_name=prop.name,
                    passed=False,
                    counterexample=combo,
                    tests_run=tests_run,
                )

        return VerificationResult(
            property_name=prop.name,
            passed=True,
            tests_run=tests_run,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def edge_values(capacity: Capacity) -> list[int]:
    """Boundary values of the capacity and of single-digit arithmetic."""
    candidates = [
        0, 1, -1,
        capacity.lo, capacity.lo + 1, capacity.hi - 1, capacity.hi,
        BASE - 1, BASE, -(BASE - 1), -BASE,
    ]
    values: list[int] = []
    for v in candidates:
        if capacity.contains(v) and v not in values:
            values.append(v)
    return values


def _random_value(capacity: Capacity, rng: random.Random) -> int:
    """Random value whose magnitude spans a random number of digits."""
    num_digits = rng.randint(1, capacity.num_digits)
    magnitude = rng.getrandbits(32 * num_digits - 1)
    return -magnitude if rng.random() < 0.5 else magnitude


def _generate_samples(
    capacity: Capacity, arity: int, count: int, rng: random.Random
) -> list[tuple[int, ...]]:
    """All edge-value combinations followed by ``count`` random tuples."""
    samples = list(itertools.product(edge_values(capacity), repeat=arity))
    for _ in range(count):
        samples.append(tuple(_random_value(capacity, rng) for _ in range(arity)))
    return samples
