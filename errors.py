"""Exceptions raised by the huge integer engine.

Each error subclasses the built-in exception a caller would already
catch for the same failure on native ints, so ``except ValueError`` and
``except ZeroDivisionError`` keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from factory import VerificationReport


class HugeIntError(Exception):
    """Base class for all huge integer errors."""


class InvalidFormatError(HugeIntError, ValueError):
    """Raised when a decimal string is not of the form ``[+-]?[0-9]+``."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid decimal string {text!r}: {reason}")


class HugeIntZeroDivisionError(HugeIntError, ZeroDivisionError):
    """Raised by division and modulo when the divisor is zero."""

    def __init__(self) -> None:
        super().__init__("HugeInt division by zero")


class VerificationError(HugeIntError):
    """Raised when a configured HugeInt type fails its contract."""

    def __init__(self, report: VerificationReport) -> None:
        self.report = report
        super().__init__(f"Verification failed:\n{report.summary()}")
