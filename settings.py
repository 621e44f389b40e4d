"""Configuration model for building HugeInt types.

A HugeIntSettings payload says how wide the integers are and how hard
the factory should check a freshly built type before handing it out.
This module defines the data model only -- no arithmetic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from capacity import DEFAULT_NUM_DIGITS, Capacity

MAX_NUM_DIGITS = 4096


class HugeIntSettings(BaseModel):
    """Validated settings for ``HugeIntFactory.create``."""

    model_config = ConfigDict(frozen=True)

    num_digits: int = Field(
        default=DEFAULT_NUM_DIGITS,
        ge=1,
        le=MAX_NUM_DIGITS,
        description="Number of base-2^32 digits per value",
    )
    verify: bool = Field(
        default=True,
        description="Run the arithmetic contract before returning the type",
    )
    samples: int = Field(
        default=25,
        ge=0,
        le=100_000,
        description="Random input tuples per property, on top of edge values",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random samples; None draws a fresh one",
    )

    @field_validator("num_digits", "samples", mode="before")
    @classmethod
    def reject_bool(cls, v):
        if isinstance(v, bool):
            raise ValueError(f"expected an integer, got {v!r}")
        return v

    @property
    def capacity(self) -> Capacity:
        return Capacity(self.num_digits)
