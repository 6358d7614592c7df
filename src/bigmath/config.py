"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bigmath.exceptions import InvalidArgumentError

ENV_CALCULATOR = "BIGMATH_CALCULATOR"

CALCULATOR_AUTO = "auto"
CALCULATOR_GMP = "gmp"
CALCULATOR_MPDECIMAL = "mpdecimal"
CALCULATOR_NATIVE = "native"

CALCULATOR_CHOICES = (
    CALCULATOR_AUTO,
    CALCULATOR_GMP,
    CALCULATOR_MPDECIMAL,
    CALCULATOR_NATIVE,
)


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings.

    Attributes:
        calculator: Engine to use, one of ``CALCULATOR_CHOICES``. ``auto``
            picks the fastest engine available.
    """

    calculator: str = CALCULATOR_AUTO

    def __post_init__(self) -> None:
        if self.calculator not in CALCULATOR_CHOICES:
            raise InvalidArgumentError(
                f"Unknown calculator, expected one of {', '.join(CALCULATOR_CHOICES)}",
                self.calculator,
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        if environ is None:
            environ = os.environ
        calculator = environ.get(ENV_CALCULATOR, CALCULATOR_AUTO).strip().lower()
        return cls(calculator=calculator or CALCULATOR_AUTO)
