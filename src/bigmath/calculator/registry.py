"""Process-wide selection of the active Calculator.

The engine is resolved once, on first use, from :class:`bigmath.config.Settings`
and cached. Resolution is guarded by a lock so that concurrent first calls
agree on a single instance.
"""

from __future__ import annotations

import importlib.util
import logging
import threading

from bigmath.calculator.base import Calculator
from bigmath.calculator.mpdecimal import MpDecimalCalculator
from bigmath.calculator.native import NativeCalculator
from bigmath.config import (
    CALCULATOR_AUTO,
    CALCULATOR_GMP,
    CALCULATOR_MPDECIMAL,
    CALCULATOR_NATIVE,
    Settings,
)
from bigmath.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_instance: Calculator | None = None


def gmp_available() -> bool:
    """Whether gmpy2 can be imported."""
    return importlib.util.find_spec("gmpy2") is not None


def create_calculator(name: str) -> Calculator:
    """
    Instantiate the engine with the given name.

    ``auto`` selects GMP when gmpy2 is installed and the decimal engine
    otherwise.

    Raises:
        InvalidArgumentError: If the name is unknown, or ``gmp`` is
            requested without gmpy2
    """
    if name == CALCULATOR_AUTO:
        name = CALCULATOR_GMP if gmp_available() else CALCULATOR_MPDECIMAL

    if name == CALCULATOR_GMP:
        if not gmp_available():
            raise InvalidArgumentError("The gmp calculator requires gmpy2", name)
        from bigmath.calculator.gmp import GmpCalculator

        return GmpCalculator()

    if name == CALCULATOR_MPDECIMAL:
        return MpDecimalCalculator()

    if name == CALCULATOR_NATIVE:
        return NativeCalculator()

    raise InvalidArgumentError("Unknown calculator", name)


def get_calculator() -> Calculator:
    """Return the active Calculator, resolving it on first call."""
    global _instance

    instance = _instance
    if instance is None:
        with _lock:
            if _instance is None:
                settings = Settings.from_env()
                _instance = create_calculator(settings.calculator)
                logger.debug(
                    "Selected %s calculator (requested: %s)", _instance.name, settings.calculator
                )
            instance = _instance

    return instance


def set_calculator(calculator: Calculator | None) -> None:
    """
    Force the Calculator to use, or reset to auto-detection with None.

    Intended for tests; production code should rely on ``BIGMATH_CALCULATOR``.
    """
    global _instance

    with _lock:
        _instance = calculator
