"""Rounding modes applied whenever an operation discards precision."""

from __future__ import annotations

from enum import Enum, auto

from bigmath.exceptions import RoundingNecessaryError


class RoundingMode(Enum):
    """
    How to compute the last kept digit when a fraction is discarded.

    The "discarded fraction" is the part of the exact result that cannot be
    represented at the requested precision. Examples use rounding to an
    integer.
    """

    UNNECESSARY = auto()  # Exact result required, otherwise RoundingNecessaryError
    UP = auto()  # Away from zero: 1.1 -> 2, -1.1 -> -2
    DOWN = auto()  # Towards zero: 1.9 -> 1, -1.9 -> -1
    CEILING = auto()  # Towards +inf: 1.1 -> 2, -1.9 -> -1
    FLOOR = auto()  # Towards -inf: 1.9 -> 1, -1.1 -> -2
    HALF_UP = auto()  # Nearest, ties away from zero: 1.5 -> 2, -1.5 -> -2
    HALF_DOWN = auto()  # Nearest, ties towards zero: 1.5 -> 1, -1.5 -> -1
    HALF_CEILING = auto()  # Nearest, ties towards +inf: 1.5 -> 2, -1.5 -> -1
    HALF_FLOOR = auto()  # Nearest, ties towards -inf: 1.5 -> 1, -1.5 -> -2
    HALF_EVEN = auto()  # Nearest, ties to the even neighbour: 2.5 -> 2, 3.5 -> 4


def should_increment(mode: RoundingMode, positive: bool, half: int, odd: bool) -> bool:
    """
    Decide whether a truncated quotient must move one unit away from zero.

    Only called when the discarded fraction is non-zero.

    Args:
        mode: The rounding mode to apply
        positive: Whether the exact result is positive (or zero)
        half: Sign of ``2 * |remainder| - |divisor|``: -1, 0 or 1
        odd: Whether the last digit of the truncated quotient is odd

    Returns:
        True if the magnitude of the quotient must be incremented

    Raises:
        RoundingNecessaryError: If mode is UNNECESSARY
    """
    if mode is RoundingMode.UNNECESSARY:
        raise RoundingNecessaryError()
    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.CEILING:
        return positive
    if mode is RoundingMode.FLOOR:
        return not positive
    if mode is RoundingMode.HALF_UP:
        return half >= 0
    if mode is RoundingMode.HALF_DOWN:
        return half > 0
    if mode is RoundingMode.HALF_CEILING:
        return half >= 0 if positive else half > 0
    if mode is RoundingMode.HALF_FLOOR:
        return half > 0 if positive else half >= 0
    if mode is RoundingMode.HALF_EVEN:
        return half >= 0 if odd else half > 0
    raise ValueError(f"Unknown rounding mode: {mode!r}")
