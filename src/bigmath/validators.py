"""Argument guards shared by the numeric types.

Each validator returns the validated value so it can be used inline.
"""

from bigmath.exceptions import (
    AlphabetTooShortError,
    BaseOutOfRangeError,
    ExponentOutOfRangeError,
    MinimumRoundsError,
    NegativeBitCountError,
    NegativeBitIndexError,
    NegativeScaleError,
    NonPositiveRootError,
)

MIN_BASE = 2
MAX_BASE = 36

# Upper bound for exponents accepted by power(); bounds computation time.
MAX_POWER = 1_000_000


def validate_scale(scale: int) -> int:
    """
    Validate that a scale is non-negative.

    Raises:
        NegativeScaleError: If scale is negative
    """
    if scale < 0:
        raise NegativeScaleError(scale)
    return scale


def validate_exponent(exponent: int, max_exponent: int = MAX_POWER) -> int:
    """
    Validate that an exponent is within ``[0, max_exponent]``.

    Raises:
        ExponentOutOfRangeError: If exponent is out of range
    """
    if exponent < 0 or exponent > max_exponent:
        raise ExponentOutOfRangeError(exponent, max_exponent)
    return exponent


def validate_base(base: int) -> int:
    """
    Validate that a base is within ``[MIN_BASE, MAX_BASE]``.

    Raises:
        BaseOutOfRangeError: If base is out of range
    """
    if base < MIN_BASE or base > MAX_BASE:
        raise BaseOutOfRangeError(base, MIN_BASE, MAX_BASE)
    return base


def validate_alphabet(alphabet: str) -> str:
    """
    Validate that a custom alphabet has at least two characters.

    Raises:
        AlphabetTooShortError: If the alphabet is too short
    """
    if len(alphabet) < 2:
        raise AlphabetTooShortError(alphabet)
    return alphabet


def validate_bit_index(index: int) -> int:
    """Validate that a bit index is non-negative."""
    if index < 0:
        raise NegativeBitIndexError(index)
    return index


def validate_bit_count(count: int) -> int:
    """Validate that a bit count is non-negative."""
    if count < 0:
        raise NegativeBitCountError(count)
    return count


def validate_rounds(rounds: int) -> int:
    """Validate that a probabilistic test runs at least one round."""
    if rounds < 1:
        raise MinimumRoundsError(rounds)
    return rounds


def validate_root(n: int) -> int:
    """Validate that the degree of a root is positive."""
    if n < 1:
        raise NonPositiveRootError(n)
    return n
