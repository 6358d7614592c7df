"""Custom exceptions for the bigmath package.

Every error raised by the package derives from :class:`MathError`. Concrete
classes also derive from the closest builtin exception so that callers can
catch ``ValueError`` or ``ZeroDivisionError`` without importing this module.
"""

from typing import Any


class MathError(Exception):
    """Base exception for all bigmath errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidArgumentError(MathError, ValueError):
    """Raised when an argument is outside the domain of an operation."""


# ---------------------------------------------------------------------------
# Number format
# ---------------------------------------------------------------------------


class NumberFormatError(MathError, ValueError):
    """Base class for errors raised while parsing or formatting numbers."""


class InvalidNumberFormatError(NumberFormatError):
    """Raised when a string does not represent a valid number."""

    def __init__(self, value: Any) -> None:
        super().__init__("The given value does not represent a valid number", value)


class EmptyNumberError(NumberFormatError):
    """Raised when an empty string is given where digits were expected."""

    def __init__(self) -> None:
        super().__init__("The number cannot be empty")


class EmptyByteStringError(NumberFormatError):
    """Raised when decoding an empty byte string."""

    def __init__(self) -> None:
        super().__init__("The byte string must not be empty")


class BaseOutOfRangeError(NumberFormatError):
    """Raised when a base is outside the supported range."""

    def __init__(self, base: int, min_base: int = 2, max_base: int = 36) -> None:
        super().__init__(f"Base must be in range [{min_base}, {max_base}]", base)
        self.base = base
        self.min_base = min_base
        self.max_base = max_base


class AlphabetTooShortError(NumberFormatError):
    """Raised when a custom alphabet has fewer than two characters."""

    def __init__(self, alphabet: str) -> None:
        super().__init__("The alphabet must contain at least 2 chars", alphabet)


class InvalidCharacterInBaseError(NumberFormatError):
    """Raised when a digit is not valid in the requested base."""

    def __init__(self, char: str, base: int) -> None:
        super().__init__(f"Char {char!r} is not a valid character in base {base}", char)
        self.char = char
        self.base = base


class CharNotInAlphabetError(NumberFormatError):
    """Raised when a digit is not part of the given alphabet."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Char {char!r} is not a valid character in the given alphabet", char)
        self.char = char


class ExponentTooLargeError(NumberFormatError):
    """Raised when the exponent of a numeric string cannot be represented."""

    def __init__(self, exponent: Any = None) -> None:
        super().__init__("Exponent too large", exponent)


# ---------------------------------------------------------------------------
# Division by zero
# ---------------------------------------------------------------------------


class DivisionByZeroError(MathError, ZeroDivisionError):
    """Raised when attempting to divide by zero."""

    def __init__(self, message: str = "Division by zero", value: Any = None) -> None:
        super().__init__(message, value)


class ModulusMustNotBeZeroError(DivisionByZeroError):
    """Raised when a modulus is zero."""

    def __init__(self) -> None:
        super().__init__("The modulus must not be zero")


class DenominatorMustNotBeZeroError(DivisionByZeroError):
    """Raised when a rational number is built with a zero denominator."""

    def __init__(self) -> None:
        super().__init__("The denominator of a rational number cannot be zero")


# ---------------------------------------------------------------------------
# Negative operands
# ---------------------------------------------------------------------------


class NegativeNumberError(MathError, ValueError):
    """Base class for operations only defined on non-negative operands."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message, value)


class NegativeSquareRootError(NegativeNumberError):
    """Raised when taking the square root of a negative number."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Cannot calculate the square root of a negative number", value)


class NegativeModulusError(NegativeNumberError):
    """Raised when a modulus is negative."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Modulus must not be negative", value)


class NegativeOperandError(NegativeNumberError):
    """Raised when an operation receives a negative operand it does not support."""

    def __init__(self, operation: str, value: Any = None) -> None:
        super().__init__(f"{operation} is not defined for negative numbers", value)
        self.operation = operation


class NegativeByteConversionError(NegativeNumberError):
    """Raised when encoding a negative number as unsigned bytes."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Cannot convert a negative number to an unsigned byte string", value)


class NegativePrimeSearchError(NegativeNumberError):
    """Raised when searching the next prime of a negative number."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Cannot find the next prime of a negative number", value)


class NegativeArbitraryBaseError(NegativeNumberError):
    """Raised when encoding a negative number with a custom alphabet."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Arbitrary base encoding does not support negative numbers", value)


class NegativeScaleError(NegativeNumberError):
    """Raised when a scale is negative."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Scale cannot be negative", value)


class NegativeBitCountError(NegativeNumberError):
    """Raised when a negative number of random bits is requested."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("The number of bits cannot be negative", value)


class NegativeBitIndexError(NegativeNumberError):
    """Raised when a bit index is negative."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("The bit index cannot be negative", value)


# ---------------------------------------------------------------------------
# Roots and exponents
# ---------------------------------------------------------------------------


class EvenRootOfNegativeError(MathError, ValueError):
    """Raised when taking an even root of a negative number."""

    def __init__(self, root: int) -> None:
        super().__init__("Cannot calculate an even root of a negative number", root)
        self.root = root


class NonPositiveRootError(MathError, ValueError):
    """Raised when the degree of a root is zero or negative."""

    def __init__(self, root: int) -> None:
        super().__init__("The root must be positive", root)
        self.root = root


class ExponentOutOfRangeError(MathError, ValueError):
    """Raised when an exponent is outside the supported range."""

    def __init__(self, exponent: int, max_exponent: int) -> None:
        super().__init__(f"The exponent must be in range [0, {max_exponent}]", exponent)
        self.exponent = exponent
        self.max_exponent = max_exponent


# ---------------------------------------------------------------------------
# Rounding and conversion
# ---------------------------------------------------------------------------


class RoundingNecessaryError(MathError, ArithmeticError):
    """Raised when an exact result was required but rounding is needed."""

    def __init__(
        self,
        message: str = "Rounding is necessary to represent the result of the operation at this scale",
        value: Any = None,
    ) -> None:
        super().__init__(message, value)


class SquareRootRoundingError(RoundingNecessaryError):
    """Raised when an exact square root was required at a given scale."""

    def __init__(self, value: Any = None) -> None:
        super().__init__(
            "Rounding is necessary to represent the square root at the requested scale", value
        )


class RationalToIntegerError(RoundingNecessaryError):
    """Raised when a non-integral rational number is narrowed to an integer."""

    def __init__(self, value: Any = None) -> None:
        super().__init__(
            "This rational number cannot be represented as an integer without rounding", value
        )


class ModInverseNotFoundError(MathError, ArithmeticError):
    """Raised when a number has no inverse for the given modulus."""

    def __init__(self, value: Any = None, modulus: Any = None) -> None:
        super().__init__("Unable to compute the modular inverse for the given modulus", value)
        self.modulus = modulus


class IntegerOverflowError(MathError, OverflowError):
    """Raised when a value does not fit a native 64-bit signed integer."""

    def __init__(self, value: Any, min_val: int, max_val: int) -> None:
        super().__init__(f"Value is out of native integer range [{min_val}, {max_val}]", value)
        self.min_val = min_val
        self.max_val = max_val


# ---------------------------------------------------------------------------
# Aggregates and random generation
# ---------------------------------------------------------------------------


class NoValuesProvidedError(MathError, ValueError):
    """Raised when a variadic aggregate receives no values."""

    def __init__(self, method: str) -> None:
        super().__init__(f"{method}() expects at least one value")
        self.method = method


class MinGreaterThanMaxError(MathError, ValueError):
    """Raised when a random range has its bounds swapped."""

    def __init__(self, min_val: Any, max_val: Any) -> None:
        super().__init__("min cannot be greater than max", (min_val, max_val))
        self.min_val = min_val
        self.max_val = max_val


class MinimumRoundsError(MathError, ValueError):
    """Raised when a probabilistic test is asked for fewer than one round."""

    def __init__(self, rounds: int) -> None:
        super().__init__("The number of rounds must be at least 1", rounds)
        self.rounds = rounds
