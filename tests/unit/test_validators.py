"""Unit tests for validator functions and the exception hierarchy."""

import pytest

from bigmath.exceptions import (
    AlphabetTooShortError,
    BaseOutOfRangeError,
    DenominatorMustNotBeZeroError,
    DivisionByZeroError,
    ExponentOutOfRangeError,
    IntegerOverflowError,
    MathError,
    MinimumRoundsError,
    ModulusMustNotBeZeroError,
    NegativeBitCountError,
    NegativeBitIndexError,
    NegativeNumberError,
    NegativeOperandError,
    NegativeScaleError,
    NegativeSquareRootError,
    NoValuesProvidedError,
    NonPositiveRootError,
    NumberFormatError,
    RationalToIntegerError,
    RoundingNecessaryError,
    SquareRootRoundingError,
)
from bigmath.validators import (
    MAX_POWER,
    validate_alphabet,
    validate_base,
    validate_bit_count,
    validate_bit_index,
    validate_exponent,
    validate_root,
    validate_rounds,
    validate_scale,
)


class TestValidateScale:
    """Tests for validate_scale function."""

    def test_accepts_zero(self):
        assert validate_scale(0) == 0

    def test_accepts_positive(self):
        assert validate_scale(12) == 12

    def test_rejects_negative(self):
        with pytest.raises(NegativeScaleError) as exc_info:
            validate_scale(-1)
        assert exc_info.value.value == -1


class TestValidateExponent:
    """Tests for validate_exponent function."""

    def test_accepts_bounds(self):
        assert validate_exponent(0) == 0
        assert validate_exponent(MAX_POWER) == MAX_POWER

    def test_rejects_negative(self):
        with pytest.raises(ExponentOutOfRangeError):
            validate_exponent(-1)

    def test_rejects_above_max(self):
        with pytest.raises(ExponentOutOfRangeError) as exc_info:
            validate_exponent(MAX_POWER + 1)
        assert exc_info.value.max_exponent == MAX_POWER
        assert str(MAX_POWER) in str(exc_info.value)

    def test_custom_max(self):
        assert validate_exponent(5, max_exponent=5) == 5
        with pytest.raises(ExponentOutOfRangeError):
            validate_exponent(6, max_exponent=5)


class TestValidateBase:
    """Tests for validate_base function."""

    @pytest.mark.parametrize("base", [2, 10, 16, 36])
    def test_accepts_supported_bases(self, base):
        assert validate_base(base) == base

    @pytest.mark.parametrize("base", [-2, 0, 1, 37])
    def test_rejects_unsupported_bases(self, base):
        with pytest.raises(BaseOutOfRangeError) as exc_info:
            validate_base(base)
        assert exc_info.value.base == base
        assert "[2, 36]" in str(exc_info.value)


class TestValidateAlphabet:
    """Tests for validate_alphabet function."""

    def test_accepts_two_chars(self):
        assert validate_alphabet("01") == "01"

    @pytest.mark.parametrize("alphabet", ["", "0"])
    def test_rejects_short(self, alphabet):
        with pytest.raises(AlphabetTooShortError):
            validate_alphabet(alphabet)


class TestValidateBits:
    """Tests for validate_bit_index and validate_bit_count."""

    def test_accepts_zero(self):
        assert validate_bit_index(0) == 0
        assert validate_bit_count(0) == 0

    def test_rejects_negative_index(self):
        with pytest.raises(NegativeBitIndexError):
            validate_bit_index(-1)

    def test_rejects_negative_count(self):
        with pytest.raises(NegativeBitCountError):
            validate_bit_count(-1)


class TestValidateRoundsAndRoot:
    """Tests for validate_rounds and validate_root."""

    def test_accepts_one(self):
        assert validate_rounds(1) == 1
        assert validate_root(1) == 1

    def test_rejects_zero_rounds(self):
        with pytest.raises(MinimumRoundsError):
            validate_rounds(0)

    @pytest.mark.parametrize("n", [0, -3])
    def test_rejects_non_positive_root(self, n):
        with pytest.raises(NonPositiveRootError) as exc_info:
            validate_root(n)
        assert exc_info.value.root == n


class TestExceptionHierarchy:
    """Tests for the exception classes."""

    def test_message_and_value(self):
        error = MathError("Something failed", 42)
        assert error.message == "Something failed"
        assert error.value == 42
        assert str(error) == "Something failed: 42"

    def test_message_without_value(self):
        assert str(MathError("Something failed")) == "Something failed"

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (NumberFormatError("bad"), ValueError),
            (DivisionByZeroError(), ZeroDivisionError),
            (NegativeNumberError("negative"), ValueError),
            (RoundingNecessaryError(), ArithmeticError),
            (IntegerOverflowError(2**70, -(2**63), 2**63 - 1), OverflowError),
            (NoValuesProvidedError("sum"), ValueError),
        ],
    )
    def test_errors_are_builtin_subclasses(self, error, builtin):
        assert isinstance(error, MathError)
        assert isinstance(error, builtin)

    def test_zero_divisor_family(self):
        assert issubclass(ModulusMustNotBeZeroError, DivisionByZeroError)
        assert issubclass(DenominatorMustNotBeZeroError, DivisionByZeroError)

    def test_negative_family(self):
        assert issubclass(NegativeSquareRootError, NegativeNumberError)
        assert issubclass(NegativeOperandError, NegativeNumberError)

    def test_rounding_family(self):
        assert issubclass(SquareRootRoundingError, RoundingNecessaryError)
        assert issubclass(RationalToIntegerError, RoundingNecessaryError)

    def test_negative_operand_names_operation(self):
        assert str(NegativeOperandError("Factorial", -3)) == (
            "Factorial is not defined for negative numbers: -3"
        )

    def test_no_values_names_method(self):
        assert str(NoValuesProvidedError("BigNumber.sum")) == (
            "BigNumber.sum() expects at least one value"
        )
