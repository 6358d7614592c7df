"""Unit tests for settings and calculator selection."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from bigmath.calculator import (
    Calculator,
    MpDecimalCalculator,
    NativeCalculator,
    create_calculator,
    get_calculator,
    gmp_available,
    set_calculator,
)
from bigmath.calculator import registry
from bigmath.config import CALCULATOR_AUTO, CALCULATOR_CHOICES, ENV_CALCULATOR, Settings
from bigmath.exceptions import InvalidArgumentError


@pytest.fixture
def fresh_registry():
    """Reset the active calculator before and after the test."""
    set_calculator(None)
    yield
    set_calculator(None)


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_default(self):
        assert Settings().calculator == CALCULATOR_AUTO

    @pytest.mark.parametrize("name", CALCULATOR_CHOICES)
    def test_accepts_choices(self, name):
        assert Settings(calculator=name).calculator == name

    def test_rejects_unknown(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Settings(calculator="bcmath")
        assert exc_info.value.value == "bcmath"

    def test_is_frozen(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.calculator = "native"

    def test_from_env(self):
        assert Settings.from_env({ENV_CALCULATOR: "native"}).calculator == "native"
        assert Settings.from_env({ENV_CALCULATOR: " MpDecimal "}).calculator == "mpdecimal"
        assert Settings.from_env({ENV_CALCULATOR: ""}).calculator == CALCULATOR_AUTO
        assert Settings.from_env({}).calculator == CALCULATOR_AUTO

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setenv(ENV_CALCULATOR, "native")
        assert Settings.from_env().calculator == "native"

    def test_from_env_invalid(self):
        with pytest.raises(InvalidArgumentError):
            Settings.from_env({ENV_CALCULATOR: "fast"})


class TestCreateCalculator:
    """Tests for create_calculator."""

    def test_native(self):
        assert isinstance(create_calculator("native"), NativeCalculator)

    def test_mpdecimal(self):
        assert isinstance(create_calculator("mpdecimal"), MpDecimalCalculator)

    def test_gmp(self):
        pytest.importorskip("gmpy2")
        from bigmath.calculator.gmp import GmpCalculator

        assert isinstance(create_calculator("gmp"), GmpCalculator)

    def test_auto_prefers_gmp(self, monkeypatch):
        pytest.importorskip("gmpy2")
        monkeypatch.setattr(registry, "gmp_available", lambda: True)
        assert create_calculator("auto").name == "gmp"

    def test_auto_falls_back_to_mpdecimal(self, monkeypatch):
        monkeypatch.setattr(registry, "gmp_available", lambda: False)
        assert isinstance(create_calculator("auto"), MpDecimalCalculator)

    def test_gmp_unavailable(self, monkeypatch):
        monkeypatch.setattr(registry, "gmp_available", lambda: False)
        with pytest.raises(InvalidArgumentError):
            create_calculator("gmp")

    def test_unknown(self):
        with pytest.raises(InvalidArgumentError):
            create_calculator("bcmath")

    def test_gmp_available_is_bool(self):
        assert isinstance(gmp_available(), bool)


class TestRegistry:
    """Tests for the process-wide calculator."""

    def test_resolves_from_environment(self, fresh_registry, monkeypatch):
        monkeypatch.setenv(ENV_CALCULATOR, "native")
        calculator = get_calculator()
        assert isinstance(calculator, NativeCalculator)
        assert get_calculator() is calculator

    def test_logs_selection(self, fresh_registry, monkeypatch, caplog):
        monkeypatch.setenv(ENV_CALCULATOR, "mpdecimal")
        with caplog.at_level(logging.DEBUG, logger="bigmath.calculator.registry"):
            get_calculator()
        assert "Selected mpdecimal calculator (requested: mpdecimal)" in caplog.text

    def test_set_calculator_overrides(self, fresh_registry):
        engine = NativeCalculator(max_digits=4)
        set_calculator(engine)
        assert get_calculator() is engine

    def test_reset(self, fresh_registry, monkeypatch):
        set_calculator(NativeCalculator(max_digits=4))
        set_calculator(None)
        monkeypatch.setenv(ENV_CALCULATOR, "mpdecimal")
        assert isinstance(get_calculator(), MpDecimalCalculator)

    def test_concurrent_first_use_agrees(self, fresh_registry, monkeypatch):
        monkeypatch.setenv(ENV_CALCULATOR, "native")
        with ThreadPoolExecutor(max_workers=16) as pool:
            engines = list(pool.map(lambda _: get_calculator(), range(64)))
        assert all(engine is engines[0] for engine in engines)
        assert isinstance(engines[0], Calculator)
