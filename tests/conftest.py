"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import HealthCheck, Verbosity, settings

from bigmath.calculator import (
    MpDecimalCalculator,
    NativeCalculator,
    set_calculator,
)

# Configure Hypothesis profiles
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture, HealthCheck.filter_too_much],
)
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture, HealthCheck.filter_too_much],
)
settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.function_scoped_fixture, HealthCheck.filter_too_much],
)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


ENGINES = ["gmp", "mpdecimal", "native", "native-blocks"]


def make_calculator(name):
    """Build the engine registered under a test id."""
    if name == "gmp":
        pytest.importorskip("gmpy2")
        from bigmath.calculator.gmp import GmpCalculator

        return GmpCalculator()
    if name == "mpdecimal":
        return MpDecimalCalculator()
    if name == "native":
        return NativeCalculator()
    # Tiny blocks force the long-arithmetic paths on short operands.
    return NativeCalculator(max_digits=3)


@pytest.fixture(params=ENGINES)
def calculator(request):
    """Provide each engine in turn, installed as the active calculator."""
    engine = make_calculator(request.param)
    set_calculator(engine)
    yield engine
    set_calculator(None)


@pytest.fixture
def fixed_bytes():
    """Provide a deterministic random-bytes source cycling over a seed."""

    def factory(seed):
        state = {"offset": 0}

        def random_bytes(length):
            start = state["offset"]
            state["offset"] += length
            return bytes(seed[(start + i) % len(seed)] for i in range(length))

        return random_bytes

    return factory


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers."""
    return [
        "0",
        "1",
        "-1",
        "9",
        "10",
        "-10",
        "999999999999999999",
        "1000000000000000000",
        "-1000000000000000001",
        "123456789012345678901234567890",
        "-98765432109876543210987654321098765",
    ]
