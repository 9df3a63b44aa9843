"""
Tests for the Glicko-2 system settings.
"""

import dataclasses

import numpy as np
import pytest

from glicko_pair.core.errors import InvalidArgumentError
from glicko_pair.core.settings import (
    DEFAULT_SETTINGS,
    EPSILON,
    INITIAL_DEVIATION,
    MAX_ITERATIONS,
    RATING_MIDPOINT,
    RECOMMENDED_MIN_DEVIATION,
    SCALE,
    TAU,
    Glicko2Settings,
)


def test_defaults():
    """Default settings carry the reference constants."""
    assert DEFAULT_SETTINGS.scale == SCALE == 173.7178
    assert DEFAULT_SETTINGS.rating_midpoint == RATING_MIDPOINT == 1500.0
    assert DEFAULT_SETTINGS.tau == TAU == 0.5
    assert DEFAULT_SETTINGS.epsilon == EPSILON == 0.000001
    assert DEFAULT_SETTINGS.max_iterations == MAX_ITERATIONS == 100
    assert DEFAULT_SETTINGS.initial_deviation == INITIAL_DEVIATION == 350.0
    assert DEFAULT_SETTINGS.deviation_bounds is None
    assert RECOMMENDED_MIN_DEVIATION == 75.0


def test_settings_are_immutable():
    """Settings cannot be changed in place."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.tau = 1.0


def test_replace_returns_copy():
    """replace() builds a new instance and leaves the original alone."""
    settings = DEFAULT_SETTINGS.replace(tau=0.3, max_iterations=20)
    assert settings.tau == 0.3
    assert settings.max_iterations == 20
    assert settings.scale == DEFAULT_SETTINGS.scale
    assert DEFAULT_SETTINGS.tau == 0.5


def test_replace_validates():
    """Changes made through replace() are validated too."""
    with pytest.raises(InvalidArgumentError, match="tau"):
        DEFAULT_SETTINGS.replace(tau=-0.5)


@pytest.mark.parametrize("kwargs, message", [
    ({"scale": 0.0}, "scale must be positive"),
    ({"tau": 0.0}, "tau must be positive"),
    ({"tau": float("nan")}, "tau must be positive"),
    ({"epsilon": -1e-6}, "epsilon must be positive"),
    ({"initial_deviation": float("inf")}, "initial_deviation must be positive"),
    ({"rating_midpoint": float("nan")}, "rating_midpoint must be finite"),
    ({"max_iterations": 0}, "max_iterations must be an integer"),
    ({"max_iterations": 2.5}, "max_iterations must be an integer"),
    ({"max_iterations": True}, "max_iterations must be an integer"),
    ({"deviation_bounds": (350.0, 75.0)}, "must not exceed"),
    ({"deviation_bounds": (0.0, 75.0)}, "deviation_bounds low"),
    ({"deviation_bounds": (75.0,)}, "pair"),
])
def test_invalid_settings(kwargs, message):
    """Out-of-domain settings are rejected on construction."""
    with pytest.raises(InvalidArgumentError, match=message):
        Glicko2Settings(**kwargs)


def test_clamp_deviation():
    """Deviations are clamped only when bounds are set."""
    assert DEFAULT_SETTINGS.clamp_deviation(10.0) == 10.0

    settings = Glicko2Settings(deviation_bounds=(30.0, 350.0))
    assert settings.clamp_deviation(10.0) == 30.0
    assert settings.clamp_deviation(400.0) == 350.0
    assert settings.clamp_deviation(120.0) == 120.0


def test_with_recommended_bounds():
    """Recommended settings clamp between the floor and the initial deviation."""
    settings = Glicko2Settings.with_recommended_bounds()
    assert settings.deviation_bounds == (RECOMMENDED_MIN_DEVIATION, INITIAL_DEVIATION)

    settings = Glicko2Settings.with_recommended_bounds(initial_deviation=300.0, tau=0.3)
    assert settings.deviation_bounds == (75.0, 300.0)
    assert settings.tau == 0.3


def test_numpy_settings_values():
    """Numpy scalars are accepted as setting values."""
    settings = Glicko2Settings(tau=np.float64(0.4), max_iterations=np.int64(50))
    assert settings.tau == 0.4
    assert settings.max_iterations == 50
