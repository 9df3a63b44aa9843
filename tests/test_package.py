"""
Test the public surface of the glicko_pair package.
"""

import glicko_pair


def test_core_imports():
    """Core components can be imported from the core subpackage."""
    from glicko_pair.core import (
        Glicko2Settings,
        RatingState,
        adjust,
        expected_score,
        reduce_impact,
        to_external,
        to_internal,
    )

    assert callable(adjust)
    assert callable(expected_score)
    assert callable(reduce_impact)
    assert to_external(to_internal(RatingState(1500.0, 350.0))).rating == 1500.0
    assert isinstance(Glicko2Settings(), Glicko2Settings)


def test_all_exports_exist():
    """Everything listed in __all__ is importable from the package."""
    for name in glicko_pair.__all__:
        assert hasattr(glicko_pair, name), name


def test_error_hierarchy():
    """All package errors share a base class."""
    assert issubclass(glicko_pair.InvalidArgumentError, glicko_pair.Glicko2Error)
    assert issubclass(glicko_pair.InvalidArgumentError, ValueError)
    assert issubclass(glicko_pair.ConvergenceError, glicko_pair.Glicko2Error)
    assert issubclass(glicko_pair.NumericInstabilityError, ArithmeticError)


def test_top_level_update():
    """The package-level entry point runs a full update."""
    result = glicko_pair.update_ratings(1500, 1500, 200, 200, 1.0)
    assert result.new_rating_a > 1500 > result.new_rating_b
