"""
Glicko Pair - Glicko-2 rating updates for a single two-competitor match.
"""

from .core import (
    Glicko2Error,
    InvalidArgumentError,
    ConvergenceError,
    NumericInstabilityError,
    Glicko2Settings,
    DEFAULT_SETTINGS,
    RatingState,
    InternalEstimate,
    to_internal,
    to_external,
    reduce_impact,
    expected_score,
    AdjustmentResult,
    adjust,
)
from .rating import (
    Glicko2Calculator,
    OpponentModel,
    UpdateResult,
    complement_outcome,
    rate_against,
    update_ratings,
    calculate_new_ratings,
)

__all__ = [
    "Glicko2Calculator",
    "OpponentModel",
    "UpdateResult",
    "complement_outcome",
    "rate_against",
    "update_ratings",
    "calculate_new_ratings",
    "Glicko2Settings",
    "DEFAULT_SETTINGS",
    "RatingState",
    "InternalEstimate",
    "to_internal",
    "to_external",
    "reduce_impact",
    "expected_score",
    "AdjustmentResult",
    "adjust",
    "Glicko2Error",
    "InvalidArgumentError",
    "ConvergenceError",
    "NumericInstabilityError",
]
