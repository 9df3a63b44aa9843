"""
Core Glicko-2 computation: scale conversion, expectation model and solver.
"""

from .errors import Glicko2Error, InvalidArgumentError, ConvergenceError, NumericInstabilityError
from .settings import Glicko2Settings, DEFAULT_SETTINGS
from .scale import RatingState, InternalEstimate, to_internal, to_external
from .expectation import reduce_impact, expected_score
from .solver import AdjustmentResult, adjust
