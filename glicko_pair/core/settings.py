"""
System constants for the Glicko-2 computation.
"""

import math
import numbers
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .errors import InvalidArgumentError

SCALE = 173.7178  # Glicko-2 scaling factor
RATING_MIDPOINT = 1500.0
TAU = 0.5  # Volatility-smoothing constant
EPSILON = 0.000001  # Convergence tolerance
MAX_ITERATIONS = 100

# Deviation of a competitor with no history
INITIAL_DEVIATION = 350.0
# Lowest deviation worth keeping; gives roughly a 16 point swing in an even match
RECOMMENDED_MIN_DEVIATION = 75.0


def _require_positive(name: str, value: float) -> None:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgumentError(f"{name} must be positive and finite, got {value!r}")


@dataclass(frozen=True)
class Glicko2Settings:
    """
    Immutable configuration for a rating computation.

    Args:
        scale: Factor between the external rating scale and the internal one
        rating_midpoint: External rating that maps to mu = 0
        tau: Volatility-smoothing constant
        epsilon: Convergence tolerance on the root bracket width
        max_iterations: Cap applied separately to the bracketing and refinement loops
        initial_deviation: Deviation assigned to a new competitor
        deviation_bounds: Optional (low, high) clamp applied to reported deviations
    """

    scale: float = SCALE
    rating_midpoint: float = RATING_MIDPOINT
    tau: float = TAU
    epsilon: float = EPSILON
    max_iterations: int = MAX_ITERATIONS
    initial_deviation: float = INITIAL_DEVIATION
    deviation_bounds: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        _require_positive("scale", self.scale)
        _require_positive("tau", self.tau)
        _require_positive("epsilon", self.epsilon)
        _require_positive("initial_deviation", self.initial_deviation)

        if (not isinstance(self.rating_midpoint, numbers.Real)
                or not math.isfinite(self.rating_midpoint)):
            raise InvalidArgumentError(
                f"rating_midpoint must be finite, got {self.rating_midpoint!r}")

        if (not isinstance(self.max_iterations, numbers.Integral)
                or isinstance(self.max_iterations, bool) or self.max_iterations < 1):
            raise InvalidArgumentError(
                f"max_iterations must be an integer >= 1, got {self.max_iterations!r}")

        if self.deviation_bounds is not None:
            if len(self.deviation_bounds) != 2:
                raise InvalidArgumentError("deviation_bounds must be a (low, high) pair")
            low, high = self.deviation_bounds
            _require_positive("deviation_bounds low", low)
            _require_positive("deviation_bounds high", high)
            if low > high:
                raise InvalidArgumentError(
                    f"deviation_bounds low must not exceed high, got {self.deviation_bounds!r}")

    def replace(self, **changes) -> 'Glicko2Settings':
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def clamp_deviation(self, deviation: float) -> float:
        """Clamp a deviation into deviation_bounds, if any are configured."""
        if self.deviation_bounds is None:
            return deviation
        low, high = self.deviation_bounds
        return min(max(deviation, low), high)

    @classmethod
    def with_recommended_bounds(cls, **changes) -> 'Glicko2Settings':
        """
        Settings that keep reported deviations between the recommended floor
        and the initial deviation.

        Args:
            **changes: Any other fields to override
        """
        high = changes.get("initial_deviation", INITIAL_DEVIATION)
        changes.setdefault("deviation_bounds", (RECOMMENDED_MIN_DEVIATION, high))
        return cls(**changes)


DEFAULT_SETTINGS = Glicko2Settings()
