"""
Conversion between the external rating scale and the internal Glicko-2 scale.
"""

from dataclasses import dataclass

from .settings import Glicko2Settings, DEFAULT_SETTINGS


@dataclass(frozen=True)
class RatingState:
    """A competitor's rating and rating deviation on the external scale."""

    rating: float
    deviation: float

    @classmethod
    def initial(cls, settings: Glicko2Settings = DEFAULT_SETTINGS) -> 'RatingState':
        """State of a competitor with no match history."""
        return cls(settings.rating_midpoint, settings.initial_deviation)


@dataclass(frozen=True)
class InternalEstimate:
    """Zero-centred, unit-scaled form of a RatingState."""

    mu: float
    phi: float


def to_internal(state: RatingState, settings: Glicko2Settings = DEFAULT_SETTINGS) -> InternalEstimate:
    """
    Convert from the external scale to the internal scale.

    Args:
        state: Rating and deviation on the external scale
        settings: Supplies the scale factor and rating midpoint

    Returns:
        The equivalent (mu, phi) estimate
    """
    mu = (state.rating - settings.rating_midpoint) / settings.scale
    phi = state.deviation / settings.scale
    return InternalEstimate(mu, phi)


def to_external(estimate: InternalEstimate, settings: Glicko2Settings = DEFAULT_SETTINGS) -> RatingState:
    """Convert from the internal scale back to the external scale."""
    rating = estimate.mu * settings.scale + settings.rating_midpoint
    deviation = estimate.phi * settings.scale
    return RatingState(rating, deviation)
