"""
Two-competitor Glicko-2 rating update.
"""

import enum
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Tuple

from .core.errors import InvalidArgumentError
from .core.expectation import expected_score, reduce_impact
from .core.scale import InternalEstimate, RatingState, to_external, to_internal
from .core.settings import Glicko2Settings, DEFAULT_SETTINGS
from .core.solver import adjust

logger = logging.getLogger(__name__)

WIN = 1.0
DRAW = 0.5
LOSS = 0.0

VALID_OUTCOMES = (LOSS, DRAW, WIN)


class OpponentModel(enum.Enum):
    """
    How each competitor's opponent is presented to the solver.

    TRUE_OPPONENT rates each competitor against the other's actual rating
    and deviation.

    SELF_REFERENCE reproduces the legacy calculation: competitor A is rated
    against B's rating but discounted by A's own deviation, and competitor B
    is rated against its own rating and deviation, so A has no influence on
    B's new rating.
    """

    TRUE_OPPONENT = "true_opponent"
    SELF_REFERENCE = "self_reference"


@dataclass(frozen=True)
class UpdateResult:
    """New ratings and deviations for both competitors after one match."""

    new_rating_a: float
    new_rating_b: float
    new_deviation_a: float
    new_deviation_b: float

    @property
    def ratings(self) -> Tuple[float, float]:
        """The (new_rating_a, new_rating_b) pair, without deviations."""
        return self.new_rating_a, self.new_rating_b

    @property
    def state_a(self) -> RatingState:
        return RatingState(self.new_rating_a, self.new_deviation_a)

    @property
    def state_b(self) -> RatingState:
        return RatingState(self.new_rating_b, self.new_deviation_b)


def complement_outcome(outcome: float) -> float:
    """
    Get the opposing competitor's outcome.

    Args:
        outcome: Outcome of the subject (1 for win, 0.5 for draw, 0 for loss)

    Returns:
        1.0 for a loss, 0.0 for a win and 0.5 for anything else
    """
    if outcome == LOSS:
        return WIN
    if outcome == WIN:
        return LOSS
    return DRAW


def validate_state(name: str, state: RatingState) -> None:
    """
    Check that a rating is finite and its deviation positive and finite.

    Raises:
        InvalidArgumentError: Naming the offending competitor and field
    """
    for field, value in (("rating", state.rating), ("deviation", state.deviation)):
        if not isinstance(value, numbers.Real) or isinstance(value, bool):
            raise InvalidArgumentError(f"{name} {field} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidArgumentError(f"{name} {field} must be finite, got {value!r}")
    if state.deviation <= 0:
        raise InvalidArgumentError(f"{name} deviation must be positive, got {state.deviation!r}")


def validate_outcome(outcome: float) -> None:
    """Check that an outcome is one of 0.0, 0.5 or 1.0."""
    if isinstance(outcome, bool) or outcome not in VALID_OUTCOMES:
        raise InvalidArgumentError(
            f"outcome must be one of {VALID_OUTCOMES}, got {outcome!r}")


def _rate(subject: InternalEstimate, mu_opponent: float, phi_opponent: float,
          outcome: float, settings: Glicko2Settings) -> RatingState:
    impact = reduce_impact(phi_opponent)
    expected = expected_score(subject.mu, mu_opponent, impact)
    result = adjust(subject.mu, subject.phi, impact, expected, outcome, settings)
    new_state = to_external(InternalEstimate(result.mu, result.phi), settings)
    return RatingState(new_state.rating, settings.clamp_deviation(new_state.deviation))


def rate_against(subject: RatingState, opponent: RatingState, outcome: float,
                 settings: Glicko2Settings = DEFAULT_SETTINGS) -> RatingState:
    """
    Update one competitor's rating after a match against an opponent.

    Args:
        subject: Rating state of the competitor being updated
        opponent: Rating state of the opponent
        outcome: Subject's result (1 for win, 0.5 for draw, 0 for loss)
        settings: System constants

    Returns:
        The subject's new rating state
    """
    validate_state("subject", subject)
    validate_state("opponent", opponent)
    validate_outcome(outcome)

    estimate = to_internal(subject, settings)
    opponent_estimate = to_internal(opponent, settings)
    return _rate(estimate, opponent_estimate.mu, opponent_estimate.phi, outcome, settings)


class Glicko2Calculator:
    """
    Calculates new ratings for both competitors of a single match.
    """

    def __init__(self, settings: Glicko2Settings = DEFAULT_SETTINGS,
                 opponent_model: OpponentModel = OpponentModel.TRUE_OPPONENT):
        """
        Initialize the calculator.

        Args:
            settings: System constants
            opponent_model: Whether to rate against the true opponent or
                reproduce the legacy self-referential calculation
        """
        if not isinstance(opponent_model, OpponentModel):
            raise InvalidArgumentError(f"unknown opponent model {opponent_model!r}")
        self.settings = settings
        self.opponent_model = opponent_model

    def update(self, rating_a: float, rating_b: float, deviation_a: float,
               deviation_b: float, outcome_a: float) -> UpdateResult:
        """
        Calculate new ratings after a match between A and B.

        Args:
            rating_a: Player A rating before the match
            rating_b: Player B rating before the match
            deviation_a: Player A rating deviation (around 350 for a newcomer)
            deviation_b: Player B rating deviation (around 350 for a newcomer)
            outcome_a: Player A's result (1 for win, 0.5 for draw, 0 for loss)

        Returns:
            UpdateResult with both new ratings and deviations
        """
        return self.rate_match(RatingState(rating_a, deviation_a),
                               RatingState(rating_b, deviation_b), outcome_a)

    def rate_match(self, state_a: RatingState, state_b: RatingState,
                   outcome_a: float) -> UpdateResult:
        """
        Calculate new rating states after a match between A and B.

        Args:
            state_a: Player A rating state before the match
            state_b: Player B rating state before the match
            outcome_a: Player A's result (1 for win, 0.5 for draw, 0 for loss)

        Returns:
            UpdateResult with both new ratings and deviations
        """
        validate_state("competitor A", state_a)
        validate_state("competitor B", state_b)
        validate_outcome(outcome_a)

        settings = self.settings
        outcome_b = complement_outcome(outcome_a)
        a = to_internal(state_a, settings)
        b = to_internal(state_b, settings)

        if self.opponent_model is OpponentModel.SELF_REFERENCE:
            new_a = _rate(a, b.mu, a.phi, outcome_a, settings)
            new_b = _rate(b, b.mu, b.phi, outcome_b, settings)
        else:
            new_a = _rate(a, b.mu, b.phi, outcome_a, settings)
            new_b = _rate(b, a.mu, a.phi, outcome_b, settings)

        logger.debug(
            f"Match ({self.opponent_model.value}) outcome {outcome_a}: "
            f"A {state_a.rating:.2f} -> {new_a.rating:.2f}, "
            f"B {state_b.rating:.2f} -> {new_b.rating:.2f}")

        return UpdateResult(new_a.rating, new_b.rating, new_a.deviation, new_b.deviation)


def update_ratings(rating_a: float, rating_b: float, deviation_a: float, deviation_b: float,
                   outcome_a: float, settings: Glicko2Settings = DEFAULT_SETTINGS,
                   opponent_model: OpponentModel = OpponentModel.TRUE_OPPONENT) -> UpdateResult:
    """
    Calculate new ratings and deviations after a match between A and B.

    See Glicko2Calculator.update for the arguments.
    """
    calculator = Glicko2Calculator(settings=settings, opponent_model=opponent_model)
    return calculator.update(rating_a, rating_b, deviation_a, deviation_b, outcome_a)


def calculate_new_ratings(rating_a: float, rating_b: float, deviation_a: float, deviation_b: float,
                          outcome_a: float, settings: Glicko2Settings = DEFAULT_SETTINGS,
                          opponent_model: OpponentModel = OpponentModel.TRUE_OPPONENT
                          ) -> Tuple[float, float]:
    """
    Calculate only the new ratings after a match between A and B.

    Returns:
        A tuple of the new ratings (rating_a, rating_b)
    """
    return update_ratings(rating_a, rating_b, deviation_a, deviation_b, outcome_a,
                          settings=settings, opponent_model=opponent_model).ratings
