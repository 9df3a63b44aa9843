"""
Iterative solver for the size of a rating adjustment.

The adjustment scale is the root of a one-dimensional volatility equation.
A root is bracketed first, then refined with the Illinois variant of the
false-position method.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConvergenceError, NumericInstabilityError
from .settings import Glicko2Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdjustmentResult:
    """
    Solver output on the internal scale.

    Attributes:
        mu: Updated internal rating
        phi: Refined internal deviation used to scale the update
        iterations: Refinement steps taken to converge
    """

    mu: float
    phi: float
    iterations: int


def _check_finite(quantity: str, value: float) -> float:
    if not math.isfinite(value):
        logger.warning(f"Non-finite {quantity} in rating adjustment: {value!r}")
        raise NumericInstabilityError(f"{quantity} is not finite ({value!r})", quantity)
    return value


def log_variance_anchor(phi: float) -> float:
    """
    Compute a = ln(phi^2), the point the volatility equation is anchored at.

    Raises:
        NumericInstabilityError: If phi^2 underflows to zero
    """
    phi_sq = phi * phi
    if phi_sq <= 0:
        logger.warning(f"Deviation {phi!r} underflows when squared")
        raise NumericInstabilityError(f"phi^2 underflowed for phi={phi!r}", "phi")
    return math.log(phi_sq)


def estimated_variance(impact: float, expected: float) -> float:
    """
    Compute the estimated variance of the outcome, v = 1 / (g^2 E (1 - E)).

    Raises:
        NumericInstabilityError: If the expectation has saturated to 0 or 1
    """
    denominator = impact * impact * expected * (1.0 - expected)
    if denominator <= 0 or not math.isfinite(denominator):
        logger.warning(f"Expected score saturated at {expected!r}; variance is undefined")
        raise NumericInstabilityError(
            f"outcome variance is undefined for expected score {expected!r}", "variance")
    return _check_finite("variance", 1.0 / denominator)


def objective(x: float, delta: float, phi: float, v: float, a: float, tau: float) -> float:
    """
    Volatility equation whose root gives the adjustment scale.

    f(x) = e^x (delta^2 - phi^2 - v - e^x) / (2 (phi^2 + v + e^x)^2) - (x - a) / tau^2
    """
    try:
        exp_x = math.exp(x)
    except OverflowError as e:
        logger.warning(f"exp overflow evaluating volatility equation at x={x!r}")
        raise NumericInstabilityError(f"exp({x!r}) overflowed", "objective") from e

    phi_sq = phi * phi
    denominator = phi_sq + v + exp_x
    value = (exp_x * (delta * delta - phi_sq - v - exp_x) / (2.0 * denominator * denominator)
             - (x - a) / (tau * tau))
    return _check_finite("objective", value)


def bracket_root(delta: float, phi: float, v: float,
                 settings: Glicko2Settings = DEFAULT_SETTINGS,
                 a: Optional[float] = None) -> Tuple[float, float]:
    """
    Find an interval (A, B) that contains the root of the volatility equation.

    Args:
        delta: Estimated improvement
        phi: Internal deviation of the subject
        v: Estimated outcome variance
        settings: Supplies tau and the iteration cap
        a: Precomputed ln(phi^2), if the caller already has it

    Returns:
        The initial bracket (A, B)

    Raises:
        ConvergenceError: If no sign change is found within max_iterations steps
    """
    if a is None:
        a = log_variance_anchor(phi)
    tau = settings.tau
    excess = delta * delta - phi * phi - v

    if excess > 0:
        logger.debug(f"Bracketing from log excess variance {excess:.6g}")
        return a, math.log(excess)

    k = 1
    while objective(a - k * tau, delta, phi, v, a, tau) < 0:
        if k >= settings.max_iterations:
            logger.warning(f"No sign change after {k} bracketing steps")
            raise ConvergenceError(
                f"could not bracket a root within {k} steps", stage="bracket", iterations=k)
        k += 1

    logger.debug(f"Bracketed root after {k} step(s)")
    return a, a - k * tau


def illinois(delta: float, phi: float, v: float, bracket: Tuple[float, float],
             settings: Glicko2Settings = DEFAULT_SETTINGS,
             a: Optional[float] = None) -> Tuple[float, int]:
    """
    Narrow a bracket onto the root with the Illinois false-position method.

    Args:
        delta: Estimated improvement
        phi: Internal deviation of the subject
        v: Estimated outcome variance
        bracket: Starting (A, B) from bracket_root
        settings: Supplies tau, epsilon and the iteration cap
        a: Precomputed ln(phi^2), if the caller already has it

    Returns:
        Tuple of (converged A, iterations taken)

    Raises:
        ConvergenceError: If |B - A| is still above epsilon after max_iterations steps
    """
    if a is None:
        a = log_variance_anchor(phi)
    tau = settings.tau
    A, B = bracket
    f_A = objective(A, delta, phi, v, a, tau)
    f_B = objective(B, delta, phi, v, a, tau)

    iterations = 0
    while abs(B - A) > settings.epsilon:
        if iterations >= settings.max_iterations:
            logger.warning(f"Illinois refinement stalled at A={A!r}, B={B!r}")
            raise ConvergenceError(
                f"root refinement did not converge within {iterations} iterations",
                stage="refine", iterations=iterations, bracket=(A, B))

        C = A + (A - B) * f_A / (f_B - f_A)
        f_C = objective(C, delta, phi, v, a, tau)
        iterations += 1

        if f_C == 0:
            return C, iterations

        if f_C * f_B < 0:
            A = B
            f_A = f_B
        else:
            # Illinois correction
            f_A /= 2.0

        B = C
        f_B = f_C

    return A, iterations


def adjust(mu: float, phi: float, impact: float, expected: float, outcome: float,
           settings: Glicko2Settings = DEFAULT_SETTINGS) -> AdjustmentResult:
    """
    Compute the updated internal rating for one competitor.

    Args:
        mu: Internal rating of the subject
        phi: Internal deviation of the subject
        impact: Opponent down-weight (g)
        expected: Expected score of the subject
        outcome: Actual score of the subject (1 for win, 0.5 for draw, 0 for loss)
        settings: System constants

    Returns:
        AdjustmentResult with the new mu and the refined phi
    """
    v = estimated_variance(impact, expected)
    delta = _check_finite("delta", v * impact * (outcome - expected))
    _check_finite("delta squared", delta * delta)

    a = log_variance_anchor(phi)
    bracket = bracket_root(delta, phi, v, settings, a=a)
    root, iterations = illinois(delta, phi, v, bracket, settings, a=a)
    logger.debug(f"Volatility root {root:.6g} after {iterations} iteration(s)")

    new_phi = _check_finite("phi", math.exp(root / 2.0))
    new_mu = _check_finite("mu", mu + new_phi * new_phi * impact * (outcome - expected))
    return AdjustmentResult(new_mu, new_phi, iterations)
