"""
Expected-outcome model.
"""

import math


def reduce_impact(phi: float) -> float:
    """
    Compute the g function, which discounts a rating difference by uncertainty.

    g(phi) = 1 / sqrt(1 + 3 phi^2 / pi^2)

    Args:
        phi: Internal-scale deviation of the opponent

    Returns:
        A weight in (0, 1]; larger phi gives a smaller weight
    """
    return 1.0 / math.sqrt(1.0 + 3.0 * phi * phi / (math.pi * math.pi))


def expected_score(mu: float, mu_opponent: float, impact: float) -> float:
    """
    Calculate the probability that the subject outscores the opponent.

    E = 1 / (1 + exp(-g (mu - mu_opponent)))

    Args:
        mu: Internal-scale rating of the subject
        mu_opponent: Internal-scale rating of the opponent
        impact: Opponent down-weight from reduce_impact

    Returns:
        Expected score for the subject (between 0 and 1)
    """
    z = impact * (mu - mu_opponent)
    # Branch on the sign so exp never sees a large positive argument
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    exp_z = math.exp(z)
    return exp_z / (1.0 + exp_z)
