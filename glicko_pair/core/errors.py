"""
Exceptions raised by the Glicko-2 rating computation.
"""

from typing import Optional, Tuple


class Glicko2Error(Exception):
    """Base exception for the rating computation."""
    pass


class InvalidArgumentError(Glicko2Error, ValueError):
    """Raised when a rating, deviation, outcome or setting is out of domain."""
    pass


class ConvergenceError(Glicko2Error, ArithmeticError):
    """
    Raised when a root-finding loop hits its iteration cap.

    Attributes:
        stage: Which loop gave up ("bracket" or "refine")
        iterations: Number of iterations performed
        bracket: Last (A, B) pair, if one was established
    """

    def __init__(self, message: str, stage: str, iterations: int,
                 bracket: Optional[Tuple[float, float]] = None):
        super().__init__(message)
        self.stage = stage
        self.iterations = iterations
        self.bracket = bracket


class NumericInstabilityError(Glicko2Error, ArithmeticError):
    """Raised when an intermediate value overflows or turns non-finite."""

    def __init__(self, message: str, quantity: str):
        super().__init__(message)
        self.quantity = quantity
