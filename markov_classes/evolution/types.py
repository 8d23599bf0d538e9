"""Result containers for the stationary-distribution search."""

from dataclasses import dataclass

import numpy as np

from markov_classes.classes.types import CommunicatingClass


@dataclass(frozen=True)
class StationaryResult:
    """Outcome of powering a class submatrix until successive powers agree.

    Uses frozen=True but omits slots=True since it holds a numpy array.
    """

    converged: bool
    steps: int  # multiplications performed
    difference: float  # L1 difference between the last two iterates
    matrix: np.ndarray  # last iterate P^(steps + 1)

    @property
    def likely_periodic(self) -> bool:
        """Non-convergence within the budget is read as periodicity.

        This is a heuristic, not a proof: a slowly mixing aperiodic class
        also lands here.
        """
        return not self.converged

    @property
    def distribution(self) -> np.ndarray | None:
        """Stationary row (first row of the limit), or None if not converged."""
        if not self.converged:
            return None
        return self.matrix[0].copy()


@dataclass(frozen=True)
class ClassLimit:
    """Limiting behavior of one persistent class."""

    cls: CommunicatingClass
    result: StationaryResult
