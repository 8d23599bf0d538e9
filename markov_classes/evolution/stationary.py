"""Limiting behavior of persistent classes by repeated matrix powering.

P_0 = P and P_{t+1} = P_t @ P. The search stops once the L1 difference
between successive powers drops to STATIONARY_TOLERANCE. For an aperiodic
closed class every row of the limit approximates the stationary
distribution. Running out of MAX_STATIONARY_STEPS is reported as "likely
periodic"; no cycle-length gcd is computed.
"""

import logging

import numpy as np

from markov_classes.classes.types import Partition
from markov_classes.evolution.types import ClassLimit, StationaryResult
from markov_classes.matrix.ops import l1_difference, multiply
from markov_classes.matrix.transition import extract_submatrix

log = logging.getLogger(__name__)

STATIONARY_TOLERANCE = 1e-5
MAX_STATIONARY_STEPS = 1000


def compute_stationary(submatrix: np.ndarray) -> StationaryResult:
    """Power a square matrix until successive iterates stop changing.

    Args:
        submatrix: k x k transition matrix of a closed class.

    Returns:
        StationaryResult; converged is False when the step budget ran out.
    """
    P = np.asarray(submatrix, dtype=np.float64)
    current = P
    diff = float("inf")
    step = 0
    while diff > STATIONARY_TOLERANCE and step < MAX_STATIONARY_STEPS:
        nxt = multiply(current, P)
        diff = l1_difference(current, nxt)
        current = nxt
        step += 1

    converged = diff <= STATIONARY_TOLERANCE
    return StationaryResult(
        converged=converged, steps=step, difference=diff, matrix=current
    )


def analyze_persistent_classes(
    matrix: np.ndarray, partition: Partition
) -> list[ClassLimit]:
    """Run compute_stationary on the submatrix of every persistent class.

    Transient classes are skipped: their limiting probability is 0.

    Args:
        matrix: Full n x n transition matrix.
        partition: Classified partition.

    Returns:
        One ClassLimit per persistent class, in partition order.
    """
    limits: list[ClassLimit] = []
    for cls in partition.persistent_classes():
        result = compute_stationary(extract_submatrix(matrix, cls))
        if result.converged:
            log.info("Class %s converged after %d steps", cls.name, result.steps)
        else:
            log.info(
                "Class %s did not converge after %d steps (L1 diff %.3g); "
                "likely periodic",
                cls.name,
                result.steps,
                result.difference,
            )
        limits.append(ClassLimit(cls=cls, result=result))
    return limits
