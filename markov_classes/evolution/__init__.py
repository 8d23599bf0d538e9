"""Chain evolution: distribution simulation and stationary-limit search."""

from markov_classes.evolution.simulate import (
    collect_trajectory,
    distribution_at,
    simulate_steps,
)
from markov_classes.evolution.stationary import (
    MAX_STATIONARY_STEPS,
    STATIONARY_TOLERANCE,
    analyze_persistent_classes,
    compute_stationary,
)
from markov_classes.evolution.types import ClassLimit, StationaryResult

__all__ = [
    "ClassLimit",
    "MAX_STATIONARY_STEPS",
    "STATIONARY_TOLERANCE",
    "StationaryResult",
    "analyze_persistent_classes",
    "collect_trajectory",
    "compute_stationary",
    "distribution_at",
    "simulate_steps",
]
