"""In-memory analysis pipeline: graph -> classes -> links -> matrices -> limits.

analyze_chain() chains every core stage for one graph and returns a
ChainAnalysis holding plain data. Writing artifacts is left to the caller
(see run_analysis.py).
"""

import logging
from dataclasses import dataclass

import numpy as np

from markov_classes.classes import (
    Link,
    Partition,
    classify_classes,
    find_communicating_classes,
    hasse_links,
    is_irreducible,
)
from markov_classes.config.experiment import AnalysisConfig
from markov_classes.evolution import (
    ClassLimit,
    analyze_persistent_classes,
    collect_trajectory,
    simulate_steps,
)
from markov_classes.graph import Graph, check_markov_graph
from markov_classes.matrix import (
    build_transition_matrix,
    initial_distribution,
    uniform_distribution,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChainAnalysis:
    """Everything derived from one graph in one run.

    Uses frozen=True but omits slots=True since it holds numpy arrays.
    """

    graph: Graph
    validation_errors: list[str]
    partition: Partition  # classified
    links: list[Link]
    matrix: np.ndarray  # full n x n transition matrix
    initial: np.ndarray  # 1 x n starting distribution
    trajectory: np.ndarray  # (steps, n); row k-1 is the distribution after k steps
    limits: list[ClassLimit]

    @property
    def irreducible(self) -> bool:
        return is_irreducible(self.partition)

    def distribution_after(self, step: int) -> np.ndarray:
        """Simulated distribution after `step` steps (1-based)."""
        if not 1 <= step <= self.trajectory.shape[0]:
            raise IndexError(
                f"step {step} outside simulated range [1, {self.trajectory.shape[0]}]"
            )
        return self.trajectory[step - 1]


def starting_distribution(n: int, config: AnalysisConfig) -> np.ndarray:
    """Uniform over simulation.start_states if given, else a point mass."""
    sim = config.simulation
    if sim.start_states:
        return uniform_distribution(n, sim.start_states)
    return initial_distribution(n, sim.start_state)


def analyze_chain(graph: Graph, config: AnalysisConfig) -> ChainAnalysis:
    """Run every analysis stage on a loaded graph.

    Args:
        graph: Markov graph.
        config: Analysis configuration (validity check and simulation).

    Returns:
        ChainAnalysis with the classified partition, Hasse links, simulated
        trajectory, and per-persistent-class limits.

    Raises:
        GraphValidationError: If config.graph.strict and the graph is not a
            valid Markov graph.
    """
    errors = check_markov_graph(
        graph, tolerance=config.graph.markov_tolerance, strict=config.graph.strict
    )

    partition = classify_classes(graph, find_communicating_classes(graph))
    log.info("Found %d communicating classes", len(partition))
    if is_irreducible(partition):
        log.info("The Markov graph is irreducible")
    else:
        log.info("The Markov graph is not irreducible")

    links = hasse_links(graph, partition)
    matrix = build_transition_matrix(graph)

    initial = starting_distribution(graph.n, config)
    trajectory = collect_trajectory(
        simulate_steps(initial, matrix, config.simulation.steps), graph.n
    )
    log.info("Simulated %d steps", trajectory.shape[0])

    limits = analyze_persistent_classes(matrix, partition)

    return ChainAnalysis(
        graph=graph,
        validation_errors=errors,
        partition=partition,
        links=links,
        matrix=matrix,
        initial=initial,
        trajectory=trajectory,
        limits=limits,
    )
