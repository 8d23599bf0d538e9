"""Analysis configuration dataclasses: all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Input graph location and validity checking."""

    path: str = "data/proba.txt"  # text file: N, then "start end weight" triples
    markov_tolerance: float = 0.01  # allowed deviation of outgoing sums from 1
    strict: bool = False  # raise instead of warn on validity problems


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Step-wise distribution simulation parameters."""

    start_state: int = 1  # point-mass start (1-based)
    start_states: tuple[int, ...] = ()  # uniform start over these, overrides start_state
    steps: int = 50
    report_steps: tuple[int, ...] = (1, 2, 10, 50)  # steps past `steps` are skipped
    tracked_states: tuple[int, ...] = ()  # CSV/figure columns; empty = all states


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Which derived artifacts get written."""

    results_dir: str = "results"
    mermaid: bool = True
    csv: bool = True
    figures: bool = True
    report: bool = True


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Top-level analysis configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations before any file is read.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        sim = self.simulation
        if sim.steps < 0:
            raise ValueError(f"steps must be >= 0, got {sim.steps}")
        if sim.start_state < 1:
            raise ValueError(
                f"start_state must be a 1-based state ID, got {sim.start_state}"
            )
        for step in sim.report_steps:
            if step < 1:
                raise ValueError(f"report steps must be >= 1, got {step}")
        for state in sim.start_states + sim.tracked_states:
            if state < 1:
                raise ValueError(f"state IDs must be >= 1, got {state}")
        if not 0.0 < self.graph.markov_tolerance < 1.0:
            raise ValueError(
                f"markov_tolerance must be in (0, 1), "
                f"got {self.graph.markov_tolerance}"
            )
