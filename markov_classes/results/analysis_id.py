"""Analysis ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from markov_classes.config.experiment import AnalysisConfig


def generate_analysis_id(config: AnalysisConfig, n_states: int) -> str:
    """Generate a scannable analysis ID from the graph size and config.

    Format: n{N}_s{start}_k{steps}_{YYYYMMDD}_{HHMMSS}
    Example: n27_s2_k50_20261019_143012

    A uniform start over several states is written as u{count}.
    """
    sim = config.simulation
    start = f"u{len(sim.start_states)}" if sim.start_states else f"s{sim.start_state}"
    ts = datetime.now(timezone.utc)
    return f"n{n_states}_{start}_k{sim.steps}_{ts.strftime('%Y%m%d_%H%M%S')}"
