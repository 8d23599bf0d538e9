"""CSV export of simulated distribution trajectories."""

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

log = logging.getLogger(__name__)


def export_trajectory_csv(
    trajectory: np.ndarray,
    path: str | Path,
    states: Sequence[int] | None = None,
) -> Path:
    """Write a trajectory as CSV keyed by step number.

    Columns are "Step" followed by "State<i>" for each requested 1-based
    state (all states when states is None or empty). Row k holds the
    distribution after k steps, starting at 1.

    Args:
        trajectory: (steps, n) array from collect_trajectory.
        path: Output CSV path. Parent directories are created.
        states: Optional subset of states to export.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    n_steps = trajectory.shape[0]
    n_states = trajectory.shape[1] if trajectory.ndim == 2 else 0
    columns = list(states) if states else list(range(1, n_states + 1))
    for state in columns:
        if not 1 <= state <= n_states:
            raise ValueError(f"tracked state {state} outside [1, {n_states}]")

    header = ",".join(["Step"] + [f"State{s}" for s in columns])
    table = np.zeros((n_steps, len(columns) + 1), dtype=np.float64)
    table[:, 0] = np.arange(1, n_steps + 1)
    for col, state in enumerate(columns, start=1):
        table[:, col] = trajectory[:, state - 1]
    fmt = ["%d"] + ["%f"] * len(columns)
    np.savetxt(path, table, delimiter=",", header=header, comments="", fmt=fmt)

    log.info(
        "Trajectory (%d steps, %d states) written to %s",
        n_steps,
        len(columns),
        path,
    )
    return path
