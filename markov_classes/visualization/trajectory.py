"""Line plot of simulated state probabilities over time."""

from collections.abc import Sequence

import matplotlib.pyplot as plt
import numpy as np

from markov_classes.visualization.style import state_color


def plot_trajectory(
    trajectory: np.ndarray,
    states: Sequence[int] | None = None,
    title: str = "State probabilities over time",
) -> plt.Figure:
    """Plot P(X_k = s) against step k for each requested state.

    Args:
        trajectory: (steps, n) array; row k-1 is the distribution after k steps.
        states: 1-based states to draw; all states when None or empty.
        title: Axes title.

    Returns:
        The matplotlib Figure.
    """
    fig, ax = plt.subplots()
    n_steps, n_states = trajectory.shape
    if n_steps == 0:
        ax.text(
            0.5, 0.5, "No simulated steps",
            transform=ax.transAxes, ha="center", va="center",
            fontsize=12, color="gray",
        )
        ax.set_title(title)
        return fig

    steps = np.arange(1, n_steps + 1)
    columns = list(states) if states else list(range(1, n_states + 1))
    for state in columns:
        ax.plot(
            steps,
            trajectory[:, state - 1],
            label=f"State {state}",
            color=state_color(state),
            linewidth=1.5,
        )

    ax.set_xlabel("Step n")
    ax.set_ylabel("Probability")
    ax.set_ylim(-0.02, 1.02)
    ax.set_title(title)
    if len(columns) <= 12:
        ax.legend(loc="best")
    fig.tight_layout()
    return fig
