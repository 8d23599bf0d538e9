"""Heatmap of the converged power of a persistent class submatrix."""

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from markov_classes.evolution.types import ClassLimit
from markov_classes.visualization.style import LIMIT_CMAP, matrix_figsize


def plot_limit_heatmap(limit: ClassLimit) -> plt.Figure:
    """Render the limit matrix of one class with state IDs on both axes.

    For a converged aperiodic class every row shows the same stationary
    distribution. Non-converged classes show the last power reached.
    """
    matrix = np.asarray(limit.result.matrix)
    labels = [str(v) for v in limit.cls.vertices]
    k = len(labels)

    fig, ax = plt.subplots(figsize=matrix_figsize(k))
    sns.heatmap(
        matrix,
        annot=k <= 12,
        fmt=".3f",
        cmap=LIMIT_CMAP,
        vmin=0.0,
        vmax=1.0,
        xticklabels=labels,
        yticklabels=labels,
        cbar_kws={"label": "Probability"},
        linewidths=0.5,
        linecolor="white",
        ax=ax,
    )
    ax.set_xlabel("To state")
    ax.set_ylabel("From state")
    status = (
        f"converged after {limit.result.steps} steps"
        if limit.result.converged
        else f"not converged after {limit.result.steps} steps (likely periodic)"
    )
    ax.set_title(f"Class {limit.cls.name}: {status}")
    fig.tight_layout()
    return fig
