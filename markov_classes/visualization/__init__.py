"""Static figures: simulated trajectories and per-class limit heatmaps."""

from markov_classes.visualization.render import render_all
from markov_classes.visualization.style import apply_style, save_figure

__all__ = [
    "render_all",
    "apply_style",
    "save_figure",
]
