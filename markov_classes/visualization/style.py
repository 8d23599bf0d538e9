"""Shared look of the analysis figures.

State colors come from the seaborn colorblind palette and stay fixed per
state, so a state keeps its color across every plot of one run.
"""

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for headless rendering

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

PALETTE = sns.color_palette("colorblind", n_colors=10)
LIMIT_CMAP = "YlGnBu"
FIGURE_FORMATS = ("png", "svg")
SAVE_DPI = 300


def state_color(state: int) -> tuple[float, float, float]:
    """Palette color of a 1-based state, cycling after ten states."""
    return PALETTE[(state - 1) % len(PALETTE)]


def matrix_figsize(k: int) -> tuple[float, float]:
    """Figure size for a k x k heatmap, growing with the class size."""
    return max(4.0, k * 0.6 + 2), max(3.5, k * 0.5 + 1.5)


def apply_style() -> None:
    """Apply the seaborn whitegrid theme and output DPI. Idempotent."""
    sns.set_theme(style="whitegrid", font_scale=0.9)
    plt.rcParams.update({
        "figure.dpi": 150,
        "savefig.dpi": SAVE_DPI,
        "svg.fonttype": "none",
    })


def save_figure(fig: plt.Figure, output_dir: Path, name: str) -> list[Path]:
    """Write a figure once per entry of FIGURE_FORMATS, then close it.

    Returns:
        Written paths, in FIGURE_FORMATS order.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for ext in FIGURE_FORMATS:
        path = output_dir / f"{name}.{ext}"
        fig.savefig(path, dpi=SAVE_DPI if ext == "png" else "figure", bbox_inches="tight")
        paths.append(path)
    plt.close(fig)
    return paths
