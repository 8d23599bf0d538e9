"""Orchestrator: render all figures for a single analysis.

Saves to {output_dir}/figures/ as PNG + SVG.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from markov_classes.pipeline import ChainAnalysis
from markov_classes.visualization.style import apply_style, save_figure

log = logging.getLogger(__name__)


def render_all(
    analysis: ChainAnalysis,
    output_dir: str | Path,
    tracked_states: Sequence[int] | None = None,
) -> list[Path]:
    """Generate all figures for one analysis.

    Each plot type is wrapped in try/except so one failure doesn't block
    the others.

    Args:
        analysis: Result of analyze_chain.
        output_dir: Analysis output directory; figures go in figures/.
        tracked_states: States drawn in the trajectory plot (all if None).

    Returns:
        List of paths to generated figure files.
    """
    apply_style()

    figures_dir = Path(output_dir) / "figures"
    generated_files: list[Path] = []

    try:
        from markov_classes.visualization.trajectory import plot_trajectory

        fig = plot_trajectory(analysis.trajectory, tracked_states)
        generated_files.extend(save_figure(fig, figures_dir, "trajectory"))
        log.info("Generated: trajectory")
    except Exception as e:
        log.warning("Failed to generate trajectory: %s", e)

    for limit in analysis.limits:
        name = f"limit_{limit.cls.name}"
        try:
            from markov_classes.visualization.heatmap import plot_limit_heatmap

            fig = plot_limit_heatmap(limit)
            generated_files.extend(save_figure(fig, figures_dir, name))
            log.info("Generated: %s", name)
        except Exception as e:
            log.warning("Failed to generate %s: %s", name, e)

    return generated_files
