"""Plain-text analysis report rendered from a jinja2 template.

Lists classes with their labels, the Hasse links, the simulated
distributions at the configured report steps, and the limit of every
persistent class (or the periodicity warning when it did not converge).
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from markov_classes.config.experiment import AnalysisConfig
from markov_classes.pipeline import ChainAnalysis
from markov_classes.reporting.console import format_matrix

log = logging.getLogger(__name__)

# Template directory relative to this file
_TEMPLATE_DIR = Path(__file__).parent / "templates"


def build_report_context(
    analysis: ChainAnalysis,
    config: AnalysisConfig,
    analysis_id: str = "",
) -> dict[str, Any]:
    """Flatten a ChainAnalysis into template-ready strings and lists."""
    partition = analysis.partition
    report_steps = [
        s for s in config.simulation.report_steps
        if s <= analysis.trajectory.shape[0]
    ]
    return {
        "description": config.description,
        "analysis_id": analysis_id,
        "n_states": analysis.graph.n,
        "n_edges": analysis.graph.n_edges,
        "validation_errors": analysis.validation_errors,
        "classes": [
            {"name": cls.name, "vertices": list(cls.vertices), "label": str(cls.label)}
            for cls in partition
        ],
        "irreducible": analysis.irreducible,
        "links": [
            {
                "source": partition[link.source].name,
                "destination": partition[link.destination].name,
            }
            for link in analysis.links
        ],
        "initial": format_matrix(analysis.initial),
        "simulation_steps": [
            {"n": s, "distribution": format_matrix(analysis.distribution_after(s))}
            for s in report_steps
        ],
        "transient_classes": [
            cls.name for cls in partition if not cls.is_persistent
        ],
        "limits": [
            {
                "name": limit.cls.name,
                "vertices": list(limit.cls.vertices),
                "converged": limit.result.converged,
                "steps": limit.result.steps,
                "difference": limit.result.difference,
                "matrix": format_matrix(limit.result.matrix),
                "distribution": (
                    format_matrix(limit.result.distribution)
                    if limit.result.converged
                    else ""
                ),
            }
            for limit in analysis.limits
        ],
    }


def render_text_report(
    analysis: ChainAnalysis, config: AnalysisConfig, analysis_id: str = ""
) -> str:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    template = env.get_template("report.txt.j2")
    return template.render(**build_report_context(analysis, config, analysis_id))


def generate_text_report(
    analysis: ChainAnalysis,
    config: AnalysisConfig,
    output_path: str | Path,
    analysis_id: str = "",
) -> Path:
    """Render the report and write it to output_path.

    Returns:
        Path to the written report.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_text_report(analysis, config, analysis_id))
    log.info("Report written to %s", output_path)
    return output_path
