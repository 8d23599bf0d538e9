#!/usr/bin/env python3
"""Entry point for analyzing a Markov chain graph.

Chains all stages into a single executable command:
graph loading -> validity check -> communicating classes -> Hasse links ->
simulation -> stationary limits -> diagrams, CSV, figures, report.

Usage:
    python run_analysis.py --config config.json
    python run_analysis.py --config config.json --graph data/proba.txt
    python run_analysis.py --graph data/proba.txt --dry-run
    python run_analysis.py --config config.json --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from markov_classes.config import (
    DEFAULT_CONFIG,
    AnalysisConfig,
    config_from_json,
    config_hash,
    config_to_json,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.2f}s")
    log.info("Completed: %s in %.2fs", name, elapsed)


def load_config(config_path: Path | None, graph_path: str | None) -> AnalysisConfig:
    """Load a config file (or the defaults) and apply the --graph override."""
    config = DEFAULT_CONFIG
    if config_path is not None:
        config = config_from_json(config_path.read_text())
    if graph_path is not None:
        config = replace(config, graph=replace(config.graph, path=graph_path))
    return config


def run_pipeline(config: AnalysisConfig) -> Path:
    """Execute the full analysis and write every enabled artifact.

    Args:
        config: Analysis configuration.

    Returns:
        Path to the output directory.
    """
    # Lazy imports to keep --dry-run fast
    from markov_classes.graph import load_graph
    from markov_classes.pipeline import analyze_chain
    from markov_classes.reporting import (
        export_trajectory_csv,
        format_matrix,
        generate_text_report,
        graph_to_mermaid,
        hasse_to_mermaid,
        write_mermaid,
    )
    from markov_classes.results import build_result, generate_analysis_id, write_result

    pipeline_start = time.monotonic()
    output = config.output
    tracked = config.simulation.tracked_states or None

    with stage_timer("Loading Graph"):
        graph = load_graph(config.graph.path)
    for state in config.simulation.tracked_states:
        if state > graph.n:
            raise ValueError(
                f"tracked state {state} outside [1, {graph.n}] of {config.graph.path}"
            )

    analysis_id = generate_analysis_id(config, graph.n)
    output_dir = Path(output.results_dir) / analysis_id
    output_dir.mkdir(parents=True, exist_ok=True)
    log.info("Output directory: %s", output_dir)
    (output_dir / "config.json").write_text(config_to_json(config))

    with stage_timer("Analysis"):
        analysis = analyze_chain(graph, config)
        print(f"Found {len(analysis.partition)} communicating classes.")
        for cls in analysis.partition:
            print(f"Class {cls.name} {list(cls.vertices)} is {cls.label}")
        for limit in analysis.limits:
            if limit.result.converged:
                print(f"Class {limit.cls.name}: converged after "
                      f"{limit.result.steps} steps")
                print(format_matrix(limit.result.distribution))
            else:
                print(f"Class {limit.cls.name}: did not converge after "
                      f"{limit.result.steps} steps, likely periodic")

    if output.mermaid:
        with stage_timer("Mermaid Diagrams"):
            write_mermaid(graph_to_mermaid(graph), output_dir / "mermaid_graph.txt")
            write_mermaid(
                hasse_to_mermaid(analysis.partition, analysis.links),
                output_dir / "mermaid_hasse.txt",
            )

    if output.csv:
        with stage_timer("Trajectory Export"):
            export_trajectory_csv(
                analysis.trajectory, output_dir / "trajectory.csv", tracked
            )

    with stage_timer("Result JSON"):
        result = build_result(analysis, config, analysis_id)
        write_result(result, output_dir)

    figures: list[Path] = []
    if output.figures:
        with stage_timer("Figures"):
            from markov_classes.visualization import render_all

            figures = render_all(analysis, output_dir, tracked)
            log.info("Generated %d figure files", len(figures))

    if output.report:
        with stage_timer("Report"):
            generate_text_report(
                analysis, config, output_dir / "report.txt", analysis_id
            )

    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Analysis complete in {total_elapsed:.2f}s")
    print(f"  Analysis:    {analysis_id}")
    print(f"  Output:      {output_dir}")
    print(f"  Classes:     {len(analysis.partition)} "
          f"({'irreducible' if analysis.irreducible else 'reducible'})")
    print(f"  Hasse links: {len(analysis.links)}")
    print(f"  Figures:     {len(figures)} files")
    print(f"{'=' * 60}")

    return output_dir


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Analyze the communicating classes of a Markov chain"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to analysis config JSON file (defaults apply if omitted)",
    )
    parser.add_argument(
        "--graph",
        type=str,
        default=None,
        help="Path to the graph description, overrides graph.path",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the analysis plan without reading the graph",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(config_path, args.graph)
    except Exception:
        log.exception("Invalid configuration")
        sys.exit(1)

    sim = config.simulation
    start = (f"uniform over {list(sim.start_states)}" if sim.start_states
             else f"state {sim.start_state}")
    print(f"Config hash: {config_hash(config)}")
    print(f"Graph:       {config.graph.path} "
          f"(tolerance={config.graph.markov_tolerance}, strict={config.graph.strict})")
    print(f"Simulation:  {sim.steps} steps from {start}")

    if args.dry_run:
        print("\nAnalysis plan:")
        print(f"  1. Load graph: {config.graph.path}")
        print("  2. Markov validity check")
        print("  3. Communicating classes (Tarjan) + classification")
        print("  4. Hasse links of the class graph")
        shown = [s for s in sim.report_steps if s <= sim.steps]
        print(f"  5. Simulation: {sim.steps} steps, report at {shown}")
        print("  6. Stationary limits of persistent classes")
        print(f"\nOutput: {config.output.results_dir}/<analysis_id>/")
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_pipeline(config)
    except Exception:
        log.exception("Analysis failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
