"""Result schema building, validation, and writing.

Uses a Python validation function (not jsonschema) to check required fields,
types, and cross-field consistency before writing result.json files.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from markov_classes.config.experiment import AnalysisConfig
from markov_classes.config.hashing import config_hash
from markov_classes.pipeline import ChainAnalysis

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "analysis_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "config_hash",
    "graph",
    "classes",
    "links",
    "simulation",
    "stationary",
}

_LABELS = {"transient", "persistent", "absorbing"}


def build_result(
    analysis: ChainAnalysis, config: AnalysisConfig, analysis_id: str
) -> dict[str, Any]:
    """Assemble the JSON-serializable result dict for one analysis."""
    partition = analysis.partition
    return {
        "schema_version": SCHEMA_VERSION,
        "analysis_id": analysis_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "config_hash": config_hash(config),
        "graph": {
            "n": analysis.graph.n,
            "n_edges": analysis.graph.n_edges,
            "is_markov": not analysis.validation_errors,
            "validation_errors": list(analysis.validation_errors),
        },
        "classes": [
            {
                "index": cls.index,
                "name": cls.name,
                "vertices": list(cls.vertices),
                "label": str(cls.label),
            }
            for cls in partition
        ],
        "irreducible": analysis.irreducible,
        "links": [[link.source, link.destination] for link in analysis.links],
        "simulation": {
            "initial": analysis.initial[0].tolist(),
            "steps": int(analysis.trajectory.shape[0]),
            "final": (
                analysis.trajectory[-1].tolist()
                if analysis.trajectory.shape[0]
                else analysis.initial[0].tolist()
            ),
        },
        "stationary": [
            {
                "class_index": limit.cls.index,
                "converged": limit.result.converged,
                "likely_periodic": limit.result.likely_periodic,
                "steps": limit.result.steps,
                "difference": limit.result.difference,
                "distribution": (
                    limit.result.distribution.tolist()
                    if limit.result.converged
                    else None
                ),
            }
            for limit in analysis.limits
        ],
    }


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.

    Checks:
    - All required top-level fields are present
    - timestamp is ISO 8601
    - Classes cover vertices 1..n exactly once with known labels
    - Links reference existing classes and never loop
    - Stationary entries reference persistent classes
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")
        return errors

    if not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")
    if not isinstance(result["tags"], list):
        errors.append("tags must be a list")
    if not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    ts = result["timestamp"]
    if not isinstance(ts, str):
        errors.append("timestamp must be a string")
    else:
        try:
            datetime.fromisoformat(ts)
        except ValueError:
            errors.append("timestamp must be in ISO 8601 format")

    n = result["graph"].get("n") if isinstance(result["graph"], dict) else None
    classes = result["classes"]
    if not isinstance(n, int):
        errors.append("graph.n must be an int")
    elif isinstance(classes, list):
        seen = [v for cls in classes for v in cls.get("vertices", [])]
        if sorted(seen) != list(range(1, n + 1)):
            errors.append("classes must cover vertices 1..n exactly once")
        for cls in classes:
            if cls.get("label") not in _LABELS:
                errors.append(
                    f"class {cls.get('name')} has unknown label {cls.get('label')!r}"
                )
    else:
        errors.append("classes must be a list")

    n_classes = len(classes) if isinstance(classes, list) else 0
    for link in result["links"]:
        if (
            not isinstance(link, list)
            or len(link) != 2
            or not all(isinstance(c, int) and 0 <= c < n_classes for c in link)
        ):
            errors.append(f"link {link!r} does not reference two classes")
        elif link[0] == link[1]:
            errors.append(f"link {link!r} is a self-loop")

    persistent = {
        cls.get("index")
        for cls in (classes if isinstance(classes, list) else [])
        if cls.get("label") in ("persistent", "absorbing")
    }
    for entry in result["stationary"]:
        if entry.get("class_index") not in persistent:
            errors.append(
                f"stationary entry for class {entry.get('class_index')} "
                "is not a persistent class"
            )
        if entry.get("converged") and entry.get("distribution") is None:
            errors.append(
                f"converged class {entry.get('class_index')} has no distribution"
            )

    return errors


def write_result(result: dict[str, Any], output_dir: str | Path) -> Path:
    """Validate and write result.json.

    Raises:
        ValueError: If the result fails validation.
    """
    errors = validate_result(result)
    if errors:
        raise ValueError(f"Invalid result: {'; '.join(errors)}")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / "result.json"
    with open(path, "w") as f:
        json.dump(result, f, indent=2)
    return path


def load_result(path: str | Path) -> dict[str, Any]:
    with open(path) as f:
        return json.load(f)
