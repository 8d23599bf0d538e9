"""Machine-readable analysis results: IDs, schema validation, and result.json."""

from markov_classes.results.analysis_id import generate_analysis_id
from markov_classes.results.schema import (
    SCHEMA_VERSION,
    build_result,
    load_result,
    validate_result,
    write_result,
)

__all__ = [
    "SCHEMA_VERSION",
    "build_result",
    "generate_analysis_id",
    "load_result",
    "validate_result",
    "write_result",
]
