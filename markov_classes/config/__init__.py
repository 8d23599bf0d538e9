"""Analysis configuration system with frozen, hashable, serializable dataclasses."""

from markov_classes.config.experiment import (
    AnalysisConfig,
    GraphConfig,
    OutputConfig,
    SimulationConfig,
)
from markov_classes.config.defaults import DEFAULT_CONFIG
from markov_classes.config.hashing import config_hash
from markov_classes.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "AnalysisConfig",
    "GraphConfig",
    "OutputConfig",
    "SimulationConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
