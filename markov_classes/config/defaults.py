"""Default configuration: single source of truth for analysis parameters."""

from markov_classes.config.experiment import AnalysisConfig

# All-default values: graph at data/proba.txt, 50 simulated steps from
# state 1, every artifact enabled.
DEFAULT_CONFIG = AnalysisConfig()
