"""PassGauge: password strength evaluation and suggestions."""

from .config import ConfigError, PatternConfig, default_config, load_config, save_config
from .evaluator import StrengthEvaluator, evaluate
from .generator import suggest
from .report import Requirement, StrengthReport
from .score import StrengthLabel, classify

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "PatternConfig",
    "Requirement",
    "StrengthEvaluator",
    "StrengthLabel",
    "StrengthReport",
    "classify",
    "default_config",
    "evaluate",
    "load_config",
    "save_config",
    "suggest",
]
