"""
passmeter - password strength classification for live strength meters.
"""

from .config import ColorTable, CustomRuleChain, CustomStage, MessageTable, MeterOptions, load_options
from .errors import ClipboardError, ConfigurationError, PassmeterError, RuleChainError
from .meter import MeterState, build_state
from .password_checker import ClassificationResult, PasswordChecker, classify
from .rules import Category

__version__ = "1.0.0"

__all__ = [
    "Category",
    "ClassificationResult",
    "ClipboardError",
    "ColorTable",
    "ConfigurationError",
    "CustomRuleChain",
    "CustomStage",
    "MessageTable",
    "MeterOptions",
    "MeterState",
    "PasswordChecker",
    "PassmeterError",
    "RuleChainError",
    "build_state",
    "classify",
    "load_options",
]
