"""Services layer - Analysis orchestration."""

from .analyzer import MAX_CODE_LINES, analyze, error_result
from .self_check import REFERENCE_SNIPPETS, run_self_check

__all__ = [
    "MAX_CODE_LINES",
    "analyze",
    "error_result",
    "REFERENCE_SNIPPETS",
    "run_self_check",
]
