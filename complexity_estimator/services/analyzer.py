"""Orchestration of the snippet complexity analysis.

Validates the input, detects the language profile, runs the matching
structural scanner and combines its findings into one result. Every failure
is returned as data (``AnalysisResult.error``); nothing is raised to the
caller.
"""

from __future__ import annotations

import logging

from ..domain.growth import CONSTANT, combine
from ..language_detector import detect_language
from ..scanners import get_scanner
from ..schemas import AnalysisResult


logger = logging.getLogger(__name__)

MAX_CODE_LINES = 500

EMPTY_INPUT_ERROR = "Empty code input"
TOO_LARGE_ERROR = f"Code exceeds {MAX_CODE_LINES} lines limit"


def error_result(message: str) -> AnalysisResult:
    """Constant-complexity result carrying an error message."""
    return AnalysisResult(
        input_size="n",
        time_complexity=CONSTANT,
        space_complexity=CONSTANT,
        breakdown=[],
        average_case=CONSTANT,
        error=message,
    )


def analyze(code: str) -> AnalysisResult:
    """Estimates time and space complexity of a snippet.

    Args:
        code: Snippet source in C, Python, Pascal or JavaScript.

    Returns:
        AnalysisResult with the dominant time complexity, the space
        complexity reported by the scanner and the per-construct breakdown.
    """
    if not code.strip():
        return error_result(EMPTY_INPUT_ERROR)

    if len(code.split("\n")) > MAX_CODE_LINES:
        return error_result(TOO_LARGE_ERROR)

    profile = detect_language(code)
    report = get_scanner(profile).scan(code)

    if report.error is not None:
        return error_result(report.error)

    time_complexity = combine(report.time_values)
    logger.debug(
        "Analyzed %s snippet: %d findings, time %s",
        profile.value, len(report.breakdown), time_complexity.upper_bound,
    )

    return AnalysisResult(
        input_size="n",
        time_complexity=time_complexity,
        space_complexity=report.space_complexity,
        breakdown=report.breakdown,
        average_case=time_complexity,
    )
