"""
Regex scanner for Pascal-like snippets (case-insensitive).
"""

import re

from ..domain.growth import classify
from ..domain.recurrence import ExtraWork, RecurrenceParameters, solve
from .base import ScanReport, StructuralScanner


_FOR_RE = re.compile(r"for\s+\w+\s*:=\s*[^;]+to[^;]+do", re.IGNORECASE)
_FUNCTION_RE = re.compile(r"function\s+(\w+)\s*\([^)]*\)\s*:\s*\w+", re.IGNORECASE)


def infer_recurrence(code: str, name: str) -> RecurrenceParameters:
    """
    Recurrence parameters of function ``name``.

    ``name(n div 2)`` gives the reduction factor and each call outside the
    ``function`` header counts as one branch; otherwise 1 / 1 / O(1).
    """
    escaped = re.escape(name)
    division = re.search(rf"\b{escaped}\s*\([^)]*div\s*(\d+)\)", code, re.IGNORECASE)
    if division is None:
        return RecurrenceParameters(1, 1, ExtraWork.CONSTANT)

    call_sites = len(re.findall(rf"\b{escaped}\s*\([^)]*\)", code, re.IGNORECASE))
    headers = len(re.findall(rf"\bfunction\s+{escaped}\s*\(", code, re.IGNORECASE))
    return RecurrenceParameters(
        branching_factor=max(call_sites - headers, 1),
        reduction_factor=int(division.group(1)),
        extra_work=ExtraWork.CONSTANT,
    )


class PascalScanner(StructuralScanner):
    name = "pascal"

    def scan(self, code: str) -> ScanReport:
        report = ScanReport()

        for _ in _FOR_RE.findall(code):
            report.add("For Loop", "Pascal for loop with linear iterations", classify("n"))

        for name in _FUNCTION_RE.findall(code):
            params = infer_recurrence(code, name)
            report.add(
                "Recursive Function",
                f"Function {name} with {params.branching_factor} recursive calls, "
                f"n/{params.reduction_factor} reduction",
                solve(params),
            )
            report.space_complexity = classify(f"log_{params.reduction_factor} n")

        return report
