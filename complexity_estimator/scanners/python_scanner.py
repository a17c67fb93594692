"""
Regex/line scanner for Python-like snippets.

Detects itertools permutations, ``for x in range(...)`` loops, nesting of
``for`` statements and self-recursive functions that divide their input by a
literal.
"""

import re

from ..domain.growth import classify
from ..domain.recurrence import ExtraWork, RecurrenceParameters, solve
from .base import ScanReport, StructuralScanner


_FOR_RANGE_RE = re.compile(r"for\s+\w+\s+in\s+range\s*\([^)]+\)")
_RANGE_ARGS_RE = re.compile(r"range\s*\(([^)]*)")
_DEF_RE = re.compile(r"def\s+(\w+)\s*\([^)]*\)\s*(?:->\s*[^:]+)?:")


def _uses_permutations(code: str) -> bool:
    imports_itertools = "import itertools" in code or "from itertools import" in code
    return imports_itertools and "permutations" in code


def _has_multiplicative_step(loop: str) -> bool:
    """True when ``range`` has a third argument containing ``*`` or ``/``."""
    match = _RANGE_ARGS_RE.search(loop)
    if match is None:
        return False
    args = [arg.strip() for arg in match.group(1).split(",")]
    return len(args) >= 3 and ("*" in args[2] or "/" in args[2])


def infer_recurrence(code: str, name: str) -> RecurrenceParameters:
    """
    Recurrence parameters of function ``name``.

    A call such as ``name(n/3)`` or ``name(n // 3)`` gives the reduction
    factor, and every ``name(...)`` outside the ``def`` header counts as one
    branch. Without such a call the function is treated as T(n) = T(n) + O(1).
    """
    escaped = re.escape(name)
    division = re.search(rf"\b{escaped}\s*\([^)]*/\s*(\d+)\)", code)
    if division is None:
        return RecurrenceParameters(1, 1, ExtraWork.CONSTANT)

    call_sites = len(re.findall(rf"\b{escaped}\s*\([^)]*\)", code))
    headers = len(re.findall(rf"\bdef\s+{escaped}\s*\(", code))
    return RecurrenceParameters(
        branching_factor=max(call_sites - headers, 1),
        reduction_factor=int(division.group(1)),
        extra_work=ExtraWork.CONSTANT,
    )


class PythonScanner(StructuralScanner):
    name = "python"

    def scan(self, code: str) -> ScanReport:
        report = ScanReport()

        if _uses_permutations(code):
            factorial = classify("n!")
            report.add(
                "Permutations",
                "Generation of all permutations using itertools.permutations",
                factorial,
            )
            report.space_complexity = factorial

        for loop in _FOR_RANGE_RE.findall(code):
            if _has_multiplicative_step(loop):
                report.add(
                    "For Loop",
                    "Logarithmic loop with multiplicative step",
                    classify("log n"),
                )
            else:
                report.add("For Loop", "Python for loop with range(n)", classify("n"))

        self._scan_nesting(code, report)

        for name in _DEF_RE.findall(code):
            params = infer_recurrence(code, name)
            report.add(
                "Recursive Function",
                f"Function {name} with {params.branching_factor} recursive calls, "
                f"n/{params.reduction_factor} reduction",
                solve(params),
            )
            report.space_complexity = classify(f"log_{params.reduction_factor} n")

        return report

    @staticmethod
    def _scan_nesting(code: str, report: ScanReport) -> None:
        # One counter for the whole snippet; only "}" lines close a level.
        depth = 0
        for line in code.split("\n"):
            stripped = line.strip()
            if stripped.startswith("for"):
                depth += 1
                if depth >= 2:
                    report.add(
                        "Nested For Loops",
                        "Nested loops creating quadratic complexity",
                        classify("n²"),
                    )
            elif stripped.startswith("}"):
                depth -= 1
