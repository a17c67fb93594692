"""
Regex/line scanner for C-like snippets.
"""

import re
from typing import List

from ..domain.growth import classify
from .base import ScanReport, StructuralScanner


_FOR_HEADER_RE = re.compile(r"for\s*\([^)]+\)")
_WHILE_HEADER_RE = re.compile(r"while\s*\([^)]+\)")


def is_multiplicative_update(header: str) -> bool:
    """``*`` or ``/`` in the update clause, e.g. ``i *= 2`` or ``i = i * 3``."""
    inner = header[header.index("(") + 1:-1]
    clauses = inner.split(";")
    update = clauses[2] if len(clauses) >= 3 else inner
    return "*" in update or "/" in update


def nesting_reached(lines: List[str], threshold: int = 2) -> bool:
    """
    Single pass with one counter over the whole snippet.

    Any line mentioning ``for`` or ``while`` opens a level and any other line
    containing ``}`` closes one; the counter is not scoped to a loop.
    """
    depth = 0
    reached = False
    for line in lines:
        if "for" in line or "while" in line:
            depth += 1
            if depth >= threshold:
                reached = True
        elif "}" in line:
            depth -= 1
    return reached


class CScanner(StructuralScanner):
    name = "c"

    def scan(self, code: str) -> ScanReport:
        report = ScanReport()
        nested = nesting_reached(code.split("\n"))

        for header in _FOR_HEADER_RE.findall(code):
            if nested:
                report.add(
                    "For Loop",
                    "Nested loop structure (outer logarithmic, inner linear)",
                    classify("n log n"),
                )
            elif is_multiplicative_update(header):
                report.add(
                    "For Loop",
                    "Logarithmic for loop (multiplicative update)",
                    classify("log n"),
                )
            else:
                report.add("For Loop", "Linear for loop", classify("n"))

        for _ in _WHILE_HEADER_RE.findall(code):
            report.add("While Loop", "C while loop with linear iterations", classify("n"))

        return report
