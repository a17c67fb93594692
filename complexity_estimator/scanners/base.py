"""
Shared contract of the structural scanners.

Every language profile has one scanner. Scanners only report findings; the
orchestrator combines them into the overall complexity.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.growth import CONSTANT
from ..schemas import BreakdownFinding, ComplexityValue


@dataclass
class ScanReport:
    """
    Output of a scanner.

    Attributes:
        breakdown: Findings in scan order.
        space_complexity: Constant unless a recursive or combinatorial
            construct was found.
        error: Set when the snippet could not be scanned at all.
    """
    breakdown: List[BreakdownFinding] = field(default_factory=list)
    space_complexity: ComplexityValue = CONSTANT
    error: Optional[str] = None

    def add(self, section: str, rationale: str, result: ComplexityValue) -> None:
        self.breakdown.append(
            BreakdownFinding(section=section, rationale=rationale, result=result)
        )

    @property
    def time_values(self) -> List[ComplexityValue]:
        return [finding.result for finding in self.breakdown]


class StructuralScanner(ABC):
    """Base class of the per-language scanners."""

    name = "base"

    @abstractmethod
    def scan(self, code: str) -> ScanReport:
        """Walks the snippet and reports loop and recursion findings."""
