"""
schemas.py - Data models for the snippet complexity estimator
=============================================================

Input/output schemas for the engine and the HTTP endpoints: the three-notation
complexity value, breakdown findings, the analysis result, and the supporting
growth-curve and self-check reports.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# 1. COMPLEXITY MODELS
# ---------------------------------------------------------------------------

class ComplexityValue(BaseModel):
    """
    One asymptotic classification in three notations.

    The three fields are always built together from one growth label by
    ``domain.growth.classify``; they never diverge.

    Attributes:
        upper_bound: Big-O form, e.g. "O(n²)".
        tight_bound: Theta form, e.g. "Θ(n²)".
        strict_upper_bound: little-o form, e.g. "o(n²)".
    """
    model_config = ConfigDict(frozen=True)

    upper_bound: str
    tight_bound: str
    strict_upper_bound: str

    @property
    def label(self) -> str:
        """Inner growth label, e.g. "n²" for "O(n²)"."""
        return self.upper_bound[2:-1]


class BreakdownFinding(BaseModel):
    """
    One observation about one syntactic construct.

    Attributes:
        section: Kind of construct ("For Loop", "Recursive Function", ...).
        rationale: Human-readable explanation of the classification.
        result: Complexity attributed to the construct.
    """
    model_config = ConfigDict(frozen=True)

    section: str
    rationale: str
    result: ComplexityValue


class AnalysisResult(BaseModel):
    """
    Result of analysing one snippet.

    When ``error`` is set every complexity field is the constant value and
    ``breakdown`` is empty. ``average_case`` always mirrors
    ``time_complexity``.
    """
    input_size: str = "n"
    time_complexity: ComplexityValue
    space_complexity: ComplexityValue
    breakdown: List[BreakdownFinding] = Field(default_factory=list)
    average_case: ComplexityValue
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# 2. REQUEST MODELS
# ---------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    """
    Request to analyse a snippet.

    Attributes:
        code: Source code of the snippet, in any of the supported languages.
    """
    code: str


class GrowthCurveRequest(BaseModel):
    """
    Request to sample the growth function selected by a complexity label.

    Attributes:
        label: Complexity text, e.g. "O(n log n)" or just "n²".
        sizes: Input sizes to evaluate; the default sample is used when omitted.
    """
    label: str
    sizes: Optional[List[int]] = None


# ---------------------------------------------------------------------------
# 3. SUPPORTING RESPONSE MODELS
# ---------------------------------------------------------------------------

class GrowthCurve(BaseModel):
    """
    Sampled growth function.

    ``values[i]`` is the function evaluated at ``sizes[i]``; ``None`` marks a
    value too large to be represented as a float.
    """
    label: str
    sizes: List[int]
    values: List[Optional[float]]


class SelfCheckCase(BaseModel):
    name: str
    expected: str
    actual: str
    passed: bool


class SelfCheckReport(BaseModel):
    """Outcome of running the built-in reference snippets through the engine."""
    passed: int
    total: int
    cases: List[SelfCheckCase]
