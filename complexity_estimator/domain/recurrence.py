"""
Recurrence relation model and divide-and-conquer solver.

Solves T(n) = a·T(n/b) + f(n) with a three-regime approximation of the master
theorem, comparing the critical exponent c = log_b(a) with the extra work:

- f = O(1): c > 0 → Θ(n^c), otherwise Θ(log n)
- f = O(n): c < 1 → Θ(n),   otherwise Θ(n^c)
- any other f: Θ(n^c)

The balanced case Θ(n^c log n) is not detected.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..schemas import ComplexityValue
from .growth import classify


class ExtraWork(str, Enum):
    """Non-recursive work per call."""

    CONSTANT = "O(1)"
    LINEAR = "O(n)"


@dataclass
class RecurrenceParameters:
    """
    Parameters of T(n) = a·T(n/b) + f(n) inferred from one recursive function.

    Attributes:
        branching_factor: Number of recursive call sites (a).
        reduction_factor: Divisor applied to the input of each call (b).
        extra_work: Work done outside the recursive calls (f).
    """
    branching_factor: int
    reduction_factor: Union[int, float]
    extra_work: Union[ExtraWork, str] = ExtraWork.CONSTANT


def _ln(x: float) -> float:
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return math.nan


def critical_exponent(a: float, b: float) -> float:
    """
    log(a) / log(b), with IEEE semantics for degenerate inputs.

    ``b == 1`` gives ±inf (or nan when ``a == 1``) instead of raising.
    """
    num, den = _ln(a), _ln(b)
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)
    return num / den


def solve_recurrence(a: float, b: float, f: Union[ExtraWork, str]) -> ComplexityValue:
    """
    Closed-form growth of T(n) = a·T(n/b) + f(n).

    Args:
        a: Branching factor.
        b: Reduction factor.
        f: Extra work, "O(1)" or "O(n)"; anything else uses the generic branch.

    Returns:
        ComplexityValue of the solution, exponents with four decimals.

    Examples:
        >>> solve_recurrence(2, 3, "O(1)").upper_bound
        'O(n^0.6309)'
        >>> solve_recurrence(1, 2, "O(1)").upper_bound
        'O(log n)'
    """
    c = critical_exponent(a, b)
    work = f.value if isinstance(f, ExtraWork) else f

    if work == ExtraWork.CONSTANT.value:
        if c > 0:
            return classify(f"n^{c:.4f}")
        return classify("log n")

    if work == ExtraWork.LINEAR.value:
        if c < 1:
            return classify("n")
        return classify(f"n^{c:.4f}")

    return classify(f"n^{c:.4f}")


def solve(params: RecurrenceParameters) -> ComplexityValue:
    return solve_recurrence(params.branching_factor, params.reduction_factor, params.extra_work)
