"""
Numeric growth functions for complexity labels.

Selects a function by substring in the same priority the dominance table
uses, so that a plotted curve always agrees with the reported class:

- "n!"                → n!
- "n³" / "n^3"        → n³
- "n²" / "n^2"        → n²
- "n log n"           → n·log₂ n
- "log n"             → log₂ n
- "n^<decimal>"       → n^decimal (recurrence solutions)
- "n"                 → n
- anything else       → 1
"""

import math
import re
from typing import Callable, Iterable, List, Optional

from ..schemas import GrowthCurve


DEFAULT_SIZES = (1, 10, 100, 1000, 10000)

_FRACTIONAL_POWER_RE = re.compile(r"n\^(-?\d+(?:\.\d+)?)")

# Largest n whose factorial fits in a float.
MAX_FACTORIAL_ARG = 170


def _factorial(n: int) -> float:
    if n > MAX_FACTORIAL_ARG:
        raise OverflowError(f"{n}! does not fit in a float")
    return float(math.factorial(n))


def _n_log_n(n: int) -> float:
    return n * math.log2(n) if n > 0 else 0.0


def _log_n(n: int) -> float:
    return math.log2(n) if n > 0 else -math.inf


def growth_function(label: str) -> Callable[[int], float]:
    """
    Growth function selected by a complexity label.

    Args:
        label: Complexity text, with or without the "O(...)" wrapper.

    Returns:
        Callable mapping an input size to the (unitless) cost.
    """
    if "n!" in label:
        return _factorial
    if "n³" in label or "n^3" in label:
        return lambda n: float(n) ** 3
    if "n²" in label or "n^2" in label:
        return lambda n: float(n) ** 2
    if "n log n" in label:
        return _n_log_n
    if "log n" in label:
        return _log_n

    power = _FRACTIONAL_POWER_RE.search(label)
    if power is not None:
        exponent = float(power.group(1))
        return lambda n: float(n) ** exponent

    if "n" in label:
        return float
    return lambda n: 1.0


def sample_growth(label: str, sizes: Optional[Iterable[int]] = None) -> GrowthCurve:
    """
    Evaluates the growth function of ``label`` at each input size.

    Values that overflow a float (large factorials) are reported as None.

    Raises:
        ValueError: If a size is negative.
    """
    points: List[int] = list(DEFAULT_SIZES if sizes is None else sizes)
    if any(n < 0 for n in points):
        raise ValueError("Input sizes must be non-negative")

    func = growth_function(label)
    values: List[Optional[float]] = []
    for n in points:
        try:
            value = func(n)
        except OverflowError:
            value = None
        if value is not None and not math.isfinite(value):
            value = None
        values.append(value)

    return GrowthCurve(label=label, sizes=points, values=values)
