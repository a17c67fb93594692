"""
Growth-rate classification and dominance.

Maps raw loop/iteration descriptions to canonical growth labels and picks the
dominant value among several findings. Matching is done by substring over the
Big-O text, in the fixed order of ``GrowthClass``:

- "n!"       → factorial
- "n³"       → cubic
- "n²"       → quadratic
- "n log n"  → linearithmic
- "n"        → linear
- "log n"    → logarithmic
- "1"        → constant

Note that the order is observable: "O(log n)" contains "n" and therefore
ranks as linear, exactly like "O(n^0.6309)".
"""

from enum import IntEnum
from typing import Iterable, Union

from ..schemas import ComplexityValue


class GrowthClass(IntEnum):
    """Rank table, most dominant first. UNRANKED sorts after every match."""

    FACTORIAL = 0
    CUBIC = 1
    QUADRATIC = 2
    LINEARITHMIC = 3
    LINEAR = 4
    LOGARITHMIC = 5
    CONSTANT = 6
    UNRANKED = 7


GROWTH_CLASS_MARKERS = (
    (GrowthClass.FACTORIAL, "n!"),
    (GrowthClass.CUBIC, "n³"),
    (GrowthClass.QUADRATIC, "n²"),
    (GrowthClass.LINEARITHMIC, "n log n"),
    (GrowthClass.LINEAR, "n"),
    (GrowthClass.LOGARITHMIC, "log n"),
    (GrowthClass.CONSTANT, "1"),
)


def from_label(label: str) -> ComplexityValue:
    """Builds the three notations from one label."""
    return ComplexityValue(
        upper_bound=f"O({label})",
        tight_bound=f"Θ({label})",
        strict_upper_bound=f"o({label})",
    )


def classify(iterations: Union[int, str]) -> ComplexityValue:
    """
    Classifies an iteration count or symbolic growth expression.

    Integers are echoed as constant names: ``classify(5)`` is "O(5)", only
    ``classify(1)`` is "O(1)". Strings are tested in priority order (log,
    quadratic, cubic, exact "n") and otherwise passed through verbatim.

    Examples:
        >>> classify("n^2").upper_bound
        'O(n²)'
        >>> classify("n log n").tight_bound
        'Θ(n log n)'
    """
    if isinstance(iterations, int) and not isinstance(iterations, bool):
        return from_label(str(iterations))

    s = str(iterations)
    if "log" in s:
        return from_label(s)
    if "n^2" in s or "n²" in s:
        return from_label("n²")
    if "n^3" in s or "n³" in s:
        return from_label("n³")
    if s == "n":
        return from_label("n")
    return from_label(s)


CONSTANT = classify(1)


def rank(value: ComplexityValue) -> GrowthClass:
    """First growth class whose marker occurs in the Big-O text."""
    for growth_class, marker in GROWTH_CLASS_MARKERS:
        if marker in value.upper_bound:
            return growth_class
    return GrowthClass.UNRANKED


def combine(values: Iterable[ComplexityValue]) -> ComplexityValue:
    """
    Picks the asymptotically dominant value.

    A value replaces the current dominant only when its rank is strictly
    smaller, so the first occurrence wins ties. An empty input is constant.
    """
    dominant = None
    dominant_rank = GrowthClass.UNRANKED
    for value in values:
        current_rank = rank(value)
        if dominant is None or current_rank < dominant_rank:
            dominant = value
            dominant_rank = current_rank
    return dominant if dominant is not None else CONSTANT
