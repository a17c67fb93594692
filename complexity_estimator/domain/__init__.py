from .growth import (
    GrowthClass, GROWTH_CLASS_MARKERS, CONSTANT,
    classify, combine, from_label, rank,
)

from .recurrence import (
    ExtraWork,
    RecurrenceParameters,
    critical_exponent, solve, solve_recurrence,
)

from .growth_curve import DEFAULT_SIZES, growth_function, sample_growth

__all__ = [
    "GrowthClass", "GROWTH_CLASS_MARKERS", "CONSTANT",
    "classify", "combine", "from_label", "rank",
    "ExtraWork", "RecurrenceParameters",
    "critical_exponent", "solve", "solve_recurrence",
    "DEFAULT_SIZES", "growth_function", "sample_growth",
]
