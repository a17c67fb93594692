"""Sampling of growth functions selected by complexity labels."""

import time

import pytest

from complexity_estimator.domain.growth_curve import (
    DEFAULT_SIZES,
    MAX_FACTORIAL_ARG,
    sample_growth,
)


def test_default_sizes():
    curve = sample_growth("O(n)")
    assert curve.sizes == list(DEFAULT_SIZES) == [1, 10, 100, 1000, 10000]
    assert curve.values == [1.0, 10.0, 100.0, 1000.0, 10000.0]


@pytest.mark.parametrize(
    "label, sizes, expected",
    [
        ("O(1)", [1, 1000], [1.0, 1.0]),
        ("O(n²)", [1, 2, 3], [1.0, 4.0, 9.0]),
        ("O(n^2.0000)", [3], [9.0]),
        ("O(n³)", [2, 10], [8.0, 1000.0]),
        ("O(n log n)", [1, 8], [0.0, 24.0]),
        ("O(log n)", [1, 1024], [0.0, 10.0]),
        ("O(n^0.5000)", [4, 100], [2.0, 10.0]),
        ("O(5)", [10], [1.0]),
    ],
)
def test_function_selected_by_label(label, sizes, expected):
    assert sample_growth(label, sizes).values == expected


def test_factorial_overflow_is_none():
    curve = sample_growth("O(n!)")
    assert curve.values[0] == 1.0
    assert curve.values[1] == 3628800.0
    assert curve.values[2] == pytest.approx(9.332621544394415e157)
    assert curve.values[3] is None
    assert curve.values[4] is None


def test_log_of_zero_is_none():
    assert sample_growth("O(log n)", [0]).values == [None]
    assert sample_growth("O(n log n)", [0]).values == [0.0]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        sample_growth("O(n)", [10, -1])


def test_large_factorial_sizes_are_not_computed():
    start = time.perf_counter()
    sizes = [MAX_FACTORIAL_ARG, MAX_FACTORIAL_ARG + 1, 2_000_000, 10**12]
    curve = sample_growth("O(n!)", sizes)
    elapsed = time.perf_counter() - start

    assert curve.values[0] == pytest.approx(7.257415615307994e306)
    assert curve.values[1:] == [None, None, None]
    assert elapsed < 1.0


def test_huge_sizes_overflow_to_none():
    assert sample_growth("O(n³)", [10**400]).values == [None]
    assert sample_growth("O(n)", [10**400]).values == [None]
