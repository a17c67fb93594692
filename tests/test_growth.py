"""
Growth-rate classification and dominance
========================================

Checks the label rules of ``classify`` and the substring rank table used by
``combine``.
"""

import pytest

from complexity_estimator.domain.growth import (
    CONSTANT,
    GrowthClass,
    classify,
    combine,
    rank,
)


RANKED_LABELS = ["n!", "n³", "n²", "n log n", "n", "log n", "1"]


def test_integer_one_is_constant():
    value = classify(1)
    assert value.upper_bound == "O(1)"
    assert value.tight_bound == "Θ(1)"
    assert value.strict_upper_bound == "o(1)"


@pytest.mark.parametrize("k", [2, 5, 42, 1000])
def test_other_integers_are_echoed(k):
    """A concrete iteration count is reported literally, not as O(1)."""
    assert classify(k).upper_bound == f"O({k})"


def test_string_rules_in_priority_order():
    assert classify("n^2").upper_bound == "O(n²)"
    assert classify("n²").upper_bound == "O(n²)"
    assert classify("n^3").upper_bound == "O(n³)"
    assert classify("n").upper_bound == "O(n)"
    # "log" wins over the polynomial rules and keeps the text as is
    assert classify("n^2 log n").upper_bound == "O(n^2 log n)"
    assert classify("log_3 n").upper_bound == "O(log_3 n)"


def test_unknown_strings_pass_through():
    assert classify("n!").upper_bound == "O(n!)"
    assert classify("2^n").tight_bound == "Θ(2^n)"
    assert classify("m").strict_upper_bound == "o(m)"


def test_three_notations_share_the_label():
    value = classify("n log n")
    assert value.label == "n log n"
    assert value.tight_bound == "Θ(n log n)"
    assert value.strict_upper_bound == "o(n log n)"


@pytest.mark.parametrize("label", RANKED_LABELS)
def test_classify_is_idempotent_on_ranked_labels(label):
    once = classify(label)
    assert classify(once.label) == once


def test_rank_follows_marker_order():
    assert rank(classify("n!")) is GrowthClass.FACTORIAL
    assert rank(classify("n³")) is GrowthClass.CUBIC
    assert rank(classify("n²")) is GrowthClass.QUADRATIC
    assert rank(classify("n log n")) is GrowthClass.LINEARITHMIC
    assert rank(classify("n")) is GrowthClass.LINEAR
    assert rank(CONSTANT) is GrowthClass.CONSTANT
    assert rank(classify(5)) is GrowthClass.UNRANKED


def test_rank_is_a_substring_heuristic():
    """"O(log n)" and "O(n^0.6309)" contain "n" before "log n" is tried."""
    assert rank(classify("log n")) is GrowthClass.LINEAR
    assert rank(classify("n^0.6309")) is GrowthClass.LINEAR


def test_combine_empty_is_constant():
    assert combine([]) == CONSTANT


def test_combine_picks_most_dominant():
    values = [classify("n"), classify("n²"), classify("n log n"), CONSTANT]
    assert combine(values).upper_bound == "O(n²)"

    values = [classify("n²"), classify("n!"), classify("n³")]
    assert combine(values).upper_bound == "O(n!)"


def test_combine_first_occurrence_wins_ties():
    assert combine([classify("log n"), classify("n")]).upper_bound == "O(log n)"
    assert combine([classify("n"), classify("log n")]).upper_bound == "O(n)"


def test_combine_ranks_unmatched_labels_last():
    assert combine([classify(5), CONSTANT]).upper_bound == "O(1)"
    assert combine([classify(5), classify(7)]).upper_bound == "O(5)"
