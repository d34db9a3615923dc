import collections

import numpy as np
import pandas as pd
import pytest

import standing
from standing.scales import STATUS_SCALE, check_scale


# map_percentage_to_letter --------------------------------------------------------------


@pytest.mark.parametrize(
    "percentage, letter",
    [
        (100, "A"),
        (93, "A"),
        (92.99, "A-"),
        (90, "A-"),
        (89.99, "B+"),
        (87, "B+"),
        (86.99, "B"),
        (83, "B"),
        (82.99, "B-"),
        (80, "B-"),
        (79.99, "C+"),
        (77, "C+"),
        (76.99, "C"),
        (73, "C"),
        (72.99, "C-"),
        (70, "C-"),
        (69.99, "D+"),
        (67, "D+"),
        (66.99, "D"),
        (60, "D"),
        (59.99, "F"),
        (0, "F"),
    ],
)
def test_letter_grade_boundaries_are_inclusive_lower_bounds(percentage, letter):
    assert standing.map_percentage_to_letter(percentage) == letter


def test_boundaries_are_exact():
    assert standing.map_percentage_to_letter(93 - 1e-12) == "A-"
    assert standing.map_percentage_to_letter(89.9999999995) == "B+"


def test_letter_and_status_agree_just_below_a_boundary():
    # given
    percentage = 90 - 5e-10

    # then
    assert standing.map_percentage_to_letter(percentage) == "B+"
    assert standing.status_label(percentage) == "Good"
    assert standing.map_percentage_to_letter(90) == "A-"
    assert standing.status_label(90) == "Excellent"


def test_letter_grades_are_monotonic():
    # given
    order = list(standing.LETTER_SCALE)
    percentages = np.linspace(0, 100, 2001)

    # when
    ranks = [order.index(standing.map_percentage_to_letter(p)) for p in percentages]

    # then
    # a higher percentage never has a worse (larger index) letter
    assert all(a >= b for a, b in zip(ranks, ranks[1:]))


def test_nan_percentage_raises():
    with pytest.raises(ValueError):
        standing.map_percentage_to_letter(float("nan"))


def test_custom_scale_must_have_the_same_letters():
    scale = collections.OrderedDict([("A", 90), ("F", 0)])

    with pytest.raises(ValueError):
        standing.map_percentage_to_letter(95, scale=scale)


def test_custom_scale_must_decrease():
    scale = standing.LETTER_SCALE.copy()
    scale["B"] = 95

    with pytest.raises(ValueError):
        check_scale(scale)


def test_custom_scale_is_used():
    # given
    scale = collections.OrderedDict(
        (letter, threshold - 0.5) for letter, threshold in standing.LETTER_SCALE.items()
    )
    scale["F"] = 0

    # when / then
    assert standing.map_percentage_to_letter(92.5, scale=scale) == "A"
    assert standing.map_percentage_to_letter(92.5) == "A-"


def test_map_percentages_to_letter_grades_on_example():
    # given
    percentages = pd.Series(data=[84, 95, 55], index=["math", "art", "gym"])

    # when
    letters = standing.map_percentages_to_letter_grades(percentages)

    # then
    assert list(letters) == ["B", "A", "F"]
    assert list(letters.index) == ["math", "art", "gym"]


# grade_points --------------------------------------------------------------------------


def test_grade_points_follow_the_letter():
    assert standing.grade_points(95) == 4.0
    assert standing.grade_points(91) == 3.7
    assert standing.grade_points(85.56) == 3.0
    assert standing.grade_points(68) == 1.3
    assert standing.grade_points(61) == 1.0
    assert standing.grade_points(10) == 0.0


def test_every_letter_has_grade_points():
    assert list(standing.GRADE_POINTS) == list(standing.LETTER_SCALE)


# status_label --------------------------------------------------------------------------


@pytest.mark.parametrize(
    "percentage, label",
    [
        (100, "Excellent"),
        (90, "Excellent"),
        (89.99, "Good"),
        (80, "Good"),
        (79.99, "Fair"),
        (70, "Fair"),
        (69.99, "At Risk"),
        (0, "At Risk"),
    ],
)
def test_status_labels(percentage, label):
    assert standing.status_label(percentage) == label


def test_status_labels_are_independent_of_letter_grades():
    # a 92 is an A- but is excellent; a 69 is a D+ and at risk
    assert standing.map_percentage_to_letter(92) == "A-"
    assert standing.status_label(92) == "Excellent"
    assert standing.status_label(69) == "At Risk"
    assert list(STATUS_SCALE) == ["Excellent", "Good", "Fair", "At Risk"]
