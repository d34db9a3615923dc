"""Mapping percentages to letter grades, grade points, and status labels."""

import collections
import math

import pandas as pd


# helper functions =====================================================================


def _check_that_scale_monotonically_decreases(scale):
    prev = float("inf")
    for threshold in scale.values():
        if threshold >= prev:
            raise ValueError("Scale is not monotonically decreasing.")
        prev = threshold


def _check_percentage(percentage):
    if percentage is None or math.isnan(percentage):
        raise ValueError(f"Cannot map {percentage!r} to a letter grade.")


# common scales ========================================================================

LETTER_SCALE = collections.OrderedDict(
    [
        ("A", 93),
        ("A-", 90),
        ("B+", 87),
        ("B", 83),
        ("B-", 80),
        ("C+", 77),
        ("C", 73),
        ("C-", 70),
        ("D+", 67),
        ("D", 60),
        ("F", 0),
    ]
)
"""The letter grade scale. Each threshold is an inclusive lower bound, in percent."""

#: points on the 4.0 scale awarded for each letter grade
GRADE_POINTS = collections.OrderedDict(
    [
        ("A", 4.0),
        ("A-", 3.7),
        ("B+", 3.3),
        ("B", 3.0),
        ("B-", 2.7),
        ("C+", 2.3),
        ("C", 2.0),
        ("C-", 1.7),
        ("D+", 1.3),
        ("D", 1.0),
        ("F", 0.0),
    ]
)

#: display-only buckets; deliberately independent of the letter scale
STATUS_SCALE = collections.OrderedDict(
    [
        ("Excellent", 90),
        ("Good", 80),
        ("Fair", 70),
        ("At Risk", 0),
    ]
)

#: shown in place of a letter when there is nothing to grade yet
NO_GRADE_YET = "No grade yet"


# public functions =====================================================================


def check_scale(scale):
    """Validate a custom letter grade scale.

    Parameters
    ----------
    scale : OrderedDict
        An ordered dictionary mapping letter grades to their thresholds.

    Raises
    ------
    ValueError
        If the scale has letters other than those of :attr:`LETTER_SCALE`, or
        if its thresholds do not decrease monotonically.

    """
    if list(scale) != list(LETTER_SCALE):
        raise ValueError(
            f"Scale has invalid letter grades. Must be in {list(LETTER_SCALE)}"
        )
    _check_that_scale_monotonically_decreases(scale)


def map_percentage_to_letter(percentage: float, scale=None) -> str:
    """Map a single percentage to a letter grade.

    Thresholds are inclusive lower bounds: a 93 is an A, while a 92.99 is an
    A-. Percentages below every threshold map to "F".

    Parameters
    ----------
    percentage : float
        A percentage, typically between 0 and 100.
    scale : OrderedDict
        An ordered dictionary mapping letter grades to their thresholds.
        Default: :attr:`LETTER_SCALE`.

    Returns
    -------
    str
        The letter grade.

    Raises
    ------
    ValueError
        If the percentage is missing or NaN, or if the scale is invalid.

    """
    if scale is None:
        scale = LETTER_SCALE
    else:
        check_scale(scale)

    _check_percentage(percentage)

    for letter, threshold in scale.items():
        if percentage >= threshold:
            return letter
    else:
        return "F"


def map_percentages_to_letter_grades(percentages, scale=None):
    """Map each percentage in a series to a letter grade.

    Parameters
    ----------
    percentages : pandas.Series
        A series containing percentages as floats between 0 and 100.
    scale : OrderedDict
        An ordered dictionary mapping letter grades to their thresholds.
        Default: :attr:`LETTER_SCALE`.

    Returns
    -------
    pandas.Series
        A series containing the resulting letter grades.

    """
    if scale is not None:
        check_scale(scale)

    return pd.Series(percentages).apply(
        lambda p: map_percentage_to_letter(p, scale=scale)
    )


def grade_points(percentage: float, scale=None) -> float:
    """Points on the 4.0 scale earned by a percentage, by way of its letter grade."""
    return GRADE_POINTS[map_percentage_to_letter(percentage, scale=scale)]


def status_label(percentage: float) -> str:
    """A display label for a percentage: "Excellent", "Good", "Fair", or "At Risk".

    This is for display only and does not use the letter grade thresholds.

    """
    _check_percentage(percentage)
    for label, threshold in STATUS_SCALE.items():
        if percentage >= threshold:
            return label
    else:
        return "At Risk"
