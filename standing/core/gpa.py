"""Combine course grades into an overall GPA."""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
import typing

import numpy as np

from ..scales import NO_GRADE_YET, map_percentage_to_letter
from .course import PERCENTAGE_DECIMALS, CourseGradeResult

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GPASummary:
    """A student's overall standing across all of their courses.

    Attributes
    ----------
    weighted_average_percent : Optional[float]
        The mean of the course percentages, credit-weighted if credit hours
        were given. `None` if no course has a grade.
    gpa : float
        The average on a 4.0 scale. Zero if no course has a grade.
    overall_letter_grade : Optional[str]
        The letter grade for `weighted_average_percent`, or `None` if no
        course has a grade.
    course_count : int
        The number of courses that contributed to the average.

    """

    weighted_average_percent: typing.Optional[float]
    gpa: float
    overall_letter_grade: typing.Optional[str]
    course_count: int

    @property
    def has_data(self) -> bool:
        return self.course_count > 0

    @property
    def display_letter(self) -> str:
        """The overall letter grade, or a placeholder if there is no grade yet."""
        return self.overall_letter_grade if self.has_data else NO_GRADE_YET


EMPTY_SUMMARY = GPASummary(
    weighted_average_percent=None,
    gpa=0.0,
    overall_letter_grade=None,
    course_count=0,
)
"""The summary of a gradebook with no graded courses, e.g., at the start of a term."""


def _credit_weights(results, credit_hours):
    weights = []
    for result in results:
        if result.course_id not in credit_hours:
            raise ValueError(f"No credit hours given for course {result.course_id!r}.")

        hours = credit_hours[result.course_id]
        if not (isinstance(hours, numbers.Real) and math.isfinite(hours) and hours > 0):
            raise ValueError(
                f"Credit hours for course {result.course_id!r} must be positive, "
                f"got {hours!r}."
            )
        weights.append(float(hours))
    return weights


def compute_gpa(
    results: typing.Iterable[CourseGradeResult],
    credit_hours: typing.Optional[typing.Mapping] = None,
    scale=None,
) -> GPASummary:
    """Compute the overall average, GPA, and letter grade across courses.

    Courses without data are left out of the average entirely rather than
    being counted as zero. The GPA is the average percentage scaled to 4.0,
    clipped to lie between 0 and 4.

    Parameters
    ----------
    results : Iterable[CourseGradeResult]
        The results for each of the student's courses.
    credit_hours : Optional[Mapping]
        A mapping from course IDs to the number of credit hours each course is
        worth. If given, the average is weighted by credit hours; otherwise
        each course counts equally. Default: None.
    scale : OrderedDict
        The letter grade scale used for the overall letter grade.
        Default: :attr:`LETTER_SCALE`.

    Returns
    -------
    GPASummary
        If no course has data, the GPA is zero and there is no letter grade.
        This is not an error: a new term starts with an empty gradebook.

    Raises
    ------
    ValueError
        If credit hours are given but are missing or non-positive for a course
        with data.

    Example
    -------
    Two courses with grades of 85.56% and 95% average to 90.28%, a GPA of
    about 3.611 and an A-.

    """
    graded = [r for r in results if r.has_data]
    if not graded:
        logger.debug("No courses with data; GPA is zero.")
        return EMPTY_SUMMARY

    percentages = np.array([r.overall_percentage for r in graded], dtype=float)

    if credit_hours is None:
        average = float(np.mean(percentages))
    else:
        weights = np.array(_credit_weights(graded, credit_hours))
        average = float(np.average(percentages, weights=weights))

    average = round(average, PERCENTAGE_DECIMALS)

    gpa = float(np.clip(average / 100 * 4.0, 0.0, 4.0))

    return GPASummary(
        weighted_average_percent=average,
        gpa=gpa,
        overall_letter_grade=map_percentage_to_letter(average, scale=scale),
        course_count=len(graded),
    )


def average_grade_points(results: typing.Iterable[CourseGradeResult]) -> float:
    """The transcript-style GPA: the mean of each course's letter grade points.

    Unlike :attr:`GPASummary.gpa`, which scales the average percentage, this
    averages the points of each course's letter grade, as on a transcript.
    Courses without data are skipped. Returns zero if no course has data.

    """
    points = [r.grade_points for r in results if r.has_data]
    if not points:
        return 0.0
    return float(np.mean(points))
