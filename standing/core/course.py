"""Compose a single weighted course grade from a course's entries."""

from __future__ import annotations

import dataclasses
import logging
import typing

from ..scales import GRADE_POINTS, NO_GRADE_YET, map_percentage_to_letter, status_label
from ..trends import Trend, analyze_trend
from .aggregate import aggregate_categories
from .entries import Category, Entry
from .options import StandingOptions
from .weights import CategoryWeights, normalize_weights

logger = logging.getLogger(__name__)

#: composed percentages are rounded to this many decimal places before grading
PERCENTAGE_DECIMALS = 9


# result types -------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class CategoryBreakdown:
    """How one active category contributes to a course grade.

    Attributes
    ----------
    category : Category
    total_earned : float
        Points earned in the category.
    total_possible : float
        Points possible in the category.
    percentage : float
        `total_earned` as a percentage of `total_possible`.
    configured_weight : float
        The category's weight as configured for the course.
    effective_weight : float
        The category's weight after renormalizing over the active categories.
        The effective weights of a course's breakdowns sum to one.

    """

    category: Category
    total_earned: float
    total_possible: float
    percentage: float
    configured_weight: float
    effective_weight: float

    @property
    def weighted_contribution(self) -> float:
        """The number of percentage points this category adds to the course grade."""
        return self.percentage * self.effective_weight


@dataclasses.dataclass(frozen=True)
class CourseGradeResult:
    """The computed grade in a single course.

    Attributes
    ----------
    course_id
        Identifies the course; passed through unchanged.
    overall_percentage : Optional[float]
        The weighted course percentage, between 0 and 100. `None` if the
        course has no gradable data.
    letter_grade : Optional[str]
        The letter grade for `overall_percentage`, or `None` if the course has
        no gradable data. It is never "F" merely for lack of data.
    trend : Trend
        The direction in which the course's grades are moving.
    breakdowns : tuple[CategoryBreakdown, ...]
        One breakdown per active category with a nonzero weight, in
        :class:`Category` order.
    has_data : bool
        Whether a grade could be computed.

    """

    course_id: typing.Any
    overall_percentage: typing.Optional[float]
    letter_grade: typing.Optional[str]
    trend: Trend
    breakdowns: typing.Tuple[CategoryBreakdown, ...]
    has_data: bool

    @property
    def display_letter(self) -> str:
        """The letter grade, or a placeholder if there is no grade yet."""
        return self.letter_grade if self.has_data else NO_GRADE_YET

    @property
    def grade_points(self) -> typing.Optional[float]:
        """Points on the 4.0 scale for the course's letter grade."""
        if not self.has_data:
            return None
        return GRADE_POINTS[self.letter_grade]

    @property
    def status(self) -> typing.Optional[str]:
        """The display status of the course grade; see :func:`status_label`."""
        if not self.has_data:
            return None
        return status_label(self.overall_percentage)

    def breakdown_for(self, category) -> typing.Optional[CategoryBreakdown]:
        """The breakdown for a category, or `None` if it is inactive."""
        category = Category.coerce(category)
        for breakdown in self.breakdowns:
            if breakdown.category is category:
                return breakdown
        return None


# public functions ---------------------------------------------------------------------


def compute_course_grade(
    course_id,
    entries: typing.Iterable[Entry],
    weights: typing.Optional[typing.Mapping] = None,
    *,
    options: typing.Optional[StandingOptions] = None,
) -> CourseGradeResult:
    """Compute a course's weighted grade, letter grade, and trend.

    Each active category's percentage is weighted by its effective weight
    (see :func:`normalize_weights`) and the results are summed. This is a
    weighted mean of category percentages rather than a pooling of points, so
    a 10 point quiz category and a 500 point project category contribute
    according to their weights alone.

    Parameters
    ----------
    course_id
        Identifies the course. Passed through to the result.
    entries : Iterable[Entry]
        All entries for the course.
    weights : Optional[Mapping]
        The course's category weights, either a :class:`CategoryWeights` or a
        mapping from categories to weights. If `None`, the weights in
        `options` are used.
    options : Optional[StandingOptions]
        Configures the trend and letter scale, and supplies default weights.
        If `None`, the default options are used.

    Returns
    -------
    CourseGradeResult
        If no category is active, or the active categories all have zero
        weight, the result has `has_data` set to `False` and no percentage or
        letter grade.

    Raises
    ------
    TypeError
        If `entries` contains something other than an :class:`Entry`.
    ValueError
        If `weights` is invalid.

    """
    options = StandingOptions.resolve(options)
    entries = list(entries)

    if weights is None:
        logger.debug("No weights configured for course %r; using defaults.", course_id)
        weights = options.weights
    else:
        weights = CategoryWeights.resolve(weights)

    totals = aggregate_categories(entries)
    effective = normalize_weights(weights, totals.keys())
    trend = analyze_trend(
        entries, window=options.trend_window, deadband=options.trend_deadband
    )

    if not effective:
        logger.debug("Course %r has no gradable data.", course_id)
        return CourseGradeResult(
            course_id=course_id,
            overall_percentage=None,
            letter_grade=None,
            trend=trend,
            breakdowns=(),
            has_data=False,
        )

    breakdowns = tuple(
        CategoryBreakdown(
            category=category,
            total_earned=totals[category].earned,
            total_possible=totals[category].possible,
            percentage=totals[category].percentage,
            configured_weight=weights[category],
            effective_weight=effective_weight,
        )
        for category, effective_weight in effective.items()
    )

    overall = sum(b.weighted_contribution for b in breakdowns)
    overall = round(min(max(overall, 0.0), 100.0), PERCENTAGE_DECIMALS)

    return CourseGradeResult(
        course_id=course_id,
        overall_percentage=overall,
        letter_grade=map_percentage_to_letter(overall, scale=options.scale),
        trend=trend,
        breakdowns=breakdowns,
        has_data=True,
    )
