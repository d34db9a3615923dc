"""A package for computing a student's academic standing from their grades."""

import logging

from .exceptions import StandingError, InvalidEntryError

from .core import (
    Category,
    Entry,
    CategoryWeights,
    DEFAULT_WEIGHTS,
    normalize_weights,
    CategoryTotals,
    aggregate_categories,
    StandingOptions,
    CategoryBreakdown,
    CourseGradeResult,
    compute_course_grade,
    GPASummary,
    compute_gpa,
    average_grade_points,
    RejectedRecord,
    Standing,
    compute_standing,
)

from .scales import (
    LETTER_SCALE,
    GRADE_POINTS,
    NO_GRADE_YET,
    map_percentage_to_letter,
    map_percentages_to_letter_grades,
    grade_points,
    status_label,
)

from .trends import Trend, analyze_trend, score_history
from .attendance import attendance_rate, attendance_rate_from_statuses

from . import summarize
from . import io

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "StandingError",
    "InvalidEntryError",
    "Category",
    "Entry",
    "CategoryWeights",
    "DEFAULT_WEIGHTS",
    "normalize_weights",
    "CategoryTotals",
    "aggregate_categories",
    "StandingOptions",
    "CategoryBreakdown",
    "CourseGradeResult",
    "compute_course_grade",
    "GPASummary",
    "compute_gpa",
    "average_grade_points",
    "RejectedRecord",
    "Standing",
    "compute_standing",
    "LETTER_SCALE",
    "GRADE_POINTS",
    "NO_GRADE_YET",
    "map_percentage_to_letter",
    "map_percentages_to_letter_grades",
    "grade_points",
    "status_label",
    "Trend",
    "analyze_trend",
    "score_history",
    "attendance_rate",
    "attendance_rate_from_statuses",
    "summarize",
    "io",
]
